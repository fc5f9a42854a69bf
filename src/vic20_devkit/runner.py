"""
Runner - Launch a Built Program in the Emulator
===============================================

Resolves a program name to its build artifact and hands it to the
emulator in the foreground:

    hello  →  build/hello.prg  →  xvic -console -autostart build/hello.prg

The emulator inherits the terminal and the runner returns its exit code
unchanged. If the artifact does not exist the emulator is never started.
"""

import logging
from pathlib import Path

from vic20_devkit.config import ProjectConfig
from vic20_devkit.errors import ArtifactNotFoundError
from vic20_devkit.toolchain import emulator_command, run_tool

logger = logging.getLogger(__name__)


def find_artifact(config: ProjectConfig, name: str) -> Path:
    """
    Resolve a program name to an existing build artifact.

    The name may be given with or without the artifact extension
    ("hello" and "hello.prg" are equivalent).

    Raises:
        ArtifactNotFoundError: If the program has not been built
    """
    if name.lower().endswith(config.artifact_extension.lower()):
        name = name[: -len(config.artifact_extension)]

    program = config.build_path / f"{name}{config.artifact_extension}"
    if not program.is_file():
        raise ArtifactNotFoundError(program)

    return program


def run_program(config: ProjectConfig, program: Path) -> int:
    """
    Run an already resolved program file in the emulator.

    Returns:
        The emulator's exit code

    Raises:
        ToolNotFoundError: If the emulator is not installed
    """
    logger.debug("Starting %s with %s", program, config.emulator)
    return run_tool(emulator_command(config, program))


def run_artifact(config: ProjectConfig, name: str) -> int:
    """
    Run a built program in the emulator.

    Returns:
        The emulator's exit code

    Raises:
        ArtifactNotFoundError: If the program has not been built
        ToolNotFoundError: If the emulator is not installed
    """
    return run_program(config, find_artifact(config, name))
