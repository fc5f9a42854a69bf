"""
External Toolchain Invocation
=============================

Command-line construction and execution for the three external programs
the kit drives:

    acme -f cbm -o build/hello.prg src/hello.asm      (assembler)
    xvic -console -autostart build/hello.prg          (emulator)
    sudo apt-get install -y acme                      (package manager)

Every call is a blocking subprocess.run() that inherits the terminal, so
tool diagnostics and emulator console I/O reach the user directly.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Sequence

from vic20_devkit.config import ProjectConfig
from vic20_devkit.errors import ToolError, ToolNotFoundError

logger = logging.getLogger(__name__)


def assembler_command(config: ProjectConfig, source: Path, output: Path) -> List[str]:
    """Build the assembler command line for one source file."""
    return [
        config.assembler,
        "-f", config.assembler_format,
        "-o", str(output),
        str(source),
    ]


def emulator_command(config: ProjectConfig, program: Path) -> List[str]:
    """Build the emulator command line that autostarts ``program``."""
    return [config.emulator, *config.emulator_flags, str(program)]


def package_manager_command(config: ProjectConfig, *args: str) -> List[str]:
    """Build a package manager command, with sudo if configured."""
    command = [config.package_manager, *args]
    if config.use_sudo:
        command.insert(0, "sudo")
    return command


def run_tool(command: Sequence[str]) -> int:
    """
    Run an external tool in the foreground and return its exit code.

    Args:
        command: Program and arguments

    Returns:
        The child's exit status

    Raises:
        ToolNotFoundError: If the program cannot be found
        ToolError: If the program exists but is not executable
    """
    logger.debug("Running: %s", " ".join(command))
    try:
        result = subprocess.run(list(command))
    except FileNotFoundError:
        raise ToolNotFoundError(command[0], command=command) from None
    except PermissionError:
        raise ToolError(f"'{command[0]}' is not executable", command=command) from None

    logger.debug("%s exited with %d", command[0], result.returncode)
    return result.returncode
