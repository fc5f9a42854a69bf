"""
Project Scaffolding
===================

Creates the project layout and writes the starter files:

    src/hello.asm              sample program
    tools/build.sh             wrapper around vicbuild (executable)
    tools/run.sh               wrapper around vicrun (executable)
    docs/vic20-reference.md    memory map and KERNAL reference

Scaffolding is safe to repeat: directories are created only when missing
and existing files are left alone unless force is requested.
"""

import logging
import stat
from pathlib import Path
from typing import List, Tuple

from vic20_devkit.config import ProjectConfig
from vic20_devkit.errors import ScaffoldError
from vic20_devkit.templates import BUILD_SH, HELLO_ASM, REFERENCE_MD, RUN_SH

logger = logging.getLogger(__name__)

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def create_layout(config: ProjectConfig) -> List[Path]:
    """
    Create the project directories.

    Returns:
        The directories that did not exist before

    Raises:
        ScaffoldError: If a directory cannot be created
    """
    created: List[Path] = []
    for directory in config.layout:
        if directory.is_dir():
            continue
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ScaffoldError(directory, e.strerror or str(e)) from e
        logger.debug("Created directory %s", directory)
        created.append(directory)
    return created


def project_files(config: ProjectConfig) -> List[Tuple[Path, str, bool]]:
    """Return (path, content, executable) for every starter file."""
    return [
        (config.source_path / "hello.asm", HELLO_ASM, False),
        (config.tools_path / "build.sh", BUILD_SH, True),
        (config.tools_path / "run.sh", RUN_SH, True),
        (config.docs_path / "vic20-reference.md", REFERENCE_MD, False),
    ]


def _write_file(path: Path, content: str, executable: bool) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        if executable:
            path.chmod(path.stat().st_mode | EXECUTABLE_BITS)
    except OSError as e:
        raise ScaffoldError(path, e.strerror or str(e)) from e


def write_project_files(
    config: ProjectConfig,
    force: bool = False,
) -> List[Tuple[Path, bool]]:
    """
    Write the sample program, wrapper scripts and reference sheet.

    Args:
        config: Project configuration
        force: Overwrite files that already exist

    Returns:
        (path, written) for every starter file; written is False when an
        existing file was kept

    Raises:
        ScaffoldError: If a file cannot be written
    """
    results: List[Tuple[Path, bool]] = []

    for path, content, executable in project_files(config):
        if path.exists() and not force:
            logger.debug("Keeping existing %s", path)
            results.append((path, False))
            continue

        _write_file(path, content, executable)
        logger.debug("Wrote %s", path)
        results.append((path, True))

    return results
