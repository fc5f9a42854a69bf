"""
Toolchain Provisioning
======================

Installs the VIC-20 toolchain through the system package manager. The
command sequence, with the default configuration, is:

    sudo apt-get update
    sudo apt-get install -y acme
    sudo apt-get install -y wget curl unzip
    sudo apt-get install -y vice

The assembler is installed before the helper utilities and the emulator
last, so a failing emulator install still leaves a working assembler.
The first non-zero exit stops provisioning.
"""

import logging
from typing import Callable, List, Optional, Sequence

from vic20_devkit.config import ProjectConfig
from vic20_devkit.errors import ProvisionError
from vic20_devkit.toolchain import package_manager_command, run_tool

logger = logging.getLogger(__name__)


def package_commands(config: ProjectConfig) -> List[List[str]]:
    """Return the package manager commands needed to provision the toolchain."""
    groups = (
        config.assembler_packages,
        config.utility_packages,
        config.emulator_packages,
    )

    commands = [package_manager_command(config, "update")]
    for group in groups:
        if group:
            commands.append(package_manager_command(config, "install", "-y", *group))
    return commands


def install_packages(
    config: ProjectConfig,
    dry_run: bool = False,
    on_command: Optional[Callable[[Sequence[str]], None]] = None,
) -> List[List[str]]:
    """
    Install the assembler, emulator and utilities.

    Args:
        config: Project configuration
        dry_run: If True, return the commands without running them
        on_command: Called with each command before it runs

    Returns:
        The commands that were (or, for a dry run, would be) executed

    Raises:
        ProvisionError: If a package manager command fails
        ToolNotFoundError: If the package manager (or sudo) is missing
    """
    commands = package_commands(config)

    for command in commands:
        if on_command is not None:
            on_command(command)
        if dry_run:
            logger.debug("Dry run, skipping: %s", " ".join(command))
            continue

        return_code = run_tool(command)
        if return_code != 0:
            raise ProvisionError(command, return_code)

    return commands
