"""
VIC-20 Development Kit - Environment Setup and Build Tools
==========================================================

This package sets up and drives a development environment for the
Commodore VIC-20. It does not assemble or emulate anything itself: it
shells out to the ACME cross-assembler and the VICE emulator (``xvic``),
both installed through the system package manager.

Main Components
---------------
- **provision**: Installs ACME, VICE and helper utilities (vicsetup)
- **scaffold**: Creates the project layout, sample program, wrapper
  scripts and reference documentation (vicsetup)
- **builder**: Assembles every source in ``src/`` into ``build/`` (vicbuild)
- **runner**: Launches a built program in the emulator (vicrun)

Quick Start
-----------
    $ vicsetup
    $ ./tools/build.sh
    $ ./tools/run.sh hello

Or from Python:
    >>> from vic20_devkit import ProjectConfig, build_all
    >>> report = build_all(ProjectConfig.from_env("."))
    >>> report.ok
    True

Reference Documentation
-----------------------
- ACME assembler: https://sourceforge.net/projects/acme-crossass/
- VICE emulator: https://vice-emu.sourceforge.io/
"""

__version__ = "1.0.0"

from vic20_devkit.config import ProjectConfig
from vic20_devkit.errors import (
    VicDevError,
    ToolError,
    ToolNotFoundError,
    ProvisionError,
    ArtifactNotFoundError,
    ScaffoldError,
)
from vic20_devkit.builder import (
    BuildResult,
    BuildReport,
    discover_sources,
    artifact_path,
    assemble_source,
    build_all,
)
from vic20_devkit.runner import find_artifact, run_artifact, run_program
from vic20_devkit.provision import install_packages, package_commands
from vic20_devkit.scaffold import create_layout, write_project_files

__all__ = [
    "__version__",
    "ProjectConfig",
    "VicDevError",
    "ToolError",
    "ToolNotFoundError",
    "ProvisionError",
    "ArtifactNotFoundError",
    "ScaffoldError",
    "BuildResult",
    "BuildReport",
    "discover_sources",
    "artifact_path",
    "assemble_source",
    "build_all",
    "find_artifact",
    "run_artifact",
    "run_program",
    "install_packages",
    "package_commands",
    "create_layout",
    "write_project_files",
]
