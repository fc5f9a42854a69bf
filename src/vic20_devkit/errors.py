"""
VIC-20 Development Kit Error Hierarchy
======================================

All exceptions inherit from VicDevError, allowing callers to catch every
kit-related error with a single except clause.

Exception Hierarchy
-------------------
VicDevError (base)
├── ToolError (external tool problems)
│   ├── ToolNotFoundError - binary is not installed / not on PATH
│   └── ProvisionError - package manager returned non-zero
├── ArtifactNotFoundError - build output missing for a program name
└── ScaffoldError - project files could not be written

An assembler that exits non-zero is NOT an exception: the builder records
it as a failed BuildResult and moves on to the next source file.
"""

from pathlib import Path
from typing import Optional, Sequence


# =============================================================================
# Base Exception Class
# =============================================================================

class VicDevError(Exception):
    """
    Base exception for all VIC-20 kit errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(message)


# =============================================================================
# External Tool Exceptions
# =============================================================================

class ToolError(VicDevError):
    """
    Base exception for problems with an external tool.

    Attributes:
        command: The command line that was executed (optional)
    """

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        hint: Optional[str] = None,
    ):
        self.command = list(command) if command else None
        super().__init__(message, hint=hint)


class ToolNotFoundError(ToolError):
    """Raised when an external binary cannot be executed because it is missing."""

    def __init__(self, tool: str, command: Optional[Sequence[str]] = None):
        self.tool = tool
        super().__init__(
            f"'{tool}' not found",
            command=command,
            hint="Run vicsetup to install the toolchain",
        )


class ProvisionError(ToolError):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(self, command: Sequence[str], return_code: int):
        self.return_code = return_code
        super().__init__(
            f"Command failed with exit code {return_code}: {' '.join(command)}",
            command=command,
        )


# =============================================================================
# Project Exceptions
# =============================================================================

class ArtifactNotFoundError(VicDevError):
    """Raised when a program has not been built yet."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"Program not found: {path}",
            hint="Run vicbuild (or ./tools/build.sh) first",
        )


class ScaffoldError(VicDevError):
    """Raised when a project directory or file cannot be created."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot write {path}: {reason}")
