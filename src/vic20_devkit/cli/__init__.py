"""
VIC-20 Development Kit Command-Line Interface
=============================================

This package provides the command-line tools of the kit:

- **vicsetup**: Install the toolchain and scaffold a project
- **vicbuild**: Assemble every source in src/ into build/
- **vicrun**: Run a built program in the emulator

Each tool is implemented as a Click-based CLI application sharing one
error handler (see errors.py).
"""

__all__ = ["vicsetup", "vicbuild", "vicrun"]
