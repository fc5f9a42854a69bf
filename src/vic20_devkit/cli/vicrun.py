"""
vicrun - Run a VIC-20 Program in the Emulator
=============================================

Starts the VICE VIC-20 emulator with a program previously built by
vicbuild:

    vicrun hello  →  xvic -console -autostart build/hello.prg

The emulator runs in the foreground on the current terminal. Use Ctrl+C
to exit.

Exit Codes
----------
0..n - The emulator's own exit code
1    - No program name given, program not built, or emulator missing
"""

import sys
from pathlib import Path
from typing import Optional

import click

from vic20_devkit import __version__
from vic20_devkit.cli.errors import ExitCode, handle_cli_exception, setup_logging
from vic20_devkit.config import ProjectConfig
from vic20_devkit.runner import find_artifact, run_program


USAGE = """\
Usage: vicrun <program_name>
Example: vicrun hello"""


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("name", required=False)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Project root directory",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Log every command executed",
)
@click.version_option(version=__version__, prog_name="vicrun")
def main(name: Optional[str], root: Path, verbose: bool) -> None:
    """
    Run build/NAME.prg in the VIC-20 emulator.

    \b
    Examples:
        vicrun hello             # Runs build/hello.prg
        vicrun --root game main  # Runs game/build/main.prg
    """
    if not name:
        click.echo(USAGE, err=True)
        sys.exit(ExitCode.FAILURE)

    setup_logging(verbose)

    try:
        config = ProjectConfig.from_env(root)
        program = find_artifact(config, name)

        click.echo(f"Running {program} in VIC-20 emulator...")
        click.echo("   Use Ctrl+C to exit")

        return_code = run_program(config, program)

    except (Exception, KeyboardInterrupt) as e:
        handle_cli_exception(e, verbose=verbose)

    sys.exit(return_code)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
