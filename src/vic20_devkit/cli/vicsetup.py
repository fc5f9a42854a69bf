"""
vicsetup - Set Up a VIC-20 Development Environment
==================================================

Installs the toolchain and scaffolds a project in one command:

1. Installs ACME, helper utilities and VICE through the package manager
2. Creates src/, build/, tools/, docs/ and examples/
3. Writes a sample program (src/hello.asm)
4. Writes tools/build.sh and tools/run.sh
5. Writes docs/vic20-reference.md

Usage Examples
--------------
Full setup in the current directory:
    $ vicsetup

Scaffold only (toolchain already installed):
    $ vicsetup --skip-install

Show the package manager commands without running them:
    $ vicsetup --dry-run

Regenerate starter files, overwriting local edits:
    $ vicsetup --skip-install --force

Exit Codes
----------
0 - Environment ready
1 - Package installation or file creation failed
"""

from pathlib import Path
from typing import Sequence

import click

from vic20_devkit import __version__
from vic20_devkit.cli.errors import handle_cli_exception, setup_logging
from vic20_devkit.config import ProjectConfig
from vic20_devkit.provision import install_packages
from vic20_devkit.scaffold import create_layout, write_project_files


def echo_command(command: Sequence[str]) -> None:
    click.echo(f"   $ {' '.join(command)}")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Project root directory",
)
@click.option(
    "--skip-install",
    is_flag=True,
    help="Do not run the package manager",
)
@click.option(
    "-n", "--dry-run",
    is_flag=True,
    help="Print package manager commands instead of running them",
)
@click.option(
    "-f", "--force",
    is_flag=True,
    help="Overwrite existing starter files",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Log every command executed",
)
@click.version_option(version=__version__, prog_name="vicsetup")
def main(root: Path, skip_install: bool, dry_run: bool, force: bool, verbose: bool) -> None:
    """
    Set up a VIC-20 development environment.

    Installs the ACME assembler and the VICE emulator, then creates the
    project layout with a sample program, build/run scripts and a
    reference sheet.
    """
    setup_logging(verbose)

    try:
        config = ProjectConfig.from_env(root)

        click.echo("Setting up VIC-20 development environment...")

        if skip_install:
            click.echo("Skipping package installation")
        else:
            click.echo("Installing ACME assembler, tools and VICE emulator...")
            install_packages(config, dry_run=dry_run, on_command=echo_command)

        click.echo("Creating project structure...")
        for directory in create_layout(config):
            click.echo(f"   Created {directory}/")

        click.echo("Creating sample program, build tools and reference docs...")
        for path, written in write_project_files(config, force=force):
            if written:
                click.echo(f"   Wrote {path}")
            else:
                click.echo(f"   Kept existing {path}")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    click.echo()
    click.echo("VIC-20 development environment ready!")
    click.echo()
    click.echo("Quick start:")
    click.echo("   ./tools/build.sh     # Build all programs")
    click.echo("   ./tools/run.sh hello # Run hello program")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
