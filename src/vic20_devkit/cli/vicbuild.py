"""
vicbuild - Assemble VIC-20 Programs
===================================

Assembles every source file in the project's src/ directory into a
program in build/, one assembler run per file:

    src/hello.asm  →  acme -f cbm -o build/hello.prg src/hello.asm

Usage Examples
--------------
Build the project in the current directory:
    $ vicbuild

Build another project, logging every command:
    $ vicbuild --root ~/vic/mygame -v

Exit Codes
----------
0 - Every source assembled (or there was nothing to build)
1 - At least one source failed, or the assembler is not installed
"""

import sys
from pathlib import Path

import click

from vic20_devkit import __version__
from vic20_devkit.builder import BuildResult, build_all
from vic20_devkit.cli.errors import ExitCode, handle_cli_exception, setup_logging
from vic20_devkit.config import ProjectConfig


# =============================================================================
# Progress Reporting
# =============================================================================

def report_start(source: Path) -> None:
    click.echo(f"   Assembling {source.stem}...")


def report_result(result: BuildResult) -> None:
    if result.succeeded:
        click.echo(f"   Success: {result.artifact}")
    else:
        click.echo(f"   Failed: {result.source}")


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
    "-v", "--verbose",
    is_flag=True,
    help="Log every command executed",
)
@click.version_option(version=__version__, prog_name="vicbuild")
def main(root: Path, verbose: bool) -> None:
    """
    Assemble all VIC-20 programs in src/ into build/.

    A source that fails to assemble is reported and the remaining sources
    are still built. The exit code is 1 if any source failed.
    """
    setup_logging(verbose)

    try:
        config = ProjectConfig.from_env(root)

        click.echo("Building VIC-20 programs...")
        report = build_all(config, on_start=report_start, on_result=report_result)

        if not report.results:
            click.echo(f"   No sources found in {config.source_path}")

        click.echo(
            f"Build complete: {len(report.succeeded)} succeeded, "
            f"{len(report.failed)} failed"
        )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if not report.ok:
        sys.exit(ExitCode.FAILURE)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
