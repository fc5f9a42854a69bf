"""
Builder - Assemble All Project Sources
======================================

Assembles every recognized source file in the project's source directory
into a program in the build directory, one assembler invocation per file:

    src/hello.asm  ──acme──▶  build/hello.prg
    src/game.asm   ──acme──▶  build/game.prg

Behaviour
---------
- Discovery is non-recursive and sorted by file name.
- Artifact name is always the source stem plus the artifact extension.
- A file whose assembly fails is recorded as failed; the remaining files
  are still assembled. Nothing is retried.
- A missing assembler binary stops the build with ToolNotFoundError,
  since every file would fail the same way.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from vic20_devkit.config import ProjectConfig
from vic20_devkit.toolchain import assembler_command, run_tool

logger = logging.getLogger(__name__)


# =============================================================================
# Build Results
# =============================================================================

@dataclass
class BuildResult:
    """
    Outcome of assembling a single source file.

    Attributes:
        source: The assembly source file
        artifact: Where the assembler was told to write its output
        return_code: The assembler's exit status
    """
    source: Path
    artifact: Path
    return_code: int

    @property
    def succeeded(self) -> bool:
        return self.return_code == 0


@dataclass
class BuildReport:
    """Ordered results for every source processed in one build run."""
    results: List[BuildResult] = field(default_factory=list)

    @property
    def succeeded(self) -> List[BuildResult]:
        return [r for r in self.results if r.succeeded]

    @property
    def failed(self) -> List[BuildResult]:
        return [r for r in self.results if not r.succeeded]

    @property
    def ok(self) -> bool:
        """True if no file failed (an empty build is ok)."""
        return not self.failed


# =============================================================================
# Source Discovery
# =============================================================================

def discover_sources(config: ProjectConfig) -> List[Path]:
    """
    List the assembly sources to build.

    Args:
        config: Project configuration

    Returns:
        Recognized source files directly inside the source directory,
        sorted by name. Empty if the directory does not exist.
    """
    source_dir = config.source_path
    if not source_dir.is_dir():
        logger.warning("Source directory %s does not exist", source_dir)
        return []

    sources = sorted(
        (p for p in source_dir.iterdir() if p.is_file() and config.is_source(p)),
        key=lambda p: p.name,
    )
    logger.debug("Found %d source file(s) in %s", len(sources), source_dir)
    return sources


def artifact_path(config: ProjectConfig, source: Path) -> Path:
    """
    Compute the build output path for a source file.

    Examples:
        src/hello.asm → build/hello.prg
        src/GAME.ASM  → build/GAME.prg
    """
    return config.build_path / f"{source.stem}{config.artifact_extension}"


# =============================================================================
# Assembly
# =============================================================================

def assemble_source(config: ProjectConfig, source: Path) -> BuildResult:
    """
    Assemble one source file.

    The build directory is created if needed. A non-zero assembler exit is
    returned in the result rather than raised.

    Raises:
        ToolNotFoundError: If the assembler is not installed
    """
    output = artifact_path(config, source)
    output.parent.mkdir(parents=True, exist_ok=True)

    return_code = run_tool(assembler_command(config, source, output))
    if return_code != 0:
        logger.debug("Assembly of %s failed with exit code %d", source, return_code)

    return BuildResult(source=source, artifact=output, return_code=return_code)


def build_all(
    config: ProjectConfig,
    on_start: Optional[Callable[[Path], None]] = None,
    on_result: Optional[Callable[[BuildResult], None]] = None,
) -> BuildReport:
    """
    Assemble every discovered source in order.

    Args:
        config: Project configuration
        on_start: Called with each source before it is assembled
        on_result: Called with each BuildResult after assembly

    Returns:
        BuildReport with one result per source file

    Raises:
        ToolNotFoundError: If the assembler is not installed
    """
    report = BuildReport()

    for source in discover_sources(config):
        if on_start is not None:
            on_start(source)

        result = assemble_source(config, source)
        report.results.append(result)

        if on_result is not None:
            on_result(result)

    logger.debug(
        "Build finished: %d succeeded, %d failed",
        len(report.succeeded), len(report.failed),
    )
    return report
