"""
VIC-20 Development Kit - Configuration
======================================

Project layout and toolchain settings. Configuration comes from:
- Default values (defined here)
- Environment variables (ProjectConfig.from_env)
- The --root option of each command-line tool

Default layout (relative to the project root):

    src/        assembly sources (*.asm)
    build/      assembled programs (*.prg)
    tools/      build.sh / run.sh wrapper scripts
    docs/       reference documentation
    examples/   free-form example code
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple
import os


@dataclass
class ProjectConfig:
    """
    Configuration for a VIC-20 project.

    Attributes:
        root: Project root directory
        source_dir: Directory holding assembly sources
        build_dir: Directory receiving assembled programs
        tools_dir: Directory for the wrapper scripts
        docs_dir: Directory for reference documentation
        examples_dir: Directory for example code
        source_extensions: Recognized source extensions (lowercase)
        artifact_extension: Extension of assembled programs
        assembler: Assembler binary (ACME)
        assembler_format: Output format passed to the assembler with -f
        emulator: Emulator binary (VICE's VIC-20 emulator)
        emulator_flags: Flags placed before the program path
        package_manager: Package manager binary
        use_sudo: Prefix package manager commands with sudo
        assembler_packages: Packages providing the assembler (installed first)
        utility_packages: Helper packages (installed second)
        emulator_packages: Packages providing the emulator (installed last)
    """

    root: Path = field(default_factory=lambda: Path("."))

    # ═══════════════════════════════════════════════════════════════════════════
    # LAYOUT
    # ═══════════════════════════════════════════════════════════════════════════

    source_dir: str = "src"
    build_dir: str = "build"
    tools_dir: str = "tools"
    docs_dir: str = "docs"
    examples_dir: str = "examples"

    source_extensions: Tuple[str, ...] = (".asm",)
    artifact_extension: str = ".prg"

    # ═══════════════════════════════════════════════════════════════════════════
    # TOOLCHAIN
    # ═══════════════════════════════════════════════════════════════════════════

    assembler: str = "acme"
    assembler_format: str = "cbm"  # two-byte load address header
    emulator: str = "xvic"
    emulator_flags: Tuple[str, ...] = ("-console", "-autostart")

    # ═══════════════════════════════════════════════════════════════════════════
    # PROVISIONING
    # ═══════════════════════════════════════════════════════════════════════════

    package_manager: str = "apt-get"
    use_sudo: bool = True
    assembler_packages: Tuple[str, ...] = ("acme",)
    utility_packages: Tuple[str, ...] = ("wget", "curl", "unzip")
    emulator_packages: Tuple[str, ...] = ("vice",)

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        if not self.artifact_extension.startswith("."):
            self.artifact_extension = "." + self.artifact_extension

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls, root: Path = Path(".")) -> "ProjectConfig":
        """
        Create a ProjectConfig rooted at ``root`` with environment overrides.

        Environment variables (all optional):
            VIC20_ASSEMBLER: Assembler binary (e.g., "/opt/acme/bin/acme")
            VIC20_ASSEMBLER_FORMAT: Assembler output format (e.g., "plain")
            VIC20_EMULATOR: Emulator binary (e.g., "xvic")
            VIC20_ARTIFACT_EXT: Extension of built programs (e.g., ".prg")
            VIC20_PACKAGE_MANAGER: Package manager binary
            VIC20_NO_SUDO: Any non-empty value disables the sudo prefix

        Returns:
            ProjectConfig with values from environment variables
        """
        config = cls(root=Path(root))

        if assembler := os.environ.get("VIC20_ASSEMBLER"):
            config.assembler = assembler

        if fmt := os.environ.get("VIC20_ASSEMBLER_FORMAT"):
            config.assembler_format = fmt

        if emulator := os.environ.get("VIC20_EMULATOR"):
            config.emulator = emulator

        if ext := os.environ.get("VIC20_ARTIFACT_EXT"):
            config.artifact_extension = ext if ext.startswith(".") else "." + ext

        if manager := os.environ.get("VIC20_PACKAGE_MANAGER"):
            config.package_manager = manager

        if os.environ.get("VIC20_NO_SUDO"):
            config.use_sudo = False

        return config

    # ═══════════════════════════════════════════════════════════════════════════
    # RESOLVED PATHS
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def source_path(self) -> Path:
        return self.root / self.source_dir

    @property
    def build_path(self) -> Path:
        return self.root / self.build_dir

    @property
    def tools_path(self) -> Path:
        return self.root / self.tools_dir

    @property
    def docs_path(self) -> Path:
        return self.root / self.docs_dir

    @property
    def examples_path(self) -> Path:
        return self.root / self.examples_dir

    @property
    def layout(self) -> Tuple[Path, ...]:
        """All project directories, in creation order."""
        return (
            self.source_path,
            self.build_path,
            self.tools_path,
            self.docs_path,
            self.examples_path,
        )

    def is_source(self, path: Path) -> bool:
        """True if ``path`` has a recognized source extension."""
        return path.suffix.lower() in self.source_extensions
