"""
Tests for ProjectConfig
=======================
"""

from pathlib import Path

from vic20_devkit.config import ProjectConfig


class TestDefaults:
    """Tests for the default layout and toolchain."""

    def test_layout(self):
        """Default directories resolve against the root."""
        config = ProjectConfig(root=Path("/proj"))
        assert config.source_path == Path("/proj/src")
        assert config.build_path == Path("/proj/build")
        assert config.layout == (
            Path("/proj/src"),
            Path("/proj/build"),
            Path("/proj/tools"),
            Path("/proj/docs"),
            Path("/proj/examples"),
        )

    def test_toolchain(self):
        """ACME and xvic are the default tools."""
        config = ProjectConfig()
        assert config.assembler == "acme"
        assert config.assembler_format == "cbm"
        assert config.emulator == "xvic"
        assert config.artifact_extension == ".prg"

    def test_artifact_extension_normalized(self):
        """A missing leading dot is added."""
        assert ProjectConfig(artifact_extension="bin").artifact_extension == ".bin"

    def test_is_source_case_insensitive(self):
        """Source extension matching ignores case."""
        config = ProjectConfig()
        assert config.is_source(Path("hello.asm"))
        assert config.is_source(Path("HELLO.ASM"))
        assert not config.is_source(Path("hello.txt"))
        assert not config.is_source(Path("hello.prg"))


class TestFromEnv:
    """Tests for ProjectConfig.from_env()."""

    def test_no_overrides(self, tmp_path):
        """Without environment variables the defaults are kept."""
        config = ProjectConfig.from_env(tmp_path)
        assert config.root == tmp_path
        assert config == ProjectConfig(root=tmp_path)

    def test_tool_overrides(self, tmp_path, monkeypatch):
        """Tool names and formats come from the environment."""
        monkeypatch.setenv("VIC20_ASSEMBLER", "/opt/acme/acme")
        monkeypatch.setenv("VIC20_ASSEMBLER_FORMAT", "plain")
        monkeypatch.setenv("VIC20_EMULATOR", "x64sc")
        monkeypatch.setenv("VIC20_PACKAGE_MANAGER", "apt")

        config = ProjectConfig.from_env(tmp_path)
        assert config.assembler == "/opt/acme/acme"
        assert config.assembler_format == "plain"
        assert config.emulator == "x64sc"
        assert config.package_manager == "apt"

    def test_artifact_extension_override(self, tmp_path, monkeypatch):
        """The artifact extension gains a dot if missing."""
        monkeypatch.setenv("VIC20_ARTIFACT_EXT", "bin")
        assert ProjectConfig.from_env(tmp_path).artifact_extension == ".bin"

    def test_no_sudo(self, tmp_path, monkeypatch):
        """VIC20_NO_SUDO disables the sudo prefix."""
        assert ProjectConfig.from_env(tmp_path).use_sudo is True
        monkeypatch.setenv("VIC20_NO_SUDO", "1")
        assert ProjectConfig.from_env(tmp_path).use_sudo is False
