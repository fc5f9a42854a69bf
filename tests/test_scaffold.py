"""
Tests for Project Scaffolding
=============================
"""

import os

from vic20_devkit.scaffold import create_layout, write_project_files
from vic20_devkit.templates import HELLO_ASM


class TestCreateLayout:
    """Tests for create_layout()."""

    def test_creates_all_directories(self, config):
        """All five directories are created."""
        created = create_layout(config)
        assert created == list(config.layout)
        assert all(d.is_dir() for d in config.layout)

    def test_idempotent(self, config):
        """A second run creates nothing."""
        create_layout(config)
        assert create_layout(config) == []

    def test_partial(self, config, src_dir):
        """Existing directories are not reported."""
        created = create_layout(config)
        assert src_dir not in created
        assert len(created) == 4


class TestWriteProjectFiles:
    """Tests for write_project_files()."""

    def test_writes_starter_files(self, config):
        """Sample program, scripts and reference are written."""
        results = write_project_files(config)

        names = sorted(p.relative_to(config.root).as_posix() for p, _ in results)
        assert names == [
            "docs/vic20-reference.md",
            "src/hello.asm",
            "tools/build.sh",
            "tools/run.sh",
        ]
        assert all(written for _, written in results)
        assert (config.source_path / "hello.asm").read_text() == HELLO_ASM

    def test_scripts_are_executable(self, config):
        """build.sh and run.sh get the executable bits."""
        write_project_files(config)
        for name in ("build.sh", "run.sh"):
            script = config.tools_path / name
            assert os.access(script, os.X_OK)
            assert script.read_text().startswith("#!/bin/bash")

    def test_scripts_delegate_to_cli(self, config):
        """The wrappers exec vicbuild and vicrun."""
        write_project_files(config)
        assert 'exec vicbuild "$@"' in (config.tools_path / "build.sh").read_text()
        assert 'exec vicrun "$@"' in (config.tools_path / "run.sh").read_text()

    def test_reference_content(self, config):
        """The reference sheet lists the KERNAL routines."""
        write_project_files(config)
        text = (config.docs_path / "vic20-reference.md").read_text()
        assert "$FFD2: CHROUT" in text
        assert "## Memory Map" in text

    def test_keeps_existing_files(self, config, src_dir):
        """User edits survive a second setup."""
        hello = src_dir / "hello.asm"
        hello.write_text("; mine\n")

        results = dict(write_project_files(config))

        assert results[hello] is False
        assert hello.read_text() == "; mine\n"

    def test_force_overwrites(self, config, src_dir):
        """force=True replaces existing files."""
        hello = src_dir / "hello.asm"
        hello.write_text("; mine\n")

        results = dict(write_project_files(config, force=True))

        assert results[hello] is True
        assert hello.read_text() == HELLO_ASM
