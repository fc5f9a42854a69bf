"""
Shared Test Fixtures
====================

Fixtures for a throwaway project directory and a fake external toolchain.
The fake stands in for subprocess.run, so no assembler, emulator or
package manager needs to be installed to run the test suite.
"""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from vic20_devkit.config import ProjectConfig


class FakeToolchain:
    """
    Replacement for subprocess.run recording every command.

    The fake assembler writes a two-byte load address to the path given
    with -o, unless the source stem is listed in ``failing``. Every other
    program exits with ``return_code``.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.failing: set[str] = set()
        self.return_code = 0

    def __call__(self, args, cwd=None, **kwargs):
        args = list(args)
        self.calls.append(args)

        if args[0] == "acme":
            source = Path(args[-1])
            if source.stem in self.failing:
                return subprocess.CompletedProcess(args, 1)
            output = Path(args[args.index("-o") + 1])
            output.write_bytes(b"\x01\x11")
            return subprocess.CompletedProcess(args, 0)

        return subprocess.CompletedProcess(args, self.return_code)

    def calls_to(self, program: str) -> list[list[str]]:
        return [c for c in self.calls if c[0] == program]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep VIC20_* overrides from the developer's shell out of the tests."""
    for name in (
        "VIC20_ASSEMBLER",
        "VIC20_ASSEMBLER_FORMAT",
        "VIC20_EMULATOR",
        "VIC20_ARTIFACT_EXT",
        "VIC20_PACKAGE_MANAGER",
        "VIC20_NO_SUDO",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config(tmp_path):
    """Project configuration rooted in a temporary directory."""
    return ProjectConfig(root=tmp_path)


@pytest.fixture
def src_dir(config):
    """An existing, empty source directory."""
    config.source_path.mkdir()
    return config.source_path


@pytest.fixture
def fake_tools():
    """Patch subprocess.run with a FakeToolchain."""
    fake = FakeToolchain()
    with patch("vic20_devkit.toolchain.subprocess.run", fake):
        yield fake
