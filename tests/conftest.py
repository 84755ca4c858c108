"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def parent_dir(tmp_path: Path) -> Path:
    """A parent folder with a file, a nested directory, a hidden file and a hidden dir.

    Layout:
        parent/a            (file)
        parent/b/           (directory with nested content)
        parent/.c           (hidden file)
        parent/.cache/      (hidden directory)
    """
    parent = tmp_path / "parent"
    parent.mkdir()
    (parent / "a").write_text("a")
    nested = parent / "b" / "nested"
    nested.mkdir(parents=True)
    (nested / "deep.txt").write_text("deep")
    (parent / ".c").write_text("hidden")
    (parent / ".cache").mkdir()
    (parent / ".cache" / "blob").write_bytes(b"\x00" * 16)
    return parent
