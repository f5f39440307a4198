"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Small directory tree used by the walker and operation tests.

    Layout::

        root/
            a.txt
            b.py
            empty.log      (0 bytes)
            sub/
                c.txt
                deeper/
                    d.py
            zdir/
    """
    root = tmp_path / "root"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "zdir").mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "b.py").write_text("print('b')\n")
    (root / "empty.log").write_text("")
    (root / "sub" / "c.txt").write_text("gamma")
    (root / "sub" / "deeper" / "d.py").write_text("delta")
    return root


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path of a not-yet-existing config file inside tmp_path."""
    return tmp_path / "config" / "config.toml"
