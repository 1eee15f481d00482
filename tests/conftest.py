from __future__ import annotations

import sys

import pytest

# Symlink-heavy tests assume POSIX semantics
collect_ignore = ["test_adder.py", "test_cli.py"] if sys.platform == "win32" else []


@pytest.fixture
def home(tmp_path, monkeypatch):
    """A fake home directory with HOME pointing at it."""
    path = tmp_path / "home" / "alice"
    path.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(path))
    return path
