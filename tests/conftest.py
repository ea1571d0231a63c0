"""Shared pytest fixtures for all tests."""

import logging
from pathlib import Path

import pytest

from runscript.staging import staging_dir


@pytest.fixture(autouse=True)
def temp_script_root(monkeypatch, tmp_path_factory):
    """Stage scripts in a per-test temporary directory."""
    root = Path(tmp_path_factory.mktemp("script_root"))
    monkeypatch.setenv("RUNSCRIPT_TEMP_DIR", str(root))
    return root


@pytest.fixture
def staged_files(temp_script_root):
    """Return a callable listing the currently staged script files."""

    def _list() -> list[Path]:
        directory = staging_dir(temp_script_root)
        if not directory.exists():
            return []
        return sorted(p for p in directory.iterdir() if p.is_file())

    return _list


@pytest.fixture
def restore_root_logging():
    """Undo root logger changes made by setup_logging."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)
