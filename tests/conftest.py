"""Test configuration and helper fixtures."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import pytest

from quickconnect.core import ConnectionParser


@dataclass
class SimpleFS:
    """Lightweight fake file-system helper used by config and CLI tests."""

    root: Path

    def create_file(self, relative_path: str, contents: str = "") -> Path:
        file_path = self.root / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(contents)
        return file_path


@pytest.fixture
def fs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> SimpleFS:
    """Provide a simple fake file-system rooted at ``tmp_path``."""

    monkeypatch.chdir(tmp_path)
    return SimpleFS(tmp_path)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's config directory and environment out of the tests."""

    config_dir = tmp_path / "config-home"
    monkeypatch.setattr("quickconnect.config.loader.CONFIG_DIR", config_dir)
    for key in list(os.environ):
        if key.upper().startswith("QUICKCONNECT_"):
            monkeypatch.delenv(key)
    return config_dir


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by ``setup_logging``."""

    root = logging.getLogger()
    handlers, filters, level = root.handlers[:], root.filters[:], root.level
    yield
    root.handlers = handlers
    root.filters = filters
    root.setLevel(level)


@pytest.fixture
def parser() -> ConnectionParser:
    return ConnectionParser()
