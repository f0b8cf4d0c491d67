"""
Shared fixtures.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable

import pytest

from doentry2dayone.core.config import Settings
from doentry2dayone.core.logging_config import LOGGER_NAME
from tests.lib import TEST_DEVICE, make_bundle


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep the developer's environment and .env out of Settings()."""
    for key in list(os.environ):
        if key.startswith("DOENTRY2DAYONE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handler and level changes made by CLI logging setup."""
    package_logger = logging.getLogger(LOGGER_NAME)
    level = package_logger.level
    handlers = list(package_logger.handlers)
    yield
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers


@pytest.fixture
def bundle_root(tmp_path: Path) -> Path:
    return make_bundle(tmp_path / "Journal_dayone")


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    return tmp_path / "import_journal" / "Journal.json"


@pytest.fixture
def make_settings(bundle_root: Path, output_path: Path) -> Callable[..., Settings]:
    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "source_root": bundle_root,
            "output_path": output_path,
            "device": TEST_DEVICE,
        }
        values.update(overrides)
        return Settings(**values)

    return _make
