"""Shared fixtures for the Ajour test suite."""

import logging
from pathlib import Path

import pytest

from ajour.config.paths import AppPaths


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the config directory at a temporary location for every test."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv(AppPaths.DATA_DIR_ENV, str(config_dir))

    yield config_dir

    logger = logging.getLogger("ajour")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def retail_dir(tmp_path: Path) -> Path:
    """An existing, empty retail flavor folder."""
    path = tmp_path / "World of Warcraft" / "_retail_"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def case_sensitive_fs(tmp_path: Path) -> None:
    """Skip the test on case-insensitive filesystems."""
    marker = tmp_path / "CaseCheck"
    marker.mkdir()
    if (tmp_path / "casecheck").exists():
        pytest.skip("filesystem is case-insensitive")
    marker.rmdir()
