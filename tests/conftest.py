# tests/conftest.py
"""Shared fixtures: isolated data dir, clean env, empty config cache."""

from __future__ import annotations

from pathlib import Path

import pytest

from grapheme_porter.utils import clear_config_cache, reload_topics

REPO_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset data-dir env, debug topics and config cache between tests."""
    for var in ("DATA_DIR", "PORTER_DATA_DIR", "PORTER_DEBUG_TOPICS"):
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    reload_topics()
    yield
    clear_config_cache()
    reload_topics()


@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("DATA_DIR", str(data))
    clear_config_cache()
    return data
