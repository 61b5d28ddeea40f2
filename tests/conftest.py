"""Shared fixtures: a temporary SQLite database per test."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the package importable when running from a source checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from equipes_api.core import config as core_config  # noqa: E402
from equipes_api.db.session import Database  # noqa: E402
from equipes_api.repositories.sql_repository import SQLRepository  # noqa: E402


@pytest.fixture()
def settings(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset the settings cache."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.delenv("SAVE_MODE", raising=False)
    monkeypatch.delenv("PLACEHOLDER_CREDENTIAL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    core_config.get_settings.cache_clear()

    yield core_config.get_settings()

    core_config.get_settings.cache_clear()


@pytest.fixture()
def database(settings):
    db = Database(settings.database_url)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture()
def repo(database):
    return SQLRepository(database)
