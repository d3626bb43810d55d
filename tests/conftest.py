"""
Shared fixtures.

Every test that touches the database gets its own SQLite file under
``tmp_path``; ``settings.database_url`` is patched before the
migrations run so nothing leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from player_registry_api.app.core.config import settings
from player_registry_api.app.core.db import get_database_path, init_db
from player_registry_api.app.main import app


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Fresh, migrated database; yields its path."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "players.db"))
    init_db()
    yield get_database_path()


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client
