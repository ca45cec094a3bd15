"""Pytest configuration for backend tests.

Each test gets a temporary database and a fixed config injected through
FastAPI dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient

from sample_scout.core.config import Config
from sample_scout.core.database import get_db_connection, init_database
from sample_scout.domain.library import add_sound, get_or_create_default_library
from sample_scout.domain.quota import ensure_user
from web.backend.deps import get_config
from web.backend.main import app

ADMIN_EMAIL = "admin@example.com"
ADMIN_HEADERS = {"X-User-Id": "admin-1", "X-User-Email": ADMIN_EMAIL}
USER_HEADERS = {"X-User-Id": "user-1", "X-User-Email": "user@example.com"}


@pytest.fixture
def test_config() -> Config:
    config = Config()
    config.web.admin_email = ADMIN_EMAIL
    config.quota.free_search_limit = 3
    return config


@pytest.fixture
def client(tmp_path, monkeypatch, test_config):
    """TestClient backed by an isolated database."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)

    app.dependency_overrides[get_config] = lambda: test_config
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_sounds(client) -> list:
    """Sample catalogue in the admin's default library."""
    init_database()
    with get_db_connection() as conn:
        ensure_user(conn, ADMIN_HEADERS["X-User-Id"], ADMIN_EMAIL)
        library = get_or_create_default_library(conn, ADMIN_HEADERS["X-User-Id"])
        return [
            add_sound(conn, library["id"], "Deep House Bass Loop", tags=["bass", "loop"], bpm=124, key="C minor"),
            add_sound(conn, library["id"], "Drum Break", tags=["drums", "loop"], bpm=128),
            add_sound(conn, library["id"], "Analog Synth Lead", tags=["synth"], bpm=120, key="F major"),
            add_sound(conn, library["id"], "Vocal Chop", tags=["vocal chop"], bpm=140, key="a minor"),
        ]


@pytest.fixture
def admin_headers() -> dict:
    return dict(ADMIN_HEADERS)


@pytest.fixture
def user_headers() -> dict:
    return dict(USER_HEADERS)
