"""Shared fixtures: every test gets its own data and config directories."""

import pytest

from sample_scout.core.database import get_db_connection, init_database


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point XDG data/config dirs at a temporary directory."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def db_conn(data_dir):
    """Open connection to a freshly initialized database."""
    init_database()
    with get_db_connection() as conn:
        yield conn
