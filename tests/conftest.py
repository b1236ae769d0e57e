"""
Pytest fixtures shared by the whole suite.

Unit tests never touch PostgreSQL: the pool connection is replaced by a
MagicMock whose cursor is configured per test. Integration tests use a real
database and are skipped unless TEST_DATABASE_URL is set.
"""
import os

import pytest
from unittest.mock import MagicMock, patch

from db import connection


@pytest.fixture
def mock_cursor():
    """Cursor returned by `with conn.cursor() as cur`."""
    return MagicMock()


@pytest.fixture
def mock_conn(mock_cursor):
    """A psycopg2-like connection whose cursor context yields `mock_cursor`."""
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = mock_cursor
    return conn


@pytest.fixture
def pooled(mock_conn):
    """
    Patch the pool accessors used by the repositories so every operation
    receives `mock_conn`. Yields the (get_connection, release_connection) mocks.
    """
    with patch("repositories.base_repo.get_connection", return_value=mock_conn) as get_conn, \
            patch("repositories.base_repo.release_connection") as release_conn:
        yield get_conn, release_conn


@pytest.fixture
def fake_pool(monkeypatch, mock_conn):
    """Install a fake ThreadedConnectionPool handing out `mock_conn`."""
    fake = MagicMock()
    fake.getconn.return_value = mock_conn
    monkeypatch.setattr(connection, "_pool", fake)
    return fake


@pytest.fixture(scope="session")
def database_url():
    """DSN of a disposable PostgreSQL database for integration tests."""
    url = os.getenv("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL not configured")
    return url


@pytest.fixture
def database(database_url):
    """Fresh comercial/repartidor tables for each integration test."""
    from db.init_db import create_tables, drop_tables

    connection.init_pool(dsn=database_url)
    drop_tables()
    create_tables()
    yield
    drop_tables()
    connection.close_pool()
