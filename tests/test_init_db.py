"""Unit tests for the schema DDL."""
from unittest.mock import patch

from db import init_db


def test_comision_is_stored_as_double_precision():
    ddl = " ".join(init_db.SCHEMA_SQL.split())
    assert "comision DOUBLE PRECISION DEFAULT 0" in ddl
    assert "NUMERIC" not in ddl


def test_create_tables_commits_and_releases(mock_conn, mock_cursor):
    with patch("db.init_db.get_connection", return_value=mock_conn), \
            patch("db.init_db.release_connection") as release_conn:
        init_db.create_tables()

    mock_cursor.execute.assert_called_once_with(init_db.SCHEMA_SQL)
    mock_conn.commit.assert_called_once()
    release_conn.assert_called_once_with(mock_conn)
