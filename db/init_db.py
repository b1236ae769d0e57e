"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Sales agents: each one covers a sales zone and earns a commission percentage
CREATE TABLE IF NOT EXISTS comercial (
    id              SERIAL PRIMARY KEY,
    nombre          VARCHAR(100) NOT NULL,
    zonaVenta       VARCHAR(100),
    comision        DOUBLE PRECISION DEFAULT 0
);

-- Delivery drivers
CREATE TABLE IF NOT EXISTS repartidor (
    id              SERIAL PRIMARY KEY,
    nombre          VARCHAR(100) NOT NULL,
    vehiculo        VARCHAR(50),
    email           VARCHAR(150)
);
"""

DROP_SQL = """
DROP TABLE IF EXISTS repartidor;
DROP TABLE IF EXISTS comercial;
"""


def _run(sql: str, action: str) -> None:
    """Execute a DDL script in its own transaction (`action` is "create" or "drop")."""
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql)
        conn.commit()
        logger.info(f"Database schema {action} completed.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to {action} schema: {e}")
        raise
    finally:
        release_connection(conn)


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    _run(SCHEMA_SQL, "create")


def drop_tables() -> None:
    """Drop every table owned by this schema. Used by the integration tests."""
    _run(DROP_SQL, "drop")


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    create_tables()
    close_pool()
    print("Database schema created successfully.")
