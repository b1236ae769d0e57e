"""
repositories/base_repo.py
-------------------------
Generic CRUD repository shared by every entity table.

A concrete repository only declares its table, its columns (primary key
first), the columns that take part in `search`, and how to convert between
a row tuple and a domain object. Every SQL statement is derived from that
metadata once, when the subclass is defined.
"""

from typing import Any, ClassVar, Generic, Optional, TypeVar

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """CRUD operations over one table, returning domain objects of type T."""

    table: ClassVar[str]
    columns: ClassVar[tuple[str, ...]]
    search_columns: ClassVar[tuple[str, ...]]

    insert_sql: ClassVar[str]
    select_by_id_sql: ClassVar[str]
    select_all_sql: ClassVar[str]
    delete_sql: ClassVar[str]
    search_sql: ClassVar[str]
    count_sql: ClassVar[str]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        pk, *fields = cls.columns
        select_list = ", ".join(cls.columns)
        # the key is numeric, ILIKE needs text
        targets = [f"CAST({col} AS TEXT)" if col == pk else col for col in cls.search_columns]
        conditions = "\n               OR ".join(f"{t} ILIKE %s" for t in targets)

        cls.insert_sql = (
            f"INSERT INTO {cls.table} ({', '.join(fields)}) "
            f"VALUES ({', '.join(['%s'] * len(fields))}) RETURNING {pk};"
        )
        cls.select_by_id_sql = f"SELECT {select_list} FROM {cls.table} WHERE {pk} = %s;"
        cls.select_all_sql = f"SELECT {select_list} FROM {cls.table} ORDER BY {pk};"
        cls.delete_sql = f"DELETE FROM {cls.table} WHERE {pk} = %s;"
        cls.count_sql = f"SELECT COUNT(*) FROM {cls.table};"
        cls.search_sql = f"""
            SELECT {select_list}
            FROM {cls.table}
            WHERE {conditions}
            ORDER BY {pk};
        """

    # ── Entity hooks ──────────────────────────────────────

    @staticmethod
    def _row_to_entity(row: tuple) -> T:
        """Convert a row tuple (in `columns` order) to a domain object."""
        raise NotImplementedError

    @staticmethod
    def _insert_params(entity: T) -> tuple:
        """Values for every non-key column, in `columns` order."""
        raise NotImplementedError

    # ── CREATE ────────────────────────────────────────────

    def insert(self, entity: T, conn: Any = None) -> T:
        """
        Insert a new row and write the generated id back into `entity.id`.

        Args:
            entity: The domain object to persist.
            conn: Optional connection owned by the caller. When given, the
                statement runs inside the caller's transaction and commit,
                rollback and release are left to the caller.

        Returns:
            The same entity with its `id` populated.
        """
        params = self._insert_params(entity)
        if conn is not None:
            with conn.cursor() as cur:
                cur.execute(self.insert_sql, params)
                entity.id = cur.fetchone()[0]
            logger.info(f"Staged {self.table} #{entity.id} in caller transaction")
            return entity

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(self.insert_sql, params)
                entity.id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Inserted {self.table} #{entity.id}")
            return entity
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to insert into {self.table}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Fetch one row by primary key, or None if it does not exist."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(self.select_by_id_sql, (entity_id,))
                row = cur.fetchone()
                return self._row_to_entity(row) if row else None
        finally:
            release_connection(conn)

    def find_all(self) -> list[T]:
        """Fetch every row ordered by primary key. Never returns None."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(self.select_all_sql)
                return [self._row_to_entity(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def search(self, filtro: str) -> list[T]:
        """
        Case-insensitive substring search over `search_columns`.

        The filter is wrapped as ``%filtro%`` and bound once per column; an
        empty filter therefore matches every row.
        """
        pattern = f"%{filtro}%"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(self.search_sql, (pattern,) * len(self.search_columns))
                return [self._row_to_entity(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def count(self) -> int:
        """Number of rows in the table."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(self.count_sql)
                return int(cur.fetchone()[0])
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, entity_id: int) -> bool:
        """
        Delete a row by primary key.

        Returns:
            True if a row was deleted, False otherwise.
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(self.delete_sql, (entity_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted {self.table} #{entity_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete {self.table} #{entity_id}: {e}")
            raise
        finally:
            release_connection(conn)
