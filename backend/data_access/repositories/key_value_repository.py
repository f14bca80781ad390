"""
Repository for the key_value table.

Stores small named values (the high score) as text.
"""

from typing import Optional

from database import SCHEMA_SQL
from .base import BaseRepository


class KeyValueRepository(BaseRepository):
    """Read and upsert rows of the key_value table."""

    def __init__(self):
        self._schema_ready = False

    def ensure_schema(self) -> None:
        if self._schema_ready:
            return
        with self.connection() as (conn, cursor):
            cursor.execute(SCHEMA_SQL)
        self._schema_ready = True

    def get(self, key: str) -> Optional[str]:
        """
        Get the value stored under key.

        Returns:
            The stored text, or None if the key has never been written.
        """
        self.ensure_schema()
        with self.read_connection() as (conn, cursor):
            cursor.execute(self.sql("SELECT value FROM key_value WHERE key = ?"), (key,))
            row = cursor.fetchone()
            if row is None:
                return None
            return row['value']

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite the value stored under key."""
        self.ensure_schema()
        with self.connection() as (conn, cursor):
            cursor.execute(
                self.sql("""
                    INSERT INTO key_value (key, value)
                    VALUES (?, ?)
                    ON CONFLICT (key) DO UPDATE
                    SET value = EXCLUDED.value, updated_at = CURRENT_TIMESTAMP
                """),
                (key, value)
            )
