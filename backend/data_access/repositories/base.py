"""
Connection handling shared by the repositories.

Every operation opens its own short-lived connection to whichever backend
database.get_connection() selects (SQLite file or PostgreSQL).
"""

from contextlib import contextmanager
from typing import Generator, Any

from database import get_connection, get_placeholder


class BaseRepository:
    """
    Base class for the key-value repositories.

    Queries are written with '?' placeholders and passed through sql(),
    which rewrites them for the active driver.
    """

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Yield (conn, cursor) for one unit of work.

        Commits on a clean exit when auto_commit is set, rolls back if the
        block raises, and always closes the cursor and the connection.

            with self.connection() as (conn, cursor):
                cursor.execute(self.sql("DELETE FROM key_value WHERE key = ?"), (key,))
        """
        conn = get_connection()
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def read_connection(self):
        """connection() without the commit, for SELECTs."""
        return self.connection(auto_commit=False)

    @staticmethod
    def sql(query: str) -> str:
        return query.replace("?", get_placeholder())
