"""
Database configuration and schema management for Neon Snake.

This module provides database connection management with environment-aware
backend selection (PostgreSQL when DATABASE_URL or PGHOST is set, SQLite otherwise)
and schema initialization for the key-value table that holds the high score.
"""

import os
import sqlite3
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def using_postgres() -> bool:
    """True when DATABASE_URL or PGHOST points the store at PostgreSQL."""
    return bool(os.getenv('DATABASE_URL') or os.getenv('PGHOST'))


def get_placeholder() -> str:
    """Parameter placeholder for the active driver."""
    return '%s' if using_postgres() else '?'


def get_database_path() -> str:
    """
    Determine the SQLite database path based on environment.

    Returns:
        Path to the SQLite database file.
        - SNAKE_DB_PATH if set
        - Railway (production): /data/snake.db
        - Local (development): backend/snake.db
    """
    explicit_path = os.getenv('SNAKE_DB_PATH')
    if explicit_path:
        return explicit_path

    # Check if running on Railway by looking for RAILWAY_ENVIRONMENT
    if os.getenv('RAILWAY_ENVIRONMENT'):
        # Production: use volume-mounted path
        db_path = '/data/snake.db'
        os.makedirs('/data', exist_ok=True)
    else:
        backend_dir = Path(__file__).parent
        db_path = str(backend_dir / 'snake.db')

    return db_path


def get_connection():
    """
    Get a database connection with appropriate settings.

    Returns:
        A psycopg2 connection (rows as dicts) when DATABASE_URL is set,
        otherwise a sqlite3.Connection with row factory enabled.
    """
    if using_postgres():
        from database_postgres import get_connection as get_postgres_connection
        return get_postgres_connection()

    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS key_value (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""


def init_database() -> None:
    """
    Initialize the database schema.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    target = "PostgreSQL" if using_postgres() else get_database_path()
    print(f"Initializing database at: {target}")

    conn = get_connection()
    cursor = conn.cursor()

    try:
        cursor.execute(SCHEMA_SQL)
        conn.commit()
        print("Database schema initialized successfully")

    except Exception as e:
        conn.rollback()
        print(f"Error initializing database: {e}")
        raise
    finally:
        cursor.close()
        conn.close()


if __name__ == "__main__":
    # Allow running this module directly to initialize the database
    init_database()
