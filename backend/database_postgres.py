"""
PostgreSQL connection for the high score store.

Connects to PostgreSQL using DATABASE_URL (preferred) or individual
PGHOST/PGPORT/PGUSER/PGPASSWORD/PGDATABASE environment variables.
"""

import os
import logging
import psycopg2
from psycopg2.extras import RealDictCursor
from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger(__name__)


def get_connection_string() -> str:
    """
    Get the PostgreSQL connection string.

    Priority:
    1. DATABASE_URL environment variable
    2. Individual PG* environment variables (PGHOST, PGPORT, PGUSER, PGPASSWORD, PGDATABASE)

    Raises:
        ValueError: If no valid connection configuration is found
    """
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        return database_url

    pghost = os.getenv('PGHOST')
    pgport = os.getenv('PGPORT', '5432')
    pguser = os.getenv('PGUSER')
    pgpassword = os.getenv('PGPASSWORD')
    pgdatabase = os.getenv('PGDATABASE')

    if pghost and pguser and pgpassword and pgdatabase:
        return f"postgresql://{pguser}:{pgpassword}@{pghost}:{pgport}/{pgdatabase}"

    raise ValueError(
        "Database connection not configured. "
        "Set DATABASE_URL or PGHOST/PGUSER/PGPASSWORD/PGDATABASE environment variables."
    )


def get_connection():
    """
    Get a database connection to PostgreSQL.

    Returns:
        psycopg2 connection with RealDictCursor (returns rows as dictionaries)
    """
    try:
        conn = psycopg2.connect(get_connection_string(), cursor_factory=RealDictCursor)
        return conn
    except Exception as e:
        logger.error(f"Failed to connect to PostgreSQL: {e}")
        raise
