"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and
``init_db``, which applies pending migrations on application start.

Every function takes an optional ``db_path``.  When omitted the path
configured in ``settings.database_url`` is used; tests pass a path in a
temporary directory instead.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import settings

logger = logging.getLogger(__name__)

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: customers table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS customers (
            customer_id TEXT PRIMARY KEY,
            name TEXT,
            email TEXT,
            contact TEXT,
            address TEXT,
            active INTEGER NOT NULL DEFAULT 1,
            added TIMESTAMP
        );
        """,
    ),
    # Migration 2: lookups by name and by active flag
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_customers_name ON customers(name);
        CREATE INDEX IF NOT EXISTS idx_customers_active ON customers(active);
        """,
    ),
]


def get_database_path(db_path: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is.  Relative paths are resolved against
    the current working directory, i.e. where the server is started.
    """
    db_url = db_path or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    return str(Path(db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Type detection is left off; timestamps come back as the ISO
    strings they were stored as and are parsed by the schemas.
    """
    conn = sqlite3.connect(get_database_path(db_path))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and always close the connection."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> int:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, reads the
    current schema version and applies every entry of ``MIGRATIONS``
    with a higher version.  Returns the resulting schema version.
    """
    with get_cursor(db_path) as cursor:
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.info("Applied migration %s", version)
                current_version = version

    return current_version
