"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations (``init_db``).  It is
used by the SQLite storage backend only; the in‑memory backend never
touches it.

List‑valued fields (business reviews and product images, the village
mission) are stored as JSON text columns and decoded by the storage
layer.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS categories (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            slug TEXT NOT NULL UNIQUE
        );

        CREATE TABLE IF NOT EXISTS umkms (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            history TEXT NOT NULL DEFAULT '',
            current_condition TEXT NOT NULL DEFAULT '',
            image_url TEXT NOT NULL DEFAULT '',
            product_images TEXT NOT NULL DEFAULT '[]',
            location TEXT NOT NULL DEFAULT '',
            address TEXT NOT NULL DEFAULT '',
            -- no REFERENCES clause: categories may be deleted under a business
            category_id INTEGER NOT NULL,
            promotion_text TEXT,
            coordinates TEXT NOT NULL DEFAULT '',
            maps1 TEXT NOT NULL DEFAULT '',
            maps2 TEXT NOT NULL DEFAULT '',
            publish_date TEXT NOT NULL DEFAULT '',
            reviews TEXT NOT NULL DEFAULT '[]'
        );

        CREATE INDEX IF NOT EXISTS idx_umkms_category_id ON umkms(category_id);

        CREATE TABLE IF NOT EXISTS village_profiles (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            history TEXT NOT NULL DEFAULT '',
            vision TEXT NOT NULL DEFAULT '',
            mission TEXT NOT NULL DEFAULT '[]',
            population INTEGER NOT NULL DEFAULT 0,
            umkm_count INTEGER NOT NULL DEFAULT 0,
            hamlet_count INTEGER NOT NULL DEFAULT 0
        );
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If an absolute path is provided, use it directly.  Otherwise resolve
    it relative to the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    """
    conn = sqlite3.connect(get_database_path(database_url))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_url: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block completes and rolled
    back if it raises.
    """
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_url: Optional[str] = None) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    with get_cursor(database_url) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
                logger.info("Applied database migration %s", version)
