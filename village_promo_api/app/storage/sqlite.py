"""
SQLite storage backend.

Records are stored one row per document in the tables created by
``core.db.init_db``.  List‑valued fields are written as JSON text and
decoded on read; a value that fails to decode is read back as an empty
list rather than failing the request.

All queries use parameterized statements.  Column names in dynamic
INSERT/UPDATE statements come from the whitelists below, never from
the caller.
"""

import json
import logging
import sqlite3
from typing import List, Optional, Sequence

from ..core.db import get_cursor, init_db
from .base import (
    PROFILE_LIST_FIELDS,
    UMKM_LIST_FIELDS,
    Record,
    Storage,
    StorageError,
    normalize_lists,
)


logger = logging.getLogger(__name__)

CATEGORY_COLUMNS = ("name", "slug")
UMKM_COLUMNS = (
    "name",
    "description",
    "history",
    "current_condition",
    "image_url",
    "product_images",
    "location",
    "address",
    "category_id",
    "promotion_text",
    "coordinates",
    "maps1",
    "maps2",
    "publish_date",
    "reviews",
)
PROFILE_COLUMNS = (
    "name",
    "description",
    "history",
    "vision",
    "mission",
    "population",
    "umkm_count",
    "hamlet_count",
)


def _encode(data: Record, columns: Sequence[str], list_fields: Sequence[str]) -> Record:
    """Keep known columns only and JSON‑encode list fields."""
    values = {}
    for column in columns:
        if column not in data:
            continue
        value = data[column]
        if column in list_fields and not isinstance(value, str):
            value = json.dumps(value if value is not None else [], ensure_ascii=False)
        values[column] = value
    return values


def _row_to_record(row: sqlite3.Row, list_fields: Sequence[str] = ()) -> Record:
    return normalize_lists(dict(row), list_fields)


class SQLiteStorage(Storage):
    """Persistent store backed by a single SQLite file."""

    name = "sqlite"

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url
        try:
            init_db(database_url)
        except sqlite3.Error as exc:
            raise StorageError(f"Could not initialise database: {exc}") from exc

    # Generic helpers -----------------------------------------------------
    def _fetch_all(self, query: str, params: tuple = (), list_fields: Sequence[str] = ()) -> List[Record]:
        try:
            with get_cursor(self.database_url) as cursor:
                rows = cursor.execute(query, params).fetchall()
        except (sqlite3.Error, OverflowError) as exc:
            raise StorageError(str(exc)) from exc
        return [_row_to_record(row, list_fields) for row in rows]

    def _fetch_one(self, query: str, params: tuple = (), list_fields: Sequence[str] = ()) -> Optional[Record]:
        rows = self._fetch_all(query, params, list_fields)
        return rows[0] if rows else None

    def _insert(self, table: str, values: Record, list_fields: Sequence[str]) -> Record:
        columns = ", ".join(values)
        placeholders = ", ".join("?" for _ in values)
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute(
                    f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
                    tuple(values.values()),
                )
                row = cursor.execute(f"SELECT * FROM {table} WHERE id = ?", (cursor.lastrowid,)).fetchone()
        except (sqlite3.Error, OverflowError) as exc:
            raise StorageError(str(exc)) from exc
        return _row_to_record(row, list_fields)

    def _update(self, table: str, record_id: int, values: Record, list_fields: Sequence[str]) -> Optional[Record]:
        try:
            with get_cursor(self.database_url) as cursor:
                exists = cursor.execute(f"SELECT id FROM {table} WHERE id = ?", (record_id,)).fetchone()
                if not exists:
                    return None
                if values:
                    assignments = ", ".join(f"{column} = ?" for column in values)
                    cursor.execute(
                        f"UPDATE {table} SET {assignments} WHERE id = ?",
                        (*values.values(), record_id),
                    )
                row = cursor.execute(f"SELECT * FROM {table} WHERE id = ?", (record_id,)).fetchone()
        except (sqlite3.Error, OverflowError) as exc:
            raise StorageError(str(exc)) from exc
        return _row_to_record(row, list_fields)

    def _delete(self, table: str, record_id: int) -> bool:
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute(f"DELETE FROM {table} WHERE id = ?", (record_id,))
                affected = cursor.rowcount
        except (sqlite3.Error, OverflowError) as exc:
            raise StorageError(str(exc)) from exc
        return affected > 0

    # Categories ----------------------------------------------------------
    def list_categories(self) -> List[Record]:
        return self._fetch_all("SELECT * FROM categories ORDER BY id")

    def get_category(self, category_id: int) -> Optional[Record]:
        return self._fetch_one("SELECT * FROM categories WHERE id = ?", (category_id,))

    def get_category_by_slug(self, slug: str) -> Optional[Record]:
        return self._fetch_one("SELECT * FROM categories WHERE slug = ?", (slug,))

    def create_category(self, data: Record) -> Record:
        return self._insert("categories", _encode(data, CATEGORY_COLUMNS, ()), ())

    def update_category(self, category_id: int, data: Record) -> Optional[Record]:
        return self._update("categories", category_id, _encode(data, CATEGORY_COLUMNS, ()), ())

    def delete_category(self, category_id: int) -> bool:
        return self._delete("categories", category_id)

    # Businesses ----------------------------------------------------------
    def list_umkms(self) -> List[Record]:
        return self._fetch_all("SELECT * FROM umkms ORDER BY id", list_fields=UMKM_LIST_FIELDS)

    def list_umkms_by_category(self, category_id: int) -> List[Record]:
        return self._fetch_all(
            "SELECT * FROM umkms WHERE category_id = ? ORDER BY id",
            (category_id,),
            UMKM_LIST_FIELDS,
        )

    def get_umkm(self, umkm_id: int) -> Optional[Record]:
        return self._fetch_one("SELECT * FROM umkms WHERE id = ?", (umkm_id,), UMKM_LIST_FIELDS)

    def create_umkm(self, data: Record) -> Record:
        values = _encode(data, UMKM_COLUMNS, UMKM_LIST_FIELDS)
        return self._insert("umkms", values, UMKM_LIST_FIELDS)

    def update_umkm(self, umkm_id: int, data: Record) -> Optional[Record]:
        values = _encode(data, UMKM_COLUMNS, UMKM_LIST_FIELDS)
        return self._update("umkms", umkm_id, values, UMKM_LIST_FIELDS)

    def delete_umkm(self, umkm_id: int) -> bool:
        return self._delete("umkms", umkm_id)

    # Village profile -----------------------------------------------------
    def get_village_profile(self) -> Optional[Record]:
        return self._fetch_one(
            "SELECT * FROM village_profiles ORDER BY id LIMIT 1",
            list_fields=PROFILE_LIST_FIELDS,
        )

    def create_village_profile(self, data: Record) -> Record:
        values = _encode(data, PROFILE_COLUMNS, PROFILE_LIST_FIELDS)
        return self._insert("village_profiles", values, PROFILE_LIST_FIELDS)

    def update_village_profile(self, profile_id: int, data: Record) -> Optional[Record]:
        values = _encode(data, PROFILE_COLUMNS, PROFILE_LIST_FIELDS)
        return self._update("village_profiles", profile_id, values, PROFILE_LIST_FIELDS)
