"""Tests for the storage backends and their shared helpers."""

import pytest

from village_promo_api.app.core.db import get_cursor
from village_promo_api.app.storage import MemoryStorage, SQLiteStorage, StorageError, create_storage
from village_promo_api.app.storage.base import decode_json_list


def _umkm(**fields):
    record = {
        "name": "Warung Bu Tin",
        "category_id": 1,
        "product_images": ["a.jpg", "b.jpg"],
        "reviews": [{"author": "Ani", "rating": 5, "comment": "", "date": "2025-01-01"}],
        "publish_date": "2025-05-16",
    }
    record.update(fields)
    return record


class TestDecodeJsonList:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (["x"], ["x"]),
            ('["x", "y"]', ["x", "y"]),
            ("", []),
            (None, []),
            ("not json", []),
            ('{"a": 1}', []),
            ("null", []),
        ],
    )
    def test_decode(self, value, expected):
        assert decode_json_list(value) == expected


class TestBackends:
    """Behaviour every backend must share; runs against memory and SQLite."""

    def test_ids_increase_and_are_not_reused(self, storage):
        first = storage.create_category({"name": "A", "slug": "a"})
        second = storage.create_category({"name": "B", "slug": "b"})
        assert second["id"] == first["id"] + 1

        storage.delete_category(second["id"])
        third = storage.create_category({"name": "C", "slug": "c"})
        assert third["id"] > second["id"]

    def test_list_is_in_id_order(self, storage):
        for name in ("Z", "A", "M"):
            storage.create_umkm(_umkm(name=name))
        assert [u["name"] for u in storage.list_umkms()] == ["Z", "A", "M"]

    def test_lists_round_trip(self, storage):
        created = storage.create_umkm(_umkm())
        fetched = storage.get_umkm(created["id"])
        assert fetched["product_images"] == ["a.jpg", "b.jpg"]
        assert fetched["reviews"][0]["author"] == "Ani"

    def test_update_merges_and_keeps_id(self, storage):
        created = storage.create_umkm(_umkm())
        updated = storage.update_umkm(created["id"], {"id": 99, "name": "Baru"})
        assert updated["id"] == created["id"]
        assert updated["name"] == "Baru"
        assert updated["product_images"] == ["a.jpg", "b.jpg"]

    def test_missing_records(self, storage):
        assert storage.get_umkm(42) is None
        assert storage.update_umkm(42, {"name": "x"}) is None
        assert storage.delete_umkm(42) is False
        assert storage.get_category_by_slug("nothing") is None
        assert storage.get_village_profile() is None

    def test_list_by_category(self, storage):
        storage.create_umkm(_umkm(name="A", category_id=1))
        storage.create_umkm(_umkm(name="B", category_id=2))
        storage.create_umkm(_umkm(name="C", category_id=1))
        assert [u["name"] for u in storage.list_umkms_by_category(1)] == ["A", "C"]
        assert storage.list_umkms_by_category(3) == []

    def test_returned_records_are_copies(self, storage):
        created = storage.create_umkm(_umkm())
        created["product_images"].append("c.jpg")
        fetched = storage.get_umkm(created["id"])
        fetched["name"] = "changed"
        assert storage.get_umkm(created["id"]) == {**fetched, "name": "Warung Bu Tin"}
        assert storage.get_umkm(created["id"])["product_images"] == ["a.jpg", "b.jpg"]

    def test_first_profile_wins(self, storage):
        first = storage.create_village_profile({"name": "Desa A", "mission": ["x"]})
        storage.create_village_profile({"name": "Desa B", "mission": []})
        assert storage.get_village_profile()["id"] == first["id"]

    def test_seed(self, storage):
        assert storage.is_empty()
        storage.seed()
        assert not storage.is_empty()
        assert [c["slug"] for c in storage.list_categories()] == ["kerajinan", "makanan", "kedai", "jasa"]
        assert len(storage.list_umkms()) == 6
        assert storage.get_village_profile()["mission"][0].startswith("Meningkatkan")


class TestSQLiteStorage:
    def test_data_survives_reopening(self, tmp_path):
        path = str(tmp_path / "persist.db")
        SQLiteStorage(path).create_category({"name": "Jasa", "slug": "jasa"})
        assert SQLiteStorage(path).list_categories() == [{"id": 1, "name": "Jasa", "slug": "jasa"}]

    def test_corrupt_list_reads_as_empty(self, sqlite_storage):
        created = sqlite_storage.create_umkm(_umkm())
        with get_cursor(sqlite_storage.database_url) as cursor:
            cursor.execute(
                "UPDATE umkms SET reviews = ?, product_images = ? WHERE id = ?",
                ("{broken", "null", created["id"]),
            )
        fetched = sqlite_storage.get_umkm(created["id"])
        assert fetched["reviews"] == []
        assert fetched["product_images"] == []

    def test_migrations_are_recorded_once(self, tmp_path):
        path = str(tmp_path / "migrate.db")
        SQLiteStorage(path)
        SQLiteStorage(path)
        with get_cursor(path) as cursor:
            versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations")]
        assert versions == [1]

    def test_out_of_range_id_raises_storage_error(self, sqlite_storage):
        with pytest.raises(StorageError):
            sqlite_storage.get_umkm(2**64)
        with pytest.raises(StorageError):
            sqlite_storage.create_umkm(_umkm(category_id=2**64))


class TestCreateStorage:
    def test_memory_backend_seeded(self):
        storage = create_storage("memory", seed=True)
        assert isinstance(storage, MemoryStorage)
        assert len(storage.list_umkms()) == 6

    def test_memory_backend_unseeded(self):
        assert create_storage("MEMORY", seed=False).is_empty()

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_storage("firestore")

