"""
Shared test fixtures for the village promotion test suite.
"""

from typing import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from village_promo_api.app.main import app
from village_promo_api.app.storage import MemoryStorage, SQLiteStorage, Storage, set_storage


@pytest.fixture
def sqlite_storage(tmp_path) -> Iterator[SQLiteStorage]:
    """An empty SQLite store in a temporary file, installed as the active backend."""
    storage = SQLiteStorage(str(tmp_path / "village.db"))
    set_storage(storage)
    yield storage
    set_storage(None)


@pytest.fixture(params=["memory", "sqlite"])
def storage(request, tmp_path) -> Iterator[Storage]:
    """Each test using this fixture runs once per storage backend."""
    if request.param == "memory":
        backend: Storage = MemoryStorage()
    else:
        backend = SQLiteStorage(str(tmp_path / "village.db"))
    set_storage(backend)
    yield backend
    set_storage(None)


@pytest.fixture
def seeded_storage(storage: Storage) -> Storage:
    storage.seed()
    return storage


@pytest.fixture
def client(storage: Storage) -> TestClient:
    """HTTP client bound to the app and an empty store."""
    return TestClient(app)


@pytest.fixture
def seeded_client(seeded_storage: Storage) -> TestClient:
    """HTTP client bound to the app and the sample village."""
    return TestClient(app)


@pytest.fixture
def umkm_payload() -> dict:
    """A complete business as the dashboard sends it."""
    return {
        "name": "Keripik Tempe Bu Sri",
        "description": "Keripik tempe renyah dari kedelai lokal.",
        "history": "Usaha keluarga sejak 1998.",
        "currentCondition": "Aktif",
        "imageUrl": "https://example.com/keripik.jpg",
        "productImages": [
            "https://example.com/p3.jpg",
            "https://example.com/p1.jpg",
            "https://example.com/p2.jpg",
        ],
        "location": "Dusun Subur",
        "address": "Jl. Kebun No. 12",
        "categoryId": 2,
        "promotionText": "Beli 2 gratis 1",
        "coordinates": "-7.151000,112.650000",
        "maps1": "https://www.google.com/maps/embed?pb=overview",
        "maps2": "https://www.google.com/maps/embed?pb=detail",
        "publishDate": "2025-06-01",
        "reviews": [
            {"author": "Ani", "rating": 5, "comment": "Enak!", "date": "2025-06-02T10:00:00Z"},
            {"author": "Budi", "rating": 4, "comment": "Renyah", "date": "2025-06-03T10:00:00Z"},
        ],
    }


@pytest.fixture
def mock_api() -> MagicMock:
    """A VillagePromoAPI stand-in whose calls succeed with empty results."""
    api = MagicMock()
    api.list_umkms.return_value = ([], None)
    api.list_categories.return_value = ([], None)
    api.get_village_profile.return_value = (None, None)
    return api
