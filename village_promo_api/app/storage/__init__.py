"""
Storage backends and the process‑wide backend accessor.

Services call :func:`get_storage`, which builds the backend named by
``settings.storage_backend`` on first use (seeding it with the sample
village when it is empty and seeding is enabled).  Tests swap the
backend with :func:`set_storage`.
"""

import logging
from typing import Optional

from ..core.config import settings
from .base import Storage, StorageError
from .memory import MemoryStorage
from .sqlite import SQLiteStorage


logger = logging.getLogger(__name__)

__all__ = [
    "MemoryStorage",
    "SQLiteStorage",
    "Storage",
    "StorageError",
    "create_storage",
    "get_storage",
    "set_storage",
]

_storage: Optional[Storage] = None


def create_storage(backend: Optional[str] = None, *, seed: Optional[bool] = None) -> Storage:
    """Build a storage backend by name (``memory`` or ``sqlite``)."""
    backend = (backend or settings.storage_backend).lower()
    if backend == "memory":
        storage: Storage = MemoryStorage()
    elif backend == "sqlite":
        storage = SQLiteStorage(settings.database_url)
    else:
        raise ValueError(f"Unknown storage backend: {backend!r}")

    should_seed = settings.seed_sample_data if seed is None else seed
    if should_seed and storage.is_empty():
        storage.seed()
    logger.info("Using %s storage backend", storage.name)
    return storage


def get_storage() -> Storage:
    """Return the active storage backend, creating it on first use."""
    global _storage
    if _storage is None:
        _storage = create_storage()
    return _storage


def set_storage(storage: Optional[Storage]) -> None:
    """Replace the active backend.  ``None`` makes the next call rebuild it."""
    global _storage
    _storage = storage
