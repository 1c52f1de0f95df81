"""
Storage interface shared by every backend.

Records travel between the service layer and a backend as plain
dictionaries with snake_case keys.  A backend assigns integer ids from
a per‑entity counter that only ever grows, returns copies so callers
cannot mutate stored state, and lists records in id order.  Lookups
that miss return ``None`` (or ``False`` for deletes); anything else the
backend cannot do is raised as :class:`StorageError`.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional


logger = logging.getLogger(__name__)

Record = Dict[str, Any]

# Fields holding ordered lists, per entity.  Backends that cannot store
# lists natively keep them as JSON text.
UMKM_LIST_FIELDS = ("product_images", "reviews")
PROFILE_LIST_FIELDS = ("mission",)


class StorageError(Exception):
    """Raised when a backend fails for reasons other than a missing record."""


def decode_json_list(value: Any) -> list:
    """Return ``value`` as a list.

    Lists are returned as is, JSON strings are decoded.  Anything that
    does not decode to a list (corrupt text, ``null``, an object)
    becomes an empty list.
    """
    if isinstance(value, list):
        return value
    if isinstance(value, str) and value:
        try:
            decoded = json.loads(value)
        except (TypeError, json.JSONDecodeError):
            logger.warning("Discarding undecodable list value %.40r", value)
            return []
        if isinstance(decoded, list):
            return decoded
    return []


def normalize_lists(record: Record, fields: Iterable[str]) -> Record:
    """Decode the list‑valued ``fields`` of ``record`` in place."""
    for field in fields:
        if field in record:
            record[field] = decode_json_list(record[field])
    return record


class Storage(ABC):
    """CRUD operations for categories, businesses and the village profile."""

    name = "abstract"

    # Categories ----------------------------------------------------------
    @abstractmethod
    def list_categories(self) -> List[Record]: ...

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Record]: ...

    @abstractmethod
    def get_category_by_slug(self, slug: str) -> Optional[Record]: ...

    @abstractmethod
    def create_category(self, data: Record) -> Record: ...

    @abstractmethod
    def update_category(self, category_id: int, data: Record) -> Optional[Record]: ...

    @abstractmethod
    def delete_category(self, category_id: int) -> bool: ...

    # Businesses ----------------------------------------------------------
    @abstractmethod
    def list_umkms(self) -> List[Record]: ...

    @abstractmethod
    def list_umkms_by_category(self, category_id: int) -> List[Record]: ...

    @abstractmethod
    def get_umkm(self, umkm_id: int) -> Optional[Record]: ...

    @abstractmethod
    def create_umkm(self, data: Record) -> Record: ...

    @abstractmethod
    def update_umkm(self, umkm_id: int, data: Record) -> Optional[Record]: ...

    @abstractmethod
    def delete_umkm(self, umkm_id: int) -> bool: ...

    # Village profile -----------------------------------------------------
    @abstractmethod
    def get_village_profile(self) -> Optional[Record]:
        """Return the first stored profile, or ``None`` if there is none."""

    @abstractmethod
    def create_village_profile(self, data: Record) -> Record: ...

    @abstractmethod
    def update_village_profile(self, profile_id: int, data: Record) -> Optional[Record]: ...

    # ---------------------------------------------------------------------
    def is_empty(self) -> bool:
        return not self.list_categories() and not self.list_umkms() and self.get_village_profile() is None

    def seed(self) -> None:
        """Load the sample village into this store."""
        from .seed import CATEGORIES, UMKMS, VILLAGE_PROFILE

        for category in CATEGORIES:
            self.create_category(dict(category))
        for umkm in UMKMS:
            self.create_umkm(dict(umkm))
        self.create_village_profile(dict(VILLAGE_PROFILE))
        logger.info(
            "Seeded %s storage with %d categories and %d businesses",
            self.name,
            len(CATEGORIES),
            len(UMKMS),
        )
