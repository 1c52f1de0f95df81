"""
In‑memory storage backend.

Each entity lives in a dict keyed by id, with its own counter.  Nothing
survives a restart and there is no locking; the API handles one request
at a time per worker, which is all this backend supports.
"""

import copy
from typing import Dict, List, Optional

from .base import (
    PROFILE_LIST_FIELDS,
    UMKM_LIST_FIELDS,
    Record,
    Storage,
    normalize_lists,
)


class MemoryStorage(Storage):
    """Dict‑backed store with auto‑incrementing integer ids."""

    name = "memory"

    def __init__(self) -> None:
        self._categories: Dict[int, Record] = {}
        self._umkms: Dict[int, Record] = {}
        self._profiles: Dict[int, Record] = {}
        self._next_category_id = 1
        self._next_umkm_id = 1
        self._next_profile_id = 1

    # Categories ----------------------------------------------------------
    def list_categories(self) -> List[Record]:
        return [copy.deepcopy(c) for c in self._categories.values()]

    def get_category(self, category_id: int) -> Optional[Record]:
        category = self._categories.get(category_id)
        return copy.deepcopy(category) if category else None

    def get_category_by_slug(self, slug: str) -> Optional[Record]:
        for category in self._categories.values():
            if category["slug"] == slug:
                return copy.deepcopy(category)
        return None

    def create_category(self, data: Record) -> Record:
        category_id = self._next_category_id
        self._next_category_id += 1
        category = {**copy.deepcopy(data), "id": category_id}
        self._categories[category_id] = category
        return copy.deepcopy(category)

    def update_category(self, category_id: int, data: Record) -> Optional[Record]:
        current = self._categories.get(category_id)
        if current is None:
            return None
        current.update({k: copy.deepcopy(v) for k, v in data.items() if k != "id"})
        return copy.deepcopy(current)

    def delete_category(self, category_id: int) -> bool:
        return self._categories.pop(category_id, None) is not None

    # Businesses ----------------------------------------------------------
    def list_umkms(self) -> List[Record]:
        return [copy.deepcopy(u) for u in self._umkms.values()]

    def list_umkms_by_category(self, category_id: int) -> List[Record]:
        return [copy.deepcopy(u) for u in self._umkms.values() if u.get("category_id") == category_id]

    def get_umkm(self, umkm_id: int) -> Optional[Record]:
        umkm = self._umkms.get(umkm_id)
        return copy.deepcopy(umkm) if umkm else None

    def create_umkm(self, data: Record) -> Record:
        umkm_id = self._next_umkm_id
        self._next_umkm_id += 1
        umkm = normalize_lists({**copy.deepcopy(data), "id": umkm_id}, UMKM_LIST_FIELDS)
        self._umkms[umkm_id] = umkm
        return copy.deepcopy(umkm)

    def update_umkm(self, umkm_id: int, data: Record) -> Optional[Record]:
        current = self._umkms.get(umkm_id)
        if current is None:
            return None
        changes = normalize_lists({k: copy.deepcopy(v) for k, v in data.items() if k != "id"}, UMKM_LIST_FIELDS)
        current.update(changes)
        return copy.deepcopy(current)

    def delete_umkm(self, umkm_id: int) -> bool:
        return self._umkms.pop(umkm_id, None) is not None

    # Village profile -----------------------------------------------------
    def get_village_profile(self) -> Optional[Record]:
        for profile in self._profiles.values():
            return copy.deepcopy(profile)
        return None

    def create_village_profile(self, data: Record) -> Record:
        profile_id = self._next_profile_id
        self._next_profile_id += 1
        profile = normalize_lists({**copy.deepcopy(data), "id": profile_id}, PROFILE_LIST_FIELDS)
        self._profiles[profile_id] = profile
        return copy.deepcopy(profile)

    def update_village_profile(self, profile_id: int, data: Record) -> Optional[Record]:
        current = self._profiles.get(profile_id)
        if current is None:
            return None
        changes = normalize_lists({k: copy.deepcopy(v) for k, v in data.items() if k != "id"}, PROFILE_LIST_FIELDS)
        current.update(changes)
        return copy.deepcopy(current)
