"""
Business logic for UMKM listings.

Listings are created from the admin dashboard (a form or a pasted JSON
document), edited in place and deleted outright.  The dashboard keeps
its own recycle bin, so a "restore" reaches this service as an
ordinary create.

``categoryId`` is not checked against existing categories; an unknown
id is accepted and logged.
"""

import logging
from datetime import date
from typing import List, Optional

from ..schemas.umkm import UMKMCreate, UMKMRead, UMKMUpdate
from ..storage import get_storage


class UMKMService:
    """Service for managing business listings."""

    @classmethod
    async def list_umkms(cls, category_id: Optional[int] = None) -> List[UMKMRead]:
        """Return every listing, or only those in ``category_id`` when given."""
        storage = get_storage()
        if category_id:
            records = storage.list_umkms_by_category(category_id)
        else:
            records = storage.list_umkms()
        return [UMKMRead.model_validate(r) for r in records]

    @classmethod
    async def get_umkm(cls, umkm_id: int) -> Optional[UMKMRead]:
        record = get_storage().get_umkm(umkm_id)
        return UMKMRead.model_validate(record) if record else None

    @classmethod
    async def create_umkm(cls, data: UMKMCreate) -> UMKMRead:
        """Store a new listing and return it with its assigned id.

        ``publish_date`` defaults to today when not supplied.
        """
        logger = logging.getLogger(__name__)
        storage = get_storage()
        values = data.model_dump()
        if not values.get("publish_date"):
            values["publish_date"] = date.today().isoformat()
        if storage.get_category(data.category_id) is None:
            logger.warning("Business '%s' references unknown category %s", data.name, data.category_id)
        record = storage.create_umkm(values)
        logger.info("Created business %s '%s'", record["id"], data.name)
        return UMKMRead.model_validate(record)

    @classmethod
    async def update_umkm(cls, umkm_id: int, data: UMKMUpdate) -> Optional[UMKMRead]:
        """Merge the provided fields into an existing listing.

        Fields left out of ``data`` (or sent as null) keep their stored
        value.  Returns ``None`` if the listing does not exist.
        """
        logger = logging.getLogger(__name__)
        updates = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        record = get_storage().update_umkm(umkm_id, updates)
        if record is None:
            return None
        logger.info("Updated business %s (%s)", umkm_id, ", ".join(sorted(updates)) or "no changes")
        return UMKMRead.model_validate(record)

    @classmethod
    async def delete_umkm(cls, umkm_id: int) -> bool:
        """Delete a listing.  Returns ``False`` if it did not exist."""
        deleted = get_storage().delete_umkm(umkm_id)
        if deleted:
            logging.getLogger(__name__).info("Deleted business %s", umkm_id)
        return deleted
