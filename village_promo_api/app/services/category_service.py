"""
Service layer for business categories.

Categories are few and edited by hand from the admin dashboard.  The
only rule enforced here is slug uniqueness.  Deleting a category does
not touch the businesses that reference it; their ``categoryId`` is
left dangling and the public directory falls back to a generic label.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from village_promo_api.app.schemas.category import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    slugify,
)
from village_promo_api.app.storage import get_storage


logger = logging.getLogger(__name__)


class CategoryError(ValueError):
    """Raised when a category payload cannot be applied."""


class SlugConflictError(CategoryError):
    """Raised when a slug is already used by another category."""


class CategoryService:
    """Service class for managing categories."""

    @classmethod
    async def list_categories(cls) -> List[CategoryRead]:
        return [CategoryRead.model_validate(c) for c in get_storage().list_categories()]

    @classmethod
    async def get_category(cls, category_id: int) -> Optional[CategoryRead]:
        category = get_storage().get_category(category_id)
        return CategoryRead.model_validate(category) if category else None

    @classmethod
    async def create_category(cls, data: CategoryCreate) -> CategoryRead:
        """Insert a new category and return it.

        The slug defaults to a slugified name.  Raises
        :class:`SlugConflictError` if the slug is taken.
        """
        slug = data.slug or slugify(data.name)
        if not slug:
            raise CategoryError("Could not derive a slug from the category name")
        storage = get_storage()
        if storage.get_category_by_slug(slug) is not None:
            raise SlugConflictError(f"Category slug '{slug}' already exists")
        category = storage.create_category({"name": data.name, "slug": slug})
        logger.info("Created category %s (%s)", category["id"], slug)
        return CategoryRead.model_validate(category)

    @classmethod
    async def update_category(cls, category_id: int, data: CategoryUpdate) -> Optional[CategoryRead]:
        """Update an existing category.

        Only fields provided in ``data`` are changed.  Returns ``None``
        if the category does not exist.
        """
        storage = get_storage()
        updates = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        if "name" in updates:
            updates["name"] = updates["name"].strip()
            if not updates["name"]:
                raise CategoryError("Name must not be blank")
        slug = updates.get("slug")
        if slug is not None:
            holder = storage.get_category_by_slug(slug)
            if holder is not None and holder["id"] != category_id:
                raise SlugConflictError(f"Category slug '{slug}' already exists")
        category = storage.update_category(category_id, updates)
        if category is None:
            return None
        logger.info("Updated category %s", category_id)
        return CategoryRead.model_validate(category)

    @classmethod
    async def delete_category(cls, category_id: int) -> bool:
        """Delete a category by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        storage = get_storage()
        deleted = storage.delete_category(category_id)
        if deleted:
            orphans = len(storage.list_umkms_by_category(category_id))
            if orphans:
                logger.warning(
                    "Deleted category %s still referenced by %d business(es)",
                    category_id,
                    orphans,
                )
            else:
                logger.info("Deleted category %s", category_id)
        return deleted
