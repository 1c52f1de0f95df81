"""
Category endpoints.

These routes expose a CRUD API for the business categories used by
the public directory filter.  There is no authentication; the admin
dashboard and the public site call the same endpoints.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Response, status

from village_promo_api.app.api.params import parse_id, storage_failure
from village_promo_api.app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from village_promo_api.app.services.category_service import (
    CategoryError,
    CategoryService,
    SlugConflictError,
)
from village_promo_api.app.storage import StorageError


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[CategoryRead])
async def list_categories() -> List[CategoryRead]:
    """Return all categories in id order."""
    try:
        return await CategoryService.list_categories()
    except StorageError:
        storage_failure(logger, "Failed to fetch categories")


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: str) -> CategoryRead:
    """Retrieve a single category by ID.

    Returns HTTP 404 if the category is not found.
    """
    cid = parse_id(category_id, "category")
    try:
        category = await CategoryService.get_category(cid)
    except StorageError:
        storage_failure(logger, "Failed to fetch category")
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(category_in: CategoryCreate) -> CategoryRead:
    """Create a new category.  The slug is derived from the name if omitted."""
    try:
        return await CategoryService.create_category(category_in)
    except SlugConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except CategoryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except StorageError:
        storage_failure(logger, "Failed to create category")


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(category_id: str, category_in: CategoryUpdate) -> CategoryRead:
    """Update an existing category.  Partial updates are supported."""
    cid = parse_id(category_id, "category")
    try:
        category = await CategoryService.update_category(cid, category_in)
    except SlugConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except CategoryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except StorageError:
        storage_failure(logger, "Failed to update category")
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: str) -> Response:
    """Delete a category.

    Businesses that reference the category are left untouched.
    """
    cid = parse_id(category_id, "category")
    try:
        deleted = await CategoryService.delete_category(cid)
    except StorageError:
        storage_failure(logger, "Failed to delete category")
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
