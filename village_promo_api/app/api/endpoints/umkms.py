"""
UMKM business endpoints.

CRUD routes for the business listings shown in the public directory
and managed from the admin dashboard.  The list endpoint accepts an
optional ``categoryId`` filter; pagination is left to the client.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from village_promo_api.app.api.params import parse_id, parse_optional_id, storage_failure
from village_promo_api.app.schemas.umkm import UMKMCreate, UMKMRead, UMKMUpdate
from village_promo_api.app.services.umkm_service import UMKMService
from village_promo_api.app.storage import StorageError


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[UMKMRead])
async def list_umkms(
    category_id: Optional[str] = Query(None, alias="categoryId"),
) -> List[UMKMRead]:
    """Return all businesses, optionally restricted to one category.

    A ``categoryId`` that is not a positive integer is ignored.
    """
    try:
        return await UMKMService.list_umkms(parse_optional_id(category_id))
    except StorageError:
        storage_failure(logger, "Failed to fetch UMKMs")


@router.get("/{umkm_id}", response_model=UMKMRead)
async def get_umkm(umkm_id: str) -> UMKMRead:
    """Retrieve a single business.  Raises 404 if it does not exist."""
    uid = parse_id(umkm_id, "UMKM")
    try:
        umkm = await UMKMService.get_umkm(uid)
    except StorageError:
        storage_failure(logger, "Failed to fetch UMKM")
    if umkm is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="UMKM not found")
    return umkm


@router.post("", response_model=UMKMRead, status_code=status.HTTP_201_CREATED)
async def create_umkm(umkm_in: UMKMCreate) -> UMKMRead:
    """Create a business listing."""
    try:
        return await UMKMService.create_umkm(umkm_in)
    except StorageError:
        storage_failure(logger, "Failed to create UMKM")


@router.put("/{umkm_id}", response_model=UMKMRead)
async def update_umkm(umkm_id: str, umkm_in: UMKMUpdate) -> UMKMRead:
    """Update a business.  Fields left out of the body keep their value."""
    uid = parse_id(umkm_id, "UMKM")
    try:
        umkm = await UMKMService.update_umkm(uid, umkm_in)
    except StorageError:
        storage_failure(logger, "Failed to update UMKM")
    if umkm is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="UMKM not found")
    return umkm


@router.delete("/{umkm_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_umkm(umkm_id: str) -> Response:
    """Delete a business listing."""
    uid = parse_id(umkm_id, "UMKM")
    try:
        deleted = await UMKMService.delete_umkm(uid)
    except StorageError:
        storage_failure(logger, "Failed to delete UMKM")
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="UMKM not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
