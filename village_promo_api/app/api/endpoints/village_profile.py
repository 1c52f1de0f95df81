"""
Village profile endpoints.

The site reads a single profile record; the dashboard may edit it.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from village_promo_api.app.api.params import storage_failure
from village_promo_api.app.schemas.village_profile import VillageProfileRead, VillageProfileUpdate
from village_promo_api.app.services.village_profile_service import VillageProfileService
from village_promo_api.app.storage import StorageError


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=VillageProfileRead)
async def get_village_profile() -> VillageProfileRead:
    """Return the village profile, or 404 if none has been stored."""
    try:
        profile = await VillageProfileService.get_profile()
    except StorageError:
        storage_failure(logger, "Failed to fetch village profile")
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Village profile not found")
    return profile


@router.put("", response_model=VillageProfileRead)
async def update_village_profile(profile_in: VillageProfileUpdate) -> VillageProfileRead:
    """Partially update the village profile."""
    try:
        profile = await VillageProfileService.update_profile(profile_in)
    except StorageError:
        storage_failure(logger, "Failed to update village profile")
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Village profile not found")
    return profile
