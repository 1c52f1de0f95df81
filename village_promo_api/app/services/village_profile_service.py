"""Service for the singleton village profile."""

import logging
from typing import Optional

from ..schemas.village_profile import VillageProfileRead, VillageProfileUpdate
from ..storage import get_storage


logger = logging.getLogger(__name__)


class VillageProfileService:

    @classmethod
    async def get_profile(cls) -> Optional[VillageProfileRead]:
        """Return the first stored profile, or ``None`` when the store has none."""
        profile = get_storage().get_village_profile()
        return VillageProfileRead.model_validate(profile) if profile else None

    @classmethod
    async def update_profile(cls, data: VillageProfileUpdate) -> Optional[VillageProfileRead]:
        """Apply a partial update to the profile the site displays."""
        storage = get_storage()
        current = storage.get_village_profile()
        if current is None:
            return None
        updates = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        profile = storage.update_village_profile(current["id"], updates)
        if profile is None:
            return None
        logger.info("Updated village profile %s", current["id"])
        return VillageProfileRead.model_validate(profile)
