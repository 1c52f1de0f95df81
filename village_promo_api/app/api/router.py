"""
Top‑level API router.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import categories, health, umkms, village_profile

router = APIRouter()

router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(umkms.router, prefix="/umkms", tags=["umkms"])
router.include_router(village_profile.router, prefix="/village-profile", tags=["village-profile"])
router.include_router(health.router, prefix="/health", tags=["health"])
