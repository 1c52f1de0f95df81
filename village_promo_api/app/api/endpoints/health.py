"""Liveness endpoint."""

from fastapi import APIRouter

from village_promo_api.app.storage import get_storage


router = APIRouter()


@router.get("")
async def health() -> dict:
    """Report that the API is up and which storage backend it serves from."""
    return {"status": "ok", "storage": get_storage().name}
