"""Helpers shared by the endpoint modules."""

import logging
from typing import NoReturn, Optional

from fastapi import HTTPException, status

from village_promo_api.app.schemas.base import MAX_ID


def parse_id(raw: str, entity: str) -> int:
    """Convert a path segment to a record id.

    Raises HTTP 400 ``Invalid <entity> ID`` for anything that is not a
    positive integer the database can hold.
    """
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = 0
    if not 1 <= value <= MAX_ID:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {entity} ID")
    return value


def parse_optional_id(raw: Optional[str]) -> Optional[int]:
    """Lenient variant for query filters: invalid values mean "no filter"."""
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if 1 <= value <= MAX_ID else None


def storage_failure(logger: logging.Logger, message: str) -> NoReturn:
    """Log the active exception and answer with a static HTTP 500."""
    logger.exception(message)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)
