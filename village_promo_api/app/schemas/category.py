"""
Pydantic schemas for business categories.

Categories group UMKM listings on the public directory ("Kerajinan",
"Makanan", ...).  Each category carries a URL‑friendly ``slug`` that
must be unique; when a client omits it on creation it is derived from
the name.
"""

import re
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel


_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase ``value`` and collapse non‑alphanumeric runs into ``-``."""
    return _NON_ALNUM.sub("-", value.strip().lower()).strip("-")


class CategoryCreate(CamelModel):
    """Schema for creating a new category."""

    name: str = Field(..., min_length=1, examples=["Kerajinan"])
    slug: Optional[str] = Field(None, examples=["kerajinan"])

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v

    @field_validator("slug")
    @classmethod
    def normalize_slug(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = slugify(v)
        return v or None


class CategoryUpdate(CamelModel):
    """Schema for updating a category.

    All fields are optional; only provided values will be updated.
    """

    name: Optional[str] = None
    slug: Optional[str] = None

    @field_validator("slug")
    @classmethod
    def normalize_slug(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = slugify(v)
        if not v:
            raise ValueError("Slug must contain at least one letter or digit")
        return v


class CategoryRead(CamelModel):
    """Schema for reading a category."""

    id: int
    name: str
    slug: str
