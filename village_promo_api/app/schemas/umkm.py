"""
Pydantic schemas for UMKM business listings.

A listing describes one village business: its story, current
condition, photos, where to find it (address, ``"lat,lng"``
coordinates and two Google Maps embed URLs) and visitor reviews.
``productImages`` and ``reviews`` are ordered lists; some storage
backends persist them as JSON strings, so the create/update schemas
accept either a list or its JSON encoding.
"""

import json
from typing import Any, List, Optional

from pydantic import Field, field_validator

from .base import MAX_ID, CamelModel


def coerce_json_list(value: Any) -> Any:
    """Decode a JSON‑encoded list, leaving anything else for validation.

    Businesses pasted into the dashboard often carry ``reviews`` or
    ``productImages`` as strings produced by ``JSON.stringify``.  An
    empty string means an empty list.
    """
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            return json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValueError("Value must be a list or a JSON encoded list") from exc
    return value


def strip_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("Name must not be blank")
    return value


class Review(CamelModel):
    """A visitor review shown on the business detail page."""

    author: str
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: str = ""
    date: str = Field(..., description="ISO timestamp of the review")


class UMKMBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Yayuk Collection"])
    description: str = ""
    history: str = ""
    current_condition: str = Field("", examples=["Aktif"])
    image_url: str = ""
    product_images: List[str] = Field(default_factory=list)
    location: str = ""
    address: str = ""
    category_id: int = Field(..., le=MAX_ID, examples=[1])
    promotion_text: Optional[str] = None
    coordinates: str = Field("", examples=["-7.152391,112.652379"])
    maps1: str = ""
    maps2: str = ""
    reviews: List[Review] = Field(default_factory=list)


class UMKMCreate(UMKMBase):
    """Schema for creating a business.

    ``publishDate`` is optional; the service stamps today's date when
    it is missing.  Restoring a deleted business sends its original
    date back.
    """

    publish_date: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return strip_name(v)

    @field_validator("product_images", "reviews", mode="before")
    @classmethod
    def decode_lists(cls, v: Any) -> Any:
        if v is None:
            return []
        return coerce_json_list(v)


class UMKMUpdate(CamelModel):
    """Schema for updating a business.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    history: Optional[str] = None
    current_condition: Optional[str] = None
    image_url: Optional[str] = None
    product_images: Optional[List[str]] = None
    location: Optional[str] = None
    address: Optional[str] = None
    category_id: Optional[int] = Field(None, le=MAX_ID)
    promotion_text: Optional[str] = None
    coordinates: Optional[str] = None
    maps1: Optional[str] = None
    maps2: Optional[str] = None
    publish_date: Optional[str] = None
    reviews: Optional[List[Review]] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: Optional[str]) -> Optional[str]:
        return strip_name(v)

    @field_validator("product_images", "reviews", mode="before")
    @classmethod
    def decode_lists(cls, v: Any) -> Any:
        return coerce_json_list(v)


class UMKMRead(UMKMBase):
    """Schema for reading a business from the API."""

    id: int
    publish_date: str = ""
