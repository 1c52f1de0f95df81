"""
Pydantic schemas for the village profile.

The profile is a singleton describing the promoted village: its
history, vision, an ordered list of mission statements and a few
headline numbers shown on the home page.
"""

from typing import Any, List, Optional

from pydantic import Field, field_validator

from .base import MAX_ID, CamelModel
from .umkm import coerce_json_list


class VillageProfileBase(CamelModel):
    name: str = Field(..., examples=["Kelurahan Sukodono"])
    description: str = ""
    history: str = ""
    vision: str = ""
    mission: List[str] = Field(default_factory=list)
    population: int = Field(0, ge=0, le=MAX_ID)
    umkm_count: int = Field(0, ge=0, le=MAX_ID)
    hamlet_count: int = Field(0, ge=0, le=MAX_ID)


class VillageProfileCreate(VillageProfileBase):
    """Schema for creating the village profile."""

    @field_validator("mission", mode="before")
    @classmethod
    def decode_mission(cls, v: Any) -> Any:
        if v is None:
            return []
        return coerce_json_list(v)


class VillageProfileUpdate(CamelModel):
    """Partial update of the village profile."""

    name: Optional[str] = None
    description: Optional[str] = None
    history: Optional[str] = None
    vision: Optional[str] = None
    mission: Optional[List[str]] = None
    population: Optional[int] = Field(None, ge=0, le=MAX_ID)
    umkm_count: Optional[int] = Field(None, ge=0, le=MAX_ID)
    hamlet_count: Optional[int] = Field(None, ge=0, le=MAX_ID)

    @field_validator("mission", mode="before")
    @classmethod
    def decode_mission(cls, v: Any) -> Any:
        return coerce_json_list(v)


class VillageProfileRead(VillageProfileBase):
    """Schema for reading the village profile."""

    id: int
