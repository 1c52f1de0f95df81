"""Shared base model translating snake_case attributes to camelCase JSON."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base class for every API schema.

    Payloads may use either the camelCase alias (``imageUrl``) or the
    attribute name (``image_url``).  Responses are serialized with the
    aliases by FastAPI.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Largest id the SQLite backend can store in an INTEGER column.
MAX_ID = 2**63 - 1
