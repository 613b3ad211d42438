"""
Base schema models.

Provides automatic camelCase conversion for the portal frontend and an
immutable variant for value objects that must never be mutated in place.
"""

from pydantic import BaseModel, ConfigDict


def to_camel(string: str) -> str:
    """
    Convert snake_case to camelCase.

    Example:
        >>> to_camel("date_submitted")
        'dateSubmitted'
        >>> to_camel("last_updated")
        'lastUpdated'
    """
    parts = string.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


class HTTPSchemaModel(BaseModel):
    """
    Base model for all HTTP API schemas.

    Provides:
    - camelCase aliases for field names
    - Support for both snake_case and camelCase input
    - Construction from attribute-bearing objects (from_attributes=True)

    Dates serialize as YYYY-MM-DD.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FrozenSchemaModel(HTTPSchemaModel):
    """HTTPSchemaModel that rejects attribute assignment and is hashable."""

    model_config = ConfigDict(frozen=True)
