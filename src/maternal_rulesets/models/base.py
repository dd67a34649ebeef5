"""Shared Pydantic base for wire-facing models.

The portal's forms post camelCase JSON (``isPregnant``, ``medicalHistory``)
while the SDK uses snake_case attributes.  ``CamelModel`` accepts both and
serialises with the camelCase alias.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """BaseModel with camelCase aliases; field names are accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def blank_to_none(value: Any) -> Any:
    """Treat empty / whitespace-only form strings as an absent value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def reject_bool(value: Any) -> Any:
    """Refuse booleans for numeric fields; lax int parsing would read true as 1."""
    if isinstance(value, bool):
        raise ValueError("expected a number, got a boolean")
    return value
