"""Scheme eligibility models.

``UserProfile`` mirrors the four-step eligibility form; ``Scheme`` is a
catalog record.  Numeric form fields arrive as strings from the browser,
so numeric strings are coerced and empty strings mean "not provided".
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from .base import CamelModel, blank_to_none, reject_bool


class UserProfile(CamelModel):
    """A user's answers to the eligibility form."""

    state: str
    income: Optional[int] = None
    is_pregnant: bool = False
    has_children: bool = False
    # Collected by the form, not scored
    age: Optional[int] = None
    category: Optional[str] = None
    occupation: Optional[str] = None
    marital_status: Optional[str] = None
    education: Optional[str] = None
    family_size: Optional[int] = Field(default=None, ge=1)

    @field_validator(
        "category", "occupation", "marital_status", "education", mode="before"
    )
    @classmethod
    def _blank(cls, v):
        return blank_to_none(v)

    @field_validator("income", "age", "family_size", mode="before")
    @classmethod
    def _numeric(cls, v):
        return blank_to_none(reject_bool(v))


class Scheme(CamelModel):
    """A government welfare or healthcare scheme.

    Only ``state``, ``category``, ``eligibility`` and ``description`` are
    read by the scorer.  Extra keys are kept so ranked output echoes the
    caller's records unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    state: str
    category: str = ""
    eligibility: str = ""
    description: str = ""

    # Catalog display fields
    name: Optional[str] = None
    benefits: Optional[str] = None
    application_process: Optional[str] = None
    required_documents: list[str] = Field(default_factory=list)
    url: Optional[str] = None


class EligibilityResult(CamelModel):
    """Per-scheme scores plus the filtered, ranked scheme list."""

    scores: dict[int, int]
    ranked: list[Scheme]
