"""Risk questionnaire models.

``RiskAnswers`` is the answer set collected by the pregnancy risk
questionnaire (age slider, two single-selects, two multi-selects).
``RiskResult`` is the scorer's output; ``RiskReport`` adds the guidance
shown on the result screen.
"""

from typing import Literal, Optional, Union

from pydantic import Field, field_validator

from .base import CamelModel, blank_to_none, reject_bool

RiskLevel = Literal["low", "moderate", "high"]

PregnancyStage = Literal["first", "second", "third", "not_pregnant"]


class RiskAnswers(CamelModel):
    """Answers to the risk questionnaire.

    Only ``age``, ``symptoms`` and ``medical_history`` are scored;
    ``pregnancy_stage`` and ``previous_pregnancies`` are carried for the
    report.  Missing multi-selects mean "nothing selected".
    """

    age: Optional[int] = None
    pregnancy_stage: Optional[PregnancyStage] = None
    # "0", "1", "2", "3_plus" (the form posts strings; ints are accepted too)
    previous_pregnancies: Optional[Union[int, str]] = None
    symptoms: list[str] = Field(default_factory=list)
    medical_history: list[str] = Field(default_factory=list)

    @field_validator("pregnancy_stage", "previous_pregnancies", mode="before")
    @classmethod
    def _blank(cls, v):
        return blank_to_none(v)

    @field_validator("age", mode="before")
    @classmethod
    def _numeric(cls, v):
        return blank_to_none(reject_bool(v))

    @field_validator("symptoms", "medical_history", mode="before")
    @classmethod
    def _absent_list(cls, v):
        return [] if v is None else v


class RiskResult(CamelModel):
    """Scorer output: the risk tier."""

    risk_level: RiskLevel


class KeyFinding(CamelModel):
    """One line of the "Key Findings" panel."""

    label: str
    value: str


class RiskReport(CamelModel):
    """Risk tier plus the guidance shown to the patient."""

    risk_level: RiskLevel
    title: str
    summary: str
    # Only high and moderate tiers carry an urgent recommendation
    recommendation: Optional[str] = None
    key_findings: list[KeyFinding] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
