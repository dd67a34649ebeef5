"""Pydantic models for reference data in ``v1/``.

  Constants (from v1/const/):
    - Vocabularies: states, categories, occupations, education levels,
      marital statuses offered by the eligibility form
    - RiskLevelGuidance: title/summary/recommendation per risk tier
    - Schemes: see ``models.eligibility.Scheme``

  Rules (from v1/rules/):
    - QuestionnaireQuestion: one question of the risk questionnaire
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, model_validator

from .risk import RiskLevel


class QuestionOption(BaseModel):
    """A selectable answer with its stored value and display label."""

    value: str
    label: str
    description: Optional[str] = None


class QuestionnaireQuestion(BaseModel):
    """Risk questionnaire question from risk_questionnaire.yaml.

    ``type`` maps to the UI widget: single/multiple select, slider, or text.
    Sliders carry ``min``/``max``/``unit``; selects carry ``options``.
    """

    id: str
    text: str
    type: Literal["single", "multiple", "slider", "text"]
    options: List[QuestionOption] = []
    info: Optional[str] = None
    min: Optional[int] = None
    max: Optional[int] = None
    unit: Optional[str] = None

    @model_validator(mode="after")
    def _chk(self):
        if self.type == "slider":
            if self.min is None or self.max is None:
                raise ValueError(f"slider question '{self.id}' needs min and max")
            if self.min >= self.max:
                raise ValueError("min must be < max")
        if self.type in ("single", "multiple") and not self.options:
            raise ValueError(f"select question '{self.id}' has no options")
        return self

    def option_label(self, value: str) -> Optional[str]:
        """Return the label for a stored option value, or None if unknown."""
        for opt in self.options:
            if opt.value == value:
                return opt.label
        return None


class RiskLevelGuidance(BaseModel):
    """Result-screen text for a risk tier from risk_levels.yaml."""

    id: RiskLevel
    title: str
    summary: str
    recommendation: Optional[str] = None


class Vocabularies(BaseModel):
    """Option lists offered by the eligibility form."""

    states: List[str]
    categories: List[str]
    occupations: List[str] = []
    education_levels: List[str] = []
    marital_statuses: List[str] = []
