"""RiskScorer — maps questionnaire answers to a pregnancy risk tier.

Tiers are checked in order; the first match wins:

  - **high**: reported bleeding, or blurred vision together with a history
    of hypertension (the pre-eclampsia pattern)
  - **moderate**: any reported symptom, any medical condition, or a
    maternal age outside 20-35
  - **low**: everything else

Symptom and condition membership is tested literally against the
submitted lists.  "none" only cancels a list when it is the sole entry, so
an inconsistent ``["none", "bleeding"]`` still scores high.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from maternal_rulesets.constants import (
    BLEEDING_SYMPTOM,
    DEFAULT_AGE,
    HIGH_RISK_AGE_MAX,
    HIGH_RISK_AGE_MIN,
    HYPERTENSION_CONDITION,
    NONE_OPTION,
    VISION_SYMPTOM,
)
from maternal_rulesets.errors import InvalidInput
from maternal_rulesets.models.risk import RiskAnswers, RiskLevel, RiskResult

logger = logging.getLogger(__name__)


def has_selections(values: list[str]) -> bool:
    """True if a multi-select answer holds anything other than a lone "none"."""
    return bool(values) and set(values) != {NONE_OPTION}


def is_high_risk_age(age: int | None) -> bool:
    """True if the maternal age is below 20 or above 35 (absent → 30)."""
    if age is None:
        age = DEFAULT_AGE
    return age < HIGH_RISK_AGE_MIN or age > HIGH_RISK_AGE_MAX


def parse_answers(answers: RiskAnswers | Mapping[str, Any]) -> RiskAnswers:
    """Coerce a mapping into ``RiskAnswers``; raise ``InvalidInput`` on bad shape."""
    if isinstance(answers, RiskAnswers):
        return answers
    if not isinstance(answers, Mapping):
        raise InvalidInput(
            f"Risk answers must be a mapping, got {type(answers).__name__}"
        )
    try:
        return RiskAnswers.model_validate(dict(answers))
    except ValidationError as exc:
        raise InvalidInput.from_validation_error("risk answers", exc) from exc


class RiskScorer:
    """Stateless scorer for the pregnancy risk questionnaire."""

    def score(self, answers: RiskAnswers | Mapping[str, Any]) -> RiskResult:
        """Return the risk tier for a questionnaire answer set.

        Args:
            answers: a ``RiskAnswers`` model or a plain mapping using either
                     camelCase (``medicalHistory``) or snake_case keys.

        Raises:
            InvalidInput: if *answers* is not a mapping or has malformed fields.
        """
        parsed = parse_answers(answers)
        level = self._classify(parsed)
        logger.debug(
            "Risk scored %s (age=%s, symptoms=%s, history=%s)",
            level, parsed.age, parsed.symptoms, parsed.medical_history,
        )
        return RiskResult(risk_level=level)

    @staticmethod
    def _classify(answers: RiskAnswers) -> RiskLevel:
        symptoms = answers.symptoms
        history = answers.medical_history

        has_symptoms = has_selections(symptoms)
        has_conditions = has_selections(history)

        if has_symptoms and BLEEDING_SYMPTOM in symptoms:
            return "high"
        if (
            has_symptoms
            and VISION_SYMPTOM in symptoms
            and has_conditions
            and HYPERTENSION_CONDITION in history
        ):
            return "high"

        if has_symptoms or has_conditions or is_high_risk_age(answers.age):
            return "moderate"
        return "low"
