"""RiskScorer unit tests — tier rules, defaults, and input validation.

Tier reference (first match wins):
    high      — bleeding, or vision + hypertension history
    moderate  — any symptom, any condition, or age < 20 / > 35
    low       — everything else

Missing age defaults to 30.  "none" only cancels a list when it is the
sole entry.
"""

import pytest

from maternal_rulesets.errors import InvalidInput
from maternal_rulesets.models.risk import RiskAnswers
from maternal_rulesets.risk import RiskScorer, has_selections, is_high_risk_age


@pytest.fixture
def scorer():
    """Fresh RiskScorer for each test."""
    return RiskScorer()


def _level(scorer, **answers):
    """Shorthand: score keyword answers and return the tier string."""
    return scorer.score(answers).risk_level


# =====================================================================
# Helpers
# =====================================================================


class TestHelpers:
    """Unit tests for the selection and age predicates."""

    def test_has_selections(self):
        assert has_selections(["headache"]) is True
        assert has_selections(["none"]) is False
        assert has_selections([]) is False
        assert has_selections(["none", "none"]) is False
        assert has_selections(["none", "fever"]) is True

    @pytest.mark.parametrize("age", [0, 18, 19, 36, 50, 120])
    def test_high_risk_age(self, age):
        assert is_high_risk_age(age) is True

    @pytest.mark.parametrize("age", [20, 28, 35])
    def test_normal_age(self, age):
        assert is_high_risk_age(age) is False

    def test_missing_age_defaults_to_normal(self):
        assert is_high_risk_age(None) is False


# =====================================================================
# Tier rules
# =====================================================================


class TestHighRisk:
    """Inputs that must score high."""

    @pytest.mark.parametrize("age", [18, 28, 45])
    def test_bleeding_is_high_regardless_of_age(self, scorer, age):
        assert _level(scorer, age=age, symptoms=["bleeding"]) == "high"

    def test_bleeding_with_other_symptoms_and_conditions(self, scorer):
        level = _level(
            scorer,
            age=28,
            symptoms=["headache", "bleeding", "fever"],
            medical_history=["diabetes"],
        )
        assert level == "high"

    def test_vision_with_hypertension(self, scorer):
        level = _level(scorer, symptoms=["vision"], medicalHistory=["hypertension"])
        assert level == "high"

    def test_vision_with_hypertension_among_other_conditions(self, scorer):
        level = _level(
            scorer,
            symptoms=["swelling", "vision"],
            medical_history=["asthma", "hypertension"],
        )
        assert level == "high"

    def test_none_plus_bleeding_still_high(self, scorer):
        """Membership is literal: an inconsistent ["none", "bleeding"] is high."""
        assert _level(scorer, age=28, symptoms=["none", "bleeding"]) == "high"

    def test_none_plus_hypertension_history_still_counts(self, scorer):
        level = _level(
            scorer, symptoms=["vision"], medical_history=["none", "hypertension"]
        )
        assert level == "high"


class TestModerateRisk:
    """Inputs that must score moderate."""

    def test_vision_without_hypertension(self, scorer):
        assert _level(scorer, age=28, symptoms=["vision"]) == "moderate"

    def test_vision_with_other_condition(self, scorer):
        level = _level(scorer, age=28, symptoms=["vision"], medical_history=["diabetes"])
        assert level == "moderate"

    def test_hypertension_without_vision(self, scorer):
        level = _level(scorer, age=28, symptoms=["headache"], medical_history=["hypertension"])
        assert level == "moderate"

    def test_hypertension_with_only_none_symptoms(self, scorer):
        """vision + hypertension needs hasSymptoms; a lone "none" is not one."""
        level = _level(scorer, age=28, symptoms=["none"], medical_history=["hypertension"])
        assert level == "moderate"

    def test_single_mild_symptom(self, scorer):
        assert _level(scorer, age=28, symptoms=["headache"]) == "moderate"

    def test_condition_only(self, scorer):
        assert _level(scorer, age=28, medical_history=["anemia"]) == "moderate"

    @pytest.mark.parametrize("age", [16, 18, 19, 36, 40, 50])
    def test_age_outside_range_alone(self, scorer, age):
        level = _level(scorer, age=age, symptoms=["none"], medical_history=["none"])
        assert level == "moderate"


class TestLowRisk:
    """Inputs that must score low."""

    def test_none_none_age_28(self, scorer):
        level = _level(scorer, age=28, symptoms=["none"], medical_history=["none"])
        assert level == "low"

    @pytest.mark.parametrize("age", [20, 35])
    def test_age_boundaries_are_normal(self, scorer, age):
        assert _level(scorer, age=age) == "low"

    def test_empty_answers(self, scorer):
        """Everything missing: age defaults to 30, lists default to empty."""
        assert _level(scorer) == "low"

    def test_null_lists(self, scorer):
        assert _level(scorer, age=25, symptoms=None, medicalHistory=None) == "low"

    def test_informational_fields_not_scored(self, scorer):
        level = _level(
            scorer,
            age=28,
            pregnancyStage="third",
            previousPregnancies="3_plus",
            symptoms=[],
            medical_history=[],
        )
        assert level == "low"


# =====================================================================
# Input handling
# =====================================================================


class TestInput:
    """Accepted input shapes and InvalidInput cases."""

    def test_accepts_model(self, scorer):
        answers = RiskAnswers(age=40, symptoms=["none"])
        assert scorer.score(answers).risk_level == "moderate"

    def test_accepts_snake_and_camel_keys(self, scorer):
        snake = scorer.score({"medical_history": ["thyroid"], "age": 28})
        camel = scorer.score({"medicalHistory": ["thyroid"], "age": 28})
        assert snake == camel
        assert snake.risk_level == "moderate"

    def test_accepts_sets(self, scorer):
        assert _level(scorer, symptoms={"vision"}, medical_history={"hypertension"}) == "high"

    def test_numeric_string_age_coerced(self, scorer):
        assert _level(scorer, age="40") == "moderate"

    def test_idempotent(self, scorer):
        answers = {"age": 33, "symptoms": ["fever"], "medicalHistory": ["none"]}
        assert scorer.score(answers) == scorer.score(answers)

    def test_does_not_mutate_input(self, scorer):
        answers = {"age": 28, "symptoms": ["none", "bleeding"]}
        scorer.score(answers)
        assert answers == {"age": 28, "symptoms": ["none", "bleeding"]}

    @pytest.mark.parametrize("bad", [None, "high", 42, ["bleeding"]])
    def test_non_mapping_rejected(self, scorer, bad):
        with pytest.raises(InvalidInput):
            scorer.score(bad)

    @pytest.mark.parametrize(
        "answers",
        [
            {"age": "old"},
            {"age": 28.5},
            {"symptoms": "bleeding"},
            {"symptoms": [1, 2]},
            {"pregnancyStage": "fourth"},
            {"age": True},
            {"age": False},
        ],
    )
    def test_malformed_fields_rejected(self, scorer, answers):
        with pytest.raises(InvalidInput):
            scorer.score(answers)

    def test_invalid_input_is_value_error(self, scorer):
        with pytest.raises(ValueError):
            scorer.score({"age": "old"})

    def test_serialises_with_camel_alias(self, scorer):
        result = scorer.score({"age": 28})
        assert result.model_dump(by_alias=True) == {"riskLevel": "low"}
