"""Risk report — decorates a risk tier with the result-screen guidance.

The scorer only decides the tier.  The report adds what the patient sees:
the tier's title, summary and recommendation from ``risk_levels.yaml``,
the shared next steps, and a short list of key findings drawn from the
answers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from maternal_rulesets.constants import NONE_OPTION
from maternal_rulesets.models.risk import KeyFinding, RiskAnswers, RiskReport, RiskResult
from maternal_rulesets.risk import parse_answers
from maternal_rulesets.ruleset import RulesetStore


def _count_if_reported(values: list[str]) -> int | None:
    # The findings panel hides a list that contains "none" at all
    if values and NONE_OPTION not in values:
        return len(values)
    return None


def key_findings(answers: RiskAnswers, store: RulesetStore) -> list[KeyFinding]:
    """Summarise the answers for the "Key Findings" panel."""
    findings: list[KeyFinding] = []

    if answers.age:
        findings.append(KeyFinding(label="Age", value=f"{answers.age} years"))

    if answers.pregnancy_stage:
        stage_label = answers.pregnancy_stage
        question = store.questions.get("pregnancy_stage")
        if question is not None:
            stage_label = question.option_label(answers.pregnancy_stage) or stage_label
        findings.append(KeyFinding(label="Pregnancy stage", value=stage_label))

    symptom_count = _count_if_reported(answers.symptoms)
    if symptom_count is not None:
        findings.append(KeyFinding(label="Reported symptoms", value=str(symptom_count)))

    condition_count = _count_if_reported(answers.medical_history)
    if condition_count is not None:
        findings.append(KeyFinding(label="Medical conditions", value=str(condition_count)))

    return findings


def build_risk_report(
    answers: RiskAnswers | Mapping[str, Any],
    result: RiskResult,
    store: RulesetStore,
) -> RiskReport:
    """Combine a scored tier with its guidance text and key findings.

    Raises:
        InvalidInput: if *answers* is malformed.
        KeyError: if the store has no guidance for the tier.
    """
    parsed = parse_answers(answers)
    guidance = store.get_risk_level(result.risk_level)
    return RiskReport(
        risk_level=result.risk_level,
        title=guidance.title,
        summary=guidance.summary,
        recommendation=guidance.recommendation,
        key_findings=key_findings(parsed, store),
        next_steps=list(store.next_steps),
    )
