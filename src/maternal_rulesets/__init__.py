"""maternal_rulesets — Rule-based maternal-care scoring SDK.

Public API:
    RiskScorer         — questionnaire answers → low / moderate / high tier
    EligibilityScorer  — user profile × schemes → scores and ranked shortlist
    RulesetStore       — loads YAML reference data (schemes, questionnaire)
    build_risk_report  — decorates a risk tier with result-screen guidance
    InvalidInput       — the only error the scorers raise

Models:
    RiskAnswers, RiskResult, RiskReport
    UserProfile, Scheme, EligibilityResult
"""

from maternal_rulesets.eligibility import EligibilityScorer
from maternal_rulesets.errors import InvalidInput
from maternal_rulesets.models.eligibility import (
    EligibilityResult,
    Scheme,
    UserProfile,
)
from maternal_rulesets.models.risk import RiskAnswers, RiskReport, RiskResult
from maternal_rulesets.report import build_risk_report
from maternal_rulesets.risk import RiskScorer
from maternal_rulesets.ruleset import RulesetStore

__all__ = [
    # Engines & store
    "EligibilityScorer",
    "RiskScorer",
    "RulesetStore",
    "build_risk_report",
    # Errors
    "InvalidInput",
    # Models
    "EligibilityResult",
    "RiskAnswers",
    "RiskReport",
    "RiskResult",
    "Scheme",
    "UserProfile",
]
