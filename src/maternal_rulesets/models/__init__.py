"""Public model re-exports for maternal_rulesets.

Consumers should import from ``maternal_rulesets.models`` rather than
reaching into sub-modules directly.
"""

# --- Risk questionnaire ---
from maternal_rulesets.models.risk import (
    KeyFinding,
    PregnancyStage,
    RiskAnswers,
    RiskLevel,
    RiskReport,
    RiskResult,
)

# --- Scheme eligibility ---
from maternal_rulesets.models.eligibility import (
    EligibilityResult,
    Scheme,
    UserProfile,
)

# --- Reference data ---
from maternal_rulesets.models.schema import (
    QuestionnaireQuestion,
    QuestionOption,
    RiskLevelGuidance,
    Vocabularies,
)

__all__ = [
    # Risk
    "KeyFinding",
    "PregnancyStage",
    "RiskAnswers",
    "RiskLevel",
    "RiskReport",
    "RiskResult",
    # Eligibility
    "EligibilityResult",
    "Scheme",
    "UserProfile",
    # Reference data
    "QuestionnaireQuestion",
    "QuestionOption",
    "RiskLevelGuidance",
    "Vocabularies",
]
