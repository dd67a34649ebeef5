"""Scoring constants shared across the SDK.

These values are referenced by the risk scorer, the eligibility scorer,
and the ruleset store.  They mirror the rules of the maternal-care portal's
questionnaire and scheme finder.

The age and eligibility thresholds can be overridden via environment
variables so that deployments can adjust them without code changes.
"""

import os

# Risk tiers ordered from least to most severe.
RISK_LEVELS: list[str] = ["low", "moderate", "high"]

# Maternal age outside [HIGH_RISK_AGE_MIN, HIGH_RISK_AGE_MAX] counts as a
# risk factor.  Both bounds are exclusive triggers (age < MIN or age > MAX).
HIGH_RISK_AGE_MIN = int(os.getenv("HIGH_RISK_AGE_MIN", "20"))
HIGH_RISK_AGE_MAX = int(os.getenv("HIGH_RISK_AGE_MAX", "35"))

# Age assumed when the questionnaire omits it.  Must sit inside the
# normal range so a missing age is never a risk factor on its own.
DEFAULT_AGE = int(os.getenv("DEFAULT_AGE", "30"))

# Sentinel option for "None of the above" in multi-select answers.
NONE_OPTION = "none"

# Answer values that drive the high-risk tier.
BLEEDING_SYMPTOM = "bleeding"
VISION_SYMPTOM = "vision"
HYPERTENSION_CONDITION = "hypertension"

# --- Eligibility ---

# Scheme state that matches every profile.
ALL_INDIA = "All India"

# Category that counts as both pregnancy- and child-relevant.
MOTHER_AND_CHILD_CATEGORY = "Mother and Child Welfare"

# Schemes must score strictly above this to be listed.
ELIGIBILITY_THRESHOLD = int(os.getenv("ELIGIBILITY_THRESHOLD", "30"))
MAX_ELIGIBILITY_SCORE = 100

# Income ceilings (annual household income, INR).
BPL_INCOME_LIMIT = 100_000
LOW_INCOME_LIMIT = 300_000

# Family size above which "family" schemes get a bonus.
LARGE_FAMILY_SIZE = 3

# Points awarded per matching rule.
POINTS: dict[str, int] = {
    "state": 30,
    "category": 25,
    "pregnancy": 20,
    "children": 15,
    "bpl_income": 15,
    "low_income": 10,
    "occupation": 5,
    "family_size": 5,
    "marital_status": 5,
    "education": 5,
}

# Eligibility-text keywords, matched case-insensitively.
PREGNANCY_KEYWORD = "pregnant"
CHILD_KEYWORD = "child"
BPL_KEYWORD = "bpl"
LOW_INCOME_KEYWORDS: tuple[str, ...] = ("low income", "economically")
FAMILY_KEYWORD = "family"

# Fixed category vocabulary used by profiles and schemes.
SCHEME_CATEGORIES: list[str] = [
    "Financial Assistance",
    "Healthcare",
    "Health Insurance",
    "Mother and Child Welfare",
    "Education",
    "Housing",
    "Employment",
]
