"""FastAPI dependency injection — provides the store and the scorers.

All three are built once during the lifespan handler and stashed on
``app.state``; the scorers are stateless, so sharing them across
requests needs no locking.
"""

from fastapi import Request

from maternal_rulesets.eligibility import EligibilityScorer
from maternal_rulesets.risk import RiskScorer
from maternal_rulesets.ruleset import RulesetStore


def get_store(request: Request) -> RulesetStore:
    """Return the RulesetStore singleton from ``app.state``."""
    return request.app.state.store


def get_risk_scorer(request: Request) -> RiskScorer:
    """Return the RiskScorer singleton from ``app.state``."""
    return request.app.state.risk_scorer


def get_eligibility_scorer(request: Request) -> EligibilityScorer:
    """Return the EligibilityScorer singleton from ``app.state``."""
    return request.app.state.eligibility_scorer
