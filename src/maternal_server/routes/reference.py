"""Reference data endpoints — schemes, questionnaire, vocabularies, risk levels.

These are read-only endpoints that expose the data loaded from ``v1/``.
They don't require authentication since the data is public reference
information.
"""

from fastapi import APIRouter, Depends, Query

from maternal_rulesets.models.eligibility import Scheme
from maternal_rulesets.models.schema import (
    QuestionnaireQuestion,
    RiskLevelGuidance,
    Vocabularies,
)
from maternal_rulesets.ruleset import RulesetStore

from maternal_server.dependencies import get_store

router = APIRouter(prefix="/reference", tags=["reference"])


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("/schemes", response_model=list[Scheme])
def list_schemes(
    q: str = Query("", description="Search term for name, description or category"),
    state: str | None = Query(None, description="Keep schemes of this state or All India"),
    store: RulesetStore = Depends(get_store),
) -> list[Scheme]:
    """Return catalog schemes, optionally filtered by search term and state."""
    return store.search_schemes(q, state=state)


@router.get("/schemes/{scheme_id}", response_model=Scheme)
def get_scheme(
    scheme_id: int,
    store: RulesetStore = Depends(get_store),
) -> Scheme:
    """Return a single catalog scheme; 404 if the id is unknown."""
    return store.get_scheme(scheme_id)


@router.get("/questionnaire", response_model=list[QuestionnaireQuestion])
def list_questions(
    store: RulesetStore = Depends(get_store),
) -> list[QuestionnaireQuestion]:
    """Return the risk questionnaire in the order it is asked."""
    return list(store.questions.values())


@router.get("/vocabularies", response_model=Vocabularies)
def get_vocabularies(
    store: RulesetStore = Depends(get_store),
) -> Vocabularies:
    """Return the option lists used by the eligibility form."""
    return store.vocabularies


@router.get("/risk-levels", response_model=list[RiskLevelGuidance])
def list_risk_levels(
    store: RulesetStore = Depends(get_store),
) -> list[RiskLevelGuidance]:
    """Return the result-screen guidance for every risk tier."""
    return list(store.risk_levels.values())
