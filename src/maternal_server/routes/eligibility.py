"""Scheme eligibility endpoints.

``/score`` scores caller-supplied schemes; ``/check`` scores the catalog
loaded from ``v1/const/schemes.yaml``.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from maternal_rulesets.eligibility import EligibilityScorer
from maternal_rulesets.models.eligibility import EligibilityResult, Scheme, UserProfile
from maternal_rulesets.ruleset import RulesetStore

from maternal_server.dependencies import get_eligibility_scorer, get_store

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


# ------------------------------------------------------------------
# Request models
# ------------------------------------------------------------------

class EligibilityScoreRequest(BaseModel):
    """Body for POST /eligibility/score."""
    profile: UserProfile
    schemes: list[Scheme]


class EligibilityCheckRequest(BaseModel):
    """Body for POST /eligibility/check."""
    profile: UserProfile


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.post(
    "/score", response_model=EligibilityResult, response_model_exclude_unset=True
)
def score_eligibility(
    body: EligibilityScoreRequest,
    scorer: EligibilityScorer = Depends(get_eligibility_scorer),
) -> EligibilityResult:
    """Score the given schemes against the profile.

    ``scores`` covers every scheme; ``ranked`` holds those scoring above
    the threshold, best match first. Ranked records are echoed with only
    the fields the caller sent.
    """
    return scorer.score(body.profile, body.schemes)


@router.post(
    "/check", response_model=EligibilityResult, response_model_exclude_unset=True
)
def check_catalog(
    body: EligibilityCheckRequest,
    scorer: EligibilityScorer = Depends(get_eligibility_scorer),
    store: RulesetStore = Depends(get_store),
) -> EligibilityResult:
    """Score the built-in scheme catalog against the profile."""
    return scorer.score(body.profile, store.scheme_list())
