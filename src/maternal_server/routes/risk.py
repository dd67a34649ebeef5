"""Risk assessment endpoints.

``/score`` returns only the tier; ``/report`` adds the guidance the
result screen shows.  Neither stores anything: keeping the last result
is the caller's job.
"""

from fastapi import APIRouter, Depends

from maternal_rulesets.models.risk import RiskAnswers, RiskReport, RiskResult
from maternal_rulesets.report import build_risk_report
from maternal_rulesets.risk import RiskScorer
from maternal_rulesets.ruleset import RulesetStore

from maternal_server.dependencies import get_risk_scorer, get_store

router = APIRouter(prefix="/risk-assessment", tags=["risk-assessment"])


@router.post("/score", response_model=RiskResult)
def score_risk(
    body: RiskAnswers,
    scorer: RiskScorer = Depends(get_risk_scorer),
) -> RiskResult:
    """Score questionnaire answers into a low / moderate / high tier."""
    return scorer.score(body)


@router.post("/report", response_model=RiskReport)
def risk_report(
    body: RiskAnswers,
    scorer: RiskScorer = Depends(get_risk_scorer),
    store: RulesetStore = Depends(get_store),
) -> RiskReport:
    """Score the answers and return the tier with its guidance text."""
    result = scorer.score(body)
    return build_risk_report(body, result, store)
