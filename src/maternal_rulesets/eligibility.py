"""EligibilityScorer — ranks government schemes against a user profile.

Each scheme earns points from independent rules (see ``POINTS`` in
``constants``).  A scheme outside the user's state scores 0 outright.
Free-text rules search the scheme's ``eligibility`` (and, for the
pregnancy/child rules, ``description``) case-insensitively.

The two income rules are tried in order: the BPL rule first, and the
general low-income rule only when the BPL rule did not award points.

Schemes scoring above ``ELIGIBILITY_THRESHOLD`` are returned ranked by
score, highest first; equal scores keep their input order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from maternal_rulesets.constants import (
    ALL_INDIA,
    BPL_INCOME_LIMIT,
    BPL_KEYWORD,
    CHILD_KEYWORD,
    ELIGIBILITY_THRESHOLD,
    FAMILY_KEYWORD,
    LARGE_FAMILY_SIZE,
    LOW_INCOME_KEYWORDS,
    LOW_INCOME_LIMIT,
    MAX_ELIGIBILITY_SCORE,
    MOTHER_AND_CHILD_CATEGORY,
    POINTS,
    PREGNANCY_KEYWORD,
)
from maternal_rulesets.errors import InvalidInput
from maternal_rulesets.models.eligibility import EligibilityResult, Scheme, UserProfile

logger = logging.getLogger(__name__)


def _mentions(text: str, term: str) -> bool:
    """Case-insensitive substring test."""
    return term.lower() in text.lower()


def parse_profile(profile: UserProfile | Mapping[str, Any]) -> UserProfile:
    """Coerce a mapping into ``UserProfile``; raise ``InvalidInput`` on bad shape."""
    if isinstance(profile, UserProfile):
        return profile
    if not isinstance(profile, Mapping):
        raise InvalidInput(f"Profile must be a mapping, got {type(profile).__name__}")
    try:
        return UserProfile.model_validate(dict(profile))
    except ValidationError as exc:
        raise InvalidInput.from_validation_error("profile", exc) from exc


def parse_schemes(schemes: Any) -> list[Scheme]:
    """Validate a list of scheme records; raise ``InvalidInput`` on bad shape."""
    if not isinstance(schemes, (list, tuple)):
        raise InvalidInput(f"Schemes must be a list, got {type(schemes).__name__}")

    parsed: list[Scheme] = []
    seen: set[int] = set()
    for idx, raw in enumerate(schemes):
        if isinstance(raw, Scheme):
            scheme = raw
        else:
            scheme = _parse_scheme(idx, raw)
        if scheme.id in seen:
            raise InvalidInput(f"Duplicate scheme id {scheme.id} at index {idx}")
        seen.add(scheme.id)
        parsed.append(scheme)
    return parsed


def _parse_scheme(idx: int, raw: Any) -> Scheme:
    if not isinstance(raw, Mapping):
        raise InvalidInput(
            f"Scheme at index {idx} must be a mapping, got {type(raw).__name__}"
        )
    try:
        return Scheme.model_validate(dict(raw))
    except ValidationError as exc:
        raise InvalidInput.from_validation_error(f"scheme at index {idx}", exc) from exc


class EligibilityScorer:
    """Stateless scorer for government scheme eligibility."""

    def __init__(self, threshold: int = ELIGIBILITY_THRESHOLD) -> None:
        self.threshold = threshold

    def score(
        self,
        profile: UserProfile | Mapping[str, Any],
        schemes: list[Scheme] | list[Mapping[str, Any]],
    ) -> EligibilityResult:
        """Score every scheme and return the scores plus the ranked shortlist.

        Args:
            profile: a ``UserProfile`` or a mapping of form answers
            schemes: candidate schemes (models or mappings)

        Returns:
            ``EligibilityResult`` with ``scores`` keyed by scheme id and ``ranked``
            holding the schemes scoring above the threshold, best first.

        Raises:
            InvalidInput: if the profile or any scheme is malformed, two
                          schemes share an id, or *schemes* is not a list.
        """
        user = parse_profile(profile)
        candidates = parse_schemes(schemes)

        scores: dict[int, int] = {}
        matched: list[tuple[int, Scheme]] = []
        for scheme in candidates:
            points = self.score_scheme(user, scheme)
            scores[scheme.id] = points
            if points > self.threshold:
                matched.append((points, scheme))

        # list.sort is stable, so ties keep input order
        matched.sort(key=lambda pair: pair[0], reverse=True)
        ranked = [scheme for _, scheme in matched]

        logger.debug(
            "Eligibility scored %d schemes, %d above threshold %d",
            len(candidates), len(ranked), self.threshold,
        )
        return EligibilityResult(scores=scores, ranked=ranked)

    def score_scheme(
        self,
        profile: UserProfile | Mapping[str, Any],
        scheme: Scheme | Mapping[str, Any],
    ) -> int:
        """Return the 0-100 match score of one scheme for *profile*."""
        user = parse_profile(profile)
        if not isinstance(scheme, Scheme):
            scheme = parse_schemes([scheme])[0]

        # State gate: out-of-state schemes are irrelevant
        if scheme.state != user.state and scheme.state != ALL_INDIA:
            return 0
        score = POINTS["state"]

        eligibility = scheme.eligibility
        description = scheme.description
        mother_child = scheme.category == MOTHER_AND_CHILD_CATEGORY

        if user.category and scheme.category == user.category:
            score += POINTS["category"]

        if user.is_pregnant and (
            _mentions(eligibility, PREGNANCY_KEYWORD)
            or _mentions(description, PREGNANCY_KEYWORD)
            or mother_child
        ):
            score += POINTS["pregnancy"]

        if user.has_children and (
            _mentions(eligibility, CHILD_KEYWORD)
            or _mentions(description, CHILD_KEYWORD)
            or mother_child
        ):
            score += POINTS["children"]

        score += self._income_points(user.income, eligibility)

        if user.occupation and _mentions(eligibility, user.occupation):
            score += POINTS["occupation"]

        if (
            user.family_size is not None
            and user.family_size > LARGE_FAMILY_SIZE
            and _mentions(eligibility, FAMILY_KEYWORD)
        ):
            score += POINTS["family_size"]

        if user.marital_status and _mentions(eligibility, user.marital_status):
            score += POINTS["marital_status"]

        if user.education and _mentions(eligibility, user.education):
            score += POINTS["education"]

        return min(score, MAX_ELIGIBILITY_SCORE)

    @staticmethod
    def _income_points(income: int | None, eligibility: str) -> int:
        """Points from the BPL rule, else from the general low-income rule."""
        if income is None:
            return 0
        if income < BPL_INCOME_LIMIT and _mentions(eligibility, BPL_KEYWORD):
            return POINTS["bpl_income"]
        if income < LOW_INCOME_LIMIT and any(
            _mentions(eligibility, kw) for kw in LOW_INCOME_KEYWORDS
        ):
            return POINTS["low_income"]
        return 0
