"""RulesetStore — loads the YAML reference data from ``v1/`` into typed models.

The store is loaded once at startup and is read-only afterwards.  It holds
the scheme catalog, the risk questionnaire definition, the result-screen
guidance for each risk tier, and the option lists of the eligibility form.

Usage::

    store = RulesetStore()          # defaults to v1/ relative to repo root
    store.load()                    # parse all YAML files

    scheme = store.get_scheme(2)
    matches = store.search_schemes("pregnan", state="Gujarat")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from maternal_rulesets.constants import ALL_INDIA, RISK_LEVELS
from maternal_rulesets.models.eligibility import Scheme
from maternal_rulesets.models.schema import (
    QuestionnaireQuestion,
    RiskLevelGuidance,
    Vocabularies,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Utility helpers
# ---------------------------------------------------------------------------

def find_repo_root(start: Optional[Path] = None) -> Path:
    """Walk upwards from *start* to find the repo root (dir with pyproject.toml or .git).

    Falls back to cwd if no marker is found.
    """
    p = (start or Path(__file__).resolve()).parent
    for parent in [p, *p.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent
    return Path.cwd()


def load_yaml(path: Path | str) -> Any:
    """Load a single YAML file and return the parsed contents."""
    if isinstance(path, str):
        path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing YAML file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _build(model, raw: dict, source: str):
    """Validate one YAML record, naming the source file on failure."""
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid record in {source}: {exc}") from exc


# ---------------------------------------------------------------------------
# RulesetStore
# ---------------------------------------------------------------------------

class RulesetStore:
    """Loads all YAML from ``v1/`` and provides typed lookup.

    Attributes populated after :meth:`load`:

        schemes         — dict[id, Scheme] in catalog order
        questions       — dict[id, QuestionnaireQuestion] in questionnaire order
        risk_levels     — dict[level, RiskLevelGuidance]
        vocabularies    — Vocabularies
        next_steps      — list[str] shown under every risk result
    """

    def __init__(self, ruleset_dir: str | Path | None = None) -> None:
        if ruleset_dir is None:
            ruleset_dir = find_repo_root() / "v1"
        self._base = Path(ruleset_dir)

        # Populated by load()
        self.schemes: dict[int, Scheme] = {}
        self.questions: dict[str, QuestionnaireQuestion] = {}
        self.risk_levels: dict[str, RiskLevelGuidance] = {}
        self.vocabularies: Vocabularies | None = None
        self.next_steps: list[str] = []

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Parse all YAML files under the ruleset directory into typed models.

        Call this once at startup.  Raises ``FileNotFoundError`` if expected
        YAML files are missing and ``ValueError`` on malformed records.
        """
        self._load_schemes()
        self._load_vocabularies()
        self._load_risk_levels()
        self._load_questionnaire()
        logger.info(
            "RulesetStore loaded: %d schemes, %d questions, %d risk levels",
            len(self.schemes),
            len(self.questions),
            len(self.risk_levels),
        )

    def _load_schemes(self) -> None:
        """Load v1/const/schemes.yaml — keyed by id, duplicate ids rejected."""
        source = "const/schemes.yaml"
        for raw in load_yaml(self._base / source):
            scheme = _build(Scheme, raw, source)
            if scheme.id in self.schemes:
                raise ValueError(f"Duplicate scheme id {scheme.id} in {source}")
            self.schemes[scheme.id] = scheme

    def _load_vocabularies(self) -> None:
        """Load v1/const/vocabularies.yaml."""
        source = "const/vocabularies.yaml"
        self.vocabularies = _build(Vocabularies, load_yaml(self._base / source), source)

    def _load_risk_levels(self) -> None:
        """Load v1/const/risk_levels.yaml — every tier must be present."""
        source = "const/risk_levels.yaml"
        raw = load_yaml(self._base / source)
        for item in raw["levels"]:
            guidance = _build(RiskLevelGuidance, item, source)
            self.risk_levels[guidance.id] = guidance
        missing = set(RISK_LEVELS) - set(self.risk_levels)
        if missing:
            raise ValueError(f"Missing risk levels in {source}: {sorted(missing)}")
        self.next_steps = list(raw.get("next_steps", []))

    def _load_questionnaire(self) -> None:
        """Load v1/rules/risk_questionnaire.yaml, preserving question order."""
        source = "rules/risk_questionnaire.yaml"
        for raw in load_yaml(self._base / source):
            q = _build(QuestionnaireQuestion, raw, source)
            self.questions[q.id] = q

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------

    def scheme_list(self) -> list[Scheme]:
        """Return the catalog as a list in YAML order."""
        return list(self.schemes.values())

    def get_scheme(self, scheme_id: int) -> Scheme:
        """Look up a scheme by id.

        Raises:
            KeyError: if no scheme has this id.
        """
        return self.schemes[scheme_id]

    def search_schemes(
        self, term: str = "", state: str | None = None
    ) -> list[Scheme]:
        """Filter the catalog the way the schemes page does.

        Args:
            term: matched case-insensitively against name, description and
                  category; an empty term matches everything.
            state: if given, keep schemes of this state or "All India".

        Returns:
            Matching schemes in catalog order.
        """
        needle = term.strip().lower()
        results = []
        for scheme in self.schemes.values():
            haystacks = (scheme.name or "", scheme.description, scheme.category)
            if needle and not any(needle in h.lower() for h in haystacks):
                continue
            if state is not None and scheme.state not in (state, ALL_INDIA):
                continue
            results.append(scheme)
        return results

    def get_question(self, qid: str) -> QuestionnaireQuestion:
        """Look up a questionnaire question by id.

        Raises:
            KeyError: if the question id is unknown.
        """
        return self.questions[qid]

    def get_risk_level(self, level: str) -> RiskLevelGuidance:
        """Look up result-screen guidance for a risk tier.

        Raises:
            KeyError: if the tier is unknown.
        """
        return self.risk_levels[level]
