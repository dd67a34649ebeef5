#!/usr/bin/env python3
"""Simulate the risk questionnaire and the scheme finder end-to-end.

Builds questionnaire answers and eligibility profiles, runs them through
``RiskScorer`` and ``EligibilityScorer`` against the catalog in ``v1/``,
and prints a rich audit of every answer, tier, and scheme score.

By default answers and profiles are **randomised** from the option lists in
the rulesets, so each run explores a different combination.  Use
``--no-random`` for a fixed pair of cases.

Usage::

    # Default run (3 random cases)
    python scripts/simulate_scoring.py

    # Deterministic run
    python scripts/simulate_scoring.py --no-random

    # Reproducible random run with more cases
    python scripts/simulate_scoring.py -n 10 --seed 42

    # Verbose mode (print raw JSON payloads)
    python scripts/simulate_scoring.py -v
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import Any

# ---------------------------------------------------------------------------
# Ensure src/ is on sys.path so the SDK imports without installation.
# ---------------------------------------------------------------------------
_SCRIPT_DIR = Path(__file__).resolve().parent
_REPO_ROOT = _SCRIPT_DIR.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from rich.console import Console  # noqa: E402
from rich.table import Table  # noqa: E402

from maternal_rulesets.constants import NONE_OPTION  # noqa: E402
from maternal_rulesets.eligibility import EligibilityScorer  # noqa: E402
from maternal_rulesets.report import build_risk_report  # noqa: E402
from maternal_rulesets.risk import RiskScorer  # noqa: E402
from maternal_rulesets.ruleset import RulesetStore  # noqa: E402

# ---------------------------------------------------------------------------
# Fixed cases for --no-random
# ---------------------------------------------------------------------------

FIXED_CASES: list[tuple[dict[str, Any], dict[str, Any]]] = [
    (
        {
            "age": 28,
            "pregnancyStage": "second",
            "previousPregnancies": "1",
            "symptoms": ["none"],
            "medicalHistory": ["none"],
        },
        {"state": "Gujarat", "income": 80000, "isPregnant": True, "category": "Healthcare"},
    ),
    (
        {
            "age": 37,
            "pregnancyStage": "third",
            "previousPregnancies": "3_plus",
            "symptoms": ["vision", "swelling"],
            "medicalHistory": ["hypertension"],
        },
        {
            "state": "Telangana",
            "income": 250000,
            "isPregnant": True,
            "hasChildren": True,
            "category": "Mother and Child Welfare",
            "familySize": 5,
        },
    ),
]

_TIER_STYLE = {"low": "green", "moderate": "yellow", "high": "red"}


# ---------------------------------------------------------------------------
# Random case generation
# ---------------------------------------------------------------------------

def _random_multi(rng: random.Random, values: list[str]) -> list[str]:
    """Pick a multi-select answer the way the form allows: "none" alone or a subset."""
    choices = [v for v in values if v != NONE_OPTION]
    if rng.random() < 0.35:
        return [NONE_OPTION]
    return rng.sample(choices, k=rng.randint(1, 3))


def random_answers(rng: random.Random, store: RulesetStore) -> dict[str, Any]:
    """Build questionnaire answers from the option lists in the store."""
    age_q = store.get_question("age")

    def values(qid: str) -> list[str]:
        return [o.value for o in store.get_question(qid).options]

    return {
        "age": rng.randint(age_q.min, age_q.max),
        "pregnancyStage": rng.choice(values("pregnancy_stage")),
        "previousPregnancies": rng.choice(values("previous_pregnancies")),
        "symptoms": _random_multi(rng, values("symptoms")),
        "medicalHistory": _random_multi(rng, values("medical_history")),
    }


def random_profile(rng: random.Random, store: RulesetStore) -> dict[str, Any]:
    """Build an eligibility profile from the vocabularies in the store."""
    vocab = store.vocabularies
    profile: dict[str, Any] = {
        "state": rng.choice(vocab.states),
        "income": rng.choice([45000, 90000, 150000, 280000, 600000]),
        "isPregnant": rng.random() < 0.7,
        "hasChildren": rng.random() < 0.5,
        "familySize": rng.randint(1, 7),
    }
    if rng.random() < 0.6:
        profile["category"] = rng.choice(vocab.categories)
    if rng.random() < 0.4:
        profile["occupation"] = rng.choice(vocab.occupations)
    if rng.random() < 0.4:
        profile["maritalStatus"] = rng.choice(vocab.marital_statuses)
    return profile


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def print_case(
    console: Console,
    idx: int,
    answers: dict[str, Any],
    profile: dict[str, Any],
    store: RulesetStore,
    verbose: bool,
) -> str:
    """Score one case, print it, and return the risk tier."""
    risk_scorer = RiskScorer()
    eligibility_scorer = EligibilityScorer()

    console.rule(f"[bold]Case {idx}")

    result = risk_scorer.score(answers)
    report = build_risk_report(answers, result, store)
    style = _TIER_STYLE[result.risk_level]

    console.print(f"  [dim]Answers:[/] age={answers.get('age')} "
                  f"symptoms={answers.get('symptoms')} "
                  f"history={answers.get('medicalHistory')}")
    console.print(f"  → [{style}]{report.title}[/]")
    if report.recommendation:
        console.print(f"    {report.recommendation}")
    for finding in report.key_findings:
        console.print(f"    [dim]{finding.label}:[/] {finding.value}")

    eligibility = eligibility_scorer.score(profile, store.scheme_list())
    ranked_ids = {s.id for s in eligibility.ranked}

    table = Table(title=f"Schemes for {profile['state']}", show_lines=False)
    table.add_column("#", style="dim", width=4)
    table.add_column("Scheme", min_width=30)
    table.add_column("State", min_width=12)
    table.add_column("Score", width=6, justify="right")
    table.add_column("Listed", width=7)
    for scheme in store.scheme_list():
        score = eligibility.scores[scheme.id]
        listed = "[green]yes[/]" if scheme.id in ranked_ids else "[dim]no[/]"
        table.add_row(str(scheme.id), scheme.name or "", scheme.state, str(score), listed)
    console.print(table)

    if verbose:
        console.print("    [dim]Profile:[/]")
        console.print(f"    {json.dumps(profile, indent=2)}")
        console.print("    [dim]Report:[/]")
        console.print(f"    {report.model_dump_json(by_alias=True, indent=2)}")

    return result.risk_level


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate risk scoring and scheme matching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-n", "--runs", type=int, default=3,
        help="Number of random cases (ignored with --no-random)",
    )
    parser.add_argument(
        "--random", dest="randomize", action="store_true", default=True,
        help="Randomise answers and profiles (default)",
    )
    parser.add_argument(
        "--no-random", dest="randomize", action="store_false",
        help="Use the fixed cases",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="RNG seed for reproducible runs",
    )
    parser.add_argument(
        "--ruleset-dir", default=None,
        help="Ruleset directory (default: v1/ under the repo root)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Print raw profile and report JSON",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    console = Console()

    store = RulesetStore(ruleset_dir=args.ruleset_dir)
    store.load()

    if args.randomize:
        seed = args.seed if args.seed is not None else random.randrange(2**32)
        console.print(f"[dim]RNG seed: {seed}[/]")
        rng = random.Random(seed)
        cases = [(random_answers(rng, store), random_profile(rng, store)) for _ in range(args.runs)]
    else:
        cases = FIXED_CASES

    tiers: dict[str, int] = {level: 0 for level in _TIER_STYLE}
    for idx, (answers, profile) in enumerate(cases, start=1):
        tiers[print_case(console, idx, answers, profile, store, args.verbose)] += 1

    console.print()
    console.rule("[bold]Summary")
    for level, count in tiers.items():
        console.print(f"  [{_TIER_STYLE[level]}]{level:<9}[/] {count}")


if __name__ == "__main__":
    main()
