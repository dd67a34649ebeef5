"""SDK error types.

``InvalidInput`` is the only error the scoring engines raise.  It subclasses
``ValueError`` so callers that already catch ``ValueError`` keep working.
"""

from __future__ import annotations

from pydantic import ValidationError


class InvalidInput(ValueError):
    """Raised when a scorer receives structurally malformed input.

    Sparse-but-well-formed input (missing optional fields) is never an
    error; the engines fill in defaults instead.
    """

    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, what: str, exc: ValidationError) -> "InvalidInput":
        """Wrap a Pydantic ``ValidationError`` raised while parsing *what*."""
        errors = exc.errors(include_url=False)
        locs = ", ".join(".".join(str(p) for p in e["loc"]) or "<root>" for e in errors)
        return cls(f"Invalid {what}: {locs}", errors=errors)
