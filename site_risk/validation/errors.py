"""Validation error definitions."""

from dataclasses import dataclass


@dataclass
class ValidationError:
    """Represents a validation error with descriptive message.

    At the payload boundary each entry describes one malformed feature record
    that was coerced (or skipped) rather than rejected.
    """

    message: str
    field: str | None = None
    feature_type: str | None = None
    index: int | None = None


class InvalidRiskLevel(ValueError):
    """An unrecognised severity token reached a ranking or display lookup."""


class MalformedFeature(ValueError):
    """A feature record could not be interpreted even after coercion."""
