"""The one error kind raised to callers."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Input of the wrong type or shape, rejected at the API boundary."""
