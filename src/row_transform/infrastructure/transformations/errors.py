"""Errors and sentinel values raised or returned by transformation handlers."""

from __future__ import annotations

# Returned in place of a value when a date or phone number cannot be parsed.
INVALID_VALUE = "Invalid"

# Returned when identifier generation fails.
GENERATION_FAILED_VALUE = "-"


class TransformationError(Exception):
    """Base class for failures that abort a field's transformation chain."""


class TransformationConfigError(TransformationError, ValueError):
    """A transformation step is missing a parameter it needs to run."""


class TransformationNotImplementedError(TransformationError, NotImplementedError):
    """The configured transformation (or option) has no implementation."""


__all__ = [
    "INVALID_VALUE",
    "GENERATION_FAILED_VALUE",
    "TransformationError",
    "TransformationConfigError",
    "TransformationNotImplementedError",
]
