"""
Error types raised by the Swiss engine.
"""
from typing import List, Optional


class SwissError(Exception):
    """Base class for errors surfaced to the admin caller."""


class ConfigurationError(SwissError):
    """Invalid static input, e.g. a round number outside the pairing table."""


class NotFoundError(SwissError):
    """Unknown season id."""


class PreconditionError(SwissError):
    """Operation not allowed in the season's current state."""


class ValidationError(SwissError):
    """A seeding write whose team set does not match the season roster."""

    def __init__(self, message: str, missing: Optional[List[str]] = None,
                 extra: Optional[List[str]] = None, duplicates: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = missing or []
        self.extra = extra or []
        self.duplicates = duplicates or []


class DataIntegrityWarning(UserWarning):
    """A game references a team that is not on the season roster."""
