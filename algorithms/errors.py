"""Errors raised by the matching engine.

Matchers themselves never raise; these come from the run orchestrator and
the algorithm registry.
"""

from typing import Any, Dict, Optional


class MatcherError(Exception):
    """Base class for engine errors.

    Attributes:
        message: Human-readable error message
        context: Extra details (offending value, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class InputError(MatcherError):
    """Empty text or an empty pattern list; the run is aborted before matching."""


class ConfigurationError(MatcherError):
    """Unknown algorithm identifier."""
