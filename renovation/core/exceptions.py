"""Custom exceptions for renovation.

Domain-specific exception types raised at the input and runner boundaries.
The simulation itself never raises: out-of-range values are clamped or
accepted as-is.
"""

from __future__ import annotations

from typing import Any


class RenovationError(Exception):
    """Base exception for all renovation errors."""
    pass


# --- Input Errors ---

class InvalidPlanError(RenovationError):
    """A renovation plan or building description could not be validated."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)


# --- Runner Errors ---

class ScenarioNotFoundError(RenovationError):
    """Requested scenario is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown scenario '{name}'")


# --- Configuration Errors ---

class ConfigurationError(RenovationError):
    """Error in application configuration."""
    pass
