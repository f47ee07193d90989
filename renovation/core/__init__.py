"""Core constants, settings, logging and exceptions."""

from .constants import EFFICIENCY_CAP, MAX_BOOST_FRACTION
from .exceptions import (
    ConfigurationError,
    InvalidPlanError,
    RenovationError,
    ScenarioNotFoundError,
)

__all__ = [
    "EFFICIENCY_CAP",
    "MAX_BOOST_FRACTION",
    # Exceptions
    "RenovationError",
    "InvalidPlanError",
    "ScenarioNotFoundError",
    "ConfigurationError",
]
