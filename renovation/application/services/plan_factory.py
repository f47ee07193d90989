"""Renovation plan factory.

Builds improvements and buildings from plain dictionaries, e.g. entries
loaded from a scenario file:

    {"kind": "solar_panels", "panel_area": 30}
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import TypeAdapter, ValidationError

from renovation.core.exceptions import InvalidPlanError
from renovation.core.logging import get_logger
from renovation.domain.models.building import Building
from renovation.domain.models.improvement import Improvement, ImprovementPlan

log = get_logger(__name__)

_improvement_adapter: TypeAdapter[Improvement] = TypeAdapter(ImprovementPlan)
_plan_adapter: TypeAdapter[tuple[Improvement, ...]] = TypeAdapter(tuple[ImprovementPlan, ...])


def create_improvement(entry: dict[str, Any]) -> Improvement:
    """Validate a single plan entry into its improvement variant.

    Raises:
        InvalidPlanError: If the kind is unknown or the parameter is invalid.
    """
    try:
        return _improvement_adapter.validate_python(entry)
    except ValidationError as e:
        log.warning("invalid_improvement", entry=entry, error_count=e.error_count())
        raise InvalidPlanError(f"Invalid improvement {entry!r}", errors=e.errors()) from e


def create_renovation_plan(entries: Iterable[dict[str, Any]]) -> tuple[Improvement, ...]:
    """Validate plan entries, keeping their order.

    Raises:
        InvalidPlanError: If the plan is not a sequence or an entry is invalid.
    """
    try:
        return _plan_adapter.validate_python(entries)
    except ValidationError as e:
        log.warning("invalid_renovation_plan", error_count=e.error_count())
        raise InvalidPlanError("Invalid renovation plan", errors=e.errors()) from e


def create_building(data: dict[str, Any]) -> Building:
    """Create a building and its renovation plan from a dictionary.

    Args:
        data: The four numeric attributes plus an optional
            ``renovation_plan`` list of entries.

    Returns:
        Validated building (efficiency already clamped).

    Raises:
        InvalidPlanError: If any attribute or plan entry is invalid.
    """
    payload = dict(data)
    payload["renovation_plan"] = create_renovation_plan(payload.get("renovation_plan") or [])

    try:
        building = Building(**payload)
    except ValidationError as e:
        log.warning("invalid_building", error_count=e.error_count())
        raise InvalidPlanError("Invalid building description", errors=e.errors()) from e

    log.info("building_created", improvements=len(building.renovation_plan))
    return building
