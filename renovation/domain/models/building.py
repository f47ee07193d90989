"""Building data model.

A building carries four numeric attributes and owns the ordered renovation
plan that will be applied to it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from renovation.core.constants import EFFICIENCY_CAP
from renovation.core.logging import get_logger
from renovation.domain.models.improvement import ImprovementPlan

log = get_logger(__name__)


class BuildingState(BaseModel):
    """Frozen copy of a building's numeric attributes."""

    height: float
    cost: float
    energy_efficiency: float
    aesthetic_value: float

    model_config = {
        "frozen": True,
    }


class Building(BaseModel):
    """Building under renovation.

    Attributes are plain fields validated on assignment. Assigning energy
    efficiency caps it at ``EFFICIENCY_CAP``; the constructor stores the value
    as given and nothing else is bounded.
    """

    height: float = Field(..., description="Height in metres")
    cost: float = Field(..., description="Accumulated cost")
    energy_efficiency: float = Field(..., description="Energy efficiency score, capped at 100 on assignment")
    aesthetic_value: float = Field(..., description="Aesthetic value score")

    renovation_plan: tuple[ImprovementPlan, ...] = Field(
        default=(), frozen=True, description="Improvements applied in order by renovate()"
    )

    model_config = {
        "validate_assignment": True,
    }

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        # upper bound only
        if name == "energy_efficiency" and self.energy_efficiency > EFFICIENCY_CAP:
            super().__setattr__(name, EFFICIENCY_CAP)

    def renovate(self) -> None:
        """Apply every improvement of the plan in insertion order."""
        for improvement in self.renovation_plan:
            improvement.apply(self)
            log.debug(
                "improvement_applied",
                improvement=improvement.description(),
                cost=self.cost,
                energy_efficiency=self.energy_efficiency,
                aesthetic_value=self.aesthetic_value,
            )

    def snapshot(self) -> BuildingState:
        """Current numeric attributes."""
        return BuildingState(
            height=self.height,
            cost=self.cost,
            energy_efficiency=self.energy_efficiency,
            aesthetic_value=self.aesthetic_value,
        )
