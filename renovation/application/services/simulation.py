"""Step-by-step renovation simulation.

Applies a building's renovation plan exactly like ``Building.renovate()``
while recording the state before and after every improvement.
"""

from __future__ import annotations

from typing import Any

import pandas as pd
from pydantic import BaseModel, Field, computed_field

from renovation.core.logging import get_logger
from renovation.domain.models.building import Building, BuildingState

log = get_logger(__name__)


class RenovationStep(BaseModel):
    """Effect of a single improvement."""

    index: int = Field(..., ge=0, description="Position in the renovation plan")
    description: str = Field(..., description="Improvement description")
    before: BuildingState
    after: BuildingState

    @computed_field
    @property
    def cost_delta(self) -> float:
        return self.after.cost - self.before.cost

    @computed_field
    @property
    def efficiency_delta(self) -> float:
        return self.after.energy_efficiency - self.before.energy_efficiency

    @computed_field
    @property
    def aesthetic_delta(self) -> float:
        return self.after.aesthetic_value - self.before.aesthetic_value

    def to_dict(self) -> dict[str, Any]:
        return {
            "Step": self.index + 1,
            "Improvement": self.description,
            "Cost": self.after.cost,
            "Energy Efficiency": self.after.energy_efficiency,
            "Aesthetic Value": self.after.aesthetic_value,
            "Cost Added": self.cost_delta,
        }


class RenovationReport(BaseModel):
    """Complete renovation result: initial state, steps and final state."""

    initial: BuildingState
    final: BuildingState
    steps: list[RenovationStep] = Field(default_factory=list)

    @computed_field
    @property
    def total_cost_added(self) -> float:
        """Cost of the whole plan."""
        return self.final.cost - self.initial.cost

    @computed_field
    @property
    def efficiency_gain(self) -> float:
        return self.final.energy_efficiency - self.initial.energy_efficiency

    @computed_field
    @property
    def aesthetic_gain(self) -> float:
        return self.final.aesthetic_value - self.initial.aesthetic_value

    def to_dict(self) -> dict[str, Any]:
        """Summary plus one row per step."""
        return {
            "summary": {
                "improvements": len(self.steps),
                "total_cost_added": self.total_cost_added,
                "efficiency_gain": self.efficiency_gain,
                "aesthetic_gain": self.aesthetic_gain,
            },
            "steps": [step.to_dict() for step in self.steps],
        }

    def to_dataframe(self) -> pd.DataFrame:
        """One row per step, indexed by step number."""
        df = pd.DataFrame([step.to_dict() for step in self.steps])
        if df.empty:
            return df
        return df.set_index("Step")


class RenovationSimulator:
    """Runs a building's plan and reports every step."""

    def run(self, building: Building) -> RenovationReport:
        """Apply the plan in order, mutating the building.

        Args:
            building: Building to renovate.

        Returns:
            Report with before/after states for each improvement.
        """
        initial = building.snapshot()
        log.info("renovation_started", improvements=len(building.renovation_plan))

        steps = []
        for index, improvement in enumerate(building.renovation_plan):
            before = building.snapshot()
            improvement.apply(building)
            step = RenovationStep(
                index=index,
                description=improvement.description(),
                before=before,
                after=building.snapshot(),
            )
            log.debug("improvement_applied", step=index + 1, improvement=step.description, cost_delta=step.cost_delta)
            steps.append(step)

        report = RenovationReport(initial=initial, final=building.snapshot(), steps=steps)
        log.info(
            "renovation_completed",
            total_cost_added=report.total_cost_added,
            efficiency_gain=report.efficiency_gain,
            aesthetic_gain=report.aesthetic_gain,
        )
        return report
