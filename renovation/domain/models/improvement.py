"""Improvement data models.

An improvement is a single parameterized renovation action. Each variant
boosts one or two building attributes by a capped fraction of its maximum
gain and adds a linear cost. The set of variants is closed and forms a
discriminated union on ``kind``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, Field

from renovation.core.constants import IMPROVEMENT_EFFECTS, MAX_BOOST_FRACTION, UNIT_COSTS

if TYPE_CHECKING:
    from renovation.domain.models.building import Building


def boost_fraction(parameter: float, rate: float) -> float:
    """Capped multiplier applied to an attribute's maximum gain."""
    return min(parameter * rate, MAX_BOOST_FRACTION)


class Improvement(BaseModel, ABC):
    """Base class for all renovation actions.

    Improvements are immutable once built. Zero or negative parameters are
    accepted and applied arithmetically.
    """

    kind: str

    model_config = {
        "frozen": True,
    }

    @property
    @abstractmethod
    def parameter(self) -> float:
        """Scalar driving both the boost and the cost."""

    @abstractmethod
    def apply(self, building: Building) -> None:
        """Mutate the building's attributes in place."""

    @abstractmethod
    def description(self) -> str:
        """Human readable summary."""

    @property
    def unit_cost(self) -> float:
        return UNIT_COSTS[self.kind]

    def _boost_attribute(self, building: Building, attribute: str) -> None:
        effect = IMPROVEMENT_EFFECTS[self.kind][attribute]
        boost = boost_fraction(self.parameter, effect["rate"])
        setattr(building, attribute, getattr(building, attribute) + boost * effect["magnitude"])

    def _add_cost(self, building: Building) -> None:
        building.cost = building.cost + self.parameter * self.unit_cost


class SolarPanels(Improvement):
    """Rooftop solar panels, raising energy efficiency."""

    kind: Literal["solar_panels"] = "solar_panels"
    panel_area: int = Field(..., description="Panel area in sqm")

    @property
    def parameter(self) -> float:
        return self.panel_area

    def apply(self, building: Building) -> None:
        self._boost_attribute(building, "energy_efficiency")
        self._add_cost(building)

    def description(self) -> str:
        return f"Solar Panels with area {self.panel_area} sqm"


class FacadeRenovation(Improvement):
    """Facade work, raising aesthetic value."""

    kind: Literal["facade_renovation"] = "facade_renovation"
    quality_level: int = Field(..., description="Finish quality level")

    @property
    def parameter(self) -> float:
        return self.quality_level

    def apply(self, building: Building) -> None:
        self._boost_attribute(building, "aesthetic_value")
        self._add_cost(building)

    def description(self) -> str:
        return f"Facade Renovation with quality level {self.quality_level}"


class InsulationUpgrade(Improvement):
    """Wall and roof insulation, raising energy efficiency."""

    kind: Literal["insulation_upgrade"] = "insulation_upgrade"
    insulation_level: int = Field(..., description="Insulation level")

    @property
    def parameter(self) -> float:
        return self.insulation_level

    def apply(self, building: Building) -> None:
        self._boost_attribute(building, "energy_efficiency")
        self._add_cost(building)

    def description(self) -> str:
        return f"Insulation Upgrade with level {self.insulation_level}"


class WindowReplacement(Improvement):
    """New windows, raising both efficiency and aesthetic value."""

    kind: Literal["window_replacement"] = "window_replacement"
    window_count: int = Field(..., description="Number of windows replaced")

    @property
    def parameter(self) -> float:
        return self.window_count

    def apply(self, building: Building) -> None:
        self._boost_attribute(building, "energy_efficiency")
        self._boost_attribute(building, "aesthetic_value")
        self._add_cost(building)

    def description(self) -> str:
        return f"Window Replacement of {self.window_count} windows"


class GreenRoof(Improvement):
    """Planted roof; efficiency and aesthetics saturate at different rates."""

    kind: Literal["green_roof"] = "green_roof"
    area: float = Field(..., description="Roof area in sqm")

    @property
    def parameter(self) -> float:
        return self.area

    def apply(self, building: Building) -> None:
        self._boost_attribute(building, "energy_efficiency")
        self._boost_attribute(building, "aesthetic_value")
        self._add_cost(building)

    def description(self) -> str:
        return f"Green Roof with area {self.area:f} sqm"


ImprovementPlan = Annotated[
    Union[SolarPanels, FacadeRenovation, InsulationUpgrade, WindowReplacement, GreenRoof],
    Field(discriminator="kind"),
]
