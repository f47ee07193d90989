"""Data models for renovation."""

from .building import Building, BuildingState
from .improvement import (
    FacadeRenovation,
    GreenRoof,
    Improvement,
    ImprovementPlan,
    InsulationUpgrade,
    SolarPanels,
    WindowReplacement,
    boost_fraction,
)

__all__ = [
    "Building",
    "BuildingState",
    "Improvement",
    "ImprovementPlan",
    "SolarPanels",
    "FacadeRenovation",
    "InsulationUpgrade",
    "WindowReplacement",
    "GreenRoof",
    "boost_fraction",
]
