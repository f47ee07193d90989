"""Application services."""

from .plan_factory import create_building, create_improvement, create_renovation_plan
from .simulation import RenovationReport, RenovationSimulator, RenovationStep

__all__ = [
    "create_building",
    "create_improvement",
    "create_renovation_plan",
    "RenovationReport",
    "RenovationSimulator",
    "RenovationStep",
]
