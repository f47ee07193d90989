"""Pytest fixtures for renovation tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from renovation.domain.models import (  # noqa: E402
    Building,
    FacadeRenovation,
    SolarPanels,
)


@pytest.fixture
def sample_building_data():
    """Building description with a mixed plan, as loaded from a scenario file."""
    return {
        "height": 35.0,
        "cost": 90000.0,
        "energy_efficiency": 55.0,
        "aesthetic_value": 65.0,
        "renovation_plan": [
            {"kind": "solar_panels", "panel_area": 30},
            {"kind": "facade_renovation", "quality_level": 3},
            {"kind": "solar_panels", "panel_area": 20},
        ],
    }


@pytest.fixture
def mixed_building():
    """Building with solar, facade, solar plan."""
    return Building(
        height=35.0,
        cost=90000.0,
        energy_efficiency=55.0,
        aesthetic_value=65.0,
        renovation_plan=[
            SolarPanels(panel_area=30),
            FacadeRenovation(quality_level=3),
            SolarPanels(panel_area=20),
        ],
    )
