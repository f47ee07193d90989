"""Renovation constants - single source of truth for improvement effects.

Rates, magnitudes and unit costs for every improvement variant live here so
that the models and the tests read the same numbers.
"""

from typing import TypedDict


class EffectConfig(TypedDict):
    """Type definition for one attribute effect of an improvement."""
    rate: float
    magnitude: float


# Energy efficiency never exceeds this value (no lower bound)
EFFICIENCY_CAP = 100.0

# Boost fractions are capped here (diminishing returns)
MAX_BOOST_FRACTION = 1.0

# Cost added per unit of each improvement's parameter
UNIT_COSTS = {
    "solar_panels": 100.0,        # per sqm of panel
    "facade_renovation": 500.0,   # per quality level
    "insulation_upgrade": 400.0,  # per insulation level
    "window_replacement": 300.0,  # per window
    "green_roof": 200.0,          # per sqm of roof
}

# Attribute effects per variant, keyed by the attribute they touch
IMPROVEMENT_EFFECTS: dict[str, dict[str, EffectConfig]] = {
    "solar_panels": {
        "energy_efficiency": {"rate": 0.02, "magnitude": 20.0},
    },
    "facade_renovation": {
        "aesthetic_value": {"rate": 0.10, "magnitude": 15.0},
    },
    "insulation_upgrade": {
        "energy_efficiency": {"rate": 0.15, "magnitude": 25.0},
    },
    "window_replacement": {
        "energy_efficiency": {"rate": 0.05, "magnitude": 10.0},
        "aesthetic_value": {"rate": 0.05, "magnitude": 5.0},
    },
    "green_roof": {
        "energy_efficiency": {"rate": 0.03, "magnitude": 15.0},
        "aesthetic_value": {"rate": 0.02, "magnitude": 10.0},
    },
}
