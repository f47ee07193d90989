"""Named renovation scenarios.

Each scenario builds a building, renovates it and returns whether the
expected outcome was observed. ``run_scenarios`` prints PASS/FAIL per
scenario; ``python -m renovation`` is the command line entry point.
"""

from __future__ import annotations

import gc
import weakref
from typing import Callable, Iterable

from renovation.core.exceptions import ScenarioNotFoundError
from renovation.core.logging import get_logger
from renovation.domain.models.building import Building
from renovation.domain.models.improvement import (
    FacadeRenovation,
    GreenRoof,
    InsulationUpgrade,
    SolarPanels,
    WindowReplacement,
)

log = get_logger(__name__)


def facade_renovation_only() -> bool:
    b = Building(
        height=25.0, cost=75000, energy_efficiency=50, aesthetic_value=40,
        renovation_plan=[FacadeRenovation(quality_level=8)],
    )
    b.renovate()
    return b.aesthetic_value > 40 and b.cost == 75000 + 8 * 500


def multiple_improvements_cumulative() -> bool:
    plan = [SolarPanels(panel_area=30), FacadeRenovation(quality_level=3), SolarPanels(panel_area=20)]
    b = Building(height=35.0, cost=90000, energy_efficiency=55, aesthetic_value=65, renovation_plan=plan)
    b.renovate()
    return b.energy_efficiency > 55 and b.aesthetic_value > 65 and b.cost > 90000


def no_improvement_after_delete() -> bool:
    """Dropping a building releases the improvements it owns."""
    plan = [SolarPanels(panel_area=40), FacadeRenovation(quality_level=5)]
    refs = [weakref.ref(improvement) for improvement in plan]
    b = Building(height=28.0, cost=85000, energy_efficiency=65, aesthetic_value=75, renovation_plan=plan)
    if any(owned is not given for owned, given in zip(b.renovation_plan, plan)):
        return False
    del b, plan
    gc.collect()
    return all(ref() is None for ref in refs)


def zero_improvement_plan() -> bool:
    b = Building(height=40.0, cost=120000, energy_efficiency=75, aesthetic_value=85)
    b.renovate()
    return (
        b.height == 40.0
        and b.cost == 120000
        and b.energy_efficiency == 75
        and b.aesthetic_value == 85
    )


def efficiency_cap() -> bool:
    b = Building(
        height=20.0, cost=50000, energy_efficiency=80, aesthetic_value=60,
        renovation_plan=[SolarPanels(panel_area=200)],
    )
    b.renovate()
    return b.energy_efficiency == 100 and b.cost == 50000 + 200 * 100


def insulation_upgrade_effect() -> bool:
    b = Building(
        height=22.0, cost=60000, energy_efficiency=60, aesthetic_value=55,
        renovation_plan=[InsulationUpgrade(insulation_level=6)],
    )
    b.renovate()
    return b.energy_efficiency > 60 and b.cost == 60000 + 6 * 400


def window_replacement_effect() -> bool:
    b = Building(
        height=30.0, cost=70000, energy_efficiency=70, aesthetic_value=50,
        renovation_plan=[WindowReplacement(window_count=10)],
    )
    b.renovate()
    return b.energy_efficiency > 70 and b.aesthetic_value > 50 and b.cost == 70000 + 10 * 300


def green_roof_effect() -> bool:
    b = Building(
        height=18.0, cost=55000, energy_efficiency=65, aesthetic_value=55,
        renovation_plan=[GreenRoof(area=25.0)],
    )
    b.renovate()
    return b.energy_efficiency > 65 and b.aesthetic_value > 55 and b.cost == 55000 + 25 * 200


SCENARIOS: dict[str, Callable[[], bool]] = {
    "facade_renovation_only": facade_renovation_only,
    "multiple_improvements_cumulative": multiple_improvements_cumulative,
    "no_improvement_after_delete": no_improvement_after_delete,
    "zero_improvement_plan": zero_improvement_plan,
    "efficiency_cap": efficiency_cap,
    "insulation_upgrade_effect": insulation_upgrade_effect,
    "window_replacement_effect": window_replacement_effect,
    "green_roof_effect": green_roof_effect,
}


def run_scenarios(names: Iterable[str] | None = None) -> dict[str, bool]:
    """Run scenarios by name (all of them by default) and print PASS/FAIL.

    Raises:
        ScenarioNotFoundError: If a name is not registered.
    """
    selected = list(names) if names else list(SCENARIOS)
    for name in selected:
        if name not in SCENARIOS:
            raise ScenarioNotFoundError(name)

    results = {}
    for name in selected:
        passed = SCENARIOS[name]()
        results[name] = passed
        print(f"{'PASS' if passed else 'FAIL'}: {name}")
        if not passed:
            log.warning("scenario_failed", scenario=name)

    log.info("scenarios_completed", passed=sum(results.values()), total=len(results))
    return results
