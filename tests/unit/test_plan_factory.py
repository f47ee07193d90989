"""Unit tests for renovation.application.services.plan_factory."""

import pytest

from renovation.application.services.plan_factory import (
    create_building,
    create_improvement,
    create_renovation_plan,
)
from renovation.core.exceptions import InvalidPlanError, RenovationError
from renovation.domain.models import (
    FacadeRenovation,
    GreenRoof,
    InsulationUpgrade,
    SolarPanels,
    WindowReplacement,
)


class TestCreateImprovement:

    @pytest.mark.parametrize(
        "entry, expected",
        [
            ({"kind": "solar_panels", "panel_area": 30}, SolarPanels(panel_area=30)),
            ({"kind": "facade_renovation", "quality_level": 8}, FacadeRenovation(quality_level=8)),
            ({"kind": "insulation_upgrade", "insulation_level": 6}, InsulationUpgrade(insulation_level=6)),
            ({"kind": "window_replacement", "window_count": 10}, WindowReplacement(window_count=10)),
            ({"kind": "green_roof", "area": 25.5}, GreenRoof(area=25.5)),
        ],
    )
    def test_each_kind(self, entry, expected):
        assert create_improvement(entry) == expected

    def test_unknown_kind(self):
        with pytest.raises(InvalidPlanError) as exc_info:
            create_improvement({"kind": "swimming_pool", "length": 12})
        assert exc_info.value.errors

    def test_missing_parameter(self):
        with pytest.raises(InvalidPlanError):
            create_improvement({"kind": "green_roof"})

    def test_fractional_count_rejected(self):
        with pytest.raises(InvalidPlanError):
            create_improvement({"kind": "window_replacement", "window_count": 2.5})

    def test_negative_parameter_accepted(self):
        assert create_improvement({"kind": "solar_panels", "panel_area": -5}).panel_area == -5

    def test_is_renovation_error(self):
        with pytest.raises(RenovationError):
            create_improvement({})


class TestCreateRenovationPlan:

    def test_order_preserved(self, sample_building_data):
        plan = create_renovation_plan(sample_building_data["renovation_plan"])
        assert [i.kind for i in plan] == ["solar_panels", "facade_renovation", "solar_panels"]
        assert plan[2].panel_area == 20

    def test_empty(self):
        assert create_renovation_plan([]) == ()

    def test_not_a_sequence(self):
        with pytest.raises(InvalidPlanError):
            create_renovation_plan(5)

    def test_invalid_entry(self):
        with pytest.raises(InvalidPlanError):
            create_renovation_plan([{"kind": "solar_panels", "panel_area": 3}, {"kind": "moat"}])


class TestCreateBuilding:

    def test_from_dict(self, sample_building_data):
        b = create_building(sample_building_data)
        assert b.cost == 90000.0
        assert len(b.renovation_plan) == 3
        b.renovate()
        assert b.cost == 96500.0

    def test_input_not_mutated(self, sample_building_data):
        create_building(sample_building_data)
        assert isinstance(sample_building_data["renovation_plan"][0], dict)

    def test_without_plan(self):
        b = create_building({"height": 10, "cost": 1000, "energy_efficiency": 120, "aesthetic_value": 5})
        assert b.renovation_plan == ()
        assert b.energy_efficiency == 120.0

    def test_missing_attribute(self):
        with pytest.raises(InvalidPlanError):
            create_building({"height": 10, "energy_efficiency": 50, "aesthetic_value": 5})

    def test_non_sequence_plan(self, sample_building_data):
        sample_building_data["renovation_plan"] = 5
        with pytest.raises(InvalidPlanError) as exc_info:
            create_building(sample_building_data)
        assert exc_info.value.errors

    def test_invalid_plan_entry(self, sample_building_data):
        sample_building_data["renovation_plan"].append({"kind": "moat"})
        with pytest.raises(InvalidPlanError):
            create_building(sample_building_data)
