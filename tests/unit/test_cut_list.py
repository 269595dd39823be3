"""Tests for cut list, machining list and material usage."""

import math

import pytest

from casework.domain import (
    CabinetConfiguration,
    Component,
    CutListGenerator,
    MaterialUsageCalculator,
    PartType,
    generate_cabinet,
)
from casework.domain.services import MachiningListGenerator
from casework.domain.value_objects import EdgeBanding, MaterialType


class TestCutListGenerator:
    """Tests for CutListGenerator."""

    def test_one_row_per_component(self) -> None:
        cabinet = generate_cabinet("base", 24)
        rows = CutListGenerator().generate(cabinet)
        assert len(rows) == len(cabinet.components)
        assert rows[0].name == "Side Panel"
        assert rows[0].quantity == 2
        assert rows[0].edge_banding == ("front",)

    def test_includes_doors_and_toe_kick(self) -> None:
        rows = CutListGenerator().generate(generate_cabinet("tall", 24, 85.5))
        names = {row.name for row in rows}
        assert {"Door", "Toe Kick Front", "Toe Kick Side", "Toe Kick Back"} <= names

    def test_back_panel_row(self) -> None:
        rows = CutListGenerator().generate(generate_cabinet("base", 24))
        back = next(row for row in rows if row.part == PartType.BACK)
        assert back.thickness == 0.25
        assert back.material == MaterialType.PLYWOOD
        assert back.edge_banding == ()

    def test_sort_by_size(self) -> None:
        generator = CutListGenerator()
        rows = generator.sort_by_size(generator.generate(generate_cabinet("base", 24)))
        areas = [row.area for row in rows]
        assert areas == sorted(areas, reverse=True)
        assert rows[0].name == "Side Panel"


class TestMachiningListGenerator:
    """Tests for MachiningListGenerator."""

    def test_base_record_counts(self) -> None:
        """40 shelf pins and 2 grooves per side, 2 hinge cups on the door."""
        records = MachiningListGenerator().generate(generate_cabinet("base", 24))
        holes = [r for r in records if r.operation == "hole"]
        grooves = [r for r in records if r.operation == "groove"]
        assert len(holes) == 42
        assert len(grooves) == 2

    def test_groove_record_fields(self) -> None:
        records = MachiningListGenerator().generate(generate_cabinet("base", 24))
        back = next(r for r in records if r.kind == "back-panel")
        assert back.component == "Side Panel"
        assert back.orientation == "vertical"
        assert back.length == 29.625
        assert back.edge is None

    def test_hinge_records_carry_edge(self) -> None:
        records = MachiningListGenerator().generate(generate_cabinet("wall", 30, 30))
        hinges = [r for r in records if r.kind == "hinge"]
        assert {(r.component, r.edge) for r in hinges} == {
            ("Left Door", "left"),
            ("Right Door", "right"),
        }
        assert all(r.length is None for r in hinges)


class TestMaterialUsageCalculator:
    """Tests for MaterialUsageCalculator."""

    def test_base_cabinet_usage(self) -> None:
        usage = MaterialUsageCalculator().calculate(generate_cabinet("base", 24).components)
        assert usage.plywood34_sqft == pytest.approx(3634.3125 / 144)
        assert usage.plywood14_sqft == pytest.approx(658.125 / 144)
        assert usage.edge_banding_ft == pytest.approx(206.875 / 12)
        assert usage.plywood34 == 28
        assert usage.plywood14 == 6
        assert usage.edge_banding == 20

    def test_rounded_values_include_waste(self) -> None:
        usage = MaterialUsageCalculator().calculate(generate_cabinet("wall", 30, 33).components)
        assert usage.plywood34 == math.ceil(usage.plywood34_sqft * (1 + 0.10))
        assert usage.plywood14 == math.ceil(usage.plywood14_sqft * (1 + 0.10))
        assert usage.edge_banding == math.ceil(usage.edge_banding_ft * (1 + 0.15))

    def test_extra_shelf_adds_one_shelf_area(self) -> None:
        """Adding a shelf changes the net 3/4" total by exactly one shelf."""
        calculator = MaterialUsageCalculator()
        one = generate_cabinet("base", 24, configuration=CabinetConfiguration(shelf_count=1))
        two = generate_cabinet("base", 24, configuration=CabinetConfiguration(shelf_count=2))
        shelf_sqft = one.component(PartType.SHELF).area_sqft
        delta = (
            calculator.calculate(two.components).plywood34_sqft
            - calculator.calculate(one.components).plywood34_sqft
        )
        assert delta == pytest.approx(shelf_sqft)

    def test_door_stock_counts_as_thick(self) -> None:
        """7/8" doors count toward the 3/4" class total."""
        door = Component(
            name="Door", part=PartType.DOOR, width=12, height=12, thickness=0.875
        )
        usage = MaterialUsageCalculator().calculate([door])
        assert usage.plywood34_sqft == 1
        assert usage.plywood14_sqft == 0

    def test_other_stock_skipped(self) -> None:
        panel = Component(
            name="Panel", part=PartType.SHELF, width=12, height=12, thickness=0.5,
            edge_banding=EdgeBanding.front_only(),
        )
        usage = MaterialUsageCalculator().calculate([panel])
        assert usage.plywood34 == 0
        assert usage.plywood14 == 0
        assert usage.edge_banding_ft == 1

    def test_custom_waste_factors(self) -> None:
        panel = Component(name="Panel", part=PartType.SHELF, width=12, height=12)
        usage = MaterialUsageCalculator(sheet_waste_factor=0.5).calculate([panel])
        assert usage.plywood34 == 2

    def test_description(self) -> None:
        usage = MaterialUsageCalculator().calculate(generate_cabinet("base", 24).components)
        assert usage.description == (
            '28 sq ft 3/4" plywood, 6 sq ft 1/4" plywood, 20 ft edge banding'
        )
