"""Tests for shelf-pin, hinge and groove layout."""

import pytest

from casework.domain.exceptions import DegenerateConfigurationError
from casework.domain.services import get_cabinet_dimensions
from casework.domain.services.machining import (
    HINGE_DIAMETER,
    SHELF_PIN_SPACING,
    hinge_holes,
    hinge_positions,
    shelf_pin_holes,
    shelf_pin_rows,
    side_panel_grooves,
)
from casework.domain.value_objects import (
    CabinetArchetype,
    GrooveKind,
    HoleKind,
    Orientation,
)


class TestShelfPins:
    """Tests for the 32mm shelf-pin system."""

    def test_spacing_is_32mm(self) -> None:
        assert SHELF_PIN_SPACING == pytest.approx(32 / 25.4)

    def test_base_rows(self) -> None:
        """A 30" base side has rows from 3" up, 20 rows in all."""
        rows = shelf_pin_rows(CabinetArchetype.BASE, 30.0)
        assert len(rows) == 20
        assert rows[0] == 3.0
        assert rows[-1] <= 27.0

    def test_wall_rows_start_at_two_inches(self) -> None:
        rows = shelf_pin_rows(CabinetArchetype.WALL, 30.0)
        assert rows[0] == 2.0
        assert len(rows) == 21

    def test_rows_evenly_spaced(self) -> None:
        rows = shelf_pin_rows(CabinetArchetype.TALL, 81.0)
        gaps = {round(b - a, 9) for a, b in zip(rows, rows[1:])}
        assert gaps == {round(SHELF_PIN_SPACING, 9)}

    def test_exact_window_keeps_single_row(self) -> None:
        """A window of exactly zero still fits one row."""
        assert shelf_pin_rows(CabinetArchetype.BASE, 6.0) == [3.0]

    def test_negative_window_is_degenerate(self) -> None:
        """Panels shorter than both clearances cannot take shelf pins."""
        with pytest.raises(DegenerateConfigurationError, match="no room for shelf pins"):
            shelf_pin_rows(CabinetArchetype.BASE, 5.0)

    def test_holes_are_mirrored_pairs(self) -> None:
        """Each row has a front and a back hole at the same height."""
        holes = shelf_pin_holes(CabinetArchetype.BASE, 24.0, 30.0)
        assert len(holes) == 40
        for front, back in zip(holes[::2], holes[1::2]):
            assert front.y_from_reference == back.y_from_reference
            assert front.x_from_edge == 2.0
            assert back.x_from_edge == 22.0
        assert all(h.kind == HoleKind.SHELF_PIN for h in holes)
        assert all(h.diameter == 0.197 and h.depth == 0.5 for h in holes)

    def test_wall_column_inset(self) -> None:
        holes = shelf_pin_holes(CabinetArchetype.WALL, 12.0, 30.0)
        assert {h.x_from_edge for h in holes} == {1.5, 10.5}


class TestHinges:
    """Tests for the hinge count and placement rules."""

    def test_base_door_has_two_hinges(self) -> None:
        dims = get_cabinet_dimensions("base", 24)
        assert hinge_positions(dims, 31.5) == [3.5, 28.0]

    def test_wall_at_30_has_no_mid_hinge(self) -> None:
        """The mid hinge applies only above 30" of box height."""
        dims = get_cabinet_dimensions("wall", 30, 30)
        assert hinge_positions(dims, 31.5) == [3.5, 28.0]

    def test_wall_above_30_adds_mid_hinge(self) -> None:
        dims = get_cabinet_dimensions("wall", 30, 33)
        assert hinge_positions(dims, 34.5) == [3.5, 17.25, 31.0]

    def test_tall_door_has_five_hinges(self) -> None:
        """Tall doors get the mid hinge plus the third points."""
        dims = get_cabinet_dimensions("tall", 24, 85.5)
        positions = hinge_positions(dims, 82.5)
        assert positions == pytest.approx([3.5, 27.5, 41.25, 55.0, 79.0])

    def test_positions_are_symmetric(self) -> None:
        dims = get_cabinet_dimensions("tall", 36, 91.5)
        positions = hinge_positions(dims, 88.5)
        for low, high in zip(positions, reversed(positions)):
            assert low + high == pytest.approx(88.5)

    def test_short_door_is_degenerate(self) -> None:
        """A leaf shorter than both hinge offsets plus a cup is rejected."""
        dims = get_cabinet_dimensions("base", 24)
        with pytest.raises(DegenerateConfigurationError, match="too short for hinges"):
            hinge_positions(dims, 8.0)

    def test_minimum_door_accepted(self) -> None:
        dims = get_cabinet_dimensions("base", 24)
        assert len(hinge_positions(dims, 2 * 3.5 + HINGE_DIAMETER)) == 2

    def test_hinge_holes_record_side(self) -> None:
        dims = get_cabinet_dimensions("wall", 30, 30)
        holes = hinge_holes(dims, 31.5, "right")
        assert {h.edge for h in holes} == {"right"}
        assert all(h.x_from_edge == 0.875 for h in holes)
        assert all(h.diameter == 1.375 for h in holes)


class TestGrooves:
    """Tests for side panel grooves."""

    def test_base_side_has_back_groove_and_bottom_dado(self) -> None:
        """Base cabinets have an open top, so only one dado."""
        grooves = side_panel_grooves(get_cabinet_dimensions("base", 24), 0.75)
        kinds = [g.kind for g in grooves]
        assert kinds == [GrooveKind.BACK_PANEL, GrooveKind.DADO]

        back, dado = grooves
        assert back.x == 23.25
        assert back.y == 0.375
        assert back.width == 0.25
        assert back.depth == 0.25
        assert back.length == 29.625
        assert back.orientation == Orientation.VERTICAL

        assert dado.x == 0
        assert dado.y == 0.375
        assert dado.width == 0.75
        assert dado.length == 23.25
        assert dado.orientation == Orientation.HORIZONTAL

    def test_wall_side_has_top_dado(self) -> None:
        grooves = side_panel_grooves(get_cabinet_dimensions("wall", 30, 30), 0.75)
        dados = [g for g in grooves if g.kind == GrooveKind.DADO]
        assert [d.y for d in dados] == [0.375, 28.875]
        back = grooves[0]
        assert back.x == 11.25
        assert back.length == 28.875

    def test_dado_width_follows_material(self) -> None:
        grooves = side_panel_grooves(get_cabinet_dimensions("tall", 24, 85.5), 0.5)
        assert all(g.width == 0.5 for g in grooves if g.kind == GrooveKind.DADO)

    def test_back_groove_stops_at_top_dado(self) -> None:
        """A top dado shortens the back groove by 3/4" against an open top."""
        tall = get_cabinet_dimensions("tall", 24, 85.5)
        tall_back = side_panel_grooves(tall, 0.75)[0]
        base = get_cabinet_dimensions("base", 24)
        base_back = side_panel_grooves(base, 0.75)[0]
        assert tall_back.length == tall.box_height - 1.125
        assert base_back.length == base.box_height - 0.375
