"""Tests for the door leaf layout."""

import pytest

from casework.domain.services import door_layout, get_cabinet_dimensions


class TestDoorLayout:
    """Tests for door_layout."""

    def test_single_full_overlay_door(self) -> None:
        """A single door laps the box by 0.75" on every edge."""
        (door,) = door_layout(get_cabinet_dimensions("base", 24))
        assert door.name == "Door"
        assert door.width == 25.5
        assert door.height == 31.5
        assert (door.x, door.y) == (-0.75, -0.75)
        assert door.hinge_side == "left"

    def test_two_leaves_split_at_centre(self) -> None:
        """Each leaf is half the width plus one overlay."""
        left, right = door_layout(get_cabinet_dimensions("wall", 30, 30))
        assert left.name == "Left Door"
        assert right.name == "Right Door"
        assert left.width == right.width == 15.75
        assert left.height == right.height == 31.5
        assert left.x == -0.75
        assert right.x == 15.0
        assert (left.hinge_side, right.hinge_side) == ("left", "right")

    @pytest.mark.parametrize("width", [24, 27, 30, 33, 36])
    def test_leaves_cover_width_plus_overlays(self, width: float) -> None:
        leaves = door_layout(get_cabinet_dimensions("wall", width, 30))
        assert sum(leaf.width for leaf in leaves) == pytest.approx(width + 1.5)
        assert leaves[-1].x + leaves[-1].width == pytest.approx(width + 0.75)

    def test_tall_door_height(self) -> None:
        (door,) = door_layout(get_cabinet_dimensions("tall", 24, 85.5))
        assert door.height == 82.5
