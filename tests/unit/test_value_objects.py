"""Tests for casework domain value objects."""

import pytest

from casework.domain.exceptions import InvalidDimensionError, UnsupportedArchetypeError
from casework.domain.value_objects import (
    PALETTE,
    CabinetArchetype,
    CabinetConfiguration,
    CabinetDimensions,
    EdgeBanding,
    Groove,
    GrooveKind,
    HoleKind,
    HolePattern,
    MaterialSpec,
    MaterialType,
    Orientation,
    OverlayType,
    SemanticColor,
    WireframeGeometry,
)


def wall_dims(height: float = 30.0) -> CabinetDimensions:
    return CabinetDimensions(
        archetype=CabinetArchetype.WALL,
        width=30.0,
        height=height,
        depth=12.875,
        total_height=height,
        has_two_doors=True,
        box_depth=12.0,
        door_thickness=0.875,
    )


class TestCabinetArchetype:
    """Tests for CabinetArchetype parsing."""

    def test_parse_is_case_and_space_insensitive(self) -> None:
        """Archetype names are normalized before lookup."""
        assert CabinetArchetype.parse(" WALL ") == CabinetArchetype.WALL

    def test_parse_passes_enum_through(self) -> None:
        """Parsing an enum member returns it unchanged."""
        assert CabinetArchetype.parse(CabinetArchetype.TALL) is CabinetArchetype.TALL

    def test_unknown_archetype_raises(self) -> None:
        """Unknown names raise UnsupportedArchetypeError listing valid names."""
        with pytest.raises(UnsupportedArchetypeError, match="base, wall, tall"):
            CabinetArchetype.parse("corner")

    def test_error_type(self) -> None:
        """The error carries a machine-readable category."""
        with pytest.raises(UnsupportedArchetypeError) as exc_info:
            CabinetArchetype.parse("vanity")
        assert exc_info.value.error_type == "unsupported_archetype"


class TestMaterialSpec:
    """Tests for MaterialSpec."""

    def test_standard_thicknesses(self) -> None:
        """Factory methods return the standard stock sizes."""
        assert MaterialSpec.standard_3_4().thickness == 0.75
        assert MaterialSpec.standard_1_4().thickness == 0.25
        assert MaterialSpec.door_7_8().thickness == 0.875

    def test_default_material_is_plywood(self) -> None:
        assert MaterialSpec(thickness=0.5).material_type == MaterialType.PLYWOOD

    @pytest.mark.parametrize("thickness", [0, -0.75])
    def test_non_positive_thickness_rejected(self, thickness: float) -> None:
        """Zero or negative thickness is invalid."""
        with pytest.raises(ValueError, match="positive"):
            MaterialSpec(thickness=thickness)


class TestCabinetDimensions:
    """Tests for CabinetDimensions invariants."""

    def test_carcass_depth_prefers_box_depth(self) -> None:
        """Wall cabinets report the box depth without the door."""
        dims = wall_dims()
        assert dims.depth == 12.875
        assert dims.carcass_depth == 12.0

    def test_carcass_depth_falls_back_to_depth(self) -> None:
        dims = CabinetDimensions(
            archetype=CabinetArchetype.BASE,
            width=24.0,
            height=30.0,
            depth=24.0,
            total_height=34.5,
            toe_kick_height=4.5,
            toe_kick_depth=21.0,
        )
        assert dims.carcass_depth == 24.0
        assert dims.has_toe_kick

    def test_total_height_must_include_toe_kick(self) -> None:
        """total_height must equal the box height plus the toe kick."""
        with pytest.raises(InvalidDimensionError, match="Total height"):
            CabinetDimensions(
                archetype=CabinetArchetype.BASE,
                width=24.0,
                height=30.0,
                depth=24.0,
                total_height=30.0,
                toe_kick_height=4.5,
                toe_kick_depth=21.0,
            )

    def test_toe_kick_fields_travel_together(self) -> None:
        """A toe kick height without a depth is rejected."""
        with pytest.raises(InvalidDimensionError, match="together"):
            CabinetDimensions(
                archetype=CabinetArchetype.TALL,
                width=24.0,
                height=81.0,
                depth=24.875,
                total_height=85.5,
                toe_kick_height=4.5,
            )

    def test_non_positive_width_rejected(self) -> None:
        with pytest.raises(InvalidDimensionError, match="width"):
            CabinetDimensions(
                archetype=CabinetArchetype.WALL,
                width=0.0,
                height=30.0,
                depth=12.875,
                total_height=30.0,
            )


class TestCabinetConfiguration:
    """Tests for archetype default shelf counts."""

    def test_wall_default_is_one_shelf_per_foot(self) -> None:
        """A 42" wall cabinet gets floor(42 / 12) = 3 shelves."""
        resolved = CabinetConfiguration().resolved_for(wall_dims(42.0))
        assert resolved.shelf_count == 3

    def test_explicit_count_kept(self) -> None:
        """An explicit shelf count is never replaced."""
        config = CabinetConfiguration(shelf_count=0)
        assert config.resolved_for(wall_dims()) is config

    def test_full_overlay_is_three_quarters(self) -> None:
        assert OverlayType.FULL.inches == 0.75


class TestEdgeBanding:
    """Tests for EdgeBanding."""

    def test_front_only_runs_along_width(self) -> None:
        assert EdgeBanding.front_only().banded_length(24.0, 30.0) == 24.0

    def test_all_sides_is_perimeter(self) -> None:
        """Doors are banded on all four edges."""
        assert EdgeBanding.all_sides().banded_length(25.5, 31.5) == 114.0

    def test_edges_in_fixed_order(self) -> None:
        banding = EdgeBanding(front=True, bottom=True)
        assert banding.edges == ("bottom", "front")

    def test_none_has_no_edges(self) -> None:
        assert EdgeBanding.none().edges == ()


class TestMachiningValues:
    """Tests for HolePattern and Groove validation."""

    def test_hole_requires_positive_diameter(self) -> None:
        with pytest.raises(ValueError):
            HolePattern(HoleKind.HINGE, 0.875, 3.5, diameter=0, depth=0.5)

    def test_hole_defaults_to_front_edge(self) -> None:
        hole = HolePattern(HoleKind.SHELF_PIN, 2.0, 3.0, 0.197, 0.5)
        assert hole.edge == "front"

    def test_groove_requires_positive_length(self) -> None:
        with pytest.raises(ValueError):
            Groove(
                kind=GrooveKind.DADO,
                x=0.0,
                y=0.375,
                width=0.75,
                depth=0.25,
                length=0.0,
                orientation=Orientation.HORIZONTAL,
            )


class TestDrawingPrimitives:
    """Tests for the shared palette and geometry builder."""

    def test_every_color_has_a_palette_entry(self) -> None:
        """Both tiers draw with the same palette, so it must be complete."""
        assert set(PALETTE) == set(SemanticColor)
        assert SemanticColor.OVERLAY_DOOR.hex == "#0066cc"

    def test_add_rect_appends_four_edges(self) -> None:
        geo = WireframeGeometry()
        geo.add_rect(0, 0, 10, 5, color=SemanticColor.SHELF)
        assert len(geo.lines) == 4
        assert all(line.color == SemanticColor.SHELF for line in geo.lines)

    def test_annotate_with_leader(self) -> None:
        geo = WireframeGeometry()
        geo.annotate(1, 2, "DADO", leader=(0, 2))
        assert geo.annotations[0].leader.x == 0
