"""Hole and groove layout for carcass panels and doors.

Shelf pins follow the 32mm system: rows of holes spaced 32mm apart with a
front and back column on each side panel. Hinge cups are 35mm concealed
hinge borings placed a fixed distance from the door's hinge edge.
"""

from __future__ import annotations

import math

from ..exceptions import DegenerateConfigurationError
from ..value_objects import (
    CabinetArchetype,
    CabinetDimensions,
    Groove,
    GrooveKind,
    HoleKind,
    HolePattern,
    Orientation,
)

MM_TO_INCH = 1 / 25.4

# =============================================================================
# Shelf pins
# =============================================================================

SHELF_PIN_DIAMETER = 0.197  # 5mm pin
SHELF_PIN_DEPTH = 0.5
SHELF_PIN_SPACING = 32.0 * MM_TO_INCH

# (first row from bottom, last row clearance from top)
_PIN_END_OFFSET = {CabinetArchetype.BASE: 3.0}
_PIN_END_OFFSET_DEFAULT = 2.0
# Column inset from the front and back edges
_PIN_EDGE_OFFSET = {CabinetArchetype.BASE: 2.0}
_PIN_EDGE_OFFSET_DEFAULT = 1.5

# =============================================================================
# Hinges
# =============================================================================

HINGE_DIAMETER = 1.375  # 35mm cup
HINGE_DEPTH = 0.5
HINGE_FROM_EDGE = 0.875
HINGE_FROM_TOP_BOTTOM = 3.5
MID_HINGE_HEIGHT = 30.0

# =============================================================================
# Grooves
# =============================================================================

GROOVE_DEPTH = 0.25
BACK_GROOVE_WIDTH = 0.25
BACK_GROOVE_INSET = 0.75
GROOVE_EDGE_CLEARANCE = 0.375
# Back groove stops short of a top dado by this much more than at an open top
TOP_DADO_BACK_STOP = 0.75


def shelf_pin_offsets(archetype: CabinetArchetype) -> tuple[float, float]:
    """Return (end offset, edge offset) for an archetype's shelf-pin rows."""
    return (
        _PIN_END_OFFSET.get(archetype, _PIN_END_OFFSET_DEFAULT),
        _PIN_EDGE_OFFSET.get(archetype, _PIN_EDGE_OFFSET_DEFAULT),
    )


def shelf_pin_rows(archetype: CabinetArchetype, panel_height: float) -> list[float]:
    """Heights of each shelf-pin row measured from the panel bottom.

    Raises:
        DegenerateConfigurationError: If the panel is shorter than the top
            and bottom clearances combined.
    """
    end_offset, _ = shelf_pin_offsets(archetype)
    usable = panel_height - 2 * end_offset
    if usable < 0:
        raise DegenerateConfigurationError(
            f"Panel height {panel_height:g}\" leaves no room for shelf pins "
            f"({end_offset:g}\" clearance top and bottom)"
        )
    count = math.floor(usable / SHELF_PIN_SPACING + 1e-9)
    return [end_offset + i * SHELF_PIN_SPACING for i in range(count + 1)]


def shelf_pin_holes(
    archetype: CabinetArchetype, panel_depth: float, panel_height: float
) -> list[HolePattern]:
    """Shelf-pin holes for one side panel.

    Each row is a mirrored pair: one hole inset from the front edge and one
    inset from the back edge, both at the same height.
    """
    _, edge_offset = shelf_pin_offsets(archetype)
    holes = []
    for y in shelf_pin_rows(archetype, panel_height):
        for x in (edge_offset, panel_depth - edge_offset):
            holes.append(
                HolePattern(
                    kind=HoleKind.SHELF_PIN,
                    x_from_edge=x,
                    y_from_reference=y,
                    diameter=SHELF_PIN_DIAMETER,
                    depth=SHELF_PIN_DEPTH,
                    edge="front",
                )
            )
    return holes


def hinge_positions(dimensions: CabinetDimensions, door_height: float) -> list[float]:
    """Hinge cup heights measured from the bottom of a door leaf.

    Every door gets a hinge 3.5" from the top and bottom. Wall and tall
    cabinets taller than 30" add one at mid-height, and tall cabinets add
    two more at the third points for five in all.

    Raises:
        DegenerateConfigurationError: If the door is too short to fit the
            top and bottom hinge cups.
    """
    minimum = 2 * HINGE_FROM_TOP_BOTTOM + HINGE_DIAMETER
    if door_height < minimum:
        raise DegenerateConfigurationError(
            f"Door height {door_height:g}\" is too short for hinges "
            f"(minimum {minimum:g}\")"
        )
    positions = [HINGE_FROM_TOP_BOTTOM, door_height - HINGE_FROM_TOP_BOTTOM]
    if (
        dimensions.archetype in (CabinetArchetype.WALL, CabinetArchetype.TALL)
        and dimensions.box_height > MID_HINGE_HEIGHT
    ):
        positions.append(door_height / 2)
    if dimensions.archetype == CabinetArchetype.TALL:
        positions.extend([door_height / 3, door_height * 2 / 3])
    return sorted(positions)


def hinge_holes(
    dimensions: CabinetDimensions, door_height: float, hinge_side: str
) -> list[HolePattern]:
    """Hinge cup borings for one door leaf."""
    return [
        HolePattern(
            kind=HoleKind.HINGE,
            x_from_edge=HINGE_FROM_EDGE,
            y_from_reference=y,
            diameter=HINGE_DIAMETER,
            depth=HINGE_DEPTH,
            edge=hinge_side,
        )
        for y in hinge_positions(dimensions, door_height)
    ]


def side_panel_grooves(
    dimensions: CabinetDimensions, thickness: float
) -> list[Groove]:
    """Back-panel groove and dados cut into each side panel.

    Base cabinets have an open top, so only the bottom panel is housed in a
    dado. Wall and tall cabinets also get a top dado.
    """
    box_depth = dimensions.carcass_depth
    box_height = dimensions.box_height
    is_base = dimensions.archetype == CabinetArchetype.BASE

    back_length = box_height - GROOVE_EDGE_CLEARANCE
    if not is_base:
        back_length -= TOP_DADO_BACK_STOP
    grooves = [
        Groove(
            kind=GrooveKind.BACK_PANEL,
            x=box_depth - BACK_GROOVE_INSET,
            y=GROOVE_EDGE_CLEARANCE,
            width=BACK_GROOVE_WIDTH,
            depth=GROOVE_DEPTH,
            length=back_length,
            orientation=Orientation.VERTICAL,
        ),
        _dado(GROOVE_EDGE_CLEARANCE, box_depth, thickness),
    ]
    if not is_base:
        grooves.append(
            _dado(box_height - thickness - GROOVE_EDGE_CLEARANCE, box_depth, thickness)
        )
    return grooves


def _dado(y: float, box_depth: float, thickness: float) -> Groove:
    return Groove(
        kind=GrooveKind.DADO,
        x=0.0,
        y=y,
        width=thickness,
        depth=GROOVE_DEPTH,
        length=box_depth - BACK_GROOVE_INSET,
        orientation=Orientation.HORIZONTAL,
    )
