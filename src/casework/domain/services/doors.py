"""Door leaf layout.

The single rule for splitting a cabinet front into door leaves. Construction
and both drawing tiers call ``door_layout`` so they always agree on the
number, size and position of the leaves.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import CabinetDimensions, OverlayType


@dataclass(frozen=True)
class DoorLeaf:
    """One door leaf in cabinet front coordinates.

    ``x`` and ``y`` locate the leaf's lower-left corner relative to the
    carcass box's lower-left corner, so overlay doors start at negative
    offsets.

    Attributes:
        name: Component name for the leaf.
        x: Left edge relative to the carcass.
        y: Bottom edge relative to the carcass box bottom.
        width: Leaf width.
        height: Leaf height.
        hinge_side: Edge carrying the hinges, "left" or "right".
    """

    name: str
    x: float
    y: float
    width: float
    height: float
    hinge_side: str


def door_layout(
    dimensions: CabinetDimensions, overlay: OverlayType = OverlayType.FULL
) -> tuple[DoorLeaf, ...]:
    """Lay out the door leaves covering the carcass front.

    A full-overlay door laps the box by the overlay on every edge. When the
    dimensions call for two doors, the front is split at the centre line and
    each leaf laps its outer edge only.
    """
    lap = overlay.inches
    width = dimensions.width
    height = dimensions.box_height + 2 * lap

    if not dimensions.has_two_doors:
        return (DoorLeaf("Door", -lap, -lap, width + 2 * lap, height, "left"),)

    leaf_width = width / 2 + lap
    return (
        DoorLeaf("Left Door", -lap, -lap, leaf_width, height, "left"),
        DoorLeaf("Right Door", width / 2, -lap, leaf_width, height, "right"),
    )
