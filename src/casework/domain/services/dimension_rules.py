"""Dimension rule engine.

Maps an archetype and a nominal width/height from the supported size ladder
to resolved cabinet dimensions. Sizes outside the ladder are rejected rather
than clamped.
"""

from __future__ import annotations

import logging
import math

from ..exceptions import InvalidDimensionError
from ..value_objects import CabinetArchetype, CabinetDimensions

logger = logging.getLogger(__name__)

# =============================================================================
# Archetype constants (inches)
# =============================================================================

BASE_BOX_HEIGHT = 30.0
BASE_DEPTH = 24.0

WALL_DEPTH = 12.875
WALL_BOX_DEPTH = 12.0
WALL_TWO_DOOR_THRESHOLD = 21.0

TALL_DEPTH = 24.875
TALL_BOX_DEPTH = 24.0

DOOR_THICKNESS = 0.875
TOE_KICK_HEIGHT = 4.5
TOE_KICK_DEPTH = 21.0

WIDTH_STEP = 3.0
MAX_WIDTH = 36.0

_TALL_HEIGHTS = (79.5, 85.5, 91.5)


def _ladder(start: float, stop: float, step: float) -> list[float]:
    count = int(round((stop - start) / step))
    return [start + i * step for i in range(count + 1)]


def _on_ladder(value: float, ladder: list[float]) -> bool:
    return any(math.isclose(value, rung) for rung in ladder)


class DimensionRuleEngine:
    """Resolves ladder sizes into full cabinet dimensions."""

    def available_widths(self, archetype: CabinetArchetype | str) -> list[float]:
        """Supported nominal widths, ascending.

        Tall cabinets start at 12", base and wall cabinets at 9"; all step
        by 3" up to 36".
        """
        archetype = CabinetArchetype.parse(archetype)
        start = 12.0 if archetype == CabinetArchetype.TALL else 9.0
        return _ladder(start, MAX_WIDTH, WIDTH_STEP)

    def available_heights(self, archetype: CabinetArchetype | str) -> list[float]:
        """Supported nominal heights, ascending.

        Base cabinets have a single 30" box height, wall cabinets run from
        12" to 42" in 3" steps, and tall cabinets come in three overall
        heights.
        """
        archetype = CabinetArchetype.parse(archetype)
        if archetype == CabinetArchetype.BASE:
            return [BASE_BOX_HEIGHT]
        if archetype == CabinetArchetype.WALL:
            return _ladder(12.0, 42.0, 3.0)
        return list(_TALL_HEIGHTS)

    def dimensions_for(
        self,
        archetype: CabinetArchetype | str,
        width: float,
        height: float | None = None,
    ) -> CabinetDimensions:
        """Resolve dimensions for a ladder size.

        Args:
            archetype: Cabinet archetype or its string name.
            width: Nominal width from ``available_widths``.
            height: Nominal height from ``available_heights``. Ignored for
                base cabinets, whose box height is fixed. For tall cabinets
                this is the overall installed height.

        Returns:
            Resolved CabinetDimensions.

        Raises:
            UnsupportedArchetypeError: If the archetype is unknown.
            InvalidDimensionError: If the width or height is off the ladder.
        """
        archetype = CabinetArchetype.parse(archetype)
        widths = self.available_widths(archetype)
        if not _on_ladder(width, widths):
            raise InvalidDimensionError(
                f"Width {width:g}\" is not available for {archetype.value} "
                f"cabinets (supported: {_describe(widths)})"
            )

        if archetype == CabinetArchetype.BASE:
            dims = CabinetDimensions(
                archetype=archetype,
                width=width,
                height=BASE_BOX_HEIGHT,
                depth=BASE_DEPTH,
                total_height=BASE_BOX_HEIGHT + TOE_KICK_HEIGHT,
                has_two_doors=False,
                toe_kick_height=TOE_KICK_HEIGHT,
                toe_kick_depth=TOE_KICK_DEPTH,
            )
            logger.debug(f"Resolved base cabinet {width:g}\" wide: {dims}")
            return dims

        heights = self.available_heights(archetype)
        if height is None or not _on_ladder(height, heights):
            raise InvalidDimensionError(
                f"Height {_show(height)} is not available for {archetype.value} "
                f"cabinets (supported: {_describe(heights)})"
            )

        if archetype == CabinetArchetype.WALL:
            dims = CabinetDimensions(
                archetype=archetype,
                width=width,
                height=height,
                depth=WALL_DEPTH,
                total_height=height,
                has_two_doors=width > WALL_TWO_DOOR_THRESHOLD,
                box_depth=WALL_BOX_DEPTH,
                door_thickness=DOOR_THICKNESS,
            )
        else:
            dims = CabinetDimensions(
                archetype=archetype,
                width=width,
                height=height - TOE_KICK_HEIGHT,
                depth=TALL_DEPTH,
                total_height=height,
                has_two_doors=False,
                box_depth=TALL_BOX_DEPTH,
                door_thickness=DOOR_THICKNESS,
                toe_kick_height=TOE_KICK_HEIGHT,
                toe_kick_depth=TOE_KICK_DEPTH,
            )
        logger.debug(
            f"Resolved {archetype.value} cabinet {width:g}\"x{height:g}\": {dims}"
        )
        return dims


def _describe(ladder: list[float]) -> str:
    return ", ".join(f"{value:g}" for value in ladder)


def _show(value: float | None) -> str:
    return "(none)" if value is None else f'{value:g}"'


_engine = DimensionRuleEngine()


def get_available_widths(archetype: CabinetArchetype | str) -> list[float]:
    """Supported nominal widths for an archetype."""
    return _engine.available_widths(archetype)


def get_available_heights(archetype: CabinetArchetype | str) -> list[float]:
    """Supported nominal heights for an archetype."""
    return _engine.available_heights(archetype)


def get_cabinet_dimensions(
    archetype: CabinetArchetype | str, width: float, height: float | None = None
) -> CabinetDimensions:
    """Resolve dimensions for a ladder size, see DimensionRuleEngine."""
    return _engine.dimensions_for(archetype, width, height)
