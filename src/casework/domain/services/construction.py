"""Construction feature generator.

Turns resolved cabinet dimensions into the ordered component list: carcass
panels with their grooves and shelf-pin holes, shelves, doors with hinge
borings and the toe kick assembly.
"""

from __future__ import annotations

import logging

from ..entities import Cabinet, Component
from ..exceptions import DegenerateConfigurationError
from ..value_objects import (
    CabinetArchetype,
    CabinetConfiguration,
    CabinetDimensions,
    EdgeBanding,
    MaterialSpec,
    PartType,
)
from .dimension_rules import get_cabinet_dimensions
from .doors import door_layout
from .machining import (
    hinge_holes,
    hinge_positions,
    shelf_pin_holes,
    shelf_pin_rows,
    side_panel_grooves,
)

logger = logging.getLogger(__name__)

BACK_PANEL_MATERIAL = MaterialSpec.standard_1_4()
STRETCHER_DEPTH = 3.0
SHELF_WIDTH_CLEARANCE = 0.125
SHELF_DEPTH_CLEARANCE = 0.75
BASE_BACK_CLEARANCE = 0.75
CLOSED_BACK_CLEARANCE = 1.5


class ConstructionFeatureGenerator:
    """Builds the component graph for a cabinet."""

    def validate(
        self,
        dimensions: CabinetDimensions,
        material: MaterialSpec,
        configuration: CabinetConfiguration,
    ) -> None:
        """Check that every feature has room before anything is generated.

        Raises:
            DegenerateConfigurationError: If a feature would have zero or
                negative size.
        """
        t = material.thickness
        if configuration.shelf_count is not None and configuration.shelf_count < 0:
            raise DegenerateConfigurationError(
                f"Shelf count must not be negative, got {configuration.shelf_count}"
            )

        internal_width = dimensions.width - 2 * t
        internal_depth = dimensions.carcass_depth - t
        if internal_width <= SHELF_WIDTH_CLEARANCE or internal_depth <= SHELF_DEPTH_CLEARANCE:
            raise DegenerateConfigurationError(
                f"Material thickness {t:g}\" leaves no interior in a "
                f"{dimensions.width:g}\"x{dimensions.carcass_depth:g}\" carcass"
            )
        if dimensions.box_height - _back_clearance(dimensions) <= 0:
            raise DegenerateConfigurationError(
                f"Box height {dimensions.box_height:g}\" leaves no room for a back panel"
            )

        # Each raises DegenerateConfigurationError when its window is too small
        shelf_pin_rows(dimensions.archetype, dimensions.box_height)
        for leaf in door_layout(dimensions, configuration.overlay):
            hinge_positions(dimensions, leaf.height)

    def generate(
        self,
        dimensions: CabinetDimensions,
        material: MaterialSpec | None = None,
        configuration: CabinetConfiguration | None = None,
    ) -> Cabinet:
        """Generate the complete cabinet.

        Args:
            dimensions: Resolved cabinet dimensions.
            material: Carcass material. Defaults to 3/4" plywood.
            configuration: Construction options. Defaults to the archetype
                defaults.

        Returns:
            Cabinet with components in construction order: side panels,
            horizontal members, back, shelves, doors, toe kick.

        Raises:
            DegenerateConfigurationError: If the configuration leaves no room
                for a feature.
        """
        material = material or MaterialSpec.standard_3_4()
        configuration = (configuration or CabinetConfiguration()).resolved_for(
            dimensions
        )
        self.validate(dimensions, material, configuration)

        components: list[Component] = [self._side_panel(dimensions, material)]
        components.extend(self._horizontal_members(dimensions, material))
        components.append(self._back_panel(dimensions, material))
        shelf = self._shelf(dimensions, material, configuration)
        if shelf is not None:
            components.append(shelf)
        components.extend(self._doors(dimensions, material, configuration))
        components.extend(self._toe_kick(dimensions, material))

        cabinet = Cabinet(
            archetype=dimensions.archetype,
            dimensions=dimensions,
            material=material,
            configuration=configuration,
            components=tuple(components),
        )
        logger.debug(
            f"Generated {cabinet.id} with {len(components)} components "
            f"({sum(c.quantity for c in components)} pieces)"
        )
        return cabinet

    # -------------------------------------------------------------------------
    # Carcass
    # -------------------------------------------------------------------------

    def _side_panel(
        self, dimensions: CabinetDimensions, material: MaterialSpec
    ) -> Component:
        if dimensions.archetype == CabinetArchetype.WALL:
            banding = EdgeBanding(front=True, bottom=True)
        else:
            banding = EdgeBanding.front_only()
        return Component(
            name="Side Panel",
            part=PartType.SIDE,
            width=dimensions.carcass_depth,
            height=dimensions.box_height,
            quantity=2,
            material=material.material_type,
            thickness=material.thickness,
            edge_banding=banding,
            holes=tuple(
                shelf_pin_holes(
                    dimensions.archetype,
                    dimensions.carcass_depth,
                    dimensions.box_height,
                )
            ),
            grooves=tuple(side_panel_grooves(dimensions, material.thickness)),
        )

    def _horizontal_members(
        self, dimensions: CabinetDimensions, material: MaterialSpec
    ) -> list[Component]:
        internal_width, internal_depth = _interior(dimensions, material)

        def panel(name: str, part: PartType) -> Component:
            return Component(
                name=name,
                part=part,
                width=internal_width,
                height=internal_depth,
                material=material.material_type,
                thickness=material.thickness,
                edge_banding=EdgeBanding.front_only(),
            )

        bottom = panel("Bottom Panel", PartType.BOTTOM)
        if dimensions.archetype != CabinetArchetype.BASE:
            return [panel("Top Panel", PartType.TOP), bottom]

        stretcher = Component(
            name="Top Stretcher",
            part=PartType.TOP_STRETCHER,
            width=internal_width,
            height=STRETCHER_DEPTH,
            material=material.material_type,
            thickness=material.thickness,
        )
        return [bottom, stretcher]

    def _back_panel(
        self, dimensions: CabinetDimensions, material: MaterialSpec
    ) -> Component:
        internal_width, _ = _interior(dimensions, material)
        return Component(
            name="Back Panel",
            part=PartType.BACK,
            width=internal_width,
            height=dimensions.box_height - _back_clearance(dimensions),
            material=BACK_PANEL_MATERIAL.material_type,
            thickness=BACK_PANEL_MATERIAL.thickness,
        )

    def _shelf(
        self,
        dimensions: CabinetDimensions,
        material: MaterialSpec,
        configuration: CabinetConfiguration,
    ) -> Component | None:
        if not configuration.has_adjustable_shelf or not configuration.shelf_count:
            return None
        internal_width, internal_depth = _interior(dimensions, material)
        return Component(
            name="Adjustable Shelf",
            part=PartType.SHELF,
            width=internal_width - SHELF_WIDTH_CLEARANCE,
            height=internal_depth - SHELF_DEPTH_CLEARANCE,
            quantity=configuration.shelf_count,
            material=material.material_type,
            thickness=material.thickness,
            edge_banding=EdgeBanding.front_only(),
        )

    # -------------------------------------------------------------------------
    # Doors and toe kick
    # -------------------------------------------------------------------------

    def _doors(
        self,
        dimensions: CabinetDimensions,
        material: MaterialSpec,
        configuration: CabinetConfiguration,
    ) -> list[Component]:
        thickness = dimensions.door_thickness or material.thickness
        return [
            Component(
                name=leaf.name,
                part=PartType.DOOR,
                width=leaf.width,
                height=leaf.height,
                material=material.material_type,
                thickness=thickness,
                edge_banding=EdgeBanding.all_sides(),
                holes=tuple(hinge_holes(dimensions, leaf.height, leaf.hinge_side)),
            )
            for leaf in door_layout(dimensions, configuration.overlay)
        ]

    def _toe_kick(
        self, dimensions: CabinetDimensions, material: MaterialSpec
    ) -> list[Component]:
        if not dimensions.has_toe_kick:
            return []
        kick_height = dimensions.toe_kick_height
        common = dict(
            material=material.material_type, thickness=material.thickness
        )
        parts = [
            Component(
                name="Toe Kick Front",
                part=PartType.TOE_KICK_FRONT,
                width=dimensions.width,
                height=kick_height,
                **common,
            ),
            Component(
                name="Toe Kick Side",
                part=PartType.TOE_KICK_SIDE,
                width=dimensions.toe_kick_depth,
                height=kick_height,
                quantity=2,
                **common,
            ),
        ]
        if dimensions.archetype == CabinetArchetype.TALL:
            internal_width, _ = _interior(dimensions, material)
            parts.append(
                Component(
                    name="Toe Kick Back",
                    part=PartType.TOE_KICK_BACK,
                    width=internal_width,
                    height=kick_height,
                    **common,
                )
            )
        return parts


def _interior(
    dimensions: CabinetDimensions, material: MaterialSpec
) -> tuple[float, float]:
    """Internal width and depth of the carcass box."""
    t = material.thickness
    return dimensions.width - 2 * t, dimensions.carcass_depth - t


def _back_clearance(dimensions: CabinetDimensions) -> float:
    if dimensions.archetype == CabinetArchetype.BASE:
        return BASE_BACK_CLEARANCE
    return CLOSED_BACK_CLEARANCE


def generate_cabinet(
    archetype: CabinetArchetype | str,
    width: float,
    height: float | None = None,
    material: MaterialSpec | None = None,
    configuration: CabinetConfiguration | None = None,
) -> Cabinet:
    """Resolve a ladder size and build the complete cabinet.

    Raises:
        UnsupportedArchetypeError: If the archetype is unknown.
        InvalidDimensionError: If the size is off the ladder.
        DegenerateConfigurationError: If a feature has no room.
    """
    dimensions = get_cabinet_dimensions(archetype, width, height)
    return ConstructionFeatureGenerator().generate(dimensions, material, configuration)
