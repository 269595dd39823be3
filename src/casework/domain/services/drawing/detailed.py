"""Detailed CAD-style drawing generator.

Produces annotated top, front elevation and isometric wireframes for any
archetype. All geometry comes from the constructed cabinet: grooves, shelf
pins and hinge cups are drawn where the machining actually puts them, and
the door outlines come from the shared door layout.
"""

from __future__ import annotations

import logging
from fractions import Fraction

from ...entities import Cabinet, Component
from ...value_objects import (
    WEIGHT_BAND,
    WEIGHT_LIGHT,
    CabinetDrawing,
    DimensionLine,
    GrooveKind,
    Line3D,
    LineStyle,
    PartType,
    Point3D,
    SemanticColor,
    WireframeGeometry,
)
from ..doors import DoorLeaf, door_layout
from ..machining import SHELF_PIN_SPACING
from .features import (
    BACK_PANEL,
    CARCASS,
    DOOR,
    DOOR_SPLIT,
    PANEL,
    SHELF,
    TOE_KICK,
    groove_of,
    horizontal_members,
)
from .projection import iso_project

logger = logging.getLogger(__name__)

PIN_GLYPH = "⊕"  # circled plus
HINGE_GLYPH = "◉"  # fisheye
TITLE_FONT = 13.0
CALLOUT_FONT = 6.0


def fraction(value: float) -> str:
    """Format inches as a shop fraction, e.g. 0.75 -> "3/4"."""
    frac = Fraction(value).limit_denominator(64)
    whole, rest = divmod(frac.numerator, frac.denominator)
    if rest == 0:
        return str(whole)
    if whole:
        return f"{whole}-{rest}/{frac.denominator}"
    return f"{rest}/{frac.denominator}"


def inches(value: float) -> str:
    return f'{value:g}"'


class DetailedDrawingGenerator:
    """Generates CAD-quality views of a constructed cabinet."""

    def generate(self, cabinet: Cabinet, show_internals: bool = True) -> CabinetDrawing:
        drawing = CabinetDrawing(
            top=self.top_view(cabinet, show_internals),
            elevation=self.elevation_view(cabinet, show_internals),
            iso=self.iso_view(cabinet, show_internals),
        )
        logger.debug(
            f"Drew {cabinet.id}: {len(drawing.top.lines)} top, "
            f"{len(drawing.elevation.lines)} elevation, "
            f"{len(drawing.iso.lines)} iso lines"
        )
        return drawing

    # =========================================================================
    # Top view (plan)
    # =========================================================================

    def top_view(self, cabinet: Cabinet, show_internals: bool = True) -> WireframeGeometry:
        """Plan view looking down; y runs from the front edge (0) to the back."""
        dims = cabinet.dimensions
        t = cabinet.material.thickness
        w = dims.width
        d = dims.carcass_depth
        geo = WireframeGeometry()

        geo.add_rect(0, 0, w, d, **CARCASS.kwargs())

        if show_internals:
            side = cabinet.component(PartType.SIDE)
            back_groove = groove_of(side, GrooveKind.BACK_PANEL)
            dado = groove_of(side, GrooveKind.DADO)
            back_y = back_groove.x

            for x in (t, w - t):
                geo.add_line(x, 0, x, d, **PANEL.kwargs())

            # Dado depth ticks into each side panel
            for y in (dado.y, dado.y + dado.width):
                geo.add_line(t - dado.depth, y, t, y, color=SemanticColor.INTERNAL)
                geo.add_line(
                    w - t, y, w - t + dado.depth, y, color=SemanticColor.INTERNAL
                )

            geo.add_line(t, back_y, w - t, back_y, **BACK_PANEL.kwargs())
            for x in (t, w - t):
                geo.add_line(
                    x,
                    back_y,
                    x,
                    back_y + back_groove.width,
                    color=SemanticColor.INTERNAL,
                )

            geo.add_line(t, 0, w - t, 0, **PANEL.kwargs())

            shelves = cabinet.components_of(PartType.SHELF)
            if shelves:
                shelf = shelves[0]
                inset = (w - 2 * t - shelf.width) / 2
                geo.add_rect(
                    t + inset,
                    inset,
                    shelf.width,
                    shelf.height,
                    **SHELF.kwargs(),
                )

            # One glyph per shelf-pin column on each side
            columns = sorted({h.x_from_edge for h in side.holes})
            for y in columns:
                geo.annotate(t + 0.5, y, PIN_GLYPH, font_size=5)
                geo.annotate(w - t - 0.5, y, PIN_GLYPH, font_size=5)

            geo.add_line(
                0, 0, w, 0, weight=WEIGHT_BAND, color=SemanticColor.EDGE_BAND
            )

            geo.annotate(
                t + 1,
                dado.y + dado.width / 2,
                f'DADO {fraction(dado.depth)}"D × {fraction(dado.width)}"W',
                font_size=CALLOUT_FONT,
                leader=(t, dado.y + dado.width / 2),
            )
            back = cabinet.component(PartType.BACK)
            geo.annotate(
                w / 2, back_y + 1, f'{fraction(back.thickness)}" BACK PANEL', font_size=7
            )
            if columns:
                geo.annotate(
                    t + 3.5, columns[0] + SHELF_PIN_SPACING / 2, "32mm", font_size=CALLOUT_FONT
                )

        geo.add_dimension((0, d + 2), (w, d + 2), w, f"{inches(w)} WIDTH", offset=2)
        geo.add_dimension((w + 2, 0), (w + 2, d), d, f"{inches(d)} DEPTH", offset=2)
        if show_internals:
            internal = w - 2 * t
            geo.add_dimension(
                (t, -2), (w - t, -2), internal, f'{internal:.2f}" INT', offset=-2
            )

        geo.annotate(w / 2, d + 5, "TOP VIEW (PLAN)", font_size=TITLE_FONT)
        return geo

    # =========================================================================
    # Front elevation
    # =========================================================================

    def elevation_view(
        self, cabinet: Cabinet, show_internals: bool = True
    ) -> WireframeGeometry:
        """Front elevation with the carcass box bottom at y = 0."""
        dims = cabinet.dimensions
        t = cabinet.material.thickness
        w = dims.width
        h = dims.box_height
        leaves = door_layout(dims, cabinet.configuration.overlay)
        overlay = cabinet.configuration.overlay.inches
        geo = WireframeGeometry()

        geo.add_rect(0, 0, w, h, **CARCASS.kwargs())

        if dims.has_toe_kick:
            tk = dims.toe_kick_height
            geo.add_line(0, -tk, w, -tk, **TOE_KICK.kwargs())
            geo.add_line(0, -tk, 0, 0, **TOE_KICK.kwargs())
            geo.add_line(w, -tk, w, 0, **TOE_KICK.kwargs())

        if show_internals:
            self._elevation_internals(cabinet, geo)

        for leaf in leaves:
            geo.add_rect(leaf.x, leaf.y, leaf.width, leaf.height, **DOOR.kwargs())
        label_y = h + overlay + 2.8
        if len(leaves) > 1:
            geo.add_line(w / 2, -overlay, w / 2, h + overlay, **DOOR_SPLIT.kwargs())
            geo.annotate(w / 2, label_y, f"({len(leaves)}) DOORS", font_size=9)
        else:
            geo.annotate(w / 2, label_y, "(1) DOOR", font_size=9)

        geo.add_dimension((0, h + 3.5), (w, h + 3.5), w, inches(w), offset=3.5)
        geo.add_dimension((w + 3, 0), (w + 3, h), h, f"{inches(h)} BOX", offset=3)
        bottom = 0.0
        if dims.has_toe_kick:
            tk = dims.toe_kick_height
            bottom = -tk
            geo.add_dimension((w + 3, -tk), (w + 3, 0), tk, f"{inches(tk)} TK", offset=3)
        geo.add_dimension(
            (w + 7, bottom),
            (w + 7, h),
            dims.total_height,
            f"{inches(dims.total_height)} TOT",
            offset=7,
        )
        geo.add_dimension(
            (-overlay, -4), (0, -4), overlay, f'{fraction(overlay)}" OL', offset=-4
        )

        geo.annotate(
            w / 2, h + 7.5, "FRONT ELEVATION - FULL OVERLAY", font_size=TITLE_FONT
        )
        if dims.has_toe_kick:
            geo.annotate(
                w / 2,
                -dims.toe_kick_height / 2,
                f"TOE KICK {inches(dims.toe_kick_depth)} DEEP",
                font_size=8,
            )
        return geo

    def _elevation_internals(self, cabinet: Cabinet, geo: WireframeGeometry) -> None:
        dims = cabinet.dimensions
        t = cabinet.material.thickness
        w = dims.width
        h = dims.box_height
        side = cabinet.component(PartType.SIDE)

        for x in (t, w - t):
            geo.add_line(x, 0, x, h, **PANEL.kwargs())

        # Dado ticks where the bottom and top panels enter the sides
        for dado in (g for g in side.grooves if g.kind == GrooveKind.DADO):
            for y in (dado.y, dado.y + dado.width):
                geo.add_line(t - 0.15, y, t + 0.15, y, color=SemanticColor.INTERNAL)
                geo.add_line(
                    w - t - 0.15, y, w - t + 0.15, y, color=SemanticColor.INTERNAL
                )
        for y, thickness in horizontal_members(cabinet):
            geo.add_rect(t, y, w - 2 * t, thickness, **PANEL.kwargs())

        back_groove = groove_of(side, GrooveKind.BACK_PANEL)
        for x in (t - 0.1, w - t + 0.1):
            geo.add_line(
                x,
                back_groove.y,
                x,
                back_groove.y + back_groove.length,
                **BACK_PANEL.kwargs(),
            )

        shelf_ys = _shelf_heights(cabinet)
        for y in shelf_ys:
            geo.add_line(t + 0.125, y, w - t - 0.125, y, **SHELF.kwargs())
        if shelf_ys:
            geo.annotate(w + 2.5, shelf_ys[0], "ADJ", font_size=7)

        rows = sorted({hole.y_from_reference for hole in side.holes})
        for y in rows:
            geo.annotate(t + 0.5, y, PIN_GLYPH, font_size=5)
            geo.annotate(w - t - 0.5, y, PIN_GLYPH, font_size=5)
        if len(rows) > 1:
            geo.dimensions.append(
                DimensionLine(
                    Point3D(-3, rows[0]),
                    Point3D(-3, rows[1]),
                    32.0,
                    unit="mm",
                    label="32mm",
                    offset=-3,
                )
            )

        for x in (0, w):
            geo.add_line(x, 0, x, h, weight=3.5, color=SemanticColor.EDGE_BAND)

        for index, leaf in enumerate(door_layout(dims, cabinet.configuration.overlay)):
            door = _door_component(cabinet, leaf)
            self._hinges(geo, leaf, door, label=index == 0)

    def _hinges(
        self, geo: WireframeGeometry, leaf: DoorLeaf, door: Component, label: bool
    ) -> None:
        for hole in door.holes:
            if leaf.hinge_side == "left":
                x = leaf.x + hole.x_from_edge
            else:
                x = leaf.x + leaf.width - hole.x_from_edge
            y = leaf.y + hole.y_from_reference
            geo.annotate(x, y, HINGE_GLYPH, font_size=9)
            geo.add_line(
                x - 0.3, y - 0.6, x - 0.3, y + 0.6, weight=1.2,
                color=SemanticColor.HARDWARE,
            )
            geo.add_line(
                x - 0.5, y, x - 0.1, y, weight=1.2, color=SemanticColor.HARDWARE
            )
        if label and door.holes:
            top = max(h.y_from_reference for h in door.holes) + leaf.y
            x = leaf.x + door.holes[0].x_from_edge
            geo.annotate(x, top + 1.8, "BLUM", font_size=CALLOUT_FONT)
            geo.annotate(
                x, top + 1.0, f"{round(door.holes[0].diameter * 25.4)}mm",
                font_size=CALLOUT_FONT,
            )

    # =========================================================================
    # Isometric
    # =========================================================================

    def iso_view(self, cabinet: Cabinet, show_internals: bool = True) -> WireframeGeometry:
        """Isometric wireframe projected with ``iso_project``."""
        dims = cabinet.dimensions
        t = cabinet.material.thickness
        w = dims.width
        h = dims.box_height
        d = dims.carcass_depth
        geo = WireframeGeometry()

        _iso_box(geo, 0, 0, 0, w, h, d, **CARCASS.kwargs())

        if show_internals:
            side = cabinet.component(PartType.SIDE)
            back_z = groove_of(side, GrooveKind.BACK_PANEL).x
            bottom_y = min(
                g.y for g in side.grooves if g.kind == GrooveKind.DADO
            )
            for x in (t, w - t):
                _iso_quad(
                    geo,
                    [(x, 0, 0), (x, h, 0), (x, h, d), (x, 0, d)],
                    **PANEL.kwargs(),
                )
            _iso_quad(
                geo,
                [(t, bottom_y, 0), (w - t, bottom_y, 0), (w - t, bottom_y, back_z), (t, bottom_y, back_z)],
                style=LineStyle.DASHED,
                color=SemanticColor.INTERNAL,
            )
            for y in _shelf_heights(cabinet):
                _iso_quad(
                    geo,
                    [
                        (t + 0.125, y, 0.125),
                        (w - t - 0.125, y, 0.125),
                        (w - t - 0.125, y, back_z - 0.125),
                        (t + 0.125, y, back_z - 0.125),
                    ],
                    **SHELF.kwargs(),
                )
            _iso_quad(
                geo,
                [(t, bottom_y, back_z), (w - t, bottom_y, back_z), (w - t, h, back_z), (t, h, back_z)],
                **BACK_PANEL.kwargs(),
            )

        if dims.has_toe_kick:
            tk = dims.toe_kick_height
            front = d - dims.toe_kick_depth
            _iso_box(
                geo, 0, -tk, front, w, tk, dims.toe_kick_depth, **TOE_KICK.kwargs()
            )

        title = iso_project(w / 2, h + 5, d / 2)
        geo.annotate(title.x, title.y, "3D ISOMETRIC VIEW", font_size=TITLE_FONT)
        return geo


# =============================================================================
# Helpers
# =============================================================================


def _door_component(cabinet: Cabinet, leaf: DoorLeaf) -> Component:
    for door in cabinet.doors:
        if door.name == leaf.name:
            return door
    raise KeyError(f"Cabinet {cabinet.id} has no door named {leaf.name}")


def _shelf_heights(cabinet: Cabinet) -> list[float]:
    """Evenly spaced display heights for the adjustable shelves."""
    shelves = cabinet.components_of(PartType.SHELF)
    if not shelves:
        return []
    count = shelves[0].quantity
    h = cabinet.dimensions.box_height
    return [h * (i + 1) / (count + 1) for i in range(count)]


def _iso_quad(geo: WireframeGeometry, corners, **style) -> None:
    points = [iso_project(*c) for c in corners]
    for start, end in zip(points, points[1:] + points[:1]):
        geo.lines.append(_line(start, end, **style))


def _iso_box(
    geo: WireframeGeometry,
    x: float,
    y: float,
    z: float,
    w: float,
    h: float,
    d: float,
    **style,
) -> None:
    front = [(x, y, z), (x + w, y, z), (x + w, y + h, z), (x, y + h, z)]
    back = [(px, py, z + d) for px, py, _ in front]
    _iso_quad(geo, front, **style)
    _iso_quad(geo, back, **style)
    for a, b in zip(front, back):
        geo.lines.append(_line(iso_project(*a), iso_project(*b), **style))


def _line(
    start: Point3D,
    end: Point3D,
    style: LineStyle = LineStyle.SOLID,
    weight: float = WEIGHT_LIGHT,
    color: SemanticColor = SemanticColor.STRUCTURAL,
) -> Line3D:
    return Line3D(start, end, style, weight, color)
