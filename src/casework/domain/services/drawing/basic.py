"""Basic wireframe renderer.

A light-weight screen-space rendering of the three views: the carcass box,
side panels and horizontal members, door overlay and toe kick, with optional
width/height labels. Shares the door layout, member placement, legend and
projection with the detailed tier so both draw the same cabinet the same way.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...entities import Cabinet
from ...value_objects import (
    GrooveKind,
    PartType,
    Point3D,
    ScreenDrawing,
    ScreenLine,
    ScreenText,
    ViewMode,
)
from ..doors import door_layout
from .features import (
    BACK_PANEL,
    CARCASS,
    DOOR,
    DOOR_SPLIT,
    PANEL,
    TOE_KICK,
    groove_of,
    horizontal_members,
)
from .projection import ScreenTransform

LABEL_FONT = 12.0


@dataclass(frozen=True)
class DrawOptions:
    """Screen settings for the basic renderer.

    Attributes:
        scale: Pixels per inch.
        offset_x: Left margin in pixels.
        offset_y: Top margin in pixels.
        show_internals: Draw side panels, horizontal members and the back line.
        show_dimensions: Draw width and height labels.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
    """

    scale: float = 8.0
    offset_x: float = 100.0
    offset_y: float = 100.0
    show_internals: bool = True
    show_dimensions: bool = True
    canvas_width: int = 800
    canvas_height: int = 600


class _Pen:
    """Collects screen lines through a transform."""

    def __init__(self, transform: ScreenTransform, drawing: ScreenDrawing) -> None:
        self.transform = transform
        self.drawing = drawing

    def line(self, p1: tuple[float, float], p2: tuple[float, float], **style) -> None:
        self.drawing.lines.append(ScreenLine(p1[0], p1[1], p2[0], p2[1], **style))

    def segment(self, x1: float, y1: float, x2: float, y2: float, **style) -> None:
        self.line(
            self.transform.apply(Point3D(x1, y1)),
            self.transform.apply(Point3D(x2, y2)),
            **style,
        )

    def rect(self, x: float, y: float, w: float, h: float, **style) -> None:
        corners = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
        for (x1, y1), (x2, y2) in zip(corners, corners[1:] + corners[:1]):
            self.segment(x1, y1, x2, y2, **style)

    def polygon(self, points: list[tuple[float, float]], **style) -> None:
        for p1, p2 in zip(points, points[1:] + points[:1]):
            self.line(p1, p2, **style)

    def text(self, x: float, y: float, text: str, align: str = "center") -> None:
        self.drawing.texts.append(ScreenText(x, y, text, LABEL_FONT, align=align))


class BasicWireframeRenderer:
    """Renders a cabinet view directly to screen coordinates."""

    def render(
        self,
        cabinet: Cabinet,
        view: ViewMode | str,
        options: DrawOptions | None = None,
    ) -> ScreenDrawing:
        opts = options or DrawOptions()
        view = ViewMode(view)
        drawing = ScreenDrawing(view, opts.canvas_width, opts.canvas_height)
        if view == ViewMode.TOP:
            self._top(cabinet, opts, drawing)
        elif view == ViewMode.ELEVATION:
            self._elevation(cabinet, opts, drawing)
        else:
            self._iso(cabinet, opts, drawing)
        return drawing

    def _top(self, cabinet: Cabinet, opts: DrawOptions, drawing: ScreenDrawing) -> None:
        dims = cabinet.dimensions
        t = cabinet.material.thickness
        w = dims.width
        d = dims.carcass_depth
        # Plan with the front edge at the top of the screen
        pen = _Pen(ScreenTransform(opts.scale, opts.offset_x, opts.offset_y), drawing)

        pen.rect(0, -d, w, d, **CARCASS.kwargs())
        if opts.show_internals:
            side = cabinet.component(PartType.SIDE)
            for x in (t, w - t):
                pen.segment(x, 0, x, -d, **PANEL.kwargs())
            back_y = -groove_of(side, GrooveKind.BACK_PANEL).x
            pen.segment(t, back_y, w - t, back_y, **BACK_PANEL.kwargs())

        if opts.show_dimensions:
            pen.text(opts.offset_x + w * opts.scale / 2, opts.offset_y - 10, f'{w:g}"')
            pen.text(
                opts.offset_x - 10,
                opts.offset_y + d * opts.scale / 2,
                f'{d:g}"',
                align="right",
            )

    def _elevation(
        self, cabinet: Cabinet, opts: DrawOptions, drawing: ScreenDrawing
    ) -> None:
        dims = cabinet.dimensions
        t = cabinet.material.thickness
        w = dims.width
        h = dims.box_height
        overlay = cabinet.configuration.overlay.inches
        # Box top sits at offset_y
        transform = ScreenTransform(opts.scale, opts.offset_x, opts.offset_y + h * opts.scale)
        pen = _Pen(transform, drawing)

        pen.rect(0, 0, w, h, **CARCASS.kwargs())

        if dims.has_toe_kick:
            tk = dims.toe_kick_height
            pen.segment(0, -tk, w, -tk, **TOE_KICK.kwargs())
            pen.segment(0, -tk, 0, 0, **TOE_KICK.kwargs())
            pen.segment(w, -tk, w, 0, **TOE_KICK.kwargs())

        if opts.show_internals:
            for y, thickness in horizontal_members(cabinet):
                pen.rect(t, y, w - 2 * t, thickness, **PANEL.kwargs())

        leaves = door_layout(dims, cabinet.configuration.overlay)
        for leaf in leaves:
            pen.rect(leaf.x, leaf.y, leaf.width, leaf.height, **DOOR.kwargs())
        if len(leaves) > 1:
            pen.segment(w / 2, -overlay, w / 2, h + overlay, **DOOR_SPLIT.kwargs())

        if opts.show_dimensions:
            pen.text(opts.offset_x + w * opts.scale / 2, opts.offset_y - 15, f'{w:g}"')
            pen.text(
                opts.offset_x - 10,
                opts.offset_y + h * opts.scale / 2,
                f'{h:g}"',
                align="right",
            )

    def _iso(self, cabinet: Cabinet, opts: DrawOptions, drawing: ScreenDrawing) -> None:
        dims = cabinet.dimensions
        t = cabinet.material.thickness
        w = dims.width
        h = dims.box_height
        d = dims.carcass_depth
        transform = ScreenTransform(opts.scale, opts.offset_x, opts.offset_y)
        pen = _Pen(transform, drawing)

        _box(pen, transform, 0, 0, 0, w, h, d, **CARCASS.kwargs())

        if opts.show_internals:
            for x in (t, w - t):
                pen.polygon(
                    [
                        transform.iso(x, 0, 0),
                        transform.iso(x, h, 0),
                        transform.iso(x, h, d),
                        transform.iso(x, 0, d),
                    ],
                    **PANEL.kwargs(),
                )

        if dims.has_toe_kick:
            tk = dims.toe_kick_height
            front = d - dims.toe_kick_depth
            _box(
                pen, transform, 0, -tk, front, w, tk, dims.toe_kick_depth,
                **TOE_KICK.kwargs(),
            )

        if opts.show_dimensions:
            x, y = transform.iso(w / 2, 0, 0)
            pen.text(x, y + 20, f'{w:g}"')
            x, y = transform.iso(0, h / 2, 0)
            pen.text(x - 10, y, f'{h:g}"', align="right")


def _box(
    pen: _Pen,
    transform: ScreenTransform,
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
    pen.polygon([transform.iso(*p) for p in front], **style)
    pen.polygon([transform.iso(*p) for p in back], **style)
    for a, b in zip(front, back):
        pen.line(transform.iso(*a), transform.iso(*b), **style)
