"""SVG exporter for cabinet drawings.

Both drawing tiers serialize to vector SVG. Detailed geometry is written in
drawing inches inside a centred, scaled group with the y axis flipped;
basic-tier screen drawings are already in pixels and are written as is.
Numbers are formatted with a fixed precision so identical input always
produces identical bytes.
"""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from casework.domain.services.drawing import DrawOptions
from casework.domain.value_objects import (
    PALETTE,
    DrawingTier,
    LineStyle,
    ScreenDrawing,
    SemanticColor,
    ViewMode,
    WireframeGeometry,
)
from casework.infrastructure.exporters.base import ExporterRegistry
from casework.infrastructure.exporters.canvas import DETAILED_SCALE, SCREEN_DASH

if TYPE_CHECKING:
    from casework.application.dtos import CabinetOutput

logger = logging.getLogger(__name__)


def num(value: float) -> str:
    """Format a coordinate deterministically (4 decimals, no trailing zeros)."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _dash(scale: float = 1.0) -> str:
    """Dash pattern matching the canvas pixel dash at the given drawing scale."""
    return ",".join(num(v / scale) for v in SCREEN_DASH)


def _header(width: int, height: int) -> list[str]:
    return [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" '
        f'height="{height}" viewBox="0 0 {width} {height}">',
        '  <rect width="100%" height="100%" fill="white"/>',
    ]


def render_geometry(
    geometry: WireframeGeometry, width: int = 800, height: int = 600
) -> str:
    """Serialize detailed-tier geometry to an SVG document."""
    parts = _header(width, height)
    parts.append(
        f'  <g transform="translate({num(width / 2)}, {num(height / 2)}) '
        f'scale({num(DETAILED_SCALE)})">'
    )

    for line in geometry.lines:
        dash = _dash(DETAILED_SCALE) if line.style == LineStyle.DASHED else "none"
        parts.append(
            f'    <line x1="{num(line.start.x)}" y1="{num(-line.start.y)}" '
            f'x2="{num(line.end.x)}" y2="{num(-line.end.y)}" '
            f'stroke="{PALETTE[line.color]}" '
            f'stroke-width="{num(line.weight / DETAILED_SCALE)}" '
            f'stroke-dasharray="{dash}"/>'
        )

    dim_color = PALETTE[SemanticColor.DIMENSION]
    for dim in geometry.dimensions:
        parts.append(
            f'    <line x1="{num(dim.start.x)}" y1="{num(-dim.start.y)}" '
            f'x2="{num(dim.end.x)}" y2="{num(-dim.end.y)}" '
            f'stroke="{dim_color}" stroke-width="0.05" stroke-dasharray="none"/>'
        )
        mid_x = (dim.start.x + dim.end.x) / 2
        mid_y = -(dim.start.y + dim.end.y) / 2
        parts.append(
            f'    <text x="{num(mid_x)}" y="{num(mid_y)}" font-family="sans-serif" '
            f'font-size="1" '
            f'text-anchor="middle" fill="{dim_color}">{escape(dim.label)}</text>'
        )

    text_color = PALETTE[SemanticColor.STRUCTURAL]
    for ann in geometry.annotations:
        if ann.leader is not None:
            parts.append(
                f'    <line x1="{num(ann.position.x)}" y1="{num(-ann.position.y)}" '
                f'x2="{num(ann.leader.x)}" y2="{num(-ann.leader.y)}" '
                f'stroke="{PALETTE[SemanticColor.INTERNAL]}" stroke-width="0.05" '
                f'stroke-dasharray="none"/>'
            )
        parts.append(
            f'    <text x="{num(ann.position.x)}" y="{num(-ann.position.y)}" '
            f'font-family="sans-serif" '
            f'font-size="{num(ann.font_size / DETAILED_SCALE)}" text-anchor="middle" '
            f'fill="{text_color}">{escape(ann.text)}</text>'
        )

    parts.append("  </g>")
    parts.append("</svg>")
    return "\n".join(parts)


_ANCHORS = {"center": "middle", "left": "start", "right": "end"}


def render_screen(drawing: ScreenDrawing) -> str:
    """Serialize a basic-tier screen drawing to an SVG document."""
    parts = _header(drawing.width, drawing.height)
    for line in drawing.lines:
        dash = _dash() if line.style == LineStyle.DASHED else "none"
        parts.append(
            f'  <line x1="{num(line.x1)}" y1="{num(line.y1)}" '
            f'x2="{num(line.x2)}" y2="{num(line.y2)}" '
            f'stroke="{PALETTE[line.color]}" stroke-width="{num(line.weight)}" '
            f'stroke-dasharray="{dash}"/>'
        )
    for text in drawing.texts:
        parts.append(
            f'  <text x="{num(text.x)}" y="{num(text.y)}" '
            f'font-family="sans-serif" font-size="{num(text.font_size)}" '
            f'text-anchor="{_ANCHORS.get(text.align, "middle")}" '
            f'fill="{PALETTE[text.color]}">{escape(text.text)}</text>'
        )
    parts.append("</svg>")
    return "\n".join(parts)


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for one view of a cabinet.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        view: ViewMode | str = ViewMode.ELEVATION,
        tier: DrawingTier | str = DrawingTier.DETAILED,
        width: int = 800,
        height: int = 600,
        options: DrawOptions | None = None,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            view: Which view to export.
            tier: Drawing tier.
            width: Document width in pixels (detailed tier).
            height: Document height in pixels (detailed tier).
            options: Screen options for the basic tier; its canvas size
                sets the document size.
        """
        self.view = ViewMode(view)
        self.tier = DrawingTier(tier)
        self.width = width
        self.height = height
        self.options = options or DrawOptions(canvas_width=width, canvas_height=height)

    def export(self, output: CabinetOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported {self.tier.value} {self.view.value} SVG to {path}")

    def export_string(self, output: CabinetOutput) -> str:
        from casework.application.commands import RenderDrawingCommand

        rendered = RenderDrawingCommand().execute(
            output, self.view, self.tier, self.options
        )
        if isinstance(rendered, ScreenDrawing):
            return render_screen(rendered)
        return render_geometry(rendered, self.width, self.height)
