"""Canvas command exporter.

Emits a JSON list of 2D-canvas drawing calls that a browser client replays
against ``CanvasRenderingContext2D``. Each command is a dict with the method
or property name under ``op`` and its arguments under ``args``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from casework.domain.services.drawing import DrawOptions
from casework.domain.value_objects import (
    PALETTE,
    DrawingTier,
    LineStyle,
    ScreenDrawing,
    ScreenLine,
    ScreenText,
    SemanticColor,
    ViewMode,
    WireframeGeometry,
)
from casework.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from casework.application.dtos import CabinetOutput

logger = logging.getLogger(__name__)

Command = dict[str, Any]

SCREEN_DASH = [5, 5]
DETAILED_SCALE = 10.0


def _cmd(op: str, *args: Any) -> Command:
    return {"op": op, "args": list(args)}


def _round(value: float) -> float:
    rounded = round(value, 4)
    return 0.0 if rounded == 0 else rounded


def line_commands(line: ScreenLine) -> list[Command]:
    """Commands stroking one screen line."""
    return [
        _cmd("strokeStyle", PALETTE[line.color]),
        _cmd("lineWidth", _round(line.weight)),
        _cmd("setLineDash", SCREEN_DASH if line.style == LineStyle.DASHED else []),
        _cmd("beginPath"),
        _cmd("moveTo", _round(line.x1), _round(line.y1)),
        _cmd("lineTo", _round(line.x2), _round(line.y2)),
        _cmd("stroke"),
    ]


def text_commands(text: ScreenText) -> list[Command]:
    """Commands filling one screen label."""
    return [
        _cmd("font", f"{text.font_size:g}px sans-serif"),
        _cmd("fillStyle", PALETTE[text.color]),
        _cmd("textAlign", text.align),
        _cmd("fillText", text.text, _round(text.x), _round(text.y)),
    ]


def screen_to_commands(drawing: ScreenDrawing) -> list[Command]:
    """Translate a basic-tier drawing into canvas commands."""
    commands = [
        _cmd("save"),
        _cmd("fillStyle", "#ffffff"),
        _cmd("fillRect", 0, 0, drawing.width, drawing.height),
    ]
    for line in drawing.lines:
        commands.extend(line_commands(line))
    for text in drawing.texts:
        commands.extend(text_commands(text))
    commands.append(_cmd("restore"))
    return commands


def geometry_to_screen(
    geometry: WireframeGeometry, width: int, height: int, view: ViewMode
) -> ScreenDrawing:
    """Flatten detailed geometry into pixel space, centred on the canvas."""
    cx, cy = width / 2, height / 2

    def px(x: float, y: float) -> tuple[float, float]:
        return cx + x * DETAILED_SCALE, cy - y * DETAILED_SCALE

    drawing = ScreenDrawing(view=view, width=width, height=height)
    for line in geometry.lines:
        x1, y1 = px(line.start.x, line.start.y)
        x2, y2 = px(line.end.x, line.end.y)
        drawing.lines.append(
            ScreenLine(x1, y1, x2, y2, line.color, line.weight, line.style)
        )
    for dim in geometry.dimensions:
        x1, y1 = px(dim.start.x, dim.start.y)
        x2, y2 = px(dim.end.x, dim.end.y)
        drawing.lines.append(
            ScreenLine(x1, y1, x2, y2, SemanticColor.DIMENSION, 0.5)
        )
        drawing.texts.append(
            ScreenText((x1 + x2) / 2, (y1 + y2) / 2, dim.label, DETAILED_SCALE)
        )
    for ann in geometry.annotations:
        x, y = px(ann.position.x, ann.position.y)
        if ann.leader is not None:
            lx, ly = px(ann.leader.x, ann.leader.y)
            drawing.lines.append(ScreenLine(x, y, lx, ly, SemanticColor.INTERNAL, 0.5))
        drawing.texts.append(
            ScreenText(x, y, ann.text, ann.font_size, SemanticColor.STRUCTURAL)
        )
    return drawing


@ExporterRegistry.register("canvas")
class CanvasCommandExporter:
    """Exports one view as a JSON list of canvas drawing commands.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for the command file.
    """

    format_name: ClassVar[str] = "canvas"
    file_extension: ClassVar[str] = "json"

    def __init__(
        self,
        view: ViewMode | str = ViewMode.ELEVATION,
        tier: DrawingTier | str = DrawingTier.BASIC,
        options: DrawOptions | None = None,
        indent: int | None = None,
    ) -> None:
        self.view = ViewMode(view)
        self.tier = DrawingTier(tier)
        self.options = options or DrawOptions()
        self.indent = indent

    def commands(self, output: CabinetOutput) -> list[Command]:
        """Render the configured view and return its command list."""
        from casework.application.commands import RenderDrawingCommand

        rendered = RenderDrawingCommand().execute(
            output, self.view, self.tier, self.options
        )
        if isinstance(rendered, WireframeGeometry):
            rendered = geometry_to_screen(
                rendered,
                self.options.canvas_width,
                self.options.canvas_height,
                self.view,
            )
        return screen_to_commands(rendered)

    def export(self, output: CabinetOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported canvas commands to {path}")

    def export_string(self, output: CabinetOutput) -> str:
        return json.dumps(self.commands(output), indent=self.indent)
