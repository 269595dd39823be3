"""DXF format exporter for cabinets.

Generates 2D DXF files (R2010 format). Two modes are supported:

- ``machining``: every piece laid out flat in a grid with its outline,
  hole circles and groove outlines, for CNC programming.
- ``drawing``: one detailed view with a layer per semantic colour so CAD
  users can toggle doors, hardware or dimensions independently.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf

from casework.domain.services.drawing import DrawOptions
from casework.domain.value_objects import (
    DrawingTier,
    LineStyle,
    Orientation,
    SemanticColor,
    ViewMode,
    WireframeGeometry,
)
from casework.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from casework.application.dtos import CabinetOutput
    from casework.domain.entities import Component


logger = logging.getLogger(__name__)


# Machining layers
MACHINING_LAYERS = {
    "OUTLINE": {"color": 7, "linetype": "CONTINUOUS"},  # White - panel outlines
    "GROOVES": {"color": 1, "linetype": "DASHED"},  # Red - dados and back grooves
    "HOLES": {"color": 3, "linetype": "CONTINUOUS"},  # Green - pins and hinge cups
    "LABELS": {"color": 5, "linetype": "CONTINUOUS"},  # Blue - text labels
}

# Drawing layers, one per semantic colour (ACI colour numbers)
DRAWING_LAYERS = {
    SemanticColor.STRUCTURAL: 7,
    SemanticColor.OVERLAY_DOOR: 5,
    SemanticColor.INTERNAL: 8,
    SemanticColor.HIDDEN: 9,
    SemanticColor.EDGE_BAND: 2,
    SemanticColor.SHELF: 4,
    SemanticColor.HARDWARE: 1,
    SemanticColor.DIMENSION: 150,
}
ANNOTATION_LAYER = "ANNOTATIONS"

LABEL_HEIGHT = 0.5
DIMENSION_TEXT_HEIGHT = 0.6


def layer_name(color: SemanticColor) -> str:
    return color.name


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports cabinets to DXF for CNC machining or CAD review.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(
        self,
        mode: str = "machining",
        view: ViewMode | str = ViewMode.ELEVATION,
        units: str = "inches",
        panel_spacing: float = 2.0,
        panels_per_row: int = 4,
        show_internals: bool = True,
    ) -> None:
        """Initialize the DXF exporter.

        Args:
            mode: "machining" for flat panels, "drawing" for one view.
            view: View exported in drawing mode.
            units: Output units - "inches" or "mm".
            panel_spacing: Gap between panels in machining mode (output units).
            panels_per_row: Number of panels per grid row in machining mode.
            show_internals: Draw shelves, grooves and hardware in drawing mode.
        """
        if mode not in ("machining", "drawing"):
            raise ValueError(f"Invalid mode: {mode}. Must be 'machining' or 'drawing'")
        if units not in ("inches", "mm"):
            raise ValueError(f"Invalid units: {units}. Must be 'inches' or 'mm'")

        self.mode = mode
        self.view = ViewMode(view)
        self.units = units
        self.scale = 25.4 if units == "mm" else 1.0
        self.panel_spacing = panel_spacing
        self.panels_per_row = panels_per_row
        self.show_internals = show_internals

    def export(self, output: CabinetOutput, path: Path) -> None:
        doc = self.build_document(output)
        doc.saveas(path)
        logger.info(f"Exported {self.mode} DXF to {path}")

    def export_string(self, output: CabinetOutput) -> str:
        stream = StringIO()
        self.build_document(output).write(stream)
        return stream.getvalue()

    def build_document(self, output: CabinetOutput) -> Drawing:
        """Create the DXF document for the configured mode."""
        doc = ezdxf.new("R2010")
        self._setup_linetypes(doc)
        msp = doc.modelspace()
        if self.mode == "machining":
            self._setup_machining_layers(doc)
            self._draw_all_panels(msp, list(output.cabinet.components))
        else:
            self._setup_drawing_layers(doc)
            self._draw_geometry(msp, self._view_geometry(output))
        return doc

    def _view_geometry(self, output: CabinetOutput) -> WireframeGeometry:
        from casework.application.commands import RenderDrawingCommand

        return RenderDrawingCommand().execute(
            output,
            self.view,
            DrawingTier.DETAILED,
            DrawOptions(show_internals=self.show_internals),
        )

    # -------------------------------------------------------------------------
    # Layers
    # -------------------------------------------------------------------------

    def _setup_linetypes(self, doc: Drawing) -> None:
        if "DASHED" not in doc.linetypes:
            doc.linetypes.add(
                "DASHED",
                pattern=[0.5, 0.25, -0.25],
                description="Dashed line",
            )

    def _setup_machining_layers(self, doc: Drawing) -> None:
        for name, props in MACHINING_LAYERS.items():
            layer = doc.layers.add(name, color=props["color"])
            if props["linetype"] == "DASHED":
                layer.dxf.linetype = "DASHED"

    def _setup_drawing_layers(self, doc: Drawing) -> None:
        for color, aci in DRAWING_LAYERS.items():
            layer = doc.layers.add(layer_name(color), color=aci)
            if color == SemanticColor.HIDDEN:
                layer.dxf.linetype = "DASHED"
        doc.layers.add(ANNOTATION_LAYER, color=7)

    # -------------------------------------------------------------------------
    # Drawing mode
    # -------------------------------------------------------------------------

    def _draw_geometry(self, msp: Modelspace, geometry: WireframeGeometry) -> None:
        s = self.scale
        for line in geometry.lines:
            attribs = {"layer": layer_name(line.color)}
            if line.style == LineStyle.DASHED:
                attribs["linetype"] = "DASHED"
            msp.add_line(
                (line.start.x * s, line.start.y * s),
                (line.end.x * s, line.end.y * s),
                dxfattribs=attribs,
            )

        dim_layer = layer_name(SemanticColor.DIMENSION)
        for dim in geometry.dimensions:
            start = (dim.start.x * s, dim.start.y * s)
            end = (dim.end.x * s, dim.end.y * s)
            msp.add_line(start, end, dxfattribs={"layer": dim_layer})
            msp.add_text(
                dim.label,
                height=DIMENSION_TEXT_HEIGHT * s,
                dxfattribs={"layer": dim_layer},
            ).set_placement(((start[0] + end[0]) / 2, (start[1] + end[1]) / 2))

        for ann in geometry.annotations:
            position = (ann.position.x * s, ann.position.y * s)
            if ann.leader is not None:
                msp.add_line(
                    position,
                    (ann.leader.x * s, ann.leader.y * s),
                    dxfattribs={"layer": ANNOTATION_LAYER},
                )
            msp.add_text(
                ann.text,
                height=ann.font_size / 10 * s,
                dxfattribs={"layer": ANNOTATION_LAYER},
            ).set_placement(position)

    # -------------------------------------------------------------------------
    # Machining mode
    # -------------------------------------------------------------------------

    def _draw_all_panels(self, msp: Modelspace, components: list[Component]) -> None:
        """Lay out every piece in rows, left to right and top to bottom."""
        if not components:
            logger.warning("No components to export")
            return

        pieces = [c for c in components for _ in range(c.quantity)]
        rows = [
            pieces[i : i + self.panels_per_row]
            for i in range(0, len(pieces), self.panels_per_row)
        ]

        current_y = 0.0
        for row in rows:
            row_height = max(c.height * self.scale for c in row)
            row_bottom = current_y - row_height
            current_x = 0.0
            for component in row:
                self._draw_panel(msp, component, current_x, row_bottom)
                current_x += component.width * self.scale + self.panel_spacing
            current_y = row_bottom - self.panel_spacing

    def _draw_panel(
        self, msp: Modelspace, component: Component, x: float, y: float
    ) -> None:
        s = self.scale
        width = component.width * s
        height = component.height * s

        self._add_rect(msp, x, y, width, height, "OUTLINE")

        for groove in component.grooves:
            gx = x + groove.x * s
            gy = y + groove.y * s
            if groove.orientation == Orientation.HORIZONTAL:
                self._add_rect(msp, gx, gy, groove.length * s, groove.width * s, "GROOVES")
            else:
                self._add_rect(msp, gx, gy, groove.width * s, groove.length * s, "GROOVES")

        for hole in component.holes:
            hx = hole.x_from_edge * s
            if hole.edge == "right":
                hx = width - hx
            msp.add_circle(
                (x + hx, y + hole.y_from_reference * s),
                radius=hole.diameter * s / 2,
                dxfattribs={"layer": "HOLES"},
            )

        msp.add_text(
            f"{component.name} {component.width:g}x{component.height:g}",
            height=LABEL_HEIGHT * s,
            dxfattribs={"layer": "LABELS"},
        ).set_placement((x + width / 2, y + height / 2))

    def _add_rect(
        self, msp: Modelspace, x: float, y: float, width: float, height: float, layer: str
    ) -> None:
        points = [
            (x, y),
            (x + width, y),
            (x + width, y + height),
            (x, y + height),
        ]
        msp.add_lwpolyline(points, close=True, dxfattribs={"layer": layer})
