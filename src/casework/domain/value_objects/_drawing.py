"""Drawing primitives shared by every projection tier and exporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LineStyle(str, Enum):
    """Stroke pattern for a drawing line."""

    SOLID = "solid"
    DASHED = "dashed"


class SemanticColor(str, Enum):
    """Meaning of a stroke, mapped to a concrete colour by ``PALETTE``."""

    STRUCTURAL = "structural"
    OVERLAY_DOOR = "overlay_door"
    INTERNAL = "internal"
    HIDDEN = "hidden"
    EDGE_BAND = "edge_band"
    SHELF = "shelf"
    HARDWARE = "hardware"
    DIMENSION = "dimension"

    @property
    def hex(self) -> str:
        return PALETTE[self]


PALETTE: dict[SemanticColor, str] = {
    SemanticColor.STRUCTURAL: "#000000",
    SemanticColor.OVERLAY_DOOR: "#0066cc",
    SemanticColor.INTERNAL: "#666666",
    SemanticColor.HIDDEN: "#999999",
    SemanticColor.EDGE_BAND: "#b8860b",
    SemanticColor.SHELF: "#0099cc",
    SemanticColor.HARDWARE: "#cc3300",
    SemanticColor.DIMENSION: "#0066cc",
}

# Stroke weights in drawing units
WEIGHT_HEAVY = 2.5
WEIGHT_DOOR = 3.0
WEIGHT_BAND = 3.0
WEIGHT_MEDIUM = 1.5
WEIGHT_LIGHT = 1.0


class ViewMode(str, Enum):
    """Which orthographic or pictorial view to draw."""

    TOP = "top"
    ELEVATION = "elevation"
    ISO = "iso"


class DrawingTier(str, Enum):
    """Drawing fidelity: simplified screen rendering or annotated CAD views."""

    BASIC = "basic"
    DETAILED = "detailed"


@dataclass(frozen=True)
class Point3D:
    """A point in cabinet space: x across the width, y up, z into the depth."""

    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class Line3D:
    """A styled line segment."""

    start: Point3D
    end: Point3D
    style: LineStyle = LineStyle.SOLID
    weight: float = WEIGHT_LIGHT
    color: SemanticColor = SemanticColor.STRUCTURAL


@dataclass(frozen=True)
class DimensionLine:
    """A measured dimension with a label.

    Attributes:
        start: First witness point.
        end: Second witness point.
        value: Measured value in ``unit``.
        unit: Unit symbol, inches by default.
        label: Text shown at the dimension.
        offset: Perpendicular offset of the dimension line from the points.
    """

    start: Point3D
    end: Point3D
    value: float
    unit: str = '"'
    label: str = ""
    offset: float = 0.0


@dataclass(frozen=True)
class Annotation:
    """A text callout, optionally with a leader line to ``leader``."""

    position: Point3D
    text: str
    font_size: float = 12.0
    leader: Point3D | None = None


@dataclass
class WireframeGeometry:
    """Lines, dimensions and annotations making up one view."""

    lines: list[Line3D] = field(default_factory=list)
    dimensions: list[DimensionLine] = field(default_factory=list)
    annotations: list[Annotation] = field(default_factory=list)

    def add_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        style: LineStyle = LineStyle.SOLID,
        weight: float = WEIGHT_LIGHT,
        color: SemanticColor = SemanticColor.STRUCTURAL,
    ) -> None:
        """Append a flat (z = 0) line."""
        self.lines.append(
            Line3D(Point3D(x1, y1), Point3D(x2, y2), style, weight, color)
        )

    def add_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        **kwargs,
    ) -> None:
        """Append the four edges of an axis-aligned rectangle."""
        x2, y2 = x + width, y + height
        self.add_line(x, y, x2, y, **kwargs)
        self.add_line(x2, y, x2, y2, **kwargs)
        self.add_line(x2, y2, x, y2, **kwargs)
        self.add_line(x, y2, x, y, **kwargs)

    def add_dimension(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        value: float,
        label: str,
        offset: float = 0.0,
    ) -> None:
        self.dimensions.append(
            DimensionLine(
                Point3D(*start), Point3D(*end), value, label=label, offset=offset
            )
        )

    def annotate(
        self,
        x: float,
        y: float,
        text: str,
        font_size: float = 12.0,
        leader: tuple[float, float] | None = None,
    ) -> None:
        self.annotations.append(
            Annotation(
                Point3D(x, y),
                text,
                font_size,
                Point3D(*leader) if leader is not None else None,
            )
        )

    def copy(self) -> WireframeGeometry:
        """Independent lists over the same immutable primitives."""
        return WireframeGeometry(
            list(self.lines), list(self.dimensions), list(self.annotations)
        )


@dataclass
class CabinetDrawing:
    """The three standard views of one cabinet."""

    top: WireframeGeometry
    elevation: WireframeGeometry
    iso: WireframeGeometry

    def view(self, mode: ViewMode) -> WireframeGeometry:
        return getattr(self, ViewMode(mode).value)


# =============================================================================
# Screen-space primitives (basic tier)
# =============================================================================


@dataclass(frozen=True)
class ScreenLine:
    """A line already projected to pixel coordinates (y grows downward)."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: SemanticColor = SemanticColor.STRUCTURAL
    weight: float = WEIGHT_LIGHT
    style: LineStyle = LineStyle.SOLID


@dataclass(frozen=True)
class ScreenText:
    """A text label in pixel coordinates."""

    x: float
    y: float
    text: str
    font_size: float = 12.0
    color: SemanticColor = SemanticColor.DIMENSION
    align: str = "center"


@dataclass
class ScreenDrawing:
    """A fully projected view ready for canvas or SVG replay."""

    view: ViewMode
    width: int
    height: int
    lines: list[ScreenLine] = field(default_factory=list)
    texts: list[ScreenText] = field(default_factory=list)
