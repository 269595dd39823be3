"""Machining features cut into panels: holes and grooves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HoleKind(str, Enum):
    """Purpose of a drilled hole."""

    SHELF_PIN = "shelf-pin"
    HINGE = "hinge"


class GrooveKind(str, Enum):
    """Purpose of a routed groove."""

    DADO = "dado"
    BACK_PANEL = "back-panel"


class Orientation(str, Enum):
    """Direction a groove runs along the panel face."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class HolePattern:
    """A single drilled hole on a panel face.

    Attributes:
        kind: Shelf pin or hinge cup.
        x_from_edge: Distance from the reference edge to the hole centre.
        y_from_reference: Distance from the panel bottom to the hole centre.
        diameter: Hole diameter.
        depth: Drilling depth.
        edge: Reference edge for ``x_from_edge`` ("front" for shelf pins,
            "left" or "right" for hinge cups).
    """

    kind: HoleKind
    x_from_edge: float
    y_from_reference: float
    diameter: float
    depth: float
    edge: str = "front"

    def __post_init__(self) -> None:
        if self.diameter <= 0 or self.depth <= 0:
            raise ValueError("Hole diameter and depth must be positive")


@dataclass(frozen=True)
class Groove:
    """A routed groove (dado or back-panel rabbet) on a panel face.

    Attributes:
        kind: Dado or back-panel groove.
        x: Start offset from the panel front edge.
        y: Start offset from the panel bottom edge.
        width: Groove width across its run.
        depth: Cut depth into the panel.
        length: Length of the run.
        orientation: Direction of the run.
    """

    kind: GrooveKind
    x: float
    y: float
    width: float
    depth: float
    length: float
    orientation: Orientation

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0 or self.length <= 0:
            raise ValueError("Groove width, depth and length must be positive")
