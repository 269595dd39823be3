"""Cut list and machining list generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import MaterialType, PartType

if TYPE_CHECKING:
    from ..entities import Cabinet

__all__ = [
    "CutListGenerator",
    "CutListRow",
    "MachiningListGenerator",
    "MachiningRecord",
]


@dataclass(frozen=True)
class CutListRow:
    """One line of the cut list."""

    name: str
    part: PartType
    quantity: int
    width: float
    height: float
    thickness: float
    material: MaterialType
    edge_banding: tuple[str, ...]

    @property
    def area(self) -> float:
        """Total face area of all pieces in square inches."""
        return self.width * self.height * self.quantity


@dataclass(frozen=True)
class MachiningRecord:
    """A single hole or groove operation for CNC output, in inches.

    Attributes:
        component: Name of the component the feature belongs to.
        operation: "hole" or "groove".
        kind: Hole or groove kind, e.g. "shelf-pin" or "dado".
        x: Offset from the reference edge.
        y: Offset from the panel bottom.
        size: Hole diameter or groove width.
        depth: Cut depth.
        length: Groove run length, ``None`` for holes.
        orientation: Groove direction, ``None`` for holes.
        edge: Reference edge for holes, ``None`` for grooves.
    """

    component: str
    operation: str
    kind: str
    x: float
    y: float
    size: float
    depth: float
    length: float | None = None
    orientation: str | None = None
    edge: str | None = None


class CutListGenerator:
    """Generates the cut list for a cabinet."""

    def generate(self, cabinet: Cabinet) -> list[CutListRow]:
        """One row per component, in construction order."""
        return [
            CutListRow(
                name=c.name,
                part=c.part,
                quantity=c.quantity,
                width=c.width,
                height=c.height,
                thickness=c.thickness,
                material=c.material,
                edge_banding=c.edge_banding.edges,
            )
            for c in cabinet.components
        ]

    def sort_by_size(self, cut_list: list[CutListRow]) -> list[CutListRow]:
        """Sort cut list by area (largest first) for efficient cutting."""
        return sorted(cut_list, key=lambda row: row.area, reverse=True)


class MachiningListGenerator:
    """Flattens every hole and groove into machining records."""

    def generate(self, cabinet: Cabinet) -> list[MachiningRecord]:
        records: list[MachiningRecord] = []
        for component in cabinet.components:
            for groove in component.grooves:
                records.append(
                    MachiningRecord(
                        component=component.name,
                        operation="groove",
                        kind=groove.kind.value,
                        x=groove.x,
                        y=groove.y,
                        size=groove.width,
                        depth=groove.depth,
                        length=groove.length,
                        orientation=groove.orientation.value,
                    )
                )
            for hole in component.holes:
                records.append(
                    MachiningRecord(
                        component=component.name,
                        operation="hole",
                        kind=hole.kind.value,
                        x=hole.x_from_edge,
                        y=hole.y_from_reference,
                        size=hole.diameter,
                        depth=hole.depth,
                        edge=hole.edge,
                    )
                )
        return records
