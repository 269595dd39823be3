"""Domain entities for cabinet construction."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import (
    CabinetArchetype,
    CabinetConfiguration,
    CabinetDimensions,
    EdgeBanding,
    Groove,
    HolePattern,
    MaterialSpec,
    MaterialType,
    PartType,
)


@dataclass(frozen=True)
class Component:
    """A single manufactured part of a cabinet.

    Every component carries its machining as tuples, so a component without
    holes or grooves simply has empty tuples.

    Attributes:
        name: Human-readable part name, e.g. "Side Panel".
        part: Role of the part in the cabinet.
        width: Cut width in inches.
        height: Cut height in inches.
        quantity: Number of identical pieces.
        material: Sheet material.
        thickness: Stock thickness in inches.
        edge_banding: Banded edges of each piece.
        holes: Drilled holes on each piece.
        grooves: Routed grooves on each piece.
    """

    name: str
    part: PartType
    width: float
    height: float
    quantity: int = 1
    material: MaterialType = MaterialType.PLYWOOD
    thickness: float = 0.75
    edge_banding: EdgeBanding = field(default_factory=EdgeBanding)
    holes: tuple[HolePattern, ...] = ()
    grooves: tuple[Groove, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Component name is required")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"{self.name}: width and height must be positive")
        if self.thickness <= 0:
            raise ValueError(f"{self.name}: thickness must be positive")
        if self.quantity < 1:
            raise ValueError(f"{self.name}: quantity must be at least 1")
        # Accept lists from callers but store immutable tuples
        object.__setattr__(self, "holes", tuple(self.holes))
        object.__setattr__(self, "grooves", tuple(self.grooves))

    @property
    def area_sqin(self) -> float:
        """Face area of one piece in square inches."""
        return self.width * self.height

    @property
    def area_sqft(self) -> float:
        """Face area of one piece in square feet."""
        return self.area_sqin / 144

    @property
    def total_area_sqft(self) -> float:
        return self.area_sqft * self.quantity

    @property
    def banded_length(self) -> float:
        """Edge banding for one piece, in inches."""
        return self.edge_banding.banded_length(self.width, self.height)


@dataclass(frozen=True)
class Cabinet:
    """A fully constructed cabinet and its ordered component list.

    Attributes:
        archetype: Structural archetype.
        dimensions: Resolved outer dimensions.
        material: Carcass material.
        configuration: Construction options with the shelf count resolved.
        components: Components in construction order.
    """

    archetype: CabinetArchetype
    dimensions: CabinetDimensions
    material: MaterialSpec
    configuration: CabinetConfiguration
    components: tuple[Component, ...]

    @property
    def id(self) -> str:
        return (
            f"{self.archetype.value}-cabinet-"
            f"{_fmt(self.dimensions.width)}x{_fmt(self.dimensions.total_height)}"
        )

    def components_of(self, part: PartType) -> list[Component]:
        return [c for c in self.components if c.part == part]

    def component(self, part: PartType) -> Component:
        """Return the first component of the given part type.

        Raises:
            KeyError: If the cabinet has no such component.
        """
        for c in self.components:
            if c.part == part:
                return c
        raise KeyError(f"Cabinet {self.id} has no {part.value} component")

    @property
    def doors(self) -> list[Component]:
        return self.components_of(PartType.DOOR)

    @property
    def door_leaves(self) -> int:
        """Total number of door leaves across all door components."""
        return sum(door.quantity for door in self.doors)


def _fmt(value: float) -> str:
    return f"{value:g}"
