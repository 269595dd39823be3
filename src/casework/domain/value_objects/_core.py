"""Core sizing, material and configuration value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

from ..exceptions import InvalidDimensionError, UnsupportedArchetypeError


class CabinetArchetype(str, Enum):
    """Structural archetype of a cabinet.

    The archetype fixes the carcass topology: base cabinets have an open top
    with a stretcher and sit on a toe kick, wall cabinets are closed boxes
    without a toe kick, and tall cabinets are closed boxes on a toe kick.
    """

    BASE = "base"
    WALL = "wall"
    TALL = "tall"

    @classmethod
    def parse(cls, value: "str | CabinetArchetype") -> "CabinetArchetype":
        """Convert a string to an archetype.

        Raises:
            UnsupportedArchetypeError: If the value names no known archetype.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise UnsupportedArchetypeError(
                f"Unsupported cabinet archetype '{value}'. Valid archetypes: {valid}"
            ) from None


class MaterialType(str, Enum):
    """Types of sheet goods used in cabinet construction."""

    PLYWOOD = "plywood"
    MDF = "mdf"
    PARTICLE_BOARD = "particle_board"
    SOLID_WOOD = "solid_wood"


class DoorStyle(str, Enum):
    """Door face style."""

    SLAB = "slab"
    SHAKER = "shaker"


class HingeType(str, Enum):
    """Hinge hardware family."""

    CONCEALED = "concealed"


class OverlayType(str, Enum):
    """How far the doors lap over the carcass front."""

    FULL = "full"

    @property
    def inches(self) -> float:
        """Overlay beyond the box opening on every edge."""
        return {OverlayType.FULL: 0.75}[self]


@dataclass(frozen=True)
class MaterialSpec:
    """Material specification for cabinet construction."""

    thickness: float
    material_type: MaterialType = MaterialType.PLYWOOD

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("Material thickness must be positive")

    @classmethod
    def standard_3_4(cls) -> "MaterialSpec":
        """Standard 3/4 inch plywood used for carcass panels."""
        return cls(thickness=0.75, material_type=MaterialType.PLYWOOD)

    @classmethod
    def standard_1_4(cls) -> "MaterialSpec":
        """Standard 1/4 inch plywood (cabinet backs)."""
        return cls(thickness=0.25, material_type=MaterialType.PLYWOOD)

    @classmethod
    def door_7_8(cls) -> "MaterialSpec":
        """7/8 inch stock used for wall and tall cabinet doors."""
        return cls(thickness=0.875, material_type=MaterialType.PLYWOOD)


@dataclass(frozen=True)
class CabinetDimensions:
    """Resolved outer dimensions of a cabinet, in inches.

    ``height`` is always the carcass box height with the toe kick excluded,
    and ``total_height`` is the installed height including the toe kick.

    Attributes:
        archetype: Structural archetype these dimensions were derived for.
        width: Nominal carcass width.
        height: Carcass box height.
        depth: Overall depth including the door for wall and tall cabinets.
        total_height: Installed height, ``height`` plus any toe kick.
        has_two_doors: Whether the front is split into two door leaves.
        box_depth: Carcass depth without the door, when it differs from depth.
        door_thickness: Door stock thickness when it differs from the carcass.
        toe_kick_height: Height of the toe kick, if any.
        toe_kick_depth: Depth of the toe kick assembly, if any.
    """

    archetype: CabinetArchetype
    width: float
    height: float
    depth: float
    total_height: float
    has_two_doors: bool = False
    box_depth: float | None = None
    door_thickness: float | None = None
    toe_kick_height: float | None = None
    toe_kick_depth: float | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "depth"):
            if getattr(self, name) <= 0:
                raise InvalidDimensionError(f"Cabinet {name} must be positive")
        if (self.toe_kick_height is None) != (self.toe_kick_depth is None):
            raise InvalidDimensionError(
                "Toe kick height and depth must be given together"
            )
        expected = self.height + (self.toe_kick_height or 0.0)
        if not math.isclose(self.total_height, expected):
            raise InvalidDimensionError(
                f"Total height {self.total_height} must equal box height "
                f"{self.height} plus toe kick {self.toe_kick_height or 0}"
            )

    @property
    def carcass_depth(self) -> float:
        """Depth of the carcass box, excluding any door."""
        return self.box_depth if self.box_depth is not None else self.depth

    @property
    def box_height(self) -> float:
        return self.height

    @property
    def has_toe_kick(self) -> bool:
        return self.toe_kick_height is not None


@dataclass(frozen=True)
class CabinetConfiguration:
    """Explicit construction options passed into every entry point.

    Attributes:
        has_adjustable_shelf: Whether adjustable shelves are included.
        shelf_count: Number of adjustable shelves. ``None`` selects the
            archetype default, see ``resolved_for``.
        door_style: Door face style.
        hinge_type: Hinge hardware family.
        overlay: Door overlay type.
    """

    has_adjustable_shelf: bool = True
    shelf_count: int | None = None
    door_style: DoorStyle = DoorStyle.SLAB
    hinge_type: HingeType = HingeType.CONCEALED
    overlay: OverlayType = OverlayType.FULL

    def resolved_for(self, dimensions: CabinetDimensions) -> "CabinetConfiguration":
        """Return a copy with the archetype default shelf count filled in.

        Base cabinets get one shelf, wall cabinets one per foot of height
        and tall cabinets one per 15 inches of box height.
        """
        if self.shelf_count is not None:
            return self
        if dimensions.archetype == CabinetArchetype.BASE:
            count = 1
        elif dimensions.archetype == CabinetArchetype.WALL:
            count = math.floor(dimensions.height / 12)
        else:
            count = math.floor(dimensions.box_height / 15)
        return replace(self, shelf_count=count)


@dataclass(frozen=True)
class EdgeBanding:
    """Which edges of a panel receive edge banding."""

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False
    front: bool = False
    back: bool = False

    @classmethod
    def none(cls) -> "EdgeBanding":
        return cls()

    @classmethod
    def front_only(cls) -> "EdgeBanding":
        return cls(front=True)

    @classmethod
    def all_sides(cls) -> "EdgeBanding":
        """Banding on all four visible edges, used for doors."""
        return cls(top=True, bottom=True, left=True, right=True)

    def banded_length(self, width: float, height: float) -> float:
        """Banded length in inches for one piece.

        Top, bottom, front and back edges run along the panel width; left and
        right edges run along its height.
        """
        length = 0.0
        for flag in (self.top, self.bottom, self.front, self.back):
            if flag:
                length += width
        for flag in (self.left, self.right):
            if flag:
                length += height
        return length

    @property
    def edges(self) -> tuple[str, ...]:
        """Names of the banded edges, in a fixed order."""
        names = ("top", "bottom", "left", "right", "front", "back")
        return tuple(name for name in names if getattr(self, name))


class PartType(str, Enum):
    """Role of a component in the cabinet."""

    SIDE = "side"
    BOTTOM = "bottom"
    TOP = "top"
    TOP_STRETCHER = "top_stretcher"
    BACK = "back"
    SHELF = "shelf"
    DOOR = "door"
    TOE_KICK_FRONT = "toe_kick_front"
    TOE_KICK_SIDE = "toe_kick_side"
    TOE_KICK_BACK = "toe_kick_back"
