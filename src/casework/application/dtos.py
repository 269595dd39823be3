"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from casework.domain import Cabinet, CabinetConfiguration, MaterialSpec
from casework.domain.services import (
    CutListRow,
    MachiningRecord,
    MaterialUsage,
)
from casework.domain.value_objects import CabinetDimensions, CabinetDrawing


@dataclass(frozen=True)
class CabinetRequest:
    """Input DTO describing one cabinet to generate.

    Attributes:
        archetype: "base", "wall" or "tall".
        width: Nominal width from the size ladder.
        height: Nominal height from the size ladder (ignored for base).
        material: Carcass material.
        configuration: Construction options.
    """

    archetype: str
    width: float
    height: float | None = None
    material: MaterialSpec = field(default_factory=MaterialSpec.standard_3_4)
    configuration: CabinetConfiguration = field(default_factory=CabinetConfiguration)

    @property
    def cache_key(self) -> tuple:
        """Hashable key covering every input that changes the output."""
        return (
            self.archetype.strip().lower(),
            float(self.width),
            None if self.height is None else float(self.height),
            self.material,
            self.configuration,
        )


@dataclass
class CabinetOutput:
    """Output DTO with everything derived from one cabinet request."""

    cabinet: Cabinet
    cut_list: list[CutListRow]
    machining: list[MachiningRecord]
    material_usage: MaterialUsage
    drawing: CabinetDrawing

    @property
    def dimensions(self) -> CabinetDimensions:
        return self.cabinet.dimensions
