"""Pydantic models for JSON cabinet configuration files.

Example:
    {
        "schema_version": "1.0",
        "cabinet": {
            "archetype": "wall",
            "width": 30,
            "height": 30,
            "material": {"thickness": 0.75, "type": "plywood"},
            "configuration": {"shelf_count": 2, "door_style": "shaker"}
        },
        "output": {"formats": ["json", "svg"], "view": "elevation"}
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from casework.domain.value_objects import (
    CabinetArchetype,
    DoorStyle,
    DrawingTier,
    HingeType,
    MaterialType,
    OverlayType,
    ViewMode,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with archetype sizing and construction options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "svg", "dxf", "canvas", "all"})


class MaterialConfig(BaseModel):
    """Carcass sheet material."""

    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(default=0.75, gt=0, le=2.0)
    type: MaterialType = MaterialType.PLYWOOD


class ConstructionConfig(BaseModel):
    """Construction options; omitted fields take archetype defaults."""

    model_config = ConfigDict(extra="forbid")

    has_adjustable_shelf: bool = True
    shelf_count: int | None = Field(default=None, ge=0, le=20)
    door_style: DoorStyle = DoorStyle.SLAB
    hinge_type: HingeType = HingeType.CONCEALED
    overlay: OverlayType = OverlayType.FULL


class CabinetConfig(BaseModel):
    """Cabinet sizing from the supported size ladder.

    Attributes:
        archetype: base, wall or tall.
        width: Nominal width in inches.
        height: Nominal height in inches; ignored for base cabinets.
        material: Carcass material.
        configuration: Construction options.
    """

    model_config = ConfigDict(extra="forbid")

    archetype: CabinetArchetype
    width: float = Field(..., gt=0)
    height: float | None = Field(default=None, gt=0)
    material: MaterialConfig = Field(default_factory=MaterialConfig)
    configuration: ConstructionConfig = Field(default_factory=ConstructionConfig)


class OutputConfig(BaseModel):
    """What to produce and where."""

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=lambda: ["json"])
    view: ViewMode = ViewMode.ELEVATION
    tier: DrawingTier = DrawingTier.DETAILED
    output_dir: str | None = None
    project_name: str = Field(default="cabinet", min_length=1)

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Validate that every format is known."""
        normalized = [f.strip().lower() for f in v]
        unknown = [f for f in normalized if f not in OUTPUT_FORMATS]
        if unknown:
            raise ValueError(
                f"Unknown output format(s): {', '.join(unknown)}. "
                f"Supported: {', '.join(sorted(OUTPUT_FORMATS))}"
            )
        return normalized


class ProjectConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor".
        cabinet: Cabinet sizing and construction.
        output: Output configuration.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinet: CabinetConfig
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        if v in SUPPORTED_VERSIONS:
            return v
        supported = ", ".join(sorted(SUPPORTED_VERSIONS))
        raise ValueError(
            f"Unsupported schema version '{v}'. Supported versions: {supported}"
        )
