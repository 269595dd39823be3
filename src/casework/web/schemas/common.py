"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from casework.application import CabinetRequest
from casework.domain import CabinetConfiguration, MaterialSpec
from casework.domain.value_objects import (
    DoorStyle,
    HingeType,
    MaterialType,
    OverlayType,
)


class MaterialSchema(BaseModel):
    """Carcass material."""

    type: MaterialType = Field(default=MaterialType.PLYWOOD, description="Material type")
    thickness: float = Field(
        default=0.75, gt=0, le=2.0, description="Thickness in inches"
    )


class ConstructionSchema(BaseModel):
    """Construction options; omitted fields take archetype defaults."""

    has_adjustable_shelf: bool = True
    shelf_count: int | None = Field(
        default=None, le=20, description="Adjustable shelves, archetype default if omitted"
    )
    door_style: DoorStyle = DoorStyle.SLAB
    hinge_type: HingeType = HingeType.CONCEALED
    overlay: OverlayType = OverlayType.FULL


class CabinetSchema(BaseModel):
    """A cabinet from the size ladder."""

    archetype: str = Field(..., description="base, wall or tall")
    width: float = Field(..., gt=0, description="Nominal width in inches")
    height: float | None = Field(
        default=None, gt=0, description="Nominal height in inches (wall and tall)"
    )
    material: MaterialSchema = Field(default_factory=MaterialSchema)
    configuration: ConstructionSchema = Field(default_factory=ConstructionSchema)

    def to_request(self) -> CabinetRequest:
        """Convert to the application request DTO."""
        return CabinetRequest(
            archetype=self.archetype,
            width=self.width,
            height=self.height,
            material=MaterialSpec(
                thickness=self.material.thickness,
                material_type=self.material.type,
            ),
            configuration=CabinetConfiguration(
                has_adjustable_shelf=self.configuration.has_adjustable_shelf,
                shelf_count=self.configuration.shelf_count,
                door_style=self.configuration.door_style,
                hinge_type=self.configuration.hinge_type,
                overlay=self.configuration.overlay,
            ),
        )
