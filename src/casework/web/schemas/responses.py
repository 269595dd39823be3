"""Response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class DimensionsSchema(BaseModel):
    """Resolved cabinet dimensions in inches."""

    width: float
    height: float = Field(..., description="Carcass box height")
    depth: float
    total_height: float = Field(..., description="Box height plus toe kick")
    box_depth: float | None = None
    door_thickness: float | None = None
    toe_kick_height: float | None = None
    toe_kick_depth: float | None = None
    has_two_doors: bool


class ConfigurationSchema(BaseModel):
    """Resolved construction options."""

    has_adjustable_shelf: bool
    shelf_count: int
    door_style: str
    hinge_type: str
    overlay: str


class CutListRowSchema(BaseModel):
    """One cut list row."""

    name: str
    part: str
    quantity: int
    width: float
    height: float
    thickness: float
    material: str
    edge_banding: list[str]


class MachiningRecordSchema(BaseModel):
    """One hole or groove operation, in inches."""

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


class MaterialUsageSchema(BaseModel):
    """Material to purchase, rounded up with waste, plus net totals."""

    plywood34: int
    plywood14: int
    edge_banding: int
    plywood34_sqft: float
    plywood14_sqft: float
    edge_banding_ft: float
    description: str


class CabinetResponseSchema(BaseModel):
    """Everything generated for one cabinet."""

    id: str
    archetype: str
    dimensions: DimensionsSchema
    configuration: ConfigurationSchema
    cut_list: list[CutListRowSchema]
    machining: list[MachiningRecordSchema]
    material_usage: MaterialUsageSchema


class SizesSchema(BaseModel):
    """Size ladder for one archetype."""

    archetype: str
    widths: list[float]
    heights: list[float]


class ExportFormatsSchema(BaseModel):
    """Available export formats."""

    formats: list[str]


class ErrorResponseSchema(BaseModel):
    """Error body returned by every exception handler."""

    error: str
    error_type: str
    details: Any = None
