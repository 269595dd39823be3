"""Request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from casework.domain.services import DrawOptions
from casework.web.schemas.common import CabinetSchema


class GenerateRequest(CabinetSchema):
    """Request to generate a cabinet."""


class GenerateFromConfigRequest(BaseModel):
    """Request carrying a complete JSON configuration document."""

    config: dict[str, Any] = Field(..., description="Configuration file contents")


class DrawingRequest(BaseModel):
    """Request to draw one view of a cabinet."""

    cabinet: CabinetSchema
    scale: float = Field(default=8.0, gt=0, description="Pixels per inch (basic tier)")
    offset_x: float = Field(default=100.0, description="Left margin (basic tier)")
    offset_y: float = Field(default=100.0, description="Top margin (basic tier)")
    show_internals: bool = True
    show_dimensions: bool = True
    canvas_width: int = Field(default=800, gt=0, le=10000)
    canvas_height: int = Field(default=600, gt=0, le=10000)

    def to_options(self) -> DrawOptions:
        return DrawOptions(
            scale=self.scale,
            offset_x=self.offset_x,
            offset_y=self.offset_y,
            show_internals=self.show_internals,
            show_dimensions=self.show_dimensions,
            canvas_width=self.canvas_width,
            canvas_height=self.canvas_height,
        )
