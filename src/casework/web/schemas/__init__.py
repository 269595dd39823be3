"""Pydantic schemas for the REST API."""

from casework.web.schemas.common import (
    CabinetSchema,
    ConstructionSchema,
    MaterialSchema,
)
from casework.web.schemas.requests import (
    DrawingRequest,
    GenerateFromConfigRequest,
    GenerateRequest,
)
from casework.web.schemas.responses import (
    CabinetResponseSchema,
    ConfigurationSchema,
    CutListRowSchema,
    DimensionsSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    MachiningRecordSchema,
    MaterialUsageSchema,
    SizesSchema,
)

__all__ = [
    # Common
    "CabinetSchema",
    "ConstructionSchema",
    "MaterialSchema",
    # Requests
    "DrawingRequest",
    "GenerateFromConfigRequest",
    "GenerateRequest",
    # Responses
    "CabinetResponseSchema",
    "ConfigurationSchema",
    "CutListRowSchema",
    "DimensionsSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "MachiningRecordSchema",
    "MaterialUsageSchema",
    "SizesSchema",
]
