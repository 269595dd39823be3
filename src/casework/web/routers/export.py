"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from casework.infrastructure.exporters import ExporterRegistry
from casework.web.dependencies import CabinetCacheDep, GenerateCommandDep, generate_cached
from casework.web.exceptions import UnsupportedFormatError
from casework.web.schemas import ExportFormatsSchema, GenerateRequest

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "canvas": "application/json",
    "dxf": "application/dxf",
    "json": "application/json",
    "svg": "image/svg+xml",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_cabinet(
    format_name: str,
    request: GenerateRequest,
    command: GenerateCommandDep,
    cache: CabinetCacheDep,
) -> Response:
    """Export a cabinet in one registered format with default options."""
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = generate_cached(request.to_request(), command, cache)
    exporter = ExporterRegistry.get(format_name)()
    filename = f"{output.cabinet.id}.{exporter.file_extension}"
    return Response(
        content=exporter.export_string(output),
        media_type=MEDIA_TYPES.get(format_name, "text/plain"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
