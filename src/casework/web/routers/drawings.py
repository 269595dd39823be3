"""Technical drawing endpoints."""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, Response

from casework.domain.value_objects import DrawingTier, ScreenDrawing, ViewMode
from casework.infrastructure.exporters.canvas import geometry_to_screen, screen_to_commands
from casework.infrastructure.exporters.svg import render_geometry, render_screen
from casework.web.dependencies import (
    CabinetCacheDep,
    GenerateCommandDep,
    RenderCommandDep,
    generate_cached,
)
from casework.web.exceptions import UnsupportedFormatError
from casework.web.schemas import DrawingRequest

router = APIRouter(prefix="/drawings", tags=["drawings"])

DRAWING_FORMATS = ["canvas", "svg"]


@router.post("/{view}")
async def draw_view(
    view: ViewMode,
    request: DrawingRequest,
    command: GenerateCommandDep,
    render: RenderCommandDep,
    cache: CabinetCacheDep,
    tier: DrawingTier = Query(DrawingTier.DETAILED),
    output_format: str = Query("svg", alias="format"),
) -> Response:
    """Draw one view of a cabinet.

    Returns an SVG document (``image/svg+xml``) or, for ``format=canvas``,
    the JSON list of canvas drawing commands.
    """
    if output_format not in DRAWING_FORMATS:
        raise UnsupportedFormatError(output_format, DRAWING_FORMATS)

    output = generate_cached(request.cabinet.to_request(), command, cache)
    options = request.to_options()
    rendered = render.execute(output, view, tier, options)

    if output_format == "svg":
        if isinstance(rendered, ScreenDrawing):
            content = render_screen(rendered)
        else:
            content = render_geometry(
                rendered, options.canvas_width, options.canvas_height
            )
        return Response(content=content, media_type="image/svg+xml")

    if not isinstance(rendered, ScreenDrawing):
        rendered = geometry_to_screen(
            rendered, options.canvas_width, options.canvas_height, view
        )
    return JSONResponse(content=screen_to_commands(rendered))
