"""Cabinet generation endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from casework.application import CabinetOutput
from casework.application.config import config_to_request, load_config_from_dict
from casework.web.dependencies import CabinetCacheDep, GenerateCommandDep, generate_cached
from casework.web.schemas import (
    CabinetResponseSchema,
    ConfigurationSchema,
    CutListRowSchema,
    DimensionsSchema,
    GenerateFromConfigRequest,
    GenerateRequest,
    MachiningRecordSchema,
    MaterialUsageSchema,
)

router = APIRouter(prefix="/generate", tags=["generate"])


def _output_to_schema(output: CabinetOutput) -> CabinetResponseSchema:
    """Convert CabinetOutput to response schema."""
    cabinet = output.cabinet
    dims = cabinet.dimensions
    config = cabinet.configuration
    usage = output.material_usage

    return CabinetResponseSchema(
        id=cabinet.id,
        archetype=cabinet.archetype.value,
        dimensions=DimensionsSchema(
            width=dims.width,
            height=dims.height,
            depth=dims.depth,
            total_height=dims.total_height,
            box_depth=dims.box_depth,
            door_thickness=dims.door_thickness,
            toe_kick_height=dims.toe_kick_height,
            toe_kick_depth=dims.toe_kick_depth,
            has_two_doors=dims.has_two_doors,
        ),
        configuration=ConfigurationSchema(
            has_adjustable_shelf=config.has_adjustable_shelf,
            shelf_count=config.shelf_count,
            door_style=config.door_style.value,
            hinge_type=config.hinge_type.value,
            overlay=config.overlay.value,
        ),
        cut_list=[
            CutListRowSchema(
                name=row.name,
                part=row.part.value,
                quantity=row.quantity,
                width=row.width,
                height=row.height,
                thickness=row.thickness,
                material=row.material.value,
                edge_banding=list(row.edge_banding),
            )
            for row in output.cut_list
        ],
        machining=[MachiningRecordSchema(**asdict(rec)) for rec in output.machining],
        material_usage=MaterialUsageSchema(
            plywood34=usage.plywood34,
            plywood14=usage.plywood14,
            edge_banding=usage.edge_banding,
            plywood34_sqft=usage.plywood34_sqft,
            plywood14_sqft=usage.plywood14_sqft,
            edge_banding_ft=usage.edge_banding_ft,
            description=usage.description,
        ),
    )


@router.post("", response_model=CabinetResponseSchema)
async def generate_cabinet(
    request: GenerateRequest,
    command: GenerateCommandDep,
    cache: CabinetCacheDep,
) -> CabinetResponseSchema:
    """Generate dimensions, cut list, machining and material usage.

    Domain errors (off-ladder sizes, unknown archetype, no room for a
    feature) are reported as 422.
    """
    output = generate_cached(request.to_request(), command, cache)
    return _output_to_schema(output)


@router.post("/from-config", response_model=CabinetResponseSchema)
async def generate_from_config(
    request: GenerateFromConfigRequest,
    command: GenerateCommandDep,
    cache: CabinetCacheDep,
) -> CabinetResponseSchema:
    """Generate a cabinet from a complete JSON configuration document."""
    config = load_config_from_dict(request.config)
    output = generate_cached(config_to_request(config), command, cache)
    return _output_to_schema(output)
