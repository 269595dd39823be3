"""Size ladder endpoints."""

from fastapi import APIRouter

from casework.domain.value_objects import CabinetArchetype
from casework.web.dependencies import ServiceFactoryDep
from casework.web.schemas import SizesSchema

router = APIRouter(prefix="/sizes", tags=["sizes"])


@router.get("/{archetype}", response_model=SizesSchema)
async def get_sizes(archetype: str, factory: ServiceFactoryDep) -> SizesSchema:
    """List the supported widths and heights for an archetype.

    An unknown archetype raises UnsupportedArchetypeError, reported as 422.
    """
    kind = CabinetArchetype.parse(archetype)
    rules = factory.get_dimension_rules()
    return SizesSchema(
        archetype=kind.value,
        widths=rules.available_widths(kind),
        heights=rules.available_heights(kind),
    )
