"""FastAPI dependency injection for cabinet services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from casework.application import (
    CabinetCache,
    CabinetOutput,
    CabinetRequest,
    GenerateCabinetCommand,
    RenderDrawingCommand,
)
from casework.application.factory import ServiceFactory, get_factory


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateCabinetCommand:
    """Dependency for GenerateCabinetCommand."""
    return factory.create_generate_command()


def get_render_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> RenderDrawingCommand:
    return factory.create_render_command()


def get_cabinet_cache(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> CabinetCache:
    """Dependency for the shared cabinet cache."""
    return factory.get_cache()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
GenerateCommandDep = Annotated[GenerateCabinetCommand, Depends(get_generate_command)]
RenderCommandDep = Annotated[RenderDrawingCommand, Depends(get_render_command)]
CabinetCacheDep = Annotated[CabinetCache, Depends(get_cabinet_cache)]


def generate_cached(
    request: CabinetRequest, command: GenerateCabinetCommand, cache: CabinetCache
) -> CabinetOutput:
    """Generate a cabinet through the shared cache.

    Raises:
        CaseworkError: If the request cannot produce a valid cabinet.
    """
    return cache.get_or_create(request, command.execute)
