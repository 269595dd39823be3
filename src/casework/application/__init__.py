"""Application layer - commands, DTOs and configuration."""

from .cache import CabinetCache
from .commands import GenerateCabinetCommand, RenderDrawingCommand
from .dtos import CabinetOutput, CabinetRequest
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "CabinetCache",
    "CabinetOutput",
    "CabinetRequest",
    "GenerateCabinetCommand",
    "RenderDrawingCommand",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
