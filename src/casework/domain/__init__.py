"""Domain layer - core business logic."""

from .entities import Cabinet, Component
from .exceptions import (
    CaseworkError,
    DegenerateConfigurationError,
    InvalidDimensionError,
    UnsupportedArchetypeError,
)
from .services import (
    ConstructionFeatureGenerator,
    CutListGenerator,
    DetailedDrawingGenerator,
    MaterialUsageCalculator,
    generate_cabinet,
    get_available_heights,
    get_available_widths,
    get_cabinet_dimensions,
)
from .value_objects import (
    CabinetArchetype,
    CabinetConfiguration,
    CabinetDimensions,
    MaterialSpec,
    MaterialType,
    PartType,
)

__all__ = [
    "Cabinet",
    "CabinetArchetype",
    "CabinetConfiguration",
    "CabinetDimensions",
    "CaseworkError",
    "Component",
    "ConstructionFeatureGenerator",
    "CutListGenerator",
    "DegenerateConfigurationError",
    "DetailedDrawingGenerator",
    "InvalidDimensionError",
    "MaterialSpec",
    "MaterialType",
    "MaterialUsageCalculator",
    "PartType",
    "UnsupportedArchetypeError",
    "generate_cabinet",
    "get_available_heights",
    "get_available_widths",
    "get_cabinet_dimensions",
]
