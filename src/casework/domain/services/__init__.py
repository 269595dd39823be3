"""Domain services for cabinet sizing, construction and drawing.

This package provides:
- Dimension rules mapping ladder sizes to cabinet dimensions
- Construction of the component graph with machining
- Cut list, machining list and material usage calculation
- Projection into technical drawings
"""

from .construction import ConstructionFeatureGenerator, generate_cabinet
from .cut_list import (
    CutListGenerator,
    CutListRow,
    MachiningListGenerator,
    MachiningRecord,
)
from .dimension_rules import (
    DimensionRuleEngine,
    get_available_heights,
    get_available_widths,
    get_cabinet_dimensions,
)
from .doors import DoorLeaf, door_layout
from .drawing import (
    BasicWireframeRenderer,
    DetailedDrawingGenerator,
    DrawOptions,
    ScreenTransform,
    iso_project,
)
from .material_usage import MaterialUsage, MaterialUsageCalculator

__all__ = [
    "BasicWireframeRenderer",
    "ConstructionFeatureGenerator",
    "CutListGenerator",
    "CutListRow",
    "DetailedDrawingGenerator",
    "DimensionRuleEngine",
    "DoorLeaf",
    "DrawOptions",
    "MachiningListGenerator",
    "MachiningRecord",
    "MaterialUsage",
    "MaterialUsageCalculator",
    "ScreenTransform",
    "door_layout",
    "generate_cabinet",
    "get_available_heights",
    "get_available_widths",
    "get_cabinet_dimensions",
    "iso_project",
]
