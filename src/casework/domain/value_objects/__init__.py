"""Value objects for the cabinet domain.

This module provides immutable data types used throughout the casework
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Sizing, materials and configuration
from ._core import (
    CabinetArchetype,
    CabinetConfiguration,
    CabinetDimensions,
    DoorStyle,
    EdgeBanding,
    HingeType,
    MaterialSpec,
    MaterialType,
    OverlayType,
    PartType,
)

# Holes and grooves
from ._machining import (
    Groove,
    GrooveKind,
    HoleKind,
    HolePattern,
    Orientation,
)

# Drawing primitives
from ._drawing import (
    PALETTE,
    WEIGHT_BAND,
    WEIGHT_DOOR,
    WEIGHT_HEAVY,
    WEIGHT_LIGHT,
    WEIGHT_MEDIUM,
    Annotation,
    CabinetDrawing,
    DimensionLine,
    DrawingTier,
    Line3D,
    LineStyle,
    Point3D,
    ScreenDrawing,
    ScreenLine,
    ScreenText,
    SemanticColor,
    ViewMode,
    WireframeGeometry,
)

__all__ = [
    # Core
    "CabinetArchetype",
    "CabinetConfiguration",
    "CabinetDimensions",
    "DoorStyle",
    "EdgeBanding",
    "HingeType",
    "MaterialSpec",
    "MaterialType",
    "OverlayType",
    "PartType",
    # Machining
    "Groove",
    "GrooveKind",
    "HoleKind",
    "HolePattern",
    "Orientation",
    # Drawing
    "PALETTE",
    "WEIGHT_BAND",
    "WEIGHT_DOOR",
    "WEIGHT_HEAVY",
    "WEIGHT_LIGHT",
    "WEIGHT_MEDIUM",
    "Annotation",
    "CabinetDrawing",
    "DimensionLine",
    "DrawingTier",
    "Line3D",
    "LineStyle",
    "Point3D",
    "ScreenDrawing",
    "ScreenLine",
    "ScreenText",
    "SemanticColor",
    "ViewMode",
    "WireframeGeometry",
]
