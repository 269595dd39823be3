"""Infrastructure layer: exporters and console formatters."""

from casework.infrastructure.formatters import (
    CutListFormatter,
    DimensionsFormatter,
    MachiningFormatter,
    MaterialUsageFormatter,
)

__all__ = [
    "CutListFormatter",
    "DimensionsFormatter",
    "MachiningFormatter",
    "MaterialUsageFormatter",
]
