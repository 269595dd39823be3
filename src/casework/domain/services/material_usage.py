"""Sheet goods and edge banding usage."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from ..entities import Component

logger = logging.getLogger(__name__)

__all__ = ["MaterialUsage", "MaterialUsageCalculator"]

# Stock thicknesses counted as 3/4" class sheet goods (carcass and doors)
THICK_STOCK = (0.75, 0.875)
BACK_STOCK = 0.25


@dataclass(frozen=True)
class MaterialUsage:
    """Material to purchase for one cabinet.

    Attributes:
        plywood34: Square feet of 3/4" class plywood, waste included, rounded up.
        plywood14: Square feet of 1/4" plywood, waste included, rounded up.
        edge_banding: Linear feet of edge banding, waste included, rounded up.
        plywood34_sqft: Net square feet of 3/4" class plywood.
        plywood14_sqft: Net square feet of 1/4" plywood.
        edge_banding_ft: Net linear feet of edge banding.
    """

    plywood34: int
    plywood14: int
    edge_banding: int
    plywood34_sqft: float
    plywood14_sqft: float
    edge_banding_ft: float

    @property
    def description(self) -> str:
        """Human-readable summary of material needs."""
        return (
            f'{self.plywood34} sq ft 3/4" plywood, '
            f'{self.plywood14} sq ft 1/4" plywood, '
            f"{self.edge_banding} ft edge banding"
        )


class MaterialUsageCalculator:
    """Totals sheet area and banding length with waste allowances."""

    def __init__(
        self, sheet_waste_factor: float = 0.10, banding_waste_factor: float = 0.15
    ) -> None:
        """Initialize with waste factors (default 10% sheet, 15% banding)."""
        self.sheet_waste_factor = sheet_waste_factor
        self.banding_waste_factor = banding_waste_factor

    def calculate(self, components: Iterable[Component]) -> MaterialUsage:
        """Calculate material usage for a component list.

        Components in a stock thickness other than 3/4", 7/8" or 1/4" do not
        count toward either sheet total.
        """
        thick = 0.0
        back = 0.0
        banding_ft = 0.0
        for component in components:
            area = component.total_area_sqft
            if any(math.isclose(component.thickness, t) for t in THICK_STOCK):
                thick += area
            elif math.isclose(component.thickness, BACK_STOCK):
                back += area
            else:
                logger.debug(
                    f"Skipping {component.name} in sheet totals: "
                    f'{component.thickness:g}" stock'
                )
            banding_ft += component.banded_length / 12 * component.quantity

        return MaterialUsage(
            plywood34=math.ceil(thick * (1 + self.sheet_waste_factor)),
            plywood14=math.ceil(back * (1 + self.sheet_waste_factor)),
            edge_banding=math.ceil(banding_ft * (1 + self.banding_waste_factor)),
            plywood34_sqft=thick,
            plywood14_sqft=back,
            edge_banding_ft=banding_ft,
        )
