"""Feature legend and member placement shared by both drawing tiers.

Each drawn feature has exactly one colour, weight and stroke, so a renderer
can switch between the basic and detailed tiers without changing its legend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...entities import Cabinet, Component
from ...value_objects import (
    WEIGHT_DOOR,
    WEIGHT_HEAVY,
    WEIGHT_LIGHT,
    WEIGHT_MEDIUM,
    Groove,
    GrooveKind,
    LineStyle,
    PartType,
    SemanticColor,
)


@dataclass(frozen=True)
class FeatureStyle:
    """How one kind of feature is stroked."""

    color: SemanticColor = SemanticColor.STRUCTURAL
    weight: float = WEIGHT_LIGHT
    style: LineStyle = LineStyle.SOLID

    def kwargs(self) -> dict[str, Any]:
        return {"color": self.color, "weight": self.weight, "style": self.style}


CARCASS = FeatureStyle(SemanticColor.STRUCTURAL, WEIGHT_HEAVY)
PANEL = FeatureStyle(SemanticColor.INTERNAL, WEIGHT_MEDIUM)
BACK_PANEL = FeatureStyle(SemanticColor.HIDDEN, WEIGHT_LIGHT, LineStyle.DASHED)
DOOR = FeatureStyle(SemanticColor.OVERLAY_DOOR, WEIGHT_DOOR)
DOOR_SPLIT = FeatureStyle(SemanticColor.OVERLAY_DOOR, WEIGHT_MEDIUM, LineStyle.DASHED)
TOE_KICK = FeatureStyle(SemanticColor.INTERNAL, WEIGHT_MEDIUM)
SHELF = FeatureStyle(SemanticColor.SHELF, 1.2, LineStyle.DASHED)


def horizontal_members(cabinet: Cabinet) -> list[tuple[float, float]]:
    """``(y, thickness)`` of each horizontal member in the front elevation.

    Bottom and top panels sit in the side-panel dados; a base cabinet's top
    stretcher is flush with the box top.
    """
    side = cabinet.component(PartType.SIDE)
    members = sorted(
        (g.y, g.width) for g in side.grooves if g.kind == GrooveKind.DADO
    )
    if cabinet.components_of(PartType.TOP_STRETCHER):
        t = cabinet.material.thickness
        members.append((cabinet.dimensions.box_height - t, t))
    return members


def groove_of(component: Component, kind: GrooveKind) -> Groove:
    """First groove of ``kind`` on a component."""
    for groove in component.grooves:
        if groove.kind == kind:
            return groove
    raise KeyError(f"{component.name} has no {kind.value} groove")
