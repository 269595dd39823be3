"""Projection of constructed cabinets into technical views.

Two tiers share one projection, one door layout and one feature legend:
- ``DetailedDrawingGenerator`` builds annotated CAD-style wireframes
- ``BasicWireframeRenderer`` draws simplified views straight to screen space
"""

from .basic import BasicWireframeRenderer, DrawOptions
from .detailed import DetailedDrawingGenerator, fraction
from .features import FeatureStyle, horizontal_members
from .projection import COS_30, SIN_30, ScreenTransform, iso_project

__all__ = [
    "BasicWireframeRenderer",
    "COS_30",
    "DetailedDrawingGenerator",
    "DrawOptions",
    "FeatureStyle",
    "SIN_30",
    "ScreenTransform",
    "fraction",
    "horizontal_members",
    "iso_project",
]
