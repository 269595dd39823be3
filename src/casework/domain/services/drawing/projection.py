"""Isometric projection and world-to-screen mapping.

World coordinates are in inches with x across the cabinet width, y up and
z back into the depth. ``iso_project`` flattens a world point onto the
isometric picture plane (still y-up, in inches) and ``ScreenTransform``
scales and flips that plane into pixel coordinates with y growing down.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ...value_objects import Point3D

COS_30 = math.cos(math.pi / 6)
SIN_30 = math.sin(math.pi / 6)


def iso_project(x: float, y: float, z: float) -> Point3D:
    """Project a world point onto the isometric picture plane."""
    return Point3D((x - z) * COS_30, y - (x + z) * SIN_30, 0.0)


@dataclass(frozen=True)
class ScreenTransform:
    """Maps picture-plane inches to pixels.

    Attributes:
        scale: Pixels per inch.
        offset_x: Pixel x of the picture-plane origin.
        offset_y: Pixel y of the picture-plane origin.
    """

    scale: float = 8.0
    offset_x: float = 100.0
    offset_y: float = 100.0

    def apply(self, point: Point3D) -> tuple[float, float]:
        return (
            self.offset_x + point.x * self.scale,
            self.offset_y - point.y * self.scale,
        )

    def iso(self, x: float, y: float, z: float) -> tuple[float, float]:
        """Project a world point straight to pixels.

        Equivalent to ``offset_x + (x - z) * scale * cos30`` and
        ``offset_y + (x + z) * scale * sin30 - y * scale``.
        """
        return self.apply(iso_project(x, y, z))
