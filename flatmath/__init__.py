"""2D vector and scalar math helpers."""

from .config import EPSILON
from .scalar import (
    clamp,
    clampf,
    deg_to_rad,
    deg_to_radf,
    is_equal_approx,
    is_equal_approxf,
    lerp,
    lerpf,
    rad_to_deg,
    rad_to_degf,
)
from .vec2 import Vector2

__all__ = [
    "EPSILON",
    "Vector2",
    "clamp",
    "clampf",
    "deg_to_rad",
    "deg_to_radf",
    "is_equal_approx",
    "is_equal_approxf",
    "lerp",
    "lerpf",
    "rad_to_deg",
    "rad_to_degf",
]
