"""Scalar helpers in double (float) and single (numpy.float32) precision.

Each helper comes in two independent flavours. The plain name works on
Python floats; the ``f``-suffixed name coerces its inputs to float32 and
returns a float32.
"""

from __future__ import annotations

import math

import numpy as np

from .config import EPSILON

_PI_F32 = np.float32(math.pi)
_DEG_TO_RAD_F32 = _PI_F32 / np.float32(180.0)
_RAD_TO_DEG_F32 = np.float32(180.0) / _PI_F32


def ieee_quiet() -> np.errstate:
    """Let float32 inf/NaN results through without a RuntimeWarning."""
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def clamp(val: float, min: float, max: float) -> float:
    """Clamp ``val`` into ``[min, max]``. ``max`` wins if the bounds are swapped."""
    if val > max:
        return max
    return min if val < min else val


def clampf(val: float, min: float, max: float) -> np.float32:
    with ieee_quiet():
        val, min, max = np.float32(val), np.float32(min), np.float32(max)
    if val > max:
        return max
    return min if val < min else val


def is_equal_approx(a: float, b: float) -> bool:
    # NOTE: true when the values are *further* apart than EPSILON.
    # Existing callers depend on this comparison.
    return abs(a - b) > EPSILON


def is_equal_approxf(a: float, b: float) -> bool:
    with ieee_quiet():
        return bool(abs(np.float32(a) - np.float32(b)) > np.float32(EPSILON))


def lerp(a: float, b: float, weight: float) -> float:
    """Linear interpolation; ``weight`` outside [0, 1] extrapolates."""
    return a + (b - a) * weight


def lerpf(a: float, b: float, weight: float) -> np.float32:
    with ieee_quiet():
        a, b, weight = np.float32(a), np.float32(b), np.float32(weight)
        return a + (b - a) * weight


def deg_to_rad(a: float) -> float:
    return a * (math.pi / 180.0)


def deg_to_radf(a: float) -> np.float32:
    with ieee_quiet():
        return np.float32(a) * _DEG_TO_RAD_F32


def rad_to_deg(a: float) -> float:
    return a * (180.0 / math.pi)


def rad_to_degf(a: float) -> np.float32:
    with ieee_quiet():
        return np.float32(a) * _RAD_TO_DEG_F32
