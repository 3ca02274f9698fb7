"""2D single-precision vector value type."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Iterator

import numpy as np

from .config import DEFAULT_LIMIT_LENGTH
from .scalar import clampf, deg_to_radf, ieee_quiet, is_equal_approx, lerpf


class _ConstantsMeta(type):
    """Refuses rebinding of named constants once they are set."""

    _constant_names = frozenset({"ZERO", "LEFT", "RIGHT", "UP", "DOWN"})

    def __setattr__(cls, name: str, value: object) -> None:
        if name in cls._constant_names and name in cls.__dict__:
            raise AttributeError(f"{cls.__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name in cls._constant_names:
            raise AttributeError(f"{cls.__name__}.{name} is read-only")
        super().__delattr__(name)


@dataclass(frozen=True, eq=False, repr=False)
class Vector2(metaclass=_ConstantsMeta):
    """2D vector with float32 components.

    ``Vector2()`` is the zero vector, ``Vector2(s)`` sets both components to
    ``s`` and ``Vector2(x, y)`` sets them individually. Every operation
    returns a new vector. Degenerate input (zero length, non-unit vectors
    passed to ``angle_to_point``) yields inf/NaN instead of raising.

    ``ZERO``, ``LEFT``, ``RIGHT``, ``UP`` and ``DOWN`` are read-only class
    constants.
    """

    x: float = 0.0
    y: float | None = None

    ZERO: ClassVar["Vector2"]
    LEFT: ClassVar["Vector2"]
    RIGHT: ClassVar["Vector2"]
    UP: ClassVar["Vector2"]
    DOWN: ClassVar["Vector2"]

    # Keeps numpy scalars from broadcasting over the vector in ``s * v``.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        with ieee_quiet():
            x = np.float32(self.x)
            y = x if self.y is None else np.float32(self.y)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @property
    def length(self) -> np.float32:
        with ieee_quiet():
            return np.sqrt(self.x * self.x + self.y * self.y)

    @property
    def length_squared(self) -> np.float32:
        with ieee_quiet():
            return self.x * self.x + self.y * self.y

    def abs(self) -> "Vector2":
        return Vector2(np.abs(self.x), np.abs(self.y))

    def angle(self) -> np.float32:
        """Angle from ``atan2(x, y)``; note the argument order."""
        return np.arctan2(self.x, self.y)

    def angle_to(self, to: "Vector2") -> np.float32:
        """Signed angle in radians from this vector to ``to``."""
        return np.arctan2(self.cross(to), self.dot(to))

    def angle_to_point(self, to: "Vector2") -> np.float32:
        """``acos`` of the dot product.

        Only meaningful for unit vectors; anything else can leave the
        ``[-1, 1]`` domain and produce NaN.
        """
        with ieee_quiet():
            return np.arccos(self.dot(to))

    def aspect(self) -> np.float32:
        with ieee_quiet():
            return self.x / self.y

    def bounce(self, n: "Vector2") -> "Vector2":
        return -self.reflect(n)

    def ceil(self) -> "Vector2":
        return Vector2(np.ceil(self.x), np.ceil(self.y))

    def clamp(self, min: "Vector2", max: "Vector2") -> "Vector2":
        return Vector2(clampf(self.x, min.x, max.x), clampf(self.y, min.y, max.y))

    def cross(self, other: "Vector2") -> np.float32:
        """2D cross product returning a scalar (z-component)."""
        with ieee_quiet():
            return self.x * other.y - self.y * other.x

    def direction_to(self, b: "Vector2") -> "Vector2":
        return (b - self).normalized()

    def distance_squared_to(self, to: "Vector2") -> np.float32:
        with ieee_quiet():
            dx = self.x - to.x
            dy = self.y - to.y
            return dx * dx + dy * dy

    def distance_to(self, to: "Vector2") -> np.float32:
        with ieee_quiet():
            return np.sqrt(self.distance_squared_to(to))

    def dot(self, other: "Vector2") -> np.float32:
        with ieee_quiet():
            return self.x * other.x + self.y * other.y

    def floor(self) -> "Vector2":
        return Vector2(np.floor(self.x), np.floor(self.y))

    def is_normalized(self) -> bool:
        # Squared length skips the sqrt. Shares is_equal_approx's comparison.
        return is_equal_approx(float(self.length_squared), 1.0)

    def limit_length(self, length: float = DEFAULT_LIMIT_LENGTH) -> "Vector2":
        """Shrink the vector to ``length`` if it is longer; zero stays zero."""
        current = self.length
        v = self
        if current > 0 and length < current:
            v = v / current
            v = v * length
        return v

    def lerp(self, to: "Vector2", weight: float) -> "Vector2":
        return Vector2(lerpf(self.x, to.x, weight), lerpf(self.y, to.y, weight))

    def normalized(self) -> "Vector2":
        current = self.length
        with ieee_quiet():
            return Vector2(self.x / current, self.y / current)

    def project(self, b: "Vector2") -> "Vector2":
        """Projection of this vector onto ``b``."""
        with ieee_quiet():
            return b * (self.dot(b) / b.length_squared)

    def reflect(self, n: "Vector2") -> "Vector2":
        """Reflect across the line with normal ``n`` (expected unit length)."""
        return 2.0 * n * self.dot(n) - self

    def rotated(self, angle: float) -> "Vector2":
        """Rotate counter-clockwise by ``angle`` radians."""
        with ieee_quiet():
            angle = np.float32(angle)
            sine = np.sin(angle)
            cosi = np.cos(angle)
            return Vector2(
                self.x * cosi - self.y * sine,
                self.x * sine + self.y * cosi,
            )

    def round(self) -> "Vector2":
        return Vector2(np.round(self.x), np.round(self.y))

    def sign(self) -> "Vector2":
        return Vector2(np.sign(self.x), np.sign(self.y))

    def slerp(self, to: "Vector2", weight: float) -> "Vector2":
        """Interpolate length linearly and direction by rotation.

        Falls back to ``lerp`` when either vector has zero length, since no
        direction is defined there.
        """
        start_length_sq = self.length_squared
        end_length_sq = to.length_squared
        if start_length_sq == 0.0 or end_length_sq == 0.0:
            return self.lerp(to, weight)
        start_length = np.sqrt(start_length_sq)
        result_length = lerpf(start_length, np.sqrt(end_length_sq), weight)
        angle = self.angle_to(to)
        with ieee_quiet():
            return self.rotated(angle * np.float32(weight)) * (result_length / start_length)

    def tangent(self) -> "Vector2":
        return self.rotated(deg_to_radf(-90.0))

    def compare_to(self, other: "Vector2") -> int:
        if other > self:
            return 1
        return -1 if other < self else 0

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        with ieee_quiet():
            return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        with ieee_quiet():
            return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: "Vector2 | float") -> "Vector2":
        if isinstance(other, Vector2):
            with ieee_quiet():
                return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            with ieee_quiet():
                scalar = np.float32(other)
                return Vector2(self.x * scalar, self.y * scalar)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.__mul__(scalar)

    def __truediv__(self, other: "Vector2 | float") -> "Vector2":
        if isinstance(other, Vector2):
            with ieee_quiet():
                return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            with ieee_quiet():
                scalar = np.float32(other)
                return Vector2(self.x / scalar, self.y / scalar)
        return NotImplemented

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __abs__(self) -> "Vector2":
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y)

    def __hash__(self) -> int:
        return hash((float(self.x), float(self.y)))

    # Lexicographic: y only breaks ties on exactly equal x.
    def __lt__(self, other: "Vector2") -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return bool(self.y < other.y if self.x == other.x else self.x < other.x)

    def __gt__(self, other: "Vector2") -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return bool(self.y > other.y if self.x == other.x else self.x > other.x)

    def __le__(self, other: "Vector2") -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return bool(self.y <= other.y if self.x == other.x else self.x < other.x)

    def __ge__(self, other: "Vector2") -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return bool(self.y >= other.y if self.x == other.x else self.x > other.x)

    def __iter__(self) -> Iterator[np.float32]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({str(self.x)}, {str(self.y)})"


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.LEFT = Vector2(-1.0, 0.0)
Vector2.RIGHT = Vector2(1.0, 0.0)
Vector2.UP = Vector2(0.0, 1.0)
Vector2.DOWN = Vector2(0.0, -1.0)
