"""Default numeric constants for flatmath."""

from __future__ import annotations

EPSILON = 0.000001
DEFAULT_LIMIT_LENGTH = 1.0
