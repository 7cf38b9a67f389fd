# MIT License (see LICENSE)
"""
Coordinate conversion helpers and runtime switches.

All points and vectors handed back to callers are numpy arrays of shape (2,)
with dtype float64. Inputs may be any array-like of two numbers.
"""
from __future__ import annotations
import os

import numpy as np
from numpy.typing import ArrayLike

from .constants import CHECK_PRECONDITIONS_ENV

# Type aliases for clarity
Vec2 = ArrayLike  # Any array-like of two floats: tuple, list or np.ndarray
LineCoeffs = tuple[float, float, float]  # (a, b, c) of a*x + b*y + c = 0, ImplicitLine included
Vertices = ArrayLike  # [N, 2] array-like or flat [x0, y0, x1, y1, ...]


def f64(x: ArrayLike) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def as_point(x: Vec2, name: str = "point") -> np.ndarray:
    """
    Convert an array-like to a float64 2-vector.

    Raises:
        ValueError: If the input does not hold exactly two numbers.
    """
    p = f64(x)
    if p.shape != (2,):
        raise ValueError(f"{name} must be a 2D coordinate pair, got shape {p.shape}")
    return p


def norm2(v: Vec2) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def cross2(a: Vec2, b: Vec2) -> float:
    """
    2D cross product (scalar result): a × b = ax*by - ay*bx.

    Positive result means b is counterclockwise from a.
    """
    return float(a[0] * b[1] - a[1] * b[0])


def check_preconditions() -> bool:
    """Check if caller precondition checks are enabled via environment variable."""
    return os.environ.get(CHECK_PRECONDITIONS_ENV, "0") == "1"
