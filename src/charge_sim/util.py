# MIT License (see LICENSE)
"""
Small 2D vector helpers.

All functions operate on 2D vectors represented as numpy arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Positions and velocities may be given as tuples or lists; this keeps the
    numerics in double precision regardless of the input type.
    """
    return np.array(x, dtype=np.float64)


def zeros2() -> np.ndarray:
    """A fresh float64 zero vector."""
    return np.zeros(2, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def dist(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between two points given as coordinates."""
    dx = ax - bx
    dy = ay - by
    return float(np.sqrt(dx * dx + dy * dy))
