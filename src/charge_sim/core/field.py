# MIT License (see LICENSE)
"""
Field sampler: the electrostatic field of all particles at arbitrary points.

    E(q) = Σ k * q_p * (q - x_p) / |q - x_p|³

Sources closer to the query point than min_distance are skipped rather
than clamped, unlike the force engine, which clamps the separation.

Everything here is read-only with respect to particle state and may be
called any number of times per tick.
"""
from __future__ import annotations

import numpy as np

from ..types import Particle


def field_contribution(
    x: float,
    y: float,
    particle: Particle,
    k: float,
    min_distance: float,
) -> np.ndarray:
    """
    Field at (x, y) due to a single particle.

    Returns the zero vector when the particle lies within min_distance of
    the query point.
    """
    rx = x - particle.position[0]
    ry = y - particle.position[1]
    r2 = rx * rx + ry * ry

    if r2 < min_distance * min_distance:
        return np.zeros(2, dtype=np.float64)

    r = np.sqrt(r2)
    e = (k * particle.charge) / r2
    return np.array([e * (rx / r), e * (ry / r)], dtype=np.float64)


def sample_field(
    x: float,
    y: float,
    particles: list[Particle],
    k: float,
    min_distance: float,
) -> np.ndarray:
    """
    Net field vector [Ex, Ey] at (x, y) by superposition.

    Args:
        x, y: Query point; need not coincide with any particle.
        particles: Field sources.
        k: Coulomb constant.
        min_distance: Skip radius around each source.
    """
    total = np.zeros(2, dtype=np.float64)
    for p in particles:
        total += field_contribution(x, y, p, k, min_distance)
    return total


def grid_points(width: float, height: float, spacing: float) -> np.ndarray:
    """
    Cell centres of a regular grid covering the canvas.

    Columns run x = spacing/2, spacing/2 + spacing, ... while x < width, and
    likewise for rows. Points are ordered column-major (x outer, y inner).

    Returns:
        Array of shape [N, 2].
    """
    xs = np.arange(spacing / 2, width, spacing, dtype=np.float64)
    ys = np.arange(spacing / 2, height, spacing, dtype=np.float64)
    gx, gy = np.meshgrid(xs, ys, indexing="ij")
    return np.column_stack([gx.ravel(), gy.ravel()])


def sample_field_grid(
    particles: list[Particle],
    k: float,
    min_distance: float,
    width: float,
    height: float,
    spacing: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Sample the field over the canvas grid used for field-arrow display.

    Returns:
        Tuple (points, fields), both of shape [N, 2]; fields[i] is the
        field at points[i].
    """
    points = grid_points(width, height, spacing)
    fields = np.zeros_like(points)
    for i, (x, y) in enumerate(points):
        fields[i] = sample_field(x, y, particles, k, min_distance)
    return points, fields
