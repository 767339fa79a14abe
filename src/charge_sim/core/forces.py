# MIT License (see LICENSE)
"""
Force engine: pairwise Coulomb interaction between all particles.

Forces are accumulated into each particle through Particle.apply_force(),
which converts them to acceleration; the integrator consumes the
accumulator at the end of the tick.

Key concepts:
- The separation is clamped to min_distance before it is used for both
  the direction and the inverse-square magnitude, so forces at close range
  are bounded.
- Newton's third law holds exactly: the force on j is the negation of the
  very array applied to i, never an independent evaluation.
- Complexity is O(N²). Particle counts are interactive, not bulk.
"""
from __future__ import annotations

import numpy as np

from ..types import Particle
from ..util import norm


def coulomb_magnitude(
    qi: float,
    qj: float,
    r: float,
    k: float,
    min_distance: float,
) -> float:
    """
    Signed Coulomb force magnitude F = k * qi * qj / r², with r >= min_distance.

    Positive values repel, negative values attract.
    """
    if r < min_distance:
        r = min_distance
    return (k * qi * qj) / (r * r)


def coulomb_force(
    pi: Particle,
    pj: Particle,
    k: float,
    min_distance: float,
) -> np.ndarray:
    """
    Force on particle i due to particle j.

    Implements F = k * qi * qj / r² along r_hat = (xi - xj) / r, where r is
    the clamped separation. Inside the floor r_hat is shorter than unit
    length; for coincident particles it is the zero vector, so the result
    is always finite.

    Args:
        pi: Particle receiving the force.
        pj: Source particle.
        k: Coulomb constant.
        min_distance: Separation floor.

    Returns:
        Force vector [Fx, Fy] on pi.
    """
    r_vec = pi.position - pj.position
    r = norm(r_vec)
    if r < min_distance:
        r = min_distance

    r_hat = r_vec / r
    return r_hat * coulomb_magnitude(pi.charge, pj.charge, r, k, min_distance)


def apply_coulomb_pairwise(
    particles: list[Particle],
    k: float,
    min_distance: float,
) -> None:
    """
    Apply Coulomb forces between all unordered pairs of particles.

    Args:
        particles: The full particle sequence, in creation order.
        k: Coulomb constant (SimConfig.k_coulomb).
        min_distance: Separation floor (SimConfig.min_distance).

    Note:
        Modifies particle.acceleration in-place for every particle.
    """
    n = len(particles)
    for i in range(n):
        pi = particles[i]
        for j in range(i + 1, n):
            pj = particles[j]
            f = coulomb_force(pi, pj, k, min_distance)

            # Newton's third law
            pi.apply_force(f)
            pj.apply_force(-f)
