# MIT License (see LICENSE)
"""
Diagnostic quantities of a particle system.

With friction > 0 the system is dissipative, so kinetic energy should
never increase in the absence of forces; with friction = 0 and no wall
contact, the pairwise forces conserve total momentum exactly.
"""
from __future__ import annotations
import numpy as np

from ..types import Particle


def kinetic_energy(particles: list[Particle]) -> float:
    """
    Total kinetic energy T = Σ 0.5 * m * v².

    Args:
        particles: Particle sequence.
    """
    ke = 0.0
    for p in particles:
        v_sq = float(np.dot(p.velocity, p.velocity))
        ke += 0.5 * p.mass * v_sq
    return ke


def linear_momentum(particles: list[Particle]) -> np.ndarray:
    """Total momentum P = Σ m * v as [Px, Py]."""
    total = np.zeros(2, dtype=np.float64)
    for p in particles:
        total += p.mass * p.velocity
    return total


def speeds(particles: list[Particle]) -> np.ndarray:
    """Per-particle speed |v|, in creation order."""
    if not particles:
        return np.zeros(0, dtype=np.float64)
    return np.linalg.norm(np.array([p.velocity for p in particles]), axis=1)
