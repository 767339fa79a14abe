# MIT License (see LICENSE)
"""
Core type definitions for the charge simulation.

Defines the Particle, the only entity the engine moves. A particle is a
point charge with a finite radius used for picking and as an absorbing
sink for field lines.

Equations of motion per tick (one tick = one frame, dt = 1):
  - a = F/m             (accumulated by apply_force)
  - v <- v (1 - mu) + a
  - x <- x + v
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import DEFAULT_MASS, DEFAULT_RADIUS
from .util import f64, zeros2


@dataclass(eq=False)
class Particle:
    """
    A point charge with kinematic state.

    Attributes:
        position: Centre [x, y] in canvas units.
        charge: Signed charge. Never zero; the sign selects attraction or
                repulsion and the visual class.
        velocity: [vx, vy] in canvas units per tick.
        mass: Inertial mass, strictly positive.
        radius: Drawing and hit-test radius.
        acceleration: Accumulator filled by apply_force() and consumed by
                      the integrator at the end of every tick.
        id: Identifier assigned by Simulation.create_particle().

    Particles compare by identity; the object itself is the handle the
    input layer keeps while dragging.

    Raises:
        ValueError: If mass or radius is not positive, or charge is zero.
    """
    position: np.ndarray | tuple[float, float]
    charge: float
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    mass: float = DEFAULT_MASS
    radius: float = DEFAULT_RADIUS

    # Runtime state (not user-specified)
    acceleration: np.ndarray = field(default_factory=zeros2)
    id: int = -1

    def __post_init__(self) -> None:
        """Validate invariants and convert vectors to float64 arrays."""
        if self.mass <= 0:
            raise ValueError(f"Particle mass must be positive, got {self.mass}")
        if self.charge == 0:
            raise ValueError("Particle charge must be nonzero")
        if self.radius <= 0:
            raise ValueError(f"Particle radius must be positive, got {self.radius}")
        self.charge = float(self.charge)
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.acceleration = f64(self.acceleration)

    @property
    def is_positive(self) -> bool:
        return self.charge > 0

    @property
    def is_negative(self) -> bool:
        return self.charge < 0

    def apply_force(self, force: np.ndarray) -> None:
        """
        Accumulate a force for this tick.

        The force is converted to acceleration immediately (a += F/m), so
        several sources may contribute before integration.
        """
        self.acceleration += force / self.mass

    def clear_acceleration(self) -> None:
        """Reset the accumulator after it has been consumed."""
        self.acceleration[:] = 0.0

    def contains(self, x: float, y: float, margin: float = 0.0) -> bool:
        """True if (x, y) lies strictly within radius + margin of the centre."""
        dx = x - self.position[0]
        dy = y - self.position[1]
        reach = self.radius + margin
        return dx * dx + dy * dy < reach * reach
