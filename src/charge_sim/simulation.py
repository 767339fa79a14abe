# MIT License (see LICENSE)
"""
The simulation container and frame loop.

The Simulation class owns the particle sequence and the SimConfig, and is
the only place particles are created or destroyed. It exposes:
- Particle management for the input layer (create, pick, drag, erase, clear).
- The per-frame tick:
    1. Force engine (pairwise Coulomb, O(N²)).
    2. Integrator (damping, semi-implicit Euler, wall reflection).
- Read-only field queries for visualization (field sampling, field lines,
  the arrow grid). These never modify particles and may run before or
  after a tick with the same result.

Structure:
    - User creates a Simulation.
    - The input layer calls create_particle() / set_position() / ...
    - The frame driver calls tick() once per frame (nominally 60 Hz).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from .config import SimConfig
from .constants import PICK_MARGIN
from .profiler import FIELD, FORCES, INTEGRATE, Profiler
from .types import Particle
from .core.forces import apply_coulomb_pairwise
from .core.integrators import euler_step
from .core.field import sample_field, sample_field_grid
from .core.streamlines import Point, trace_streamline, trace_field_lines

logger = logging.getLogger("charge_sim")


@dataclass
class Simulation:
    """
    A 2D world of point charges.

    Attributes:
        config: Tunables read on every tick and query. Replace it through
                update_config() to get validation.
        profiler: Optional Profiler instance for timing statistics.
        particles: Particle sequence in creation order. Order does not
                   affect the physics but is kept for reproducible runs.
        frame: Number of ticks performed so far.
    """
    config: SimConfig = field(default_factory=SimConfig)
    profiler: Profiler | None = None

    # Internal state
    particles: list[Particle] = field(default_factory=list)
    frame: int = 0

    def __post_init__(self) -> None:
        self._rng = np.random.default_rng(self.config.seed)
        self._next_id = 1

    # ------------------------------------------------------------------
    # Particle management
    # ------------------------------------------------------------------

    def create_particle(self, x: float, y: float, charge: float) -> Particle:
        """
        Append a new particle at rest.

        Args:
            x, y: Initial position.
            charge: Signed, nonzero charge (the tools use +1 or -1).

        Returns:
            The new particle; it doubles as the handle for set_position().

        Raises:
            ValueError: If charge is zero.
        """
        p = Particle(position=(x, y), charge=charge)
        p.id = self._next_id
        self._next_id += 1
        self.particles.append(p)
        logger.debug(f"Created particle {p.id} q={p.charge:+g} at ({x:.1f}, {y:.1f})")
        return p

    def random_charge(self) -> float:
        """Draw +1 or -1 with equal probability from this simulation's generator."""
        return float(self._rng.choice([1.0, -1.0]))

    def find_particle_near(self, x: float, y: float) -> Particle | None:
        """
        Pick the oldest particle whose centre is within radius + PICK_MARGIN.

        Used by the select/move tool.

        Returns:
            The first match scanning oldest to newest, or None.
        """
        for p in self.particles:
            if p.contains(x, y, PICK_MARGIN):
                return p
        return None

    def delete_particle_near(self, x: float, y: float) -> Particle | None:
        """
        Remove the newest particle whose centre is within radius + PICK_MARGIN.

        The scan runs newest to oldest, the opposite of find_particle_near(),
        so erasing on a pile removes the particle drawn on top.

        Returns:
            The removed particle, or None if nothing matched.
        """
        for i in range(len(self.particles) - 1, -1, -1):
            p = self.particles[i]
            if p.contains(x, y, PICK_MARGIN):
                del self.particles[i]
                logger.debug(f"Deleted particle {p.id} at ({p.position[0]:.1f}, {p.position[1]:.1f})")
                return p
        return None

    def clear_all_particles(self) -> None:
        """Remove every particle."""
        n = len(self.particles)
        self.particles.clear()
        logger.info(f"Cleared {n} particles")

    def set_position(self, particle: Particle, x: float, y: float) -> None:
        """
        Move a particle directly (drag). Velocity is left untouched.

        The position is not clamped here; the next tick's wall reflection
        brings it back inside the canvas.
        """
        particle.position[0] = x
        particle.position[1] = y

    def counts(self) -> dict[str, int]:
        """Particle totals for the info panel."""
        positive = sum(1 for p in self.particles if p.is_positive)
        return {
            "particles": len(self.particles),
            "positive": positive,
            "negative": len(self.particles) - positive,
        }

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def update_config(self, **changes) -> SimConfig:
        """
        Apply control-panel changes (sliders, toggles).

        Example:
            sim.update_config(k_coulomb=1200, show_field_lines=True)

        Raises:
            ValueError: On unknown keys or invalid values; the current
                        configuration is left unchanged.
        """
        self.config = self.config.replace(**changes)
        if "seed" in changes:
            self._rng = np.random.default_rng(self.config.seed)
        logger.info(f"Configuration updated: {changes}")
        return self.config

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def _apply_forces(self) -> None:
        cfg = self.config
        apply_coulomb_pairwise(self.particles, cfg.k_coulomb, cfg.min_distance)

    def _integrate(self) -> None:
        cfg = self.config
        for p in self.particles:
            euler_step(p, cfg.friction, cfg.width, cfg.height)

    def tick(self) -> None:
        """
        Advance the simulation by one frame.

        All pair forces are accumulated before any particle moves, so the
        result does not depend on particle order.
        """
        prof = self.profiler

        if prof:
            with prof.section(FORCES):
                self._apply_forces()
            with prof.section(INTEGRATE):
                self._integrate()
        else:
            self._apply_forces()
            self._integrate()

        self.frame += 1

    # ------------------------------------------------------------------
    # Field queries (read-only)
    # ------------------------------------------------------------------

    def sample_field(self, x: float, y: float) -> np.ndarray:
        """Electric field vector [Ex, Ey] at (x, y)."""
        cfg = self.config
        return sample_field(x, y, self.particles, cfg.k_coulomb, cfg.min_distance)

    def trace_field_line(self, seed_x: float, seed_y: float) -> list[Point]:
        """Field line from a seed point; see core.streamlines.trace_streamline()."""
        return trace_streamline(seed_x, seed_y, self.particles, self.config)

    def field_lines(self) -> list[list[Point]]:
        """All display field lines, seeded around each positive charge."""
        prof = self.profiler
        if prof:
            with prof.section(FIELD):
                return trace_field_lines(self.particles, self.config)
        return trace_field_lines(self.particles, self.config)

    def field_grid(self) -> tuple[np.ndarray, np.ndarray]:
        """Field sampled on the arrow grid, as (points, fields) arrays."""
        cfg = self.config
        prof = self.profiler
        if prof:
            with prof.section(FIELD):
                return sample_field_grid(
                    self.particles, cfg.k_coulomb, cfg.min_distance,
                    cfg.width, cfg.height, cfg.field_grid_spacing,
                )
        return sample_field_grid(
            self.particles, cfg.k_coulomb, cfg.min_distance,
            cfg.width, cfg.height, cfg.field_grid_spacing,
        )
