# MIT License (see LICENSE)
"""
charge_sim - interactive 2D point-charge simulation and field visualization.

This package moves point charges under mutual Coulomb forces and computes
the electric field they produce, for display as an arrow grid or as
traced field lines.

Main entry points:
    - Simulation: Particle collection, frame tick, and field queries.
    - SimConfig: Run-time tunables (Coulomb constant, friction, ...).
    - Particle: A point charge with position, velocity and mass.
    - ToolController / Tool: Pointer-driven placement, drag and erase.

Submodules:
    - core: Force engine, integrator, field sampler, streamline tracer.
    - renderer: Optional drawing adapters.

Example:
    from charge_sim import Simulation

    sim = Simulation()
    sim.create_particle(400, 300, +1)
    sim.create_particle(600, 300, -1)
    sim.tick()
    lines = sim.field_lines()
"""
from .config import SimConfig
from .simulation import Simulation
from .tools import Tool, ToolController
from .types import Particle

__all__ = [
    # Simulation
    "Simulation",
    "SimConfig",
    "Particle",
    # Input
    "Tool",
    "ToolController",
]
