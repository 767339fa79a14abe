# MIT License (see LICENSE)
"""
Core physics and field components.

This subpackage provides:
    - Force engine: pairwise Coulomb forces with a distance floor.
    - Integrator: damped semi-implicit Euler with wall reflection.
    - Field sampler: superposed point-charge field at arbitrary points.
    - Streamline tracer: field lines from seed points.
    - Invariants: kinetic energy and momentum diagnostics.

Typical usage:
    from charge_sim.core import apply_coulomb_pairwise, euler_step

    apply_coulomb_pairwise(particles, k=800.0, min_distance=8.0)
    for p in particles:
        euler_step(p, friction=0.02, width=1000.0, height=600.0)
"""
from .forces import apply_coulomb_pairwise, coulomb_force, coulomb_magnitude
from .integrators import euler_step, reflect_edges
from .field import field_contribution, sample_field, sample_field_grid, grid_points
from .streamlines import trace_streamline, trace_field_lines, seed_points
from .invariants import kinetic_energy, linear_momentum, speeds

__all__ = [
    # Forces
    "apply_coulomb_pairwise",
    "coulomb_force",
    "coulomb_magnitude",
    # Integration
    "euler_step",
    "reflect_edges",
    # Field
    "field_contribution",
    "sample_field",
    "sample_field_grid",
    "grid_points",
    # Streamlines
    "trace_streamline",
    "trace_field_lines",
    "seed_points",
    # Diagnostics
    "kinetic_energy",
    "linear_momentum",
    "speeds",
]
