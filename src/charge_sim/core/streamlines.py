# MIT License (see LICENSE)
"""
Streamline tracer: polyline approximations of electric field lines.

A line is traced from a seed by fixed-length steps along the local unit
field direction. Tracing stops when

    1. the field is weaker than field_threshold (null region),
    2. the new point leaves the canvas (the point is kept),
    3. the new point comes within radius + SINK_MARGIN of a negative charge,
    4. max_streamline_len points have been produced.

Tracing is a pure function of the seed and the particle configuration: it
keeps no state between calls and never touches particles.

Seeding convention for display: lines start only at positive charges,
num_lines_per_charge of them at evenly spaced angles, radius + SEED_OFFSET
from the centre.
"""
from __future__ import annotations

import math

from ..config import SimConfig
from ..constants import SEED_OFFSET, SINK_MARGIN
from ..types import Particle
from ..util import dist
from .field import sample_field

Point = tuple[float, float]


def _in_sink(x: float, y: float, particles: list[Particle]) -> bool:
    """True if (x, y) is inside the absorption radius of any negative charge."""
    for p in particles:
        if p.is_negative:
            if dist(x, y, p.position[0], p.position[1]) < p.radius + SINK_MARGIN:
                return True
    return False


def trace_streamline(
    seed_x: float,
    seed_y: float,
    particles: list[Particle],
    config: SimConfig,
) -> list[Point]:
    """
    Follow the field from a seed point.

    The seed itself is not part of the output; each appended point is one
    streamline_step further along the line.

    Args:
        seed_x, seed_y: Starting point.
        particles: Field sources (and sinks).
        config: Supplies k_coulomb, min_distance, streamline_step,
                max_streamline_len, field_threshold and the canvas extents.

    Returns:
        List of (x, y) points, possibly empty, never longer than
        config.max_streamline_len.
    """
    pts: list[Point] = []
    x, y = float(seed_x), float(seed_y)
    step = config.streamline_step

    for _ in range(config.max_streamline_len):
        e = sample_field(x, y, particles, config.k_coulomb, config.min_distance)
        mag = math.hypot(e[0], e[1])

        # mag == 0 has no direction, even with a zero threshold
        if mag == 0.0 or mag < config.field_threshold:
            break

        x += float(e[0] / mag) * step
        y += float(e[1] / mag) * step
        pts.append((x, y))

        if x < 0 or x > config.width or y < 0 or y > config.height:
            break

        if _in_sink(x, y, particles):
            break

    return pts


def seed_points(particle: Particle, n: int) -> list[Point]:
    """
    Evenly spaced seeds around a particle's surface.

    Seed m sits at angle 2*pi*m/n, at distance radius + SEED_OFFSET.
    """
    reach = particle.radius + SEED_OFFSET
    cx, cy = float(particle.position[0]), float(particle.position[1])
    seeds = []
    for m in range(n):
        angle = (2 * math.pi * m) / n
        seeds.append((cx + math.cos(angle) * reach, cy + math.sin(angle) * reach))
    return seeds


def trace_field_lines(particles: list[Particle], config: SimConfig) -> list[list[Point]]:
    """
    Trace the display set of field lines for the current configuration.

    Positive charges are visited in creation order; negative charges seed
    nothing. A line that terminates immediately is returned as an empty list
    so the result always holds num_lines_per_charge entries per positive
    charge.
    """
    lines = []
    for p in particles:
        if not p.is_positive:
            continue
        for sx, sy in seed_points(p, config.num_lines_per_charge):
            lines.append(trace_streamline(sx, sy, particles, config))
    return lines
