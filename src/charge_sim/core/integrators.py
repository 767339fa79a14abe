# MIT License (see LICENSE)
"""
Fixed-step motion integrator.

One call advances a particle by one frame (dt = 1) with a damped
semi-implicit Euler update, then enforces the canvas boundary:

    v <- v * (1 - friction)     damping first
    v <- v + a                  a = accumulated F/m
    x <- x + v
    a <- 0
    reflect on each axis independently

Damping is applied before the new acceleration is added. Changing that
order changes the visible dynamics.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

from ..types import Particle


def reflect_edges(particle: Particle, width: float, height: float) -> None:
    """
    Clamp the particle into [0, width] x [0, height].

    Each axis that was exceeded has its velocity component negated. A corner
    hit reflects both axes in the same call.
    """
    pos = particle.position
    vel = particle.velocity

    if pos[0] < 0:
        pos[0] = 0.0
        vel[0] *= -1
    elif pos[0] > width:
        pos[0] = width
        vel[0] *= -1

    if pos[1] < 0:
        pos[1] = 0.0
        vel[1] *= -1
    elif pos[1] > height:
        pos[1] = height
        vel[1] *= -1


def euler_step(particle: Particle, friction: float, width: float, height: float) -> None:
    """
    Advance a particle by one tick.

    Args:
        particle: Particle to integrate (modified in-place). Its acceleration
                  accumulator must already hold this tick's F/m.
        friction: Damping factor in [0, 1).
        width: Canvas width for boundary reflection.
        height: Canvas height for boundary reflection.
    """
    particle.velocity *= 1.0 - friction
    particle.velocity += particle.acceleration
    particle.position += particle.velocity

    particle.clear_acceleration()
    reflect_edges(particle, width, height)
