# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the drawing interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer.
    - BufferedRenderer: Records frames for playback, export, or tests.

Typical usage:
    from charge_sim.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_simulation(sim)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    particle_color,
    POSITIVE_COLOR,
    NEGATIVE_COLOR,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "particle_color",
    "POSITIVE_COLOR",
    "NEGATIVE_COLOR",
]
