# MIT License (see LICENSE)
"""
Renderer adapters for charge simulation visualization.

The engine has no drawing dependency. A RendererAdapter receives particles,
field-arrow samples and field lines, and draws them with whatever backend
it wraps (p5-style canvas, matplotlib, pygame, a web client, ...).
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, TextIO
import sys
import numpy as np

from ..types import Particle

if TYPE_CHECKING:
    from ..simulation import Simulation

# RGB fill colours per charge sign
POSITIVE_COLOR: tuple[int, int, int] = (80, 180, 255)
NEGATIVE_COLOR: tuple[int, int, int] = (255, 90, 120)


def particle_color(particle: Particle) -> tuple[int, int, int]:
    """Fill colour for a particle's visual class."""
    return POSITIVE_COLOR if particle.is_positive else NEGATIVE_COLOR


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.render_simulation(sim)   # draws, and ticks the simulation

    render_simulation() reproduces the frame order of the interactive
    canvas: field arrows, field lines, physics tick, particles. Field
    drawing is read-only, so drawing it before the tick only means it
    lags the particles by one frame.
    """

    @abstractmethod
    def begin_frame(self, frame: int) -> None:
        """
        Begin a new frame.

        Args:
            frame: Simulation frame counter at the start of the frame.
        """
        ...

    @abstractmethod
    def draw_particle(self, particle: Particle) -> None:
        """Draw one particle as a filled circle of its radius."""
        ...

    @abstractmethod
    def draw_field_vector(self, point: np.ndarray, vector: np.ndarray) -> None:
        """
        Draw one field arrow.

        Args:
            point: Arrow tail [x, y].
            vector: Arrow extent [dx, dy], already scaled for display.
        """
        ...

    @abstractmethod
    def draw_field_line(self, points: Sequence[tuple[float, float]]) -> None:
        """Draw one field line as an open polyline."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_simulation(self, sim: "Simulation", advance: bool = True) -> None:
        """
        Draw one frame of a simulation.

        Args:
            sim: The simulation to draw.
            advance: If True, tick the simulation between the field layers
                     and the particles.
        """
        cfg = sim.config
        self.begin_frame(sim.frame)

        if cfg.show_field:
            points, fields = sim.field_grid()
            for point, e in zip(points, fields):
                self.draw_field_vector(point, e * cfg.field_arrow_scale)

        if cfg.show_field_lines:
            for line in sim.field_lines():
                self.draw_field_line(line)

        if advance:
            sim.tick()

        for p in sim.particles:
            self.draw_particle(p)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame 12 ===
        [1] +1 @ (100.08, 100.00) v=(0.08, 0.00)
        [2] -1 @ (199.92, 100.00) v=(-0.08, 0.00)
        field: 660 arrows, 32 lines (1184 points)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocities.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._arrows = 0
        self._lines = 0
        self._line_points = 0

    def begin_frame(self, frame: int) -> None:
        self._arrows = 0
        self._lines = 0
        self._line_points = 0
        self.output.write(f"=== Frame {frame} ===\n")

    def draw_particle(self, particle: Particle) -> None:
        pos = particle.position
        line = f"[{particle.id}] {particle.charge:+g} @ ({pos[0]:.2f}, {pos[1]:.2f})"
        if self.verbose:
            vel = particle.velocity
            line += f" v=({vel[0]:.2f}, {vel[1]:.2f})"
        self.output.write(line + "\n")

    def draw_field_vector(self, point: np.ndarray, vector: np.ndarray) -> None:
        self._arrows += 1

    def draw_field_line(self, points: Sequence[tuple[float, float]]) -> None:
        self._lines += 1
        self._line_points += len(points)

    def end_frame(self) -> None:
        if self._arrows or self._lines:
            self.output.write(
                f"field: {self._arrows} arrows, {self._lines} lines "
                f"({self._line_points} points)\n"
            )
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for driving the frame loop without output."""

    def begin_frame(self, frame: int) -> None:
        pass

    def draw_particle(self, particle: Particle) -> None:
        pass

    def draw_field_vector(self, point: np.ndarray, vector: np.ndarray) -> None:
        pass

    def draw_field_line(self, points: Sequence[tuple[float, float]]) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame as plain data.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            renderer.render_simulation(sim)

        for frame in renderer.frames:
            print(frame["frame"], len(frame["particles"]), len(frame["field_lines"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, frame: int) -> None:
        self._current_frame = {
            "frame": frame,
            "particles": [],
            "field_vectors": [],
            "field_lines": [],
        }

    def draw_particle(self, particle: Particle) -> None:
        if self._current_frame is None:
            return
        self._current_frame["particles"].append({
            "id": particle.id,
            "charge": particle.charge,
            "position": particle.position.tolist(),
            "velocity": particle.velocity.tolist(),
            "radius": particle.radius,
            "color": particle_color(particle),
        })

    def draw_field_vector(self, point: np.ndarray, vector: np.ndarray) -> None:
        if self._current_frame is None:
            return
        self._current_frame["field_vectors"].append((point.tolist(), vector.tolist()))

    def draw_field_line(self, points: Sequence[tuple[float, float]]) -> None:
        if self._current_frame is None:
            return
        self._current_frame["field_lines"].append(list(points))

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
