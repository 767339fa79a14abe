# MIT License (see LICENSE)
"""
Per-phase timing of the frame loop.

A Simulation with an attached Profiler records one sample per phase per
call: FORCES and INTEGRATE on every tick(), FIELD on every field_lines()
or field_grid() query. The frame budget at 60 Hz is ~16.7 ms, so
frame_report() expresses each phase as a share of it.

Example:
    profiler = Profiler()
    sim = Simulation(profiler=profiler)
    for _ in range(600):
        sim.tick()
    print(profiler.frame_report())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

FORCES = "forces"
INTEGRATE = "integrate"
FIELD = "field"

FRAME_BUDGET_MS: float = 1e3 / 60


@dataclass
class PhaseTimings:
    """Elapsed seconds per phase name, in recording order."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def record(self, phase: str, seconds: float) -> None:
        self.samples.setdefault(phase, []).append(seconds)

    def reset(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Statistics per phase.

        Returns:
            Dict mapping phase name to a dict with keys 'n', 'mean_ms',
            'max_ms' and 'total_ms'.
        """
        out = {}
        for phase, times in self.samples.items():
            total = sum(times)
            out[phase] = {
                "n": len(times),
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """Records wall-clock time of named phases via section() blocks."""

    def __init__(self) -> None:
        self.stats = PhaseTimings()

    @contextmanager
    def section(self, phase: str) -> Iterator[None]:
        """Time the enclosed block under phase, even if it raises."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.record(phase, time.perf_counter() - t0)

    def frame_report(self) -> dict[str, float]:
        """Mean time of each phase as a fraction of the 60 Hz frame budget."""
        return {
            phase: s["mean_ms"] / FRAME_BUDGET_MS
            for phase, s in self.stats.summary().items()
        }
