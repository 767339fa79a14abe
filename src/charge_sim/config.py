# MIT License (see LICENSE)
"""
Run-time configuration for a simulation instance.

Every Simulation owns one SimConfig. The engine reads it on each tick and
each field query, so control-panel changes take effect on the next call.
Nothing here is module-level mutable state: independent simulations can
coexist with different settings.
"""
from __future__ import annotations
import dataclasses
from dataclasses import dataclass

from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_FRICTION,
    FIELD_ARROW_SCALE,
    FIELD_GRID_SPACING,
    FIELD_THRESHOLD,
    K_COULOMB,
    MAX_STREAMLINE_LEN,
    MIN_DISTANCE,
    NUM_LINES_PER_CHARGE,
    STREAMLINE_STEP,
)


@dataclass
class SimConfig:
    """
    Tunable parameters of the charge simulation.

    Attributes:
        width: Canvas width; particles are confined to [0, width].
        height: Canvas height; particles are confined to [0, height].
        k_coulomb: Coulomb constant applied uniformly to all pairs.
        friction: Per-tick velocity damping factor in [0, 1).
        min_distance: Separation floor (force clamp / field skip radius).
        streamline_step: Arc length of each field-line step.
        max_streamline_len: Maximum number of points in one field line.
        num_lines_per_charge: Field lines seeded around each positive charge.
        field_threshold: Field magnitude below which a line stops.
        field_grid_spacing: Spacing of the field-arrow sample grid.
        field_arrow_scale: Multiplier from field strength to arrow length.
        show_field: Draw the field-arrow grid each frame.
        show_field_lines: Draw seeded field lines each frame.
        seed: Seed for the random-charge generator (None = entropy).
    """
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT
    k_coulomb: float = K_COULOMB
    friction: float = DEFAULT_FRICTION
    min_distance: float = MIN_DISTANCE
    streamline_step: float = STREAMLINE_STEP
    max_streamline_len: int = MAX_STREAMLINE_LEN
    num_lines_per_charge: int = NUM_LINES_PER_CHARGE
    field_threshold: float = FIELD_THRESHOLD
    field_grid_spacing: float = FIELD_GRID_SPACING
    field_arrow_scale: float = FIELD_ARROW_SCALE
    show_field: bool = False
    show_field_lines: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        """Reject settings under which the engine would not be well defined."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas extents must be positive, got {self.width}x{self.height}")
        if not 0.0 <= self.friction < 1.0:
            raise ValueError(f"friction must lie in [0, 1), got {self.friction}")
        if self.min_distance <= 0:
            raise ValueError(f"min_distance must be positive, got {self.min_distance}")
        if self.streamline_step <= 0:
            raise ValueError(f"streamline_step must be positive, got {self.streamline_step}")
        if self.max_streamline_len < 0:
            raise ValueError(f"max_streamline_len must be >= 0, got {self.max_streamline_len}")
        if self.num_lines_per_charge < 0:
            raise ValueError(f"num_lines_per_charge must be >= 0, got {self.num_lines_per_charge}")
        if self.field_threshold < 0:
            raise ValueError(f"field_threshold must be >= 0, got {self.field_threshold}")
        if self.field_grid_spacing <= 0:
            raise ValueError(f"field_grid_spacing must be positive, got {self.field_grid_spacing}")

    def replace(self, **changes) -> "SimConfig":
        """
        Return a validated copy with the given fields changed.

        Raises:
            ValueError: If a key is not a configuration field, or the new
                        values fail validation.
        """
        names = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(changes) - names)
        if unknown:
            raise ValueError(f"Unknown configuration field(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **changes)
