# MIT License (see LICENSE)
"""
Default physical and visualization constants.

The simulation works in canvas units (pixels, frames) rather than SI units:
one tick is one animation frame and distances are measured in pixels, so
the Coulomb constant is a tuning knob chosen for visible motion at 60 Hz.
"""
from __future__ import annotations

# Coulomb constant in canvas units. Tuned for unit charges a few hundred
# pixels apart; the control panel may change it at run time.
K_COULOMB: float = 800.0

# Per-tick velocity damping factor, in [0, 1).
DEFAULT_FRICTION: float = 0.02

# Separation floor. The force engine clamps distances to this value; the
# field sampler skips sources closer than this.
MIN_DISTANCE: float = 8.0

# Canvas (simulation domain) extents.
CANVAS_WIDTH: float = 1000.0
CANVAS_HEIGHT: float = 600.0

# Particle defaults
DEFAULT_MASS: float = 1.0
DEFAULT_RADIUS: float = 5.0

# Hit-test slack added to the particle radius for pick/erase.
PICK_MARGIN: float = 2.0

# Streamline tracing
STREAMLINE_STEP: float = 2.2
MAX_STREAMLINE_LEN: int = 600
NUM_LINES_PER_CHARGE: int = 32
FIELD_THRESHOLD: float = 0.01
SEED_OFFSET: float = 1.0   # seeds sit at radius + SEED_OFFSET
SINK_MARGIN: float = 4.0   # lines end within radius + SINK_MARGIN of a negative charge

# Field arrow grid
FIELD_GRID_SPACING: float = 30.0
FIELD_ARROW_SCALE: float = 0.0008
