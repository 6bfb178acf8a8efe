"""Default configuration values for vector2d."""

from __future__ import annotations

import math

TAU = 2.0 * math.pi

# None seeds the shared random source from OS entropy.
DEFAULT_SEED = None

DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12
