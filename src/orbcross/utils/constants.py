"""Physical constants and default tuning for the two-body orbit model.

All values in SI units unless otherwise noted.
"""

from __future__ import annotations

# --- Earth parameters ---
GRAVITATIONAL_CONSTANT: float = 6.67430e-11
"""Newtonian gravitational constant in m³/(kg·s²)."""

EARTH_MASS_KG: float = 5.972e24
"""Mass of Earth in kg."""

EARTH_MU_M3_S2: float = GRAVITATIONAL_CONSTANT * EARTH_MASS_KG
"""Earth gravitational parameter (GM) in m³/s²."""

EARTH_RADIUS_M: float = 6378137.0
"""Equatorial radius of Earth in m (WGS-84)."""

# --- Simulation ---
SIMULATION_DURATION_S: float = 172800.0
"""Simulated time horizon in seconds (48 hours)."""

DEFAULT_SIMULATION_SPEED: float = 100.0
"""Simulated seconds per real second."""

COLLISION_CHECK_INTERVAL_S: float = 1.0
"""Real time between collision predictions while the clock runs."""

# --- Sampling ---
DEFAULT_PATH_POINTS: int = 720
"""Segments in a sampled orbit path (the path holds one more point)."""

APPROACH_SEARCH_SAMPLES: int = 360
"""Grid steps used when resolving the time a satellite passes a point."""

# --- Intersection and collision thresholds ---
DEFAULT_INTERSECTION_THRESHOLD_M: float = 100_000.0
"""Sample distance below which two orbit paths are considered to cross."""

COLLISION_INTERSECTION_THRESHOLD_M: float = 200_000.0
"""Wider crossing threshold used when predicting collisions."""

DEFAULT_COLLISION_WINDOW_S: float = 120.0
"""Maximum pass time difference at a crossing that counts as a collision."""

# --- Kepler solver tuning ---
HIGH_ECCENTRICITY: float = 0.8
"""Eccentricity above which the solver uses the strict settings."""

KEPLER_MAX_ITER_HIGH_E: int = 15
KEPLER_TOL_HIGH_E: float = 1e-12

KEPLER_MAX_ITER: int = 8
KEPLER_TOL: float = 1e-10
