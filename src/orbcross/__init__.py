"""
orbcross: two-satellite orbit crossing and collision prediction.

Analytic two-body Keplerian model: positions from orbital elements,
sampled orbit paths, crossing regions between two orbits and the next
time both satellites reach a crossing together.
"""

from __future__ import annotations

__version__ = "0.1.0-dev"

from orbcross.core.elements import OrbitalElements
from orbcross.core.kepler import position, position_batch, orbital_period, solve_kepler
from orbcross.core.sampling import sample_path
from orbcross.core.intersections import find_intersections
from orbcross.core.approach import time_of_closest_approach
from orbcross.core.collision import predict_collision, CollisionPrediction
from orbcross.core.tle import TLE, parse_tle
from orbcross.presets import ORBITAL_PRESETS, Preset, get_preset
from orbcross.simulation import SimulationState, SatelliteTrack, Scenario

__all__ = [
    "__version__",
    "OrbitalElements",
    "position",
    "position_batch",
    "orbital_period",
    "solve_kepler",
    "sample_path",
    "find_intersections",
    "time_of_closest_approach",
    "predict_collision",
    "CollisionPrediction",
    "TLE",
    "parse_tle",
    "ORBITAL_PRESETS",
    "Preset",
    "get_preset",
    "SimulationState",
    "SatelliteTrack",
    "Scenario",
]
