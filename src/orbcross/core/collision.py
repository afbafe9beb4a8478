"""Collision prediction: when both satellites reach a crossing together."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from orbcross.core.approach import time_of_closest_approach
from orbcross.core.elements import OrbitalElements
from orbcross.core.intersections import find_intersections
from orbcross.core.kepler import orbital_period
from orbcross.utils.constants import (
    COLLISION_INTERSECTION_THRESHOLD_M,
    DEFAULT_COLLISION_WINDOW_S,
    SIMULATION_DURATION_S,
)

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


@dataclass
class CollisionPrediction:
    """The earliest predicted simultaneous pass through a crossing region.

    Attributes:
        will_collide: Always True for a returned prediction.
        time_to_collision_s: Simulation time of the event, seconds since
            epoch (not relative to the query time).
        location_m: Intersection point [x, y, z] in meters.
    """

    will_collide: bool
    time_to_collision_s: float
    location_m: NDArray[np.float64]  # shape (3,)


def _first_pass_time(elements: OrbitalElements, point: NDArray[np.float64], period: float) -> float:
    """Time of the satellite's first pass through ``point`` after epoch.

    The closest-approach time on the phase-free path is shifted back by the
    satellite's starting phase. Mean anomaly is normalized to [0, 2π) first.
    """
    time_on_path = time_of_closest_approach(elements, point)
    phase = elements.mean_anomaly_rad % TWO_PI
    return (time_on_path - phase / TWO_PI * period + period) % period


def predict_collision(
    elements_a: OrbitalElements,
    elements_b: OrbitalElements,
    time_window_s: float = DEFAULT_COLLISION_WINDOW_S,
    current_time_s: float = 0.0,
    horizon_s: float = SIMULATION_DURATION_S,
) -> CollisionPrediction | None:
    """Predict the next time both satellites pass a crossing region together.

    Multi-stage search:
    1. Crossing regions with a widened 200 km threshold
    2. First pass of each satellite through each region, from phase
    3. Successive passes of A up to the horizon, matched against the nearest
       passes of B

    A pair of passes less than ``time_window_s`` apart is a candidate at
    their mean time. The earliest candidate not before ``current_time_s`` is
    reported.

    Args:
        elements_a: Elements of the first satellite.
        elements_b: Elements of the second satellite.
        time_window_s: Maximum pass time difference, seconds.
        current_time_s: Simulation time; earlier events are ignored.
        horizon_s: Last simulation time searched.

    Returns:
        The earliest CollisionPrediction, or None if no collision is
        predicted before the horizon.
    """
    intersections = find_intersections(elements_a, elements_b, COLLISION_INTERSECTION_THRESHOLD_M)
    if not intersections:
        logger.debug("predict_collision: orbits do not cross")
        return None

    period_a = orbital_period(elements_a)
    period_b = orbital_period(elements_b)

    earliest: CollisionPrediction | None = None

    for point in intersections:
        t1_first = _first_pass_time(elements_a, point, period_a)
        t2_first = _first_pass_time(elements_b, point, period_b)

        for i in range(math.ceil(horizon_s / period_a) + 2):
            time1 = t1_first + i * period_a
            if time1 < current_time_s:
                continue
            if time1 > horizon_s:
                break

            # Nearest pass of B, plus neighbours in case rounding lands on the wrong one
            j_closest = math.floor((time1 - t2_first) / period_b + 0.5)
            for j in range(j_closest - 1, j_closest + 2):
                if j < 0:
                    continue
                time2 = t2_first + j * period_b
                if time2 > horizon_s:
                    continue
                if abs(time1 - time2) >= time_window_s:
                    continue

                collision_time = (time1 + time2) / 2
                if collision_time < current_time_s:
                    continue

                if earliest is None or collision_time < earliest.time_to_collision_s:
                    earliest = CollisionPrediction(
                        will_collide=True,
                        time_to_collision_s=collision_time,
                        location_m=point.copy(),
                    )

    if earliest is None:
        logger.debug(
            "predict_collision: %d crossing regions, no collision before %.0f s",
            len(intersections), horizon_s,
        )
    else:
        logger.info(
            "predict_collision: collision at t=%.1f s (searched from %.1f s)",
            earliest.time_to_collision_s, current_time_s,
        )
    return earliest
