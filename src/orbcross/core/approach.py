"""Time at which a satellite passes nearest to a point on its path."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from orbcross.core.elements import OrbitalElements
from orbcross.core.kepler import orbital_period, position_batch
from orbcross.utils.constants import APPROACH_SEARCH_SAMPLES


def time_of_closest_approach(
    elements: OrbitalElements,
    point: ArrayLike,
    num_samples: int = APPROACH_SEARCH_SAMPLES,
) -> float:
    """Find the time within one period at which the orbit comes closest to ``point``.

    Coarse grid search over ``num_samples + 1`` uniform times in
    ``[0, period]`` with the mean anomaly at epoch fixed at 0. The first
    sample with the smallest distance wins. Never fails: a point far from
    the orbit still gets the least-bad sample.

    Args:
        elements: Orbital elements.
        point: Target position [x, y, z] in meters.
        num_samples: Number of grid steps over the period.

    Returns:
        Seconds since epoch in ``[0, period]``; 0 for a degenerate orbit.
    """
    period = orbital_period(elements)
    times = np.arange(num_samples + 1) / num_samples * period
    positions = position_batch(elements, times, 0.0)
    distances = np.linalg.norm(positions - np.asarray(point, dtype=np.float64), axis=1)
    return float(times[int(np.argmin(distances))])
