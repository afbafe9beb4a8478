"""Closed orbit paths for display and crossing search."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from orbcross.core.elements import OrbitalElements
from orbcross.core.kepler import orbital_period, position_batch
from orbcross.utils.constants import DEFAULT_PATH_POINTS

logger = logging.getLogger(__name__)


def sample_path(elements: OrbitalElements, num_points: int = DEFAULT_PATH_POINTS) -> NDArray[np.float64]:
    """Sample one full period of an orbit as a closed polyline.

    Samples are taken at ``(i / num_points) * period`` for ``i`` in
    ``0..num_points`` with the mean anomaly at epoch fixed at 0, so the path
    depends only on the orbit's shape and first and last points coincide.

    Args:
        elements: Orbital elements.
        num_points: Number of segments; the path holds ``num_points + 1``
            positions.

    Returns:
        Array of shape (num_points + 1, 3) in meters, or shape (0, 3) for a
        degenerate orbit.
    """
    if elements.is_degenerate:
        logger.debug("Degenerate orbit (a=%.1f m), empty path", elements.semi_major_axis_m)
        return np.empty((0, 3), dtype=np.float64)

    if elements.eccentricity >= 1:
        logger.warning("Eccentricity %.4f is outside the elliptical model", elements.eccentricity)

    period = orbital_period(elements)
    times = np.arange(num_points + 1) / num_points * period
    return position_batch(elements, times, 0.0)
