"""Analytic two-body positions from Keplerian elements."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from orbcross.core.elements import OrbitalElements
from orbcross.utils.constants import (
    EARTH_MU_M3_S2 as MU,
    HIGH_ECCENTRICITY,
    KEPLER_MAX_ITER,
    KEPLER_MAX_ITER_HIGH_E,
    KEPLER_TOL,
    KEPLER_TOL_HIGH_E,
)


def mean_motion(elements: OrbitalElements) -> float:
    """Mean motion in rad/s, or 0 for a degenerate orbit."""
    if elements.is_degenerate:
        return 0.0
    return math.sqrt(MU / elements.semi_major_axis_m ** 3)


def orbital_period(elements: OrbitalElements) -> float:
    """Orbital period in seconds, or 0 for a degenerate orbit."""
    if elements.is_degenerate:
        return 0.0
    return 2 * math.pi * math.sqrt(elements.semi_major_axis_m ** 3 / MU)


def _solver_settings(eccentricity: float) -> tuple[int, float]:
    if eccentricity > HIGH_ECCENTRICITY:
        return KEPLER_MAX_ITER_HIGH_E, KEPLER_TOL_HIGH_E
    return KEPLER_MAX_ITER, KEPLER_TOL


def solve_kepler(mean_anomaly: ArrayLike, eccentricity: float) -> float | NDArray[np.float64]:
    """Solve Kepler's equation ``M = E - e*sin(E)`` for the eccentric anomaly.

    Newton-Raphson starting from ``E0 = M``. The iteration count is capped
    (15 at tolerance 1e-12 for e > 0.8, otherwise 8 at 1e-10) and stops
    early once every correction is below tolerance. The last estimate is
    returned whether or not it converged.

    Args:
        mean_anomaly: Mean anomaly in radians, scalar or array. Not wrapped.
        eccentricity: Orbital eccentricity, expected in [0, 1).

    Returns:
        Eccentric anomaly in radians, a float for scalar input and an array
        otherwise.
    """
    m = np.asarray(mean_anomaly, dtype=np.float64)
    e_anom = m.copy()
    max_iter, tol = _solver_settings(eccentricity)

    for _ in range(max_iter):
        delta = (e_anom - eccentricity * np.sin(e_anom) - m) / (1.0 - eccentricity * np.cos(e_anom))
        e_anom = e_anom - delta
        if np.all(np.abs(delta) < tol):
            break

    if e_anom.ndim == 0:
        return float(e_anom)
    return e_anom


def position_batch(
    elements: OrbitalElements,
    times: ArrayLike,
    mean_anomaly_at_epoch: float = 0.0,
) -> NDArray[np.float64]:
    """Compute ECI positions for many times at once.

    Args:
        elements: Orbital elements. Only the shape parameters are used; the
            phase comes from ``mean_anomaly_at_epoch``.
        times: Seconds since epoch, any shape (flattened).
        mean_anomaly_at_epoch: Mean anomaly at time 0 in radians.

    Returns:
        Array of shape (n, 3) with [x, y, z] in meters. A degenerate orbit
        yields all zeros.
    """
    t = np.asarray(times, dtype=np.float64).reshape(-1)
    if elements.is_degenerate:
        return np.zeros((t.size, 3), dtype=np.float64)

    a = elements.semi_major_axis_m
    e = elements.eccentricity

    m = mean_anomaly_at_epoch + mean_motion(elements) * t
    e_anom = np.asarray(solve_kepler(m, e))

    nu = 2 * np.arctan2(
        np.sqrt(1 + e) * np.sin(e_anom / 2),
        np.sqrt(1 - e) * np.cos(e_anom / 2),
    )
    r = a * (1 - e * np.cos(e_anom))

    # Perifocal frame, z_p = 0
    x_p = r * np.cos(nu)
    y_p = r * np.sin(nu)

    cos_w, sin_w = math.cos(elements.arg_perigee_rad), math.sin(elements.arg_perigee_rad)
    cos_i, sin_i = math.cos(elements.inclination_rad), math.sin(elements.inclination_rad)
    cos_o, sin_o = math.cos(elements.raan_rad), math.sin(elements.raan_rad)

    # Order matters: argument of perigee, then inclination, then node.
    x1 = x_p * cos_w - y_p * sin_w
    y1 = x_p * sin_w + y_p * cos_w

    x2 = x1
    y2 = y1 * cos_i
    z2 = y1 * sin_i

    x = x2 * cos_o - y2 * sin_o
    y = x2 * sin_o + y2 * cos_o

    return np.column_stack((x, y, z2))


def position(
    elements: OrbitalElements,
    time: float,
    mean_anomaly_at_epoch: float = 0.0,
) -> NDArray[np.float64]:
    """Compute the ECI position of a satellite at a single time.

    Args:
        elements: Orbital elements.
        time: Seconds since epoch.
        mean_anomaly_at_epoch: Mean anomaly at time 0 in radians. Pass
            ``elements.mean_anomaly_rad`` for the satellite's live position.

    Returns:
        Position [x, y, z] in meters, the origin for a degenerate orbit.
    """
    return position_batch(elements, [time], mean_anomaly_at_epoch)[0]
