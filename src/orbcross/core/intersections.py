"""Crossing regions between two sampled orbit paths."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import cKDTree

from orbcross.core.elements import OrbitalElements
from orbcross.core.sampling import sample_path
from orbcross.utils.constants import DEFAULT_INTERSECTION_THRESHOLD_M

logger = logging.getLogger(__name__)


def find_intersections(
    elements_a: OrbitalElements,
    elements_b: OrbitalElements,
    threshold_m: float = DEFAULT_INTERSECTION_THRESHOLD_M,
) -> list[NDArray[np.float64]]:
    """Find the regions where two orbit paths pass within ``threshold_m``.

    Every sample pair (one from each path) closer than the threshold is a
    candidate hit, visited in path-A-major order. The candidate point is the
    midpoint of the pair; it is kept unless it lies within twice the
    threshold of a point already kept, which leaves one representative per
    crossing region.

    A KD-tree over path B enumerates the close pairs; pairs are then visited
    in the same order a full pairwise scan would use.

    Args:
        elements_a: Elements of the first orbit.
        elements_b: Elements of the second orbit.
        threshold_m: Maximum sample distance counted as a crossing, meters.

    Returns:
        Intersection points (each shape (3,), meters) in insertion order.
        Empty if either orbit is degenerate.
    """
    path_a = sample_path(elements_a)
    path_b = sample_path(elements_b)
    if len(path_a) == 0 or len(path_b) == 0 or threshold_m <= 0:
        return []

    # Out-of-model elements can leave NaN samples; those never count as hits
    idx_map_a = np.where(np.isfinite(path_a).all(axis=1))[0]
    idx_map_b = np.where(np.isfinite(path_b).all(axis=1))[0]
    if len(idx_map_a) == 0 or len(idx_map_b) == 0:
        logger.debug("find_intersections: no finite samples on one of the paths")
        return []

    tree = cKDTree(path_b[idx_map_b])
    neighbours = tree.query_ball_point(path_a[idx_map_a], r=threshold_m)
    dedup_radius = 2 * threshold_m

    intersections: list[NDArray[np.float64]] = []
    accepted = np.empty((0, 3), dtype=np.float64)
    candidates = 0

    for i, close in zip(idx_map_a, neighbours):
        p1 = path_a[i]
        for k in sorted(close):
            p2 = path_b[idx_map_b[k]]
            if np.linalg.norm(p1 - p2) >= threshold_m:
                continue
            candidates += 1

            midpoint = (p1 + p2) / 2
            if len(accepted) and np.any(np.linalg.norm(accepted - midpoint, axis=1) < dedup_radius):
                continue

            intersections.append(midpoint)
            accepted = np.vstack((accepted, midpoint))

    logger.debug(
        "find_intersections: %d candidate pairs, %d regions (threshold %.0f m)",
        candidates, len(intersections), threshold_m,
    )
    return intersections
