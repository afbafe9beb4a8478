"""Simulation clock and two-satellite scenario.

Glue between the pure orbit functions and an interactive front end: the
front end edits elements and advances the clock; the scenario keeps orbit
paths and crossing regions cached and re-runs collision prediction once
per interval of real time.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields

import numpy as np
from numpy.typing import NDArray

from orbcross.core.collision import CollisionPrediction, predict_collision
from orbcross.core.elements import OrbitalElements
from orbcross.core.intersections import find_intersections
from orbcross.core.kepler import position
from orbcross.core.sampling import sample_path
from orbcross.presets import get_preset
from orbcross.utils.constants import (
    COLLISION_CHECK_INTERVAL_S,
    DEFAULT_COLLISION_WINDOW_S,
    DEFAULT_INTERSECTION_THRESHOLD_M,
    DEFAULT_PATH_POINTS,
    DEFAULT_SIMULATION_SPEED,
    SIMULATION_DURATION_S,
)

logger = logging.getLogger(__name__)

_ELEMENT_FIELDS = frozenset(f.name for f in fields(OrbitalElements))


@dataclass
class SimulationState:
    """Simulated clock shared by everything drawn in one frame.

    Attributes:
        time_s: Simulation time in seconds since epoch.
        speed: Simulated seconds per real second.
        paused: Whether ``update`` advances the clock.
        duration_s: Length of the simulated window; time wraps around it.
        collision_check_interval_s: Real seconds between collision checks.
        next_collision: Latest prediction, None if no collision is expected.
    """

    time_s: float = 0.0
    speed: float = DEFAULT_SIMULATION_SPEED
    paused: bool = False
    duration_s: float = SIMULATION_DURATION_S
    collision_check_interval_s: float = COLLISION_CHECK_INTERVAL_S
    next_collision: CollisionPrediction | None = None
    _since_check_s: float = field(default=0.0, init=False, repr=False)

    def update(self, delta_s: float) -> None:
        """Advance by ``delta_s`` real seconds scaled by ``speed``."""
        if not self.paused:
            self.time_s += delta_s * self.speed

        if self.time_s > self.duration_s:
            self.time_s = 0.0
        if self.time_s < 0:
            self.time_s = self.duration_s

        self._since_check_s += delta_s

    def set_speed(self, speed: float) -> None:
        self.speed = speed

    def pause(self) -> None:
        self.paused = True

    def play(self) -> None:
        self.paused = False

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def jump(self, seconds: float) -> None:
        """Shift the clock; wrapping happens on the next ``update``."""
        self.time_s += seconds

    def reset(self) -> None:
        self.time_s = 0.0

    def formatted_time(self) -> str:
        hours = math.floor(self.time_s / 3600)
        minutes = math.floor((self.time_s % 3600) / 60)
        seconds = math.floor(self.time_s % 60)
        return f"T+ {hours}h {minutes}m {seconds}s"

    def progress_percent(self) -> float:
        return self.time_s / self.duration_s * 100

    def request_collision_check(self) -> None:
        """Make the next ``should_check_collisions`` call return True."""
        self._since_check_s = math.inf

    def should_check_collisions(self) -> bool:
        """True once per check interval of real time; resets the counter."""
        if self._since_check_s > self.collision_check_interval_s:
            self._since_check_s = 0.0
            return True
        return False


@dataclass
class SatelliteTrack:
    """One satellite: its editable elements and a cached orbit path.

    The path is resampled only when the orbit's shape changes. Editing the
    mean anomaly moves the satellite but keeps the cached path.
    """

    elements: OrbitalElements
    num_points: int = DEFAULT_PATH_POINTS
    _path: NDArray[np.float64] | None = field(default=None, init=False, repr=False)
    _path_key: tuple | None = field(default=None, init=False, repr=False)

    @property
    def orbit_path(self) -> NDArray[np.float64]:
        key = (self.elements.shape, self.num_points)
        if self._path is None or key != self._path_key:
            self._path = sample_path(self.elements, self.num_points)
            self._path_key = key
            logger.debug("Resampled orbit path (%d points)", len(self._path))
        return self._path

    def position_at(self, time_s: float) -> NDArray[np.float64]:
        """Live position including the satellite's own phase."""
        return position(self.elements, time_s, self.elements.mean_anomaly_rad)


@dataclass
class Scenario:
    """Two satellites on a shared clock.

    Attributes:
        sat1: First satellite.
        sat2: Second satellite.
        state: Simulation clock and latest collision prediction.
        time_window_s: Pass time difference counted as a collision.
        intersection_threshold_m: Distance used for displayed crossings.
    """

    sat1: SatelliteTrack
    sat2: SatelliteTrack
    state: SimulationState = field(default_factory=SimulationState)
    time_window_s: float = DEFAULT_COLLISION_WINDOW_S
    intersection_threshold_m: float = DEFAULT_INTERSECTION_THRESHOLD_M
    _intersections: list[NDArray[np.float64]] = field(default_factory=list, init=False, repr=False)
    _intersections_key: tuple | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_elements(cls, elements1: OrbitalElements, elements2: OrbitalElements, **kwargs) -> Scenario:
        return cls(SatelliteTrack(elements1), SatelliteTrack(elements2), **kwargs)

    @classmethod
    def from_preset(cls, key: str, **kwargs) -> Scenario:
        """Build a scenario from a named preset.

        Raises:
            KeyError: If ``key`` is not a known preset.
        """
        preset = get_preset(key)
        logger.info("Loading preset %r", preset.name)
        return cls.from_elements(preset.sat1, preset.sat2, **kwargs)

    def _track(self, satellite: int) -> SatelliteTrack:
        if satellite == 1:
            return self.sat1
        if satellite == 2:
            return self.sat2
        raise ValueError(f"satellite must be 1 or 2, got {satellite!r}")

    def set_element(self, satellite: int, name: str, value: float) -> None:
        """Edit one element of satellite 1 or 2 and schedule a collision check.

        Raises:
            ValueError: If ``satellite`` is not 1 or 2 or ``name`` is not an
                orbital element.
        """
        if name not in _ELEMENT_FIELDS:
            raise ValueError(f"Unknown orbital element {name!r}")
        setattr(self._track(satellite).elements, name, float(value))
        self.state.request_collision_check()

    def load_preset(self, key: str) -> None:
        """Replace both satellites' elements with a preset's."""
        preset = get_preset(key)
        self.sat1.elements = preset.sat1
        self.sat2.elements = preset.sat2
        self.state.request_collision_check()
        logger.info("Loaded preset %r", preset.name)

    @property
    def intersections(self) -> list[NDArray[np.float64]]:
        """Crossing regions of the two orbits, recomputed on shape changes."""
        key = (self.sat1.elements.shape, self.sat2.elements.shape, self.intersection_threshold_m)
        if key != self._intersections_key:
            self._intersections = find_intersections(
                self.sat1.elements, self.sat2.elements, self.intersection_threshold_m
            )
            self._intersections_key = key
        return self._intersections

    def positions(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Both satellites' positions at the current simulation time."""
        return self.sat1.position_at(self.state.time_s), self.sat2.position_at(self.state.time_s)

    def check_collision(self) -> CollisionPrediction | None:
        """Predict the next collision from the current time and store it."""
        prediction = predict_collision(
            self.sat1.elements.snapshot(),
            self.sat2.elements.snapshot(),
            time_window_s=self.time_window_s,
            current_time_s=self.state.time_s,
            horizon_s=self.state.duration_s,
        )
        self.state.next_collision = prediction
        return prediction

    def tick(self, delta_s: float) -> CollisionPrediction | None:
        """Advance the clock and re-run prediction when a check is due.

        Returns:
            The current collision prediction (possibly from an earlier tick).
        """
        self.state.update(delta_s)
        if self.state.should_check_collisions():
            self.check_collision()
        return self.state.next_collision
