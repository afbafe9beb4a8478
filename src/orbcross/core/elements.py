"""Keplerian orbital elements."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


@dataclass
class OrbitalElements:
    """Classical Keplerian elements of an Earth orbit.

    Instances are edited in place by interactive callers. Core functions only
    read them, so pass a :meth:`snapshot` when the caller may mutate the
    elements concurrently.

    Attributes:
        semi_major_axis_m: Semi-major axis in meters. Values <= 0 denote a
            degenerate orbit whose positions collapse to the origin.
        eccentricity: Orbital eccentricity, expected in [0, 1). Open orbits
            are not modeled and are not rejected.
        inclination_rad: Inclination in radians, conventionally [0, π].
        raan_rad: Longitude of the ascending node in radians.
        arg_perigee_rad: Argument of perigee in radians.
        mean_anomaly_rad: Mean anomaly at epoch (time 0) in radians.
    """

    semi_major_axis_m: float = 0.0
    eccentricity: float = 0.0
    inclination_rad: float = 0.0
    raan_rad: float = 0.0
    arg_perigee_rad: float = 0.0
    mean_anomaly_rad: float = 0.0

    @classmethod
    def from_degrees(
        cls,
        semi_major_axis_m: float,
        eccentricity: float = 0.0,
        inclination_deg: float = 0.0,
        raan_deg: float = 0.0,
        arg_perigee_deg: float = 0.0,
        mean_anomaly_deg: float = 0.0,
    ) -> OrbitalElements:
        """Build elements from angles given in degrees."""
        return cls(
            semi_major_axis_m=semi_major_axis_m,
            eccentricity=eccentricity,
            inclination_rad=math.radians(inclination_deg),
            raan_rad=math.radians(raan_deg),
            arg_perigee_rad=math.radians(arg_perigee_deg),
            mean_anomaly_rad=math.radians(mean_anomaly_deg),
        )

    @property
    def is_degenerate(self) -> bool:
        return self.semi_major_axis_m <= 0

    @property
    def shape(self) -> tuple[float, float, float, float, float]:
        """Parameters that determine the orbit's geometry.

        Mean anomaly is left out: it only shifts the satellite's phase along
        an unchanged path.
        """
        return (
            self.semi_major_axis_m,
            self.eccentricity,
            self.inclination_rad,
            self.raan_rad,
            self.arg_perigee_rad,
        )

    def snapshot(self) -> OrbitalElements:
        """Return an independent copy of these elements."""
        return replace(self)
