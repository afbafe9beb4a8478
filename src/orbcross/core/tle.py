"""TLE (Two-Line Element) import.

Parses TLE text with the sgp4 library and converts the mean elements into
:class:`OrbitalElements` for the analytic two-body model. SGP4 itself is
not used for propagation.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sgp4.api import Satrec, WGS72

from orbcross.core.elements import OrbitalElements
from orbcross.utils.constants import EARTH_MU_M3_S2 as MU

logger = logging.getLogger(__name__)

TLE_LINE_LENGTH = 69


@dataclass(frozen=True)
class TLE:
    """A parsed Two-Line Element set.

    Attributes:
        name: Satellite name (line 0, if provided).
        line1: Raw TLE line 1.
        line2: Raw TLE line 2.
        norad_id: NORAD catalog number.
        epoch: Epoch as a UTC datetime.
        inclination_rad: Orbital inclination in radians.
        raan_rad: Right ascension of ascending node in radians.
        eccentricity: Orbital eccentricity (dimensionless).
        arg_perigee_rad: Argument of perigee in radians.
        mean_anomaly_rad: Mean anomaly at epoch in radians.
        mean_motion_rad_s: Kozai mean motion in rad/s.
    """

    name: str
    line1: str
    line2: str
    norad_id: int
    epoch: datetime
    inclination_rad: float
    raan_rad: float
    eccentricity: float
    arg_perigee_rad: float
    mean_anomaly_rad: float
    mean_motion_rad_s: float

    @classmethod
    def from_lines(cls, line1: str, line2: str, name: str = "") -> TLE:
        """Parse a TLE from two (or three) lines.

        Args:
            line1: TLE line 1 (69 characters).
            line2: TLE line 2 (69 characters).
            name: Optional satellite name (line 0).

        Returns:
            A parsed TLE object.

        Raises:
            ValueError: If the TLE lines are malformed.
        """
        line1 = line1.strip()
        line2 = line2.strip()

        if len(line1) != TLE_LINE_LENGTH or not line1.startswith("1"):
            logger.error("Invalid TLE line 1: %r", line1)
            raise ValueError(f"Invalid TLE line 1: {line1!r}")
        if len(line2) != TLE_LINE_LENGTH or not line2.startswith("2"):
            logger.error("Invalid TLE line 2: %r", line2)
            raise ValueError(f"Invalid TLE line 2: {line2!r}")

        sat = Satrec.twoline2rv(line1, line2, WGS72)

        # Two-digit year: 57-99 -> 1900s, 00-56 -> 2000s
        year = int(line1[18:20])
        year = year + 2000 if year < 57 else year + 1900
        day_of_year = float(line1[20:32])
        epoch = datetime(year, 1, 1, tzinfo=timezone.utc) + timedelta(days=day_of_year - 1)

        norad_id = int(line1[2:7].strip())
        logger.debug("Parsed TLE for NORAD %d (epoch %s)", norad_id, epoch.isoformat())

        return cls(
            name=name.strip(),
            line1=line1,
            line2=line2,
            norad_id=norad_id,
            epoch=epoch,
            inclination_rad=sat.inclo,
            raan_rad=sat.nodeo,
            eccentricity=sat.ecco,
            arg_perigee_rad=sat.argpo,
            mean_anomaly_rad=sat.mo,
            mean_motion_rad_s=sat.no_kozai / 60.0,  # sgp4 uses rad/min
        )

    @property
    def semi_major_axis_m(self) -> float:
        """Semi-major axis implied by the mean motion, ``a = (MU / n²)^(1/3)``."""
        return (MU / self.mean_motion_rad_s ** 2) ** (1.0 / 3.0)

    @property
    def period_s(self) -> float:
        return 2 * math.pi / self.mean_motion_rad_s

    def to_elements(self) -> OrbitalElements:
        """Convert to Keplerian elements with the TLE epoch as time 0."""
        return OrbitalElements(
            semi_major_axis_m=self.semi_major_axis_m,
            eccentricity=self.eccentricity,
            inclination_rad=self.inclination_rad,
            raan_rad=self.raan_rad,
            arg_perigee_rad=self.arg_perigee_rad,
            mean_anomaly_rad=self.mean_anomaly_rad,
        )

    def __str__(self) -> str:
        header = f"0 {self.name}\n" if self.name else ""
        return f"{header}{self.line1}\n{self.line2}"


def parse_tle(text: str) -> list[TLE]:
    """Parse one or more TLEs from text.

    Handles both 2-line and 3-line (with name) formats. Lines that fit
    neither are skipped.
    """
    lines = [line.rstrip() for line in text.strip().splitlines() if line.strip()]
    tles: list[TLE] = []
    i = 0

    while i < len(lines):
        if lines[i].startswith("1 ") and i + 1 < len(lines) and lines[i + 1].startswith("2 "):
            tles.append(TLE.from_lines(lines[i], lines[i + 1]))
            i += 2
        elif (
            not lines[i].startswith(("1 ", "2 "))
            and i + 2 < len(lines)
            and lines[i + 1].startswith("1 ")
            and lines[i + 2].startswith("2 ")
        ):
            # A name line may start with "0 " per the 3LE convention
            name = lines[i][2:] if lines[i].startswith("0 ") else lines[i]
            tles.append(TLE.from_lines(lines[i + 1], lines[i + 2], name=name))
            i += 3
        else:
            i += 1

    logger.debug("Parsed %d TLEs from text", len(tles))
    return tles
