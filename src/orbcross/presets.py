"""Named two-satellite configurations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from orbcross.core.elements import OrbitalElements


@dataclass(frozen=True)
class Preset:
    """A named pair of orbits to load into a scenario."""

    key: str
    name: str
    description: str
    sat1: OrbitalElements
    sat2: OrbitalElements


ORBITAL_PRESETS: dict[str, Preset] = {
    "collision-course": Preset(
        key="collision-course",
        name="Collision Course",
        description="Two satellites on intersecting orbits",
        sat1=OrbitalElements(7000e3, 0.0, 0.5, 0.0, 0.0, 0.0),
        sat2=OrbitalElements(7000e3, 0.0, 0.8, 0.0, 0.0, 0.0),
    ),
    "same-orbit": Preset(
        key="same-orbit",
        name="Same Orbit",
        description="Two satellites in identical orbits with different phases",
        sat1=OrbitalElements(8000e3, 0.05, 0.5, 0.0, 0.0, 0.0),
        sat2=OrbitalElements(8000e3, 0.05, 0.5, 0.0, 0.0, 1.5),
    ),
    "geo-sync": Preset(
        key="geo-sync",
        name="Geostationary",
        description="Geostationary orbit vs low Earth orbit",
        sat1=OrbitalElements(42164e3, 0.0, 0.0, 0.0, 0.0, 0.0),
        sat2=OrbitalElements(7500e3, 0.01, 0.8, 0.2, 0.5, 1.0),
    ),
    "polar-retrograde": Preset(
        key="polar-retrograde",
        name="Polar vs Retrograde",
        description="Polar orbit vs retrograde equatorial orbit",
        sat1=OrbitalElements(7200e3, 0.0, math.pi / 2, 0.0, 0.0, 0.0),
        sat2=OrbitalElements(7200e3, 0.0, math.pi * 0.75, 0.0, 0.0, 0.0),
    ),
    "prograde-retrograde": Preset(
        key="prograde-retrograde",
        name="Prograde vs Retrograde",
        description="Same orbit, opposite directions",
        sat1=OrbitalElements(8000e3, 0.1, 0.3, 0.0, 0.0, 0.0),
        sat2=OrbitalElements(8000e3, 0.1, math.pi - 0.3, math.pi, math.pi, 0.0),
    ),
    "sun-synchronous": Preset(
        key="sun-synchronous",
        name="Sun-Synchronous",
        description="Sun-synchronous orbit vs ISS-like LEO",
        sat1=OrbitalElements(7178e3, 0.001, 1.7279, 0.0, 0.0, 0.0),  # ~800 km, ~99°
        sat2=OrbitalElements(6771e3, 0.0003, 0.9, 0.5, 0.0, 2.0),  # ~400 km, ~51.6°
    ),
    "molniya": Preset(
        key="molniya",
        name="Molniya Orbit",
        description="Highly elliptical Molniya orbit vs circular LEO",
        sat1=OrbitalElements(26600e3, 0.74, 1.1, 0.0, math.pi / 2, 0.0),
        sat2=OrbitalElements(6971e3, 0.0, 0.5, 1.0, 0.0, 0.0),
    ),
}


def get_preset(key: str) -> Preset:
    """Look up a preset by key.

    The returned preset carries fresh element copies, so callers may edit
    them without touching the shared table.

    Raises:
        KeyError: If ``key`` is not a known preset.
    """
    try:
        preset = ORBITAL_PRESETS[key]
    except KeyError:
        raise KeyError(f"Unknown preset {key!r}; known presets: {', '.join(ORBITAL_PRESETS)}") from None

    return Preset(
        key=preset.key,
        name=preset.name,
        description=preset.description,
        sat1=preset.sat1.snapshot(),
        sat2=preset.sat2.snapshot(),
    )
