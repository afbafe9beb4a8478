from __future__ import annotations

import pytest

from orbcross.core.elements import OrbitalElements


@pytest.fixture
def crossing_pair() -> tuple[OrbitalElements, OrbitalElements]:
    """Equal circular orbits in planes 0.3 rad apart, crossing on the x-axis."""
    return (
        OrbitalElements(semi_major_axis_m=7000e3, inclination_rad=0.5),
        OrbitalElements(semi_major_axis_m=7000e3, inclination_rad=0.8),
    )


@pytest.fixture
def coplanar_pair() -> tuple[OrbitalElements, OrbitalElements]:
    """Equatorial circular orbits 1000 km apart in radius."""
    return (
        OrbitalElements(semi_major_axis_m=7000e3),
        OrbitalElements(semi_major_axis_m=8000e3),
    )
