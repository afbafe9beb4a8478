"""Tests for collision prediction."""
from __future__ import annotations

import math

import numpy as np
import pytest

from orbcross.core.collision import CollisionPrediction, predict_collision
from orbcross.core.elements import OrbitalElements
from orbcross.core.kepler import orbital_period
from orbcross.utils.constants import SIMULATION_DURATION_S


def _with_phase(elements: OrbitalElements, mean_anomaly: float) -> OrbitalElements:
    moved = elements.snapshot()
    moved.mean_anomaly_rad = mean_anomaly
    return moved


def test_in_phase_crossing_collides_at_epoch(crossing_pair):
    """Both satellites start on the shared node."""
    prediction = predict_collision(*crossing_pair)

    assert isinstance(prediction, CollisionPrediction)
    assert prediction.will_collide is True
    assert prediction.time_to_collision_s == pytest.approx(0.0, abs=1e-6)
    np.testing.assert_allclose(prediction.location_m, [7000e3, 0.0, 0.0], atol=1.0)


def test_future_only(crossing_pair):
    first = predict_collision(*crossing_pair)
    assert first is not None

    second = predict_collision(*crossing_pair, current_time_s=first.time_to_collision_s + 1.0)
    assert second is None or second.time_to_collision_s > first.time_to_collision_s


def test_next_collision_is_at_opposite_node(crossing_pair):
    period = orbital_period(crossing_pair[0])
    prediction = predict_collision(*crossing_pair, current_time_s=300.0)

    assert prediction is not None
    # Past the crossing region around epoch, the next shared pass is half a period later
    assert prediction.time_to_collision_s == pytest.approx(period / 2, abs=0.05 * period)
    assert prediction.location_m[0] < 0


@pytest.mark.parametrize("current_time", [0.0, 500.0, 7000.0, 40000.0, 150000.0])
def test_never_before_current_time(crossing_pair, current_time):
    prediction = predict_collision(*crossing_pair, current_time_s=current_time)
    if prediction is not None:
        assert current_time <= prediction.time_to_collision_s <= SIMULATION_DURATION_S


def test_out_of_phase_no_collision(crossing_pair):
    """A quarter period apart at every crossing."""
    sat1, sat2 = crossing_pair
    assert predict_collision(sat1, _with_phase(sat2, math.pi / 2)) is None


def test_zero_window_no_collision(crossing_pair):
    assert predict_collision(*crossing_pair, time_window_s=0.0) is None


def test_mean_anomaly_is_normalized(crossing_pair):
    sat1, sat2 = crossing_pair
    base = predict_collision(_with_phase(sat1, 0.3), _with_phase(sat2, 0.3))
    wrapped = predict_collision(_with_phase(sat1, 0.3 + 4 * math.pi), _with_phase(sat2, 0.3 - 2 * math.pi))

    assert base is not None and wrapped is not None
    assert wrapped.time_to_collision_s == pytest.approx(base.time_to_collision_s, rel=1e-9)
    np.testing.assert_allclose(wrapped.location_m, base.location_m)


def test_phase_shift_delays_collision(crossing_pair):
    """Starting both satellites 0.3 rad along the orbit skips the epoch pass."""
    sat1, sat2 = crossing_pair
    period = orbital_period(sat1)
    prediction = predict_collision(_with_phase(sat1, 0.3), _with_phase(sat2, 0.3))

    assert prediction is not None
    assert 0.0 < prediction.time_to_collision_s < period


def test_non_crossing_orbits(coplanar_pair):
    assert predict_collision(*coplanar_pair) is None


def test_degenerate_orbit(crossing_pair):
    assert predict_collision(crossing_pair[0], OrbitalElements()) is None


def test_past_horizon(crossing_pair):
    assert predict_collision(*crossing_pair, current_time_s=SIMULATION_DURATION_S + 1) is None


def test_shorter_horizon(crossing_pair):
    period = orbital_period(crossing_pair[0])
    assert predict_collision(*crossing_pair, current_time_s=300.0, horizon_s=period / 4) is None


def test_inputs_not_mutated(crossing_pair):
    sat1, sat2 = crossing_pair
    before = (sat1.snapshot(), sat2.snapshot())
    predict_collision(_with_phase(sat1, 7.0), sat2)
    assert (sat1, sat2) == before


@pytest.mark.parametrize("eccentricity", [1.0, 1.2])
def test_open_orbit_does_not_raise(crossing_pair, eccentricity):
    open_orbit = crossing_pair[0].snapshot()
    open_orbit.eccentricity = eccentricity

    with np.errstate(all="ignore"):
        prediction = predict_collision(open_orbit, crossing_pair[1])
        reverse = predict_collision(crossing_pair[1], open_orbit)

    for result in (prediction, reverse):
        if result is not None:
            assert 0.0 <= result.time_to_collision_s <= SIMULATION_DURATION_S
            assert np.isfinite(result.location_m).all()


def test_open_orbit_without_finite_path(crossing_pair):
    open_orbit = crossing_pair[0].snapshot()
    open_orbit.eccentricity = 1.2
    with np.errstate(all="ignore"):
        assert predict_collision(open_orbit, crossing_pair[1]) is None
