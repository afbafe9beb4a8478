"""Tests for the simulation clock, satellite tracks and scenarios."""
from __future__ import annotations

import numpy as np
import pytest

from orbcross.core.collision import CollisionPrediction
from orbcross.core.elements import OrbitalElements
from orbcross.core.kepler import position
from orbcross.simulation import SatelliteTrack, Scenario, SimulationState


class TestSimulationState:
    def test_update_scales_by_speed(self) -> None:
        state = SimulationState(speed=50.0)
        state.update(2.0)
        assert state.time_s == pytest.approx(100.0)

    def test_paused_clock_does_not_move(self) -> None:
        state = SimulationState()
        state.pause()
        state.update(5.0)
        assert state.time_s == 0.0
        state.play()
        state.update(1.0)
        assert state.time_s == pytest.approx(100.0)

    def test_toggle_pause(self) -> None:
        state = SimulationState()
        assert state.toggle_pause() is True
        assert state.toggle_pause() is False

    def test_wraps_past_duration(self) -> None:
        state = SimulationState(time_s=172790.0)
        state.update(1.0)
        assert state.time_s == 0.0

    def test_wraps_below_zero(self) -> None:
        state = SimulationState(time_s=10.0)
        state.jump(-20.0)
        assert state.time_s == pytest.approx(-10.0)
        state.update(0.0)
        assert state.time_s == state.duration_s

    def test_reset_and_speed(self) -> None:
        state = SimulationState(time_s=500.0)
        state.set_speed(1000.0)
        state.reset()
        assert state.time_s == 0.0
        assert state.speed == 1000.0

    def test_formatted_time(self) -> None:
        assert SimulationState(time_s=3723.9).formatted_time() == "T+ 1h 2m 3s"
        assert SimulationState().formatted_time() == "T+ 0h 0m 0s"

    def test_progress_percent(self) -> None:
        assert SimulationState(time_s=86400.0).progress_percent() == pytest.approx(50.0)

    def test_collision_check_interval(self) -> None:
        state = SimulationState()
        state.update(0.5)
        assert state.should_check_collisions() is False
        state.update(0.6)
        assert state.should_check_collisions() is True
        assert state.should_check_collisions() is False

    def test_check_interval_uses_real_time(self) -> None:
        state = SimulationState(speed=10000.0)
        state.update(0.5)
        assert state.should_check_collisions() is False

    def test_request_collision_check(self) -> None:
        state = SimulationState()
        state.request_collision_check()
        assert state.should_check_collisions() is True
        assert state.should_check_collisions() is False


class TestSatelliteTrack:
    @pytest.fixture
    def track(self) -> SatelliteTrack:
        return SatelliteTrack(OrbitalElements(8000e3, 0.05, 0.5, 0.0, 0.0, 0.0))

    def test_path_cached(self, track: SatelliteTrack) -> None:
        assert track.orbit_path is track.orbit_path
        assert track.orbit_path.shape == (721, 3)

    def test_mean_anomaly_edit_keeps_path(self, track: SatelliteTrack) -> None:
        path = track.orbit_path
        track.elements.mean_anomaly_rad = 1.5
        assert track.orbit_path is path

    def test_shape_edit_resamples(self, track: SatelliteTrack) -> None:
        path = track.orbit_path
        track.elements.inclination_rad = 1.0
        assert track.orbit_path is not path
        assert not np.allclose(track.orbit_path, path)

    def test_position_uses_own_phase(self, track: SatelliteTrack) -> None:
        track.elements.mean_anomaly_rad = 2.0
        np.testing.assert_array_equal(
            track.position_at(300.0), position(track.elements, 300.0, 2.0)
        )


class TestScenario:
    def test_from_preset(self) -> None:
        scenario = Scenario.from_preset("collision-course")
        assert scenario.sat1.elements.inclination_rad == 0.5
        assert scenario.sat2.elements.inclination_rad == 0.8

    def test_unknown_preset(self) -> None:
        with pytest.raises(KeyError, match="Unknown preset"):
            Scenario.from_preset("nope")

    def test_intersections_cached_on_shape(self) -> None:
        scenario = Scenario.from_preset("collision-course")
        points = scenario.intersections
        assert points
        assert scenario.intersections is points

        scenario.set_element(2, "mean_anomaly_rad", 1.0)
        assert scenario.intersections is points

        scenario.set_element(2, "semi_major_axis_m", 9000e3)
        assert scenario.intersections == []

    def test_set_element_requests_check(self) -> None:
        scenario = Scenario.from_preset("collision-course")
        scenario.set_element(1, "eccentricity", 0.01)
        assert scenario.sat1.elements.eccentricity == 0.01
        assert scenario.state.should_check_collisions() is True

    def test_set_element_rejects_bad_input(self) -> None:
        scenario = Scenario.from_preset("collision-course")
        with pytest.raises(ValueError, match="Unknown orbital element"):
            scenario.set_element(1, "colour", 1.0)
        with pytest.raises(ValueError, match="satellite must be 1 or 2"):
            scenario.set_element(3, "eccentricity", 0.1)

    def test_tick_runs_prediction_once_per_interval(self) -> None:
        scenario = Scenario.from_preset("collision-course")
        assert scenario.tick(0.5) is None

        prediction = scenario.tick(0.6)
        assert isinstance(prediction, CollisionPrediction)
        assert prediction.time_to_collision_s >= scenario.state.time_s
        assert scenario.state.next_collision is prediction

    def test_check_collision_uses_clock(self) -> None:
        scenario = Scenario.from_preset("collision-course")
        first = scenario.check_collision()
        assert first is not None

        scenario.state.time_s = first.time_to_collision_s + 1.0
        second = scenario.check_collision()
        assert second is None or second.time_to_collision_s > first.time_to_collision_s

    def test_tick_survives_open_orbit_edit(self) -> None:
        scenario = Scenario.from_preset("collision-course")
        scenario.set_element(1, "eccentricity", 1.0)

        with np.errstate(all="ignore"):
            prediction = scenario.tick(1 / 30)
            points = scenario.intersections

        assert prediction is None or isinstance(prediction, CollisionPrediction)
        assert all(np.isfinite(p).all() for p in points)

    def test_load_preset(self) -> None:
        scenario = Scenario.from_preset("collision-course")
        scenario.load_preset("geo-sync")
        assert scenario.sat1.elements.semi_major_axis_m == 42164e3
        assert scenario.state.should_check_collisions() is True

    def test_positions(self) -> None:
        scenario = Scenario.from_preset("same-orbit")
        scenario.state.time_s = 1000.0
        p1, p2 = scenario.positions()
        assert p1.shape == (3,)
        assert np.linalg.norm(p1 - p2) > 0
