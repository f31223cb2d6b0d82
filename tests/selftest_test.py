"""
Tests for reading the curve shape back from samples.
"""

import pytest

from harmonic_easing.check.selftest import detect_curve_shape, run_selftest
from harmonic_easing.curve.types import InterpolatorParams, InterpolatorSettings
from harmonic_easing.fit.params import compute_params


class TestDetectCurveShape:
    def test_scenario_a_round_trip(self, scenario_a):
        shape = detect_curve_shape(compute_params(scenario_a), steps=100)
        assert abs(shape.detected_rest_position_runs - 4) <= 1
        assert shape.detected_overshoot == pytest.approx(0.2, abs=0.01)

    def test_scenario_b_single_excursion(self, scenario_b):
        """One rise through the rest position, one overshoot, no further crossings."""
        shape = detect_curve_shape(compute_params(scenario_b), steps=100)
        assert shape.crossings == 1
        assert shape.detected_rest_position_runs == 0
        assert shape.detected_overshoot == pytest.approx(0.5, abs=0.01)

    @pytest.mark.parametrize("runs,overshoot", [(1, 0.3), (2, 0.4), (4, 0.25), (6, 0.6)])
    def test_round_trip(self, runs, overshoot):
        s = InterpolatorSettings(overshoot=overshoot, rest_position_runs=runs)
        shape = detect_curve_shape(compute_params(s), steps=1000)
        assert abs(shape.detected_rest_position_runs - runs) <= 1
        assert shape.detected_overshoot == pytest.approx(overshoot, abs=0.01)

    def test_no_crossing_means_no_overshoot(self):
        """Heavily damped and slow: never reaches the rest position within [0, 1)."""
        shape = detect_curve_shape(InterpolatorParams(omega=1.0, gamma=0.1), steps=100)
        assert shape.crossings == 0
        assert shape.detected_rest_position_runs == 0
        assert shape.detected_overshoot == 0.0

    def test_rejects_zero_steps(self):
        with pytest.raises(ValueError):
            detect_curve_shape(InterpolatorParams(omega=1.0, gamma=0.1), steps=0)


class TestRunSelftest:
    def test_default_scenario_passes(self, scenario_a):
        result = run_selftest(scenario_a)
        assert result.passed
        assert result.findings == []
        assert result.overshoot_accuracy <= 0.01
        assert result.params == compute_params(scenario_a)

    def test_scenario_b_passes(self, scenario_b):
        assert run_selftest(scenario_b).passed

    def test_fractional_runs_report_mismatch(self):
        result = run_selftest(InterpolatorSettings(overshoot=0.2, rest_position_runs=2.5))
        assert not result.passed
        assert any("Rest position runs" in f for f in result.findings)

    def test_tight_tolerance_reports_overshoot(self, scenario_a):
        result = run_selftest(scenario_a, tolerance=0.0)
        assert not result.passed
        assert any("Overshoot should have been" in f for f in result.findings)


class TestCrossingsOnSampleGrid:
    def test_zero_on_sample_point_is_counted_once(self):
        """runs=1 puts rest position crossings at t = 0.2 and t = 0.6, both on the 100-step grid."""
        s = InterpolatorSettings(overshoot=0.3, rest_position_runs=1)
        shape = detect_curve_shape(compute_params(s), steps=100)
        assert shape.crossings == 2
        assert shape.detected_rest_position_runs == 1
