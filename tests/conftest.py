import matplotlib

matplotlib.use("Agg")

import pytest

from harmonic_easing.curve.types import InterpolatorSettings


@pytest.fixture
def scenario_a():
    return InterpolatorSettings(overshoot=0.2, rest_position_runs=4)


@pytest.fixture
def scenario_b():
    return InterpolatorSettings(overshoot=0.5, rest_position_runs=0)


@pytest.fixture
def no_sleep(monkeypatch):
    slept = []
    monkeypatch.setattr("time.sleep", slept.append)
    return slept
