from __future__ import annotations

import math
from dataclasses import dataclass

from harmonic_easing.curve.oscillator import evaluate
from harmonic_easing.errors import InvalidOvershoot, InvalidRestRuns


@dataclass(frozen=True)
class InterpolatorSettings:
    """
    Designer-facing parametrisation of the damped oscillator.

    overshoot: normalized excursion beyond the rest position at the first peak,
        x(t_peak) = 1 + overshoot. Must lie in (0, 1).
    rest_position_runs: how often the curve crosses the rest position before
        it settles. The final settle is not counted.
    """

    overshoot: float
    rest_position_runs: float

    def __post_init__(self):
        overshoot = float(self.overshoot)
        runs = float(self.rest_position_runs)

        if not math.isfinite(overshoot) or overshoot <= 0.0 or overshoot >= 1.0:
            raise InvalidOvershoot(f"got overshoot={self.overshoot!r}")
        if not math.isfinite(runs) or runs < 0.0:
            raise InvalidRestRuns(f"got rest_position_runs={self.rest_position_runs!r}")

        # normalise ints / numpy scalars to plain floats
        object.__setattr__(self, "overshoot", overshoot)
        object.__setattr__(self, "rest_position_runs", runs)


@dataclass(frozen=True)
class InterpolatorParams:
    """Physical parameters of x(t) = 1 - exp(-gamma t) cos(omega t)."""

    omega: float
    gamma: float

    def evaluate(self, t):
        return evaluate(self.omega, self.gamma, t)
