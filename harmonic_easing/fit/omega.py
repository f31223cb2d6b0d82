from __future__ import annotations

import math

from harmonic_easing.errors import NonFiniteResult


def compute_omega(rest_position_runs: float) -> float:
    """
    Frequency satisfying x(1) = 1.

    The oscillator is thought of as starting at its quarter-cycle (full
    deflection) state, hence the 0.75. Every rest position run adds half a
    period.
    """
    full_oscillations = rest_position_runs / 2 + 0.75
    omega = 2 * math.pi * full_oscillations
    if not math.isfinite(omega):
        raise NonFiniteResult(f"omega for rest_position_runs={rest_position_runs!r} is {omega!r}")
    return omega
