from __future__ import annotations

import math

from harmonic_easing.curve.oscillator import evaluate
from harmonic_easing.errors import NonFiniteResult


def turning_time(omega: float, gamma: float) -> float:
    """
    Time of the first extremum past the rest position (the overshoot peak).

    Solves d/dt (1 - exp(-gamma t) cos(omega t)) = 0 and picks the branch of
    atan that lands on the first positive root.
    """
    if not omega > 0.0 or not gamma > 0.0:
        raise NonFiniteResult(f"turning time undefined for omega={omega!r}, gamma={gamma!r}")

    t = 2.0 * math.atan(omega / gamma - math.sqrt(gamma**2 + omega**2) / gamma) / omega + math.pi / omega
    if not math.isfinite(t):
        raise NonFiniteResult(f"turning time for omega={omega!r}, gamma={gamma!r} is {t!r}")
    return t


def peak_overshoot(omega: float, gamma: float) -> float:
    """Signed excursion beyond the rest position at the turning time."""
    return evaluate(omega, gamma, turning_time(omega, gamma)) - 1.0
