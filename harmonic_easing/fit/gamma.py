from __future__ import annotations

import math
from typing import Optional

from scipy.optimize import brentq

from harmonic_easing.config import settings as config
from harmonic_easing.curve.turning import peak_overshoot
from harmonic_easing.curve.types import InterpolatorSettings
from harmonic_easing.errors import FitDidNotConverge, NonFiniteResult
from harmonic_easing.utils.logging import warn


def _deviation(overshoot: float, omega: float, gamma: float) -> float:
    return abs(overshoot - peak_overshoot(omega, gamma))


def naive_gamma(overshoot: float, omega: float) -> float:
    """
    Seed assuming the peak sits at half a period, where cos(omega t) = -1,
    so that exp(-gamma t) = overshoot.
    """
    time = math.pi / omega
    return -math.log(overshoot) / time


def compute_gamma(
    settings: InterpolatorSettings,
    omega: float,
    *,
    step: Optional[float] = None,
    max_iterations: Optional[int] = None,
    refine: bool = False,
) -> float:
    """
    Finds a damping that yields the requested overshoot, to within one step.

    Starts from the naive seed, picks a direction from the sign of the
    overshoot error, then walks in fixed steps while the deviation strictly
    shrinks. Candidates never go below or onto zero.

    Raises FitDidNotConverge if the walk is still improving after
    max_iterations steps, NonFiniteResult if any intermediate value breaks.
    """
    step = config.gamma_step if step is None else float(step)
    max_iterations = config.max_fit_iterations if max_iterations is None else int(max_iterations)
    overshoot = settings.overshoot

    gamma = naive_gamma(overshoot, omega)
    if not math.isfinite(gamma) or gamma <= 0.0:
        raise NonFiniteResult(f"naive gamma for overshoot={overshoot!r} is {gamma!r}")

    interpolation = peak_overshoot(omega, gamma)
    deviation = abs(overshoot - interpolation)

    # Too much overshoot -> more damping, else less.
    sign = 1.0 if interpolation - overshoot > 0 else -1.0

    iterations = 0
    while True:
        tuned_gamma = gamma + sign * step
        if tuned_gamma <= 0.0:
            break

        tuned_deviation = _deviation(overshoot, omega, tuned_gamma)
        if not tuned_deviation < deviation:
            break

        iterations += 1
        if iterations > max_iterations:
            raise FitDidNotConverge(
                f"still improving after {max_iterations} steps of {step} "
                f"(overshoot={overshoot!r}, omega={omega:.4f}, gamma={tuned_gamma:.4f})"
            )
        deviation = tuned_deviation
        gamma = tuned_gamma

    if iterations == 0:
        warn(f"Gamma search made no progress from the seed {gamma:.4f}; returning it unrefined.")

    if refine:
        gamma = _refine(overshoot, omega, gamma, step)

    if not math.isfinite(gamma):
        raise NonFiniteResult(f"gamma for overshoot={overshoot!r} is {gamma!r}")
    return gamma


def _refine(overshoot: float, omega: float, gamma: float, step: float) -> float:
    """
    Polishes a stepped gamma with brentq. The root of peak - overshoot lies
    within one step on either side of the walk's result.
    """

    def residual(g: float) -> float:
        return peak_overshoot(omega, g) - overshoot

    here = residual(gamma)
    if here == 0.0:
        return gamma

    for other in (gamma + step, gamma - step):
        if other <= 0.0:
            continue
        if here * residual(other) < 0:
            lo, hi = sorted((gamma, other))
            return float(brentq(residual, lo, hi, xtol=1e-12))

    warn(f"Could not bracket the overshoot root around gamma={gamma:.4f}; keeping the stepped value.")
    return gamma
