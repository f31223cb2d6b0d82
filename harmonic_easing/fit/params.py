from __future__ import annotations

from harmonic_easing.curve.types import InterpolatorParams, InterpolatorSettings
from harmonic_easing.fit.gamma import compute_gamma
from harmonic_easing.fit.omega import compute_omega


def compute_params(settings: InterpolatorSettings, *, refine: bool = False) -> InterpolatorParams:
    """Transforms the easy to handle settings into oscillator params."""
    omega = compute_omega(settings.rest_position_runs)
    gamma = compute_gamma(settings, omega, refine=refine)
    return InterpolatorParams(omega=omega, gamma=gamma)


fit = compute_params
