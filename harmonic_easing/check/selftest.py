from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from harmonic_easing.config import settings as config
from harmonic_easing.curve.oscillator import rest_deviation
from harmonic_easing.curve.types import InterpolatorParams, InterpolatorSettings
from harmonic_easing.fit.params import compute_params


@dataclass
class CurveShape:
    crossings: int
    detected_rest_position_runs: int
    detected_overshoot: float


@dataclass
class SelfTestResult:
    settings: InterpolatorSettings
    params: InterpolatorParams
    shape: CurveShape
    overshoot_accuracy: float
    passed: bool
    findings: list[str]


def detect_curve_shape(params: InterpolatorParams, steps: int = 100) -> CurveShape:
    """
    Samples t = i/steps for i in [0, steps) and reads back the shape.

    A crossing is a sign change of x(t) - 1 between neighbouring samples;
    a sample sitting exactly on the rest position keeps the previous sign.
    The curve starts at -1 below the rest position, so the first crossing is
    the initial rise and is not a rest position run. Overshoot tracking only
    begins after that first crossing and keeps the signed value of largest
    magnitude.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    t = np.arange(steps, dtype=float) / float(steps)
    normalized = rest_deviation(params.omega, params.gamma, t)

    signs = np.concatenate(([-1.0], np.sign(normalized)))
    last_nonzero = np.maximum.accumulate(np.where(signs != 0, np.arange(signs.size), 0))
    signs = signs[last_nonzero]

    crossed = signs[1:] != signs[:-1]
    crossings = int(np.count_nonzero(crossed))

    detected_overshoot = 0.0
    if crossings > 0:
        first = int(np.argmax(crossed))
        tail = normalized[first:]
        detected_overshoot = float(tail[int(np.argmax(np.abs(tail)))])

    return CurveShape(
        crossings=crossings,
        detected_rest_position_runs=max(crossings - 1, 0),
        detected_overshoot=detected_overshoot,
    )


def run_selftest(
    settings: InterpolatorSettings,
    steps: Optional[int] = None,
    tolerance: Optional[float] = None,
    refine: bool = False,
) -> SelfTestResult:
    """Fits the settings, samples the curve and compares the shape against them."""
    steps = config.selftest_steps if steps is None else int(steps)
    tolerance = config.selftest_tolerance if tolerance is None else float(tolerance)

    params = compute_params(settings, refine=refine)
    shape = detect_curve_shape(params, steps=steps)

    findings: list[str] = []
    passed = True

    if shape.crossings - 1 != settings.rest_position_runs:
        passed = False
        findings.append(
            f"Rest position runs should have been {settings.rest_position_runs:g} "
            f"but were {shape.crossings - 1}."
        )

    accuracy = abs(settings.overshoot - shape.detected_overshoot)
    if accuracy > tolerance:
        passed = False
        findings.append(
            f"Overshoot should have been {settings.overshoot:g} "
            f"but was {shape.detected_overshoot:.6f}."
        )

    return SelfTestResult(
        settings=settings,
        params=params,
        shape=shape,
        overshoot_accuracy=accuracy,
        passed=passed,
        findings=findings,
    )
