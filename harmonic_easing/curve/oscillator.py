from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from harmonic_easing.curve.types import InterpolatorParams


def evaluate(omega: float, gamma: float, t):
    """
    x(t) = 1 - exp(-gamma * t) * cos(omega * t)

    x(0) == 0 for any omega/gamma. Accepts scalars or numpy arrays for t;
    scalars come back as plain floats.
    """
    x = 1.0 - np.exp(-gamma * np.asarray(t, dtype=float)) * np.cos(omega * np.asarray(t, dtype=float))
    if np.ndim(x) == 0:
        return float(x)
    return x


def evaluate_params(params: InterpolatorParams, t):
    return evaluate(params.omega, params.gamma, t)


def sample_curve(params: InterpolatorParams, steps: int, endpoint: bool = True) -> pd.DataFrame:
    """
    Samples the curve on [0, 1] (or [0, 1) with endpoint=False).
    Output columns: time, value
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    n = steps + 1 if endpoint else steps
    t = np.arange(n, dtype=float) / float(steps)
    return pd.DataFrame({"time": t, "value": evaluate_params(params, t)})


def rest_deviation(omega: float, gamma: float, t):
    """
    x(t) - 1, computed without the cancellation of evaluate(...) - 1.
    Keeps the sign of tiny values near the rest position crossings.
    """
    d = -np.exp(-gamma * np.asarray(t, dtype=float)) * np.cos(omega * np.asarray(t, dtype=float))
    if np.ndim(d) == 0:
        return float(d)
    return d
