from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
import pandas as pd

from harmonic_easing.config import settings as config
from harmonic_easing.curve.oscillator import sample_curve
from harmonic_easing.curve.turning import turning_time
from harmonic_easing.curve.types import InterpolatorParams


def _format_progress(x, _pos=None) -> str:
    """0.25 -> '25%'."""
    try:
        x = float(x)
    except (TypeError, ValueError):
        return ""
    return f"{int(round(x * 100))}%"


def plot_curve(params: InterpolatorParams, out_path: str, title: str, samples: Optional[int] = None):
    """
    Easing curve over normalized time, compact and PDF-friendly.
    Marks the rest position and the analytic overshoot peak.
    """
    out_path = str(out_path)
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)

    d = sample_curve(params, samples or config.plot_samples)
    t_peak = turning_time(params.omega, params.gamma)

    fig = plt.figure(figsize=(6.6, 2.6), dpi=160)
    ax = fig.add_subplot(111)

    ax.plot(d["time"], d["value"], linewidth=1.8)
    ax.axhline(1.0, linestyle="--", linewidth=1.0, alpha=0.6)
    if t_peak <= 1.0:
        ax.plot([t_peak], [params.evaluate(t_peak)], marker="o", markersize=4)

    ax.set_title(title, fontsize=11, pad=10)
    ax.set_xlabel("Progress", fontsize=9)
    ax.set_ylabel("x(t)", fontsize=9)

    ax.xaxis.set_major_locator(mticker.MaxNLocator(nbins=5))
    ax.xaxis.set_major_formatter(mticker.FuncFormatter(_format_progress))

    ax.tick_params(axis="both", labelsize=8)
    ax.grid(True, alpha=0.25)

    plt.tight_layout()
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)


def export_frames(params: InterpolatorParams, out_path: str, steps: int) -> pd.DataFrame:
    """
    Writes the sampled curve as .csv (time,value) or .json (list of values).
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    d = sample_curve(params, steps)
    suffix = out.suffix.lower()
    if suffix == ".csv":
        d.to_csv(out, index=False)
    elif suffix == ".json":
        d["value"].to_json(out, orient="values")
    else:
        raise ValueError(f"Unsupported export format: {out.suffix or '(none)'} (use .csv or .json)")
    return d
