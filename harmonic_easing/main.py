from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from harmonic_easing.check.selftest import run_selftest
from harmonic_easing.config import settings
from harmonic_easing.curve.types import InterpolatorSettings
from harmonic_easing.entry import prompt_request
from harmonic_easing.errors import FitError
from harmonic_easing.fit.params import compute_params
from harmonic_easing.presets import PRESETS, SELFTEST_DEFAULT
from harmonic_easing.render.ascii import play as play_animation
from harmonic_easing.report.plots import export_frames, plot_curve
from harmonic_easing.utils.logging import console, error, info, success, warn

app = typer.Typer(add_completion=False)

MENU = (
    "\n"
    "################ CLI MENU #################\n"
    "Press 'l' to run the long visualization\n"
    "Press 'm' to run a typical mobile animation visualization\n"
    "Press 'c' to enter custom params for the visualization\n"
    "Press any other key to exit"
)

MENU_PRESETS = {"l": "long", "m": "mobile"}


# -------------------------
# Helpers
# -------------------------
def _abort(exc: Exception):
    error(f"Aborted: {exc}")
    raise typer.Exit(code=1)


def _settings_or_abort(rest_position_runs: float, overshoot: float) -> InterpolatorSettings:
    try:
        return InterpolatorSettings(overshoot=overshoot, rest_position_runs=rest_position_runs)
    except FitError as e:
        _abort(e)


def _play_or_abort(s: InterpolatorSettings, duration_ms: float, running_mode: bool = True) -> None:
    info(
        f"Playing runs={s.rest_position_runs:g} overshoot={s.overshoot:g} "
        f"for {duration_ms:g} ms"
    )
    try:
        play_animation(s, duration_ms, running_mode=running_mode)
    except FitError as e:
        _abort(e)


def _play_preset(name: str, running_mode: bool = True) -> None:
    preset = PRESETS[name]
    s = _settings_or_abort(preset["rest_position_runs"], preset["overshoot"])
    _play_or_abort(s, preset["duration_ms"], running_mode)


def _custom(running_mode: bool = True) -> None:
    try:
        request = prompt_request()
        s = request.to_settings()
    except (ValidationError, FitError) as e:
        _abort(e)
    _play_or_abort(s, request.duration_ms, running_mode)


# -------------------------
# Commands
# -------------------------
@app.command()
def fit(
    runs: float = typer.Option(..., help="How often the curve crosses the rest position"),
    overshoot: float = typer.Option(..., help="Normalized overshoot at the first peak, in (0, 1)"),
    refine: bool = typer.Option(False, help="Polish gamma below the search step"),
):
    s = _settings_or_abort(runs, overshoot)
    try:
        params = compute_params(s, refine=refine)
    except FitError as e:
        _abort(e)
    info(f"omega = {params.omega:.6f}")
    info(f"gamma = {params.gamma:.6f}")


@app.command()
def selftest(
    runs: float = typer.Option(SELFTEST_DEFAULT["rest_position_runs"], help="Rest position runs"),
    overshoot: float = typer.Option(SELFTEST_DEFAULT["overshoot"], help="Overshoot"),
    steps: int = typer.Option(settings.selftest_steps, help="Samples over [0, 1)"),
    tolerance: float = typer.Option(settings.selftest_tolerance, help="Allowed overshoot error"),
):
    s = _settings_or_abort(runs, overshoot)
    try:
        result = run_selftest(s, steps=steps, tolerance=tolerance)
    except FitError as e:
        _abort(e)

    info("Testing interpolation settings")
    info(f"rp_runs   : {s.rest_position_runs:g}")
    info(f"overshoot : {s.overshoot:g}")
    info(f"omega     : {result.params.omega:.6f}")
    info(f"gamma     : {result.params.gamma:.6f}")

    if not result.passed:
        for finding in result.findings:
            error(f"Test failed. {finding}")
        raise typer.Exit(code=1)
    success(f"Test succeeded. Overshoot accuracy was {result.overshoot_accuracy:.6f}")


@app.command()
def play(
    preset: Optional[str] = typer.Argument(None, help="long|mobile"),
    runs: Optional[float] = typer.Option(None, help="Overrides the preset's rest position runs"),
    overshoot: Optional[float] = typer.Option(None, help="Overrides the preset's overshoot"),
    duration_ms: Optional[int] = typer.Option(None, help="Overrides the preset's duration"),
    overwrite: bool = typer.Option(False, help="Redraw the bar in place instead of one line per frame"),
):
    base = PRESETS["mobile"]
    if preset is not None:
        if preset not in PRESETS:
            error(f"Unknown preset {preset!r}; choose from {', '.join(sorted(PRESETS))}")
            raise typer.Exit(code=2)
        base = PRESETS[preset]
    elif runs is None and overshoot is None:
        warn("No preset or settings given; using 'mobile'.")

    s = _settings_or_abort(
        base["rest_position_runs"] if runs is None else runs,
        base["overshoot"] if overshoot is None else overshoot,
    )
    _play_or_abort(s, base["duration_ms"] if duration_ms is None else duration_ms, not overwrite)


@app.command()
def custom():
    """Asks for the visualization params and plays the animation."""
    _custom()


@app.command()
def menu():
    console.print(MENU, markup=False)
    while True:
        choice = typer.prompt("", default="", show_default=False, prompt_suffix="").strip()
        if not choice:
            continue
        if choice in MENU_PRESETS:
            _play_preset(MENU_PRESETS[choice])
        elif choice == "c":
            _custom()
        else:
            return


@app.command()
def plot(
    out_path: str = typer.Argument(..., help="PNG output path"),
    runs: float = typer.Option(4.0, help="Rest position runs"),
    overshoot: float = typer.Option(0.25, help="Overshoot"),
):
    s = _settings_or_abort(runs, overshoot)
    try:
        params = compute_params(s)
    except FitError as e:
        _abort(e)
    plot_curve(params, out_path, title=f"runs={s.rest_position_runs:g}, overshoot={s.overshoot:g}")
    success(f"Plot written: {out_path}")


@app.command()
def export(
    out_path: str = typer.Argument(..., help=".csv or .json output path"),
    runs: float = typer.Option(4.0, help="Rest position runs"),
    overshoot: float = typer.Option(0.25, help="Overshoot"),
    steps: int = typer.Option(600, help="Number of intervals over [0, 1]"),
):
    s = _settings_or_abort(runs, overshoot)
    try:
        params = compute_params(s)
        frames = export_frames(params, out_path, steps)
    except ValueError as e:
        _abort(e)
    success(f"Saved frames: {len(frames)} -> {out_path}")


if __name__ == "__main__":
    app()
