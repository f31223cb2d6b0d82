from __future__ import annotations

import math
import time
from typing import Callable, Iterator, Optional

from rich.console import Console

from harmonic_easing.config import settings as config
from harmonic_easing.curve.types import InterpolatorParams, InterpolatorSettings
from harmonic_easing.fit.params import compute_params
from harmonic_easing.utils.logging import console as default_console


def _round_half_away(x: float) -> int:
    return int(math.floor(x + 0.5)) if x >= 0 else -int(math.floor(-x + 0.5))


def glyph_counts(
    params: InterpolatorParams,
    duration_ms: float,
    interval_ms: Optional[float] = None,
    max_glyphs: Optional[int] = None,
) -> Iterator[int]:
    """
    Bar length for every frame of the animation.

    Frames are taken at elapsed = 0, interval, 2*interval, ... while
    elapsed < duration and map t = elapsed/duration onto max_glyphs.
    """
    interval_ms = config.frame_interval_ms if interval_ms is None else interval_ms
    max_glyphs = config.max_glyphs if max_glyphs is None else max_glyphs
    if interval_ms <= 0:
        raise ValueError(f"interval_ms must be > 0, got {interval_ms}")

    elapsed = 0.0
    while elapsed < duration_ms:
        value = params.evaluate(elapsed / duration_ms)
        yield max(0, _round_half_away(max_glyphs * value))
        elapsed += interval_ms


def play(
    settings: InterpolatorSettings,
    duration_ms: float,
    running_mode: bool = True,
    *,
    console: Optional[Console] = None,
    sleep: Optional[Callable[[float], None]] = None,
    interval_ms: Optional[float] = None,
) -> int:
    """
    Rather chunky command line animation of the curve.

    running_mode prints every frame on a new line, otherwise the bar is
    redrawn in place. Returns the number of frames drawn.
    """
    console = console or default_console
    sleep = sleep or time.sleep
    interval_ms = config.frame_interval_ms if interval_ms is None else interval_ms

    params = compute_params(settings)

    # Raw writes: rich would strip the carriage return of the overwrite mode.
    out = console.file
    end = "\n" if running_mode else "\r"

    frames = 0
    for count in glyph_counts(params, duration_ms, interval_ms=interval_ms):
        out.write(config.glyph * count + end)
        out.flush()
        sleep(interval_ms / 1000.0)
        frames += 1

    if not running_mode:
        out.write("\n")
        out.flush()
    return frames
