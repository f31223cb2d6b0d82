from __future__ import annotations

from typing import Callable

import typer
from pydantic import BaseModel

from harmonic_easing.curve.types import InterpolatorSettings

QUESTIONS = {
    "rest_position_runs": "How often should the interpolator cross the rest position?",
    "overshoot": "How far should the interpolator 'overshoot'?",
    "duration_ms": "How long should the animation run? (in ms)",
}


class VisualizationRequest(BaseModel):
    """Raw answers of the custom visualization dialog, parsed but not range checked."""

    rest_position_runs: float
    overshoot: float
    duration_ms: int

    def to_settings(self) -> InterpolatorSettings:
        return InterpolatorSettings(
            overshoot=self.overshoot,
            rest_position_runs=self.rest_position_runs,
        )


def prompt_request(prompt: Callable[[str], str] = typer.prompt) -> VisualizationRequest:
    answers = {field: prompt(question) for field, question in QUESTIONS.items()}
    return VisualizationRequest(**answers)
