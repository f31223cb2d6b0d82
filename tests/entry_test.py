"""
Tests for the custom visualization dialog.
"""

import pytest
from pydantic import ValidationError

from harmonic_easing.curve.types import InterpolatorSettings
from harmonic_easing.entry import QUESTIONS, VisualizationRequest, prompt_request
from harmonic_easing.errors import InvalidOvershoot, InvalidRestRuns


class TestVisualizationRequest:
    def test_parses_raw_text(self):
        request = VisualizationRequest(rest_position_runs="4", overshoot="0.2", duration_ms="2000")
        assert request.rest_position_runs == 4.0
        assert request.overshoot == 0.2
        assert request.duration_ms == 2000

    def test_to_settings(self):
        request = VisualizationRequest(rest_position_runs=4, overshoot=0.2, duration_ms=2000)
        assert request.to_settings() == InterpolatorSettings(overshoot=0.2, rest_position_runs=4)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            VisualizationRequest(rest_position_runs="four", overshoot="0.2", duration_ms="2000")

    def test_range_checked_only_by_settings(self):
        request = VisualizationRequest(rest_position_runs=4, overshoot=1.0, duration_ms=2000)
        with pytest.raises(InvalidOvershoot):
            request.to_settings()

        request = VisualizationRequest(rest_position_runs=-2, overshoot=0.2, duration_ms=2000)
        with pytest.raises(InvalidRestRuns):
            request.to_settings()


class TestPromptRequest:
    def test_asks_the_three_questions_in_order(self):
        answers = iter(["16", "0.85", "20000"])
        asked = []

        def fake_prompt(question):
            asked.append(question)
            return next(answers)

        request = prompt_request(fake_prompt)
        assert asked == list(QUESTIONS.values())
        assert request == VisualizationRequest(rest_position_runs=16, overshoot=0.85, duration_ms=20000)
