# Named settings for the CLI menu and the self-test.
# duration_ms is only used by the renderer.

PRESETS = {
    # Long running, strongly oscillating curve
    "long": {"rest_position_runs": 16.0, "overshoot": 0.85, "duration_ms": 20_000},

    # Typical mobile UI transition
    "mobile": {"rest_position_runs": 4.0, "overshoot": 0.25, "duration_ms": 2_000},
}

SELFTEST_DEFAULT = {"rest_position_runs": 4.0, "overshoot": 0.2}
