from __future__ import annotations


class FitError(ValueError):
    """Base for every failure of the settings -> params transform."""

    invariant = "fit"

    def __init__(self, detail: str):
        super().__init__(f"{self.invariant}: {detail}")
        self.detail = detail


class InvalidOvershoot(FitError):
    invariant = "overshoot must lie strictly between 0 and 1"


class InvalidRestRuns(FitError):
    invariant = "rest_position_runs must be >= 0"


class FitDidNotConverge(FitError):
    invariant = "gamma search exceeded its iteration bound"


class NonFiniteResult(FitError):
    invariant = "fit produced a non-finite value"
