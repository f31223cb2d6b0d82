from pydantic import BaseModel

class Settings(BaseModel):
    # Granularity of the damping search. NOT the precision of the overshoot itself.
    gamma_step: float = 0.01
    max_fit_iterations: int = 10_000

    # Self-test sampling over [0, 1)
    selftest_steps: int = 100
    selftest_tolerance: float = 0.01

    # Terminal renderer
    frame_interval_ms: int = 32
    max_glyphs: int = 150
    glyph: str = "#"

    plot_samples: int = 600

settings = Settings()
