# MIT License (see LICENSE)
"""
Tunable numeric settings.

All iteration counts and tolerances used by the quadrature, root finder and
series evaluator are collected in NumericsConfig. A process-wide default is
kept in this module; functions that accept ``config=None`` fall back to it.

Each field can be overridden from the environment with a variable named
``PHYSICS_LAB_<FIELD>`` (upper case), e.g.::

    PHYSICS_LAB_BESSEL_DIVISIONS=2000 python examples/bessel_table.py
"""
from __future__ import annotations
import os
from dataclasses import dataclass, fields, replace

ENV_PREFIX = "PHYSICS_LAB_"


@dataclass(frozen=True)
class NumericsConfig:
    """
    Numeric knobs of the core algorithms.

    Attributes:
        bessel_divisions: Simpson subdivisions for the Bessel integrals
            (2*divisions intervals are used).
        fourier_samples: Number of Simpson intervals for Fourier coefficients.
            Must be even.
        newton_max_iter: Iteration ceiling for Newton-Raphson.
        newton_tolerance: Step size below which Newton-Raphson has converged.
        singular_eps: |f'(x)| below this is treated as a singular derivative.
        series_max_terms: Safety ceiling for the Y0 power series.
        series_tolerance: Series stops once a term is smaller than this.
    """
    bessel_divisions: int = 10_000
    fourier_samples: int = 1_000
    newton_max_iter: int = 10_000
    newton_tolerance: float = 1e-6
    singular_eps: float = 1e-12
    series_max_terms: int = 10_000
    series_tolerance: float = 1e-6

    def __post_init__(self) -> None:
        if self.bessel_divisions < 1:
            raise ValueError(f"bessel_divisions must be >= 1, got {self.bessel_divisions}")
        if self.fourier_samples < 2 or self.fourier_samples % 2:
            raise ValueError(f"fourier_samples must be even and >= 2, got {self.fourier_samples}")
        if self.newton_max_iter < 1 or self.series_max_terms < 1:
            raise ValueError("Iteration ceilings must be positive")
        if self.newton_tolerance <= 0 or self.series_tolerance <= 0 or self.singular_eps < 0:
            raise ValueError("Tolerances must be positive")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "NumericsConfig":
        """Build a config from defaults overridden by PHYSICS_LAB_* variables."""
        env = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            cast = int if f.type in ("int", int) else float
            try:
                overrides[f.name] = cast(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}{f.name.upper()}={raw!r} is not a valid {cast.__name__}") from exc
        return cls(**overrides)

    def with_overrides(self, **changes) -> "NumericsConfig":
        """Return a copy with some fields replaced."""
        return replace(self, **changes)


_config = NumericsConfig.from_env()


def get_config() -> NumericsConfig:
    """Return the process-wide default config."""
    return _config


def set_config(config: NumericsConfig) -> NumericsConfig:
    """Replace the process-wide default config. Returns the previous one."""
    global _config
    previous, _config = _config, config
    return previous
