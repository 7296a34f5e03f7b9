# MIT License (see LICENSE)
"""
Bessel functions of order 0 for real positive arguments.

Two independent ways to compute the function of the second kind Y0 are
provided so they can be checked against each other:

1. Integral representation (Abramowitz & Stegun 9.1.19):

       Y0(x) = 4/π² ∫_0^{π/2} cos(x cos θ) (γ + ln(2x sin²θ)) dθ

   The integrand has a log singularity at θ = 0, so the lower limit is moved
   to a small δ (constants.BESSEL_LOWER_LIMIT).

2. Power series (A&S 9.1.13):

       Y0(x) = 2/π [ (ln(x/2) + γ) J0(x) + Σ_{n≥1} (-1)^{n+1} H_n (x²/4)^n / (n!)² ]

   where H_n = 1 + 1/2 + ... + 1/n. The J0 term comes from

       J0(x) = 1/π ∫_0^π cos(x sin θ) dθ

   so the series evaluator depends on the Simpson quadrature.

The series converges for every x but loses precision to cancellation for
large x (terms grow like (x/2)^{2n}/(n!)² before they shrink); it is meant for
moderate arguments such as the 0 < x <= 20 range of a plot.
"""
from __future__ import annotations
import logging
import math
from typing import Callable, Iterable

import numpy as np

from ..config import NumericsConfig, get_config
from ..constants import BESSEL_LOWER_LIMIT, EULER_GAMMA
from ..errors import OutOfDomain
from ..numerics.quadrature import integrate

logger = logging.getLogger(__name__)


def _require_positive(x: float) -> float:
    x = float(x)
    if not x > 0.0 or not math.isfinite(x):
        raise OutOfDomain(f"Y0 is defined for finite x > 0, got {x!r}")
    return x


def j0(x: float, divisions: int | None = None, config: NumericsConfig | None = None) -> float:
    """
    Bessel function of the first kind, order 0, by Simpson integration.

    Args:
        x: Argument (any real).
        divisions: Simpson panels (default config.bessel_divisions).
    """
    divisions = divisions or (config or get_config()).bessel_divisions
    s = integrate(0.0, math.pi, divisions, lambda t: np.cos(x * np.sin(t)), vectorized=True)
    return s / math.pi


def y0_by_integration(x: float, divisions: int | None = None, config: NumericsConfig | None = None) -> float:
    """
    Y0(x) from its integral representation.

    Raises:
        OutOfDomain: x <= 0.
    """
    x = _require_positive(x)
    divisions = divisions or (config or get_config()).bessel_divisions

    def integrand(theta: np.ndarray) -> np.ndarray:
        sin_theta = np.sin(theta)
        return np.cos(x * np.cos(theta)) * (EULER_GAMMA + np.log(2.0 * x * sin_theta * sin_theta))

    s = integrate(BESSEL_LOWER_LIMIT, math.pi / 2.0, divisions, integrand, vectorized=True)
    return s * 4.0 / (math.pi * math.pi)


def y0_series_sum(x: float, max_terms: int | None = None, tolerance: float | None = None,
                  config: NumericsConfig | None = None) -> float:
    """
    Partial sum Σ (-1)^{n+1} H_n (x²/4)^n / (n!)² of the Y0 series.

    The running term is multiplied by -x²/4 and divided by n² each step, and
    H_n accumulates 1/n. Summation stops right after adding a term smaller
    than tolerance, or after max_terms terms.

    Args:
        x: Argument.
        max_terms: Safety ceiling on the number of terms
                   (default config.series_max_terms).
        tolerance: Magnitude cutoff for the newest term
                   (default config.series_tolerance).
    """
    cfg = config or get_config()
    max_terms = cfg.series_max_terms if max_terms is None else max_terms
    tolerance = cfg.series_tolerance if tolerance is None else tolerance

    dm = x * x / 4.0
    term = dm     # (-1)^{n+1} (x²/4)^n / (n!)² for n = 1
    harmonic = 1.0
    s = 0.0
    for n in range(1, max_terms + 1):
        a = harmonic * term
        s += a
        if abs(a) < tolerance:
            break
        nxt = n + 1
        term *= -dm / (nxt * nxt)
        harmonic += 1.0 / nxt
    else:
        logger.debug("Y0 series for x=%g hit the %d term ceiling", x, max_terms)
    return s


def y0_by_series(x: float, config: NumericsConfig | None = None) -> float:
    """
    Y0(x) from the power series combined with J0 from quadrature.

    Raises:
        OutOfDomain: x <= 0.
    """
    x = _require_positive(x)
    s = y0_series_sum(x, config=config)
    return ((math.log(x / 2.0) + EULER_GAMMA) * j0(x, config=config) + s) * 2.0 / math.pi


def y0_comparison_table(xs: Iterable[float], config: NumericsConfig | None = None) -> list[tuple[float, float, float, float]]:
    """
    Rows (x, Y0 by integration, Y0 by series, |difference|) for each x.

    Used to check the two methods against each other.
    """
    rows = []
    for x in xs:
        y_int = y0_by_integration(x, config=config)
        y_ser = y0_by_series(x, config=config)
        rows.append((float(x), y_int, y_ser, abs(y_int - y_ser)))
    return rows


def sample_curve(f: Callable[[float], float], xmin: float, xmax: float, count: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Evaluate f on count + 1 equally spaced points of [xmin, xmax].

    Points where f is undefined (OutOfDomain, e.g. x = 0 for Y0) become NaN
    so a plotting layer can leave a gap there.

    Returns:
        Tuple (xs, ys) of float64 arrays.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    xs = np.linspace(xmin, xmax, count + 1)
    ys = np.empty_like(xs)
    for i, x in enumerate(xs):
        try:
            ys[i] = f(float(x))
        except OutOfDomain:
            ys[i] = np.nan
    return xs, ys
