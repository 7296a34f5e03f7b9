# MIT License (see LICENSE)
"""
Newton-Raphson root finding for inverting scalar functions.

find_root() solves f(x) = target by iterating

    x_{n+1} = x_n - (f(x_n) - target) / f'(x_n)

until |x_{n+1} - x_n| < tolerance. The result carries a convergence flag
instead of silently returning the last estimate; RootResult.unwrap() turns a
missing convergence into NumericalNonConvergence.

Functions with two branches (e.g. gas-dynamic q(λ)) are inverted by calling
find_root() from two starting points on either side of the turning point.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Callable

from ..config import NumericsConfig, get_config
from ..errors import NumericalNonConvergence, SingularDerivative

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootResult:
    """
    Outcome of a Newton-Raphson run.

    Attributes:
        value: Last iterate (best estimate of the root).
        converged: True if the step size dropped below the tolerance.
        iterations: Number of Newton steps taken.
    """
    value: float
    converged: bool
    iterations: int

    def unwrap(self) -> float:
        """Return value, or raise NumericalNonConvergence if not converged."""
        if not self.converged:
            raise NumericalNonConvergence(self.value, self.iterations)
        return self.value


def _pull_inside(x_old: float, x_new: float, bounds: tuple[float, float] | None) -> float:
    """Move an iterate that left (lo, hi) halfway from x_old to the violated bound."""
    if bounds is None:
        return x_new
    lo, hi = bounds
    if x_new <= lo:
        return 0.5 * (x_old + lo)
    if x_new >= hi:
        return 0.5 * (x_old + hi)
    return x_new


def find_root(
    target: float,
    start: float,
    f: Callable[[float], float],
    df: Callable[[float], float],
    *,
    max_iter: int | None = None,
    tolerance: float | None = None,
    bounds: tuple[float, float] | None = None,
    singular_eps: float | None = None,
    config: NumericsConfig | None = None,
) -> RootResult:
    """
    Find x with f(x) = target by Newton-Raphson iteration from start.

    Args:
        target: Value the function should reach.
        start: Initial guess. Picks the branch for non-monotonic f.
        f: Function to invert.
        df: Derivative of f.
        max_iter: Iteration ceiling (default config.newton_max_iter).
        tolerance: Convergence threshold on |x_{n+1} - x_n|
                   (default config.newton_tolerance).
        bounds: Optional open interval (lo, hi) the iterates must stay in.
                Steps that leave it are damped halfway toward the bound.
        singular_eps: |df| at or below this raises SingularDerivative
                      (default config.singular_eps).

    Returns:
        RootResult with converged=False if max_iter was reached.

    Raises:
        SingularDerivative: Derivative vanished at an iterate.
        NumericalNonConvergence: An iterate became NaN or infinite.
    """
    cfg = config or get_config()
    max_iter = cfg.newton_max_iter if max_iter is None else max_iter
    tolerance = cfg.newton_tolerance if tolerance is None else tolerance
    singular_eps = cfg.singular_eps if singular_eps is None else singular_eps

    x = float(start)
    for n in range(1, max_iter + 1):
        slope = df(x)
        if not abs(slope) > singular_eps:
            raise SingularDerivative(x, slope)

        x_new = _pull_inside(x, x - (f(x) - target) / slope, bounds)
        if not math.isfinite(x_new):
            raise NumericalNonConvergence(x_new, n, f"Newton iterate diverged to {x_new!r} after {n} steps")

        if abs(x_new - x) < tolerance:
            return RootResult(value=x_new, converged=True, iterations=n)
        x = x_new

    logger.warning(
        "Newton-Raphson did not converge: target=%g start=%g last=%g after %d iterations",
        target, start, x, max_iter,
    )
    return RootResult(value=x, converged=False, iterations=max_iter)
