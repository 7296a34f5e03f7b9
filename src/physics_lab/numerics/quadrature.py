# MIT License (see LICENSE)
"""
Composite Simpson quadrature.

integrate() approximates ∫_{x1}^{x2} f(x) dx with parabolic arcs through
triples of equally spaced samples:

    ∫ f dx ≈ dx/3 · [f0 + 4f1 + 2f2 + 4f3 + ... + 2f_{N-2} + 4f_{N-1} + fN]

with N = 2·divisions intervals, i.e. an odd number 2·divisions + 1 of sample
points. The rule is exact for polynomials up to degree 3.

Reference:
    https://en.wikipedia.org/wiki/Simpson%27s_rule#Composite_Simpson's_1/3_rule
"""
from __future__ import annotations
from typing import Callable

import numpy as np

from ..config import NumericsConfig, get_config

ScalarFunc = Callable[[float], float]


def simpson_weights(divisions: int) -> np.ndarray:
    """
    Simpson weights 1, 4, 2, 4, ..., 2, 4, 1 for 2·divisions intervals.

    Interior point i gets 4 when i is odd and 2 when i is even.
    """
    if divisions < 1:
        raise ValueError(f"divisions must be >= 1, got {divisions}")
    n = 2 * divisions
    w = np.where(np.arange(n + 1) % 2 == 1, 4.0, 2.0)
    w[0] = w[-1] = 1.0
    return w


def integrate(
    x1: float,
    x2: float,
    divisions: int,
    f: ScalarFunc,
    *,
    vectorized: bool = False,
) -> float:
    """
    Definite integral of f over [x1, x2] by composite Simpson's rule.

    Args:
        x1, x2: Integration limits (x2 < x1 gives the negated integral).
        divisions: Number of parabolic panels; 2·divisions intervals are used.
        f: Integrand. Called once per sample point with a float, or once
           with the whole sample array when vectorized is True.
        vectorized: f accepts and returns numpy arrays.

    Returns:
        The integral estimate. Non-finite samples propagate into the result.
    """
    w = simpson_weights(divisions)
    xs = np.linspace(x1, x2, w.size)
    dx = (x2 - x1) / (w.size - 1)

    if vectorized:
        ys = np.asarray(f(xs), dtype=np.float64)
        if ys.shape != xs.shape:
            ys = np.broadcast_to(ys, xs.shape)
    else:
        ys = np.fromiter((f(float(x)) for x in xs), dtype=np.float64, count=xs.size)

    return float(np.dot(w, ys) * dx / 3.0)


def fourier_coefficient(
    f: Callable[[np.ndarray], np.ndarray],
    length: float,
    k: float,
    samples: int | None = None,
    config: NumericsConfig | None = None,
) -> float:
    """
    Cosine Fourier coefficient of f on [0, length]:

        a(k) = 2/length · ∫_0^length f(x) cos(k x) dx

    Args:
        f: Vectorized function of x.
        length: Interval length d.
        k: Wave number.
        samples: Number of Simpson intervals (even). Defaults to
                 config.fourier_samples.
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    if samples is None:
        samples = (config or get_config()).fourier_samples
    if samples < 2 or samples % 2:
        raise ValueError(f"samples must be even and >= 2, got {samples}")

    s = integrate(0.0, length, samples // 2, lambda x: f(x) * np.cos(k * x), vectorized=True)
    return 2.0 * s / length
