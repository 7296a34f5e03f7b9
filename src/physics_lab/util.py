# MIT License (see LICENSE)
"""
Small numeric helpers used across the package.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array (always a new copy).

    Lets callers pass tuples or lists as model state.
    """
    return np.array(x, dtype=np.float64)


def cosh_ratio(k: np.ndarray, z: np.ndarray, h: float) -> np.ndarray:
    """
    cosh(k(z + h)) / cosh(k h) for -h <= z <= 0 without overflow.

    Written as exp(k z)·(1 + e^{-2k(z+h)}) / (1 + e^{-2kh}); every exponent
    is non-positive for k >= 0 on that depth range.
    """
    return np.exp(k * z) * (1.0 + np.exp(-2.0 * k * (z + h))) / (1.0 + np.exp(-2.0 * k * h))


def sinh_ratio(k: np.ndarray, z: np.ndarray, h: float) -> np.ndarray:
    """sinh(k(z + h)) / cosh(k h), the companion of cosh_ratio()."""
    return np.exp(k * z) * (1.0 - np.exp(-2.0 * k * (z + h))) / (1.0 + np.exp(-2.0 * k * h))
