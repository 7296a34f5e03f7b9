# MIT License (see LICENSE)
"""
Special functions.

    - j0: Bessel function of the first kind, order 0 (quadrature).
    - y0_by_integration, y0_by_series: Bessel function of the second kind,
      order 0, by two independent methods.
"""
from .bessel import (
    j0,
    y0_by_integration,
    y0_by_series,
    y0_series_sum,
    y0_comparison_table,
    sample_curve,
)

__all__ = [
    "j0",
    "y0_by_integration",
    "y0_by_series",
    "y0_series_sum",
    "y0_comparison_table",
    "sample_curve",
]
