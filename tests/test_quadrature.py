import math

import numpy as np
import pytest
from physics_lab.numerics.quadrature import integrate, fourier_coefficient, simpson_weights


def test_cubic_single_panel_exact():
    """Simpson's rule is exact for x³: ∫_0^1 x³ dx = 1/4."""
    assert integrate(0.0, 1.0, 1, lambda x: x**3) == pytest.approx(0.25, abs=1e-15)


@pytest.mark.parametrize("divisions", [1, 2, 3, 7, 50])
def test_cubic_polynomial_exact_for_any_divisions(divisions):
    """
    ∫_{-2}^{3} (2x³ - x² + 4x - 1) dx = [x⁴/2 - x³/3 + 2x² - x] = 155/6
    """
    f = lambda x: 2 * x**3 - x**2 + 4 * x - 1
    assert integrate(-2.0, 3.0, divisions, f) == pytest.approx(155.0 / 6.0, rel=1e-12)


def test_weights_pattern():
    assert simpson_weights(2).tolist() == [1.0, 4.0, 2.0, 4.0, 1.0]
    w = simpson_weights(10)
    assert w.size == 21  # odd number of samples
    assert w.sum() == pytest.approx(3.0 * 20)


def test_vectorized_matches_scalar():
    scalar = integrate(0.0, math.pi, 100, math.sin)
    vector = integrate(0.0, math.pi, 100, np.sin, vectorized=True)
    assert scalar == pytest.approx(2.0, abs=1e-7)
    assert vector == pytest.approx(scalar, abs=1e-14)


def test_reversed_limits_negate():
    f = lambda x: np.exp(x)
    forward = integrate(0.0, 1.0, 100, f, vectorized=True)
    backward = integrate(1.0, 0.0, 100, f, vectorized=True)
    assert backward == pytest.approx(-forward)
    assert forward == pytest.approx(math.e - 1.0, rel=1e-9)


def test_constant_vectorized_result_broadcasts():
    assert integrate(0.0, 2.0, 3, lambda x: 1.5, vectorized=True) == pytest.approx(3.0)


def test_divisions_must_be_positive():
    with pytest.raises(ValueError):
        integrate(0.0, 1.0, 0, lambda x: x)


def test_non_finite_values_propagate():
    result = integrate(0.0, 1.0, 2, lambda x: float("nan") if x == 0.5 else x)
    assert math.isnan(result)


def test_fourier_coefficients_of_cosine():
    """cos(2πx) on [0, 1]: a(2π) = 1, a(π) = a(3π) = 0 (orthogonality)."""
    f = lambda x: np.cos(2 * np.pi * x)
    assert fourier_coefficient(f, 1.0, 2 * np.pi) == pytest.approx(1.0, abs=1e-9)
    assert fourier_coefficient(f, 1.0, np.pi) == pytest.approx(0.0, abs=1e-9)
    assert fourier_coefficient(f, 1.0, 3 * np.pi) == pytest.approx(0.0, abs=1e-9)


def test_fourier_samples_must_be_even():
    with pytest.raises(ValueError):
        fourier_coefficient(np.cos, 1.0, np.pi, samples=999)
    with pytest.raises(ValueError):
        fourier_coefficient(np.cos, 0.0, np.pi)
