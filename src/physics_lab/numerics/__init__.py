# MIT License (see LICENSE)
"""
Numerical building blocks shared by the models and special functions.

This subpackage provides:
    - Quadrature: composite Simpson rule and Fourier cosine coefficients.
    - Root finding: Newton-Raphson with convergence reporting.
    - Integrators: explicit Euler, semi-implicit Euler and RK4 single steps.

Typical usage:
    from physics_lab.numerics import integrate, find_root, rk4_step

    area = integrate(0.0, 1.0, 1, lambda x: x**3)      # 0.25
    state = rk4_step(derivative, state, dt=0.05)
"""
from .quadrature import integrate, fourier_coefficient, simpson_weights
from .roots import RootResult, find_root
from .integrators import euler_step, semi_implicit_euler_step, rk4_step

__all__ = [
    # Quadrature
    "integrate",
    "fourier_coefficient",
    "simpson_weights",
    # Root finding
    "RootResult",
    "find_root",
    # Integrators
    "euler_step",
    "semi_implicit_euler_step",
    "rk4_step",
]
