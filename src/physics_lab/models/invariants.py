# MIT License (see LICENSE)
"""
Energies of the pendulum models.

Used to check integrators: without dissipation the total energy should stay
constant up to integration error. All energies are per unit mass of the
(first) bob unless stated otherwise.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np


def simple_pendulum_energy(theta: float, omega: float, length: float, g: float) -> float:
    """
    E = ½ L² ω² + g L (1 - cos θ)

    Args:
        theta: Angle from the vertical in radians.
        omega: Angular velocity in rad/s.
    """
    return float(0.5 * length * length * omega * omega + g * length * (1.0 - np.cos(theta)))


def elastic_pendulum_energy(
    theta: float,
    omega: float,
    x: float,
    x_v: float,
    length: float,
    g: float,
    mass: float,
    k: float,
) -> float:
    """
    E = ½ m (x'² + (L+x)² θ'²) + ½ k x² - m g (L+x) cos θ

    x is the spring stretch beyond the rest length L.
    """
    r = length + x
    kinetic = 0.5 * mass * (x_v * x_v + r * r * omega * omega)
    potential = 0.5 * k * x * x - mass * g * r * np.cos(theta)
    return float(kinetic + potential)


def double_pendulum_energy(state: Sequence[float], mass: float, length: float) -> float:
    """
    Energy of the non-dimensional double pendulum.

    Units: g = 1, first arm length = 1, first mass = 1. mass is the
    second-to-first mass ratio and length the second arm length.

        T = ½(1+m) ω1² + ½ m L² ω2² + m L ω1 ω2 cos(θ1 - θ2)
        V = -(1+m) cos θ1 - m L cos θ2

    Args:
        state: (θ1, ω1, θ2, ω2).
    """
    theta1, omega1, theta2, omega2 = state
    m, L = mass, length
    kinetic = (
        0.5 * (1.0 + m) * omega1 * omega1
        + 0.5 * m * L * L * omega2 * omega2
        + m * L * omega1 * omega2 * np.cos(theta1 - theta2)
    )
    potential = -(1.0 + m) * np.cos(theta1) - m * L * np.cos(theta2)
    return float(kinetic + potential)
