# MIT License (see LICENSE)
"""
Double pendulum integrated with classical RK4.

The equations are non-dimensional: g = 1, the first arm has length 1 and the
first bob mass 1. Parameter "mass" is the ratio m2/m1 and "L" the length of
the second arm. With Δ = θ2 - θ1 the Lagrangian equations of motion solve to

    θ1'' = [m sin Δ (L ω2² + cos θ2) + m sin(2Δ) ω1² / 2 - sin θ1] / (1 + m sin² Δ)
    θ2'' = -(sin θ2 + sin Δ ω1² + cos Δ θ1'') / L

which conserve double_pendulum_energy() exactly.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import DEFAULT_DT
from ..numerics.integrators import rk4_step
from ..params import ParameterList, non_negative, positive
from .base import Model

THETA1_0 = 30.0
THETA2_0 = 45.0
LENGTH = 1.0
MASS = 1.0


def double_pendulum_derivative(state: np.ndarray, mass: float, length: float) -> np.ndarray:
    """
    Right-hand side (θ1', ω1', θ2', ω2') for state (θ1, ω1, θ2, ω2).
    """
    theta1, omega1, theta2, omega2 = state
    d = theta2 - theta1
    sin_d = math.sin(d)

    num = (
        mass * sin_d * (length * omega2 * omega2 + math.cos(theta2))
        + mass * math.sin(2.0 * d) * omega1 * omega1 / 2.0
        - math.sin(theta1)
    )
    alpha1 = num / (1.0 + mass * sin_d * sin_d)
    alpha2 = -(math.sin(theta2) + sin_d * omega1 * omega1 + math.cos(d) * alpha1) / length

    return np.array([omega1, alpha1, omega2, alpha2])


class DoublePendulumModel(Model):
    """
    Parameters:
        theta1_0, theta2_0: Initial angles in degrees (defaults 30 and 45).
        L: Length of the second arm relative to the first (default 1).
        mass: Mass of the second bob relative to the first (default 1).
        dtime: Time step (default 0.05).
    """
    label = "Double pendulum"
    constraints = {"L": positive, "mass": non_negative, "dtime": positive}

    def __init__(self, profiler=None) -> None:
        super().__init__(profiler)
        self.dtime = DEFAULT_DT
        self.length = LENGTH
        self.mass = MASS
        self.state = np.zeros(4)

    @classmethod
    def default_parameters(cls) -> ParameterList:
        return ParameterList.from_tuples([
            ("theta1_0", "θ1(0)", THETA1_0, "Initial angle of first pendulum"),
            ("theta2_0", "θ2(0)", THETA2_0, "Initial angle of second pendulum"),
            ("L", "L", LENGTH, "Length of each pendulum"),
            ("mass", "m", MASS, "Mass of each pendulum"),
            ("dtime", "ΔT", DEFAULT_DT, "Time step delta"),
        ])

    @property
    def theta1(self) -> float:
        return float(self.state[0])

    @property
    def omega1(self) -> float:
        return float(self.state[1])

    @property
    def theta2(self) -> float:
        return float(self.state[2])

    @property
    def omega2(self) -> float:
        return float(self.state[3])

    def derivative(self, state: np.ndarray) -> np.ndarray:
        return double_pendulum_derivative(state, self.mass, self.length)

    def _restart(self) -> None:
        p = self.parameters
        self.dtime = p.get("dtime")
        self.length = p.get("L")
        self.mass = p.get("mass")
        self.state = np.array([
            math.radians(p.get("theta1_0")),
            0.0,
            math.radians(p.get("theta2_0")),
            0.0,
        ])

    def _step(self) -> None:
        self.state = rk4_step(self.derivative, self.state, self.dtime)
        self.time += self.dtime

    def snapshot(self) -> dict:
        return {
            "time": self.time,
            "theta1": self.theta1,
            "omega1": self.omega1,
            "theta2": self.theta2,
            "omega2": self.omega2,
        }
