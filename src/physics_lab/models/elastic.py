# MIT License (see LICENSE)
"""
Elastic (spring) pendulum: a bob on a spring that can swing and stretch.

With x the stretch beyond the rest length L (positive = longer):

    x'' = (L + x) θ'² - k x / m + g cos θ
    θ'' = -(g sin θ + 2 x' θ') / (L + x)

Both accelerations are evaluated at the old state, then velocities and
positions advance with semi-implicit Euler. The spring constant and bob mass
are fixed (k = 30, m = 1); the equilibrium stretch is m g / k.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import DEFAULT_DT, G
from ..errors import InvalidParameterValue
from ..numerics.integrators import semi_implicit_euler_step
from ..params import ParameterList, non_negative, positive
from .base import Model

THETA_0 = 45.0
X_0 = 0.0
LENGTH = 1.0
MASS = 1.0
K = 30.0


class ElasticPendulumModel(Model):
    """
    Parameters:
        theta0: Initial angle in degrees (default 45).
        L: Spring rest length (default 1).
        x0: Initial spring stretch (default 0).
        g: Gravitational acceleration (default 9.81).
        dtime: Time step (default 0.05).
    """
    label = "Elastic Pendulum"
    constraints = {"L": positive, "g": non_negative, "dtime": positive}

    def __init__(self, profiler=None) -> None:
        super().__init__(profiler)
        self.dtime = DEFAULT_DT
        self.length = LENGTH
        self.mass = MASS
        self.k = K
        self.g = G
        self.theta = self.theta_v = self.theta_a = 0.0
        self.x = self.x_v = self.x_a = 0.0

    @classmethod
    def default_parameters(cls) -> ParameterList:
        return ParameterList.from_tuples([
            ("theta0", "θ(0)", THETA_0, "Initial pendulum angle"),
            ("L", "L", LENGTH, "Spring rest length"),
            ("x0", "x(0)", X_0, "Initial spring stretch"),
            ("g", "g", G, "Gravitational constant"),
            ("dtime", "ΔT", DEFAULT_DT, "Time step delta"),
        ])

    def validate(self) -> None:
        super().validate()
        length, x0 = self.parameters.get("L"), self.parameters.get("x0")
        if length + x0 <= 0:
            raise InvalidParameterValue("x0", x0, f"spring would start with non-positive length {length + x0:g}")

    def acceleration(self, position: np.ndarray, velocity: np.ndarray) -> np.ndarray:
        """(x'', θ'') for position (x, θ) and velocity (x', θ')."""
        x, theta = position
        x_v, theta_v = velocity
        r = self.length + x
        x_a = r * theta_v * theta_v - self.k * x / self.mass + self.g * np.cos(theta)
        theta_a = -(self.g * np.sin(theta) + 2.0 * x_v * theta_v) / r
        return np.array([x_a, theta_a])

    def _restart(self) -> None:
        p = self.parameters
        self.dtime = p.get("dtime")
        self.length = p.get("L")
        self.theta = math.radians(p.get("theta0"))
        self.theta_v = self.theta_a = 0.0
        self.x = p.get("x0")
        self.x_v = self.x_a = 0.0
        self.g = p.get("g")

    def _step(self) -> None:
        self.time += self.dtime
        pos, vel, acc = semi_implicit_euler_step(
            self.acceleration, (self.x, self.theta), (self.x_v, self.theta_v), self.dtime
        )
        self.x, self.theta = float(pos[0]), float(pos[1])
        self.x_v, self.theta_v = float(vel[0]), float(vel[1])
        self.x_a, self.theta_a = float(acc[0]), float(acc[1])

    def snapshot(self) -> dict:
        return {
            "time": self.time,
            "theta": self.theta,
            "theta_v": self.theta_v,
            "theta_a": self.theta_a,
            "x": self.x,
            "x_v": self.x_v,
            "x_a": self.x_a,
        }
