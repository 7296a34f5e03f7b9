# MIT License (see LICENSE)
"""
Simple (mathematical) pendulum.

    θ'' = -g sin θ / L

integrated with semi-implicit Euler: the angular velocity is updated first
and the new velocity moves the angle. Angles are not wrapped; a pendulum
pushed over the top keeps accumulating θ.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import DEFAULT_DT, G
from ..numerics.integrators import semi_implicit_euler_step
from ..params import ParameterList, non_negative, positive
from .base import Model

THETA_0 = 45.0
LENGTH = 1.0


class SimplePendulumModel(Model):
    """
    Parameters:
        theta0: Initial angle in degrees (default 45).
        L: Pendulum length (default 1).
        g: Gravitational acceleration (default 9.81).
        dtime: Time step (default 0.05).
    """
    label = "Simple Pendulum"
    constraints = {"L": positive, "g": non_negative, "dtime": positive}

    def __init__(self, profiler=None) -> None:
        super().__init__(profiler)
        self.dtime = DEFAULT_DT
        self.length = LENGTH
        self.g = G
        self.theta = 0.0
        self.theta_v = 0.0
        self.theta_a = 0.0

    @classmethod
    def default_parameters(cls) -> ParameterList:
        return ParameterList.from_tuples([
            ("theta0", "θ(0)", THETA_0, "Initial pendulum angle"),
            ("L", "L", LENGTH, "Pendulum length"),
            ("g", "g", G, "Gravitational constant"),
            ("dtime", "ΔT", DEFAULT_DT, "Time step delta"),
        ])

    def acceleration(self, position: np.ndarray, velocity: np.ndarray) -> np.ndarray:
        return -self.g * np.sin(position) / self.length

    def _restart(self) -> None:
        p = self.parameters
        self.dtime = p.get("dtime")
        self.theta = math.radians(p.get("theta0"))
        self.theta_v = 0.0
        self.theta_a = 0.0
        self.length = p.get("L")
        self.g = p.get("g")

    def _step(self) -> None:
        self.time += self.dtime
        x, v, a = semi_implicit_euler_step(
            self.acceleration, (self.theta,), (self.theta_v,), self.dtime
        )
        self.theta, self.theta_v, self.theta_a = float(x[0]), float(v[0]), float(a[0])

    def snapshot(self) -> dict:
        return {
            "time": self.time,
            "theta": self.theta,
            "theta_v": self.theta_v,
            "theta_a": self.theta_a,
        }
