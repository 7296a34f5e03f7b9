# MIT License (see LICENSE)
"""
Two identical pendulums joined by a spring (small-angle approximation).

This model does not integrate anything. The linearized system splits into
two normal modes, in-phase with ω1 = sqrt(g/L) and anti-phase with
ω2 = sqrt(g/L + 2k/m), so the angles are a closed-form function of time:

    θ1(t) = a/2 cos(ω1 t) + b/2 cos(ω2 t)
    θ2(t) = a/2 cos(ω1 t) - b/2 cos(ω2 t)

with a = θ1(0) + θ2(0) and b = θ1(0) - θ2(0). step() only advances time.
"""
from __future__ import annotations
import math

from ..constants import DEFAULT_DT, G
from ..params import ParameterList, non_negative, positive
from .base import Model

THETA1_0 = 45.0
THETA2_0 = 30.0
LENGTH = 1.0
MASS = 1.0
K = 30.0


class CoupledPendulumsModel(Model):
    """
    Parameters:
        theta1_0, theta2_0: Initial angles in degrees (defaults 45 and 30).
        L: Pendulum length (default 1).
        mass: Mass of each bob (default 1).
        k: Spring constant (default 30).
        g: Gravitational acceleration (default 9.81).
        dtime: Time step (default 0.05).
    """
    label = "Coupled pendulums"
    constraints = {
        "L": positive,
        "mass": positive,
        "k": non_negative,
        "g": non_negative,
        "dtime": positive,
    }

    def __init__(self, profiler=None) -> None:
        super().__init__(profiler)
        self.dtime = DEFAULT_DT
        self.theta1 = self.theta2 = 0.0
        self.omega1 = self.omega2 = 0.0
        self.a = self.b = 0.0

    @classmethod
    def default_parameters(cls) -> ParameterList:
        return ParameterList.from_tuples([
            ("theta1_0", "θ1(0)", THETA1_0, "Initial angle of left pendulum"),
            ("theta2_0", "θ2(0)", THETA2_0, "Initial angle of right pendulum"),
            ("L", "L", LENGTH, "Pendulum length"),
            ("mass", "m", MASS, "Mass of each pendulum"),
            ("k", "k", K, "Spring constant"),
            ("g", "g", G, "Gravitational constant"),
            ("dtime", "ΔT", DEFAULT_DT, "Time step delta"),
        ])

    def _restart(self) -> None:
        p = self.parameters
        self.dtime = p.get("dtime")
        self.theta1 = math.radians(p.get("theta1_0"))
        self.theta2 = math.radians(p.get("theta2_0"))

        length, mass, k, g = p.get("L"), p.get("mass"), p.get("k"), p.get("g")
        self.omega1 = math.sqrt(g / length)
        self.omega2 = math.sqrt(g / length + 2.0 * k / mass)

        self.a = self.theta1 + self.theta2
        self.b = self.theta1 - self.theta2

    def angles_at(self, t: float) -> tuple[float, float]:
        """(θ1, θ2) at time t for the current normal-mode amplitudes."""
        in_phase = 0.5 * self.a * math.cos(self.omega1 * t)
        anti_phase = 0.5 * self.b * math.cos(self.omega2 * t)
        return in_phase + anti_phase, in_phase - anti_phase

    def _step(self) -> None:
        self.time += self.dtime
        self.theta1, self.theta2 = self.angles_at(self.time)

    def snapshot(self) -> dict:
        return {"time": self.time, "theta1": self.theta1, "theta2": self.theta2}
