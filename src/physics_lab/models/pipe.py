# MIT License (see LICENSE)
"""
One-dimensional linear acoustics in a pipe.

Velocity u and pressure p obey

    ρ u_t + p_x = 0,        p_t + ρ a² u_x = 0

on 0 <= x <= len. The pipe is split into n cells; u1, p1 hold cell averages.
Each step first computes node values (u, p) at the n + 1 cell edges from the
Riemann invariants u ± p/(ρa) of the neighbouring cells, then updates the
cells in conservation form (a Godunov-type scheme). The time step is
tau = sigma·h/a, where sigma <= 1 is the Courant number; sigma = 1 moves
every wave exactly one cell per step.

Boundary conditions are c·u + b·p = 0 at each tip:
    SEALED (b=0, c=1): u = 0, a closed end.
    OPEN   (b=1, c=0): p = 0, an open end.
Combined with the outgoing characteristic this gives a 2×2 linear system per
tip, solved with Cramer's rule.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from ..errors import SingularSystem
from ..params import ParameterList, integer_at_least, positive
from .base import Model

logger = logging.getLogger(__name__)

LEN = 1.0
N = 100
SOUND_SPEED = 1.0
RHO = 1.0
SIGMA = 0.1


@dataclass(frozen=True)
class BoundaryCondition:
    """Coefficients of c·u + b·p = 0."""
    b: float
    c: float


BOUNDARY_SEALED = BoundaryCondition(b=0.0, c=1.0)
BOUNDARY_OPEN = BoundaryCondition(b=1.0, c=0.0)

BOUNDARIES: dict[str, BoundaryCondition] = {
    "sealed": BOUNDARY_SEALED,
    "open": BOUNDARY_OPEN,
}

ProfileFunc = Callable[[np.ndarray], np.ndarray]

# Initial profiles of the relative coordinate s = x/len in [0, 1]
PROFILES: dict[str, ProfileFunc] = {
    "zero": lambda s: np.zeros_like(s),
    "edges": lambda s: np.where((s * 3.0 < 1.0) | (s * 3.0 > 2.0), 1.0, 0.0),
    "left": lambda s: np.where(s * 3.0 < 1.0, 1.0, 0.0),
    "middle": lambda s: np.where((s * 3.0 > 1.0) & (s * 3.0 < 2.0), 1.0, 0.0),
    "right": lambda s: np.where(s * 3.0 > 2.0, 1.0, 0.0),
    "step_up": lambda s: np.where(s < 0.5, -1.0, 1.0),
    "step_down": lambda s: np.where(s < 0.5, 1.0, -1.0),
}


def solve_2x2(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Solve a 2×2 linear system a·w = b by Cramer's rule.

    Raises:
        SingularSystem: The determinant is zero.
    """
    delta = a[0][0] * a[1][1] - a[1][0] * a[0][1]
    if delta == 0.0:
        raise SingularSystem(f"Singular 2x2 system {a!r}")
    return np.array([
        (b[0] * a[1][1] - b[1] * a[0][1]) / delta,
        (b[1] * a[0][0] - b[0] * a[1][0]) / delta,
    ])


class PipeModel(Model):
    """
    Parameters:
        len: Pipe length (default 1).
        n: Number of cells (default 100).
        a: Speed of sound (default 1).
        rho: Density (default 1).
        sigma: Courant number tau·a/h, within (0, 1] (default 0.1).

    Boundary conditions and initial profiles are chosen by name with
    set_boundaries() and set_initial(); they take effect at restart().
    """
    label = "Pipe"
    constraints = {
        "len": positive,
        "n": integer_at_least(2),
        "a": positive,
        "rho": positive,
        "sigma": lambda v: None if 0.0 < v <= 1.0 else "must be within (0, 1]",
    }

    def __init__(self, profiler=None) -> None:
        super().__init__(profiler)
        self.left = BOUNDARY_SEALED
        self.right = BOUNDARY_SEALED
        self.initial_u = "zero"
        self.initial_p = "left"
        self.length = LEN
        self.n = N
        self.h = LEN / N
        self.x = np.zeros(0)
        self.u1 = np.zeros(0)
        self.p1 = np.zeros(0)
        self.u = np.zeros(0)
        self.p = np.zeros(0)
        self.tau = 0.0

    @classmethod
    def default_parameters(cls) -> ParameterList:
        return ParameterList.from_tuples([
            ("len", "L", LEN, "Pipe length"),
            ("n", "N", N, "Number of cells"),
            ("a", "a", SOUND_SPEED, "Speed of sound"),
            ("rho", "ρ", RHO, "Density"),
            ("sigma", "σ", SIGMA, "Courant number"),
        ])

    def set_boundaries(self, left: str | BoundaryCondition, right: str | BoundaryCondition) -> None:
        """Set tip conditions by name ("sealed", "open") or explicit coefficients."""
        self.left = self._boundary(left)
        self.right = self._boundary(right)

    @staticmethod
    def _boundary(cond: str | BoundaryCondition) -> BoundaryCondition:
        if isinstance(cond, BoundaryCondition):
            return cond
        if cond not in BOUNDARIES:
            raise ValueError(f"Unknown boundary condition: '{cond}' (expected one of {sorted(BOUNDARIES)})")
        return BOUNDARIES[cond]

    def set_initial(self, u: str | None = None, p: str | None = None) -> None:
        """Pick initial velocity and/or pressure profiles by name (see PROFILES)."""
        for name in (u, p):
            if name is not None and name not in PROFILES:
                raise ValueError(f"Unknown initial profile: '{name}' (expected one of {sorted(PROFILES)})")
        if u is not None:
            self.initial_u = u
        if p is not None:
            self.initial_p = p

    @property
    def centers(self) -> np.ndarray:
        """Cell center coordinates."""
        return self.x[:-1] + 0.5 * self.h

    def _restart(self) -> None:
        p = self.parameters
        self.length = p.get("len")
        self.n = int(p.get("n"))
        self.a = p.get("a")
        self.rho = p.get("rho")
        self.sigma = p.get("sigma")

        self.h = self.length / self.n
        self.tau = self.sigma * self.h / self.a
        self.rho_a = self.rho * self.a
        self.tau_h = self.tau / self.h

        self.x = self.h * np.arange(self.n + 1)
        s = self.centers / self.length
        self.u1 = PROFILES[self.initial_u](s).astype(np.float64)
        self.p1 = PROFILES[self.initial_p](s).astype(np.float64)
        self.u = np.zeros(self.n + 1)
        self.p = np.zeros(self.n + 1)
        logger.debug("Pipe reset: n=%d, tau=%.4g, u=%s, p=%s", self.n, self.tau, self.initial_u, self.initial_p)

    def _step(self) -> None:
        self.time += self.tau
        ra = self.rho_a
        u1, p1 = self.u1, self.p1

        # Left tip: incoming invariant u - p/(ρa) from the first cell
        w = solve_2x2(
            np.array([[1.0, -1.0 / ra], [self.left.c, self.left.b]]),
            np.array([u1[0] - p1[0] / ra, 0.0]),
        )
        self.u[0], self.p[0] = w

        # Right tip: invariant u + p/(ρa) from the last cell
        w = solve_2x2(
            np.array([[1.0, 1.0 / ra], [self.right.c, self.right.b]]),
            np.array([u1[-1] + p1[-1] / ra, 0.0]),
        )
        self.u[-1], self.p[-1] = w

        # Interior edges
        self.u[1:-1] = ((u1[1:] + u1[:-1]) - (p1[1:] - p1[:-1]) / ra) / 2.0
        self.p[1:-1] = ((p1[1:] + p1[:-1]) - (u1[1:] - u1[:-1]) * ra) / 2.0

        self.u1 = u1 - np.diff(self.p) * self.tau_h / self.rho
        self.p1 = p1 - np.diff(self.u) * ra * self.tau_h * self.a

    def snapshot(self) -> dict:
        return {"time": self.time, "u": self.u1.copy(), "p": self.p1.copy()}
