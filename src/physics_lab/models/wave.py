# MIT License (see LICENSE)
"""
Standing gravity waves in a rectangular basin (linear potential theory).

The basin has width delta and depth h. At t = 0 the free surface is at rest
with elevation epsilon·s(x/delta), where s is one of SURFACES. The
elevation is expanded in the cosine modes k_n = nπ/delta (n = 1..maxn):

    a_n = 2/delta ∫_0^delta epsilon·s(x/delta) cos(k_n x) dx      (Simpson)
    σ_n² = g k_n tanh(k_n h)                                         (dispersion)

A fluid particle at rest position (x0, z0), -h <= z0 <= 0, is displaced to

    x = x0 + g Σ_n G_x,n sin(k_n x0)
    z = z0 - g Σ_n G_z,n cos(k_n x0)

with
    G_x,n = -k_n a_n cosh(k_n(z0+h)) cos(σ_n t) / (σ_n² cosh(k_n h))
    G_z,n = -k_n a_n sinh(k_n(z0+h)) cos(σ_n t) / (σ_n² cosh(k_n h))

At the surface (z0 = 0, t = 0) this reduces to z = Σ a_n cos(k_n x0), the
cosine series of the initial elevation. The bottom row never moves
vertically. The mean level (n = 0 term) is not represented.

Particles are laid out on an xn × zn grid of rest positions; time is
frame·dtime, so positions do not accumulate rounding drift.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Callable, NamedTuple

import numpy as np

from ..config import NumericsConfig
from ..constants import G
from ..numerics.quadrature import fourier_coefficient
from ..params import ParameterList, integer_at_least, non_negative, positive
from ..util import cosh_ratio, sinh_ratio
from .base import Model

logger = logging.getLogger(__name__)

DELTA = 1.0
EPSILON = 0.1
DEPTH = 0.3
DTIME = 0.01
XN = 30
ZN = 15
MAXN = 50

SurfaceFunc = Callable[[np.ndarray], np.ndarray]

SURFACES: dict[str, SurfaceFunc] = {
    "linear": lambda x: x - 0.5,
    "sine": lambda x: np.sin(2.0 * np.pi * x),
    "cosine": lambda x: np.cos(2.0 * np.pi * x),
    "halfsine": lambda x: np.sin(np.pi * (x + 0.5)),
}


@dataclass(frozen=True)
class Particle:
    """
    Coefficients of one Fourier harmonic.

    Attributes:
        k: Wave number nπ/delta.
        a: Fourier amplitude of the initial surface.
        sigma2: Squared angular frequency g k tanh(k h).
        sigma: Angular frequency.
    """
    k: float
    a: float
    sigma2: float
    sigma: float


class Point(NamedTuple):
    """Displaced position (x, z) and rest position (x0, z0) of one particle."""
    x: float
    z: float
    x0: float
    z0: float


@dataclass
class PointGrid:
    """
    xn × zn particles stored as flat arrays.

    Index idx = i·zn + j is column i (x0 = i·dx) and row j (z0 = -j·dz), so
    row 0 is the free surface and row zn-1 the bottom.
    """
    xn: int
    zn: int
    x: np.ndarray
    z: np.ndarray
    x0: np.ndarray
    z0: np.ndarray

    def __len__(self) -> int:
        return self.xn * self.zn

    def point(self, i: int, j: int) -> Point:
        idx = i * self.zn + j
        return Point(float(self.x[idx]), float(self.z[idx]), float(self.x0[idx]), float(self.z0[idx]))

    def row(self, j: int) -> tuple[np.ndarray, np.ndarray]:
        """Displaced (x, z) of all particles with rest depth index j."""
        return self.x[j::self.zn], self.z[j::self.zn]


class WaveModel(Model):
    """
    Parameters:
        g: Gravitational acceleration (default 9.81).
        delta: Basin width (default 1).
        epsilon: Initial surface amplitude (default 0.1).
        h: Basin depth (default 0.3).
        dtime: Time step (default 0.01).
        xn, zn: Grid size along x and z (defaults 30 and 15).
        maxn: Number of Fourier harmonics (default 50).

    The initial surface shape is picked with set_surface() by name.
    """
    label = "Wave"
    constraints = {
        "g": non_negative,
        "delta": positive,
        "epsilon": lambda v: None,
        "h": positive,
        "dtime": positive,
        "xn": integer_at_least(2),
        "zn": integer_at_least(2),
        "maxn": integer_at_least(1),
    }

    def __init__(self, surface: str = "linear", profiler=None, config: NumericsConfig | None = None) -> None:
        super().__init__(profiler)
        self.config = config
        self.surface = "linear"
        self.set_surface(surface)
        self.frame = 0
        self.particles: tuple[Particle, ...] = ()
        self.grid: PointGrid | None = None
        self._reset_fields()

    def _reset_fields(self) -> None:
        p = self.parameters
        self.g = p.get("g")
        self.delta = p.get("delta")
        self.epsilon = p.get("epsilon")
        self.h = p.get("h")
        self.dtime = p.get("dtime")
        self.xn = int(p.get("xn"))
        self.zn = int(p.get("zn"))
        self.maxn = int(p.get("maxn"))

    @classmethod
    def default_parameters(cls) -> ParameterList:
        return ParameterList.from_tuples([
            ("g", "g", G, "Gravitational constant"),
            ("delta", "δ", DELTA, "Basin width"),
            ("epsilon", "ε", EPSILON, "Initial surface amplitude"),
            ("h", "h", DEPTH, "Basin depth"),
            ("dtime", "ΔT", DTIME, "Time step delta"),
            ("xn", "Nx", XN, "Number of points along x"),
            ("zn", "Nz", ZN, "Number of points along z"),
            ("maxn", "N", MAXN, "Number of Fourier harmonics"),
        ])

    def set_surface(self, name: str) -> None:
        """Select the initial surface shape; takes effect at restart()."""
        if name not in SURFACES:
            raise ValueError(f"Unknown surface type: '{name}' (expected one of {sorted(SURFACES)})")
        self.surface = name

    def surface_elevation(self, x: np.ndarray) -> np.ndarray:
        """Initial surface elevation epsilon·s(x/delta)."""
        return self.epsilon * SURFACES[self.surface](np.asarray(x) / self.delta)

    # --- coefficients --------------------------------------------------------

    def _calc_coeffs(self) -> None:
        particles = []
        for n in range(1, self.maxn + 1):
            k = math.pi * n / self.delta
            a = fourier_coefficient(self.surface_elevation, self.delta, k, config=self.config)
            sigma2 = self.g * k * math.tanh(k * self.h)
            particles.append(Particle(k=k, a=a, sigma2=sigma2, sigma=math.sqrt(sigma2)))
        self.particles = tuple(particles)

        self._k = np.array([p.k for p in particles])
        self._a = np.array([p.a for p in particles])
        self._sigma = np.array([p.sigma for p in particles])
        self._sigma2 = np.array([p.sigma2 for p in particles])

    def displacement(self, x0: np.ndarray, z0: np.ndarray, t: float) -> tuple[np.ndarray, np.ndarray]:
        """
        Horizontal and vertical displacement functions (f_x, f_z) at time t.

        Particle positions are x = x0 + f_x and z = z0 - f_z.
        """
        x0 = np.atleast_1d(np.asarray(x0, dtype=np.float64))[:, None]
        z0 = np.atleast_1d(np.asarray(z0, dtype=np.float64))[:, None]
        k = self._k[None, :]

        # g / σ² = 1 / (k tanh kh); zero harmonics (g = 0) carry no motion
        with np.errstate(divide="ignore", invalid="ignore"):
            scale = np.where(self._sigma2 > 0, self.g / self._sigma2, 0.0)
        common = -(self._k * self._a * scale * np.cos(self._sigma * t))[None, :]

        f_x = np.sum(common * cosh_ratio(k, z0, self.h) * np.sin(k * x0), axis=1)
        f_z = np.sum(common * sinh_ratio(k, z0, self.h) * np.cos(k * x0), axis=1)
        return f_x, f_z

    def _update_points(self) -> None:
        grid = self.grid
        f_x, f_z = self.displacement(grid.x0, grid.z0, self.time)
        grid.x = grid.x0 + f_x
        grid.z = grid.z0 - f_z

    # --- life cycle ----------------------------------------------------------

    def _restart(self) -> None:
        self._reset_fields()
        self.frame = 0
        if self.profiler is not None:
            self.profiler.stats.discard("step")
        self._calc_coeffs()

        dx = self.delta / (self.xn - 1)
        dz = self.h / (self.zn - 1)
        idx = np.arange(self.xn * self.zn)
        x0 = dx * (idx // self.zn)
        z0 = -dz * (idx % self.zn)
        self.grid = PointGrid(self.xn, self.zn, x0.copy(), z0.copy(), x0, z0)
        self._update_points()

        logger.debug(
            "Wave model reset: surface=%s, %d harmonics, lowest σ=%.4g",
            self.surface, self.maxn, self.particles[0].sigma,
        )

    def _step(self) -> None:
        self.frame += 1
        self.time = self.frame * self.dtime
        self._update_points()

    def benchmark(self) -> float:
        """Mean step() duration in microseconds (0.0 without a profiler)."""
        if self.profiler is None:
            return 0.0
        return 1e6 * self.profiler.stats.mean("step")

    def snapshot(self) -> dict:
        return {
            "time": self.time,
            "frame": self.frame,
            "x": self.grid.x.copy() if self.grid else None,
            "z": self.grid.z.copy() if self.grid else None,
        }
