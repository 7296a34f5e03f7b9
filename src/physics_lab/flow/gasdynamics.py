# MIT License (see LICENSE)
"""
Gas-dynamic functions of the reduced velocity λ (compressible flow).

With adiabatic index k and a = (k-1)/(k+1):

    τ(λ) = 1 - a λ²                      temperature ratio T/T*
    π(λ) = τ^{k/(k-1)}                   pressure ratio
    ε(λ) = τ^{1/(k-1)}                   density ratio
    q(λ) = ε λ ((k+1)/2)^{1/(k-1)}       reduced mass flux
    φ(λ) = 1/λ² + 2 ln λ                 impulse-type function
    y(λ) = q / π

τ, π, ε, q and y are defined for 0 <= λ <= λ_max = sqrt((k+1)/(k-1)), where
the temperature reaches zero. φ is defined for λ > 0.

Inverses:
    - τ, π, ε are monotonic and inverted in closed form.
    - q and φ have a turning point at λ = 1 (q has its maximum 1 there, φ its
      minimum 1), so each value has a subsonic (λ < 1) and a supersonic
      (λ > 1) solution. Both are found by Newton-Raphson from 0.5 and 1.5.
      φ is inverted in u = ln λ, where φ = e^{-2u} + 2u stays well conditioned
      for very small and very large λ.
    - y is monotonic and inverted by Newton-Raphson from 1.0.
"""
from __future__ import annotations
import enum
import logging
import math
import sys
from dataclasses import dataclass

from ..config import NumericsConfig, get_config
from ..constants import ADIABATIC_INDEX
from ..errors import OutOfDomain
from ..numerics.roots import RootResult, find_root

logger = logging.getLogger(__name__)

# Starting points on either side of the turning point at λ = 1
SUBSONIC_START: float = 0.5
SUPERSONIC_START: float = 1.5
Y_START: float = 1.0

# Slack for extremum values (q = 1, φ = 1) that come back from a direct
# evaluation with rounding error
_ROUNDING: float = 1e-12

# Largest u with e^u finite
_LOG_MAX: float = math.log(sys.float_info.max)


class FlowFunction(enum.Enum):
    """Identifiers of the six gas-dynamic functions."""
    TAU = "tau"
    PI = "pi"
    EPS = "eps"
    Q = "q"
    PHI = "phi"
    Y = "y"

    @property
    def two_branched(self) -> bool:
        """True for functions whose inverse has two physically valid branches."""
        return self in (FlowFunction.Q, FlowFunction.PHI)


@dataclass(frozen=True)
class FlowFunctionResult:
    """
    Result of inverting a flow function.

    Attributes:
        primary: First (or only) λ. For two-branched functions the subsonic one.
        secondary: Supersonic λ for q and φ, None otherwise.
        converged: False if any Newton-Raphson run stopped at its iteration
                   ceiling; the values are then best estimates only.
    """
    primary: float
    secondary: float | None = None
    converged: bool = True

    def values(self) -> tuple[float, ...]:
        """All λ values present, primary first."""
        if self.secondary is None:
            return (self.primary,)
        return (self.primary, self.secondary)


class FlowFunctions:
    """
    Gas-dynamic functions for a given adiabatic index.

    Args:
        k: Ratio of specific heats (> 1).
        config: Numeric settings for Newton-Raphson (default: global config).
    """

    def __init__(self, k: float = ADIABATIC_INDEX, config: NumericsConfig | None = None) -> None:
        if not k > 1.0:
            raise ValueError(f"Adiabatic index must be > 1, got {k}")
        self.k = float(k)
        self.config = config
        self._a = (k - 1.0) / (k + 1.0)
        # ((k+1)/2)^{1/(k-1)} = (2/(k+1))^{-1/(k-1)}
        self._q_scale = (2.0 / (k + 1.0)) ** (-1.0 / (k - 1.0))
        self.lambda_max = math.sqrt(1.0 / self._a)

    # --- domain checks -------------------------------------------------------

    def _check_lambda(self, lam: float) -> float:
        lam = float(lam)
        if not 0.0 <= lam <= self.lambda_max:
            raise OutOfDomain(f"λ must be within [0, {self.lambda_max:.6g}], got {lam!r}")
        return lam

    # --- direct functions ----------------------------------------------------

    def tau(self, lam: float) -> float:
        lam = self._check_lambda(lam)
        # Clamp rounding noise at λ_max
        return max(0.0, 1.0 - self._a * lam * lam)

    def pi(self, lam: float) -> float:
        return self.tau(lam) ** (self.k / (self.k - 1.0))

    def eps(self, lam: float) -> float:
        return self.tau(lam) ** (1.0 / (self.k - 1.0))

    def q(self, lam: float) -> float:
        return self.eps(lam) * lam * self._q_scale

    def phi(self, lam: float) -> float:
        lam = float(lam)
        if not lam > 0.0:
            raise OutOfDomain(f"φ(λ) requires λ > 0, got {lam!r}")
        return 1.0 / (lam * lam) + 2.0 * math.log(lam)

    def y(self, lam: float) -> float:
        t = self.tau(lam)
        if t == 0.0:
            raise OutOfDomain(f"y(λ) is unbounded at λ = {self.lambda_max:.6g}")
        return self._q_scale * lam / t

    # --- derivatives ---------------------------------------------------------

    def dq_dlambda(self, lam: float) -> float:
        """q'(λ) = (1 - λ²)·((k+1)/2)^{1/(k-1)}·τ^{1/(k-1) - 1}"""
        return (1.0 - lam * lam) * self._q_scale * self.tau(lam) ** (1.0 / (self.k - 1.0) - 1.0)

    @staticmethod
    def _phi_log(u: float) -> float:
        """φ as a function of u = ln λ: e^{-2u} + 2u"""
        return math.exp(-2.0 * u) + 2.0 * u

    @staticmethod
    def _dphi_log(u: float) -> float:
        """dφ/du = 2 - 2e^{-2u}"""
        return 2.0 - 2.0 * math.exp(-2.0 * u)

    def dy_dlambda(self, lam: float) -> float:
        """y'(λ) = ((k+1)/2)^{1/(k-1)}·(1 + aλ²)/τ²"""
        t = self.tau(lam)
        return self._q_scale * (1.0 + self._a * lam * lam) / (t * t)

    # --- inverse functions ---------------------------------------------------

    def lambda_tau(self, tau: float) -> FlowFunctionResult:
        if not 0.0 <= tau <= 1.0:
            raise OutOfDomain(f"τ must be within [0, 1], got {tau!r}")
        return FlowFunctionResult(math.sqrt((1.0 - tau) / self._a))

    def lambda_pi(self, pi: float) -> FlowFunctionResult:
        if not 0.0 <= pi <= 1.0:
            raise OutOfDomain(f"π must be within [0, 1], got {pi!r}")
        return self.lambda_tau(pi ** ((self.k - 1.0) / self.k))

    def lambda_eps(self, eps: float) -> FlowFunctionResult:
        if not 0.0 <= eps <= 1.0:
            raise OutOfDomain(f"ε must be within [0, 1], got {eps!r}")
        return self.lambda_tau(eps ** (self.k - 1.0))

    def _newton(self, target: float, start: float, f, df, bounds) -> RootResult:
        return find_root(target, start, f, df, bounds=bounds, config=self.config or get_config())

    def lambda_q(self, q: float) -> FlowFunctionResult:
        if not 0.0 < q <= 1.0 + _ROUNDING:
            raise OutOfDomain(f"q must be within (0, 1], got {q!r}")
        q = min(q, 1.0)
        bounds = (0.0, self.lambda_max)
        low = self._newton(q, SUBSONIC_START, self.q, self.dq_dlambda, bounds)
        high = self._newton(q, SUPERSONIC_START, self.q, self.dq_dlambda, bounds)
        return FlowFunctionResult(low.value, high.value, low.converged and high.converged)

    def lambda_phi(self, phi: float) -> FlowFunctionResult:
        if not phi >= 1.0 - _ROUNDING:
            raise OutOfDomain(f"φ must be >= 1, got {phi!r}")
        if phi / 2.0 >= _LOG_MAX:
            raise OutOfDomain(f"supersonic λ for φ = {phi!r} exceeds the float range")
        phi = max(phi, 1.0)
        # Solved in u = ln λ. The subsonic root lies in [-ln(2φ)/2, 0], the
        # supersonic one in [0, φ/2].
        low_bounds = (-0.5 * math.log(2.0 * phi) - 1.0, 0.0)
        high_bounds = (0.0, 0.5 * phi + 1.0)
        low = self._newton(phi, math.log(SUBSONIC_START), self._phi_log, self._dphi_log, low_bounds)
        high = self._newton(phi, math.log(SUPERSONIC_START), self._phi_log, self._dphi_log, high_bounds)
        return FlowFunctionResult(math.exp(low.value), math.exp(high.value), low.converged and high.converged)

    def lambda_y(self, y: float) -> FlowFunctionResult:
        if not y >= 0.0:
            raise OutOfDomain(f"y must not be negative, got {y!r}")
        result = self._newton(y, Y_START, self.y, self.dy_dlambda, (0.0, self.lambda_max))
        return FlowFunctionResult(result.value, None, result.converged)

    # --- dispatch ------------------------------------------------------------

    def evaluate(self, function_id: FlowFunction | str, lam: float) -> float:
        """Evaluate the function named by function_id at λ."""
        fid = FlowFunction(function_id)
        return getattr(self, fid.value)(lam)

    def invert(self, function_id: FlowFunction | str, value: float) -> FlowFunctionResult:
        """Find λ such that function_id(λ) = value."""
        fid = FlowFunction(function_id)
        result = getattr(self, f"lambda_{fid.value}")(value)
        if not result.converged:
            logger.warning("Inverse of %s at %g did not fully converge: %s", fid.value, value, result)
        return result

    def table(self, lam: float) -> dict[FlowFunction, float]:
        """All six functions at λ, in declaration order."""
        return {fid: self.evaluate(fid, lam) for fid in FlowFunction}


_default = FlowFunctions()


def evaluate(function_id: FlowFunction | str, lam: float) -> float:
    """Evaluate a flow function for air (k = 1.4)."""
    return _default.evaluate(function_id, lam)


def invert(function_id: FlowFunction | str, value: float) -> FlowFunctionResult:
    """Invert a flow function for air (k = 1.4)."""
    return _default.invert(function_id, value)


def flow_table(lam: float) -> dict[FlowFunction, float]:
    """All six flow functions for air at λ."""
    return _default.table(lam)
