# MIT License (see LICENSE)
"""
Exception hierarchy for the numerical core.

Every error raised on purpose by physics_lab derives from PhysicsLabError,
so callers (usually a UI layer) can catch the whole family at once. Each
class also derives from the closest builtin exception, so code that only
knows about KeyError/ValueError/ArithmeticError keeps working.

    PhysicsLabError
    ├── ParameterNotFound        (KeyError)
    ├── InvalidParameterValue    (ValueError)
    ├── ModelNotReady            (RuntimeError)
    └── NumericalError           (ArithmeticError)
        ├── SingularDerivative
        ├── SingularSystem
        ├── NumericalNonConvergence
        └── OutOfDomain          (ValueError)
"""
from __future__ import annotations


class PhysicsLabError(Exception):
    """Base class for all physics_lab errors."""


class ParameterNotFound(PhysicsLabError, KeyError):
    """Requested parameter key is absent from a ParameterList."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No parameter with key '{self.key}' found"


class InvalidParameterValue(PhysicsLabError, ValueError):
    """A parameter value is outside the range a model can work with."""

    def __init__(self, key: str, value: float, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for parameter '{key}': {reason}")
        self.key = key
        self.value = value
        self.reason = reason


class ModelNotReady(PhysicsLabError, RuntimeError):
    """step() was called before the first restart()."""


class NumericalError(PhysicsLabError, ArithmeticError):
    """Base class for failures of the numerical algorithms."""


class SingularDerivative(NumericalError):
    """Newton-Raphson hit a (near) zero derivative."""

    def __init__(self, x: float, derivative: float) -> None:
        super().__init__(f"Derivative {derivative!r} at x={x!r} is too close to zero")
        self.x = x
        self.derivative = derivative


class SingularSystem(NumericalError):
    """A linear system has a zero determinant."""


class NumericalNonConvergence(NumericalError):
    """An iteration ran out of steps before reaching its tolerance."""

    def __init__(self, value: float, iterations: int, message: str | None = None) -> None:
        super().__init__(
            message or f"No convergence after {iterations} iterations (last estimate {value!r})"
        )
        self.value = value
        self.iterations = iterations


class OutOfDomain(NumericalError, ValueError):
    """Function argument lies outside the domain where it is defined."""
