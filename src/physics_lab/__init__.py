# MIT License (see LICENSE)
"""
physics_lab - numerical core of a set of small physics demonstrators.

This package provides the computations behind pendulum simulators, a
standing-wave viewer, an acoustic pipe, a gas-dynamics calculator and a
Bessel function plotter. It returns numbers and arrays only; drawing,
widgets and event loops belong to the application using it.

Main entry points:
    - make_model / ModelKind: time-stepping models with restart()/step().
    - ParameterList: named numeric parameters feeding the models.
    - evaluate / invert: gas-dynamic flow functions τ, π, ε, q, φ, y.
    - y0_by_integration / y0_by_series: Bessel Y0 by two methods.

Submodules:
    - numerics: Simpson quadrature, Newton-Raphson, Euler and RK4 steps.
    - special: Bessel functions.
    - flow: Gas-dynamic functions and their inverses.
    - models: Pendulums, wave basin, acoustic pipe.

Example:
    from physics_lab import make_model

    model = make_model("simple_pendulum")
    model.restart()
    model.step()
    print(model.snapshot()["theta"])
"""
from .errors import (
    PhysicsLabError,
    ParameterNotFound,
    InvalidParameterValue,
    ModelNotReady,
    NumericalError,
    SingularDerivative,
    SingularSystem,
    NumericalNonConvergence,
    OutOfDomain,
)
from .config import NumericsConfig, get_config, set_config
from .params import Parameter, ParameterList
from .numerics import integrate, find_root, RootResult, euler_step, semi_implicit_euler_step, rk4_step
from .special import y0_by_integration, y0_by_series, j0
from .flow import FlowFunction, FlowFunctionResult, evaluate, invert
from .models import Model, ModelKind, ModelStatus, make_model
from .logging_config import setup_logging

__all__ = [
    # Errors
    "PhysicsLabError",
    "ParameterNotFound",
    "InvalidParameterValue",
    "ModelNotReady",
    "NumericalError",
    "SingularDerivative",
    "SingularSystem",
    "NumericalNonConvergence",
    "OutOfDomain",
    # Configuration
    "NumericsConfig",
    "get_config",
    "set_config",
    "setup_logging",
    # Parameters
    "Parameter",
    "ParameterList",
    # Numerics
    "integrate",
    "find_root",
    "RootResult",
    "euler_step",
    "semi_implicit_euler_step",
    "rk4_step",
    # Special functions
    "j0",
    "y0_by_integration",
    "y0_by_series",
    # Flow functions
    "FlowFunction",
    "FlowFunctionResult",
    "evaluate",
    "invert",
    # Models
    "Model",
    "ModelKind",
    "ModelStatus",
    "make_model",
]
