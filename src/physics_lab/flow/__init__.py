# MIT License (see LICENSE)
"""
Gas-dynamic flow functions τ, π, ε, q, φ, y and their inverses.

Typical usage:
    from physics_lab.flow import evaluate, invert

    q_val = evaluate("q", 0.6)
    result = invert("q", q_val)      # two branches: subsonic and supersonic
    result.primary, result.secondary
"""
from .gasdynamics import (
    FlowFunction,
    FlowFunctionResult,
    FlowFunctions,
    evaluate,
    invert,
    flow_table,
)

__all__ = [
    "FlowFunction",
    "FlowFunctionResult",
    "FlowFunctions",
    "evaluate",
    "invert",
    "flow_table",
]
