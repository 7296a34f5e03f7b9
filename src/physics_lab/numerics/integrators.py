# MIT License (see LICENSE)
"""
Single-step ODE integrators for small fixed-size state vectors.

Models keep their state as a numpy array and call one of these once per
step() with their own derivative function. None of them keeps history or
timing state; they map (state, dt) to the next state.

Available integrators:
- euler_step: Explicit (forward) Euler for first-order systems y' = f(y).
- semi_implicit_euler_step: Velocity-first Euler for second-order systems
  x'' = a(x, x'). The new velocity is used to move the position.
- rk4_step: Classical 4th-order Runge-Kutta for first-order systems.

Reference:
    Euler methods: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
"""
from __future__ import annotations
from typing import Callable

import numpy as np

from ..util import f64

Derivative = Callable[[np.ndarray], np.ndarray]
Acceleration = Callable[[np.ndarray, np.ndarray], np.ndarray]


def euler_step(derivative: Derivative, state: np.ndarray, dt: float) -> np.ndarray:
    """
    Advance y' = f(y) by dt with the explicit Euler method.

        y(t+dt) = y(t) + dt·f(y(t))

    First order; the energy of an oscillator grows every step.

    Args:
        derivative: f(y), returns an array shaped like y.
        state: Current state y(t).
        dt: Time step.

    Returns:
        New state array (the input is not modified).
    """
    y = f64(state)
    return y + dt * f64(derivative(y))


def semi_implicit_euler_step(
    acceleration: Acceleration,
    position: np.ndarray,
    velocity: np.ndarray,
    dt: float,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Advance x'' = a(x, v) by dt with semi-implicit (symplectic) Euler.

        a       = a(x, v)
        v(t+dt) = v + a·dt
        x(t+dt) = x + v(t+dt)·dt

    The acceleration is evaluated once, at the old state. For conservative
    forces that depend on position only, energy oscillates with an O(dt)
    amplitude instead of drifting.

    Args:
        acceleration: a(x, v), returns an array shaped like x.
        position: Generalized coordinates x(t).
        velocity: Generalized velocities v(t).
        dt: Time step.

    Returns:
        Tuple (new_position, new_velocity, acceleration at the old state).
    """
    x = f64(position)
    v = f64(velocity)
    a = f64(acceleration(x, v))
    v_new = v + a * dt
    x_new = x + v_new * dt
    return x_new, v_new, a


def rk4_step(derivative: Derivative, state: np.ndarray, dt: float) -> np.ndarray:
    """
    Advance y' = f(y) by dt using classical 4th-order Runge-Kutta.

    RK4 evaluates the derivative at 4 points within the timestep and combines
    them with weights (1, 2, 2, 1)/6 to achieve O(dt⁵) local error.

    Args:
        derivative: f(y), returns an array shaped like y.
        state: Current state y(t); all components advance together.
        dt: Time step.

    Returns:
        New state array (the input is not modified).
    """
    y0 = f64(state)
    half = 0.5 * dt

    k1 = f64(derivative(y0))
    k2 = f64(derivative(y0 + half * k1))
    k3 = f64(derivative(y0 + half * k2))
    k4 = f64(derivative(y0 + dt * k3))

    return y0 + (dt / 6.0) * (k1 + 2.0 * (k2 + k3) + k4)
