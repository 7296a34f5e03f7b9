import math

import numpy as np
import pytest
from physics_lab.models import DoublePendulumModel, double_pendulum_derivative
from physics_lab.models.invariants import double_pendulum_energy
from physics_lab.numerics import euler_step, rk4_step


def mass_matrix_derivative(state, m, L):
    """
    Reference derivative from the Lagrangian (g = 1, l1 = 1, m1 = 1):

        [1+m        mL cosΔ] [θ1'']   [-mL ω2² sin(θ1-θ2) - (1+m) sin θ1]
        [mL cosΔ    mL²    ] [θ2''] = [ mL ω1² sin(θ1-θ2) - mL sin θ2   ]
    """
    t1, w1, t2, w2 = state
    c = math.cos(t1 - t2)
    s = math.sin(t1 - t2)
    M = np.array([[1 + m, m * L * c], [m * L * c, m * L * L]])
    rhs = np.array([
        -m * L * w2 * w2 * s - (1 + m) * math.sin(t1),
        m * L * w1 * w1 * s - m * L * math.sin(t2),
    ])
    a1, a2 = np.linalg.solve(M, rhs)
    return np.array([w1, a1, w2, a2])


def sin_variant_derivative(state, m, L):
    """Same as the model but with sin θ2 in place of cos θ2 in θ1''."""
    t1, w1, t2, w2 = state
    d = t2 - t1
    num = m * math.sin(d) * (L * w2 * w2 + math.sin(t2)) + m * math.sin(2 * d) * w1 * w1 / 2 - math.sin(t1)
    a1 = num / (1 + m * math.sin(d) ** 2)
    a2 = -(math.sin(t2) + math.sin(d) * w1 * w1 + math.cos(d) * a1) / L
    return np.array([w1, a1, w2, a2])


def test_derivative_matches_lagrangian():
    rng = np.random.default_rng(0)
    for _ in range(50):
        state = rng.uniform(-3.0, 3.0, size=4)
        m = rng.uniform(0.1, 3.0)
        L = rng.uniform(0.3, 2.0)
        np.testing.assert_allclose(
            double_pendulum_derivative(state, m, L),
            mass_matrix_derivative(state, m, L),
            rtol=1e-10, atol=1e-12,
        )


def test_rk4_conserves_energy():
    model = DoublePendulumModel()
    params = model.get_parameters()
    params.set("dtime", 0.01)
    model.set_parameters(params)
    model.restart()
    e0 = double_pendulum_energy(model.state, model.mass, model.length)
    worst = 0.0
    for _ in range(1000):
        model.step()
        worst = max(worst, abs(double_pendulum_energy(model.state, model.mass, model.length) - e0))
    print("max |E - E0| over 10 s:", worst)
    assert worst < 1e-4
    assert model.elapsed_time() == pytest.approx(10.0)


def test_sin_variant_does_not_conserve_energy():
    """The sin θ2 form breaks energy conservation; the model must not use it."""
    state = np.array([math.radians(30.0), 0.0, math.radians(10.0), 0.0])
    e0 = double_pendulum_energy(state, 1.0, 1.0)
    worst = 0.0
    for _ in range(1000):
        state = rk4_step(lambda y: sin_variant_derivative(y, 1.0, 1.0), state, 0.01)
        worst = max(worst, abs(double_pendulum_energy(state, 1.0, 1.0) - e0))
    assert worst > 1e-2


def test_small_angle_rk4_beats_euler():
    """
    Linearized: θ'' = A θ with A = [[-(1+m), m], [(1+m)/L, -(1+m)/L]].
    From rest, θ(t) = V cos(sqrt(-λ) t) V⁻¹ θ0.
    """
    m, L, dt, T = 1.0, 1.0, 0.01, 5.0
    A = np.array([[-(1 + m), m], [(1 + m) / L, -(1 + m) / L]])
    lam, V = np.linalg.eig(A)
    theta0 = np.radians([0.5, 0.25])
    steps = int(round(T / dt))
    t = steps * dt
    exact = np.real(V @ np.diag(np.cos(np.sqrt(-lam) * t)) @ np.linalg.solve(V, theta0))

    f = lambda y: double_pendulum_derivative(y, m, L)
    y_rk4 = y_euler = np.array([theta0[0], 0.0, theta0[1], 0.0])
    for _ in range(steps):
        y_rk4 = rk4_step(f, y_rk4, dt)
        y_euler = euler_step(f, y_euler, dt)

    err_rk4 = np.max(np.abs(y_rk4[[0, 2]] - exact))
    err_euler = np.max(np.abs(y_euler[[0, 2]] - exact))
    print(f"RK4 error {err_rk4:.2e}, Euler error {err_euler:.2e}")
    assert err_rk4 < 1e-5
    assert err_rk4 < 0.05 * err_euler


def test_restart_zeroes_angular_velocities():
    model = DoublePendulumModel()
    model.restart()
    for _ in range(10):
        model.step()
    assert model.omega1 != 0.0
    model.restart()
    assert model.omega1 == 0.0 and model.omega2 == 0.0
    assert model.theta1 == pytest.approx(math.radians(30.0))
    assert model.theta2 == pytest.approx(math.radians(45.0))


def test_parameters_flow_into_derivative():
    model = DoublePendulumModel()
    params = model.get_parameters()
    params.set("L", 2.0)
    params.set("mass", 0.5)
    model.set_parameters(params)
    model.restart()
    np.testing.assert_allclose(model.derivative(model.state), mass_matrix_derivative(model.state, 0.5, 2.0))
