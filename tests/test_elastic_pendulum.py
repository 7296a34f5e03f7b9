import math

import numpy as np
import pytest
from physics_lab.errors import InvalidParameterValue
from physics_lab.models import ElasticPendulumModel
from physics_lab.models.elastic import K, MASS
from physics_lab.models.invariants import elastic_pendulum_energy


def make(theta0, x0, dt):
    model = ElasticPendulumModel()
    params = model.get_parameters()
    params.update({"theta0": theta0, "x0": x0, "dtime": dt})
    model.set_parameters(params)
    model.restart()
    return model


def energy(model):
    return elastic_pendulum_energy(
        model.theta, model.theta_v, model.x, model.x_v, model.length, model.g, model.mass, model.k
    )


def test_hanging_at_equilibrium_stays_put():
    """Static stretch m g / k = 0.327 balances gravity."""
    x_eq = MASS * 9.81 / K
    model = make(0.0, x_eq, 0.01)
    for _ in range(100):
        model.step()
    assert model.x == pytest.approx(x_eq, abs=1e-10)
    assert model.theta == 0.0


def test_vertical_oscillation():
    """
    θ = 0: x'' = -k x / m + g, so from x(0) = 0 at rest
        x(t) = x_eq (1 - cos(sqrt(k/m) t))
    """
    x_eq = MASS * 9.81 / K
    model = make(0.0, 0.0, 0.001)
    for _ in range(500):
        model.step()
    expected = x_eq * (1.0 - math.cos(math.sqrt(K / MASS) * model.time))
    assert model.time == pytest.approx(0.5)
    assert expected == pytest.approx(0.6278, abs=1e-3)
    assert model.x == pytest.approx(expected, abs=1e-2)


def test_energy_nearly_conserved_for_small_steps():
    model = make(10.0, 0.0, 0.0005)
    e0 = energy(model)
    worst = 0.0
    for _ in range(2000):
        model.step()
        worst = max(worst, abs(energy(model) - e0))
    assert worst < 0.05


def test_swing_and_stretch_couple():
    model = make(45.0, 0.0, 0.001)
    xs, thetas = [], []
    for _ in range(2000):
        model.step()
        xs.append(model.x)
        thetas.append(model.theta)
    assert max(xs) > 0.0
    assert min(thetas) < 0.0 < max(thetas)
    assert np.all(np.isfinite(xs))


def test_spring_must_start_with_positive_length():
    model = ElasticPendulumModel()
    params = model.get_parameters()
    params.set("x0", -1.5)
    model.set_parameters(params)
    with pytest.raises(InvalidParameterValue) as info:
        model.restart()
    assert info.value.key == "x0"
