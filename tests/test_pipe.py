import numpy as np
import pytest
from physics_lab.errors import InvalidParameterValue, SingularSystem
from physics_lab.models import BoundaryCondition, PipeModel
from physics_lab.models.pipe import solve_2x2


def make(n=100, sigma=0.1, u="zero", p="left", left="sealed", right="sealed"):
    model = PipeModel()
    params = model.get_parameters()
    params.update({"n": n, "sigma": sigma})
    model.set_parameters(params)
    model.set_initial(u=u, p=p)
    model.set_boundaries(left, right)
    model.restart()
    return model


def test_pulse_splits_into_two_halves():
    """
    With Courant number 1 the scheme is exact: a pressure pulse splits into a
    left- and a right-running half, each shifted by one cell.
    """
    model = make(n=9, sigma=1.0, p="middle")
    np.testing.assert_array_equal(model.p1, [0, 0, 0, 1, 1, 1, 0, 0, 0])
    model.step()
    np.testing.assert_allclose(model.p1, [0, 0, 0.5, 0.5, 1.0, 0.5, 0.5, 0, 0], atol=1e-15)
    np.testing.assert_allclose(model.u1, [0, 0, -0.5, -0.5, 0, 0.5, 0.5, 0, 0], atol=1e-15)


def test_sealed_pipe_conserves_pressure_sum():
    model = make(sigma=0.5, p="left")
    total = model.p1.sum()
    for _ in range(300):
        model.step()
        assert model.u[0] == 0.0 and model.u[-1] == 0.0
    assert model.p1.sum() == pytest.approx(total, rel=1e-10)


def test_open_end_has_zero_pressure():
    model = make(p="right", left="sealed", right="open")
    model.step()
    assert model.p[-1] == 0.0
    assert model.u[0] == 0.0


def test_zero_state_stays_zero():
    model = make(p="zero")
    for _ in range(10):
        model.step()
    assert not model.p1.any() and not model.u1.any()


def test_time_step_from_courant_number():
    model = make(n=50, sigma=0.4)
    assert model.tau == pytest.approx(0.4 * (1.0 / 50) / 1.0)
    for _ in range(3):
        model.step()
    assert model.elapsed_time() == pytest.approx(3 * model.tau)
    assert model.centers[0] == pytest.approx(0.01)
    assert model.snapshot()["p"].shape == (50,)


@pytest.mark.parametrize("key,value", [("sigma", 1.5), ("sigma", 0.0), ("n", 1), ("n", 10.5), ("rho", 0.0)])
def test_invalid_parameters(key, value):
    model = PipeModel()
    params = model.get_parameters()
    params.set(key, value)
    model.set_parameters(params)
    with pytest.raises(InvalidParameterValue):
        model.restart()


def test_degenerate_boundary_is_singular():
    model = make()
    model.set_boundaries(BoundaryCondition(b=0.0, c=0.0), "sealed")
    model.restart()
    with pytest.raises(SingularSystem):
        model.step()


def test_solve_2x2():
    w = solve_2x2(np.array([[2.0, 1.0], [1.0, 3.0]]), np.array([3.0, 5.0]))
    np.testing.assert_allclose(w, [0.8, 1.4])


def test_unknown_names():
    model = PipeModel()
    with pytest.raises(ValueError):
        model.set_initial(p="spike")
    with pytest.raises(ValueError):
        model.set_boundaries("sealed", "leaky")
