import math

import pytest
from physics_lab.errors import OutOfDomain
from physics_lab.flow import FlowFunction, FlowFunctions, evaluate, flow_table, invert

ALL_IDS = [f.value for f in FlowFunction]


def test_reference_points_for_air():
    """k = 1.4: τ(0) = 1, τ(λ_max) = 0 with λ_max = sqrt(6); q(1) = φ(1) = 1."""
    ff = FlowFunctions()
    assert ff.lambda_max == pytest.approx(math.sqrt(6.0))
    assert ff.tau(0.0) == 1.0
    assert ff.tau(ff.lambda_max) == pytest.approx(0.0, abs=1e-15)
    assert ff.q(1.0) == pytest.approx(1.0, abs=1e-12)
    assert ff.phi(1.0) == pytest.approx(1.0, abs=1e-15)
    assert ff.pi(1.0) == pytest.approx((5.0 / 6.0) ** 3.5)
    assert ff.y(1.0) == pytest.approx(ff.q(1.0) / ff.pi(1.0))


@pytest.mark.parametrize("fid", ALL_IDS)
def test_round_trip_at_critical_speed(fid):
    lam = 1.0
    result = invert(fid, evaluate(fid, lam))
    assert result.converged
    assert any(abs(v - lam) < 1e-3 for v in result.values()), result


@pytest.mark.parametrize("fid", ALL_IDS)
def test_round_trip_subsonic(fid):
    lam = 0.6
    result = invert(fid, evaluate(fid, lam))
    assert result.primary == pytest.approx(lam, abs=1e-6)


@pytest.mark.parametrize("value", [0.5, 0.8])
def test_q_has_two_branches(value):
    ff = FlowFunctions()
    result = ff.invert(FlowFunction.Q, value)
    assert result.converged
    assert 0.0 < result.primary < 1.0 < result.secondary < ff.lambda_max
    for lam in result.values():
        assert ff.q(lam) == pytest.approx(value, abs=1e-6)


@pytest.mark.parametrize("value", [1.5, 3.0])
def test_phi_has_two_branches(value):
    ff = FlowFunctions()
    result = ff.invert("phi", value)
    assert result.primary < 1.0 < result.secondary
    for lam in result.values():
        assert ff.phi(lam) == pytest.approx(value, abs=1e-6)


@pytest.mark.parametrize("lam", [0.05, 0.1])
def test_phi_round_trip_at_low_speed(lam):
    """
    φ(0.05) ≈ 394: the supersonic partner is about e^{φ/2} ≈ 1e85, where
    dφ/dλ is far below any singularity threshold. Both branches still come back.
    """
    ff = FlowFunctions()
    value = ff.phi(lam)
    result = invert("phi", value)
    assert result.converged
    assert result.primary == pytest.approx(lam, rel=1e-9)
    assert result.secondary > 1e40
    assert ff.phi(result.secondary) == pytest.approx(value, rel=1e-9)


def test_phi_supersonic_root_beyond_float_range():
    with pytest.raises(OutOfDomain):
        invert("phi", 2000.0)



@pytest.mark.parametrize("lam", [0.6, 1.5])
def test_y_inverse_uses_exact_derivative(lam):
    ff = FlowFunctions()
    h = 1e-6
    numeric = (ff.y(lam + h) - ff.y(lam - h)) / (2 * h)
    assert ff.dy_dlambda(lam) == pytest.approx(numeric, rel=1e-6)

    result = ff.lambda_y(ff.y(lam))
    assert result.secondary is None
    assert result.primary == pytest.approx(lam, abs=1e-6)


def test_q_derivative_matches_finite_difference():
    ff = FlowFunctions(k=1.3)
    h = 1e-6
    for lam in (0.3, 0.7, 1.4):
        numeric = (ff.q(lam + h) - ff.q(lam - h)) / (2 * h)
        assert ff.dq_dlambda(lam) == pytest.approx(numeric, rel=1e-6)


def test_other_adiabatic_index():
    ff = FlowFunctions(k=1.3)
    result = ff.lambda_q(ff.q(0.7))
    assert result.primary == pytest.approx(0.7, abs=1e-6)
    assert ff.q(result.secondary) == pytest.approx(ff.q(0.7), abs=1e-6)


def test_closed_form_inverses_are_single_valued():
    assert not FlowFunction.TAU.two_branched
    assert FlowFunction.PHI.two_branched
    assert invert(FlowFunction.PI, 0.5).secondary is None


@pytest.mark.parametrize(
    "fid,value",
    [("tau", 1.5), ("pi", -0.1), ("eps", 2.0), ("q", 1.2), ("q", 0.0), ("phi", 0.5), ("y", -1.0)],
)
def test_inverse_out_of_domain(fid, value):
    with pytest.raises(OutOfDomain):
        invert(fid, value)


def test_direct_out_of_domain():
    with pytest.raises(OutOfDomain):
        evaluate("tau", 3.0)
    with pytest.raises(OutOfDomain):
        evaluate("phi", 0.0)
    with pytest.raises(OutOfDomain):
        evaluate("y", 2.5)
    # OutOfDomain is also a ValueError
    with pytest.raises(ValueError):
        evaluate("q", -0.1)


def test_unknown_function_id():
    with pytest.raises(ValueError):
        evaluate("mach", 0.5)


def test_table_lists_all_functions():
    table = flow_table(0.5)
    assert list(table) == list(FlowFunction)
    assert table[FlowFunction.Y] == pytest.approx(table[FlowFunction.Q] / table[FlowFunction.PI])


def test_invalid_adiabatic_index():
    with pytest.raises(ValueError):
        FlowFunctions(k=1.0)
