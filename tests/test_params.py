import pytest
from physics_lab.errors import InvalidParameterValue, ParameterNotFound, PhysicsLabError
from physics_lab.params import Parameter, ParameterList, integer_at_least, non_negative, positive


def make_list():
    return ParameterList.from_tuples([
        ("L", "L", 1.0, "Pendulum length"),
        ("g", "g", 9.81, "Gravitational constant"),
        ("dtime", "ΔT", 0.05, "Time step"),
    ])


def test_get_set_and_order():
    params = make_list()
    assert params.keys() == ["L", "g", "dtime"]
    assert params.get("g") == 9.81
    params.set("L", 2)
    assert params.get("L") == 2.0
    assert isinstance(params.get("L"), float)
    assert params.get_title("dtime") == "ΔT"
    assert params.get_tooltip("L") == "Pendulum length"
    assert "g" in params and "h" not in params
    assert len(params) == 3


def test_missing_key_raises():
    params = make_list()
    with pytest.raises(ParameterNotFound) as info:
        params.get("h")
    assert info.value.key == "h"
    assert "'h'" in str(info.value)
    # also catchable as a KeyError or as the package base class
    with pytest.raises(KeyError):
        params.set("h", 1.0)
    with pytest.raises(PhysicsLabError):
        params.get_title("h")


def test_duplicate_keys_rejected():
    with pytest.raises(ValueError):
        ParameterList([Parameter("L", "L", 1.0), Parameter("L", "L", 2.0)])


def test_copy_is_independent():
    params = make_list()
    clone = params.copy()
    assert clone == params
    clone.set("L", 5.0)
    assert params.get("L") == 1.0


def test_copy_from_replaces_whole_set():
    params = make_list()
    other = ParameterList.from_tuples([("h", "h", 0.3, "Depth")])
    params.copy_from(other)
    assert params.keys() == ["h"]
    other.set("h", 1.0)
    assert params.get("h") == 0.3


def test_update_is_all_or_nothing():
    params = make_list()
    with pytest.raises(ParameterNotFound):
        params.update({"L": 3.0, "missing": 1.0})
    assert params.get("L") == 1.0
    params.update({"L": 3.0, "g": 1.62})
    assert params.as_dict() == {"L": 3.0, "g": 1.62, "dtime": 0.05}


def test_validate():
    params = make_list()
    params.validate({"L": positive, "dtime": positive})

    params.set("L", 0.0)
    with pytest.raises(InvalidParameterValue) as info:
        params.validate({"L": positive})
    assert info.value.key == "L"
    assert info.value.reason == "must be positive"

    params.set("L", float("nan"))
    with pytest.raises(InvalidParameterValue):
        params.validate({"L": non_negative})


def test_integer_check():
    check = integer_at_least(2)
    assert check(10.0) is None
    assert check(1.0) == "must be at least 2"
    assert check(2.5) == "must be a whole number"
