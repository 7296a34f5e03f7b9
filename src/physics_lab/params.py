# MIT License (see LICENSE)
"""
Named numeric parameters for the models.

A ParameterList is an ordered collection of Parameter records. Order only
matters to whoever displays the list (one row per parameter); lookups are by
key. Models build one list with their defaults at construction time, the
caller edits it with set()/copy_from(), and restart() reads the values.

Example:
    params = ParameterList.from_tuples([
        ("L", "L", 1.0, "Pendulum length"),
        ("g", "g", 9.81, "Gravitational constant"),
    ])
    params.set("L", 2.0)
    params.validate({"L": positive})
"""
from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, Mapping

from .errors import InvalidParameterValue, ParameterNotFound

# A check returns None when the value is fine, or a human readable reason.
Check = Callable[[float], "str | None"]


@dataclass
class Parameter:
    """
    One named numeric parameter.

    Attributes:
        key: Identifier used by the model ("theta0", "dtime", ...).
        display_name: Short label for a table header ("θ(0)", "ΔT", ...).
        value: Current value.
        tooltip: One-line description.
    """
    key: str
    display_name: str
    value: float
    tooltip: str = ""


class ParameterList:
    """
    Ordered, key-unique list of parameters.

    Raises ParameterNotFound for unknown keys instead of returning a default.
    """

    def __init__(self, params: Iterable[Parameter] = ()) -> None:
        self._params: list[Parameter] = []
        for p in params:
            self._append(replace(p, value=float(p.value)))

    @classmethod
    def from_tuples(cls, rows: Iterable[tuple]) -> "ParameterList":
        """Build a list from (key, display_name, value, tooltip) tuples."""
        return cls(Parameter(*row) for row in rows)

    def _append(self, param: Parameter) -> None:
        if param.key in self:
            raise ValueError(f"Duplicate parameter key '{param.key}'")
        self._params.append(param)

    def _find(self, key: str) -> Parameter:
        for p in self._params:
            if p.key == key:
                return p
        raise ParameterNotFound(key)

    # --- access --------------------------------------------------------------

    def get(self, key: str) -> float:
        """Return the value stored under key."""
        return self._find(key).value

    def set(self, key: str, value: float) -> None:
        """Replace the value stored under key. The key must already exist."""
        self._find(key).value = float(value)

    def get_title(self, key: str) -> str:
        return self._find(key).display_name

    def get_tooltip(self, key: str) -> str:
        return self._find(key).tooltip

    def keys(self) -> list[str]:
        return [p.key for p in self._params]

    def as_dict(self) -> dict[str, float]:
        """Values keyed by parameter key, in list order."""
        return {p.key: p.value for p in self._params}

    def update(self, values: Mapping[str, float]) -> None:
        """set() every key in values; all keys are checked before any change."""
        for key in values:
            self._find(key)
        for key, value in values.items():
            self.set(key, value)

    # --- copying -------------------------------------------------------------

    def copy(self) -> "ParameterList":
        return ParameterList(self._params)

    def copy_from(self, other: "ParameterList") -> None:
        """Replace the whole parameter set with a copy of other's."""
        self._params = [replace(p) for p in other]

    # --- validation ----------------------------------------------------------

    def validate(self, checks: Mapping[str, Check]) -> None:
        """
        Run per-key checks and raise on the first failure.

        Non-finite values are always rejected for checked keys.

        Raises:
            ParameterNotFound: A checked key is missing.
            InvalidParameterValue: A check returned a reason.
        """
        for key, check in checks.items():
            value = self.get(key)
            if not math.isfinite(value):
                raise InvalidParameterValue(key, value, "value must be finite")
            reason = check(value)
            if reason:
                raise InvalidParameterValue(key, value, reason)

    # --- container protocol --------------------------------------------------

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, key: object) -> bool:
        return any(p.key == key for p in self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterList):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        body = ", ".join(f"{p.key}={p.value:g}" for p in self._params)
        return f"ParameterList({body})"


# --- reusable checks ---------------------------------------------------------

def positive(value: float) -> str | None:
    return None if value > 0 else "must be positive"


def non_negative(value: float) -> str | None:
    return None if value >= 0 else "must not be negative"


def integer_at_least(minimum: int) -> Check:
    """Check that a value is a whole number >= minimum."""
    def check(value: float) -> str | None:
        if value != int(value):
            return "must be a whole number"
        if value < minimum:
            return f"must be at least {minimum}"
        return None
    return check
