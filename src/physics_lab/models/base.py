# MIT License (see LICENSE)
"""
Common life cycle of the time-stepping models.

Every model owns one ParameterList and its own numeric state. The life cycle
is a small state machine:

    UNINITIALIZED --restart()--> READY --step()--> STEPPING --step()--> ...
          any state --restart()--> READY

restart() validates the parameters, then derives all state from them.
step() advances the state by exactly one time increment. It is synchronous
and does no I/O; pacing steps against wall-clock time is left to the caller.

Subclasses provide:
    - default_parameters(): the ParameterList with physical defaults.
    - constraints: per-key checks run by validate().
    - _restart() and _step(): the actual numerics.
    - snapshot(): the current state as a plain dict.
"""
from __future__ import annotations
import enum
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping

from ..errors import ModelNotReady
from ..params import Check, ParameterList
from ..profiler import Profiler

logger = logging.getLogger(__name__)


class ModelStatus(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    STEPPING = "stepping"


class Model(ABC):
    """
    Base class of all models.

    Attributes:
        label: Human readable model name.
        constraints: Checks applied to parameters by validate().
        parameters: The model's own ParameterList.
        status: Current life-cycle state.
        time: Elapsed simulation time in seconds.
        profiler: Optional Profiler; each step() is timed as "step".
    """
    label: ClassVar[str] = ""
    constraints: ClassVar[Mapping[str, Check]] = {}

    def __init__(self, profiler: Profiler | None = None) -> None:
        self.parameters = self.default_parameters()
        self.status = ModelStatus.UNINITIALIZED
        self.time = 0.0
        self.profiler = profiler

    @classmethod
    @abstractmethod
    def default_parameters(cls) -> ParameterList:
        """Fresh ParameterList with the model's default values."""

    # --- parameters ----------------------------------------------------------

    def get_parameters(self) -> ParameterList:
        """A copy of the current parameters; edits do not affect the model."""
        return self.parameters.copy()

    def set_parameters(self, params: ParameterList) -> None:
        """Replace all parameters. Takes effect at the next restart()."""
        self.parameters.copy_from(params)

    def validate(self) -> None:
        """
        Check parameters before restart().

        Override to add cross-parameter checks; call super().validate() first.

        Raises:
            ParameterNotFound: A required key is missing.
            InvalidParameterValue: A value is out of range.
        """
        self.parameters.validate(self.constraints)

    # --- life cycle ----------------------------------------------------------

    def restart(self) -> None:
        """Validate parameters and recompute all derived state at time 0."""
        self.validate()
        self.time = 0.0
        self._restart()
        self.status = ModelStatus.READY
        logger.debug("%s restarted with %r", self.label, self.parameters)

    def step(self) -> None:
        """
        Advance the model by one time increment.

        Raises:
            ModelNotReady: restart() has never been called.
        """
        if self.status is ModelStatus.UNINITIALIZED:
            raise ModelNotReady(f"{self.label}: call restart() before step()")
        if self.profiler is None:
            self._step()
        else:
            with self.profiler.section("step"):
                self._step()
        self.status = ModelStatus.STEPPING

    def elapsed_time(self) -> float:
        return self.time

    @abstractmethod
    def _restart(self) -> None:
        ...

    @abstractmethod
    def _step(self) -> None:
        ...

    @abstractmethod
    def snapshot(self) -> dict[str, Any]:
        """Current state as a dict of plain values (and arrays for grids)."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.status.value} t={self.time:.4g}>"
