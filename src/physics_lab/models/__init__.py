# MIT License (see LICENSE)
"""
Time-stepping models.

Each model owns a ParameterList and its numeric state and follows the
restart()/step() life cycle of Model. ModelKind tags the available variants;
make_model() builds one by kind or name.

Typical usage:
    from physics_lab.models import make_model

    model = make_model("double_pendulum")
    params = model.get_parameters()
    params.set("dtime", 0.01)
    model.set_parameters(params)
    model.restart()
    for _ in range(100):
        model.step()
    print(model.elapsed_time(), model.snapshot())
"""
from __future__ import annotations
import enum

from .base import Model, ModelStatus
from .simple import SimplePendulumModel
from .elastic import ElasticPendulumModel
from .coupled import CoupledPendulumsModel
from .double import DoublePendulumModel, double_pendulum_derivative
from .wave import WaveModel, PointGrid, Point, Particle, SURFACES
from .pipe import PipeModel, BoundaryCondition, BOUNDARY_OPEN, BOUNDARY_SEALED, PROFILES


class ModelKind(enum.Enum):
    SIMPLE_PENDULUM = "simple_pendulum"
    ELASTIC_PENDULUM = "elastic_pendulum"
    COUPLED_PENDULUMS = "coupled_pendulums"
    DOUBLE_PENDULUM = "double_pendulum"
    WAVE = "wave"
    PIPE = "pipe"


MODEL_TYPES: dict[ModelKind, type[Model]] = {
    ModelKind.SIMPLE_PENDULUM: SimplePendulumModel,
    ModelKind.ELASTIC_PENDULUM: ElasticPendulumModel,
    ModelKind.COUPLED_PENDULUMS: CoupledPendulumsModel,
    ModelKind.DOUBLE_PENDULUM: DoublePendulumModel,
    ModelKind.WAVE: WaveModel,
    ModelKind.PIPE: PipeModel,
}


def make_model(kind: ModelKind | str, **kwargs) -> Model:
    """
    Construct a model with default parameters.

    Args:
        kind: ModelKind or its string value ("simple_pendulum", ...).
        **kwargs: Passed to the model constructor (e.g. profiler=...).

    Raises:
        ValueError: Unknown kind.
    """
    try:
        kind = ModelKind(kind)
    except ValueError:
        raise ValueError(f"Unknown model kind: {kind!r}") from None
    return MODEL_TYPES[kind](**kwargs)


__all__ = [
    "Model",
    "ModelStatus",
    "ModelKind",
    "MODEL_TYPES",
    "make_model",
    # Pendulums
    "SimplePendulumModel",
    "ElasticPendulumModel",
    "CoupledPendulumsModel",
    "DoublePendulumModel",
    "double_pendulum_derivative",
    # Continuum models
    "WaveModel",
    "PointGrid",
    "Point",
    "Particle",
    "SURFACES",
    "PipeModel",
    "BoundaryCondition",
    "BOUNDARY_OPEN",
    "BOUNDARY_SEALED",
    "PROFILES",
]
