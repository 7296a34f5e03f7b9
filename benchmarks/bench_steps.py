"""
Microbenchmark: time per step for every model.
Run:
  python benchmarks/bench_steps.py
"""
import time
from physics_lab.models import ModelKind, make_model
from physics_lab.profiler import Profiler


def run(kind: ModelKind, steps: int = 300, **values):
    prof = Profiler()
    model = make_model(kind, profiler=prof)
    if values:
        params = model.get_parameters()
        params.update(values)
        model.set_parameters(params)
    model.restart()

    # warmup
    for _ in range(10):
        model.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        model.step()
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for kind in ModelKind:
        per_step, summary = run(kind)
        print(f"{kind.value:>18}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:10.1f}")
        print(" ", "step", summary["step"])

    # the wave grid dominates; show how it scales with resolution
    for xn in [30, 60, 120]:
        per_step, _ = run(ModelKind.WAVE, steps=100, xn=xn, zn=xn // 2)
        print(f"wave xn={xn:4d}  step={1e3*per_step:8.3f} ms")
