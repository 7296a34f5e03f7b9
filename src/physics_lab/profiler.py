# MIT License (see LICENSE)
"""
Wall-clock timing of named code sections.

Models accept an optional Profiler and time every step() under the section
name "step"; benchmarks read the summary afterwards.

Example:
    profiler = Profiler()
    model = WaveModel(profiler=profiler)
    model.restart()
    for _ in range(100):
        model.step()
    print(profiler.stats.summary()["step"]["mean_ms"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Raw timing samples (seconds) per section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def mean(self, name: str) -> float:
        """Average duration of a section in seconds (0.0 if never timed)."""
        times = self.samples.get(name)
        return sum(times) / len(times) if times else 0.0

    def discard(self, name: str) -> None:
        """Forget all samples of one section."""
        self.samples.pop(name, None)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics with keys 'n', 'mean_ms' and 'max_ms'.
        """
        return {
            name: {
                "n": len(times),
                "mean_ms": 1e3 * self.mean(name),
                "max_ms": 1e3 * max(times),
            }
            for name, times in self.samples.items()
        }


class Profiler:
    """Collects ProfileStats through the section() context manager."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
