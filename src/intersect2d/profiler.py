# MIT License (see LICENSE)
"""
Lightweight timing of kernel queries.

Used by the benchmarks to compare the cost of the query families without
external dependencies.

Example:
    profiler = Profiler()
    for origin in origins:
        with profiler.section("ray_aar"):
            ray_rectangle_intersection(origin, direction, lo, hi)
    print(profiler.stats.summary()["ray_aar"])
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """Timing samples (seconds) per named section."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a timing sample (in seconds) for a named section."""
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary statistics for all recorded sections.

        Returns:
            Dict mapping section name to a dict with keys:
            - 'n': sample count
            - 'total_ms': summed time in milliseconds
            - 'mean_us': average time in microseconds
            - 'max_us': maximum time in microseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "total_ms": 1e3 * total,
                "mean_us": 1e6 * (total / n),
                "max_us": 1e6 * max(times),
            }
        return out

    def reset(self) -> None:
        """Drop all recorded samples."""
        self.samples.clear()


class _Section:
    def __init__(self, stats: ProfileStats, name: str) -> None:
        self._stats = stats
        self._name = name
        self._t0 = 0.0

    def __enter__(self) -> "_Section":
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stats.add(self._name, time.perf_counter() - self._t0)


class Profiler:
    """
    Context-manager based profiler for timing query sections.

    Sections that raise are still recorded; the exception propagates.
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str) -> _Section:
        """Return a context manager that times the enclosed code under `name`."""
        return _Section(self.stats, name)
