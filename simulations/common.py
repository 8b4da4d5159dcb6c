# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple
import math
import time

from distribution_sampler import Distribution


@dataclass(frozen=True)
class SamplingSpec:
    """
    What to draw and how many times.
    """
    distribution: Distribution
    params: Tuple[float, ...]
    samples: int

    def __post_init__(self) -> None:
        if self.samples <= 0:
            raise ValueError("samples must be > 0")
        # frozen: go through object.__setattr__ to normalize
        object.__setattr__(self, "params", tuple(float(p) for p in self.params))


@dataclass(frozen=True)
class SummaryStats:
    """
    Basic summary stats for a batch of sampled values.
    """
    min: float
    max: float
    mean: float
    std: float  # population stddev


def summarize_values(values: Sequence[float]) -> SummaryStats:
    """
    Compute min/max/mean/std over sampled values (population stddev).
    """
    if not values:
        raise ValueError("values must be non-empty")

    n = len(values)
    mean = math.fsum(values) / n
    var = math.fsum((v - mean) * (v - mean) for v in values) / n

    return SummaryStats(min=min(values), max=max(values), mean=mean, std=math.sqrt(var))


@dataclass
class ExperimentResult:
    """
    Common return type for all simulations.
    """
    label: str
    spec: SamplingSpec
    values: List[float]

    stats: SummaryStats = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.values) != self.spec.samples:
            raise ValueError(
                f"sample count mismatch: expected {self.spec.samples}, got {len(self.values)}"
            )
        self.stats = summarize_values(self.values)


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def common_x_range(results: List[ExperimentResult]) -> Tuple[float, float]:
    """
    Shared (xmin, xmax) across results so histograms line up.
    """
    if not results:
        raise ValueError("results must be non-empty")

    xmin = min(r.stats.min for r in results)
    xmax = max(r.stats.max for r in results)
    return xmin, xmax


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.stats
    line = f"{r.label}: min={s.min:.3f}, max={s.max:.3f}, mean={s.mean:.3f}, std={s.std:.3f}"
    if "expected_mean" in r.meta:
        line += f", expected_mean={r.meta['expected_mean']:.3f}"
    if r.runtime_s is not None:
        line += f", runtime={r.runtime_s:.3f}s"
    return line
