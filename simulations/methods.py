# simulations/methods.py

from __future__ import annotations

import logging
import math
import random
from typing import Dict, Sequence

from distribution_sampler import Distribution, sample

from .common import SamplingSpec, ExperimentResult, Timer


logger = logging.getLogger(__name__)


def expected_mean(distribution: Distribution, params: Sequence[float]) -> float:
    """
    Analytic mean of the distribution, or inf where it does not exist.

    Used to eyeball sampled batches; assumes parameters are in-domain.
    """
    if distribution is Distribution.POISSON:
        return float(params[0])
    if distribution is Distribution.EXPONENTIAL:
        return 1.0 / params[0]
    if distribution is Distribution.GEOMETRIC:
        # support is {1, 2, ...} with p = 1/mean
        return float(params[0])
    if distribution is Distribution.PARETO:
        alpha, x_m = params
        if alpha <= 1.0:
            return math.inf
        return alpha * x_m / (alpha - 1.0)
    if distribution is Distribution.PARETO_BOUNDED:
        alpha, low, high = params
        if alpha == 1.0:
            return high * low / (high - low) * math.log(high / low)
        norm = math.pow(low, alpha) / (1.0 - math.pow(low / high, alpha))
        tail = math.pow(low, 1.0 - alpha) - math.pow(high, 1.0 - alpha)
        return norm * alpha / (alpha - 1.0) * tail
    if distribution is Distribution.UNIFORM:
        return params[0] / 2.0
    if distribution is Distribution.CONSTANT:
        return float(params[0])
    raise ValueError(f"no expected mean for {distribution!r}")


def simulate(spec: SamplingSpec, seed: int) -> ExperimentResult:
    """
    Draw spec.samples values from a fresh generator seeded with seed.

    The same (spec, seed) always yields the same values.
    """
    rng = random.Random(seed)
    values = []

    logger.debug("simulating %s%s x%d (seed=%d)",
                 spec.distribution.name, spec.params, spec.samples, seed)
    with Timer() as t:
        for _ in range(spec.samples):
            values.append(sample(spec.distribution, rng, spec.params))

    label = spec.distribution.value + "(" + ", ".join(f"{p:g}" for p in spec.params) + ")"
    return ExperimentResult(
        label=label,
        spec=spec,
        values=values,
        runtime_s=t.elapsed_s,
        meta={
            "seed": seed,
            "expected_mean": expected_mean(spec.distribution, spec.params),
        },
    )


# --- Registry / lookup -------------------------------------------------------

def get_distribution(name: str) -> Distribution:
    name = name.strip().lower().replace("-", "_")
    if name not in DISTRIBUTIONS:
        raise ValueError(
            f"unknown distribution '{name}'. Available: {sorted(DISTRIBUTIONS.keys())}"
        )
    return DISTRIBUTIONS[name]


# DISTRIBUTIONS maps CLI name -> Distribution. Every member is reachable
# under its own value; the rest are aliases.
DISTRIBUTIONS: Dict[str, Distribution] = {d.value: d for d in Distribution}
DISTRIBUTIONS.update({
    "exp": Distribution.EXPONENTIAL,
    "geo": Distribution.GEOMETRIC,
    "paretobounded": Distribution.PARETO_BOUNDED,
    "bounded_pareto": Distribution.PARETO_BOUNDED,
    "const": Distribution.CONSTANT,
})
