# simulations/run.py

from __future__ import annotations

import logging
from typing import Sequence

from .common import SamplingSpec, ExperimentResult
from .methods import get_distribution, simulate


logger = logging.getLogger(__name__)


def run_experiment(
    distribution: str,
    params: Sequence[float],
    samples: int,
    seed: int = 42,
) -> ExperimentResult:
    """
    Run a single sampling experiment and return an ExperimentResult.

    Parameters
    ----------
    distribution:
        Name of the distribution (e.g., 'poisson', 'exp', 'pareto_bounded').
    params:
        Distribution parameters, in the order the distribution expects.
    samples:
        Number of values to draw.
    seed:
        RNG seed.

    Returns
    -------
    ExperimentResult
    """
    spec = SamplingSpec(
        distribution=get_distribution(distribution),
        params=tuple(params),
        samples=samples,
    )
    result = simulate(spec, seed)
    logger.info("%s done in %.3fs", result.label, result.runtime_s or 0.0)
    return result


def run_pair(
    distribution_a: str,
    params_a: Sequence[float],
    distribution_b: str,
    params_b: Sequence[float],
    samples: int,
    seed: int = 42,
):
    """
    Convenience helper: run two experiments with the same sample count and seed.

    Returns (result_a, result_b).
    """
    ra = run_experiment(distribution_a, params_a, samples, seed=seed)
    rb = run_experiment(distribution_b, params_b, samples, seed=seed)
    return ra, rb
