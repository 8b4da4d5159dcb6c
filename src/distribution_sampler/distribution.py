import math
from enum import Enum
from typing import Callable, Dict, Sequence

from .entropy import EntropySource, default_source


class Distribution(Enum):
    """
    The closed set of distributions the sampler knows how to draw from.

    Parameters, in order:

        POISSON         (lambda,)
        EXPONENTIAL     (rate,)          rate, not mean
        GEOMETRIC       (mean,)          mean > 1
        PARETO          (alpha, x_m)
        PARETO_BOUNDED  (alpha, low, high)
        UNIFORM         (max,)           result in [0, max)
        CONSTANT        (value,)

    Numeric domains are NOT validated. Out-of-range parameters give
    whatever the formula gives (including a non-terminating Poisson loop
    for lambda <= 0).
    """

    POISSON = "poisson"
    EXPONENTIAL = "exponential"
    GEOMETRIC = "geometric"
    PARETO = "pareto"
    PARETO_BOUNDED = "pareto_bounded"
    UNIFORM = "uniform"
    CONSTANT = "constant"


class ArityMismatch(AssertionError):
    """
    Raised when a parameter vector does not match a distribution's arity.

    This is a caller bug, not a runtime condition. It is an AssertionError
    so it reads as a failed contract, but it is raised explicitly and
    therefore survives python -O.
    """

    def __init__(self, distribution: Distribution, expected: int, got: int):
        self.distribution = distribution
        self.expected = expected
        self.got = got
        super().__init__(
            f"{distribution.name} takes {expected} parameter(s), got {got}"
        )


_ARITY: Dict[Distribution, int] = {
    Distribution.POISSON: 1,
    Distribution.EXPONENTIAL: 1,
    Distribution.GEOMETRIC: 1,
    Distribution.PARETO: 2,
    Distribution.PARETO_BOUNDED: 3,
    Distribution.UNIFORM: 1,
    Distribution.CONSTANT: 1,
}


# ------------------------------------------------------------
# Formulas
# ------------------------------------------------------------

# Geometric results are 32-bit integers; larger values saturate here.
_INT_MAX = 2**31 - 1


def _nonzero(source: EntropySource) -> float:
    u = source.random()
    while u == 0.0:
        u = source.random()
    return u


def _log(u: float) -> float:
    # IEEE log: a zero draw maps to -inf instead of raising
    return math.log(u) if u > 0.0 else -math.inf


def _poisson(source: EntropySource, lam: float) -> float:
    # Knuth: multiply uniforms until the product drops to exp(-lambda)
    limit = math.exp(-lam)
    k = 0
    p = 1.0
    while True:
        k += 1
        p *= source.random()
        if p <= limit:
            break
    return float(k - 1)


def _exponential(source: EntropySource, rate: float) -> float:
    return -_log(source.random()) / rate


def _geometric(source: EntropySource, mean: float) -> float:
    p = 1.0 / mean
    ratio = _log(source.random()) / math.log(1.0 - p)
    if ratio >= _INT_MAX:
        return float(_INT_MAX)
    return float(math.ceil(ratio))


def _pareto(source: EntropySource, alpha: float, x_m: float) -> float:
    u = _nonzero(source)
    denom = math.pow(u, 1.0 / alpha)
    if denom == 0.0:
        # u^(1/alpha) underflowed for small alpha
        return math.copysign(math.inf, x_m) if x_m else math.nan
    return x_m / denom


def _pareto_bounded(
    source: EntropySource, alpha: float, low: float, high: float
) -> float:
    """
    Inverse CDF of a Pareto distribution truncated to [low, high].

    Solves u = (1 - (low/x)^alpha) / (1 - (low/high)^alpha) for x. Written
    in terms of (low/high)^alpha so no intermediate power overflows when
    high is large.
    """
    u = _nonzero(source)
    ratio = math.pow(low / high, alpha)
    return low * math.pow(1.0 - u + u * ratio, -1.0 / alpha)


def _uniform(source: EntropySource, upper: float) -> float:
    return source.random() * upper


def _constant(source: EntropySource, value: float) -> float:
    return float(value)


_FORMULAS: Dict[Distribution, Callable[..., float]] = {
    Distribution.POISSON: _poisson,
    Distribution.EXPONENTIAL: _exponential,
    Distribution.GEOMETRIC: _geometric,
    Distribution.PARETO: _pareto,
    Distribution.PARETO_BOUNDED: _pareto_bounded,
    Distribution.UNIFORM: _uniform,
    Distribution.CONSTANT: _constant,
}


# ------------------------------------------------------------
# Public API
# ------------------------------------------------------------

def parameter_count(distribution: Distribution) -> int:
    """Number of parameters the distribution takes."""
    return _ARITY[distribution]


def sample(
    distribution: Distribution,
    source: EntropySource,
    params: Sequence[float],
) -> float:
    """
    Draw one value from distribution using draws from source.

    Arity is checked before the source is touched, so a call that raises
    ArityMismatch consumes no entropy. Given a deterministic source, the
    number of draws consumed and the returned value are reproducible.
    """
    expected = _ARITY[distribution]
    if len(params) != expected:
        raise ArityMismatch(distribution, expected, len(params))
    return _FORMULAS[distribution](source, *params)


def sample_default(distribution: Distribution, params: Sequence[float]) -> float:
    """sample() against the process-wide default source."""
    return sample(distribution, default_source(), params)
