from .distribution import (
    ArityMismatch,
    Distribution,
    parameter_count,
    sample,
    sample_default,
)
from .entropy import EntropySource, LockedSource, default_source, make_source

__all__ = [
    "ArityMismatch",
    "Distribution",
    "EntropySource",
    "LockedSource",
    "default_source",
    "make_source",
    "parameter_count",
    "sample",
    "sample_default",
]
