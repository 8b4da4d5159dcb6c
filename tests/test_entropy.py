"""Tests for entropy sources."""

import random
import threading

from distribution_sampler import (
    Distribution,
    LockedSource,
    default_source,
    make_source,
    sample,
)
from tests.utils import ReplaySource


def test_make_source_seeded():
    a = make_source(99)
    b = make_source(99)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]


def test_make_source_returns_random_instance():
    assert isinstance(make_source(), random.Random)


def test_default_source_is_memoized():
    assert default_source() is default_source()


def test_default_source_same_instance_across_threads():
    seen = []

    def grab():
        seen.append(default_source())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(s is seen[0] for s in seen)


def test_locked_source_passes_draws_through():
    inner = ReplaySource([0.25, 0.75])
    locked = LockedSource(inner)
    assert locked.random() == 0.25
    assert locked.random() == 0.75
    assert locked.source is inner


def test_locked_source_usable_as_sampler_source():
    locked = LockedSource(ReplaySource([0.5]))
    assert sample(Distribution.UNIFORM, locked, [10.0]) == 5.0


def test_locked_source_shared_across_threads():
    inner = ReplaySource([0.5] * 4000)
    locked = LockedSource(inner)
    results = []
    lock = threading.Lock()

    def worker():
        out = [sample(Distribution.UNIFORM, locked, [2.0]) for _ in range(500)]
        with lock:
            results.extend(out)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert inner.draws == 4000
    assert results == [1.0] * 4000


def test_distinct_sources_are_independent():
    reference = make_source(5)
    expected = [sample(Distribution.EXPONENTIAL, reference, [1.0]) for _ in range(20)]

    a = make_source(5)
    b = make_source(6)
    got = []
    for _ in range(20):
        got.append(sample(Distribution.EXPONENTIAL, a, [1.0]))
        # interleaved draws from b leave a's sequence untouched
        sample(Distribution.POISSON, b, [4.0])
    assert got == expected
