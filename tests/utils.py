"""Shared helpers for the test suite."""

from typing import Iterable, List


class ReplaySource:
    """Entropy source that hands out a fixed list of draws, in order."""

    def __init__(self, values: Iterable[float]):
        self.values: List[float] = list(values)
        self.draws = 0

    def random(self) -> float:
        if self.draws >= len(self.values):
            raise AssertionError(f"source exhausted after {self.draws} draws")
        v = self.values[self.draws]
        self.draws += 1
        return v
