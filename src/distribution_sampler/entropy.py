import logging
import random
import threading
from typing import Optional, Protocol


logger = logging.getLogger(__name__)


class EntropySource(Protocol):
    """
    Anything that yields independent uniform draws in [0, 1).

    random.Random already satisfies this, so a seeded generator can be
    passed straight to sample().
    """

    def random(self) -> float:
        ...


def make_source(seed: Optional[int] = None) -> random.Random:
    """Build a fresh generator, seeded when seed is given."""
    return random.Random(seed)


# ------------------------------------------------------------
# Process-wide default
# ------------------------------------------------------------

_default: Optional[random.Random] = None
_default_lock = threading.Lock()


def default_source() -> random.Random:
    """
    Return the process-wide default generator, creating it on first use.

    The instance is unseeded and lives for the rest of the process. It is
    not synchronized: wrap it in LockedSource before sharing it across
    threads if draw order matters.
    """
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = random.Random()
                logger.debug("created process-wide default entropy source")
    return _default


class LockedSource:
    """
    LockedSource

    Serializes draws from a shared source so that each call to random()
    is atomic with respect to other threads.

    Note that this only protects individual draws. A rejection loop in
    one thread may still interleave its draws with another thread's, so
    per-call reproducibility still needs one source per caller.
    """

    def __init__(self, source: EntropySource):
        self.source = source
        self._lock = threading.Lock()

    def random(self) -> float:
        with self._lock:
            return self.source.random()
