"""Random source used for word sampling.

Sampling goes through a small protocol so callers (and tests) can supply
their own generator. ``random.Random`` satisfies it.
"""

import random
from typing import Protocol


class RandomSource(Protocol):
    """Anything that can pick an integer in ``[0, stop)``."""

    def randrange(self, stop: int) -> int: ...


_shared = random.Random()


def get_random_source() -> RandomSource:
    """Return the generator shared by every store and query."""
    return _shared


def seed_random_source(seed: int | None) -> None:
    """Reseed the shared generator (None reseeds from system entropy)."""
    _shared.seed(seed)
