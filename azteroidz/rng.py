import random

from .settings import SEED


class RandomSource:
    """Seeded uniform draws shared by every subsystem of a world."""

    def __init__(self, seed=SEED):
        self._rng = random.Random(seed)

    def uniform(self, a, b):
        return self._rng.uniform(a, b)

    def randint(self, a, b):
        return self._rng.randint(a, b)

    def choose(self, a, b):
        return a if self._rng.random() < 0.5 else b
