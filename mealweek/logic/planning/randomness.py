import random
from typing import Optional


class RandomSource:
    """Picks indexes for recipe draws. Swap in a scripted source to make plans predictable."""

    def next_index(self, n: int) -> int:
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next_index(self, n: int) -> int:
        if n <= 0:
            raise ValueError("Cannot draw from an empty collection")
        return self._random.randrange(n)
