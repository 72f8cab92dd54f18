"""Seeded random number generator for reproducible maze generation."""

import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class ChoicePolicy(Protocol):
    """Anything that can pick one element of a non-empty sequence."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


class SeededRNG:
    """Seeded random number generator for reproducible results."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        """Get the current seed."""
        return self._seed

    def set_seed(self, seed: Optional[int]):
        """Set a new seed."""
        self._seed = seed
        self._rng.seed(seed)

    def choice(self, seq: Sequence[T]) -> T:
        """Choose an element uniformly at random from a non-empty sequence."""
        return self._rng.choice(seq)


class ScriptedChoice:
    """
    Choice policy that picks a fixed index on each call, cycling through
    `indices`. Useful to force a specific carve order.
    """

    def __init__(self, indices: Sequence[int]):
        if not indices:
            raise ValueError("ScriptedChoice needs at least one index")
        self._indices = list(indices)
        self._calls = 0

    def choice(self, seq: Sequence[T]) -> T:
        index = self._indices[self._calls % len(self._indices)]
        self._calls += 1
        return seq[min(index, len(seq) - 1)]


# Global instance for convenience
default_rng = SeededRNG()


def set_global_seed(seed: Optional[int]):
    """Set the seed for the global RNG instance."""
    default_rng.set_seed(seed)

