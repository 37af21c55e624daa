"""
Seeded random source.

Wraps an mlx PRNG key. Every draw splits the key so a given seed always
yields the same sequence of draws.
"""

from typing import Optional, Union

import mlx.core as mx


class Random:
    """
    Uniform random number source.

    Attributes:
        seed: Seed the key was created from
        key: Current mlx PRNG key
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed if seed is not None else 42
        self.key = mx.random.key(self.seed)

    def next_key(self) -> mx.array:
        """Split the key and return a fresh subkey."""
        self.key, subkey = mx.random.split(self.key)
        return subkey

    def uniform(
        self,
        low: float,
        high: float,
        size: Optional[int] = None,
    ) -> Union[float, list[float]]:
        """
        Draw uniformly distributed values in [low, high].

        Draws are made in float32 and clamped back into the bounds, which
        float32 rounding of the bounds could otherwise leave by one ulp.

        Args:
            low: Lower bound
            high: Upper bound
            size: Number of values; None returns a single float

        Returns:
            A float when size is None, otherwise a list of floats
        """
        shape = [] if size is None else [size]
        values = mx.random.uniform(
            low=low,
            high=high,
            shape=shape,
            key=self.next_key(),
        )
        if size is None:
            return _clamp(values.item(), low, high)
        return [_clamp(v, low, high) for v in values.tolist()]

    def reset(self, seed: Optional[int] = None) -> None:
        """Recreate the key from a seed (the original one if not provided)."""
        if seed is not None:
            self.seed = seed
        self.key = mx.random.key(self.seed)

    def __repr__(self) -> str:
        return f"Random(seed={self.seed})"


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(float(value), low), high)
