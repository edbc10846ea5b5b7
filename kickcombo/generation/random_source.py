"""Injectable random source and the weighted draw used by both stages."""

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of ``random.Random`` the generator relies on."""

    def random(self) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def default_random_source() -> RandomSource:
    """Return a fresh, unseeded random source."""
    return random.Random()


def weighted_choice(items: Sequence[T], weights: Sequence[float], rng: RandomSource) -> T:
    """Pick one item with probability proportional to its weight.

    Items with a non-positive weight are never picked. Draws a uniform value
    in [0, total) and returns the first item whose cumulative weight meets or
    exceeds it. Falls back to a uniform pick when no weight is positive.

    Args:
        items: Candidates (must not be empty)
        weights: One weight per candidate
        rng: Random source

    Returns:
        The chosen item

    Raises:
        ValueError: If items is empty or lengths differ
    """
    if not items:
        raise ValueError("weighted_choice requires at least one item")
    if len(items) != len(weights):
        raise ValueError("items and weights must have the same length")

    eligible = [(item, w) for item, w in zip(items, weights, strict=True) if w > 0]
    if not eligible:
        return rng.choice(items)

    total = sum(w for _, w in eligible)
    draw = rng.random() * total
    cumulative = 0.0
    for item, w in eligible:
        cumulative += w
        if cumulative >= draw:
            return item
    # Float rounding can leave draw a hair above the last cumulative sum
    return eligible[-1][0]
