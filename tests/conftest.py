"""Root conftest for all tests.

Shared fixtures: seeded random sources and a request factory.
"""

import random
from collections.abc import Callable

import pytest

from kickcombo.generation.schema.combo_spec import DEFAULT_RULES, GenerationRequest, Level, Mode, Rules, Stance


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so failures are reproducible."""
    return random.Random(1234)


@pytest.fixture
def make_request() -> Callable[..., GenerationRequest]:
    """Factory for generation requests with sensible defaults."""

    def _make(
        count: int = 4,
        stance: Stance = Stance.ORTHODOX,
        level: Level = Level.BEGINNER,
        mode: Mode = Mode.KICKBOXING,
        rules: Rules = DEFAULT_RULES,
    ) -> GenerationRequest:
        return GenerationRequest(count=count, stance=stance, level=level, mode=mode, rules=rules)

    return _make


class FixedRandom:
    """Random source replaying fixed values; ``choice`` returns the first item."""

    def __init__(self, *values: float):
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def fixed_random() -> Callable[..., FixedRandom]:
    return FixedRandom
