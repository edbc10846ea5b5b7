"""Category Sequencer.

Builds the shape of a combo - one category per slot - before any concrete
move is chosen. Slots are filled left to right:

- slot 0 is kick-led with a level-dependent chance, punch-led otherwise
- kick, knee and defense never occupy two consecutive slots
- the last slot (and, more gently, the second-to-last) favours finishers
- a sequence without a punch gets one random slot overwritten to punch
"""

from loguru import logger

from kickcombo.generation.invariants import (
    FINISHER_CATEGORIES,
    MAX_COMBO_MOVES,
    MIN_COMBO_MOVES,
    REQUIRED_CATEGORY,
    RESTRICTED_REPEAT_CATEGORIES,
)
from kickcombo.generation.random_source import RandomSource, weighted_choice
from kickcombo.generation.schema.combo_spec import Category, FinisherBias, Level, Mode, Rules
from kickcombo.generation.tuning import DEFAULT_TUNING, GenerationTuning


def clamp_count(count: int) -> int:
    """Clamp a requested move count into the supported range."""
    return max(MIN_COMBO_MOVES, min(MAX_COMBO_MOVES, count))


def _finisher_multiplier(category: Category, bias: FinisherBias, strength: float) -> float:
    full = bias.kick if category == Category.KICK else bias.knee
    return 1.0 + (full - 1.0) * strength


def _opening_category(level: Level, weights: dict[Category, float], tuning: GenerationTuning, rng: RandomSource) -> Category:
    if weights.get(Category.KICK, 0.0) > 0 and rng.random() < tuning.first_kick_chance[level]:
        return Category.KICK
    return Category.PUNCH


def _next_category(
    prev: Category,
    weights: dict[Category, float],
    rules: Rules,
    rng: RandomSource,
) -> Category:
    if prev in RESTRICTED_REPEAT_CATEGORIES or rules.avoid_same_category_in_a_row:
        weights[prev] = 0.0

    eligible = [c for c, w in weights.items() if w > 0]
    if not eligible:
        # Only reachable when punch alone is eligible and same-category avoidance is on
        return prev if prev not in RESTRICTED_REPEAT_CATEGORIES else Category.PUNCH
    return weighted_choice(eligible, [weights[c] for c in eligible], rng)


def build_category_sequence(
    count: int,
    level: Level,
    mode: Mode,
    *,
    rules: Rules,
    rng: RandomSource,
    tuning: GenerationTuning = DEFAULT_TUNING,
    available: frozenset[Category] | None = None,
) -> list[Category]:
    """Build the ordered category sequence for a combo.

    Args:
        count: Requested move count (clamped)
        level: Skill level selecting the weight table
        mode: Kickboxing or boxing
        rules: Caller rules (finisher bias, same-category avoidance)
        rng: Random source
        tuning: Weight tables and chances
        available: Categories that actually have legal moves; others get zero weight

    Returns:
        List of categories, one per slot
    """
    length = clamp_count(count)
    base = tuning.weights_for(mode, level)
    if available is not None:
        base = {c: (w if c in available else 0.0) for c, w in base.items()}

    seq: list[Category] = []
    for i in range(length):
        weights = dict(base)
        if i == 0:
            seq.append(_opening_category(level, weights, tuning, rng))
            continue

        if i == length - 1:
            strength = 1.0
        elif i == length - 2:
            strength = tuning.second_to_last_factor
        else:
            strength = 0.0
        if strength > 0:
            for category in FINISHER_CATEGORIES:
                if weights.get(category, 0.0) > 0:
                    weights[category] *= _finisher_multiplier(category, rules.finisher_bias, strength)

        seq.append(_next_category(seq[-1], weights, rules, rng))

    if REQUIRED_CATEGORY not in seq:
        slot = rng.choice(range(len(seq)))
        logger.debug(
            "category_sequencer: No punch in sequence, overwriting slot",
            slot=slot,
            replaced=seq[slot].value,
        )
        seq[slot] = REQUIRED_CATEGORY

    logger.debug(
        "category_sequencer: Sequence built",
        level=level.value,
        mode=mode.value,
        sequence=[c.value for c in seq],
    )
    return seq
