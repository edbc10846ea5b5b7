"""Move Selector.

Walks the category sequence and draws one concrete move per slot.

Per slot:
1. legal moves of the slot's category
2. drop the previous move if same-move repeats are avoided
3. opener only: narrow punch/kick slots to lead-side moves (by chance)
4. weight candidates (inside boost, rear-leg / reuse / same-side penalties)
5. weighted draw

Narrowing steps never empty a slot: if a step would leave no candidate it
is skipped, and an empty category falls back to the whole legal pool.
"""

from collections import Counter
from collections.abc import Sequence

from loguru import logger

from kickcombo.generation.invariants import FORWARD_SIDE, RESTRICTED_REPEAT_CATEGORIES
from kickcombo.generation.library.move import TAG_INSIDE, TAG_LEAD, TAG_REAR_LEG, Move
from kickcombo.generation.random_source import RandomSource, weighted_choice
from kickcombo.generation.schema.combo_spec import Category, Rules, Side, Stance
from kickcombo.generation.tuning import DEFAULT_TUNING, GenerationTuning

LEAD_BIASED_CATEGORIES = (Category.PUNCH, Category.KICK)


def is_lead_side(move: Move, stance: Stance) -> bool:
    """Return True if the move is thrown with the forward hand or leg."""
    if move.has_tag(TAG_LEAD):
        return True
    return move.side == FORWARD_SIDE[stance]


def _adjacent_ok(move: Move, prev: Move | None) -> bool:
    if prev is None:
        return True
    return not (prev.category in RESTRICTED_REPEAT_CATEGORIES and move.category == prev.category)


def move_weight(move: Move, prev: Move | None, used: Counter[str], tuning: GenerationTuning = DEFAULT_TUNING) -> float:
    """Compute the draw weight for a candidate.

    Args:
        move: Candidate move
        prev: Move chosen for the previous slot, if any
        used: Move ids already chosen in this combo
        tuning: Multipliers to apply

    Returns:
        Positive weight (1.0 before adjustments)
    """
    weight = 1.0
    if move.has_tag(TAG_INSIDE):
        weight *= tuning.inside_boost
    if move.has_tag(TAG_REAR_LEG):
        weight *= tuning.rear_leg_penalty
    if used[move.id]:
        weight *= tuning.used_move_penalty
    if prev is not None and move.side != Side.NEUTRAL and move.side == prev.side:
        weight *= tuning.same_side_penalty
    return weight


def _slot_candidates(category: Category, pool: Sequence[Move], prev: Move | None, slot: int) -> list[Move]:
    candidates = [m for m in pool if m.category == category and _adjacent_ok(m, prev)]
    if candidates:
        return candidates

    logger.debug(
        "move_selector: Empty category pool, widening",
        slot=slot,
        category=category.value,
    )
    candidates = [m for m in pool if _adjacent_ok(m, prev)]
    return candidates or list(pool)


def select_moves(
    categories: Sequence[Category],
    pool: Sequence[Move],
    *,
    stance: Stance,
    rules: Rules,
    rng: RandomSource,
    tuning: GenerationTuning = DEFAULT_TUNING,
) -> list[Move]:
    """Choose one move per category slot.

    Args:
        categories: Category sequence from the sequencer
        pool: Legal moves for the request (must not be empty)
        stance: Requested stance, used for lead-side narrowing
        rules: Caller rules (same-move avoidance)
        rng: Random source
        tuning: Weight multipliers

    Returns:
        Moves in slot order, same length as ``categories``
    """
    result: list[Move] = []
    used: Counter[str] = Counter()

    for slot, category in enumerate(categories):
        prev = result[-1] if result else None
        candidates = _slot_candidates(category, pool, prev, slot)

        if rules.avoid_same_move_in_a_row and prev is not None:
            narrowed = [m for m in candidates if m.id != prev.id]
            if narrowed:
                candidates = narrowed

        if slot == 0 and category in LEAD_BIASED_CATEGORIES and rng.random() < tuning.lead_side_chance:
            lead = [m for m in candidates if is_lead_side(m, stance)]
            if lead:
                candidates = lead

        weights = [move_weight(m, prev, used, tuning) for m in candidates]
        chosen = weighted_choice(candidates, weights, rng)
        used[chosen.id] += 1
        result.append(chosen)

    return result
