"""Combo post-condition checks.

Every generated combo must pass these before it is returned. All
violations are collected and reported together.
"""

from collections.abc import Sequence

from kickcombo.generation.errors import ComboInvariantError
from kickcombo.generation.invariants import MODE_CATEGORIES, REQUIRED_CATEGORY, RESTRICTED_REPEAT_CATEGORIES
from kickcombo.generation.library.catalog import is_stance_legal
from kickcombo.generation.library.move import Move
from kickcombo.generation.schema.combo_spec import GenerationRequest, level_rank
from kickcombo.generation.sequencer import clamp_count


def validate_combo(moves: Sequence[Move], request: GenerationRequest) -> None:
    """Validate a generated combo against the request.

    Args:
        moves: Moves in slot order
        request: The request the combo was generated for

    Raises:
        ComboInvariantError: With code INVALID_COMBO and one detail per violated invariant
    """
    errors: list[str] = []

    if len(moves) != clamp_count(request.count):
        errors.append("WRONG_LENGTH")

    max_rank = level_rank(request.level)
    if any(level_rank(m.level) > max_rank for m in moves):
        errors.append("LEVEL_EXCEEDED")

    allowed = MODE_CATEGORIES[request.mode]
    if any(m.category not in allowed for m in moves):
        errors.append("MODE_VIOLATION")

    if any(not is_stance_legal(m, request.stance) for m in moves):
        errors.append("STANCE_VIOLATION")

    if moves and all(m.category != REQUIRED_CATEGORY for m in moves):
        errors.append("MISSING_PUNCH")

    for prev, cur in zip(moves, moves[1:], strict=False):
        if prev.category in RESTRICTED_REPEAT_CATEGORIES and prev.category == cur.category:
            errors.append("ADJACENT_RESTRICTED_CATEGORY")
            break

    if errors:
        raise ComboInvariantError("INVALID_COMBO", errors)
