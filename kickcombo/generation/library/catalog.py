"""Move catalog with deterministic legality filtering.

No randomness here - pure filtering logic.

Filters are applied in order:
1. level at or below the requested level
2. category allowed by the mode
3. explicit stance restriction matches
4. forward-leg-only moves thrown with the forward side for the stance
"""

from collections.abc import Iterable, Iterator

from loguru import logger

from kickcombo.generation.errors import CatalogError
from kickcombo.generation.invariants import FORWARD_SIDE, MODE_CATEGORIES
from kickcombo.generation.library.move import Move
from kickcombo.generation.library.moves import MOVES
from kickcombo.generation.schema.combo_spec import Category, Level, Mode, Side, Stance, level_rank


def is_stance_legal(move: Move, stance: Stance) -> bool:
    """Return True if the move may be thrown from the given stance."""
    if move.stance is not None and move.stance != stance:
        return False
    if move.forward_leg_only and move.side != FORWARD_SIDE[stance]:
        return False
    return True


class MoveCatalog:
    """Immutable collection of moves, built once and shared read-only."""

    def __init__(self, moves: Iterable[Move]):
        entries = tuple(moves)
        by_id: dict[str, Move] = {}
        for move in entries:
            if move.id in by_id:
                raise CatalogError(f"Duplicate move id: {move.id}")
            if move.forward_leg_only and move.side == Side.NEUTRAL:
                raise CatalogError(f"Forward-leg-only move needs a side: {move.id}")
            by_id[move.id] = move

        self._moves = entries
        self._by_id = by_id
        self._legal_cache: dict[tuple[Level, Mode, Stance], tuple[Move, ...]] = {}

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __contains__(self, move_id: object) -> bool:
        return move_id in self._by_id

    def get(self, move_id: str) -> Move:
        """Look up a move by id.

        Raises:
            KeyError: If no move has this id
        """
        return self._by_id[move_id]

    def legal_moves(self, max_level: Level, mode: Mode, stance: Stance) -> tuple[Move, ...]:
        """Return every move legal for the level, mode and stance, in catalog order.

        Args:
            max_level: Highest unlocked skill level
            mode: Kickboxing or boxing
            stance: Requested stance

        Returns:
            Tuple of legal moves (may be cached between calls)
        """
        key = (max_level, mode, stance)
        cached = self._legal_cache.get(key)
        if cached is not None:
            logger.debug(
                "move_catalog: Cache hit",
                level=max_level.value,
                mode=mode.value,
                stance=stance.value,
            )
            return cached

        allowed_categories = MODE_CATEGORIES[mode]
        max_rank = level_rank(max_level)
        legal = tuple(
            m
            for m in self._moves
            if level_rank(m.level) <= max_rank and m.category in allowed_categories and is_stance_legal(m, stance)
        )
        self._legal_cache[key] = legal
        logger.debug(
            "move_catalog: Legal pool built",
            level=max_level.value,
            mode=mode.value,
            stance=stance.value,
            size=len(legal),
        )
        return legal

    def categories_for(self, max_level: Level, mode: Mode, stance: Stance) -> frozenset[Category]:
        """Return the categories that have at least one legal move."""
        return frozenset(m.category for m in self.legal_moves(max_level, mode, stance))


DEFAULT_CATALOG = MoveCatalog(MOVES)
