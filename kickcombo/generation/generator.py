"""Combo generation entry point.

MoveCatalog -> build_category_sequence -> select_moves -> labels.

Each call is independent: all per-slot state lives inside the call and the
only shared input is the read-only catalog.
"""

from loguru import logger

from kickcombo.config.settings import settings
from kickcombo.generation.errors import CatalogError, ComboInvariantError
from kickcombo.generation.library.catalog import DEFAULT_CATALOG, MoveCatalog
from kickcombo.generation.library.move import Move
from kickcombo.generation.logging import log_combo_invariant_failure
from kickcombo.generation.random_source import RandomSource, default_random_source
from kickcombo.generation.schema.combo_spec import GenerationRequest
from kickcombo.generation.selector import select_moves
from kickcombo.generation.sequencer import build_category_sequence, clamp_count
from kickcombo.generation.tuning import GenerationTuning
from kickcombo.generation.validate import validate_combo


def generate_moves(
    request: GenerationRequest,
    *,
    catalog: MoveCatalog = DEFAULT_CATALOG,
    tuning: GenerationTuning | None = None,
    rng: RandomSource | None = None,
) -> list[Move]:
    """Generate a combo as catalog moves.

    Args:
        request: Caller parameters
        catalog: Move catalog to draw from
        tuning: Weighting constants (defaults to the configured tuning)
        rng: Random source (defaults to a fresh unseeded one)

    Returns:
        Moves in slot order, length ``clamp_count(request.count)``

    Raises:
        CatalogError: If the catalog has no legal move for the request
    """
    tuning = tuning or settings.tuning()
    rng = rng or default_random_source()

    pool = catalog.legal_moves(request.level, request.mode, request.stance)
    if not pool:
        raise CatalogError(
            f"No legal moves for level={request.level.value} mode={request.mode.value} stance={request.stance.value}"
        )

    categories = build_category_sequence(
        request.count,
        request.level,
        request.mode,
        rules=request.rules,
        rng=rng,
        tuning=tuning,
        available=catalog.categories_for(request.level, request.mode, request.stance),
    )
    moves = select_moves(
        categories,
        pool,
        stance=request.stance,
        rules=request.rules,
        rng=rng,
        tuning=tuning,
    )

    try:
        validate_combo(moves, request)
    except ComboInvariantError as e:
        log_combo_invariant_failure(
            e,
            {
                "count": request.count,
                "stance": request.stance.value,
                "level": request.level.value,
                "mode": request.mode.value,
                "move_ids": ",".join(m.id for m in moves),
            },
        )
        raise

    logger.debug(
        "combo_generator: Combo generated",
        requested=request.count,
        clamped=clamp_count(request.count),
        move_ids=[m.id for m in moves],
    )
    return moves


def generate_combo(
    request: GenerationRequest,
    *,
    catalog: MoveCatalog = DEFAULT_CATALOG,
    tuning: GenerationTuning | None = None,
    rng: RandomSource | None = None,
) -> list[str]:
    """Generate a combo and return its display labels in order."""
    moves = generate_moves(request, catalog=catalog, tuning=tuning, rng=rng)
    return [m.label for m in moves]
