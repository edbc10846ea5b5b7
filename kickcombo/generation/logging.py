"""Combo Invariant Observability.

Call this before re-raising ComboInvariantError.
"""

from loguru import logger

from kickcombo.generation.errors import ComboInvariantError


def log_combo_invariant_failure(err: ComboInvariantError, context: dict[str, str | int | float | bool | None]) -> None:
    """Log a combo invariant failure with context.

    Args:
        err: The ComboInvariantError that occurred
        context: Additional context dictionary for logging
    """
    logger.error(
        "COMBO_INVARIANT_FAILED",
        extra={
            "code": err.code,
            "details": err.details,
            **context,
        },
    )
