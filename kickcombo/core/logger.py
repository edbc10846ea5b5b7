"""Logger configuration for kickcombo.

The package disables its own loguru records on import so that library
callers of generate_combo see no output. setup_logger re-enables them.
"""

import sys
from pathlib import Path

from loguru import logger

PACKAGE_NAME = "kickcombo"

VALID_LOG_LEVELS: frozenset[str] = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


def normalize_log_level(value: str) -> str | None:
    """Return the upper-cased level name, or None if loguru does not know it."""
    upper_value = value.strip().upper()
    if upper_value not in VALID_LOG_LEVELS:
        return None
    return upper_value


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure loguru sinks and turn on kickcombo's own log records.

    Args:
        level: Logging level, one of VALID_LOG_LEVELS
        log_file: Optional path to log file. If None, only console logging.
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")

    Raises:
        ValueError: If level is not a known level name
    """
    normalized = normalize_log_level(level)
    if normalized is None:
        raise ValueError(f"Unknown log level '{level}'. Valid levels are: {', '.join(sorted(VALID_LOG_LEVELS))}")

    logger.remove()

    # Combo slots and categories are short; keep the line compact
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level> <dim>{extra}</dim>",
        level=normalized,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}",
            level=normalized,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=True,
        )

    logger.enable(PACKAGE_NAME)
    logger.debug(f"Logger initialized with level={normalized}")


def silence_package_logging() -> None:
    """Disable kickcombo's log records again (the import-time default)."""
    logger.disable(PACKAGE_NAME)
