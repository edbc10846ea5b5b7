"""Tests for kickcombo logging setup.

The library is silent by default; setup_logger opts in.
"""

import sys

import pytest
from loguru import logger

from kickcombo.core.logger import normalize_log_level, setup_logger, silence_package_logging
from kickcombo.generation.generator import generate_combo
from kickcombo.generation.schema.combo_spec import Level


@pytest.fixture
def captured():
    """Collect every loguru message emitted while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="TRACE")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)
    silence_package_logging()


def test_generation_is_silent_by_default(make_request, rng, captured):
    generate_combo(make_request(count=8, level=Level.ADVANCED), rng=rng)
    assert captured == []


def test_setup_logger_enables_package_records(make_request, rng, restore_logger):
    setup_logger(level="DEBUG")
    messages: list[str] = []
    logger.add(messages.append, level="DEBUG")

    generate_combo(make_request(count=5), rng=rng)

    assert any("Combo generated" in m for m in messages)
    assert any("Sequence built" in m for m in messages)


def test_setup_logger_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logger(level="chatty")


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", "DEBUG"), (" Info ", "INFO"), ("SUCCESS", "SUCCESS"), ("chatty", None), ("", None)],
)
def test_normalize_log_level(value, expected):
    assert normalize_log_level(value) == expected
