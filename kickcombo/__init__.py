"""Kickboxing combination generator."""

from loguru import logger

__version__ = "0.1.0"

# Library stays silent until an application opts in via setup_logger
logger.disable(__name__)
