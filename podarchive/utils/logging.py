"""Logging utilities that work both in and out of Prefect context."""
import sys

from prefect import get_run_logger
from prefect.exceptions import MissingContextError
from loguru import logger as loguru_logger


def get_logger():
    """
    Get a logger that works both in Prefect context and outside (e.g., tests).

    Returns:
        - Prefect logger if running in a flow/task context
        - Loguru logger otherwise (for tests, direct calls to parsing/rendering code)
    """
    try:
        return get_run_logger()
    except MissingContextError:
        return loguru_logger


def configure_logging(level: str = "INFO"):
    """Send loguru output to stderr at the given level, replacing the default sink."""
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level.upper())
