"""
Logging for weighted_distance, built on Loguru.

The package's records are disabled on import so that applications
embedding the engine are not flooded with per-computation debug lines.
Call :func:`configure_logging` to turn them on.

Example:
    from weighted_distance.logger import configure_logging
    configure_logging("DEBUG")
"""

import sys

from loguru import logger

from .config import EngineSettings

LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level><b>{message}</b></level>"
)

_handler_id = None


def configure_logging(level=None, sink=sys.stderr, colorize=True):
    """
    Enable the package's logger and (re)install its console handler.

    Without an explicit level, EngineSettings().log_level is used.
    """
    global _handler_id

    if level is None:
        level = EngineSettings().log_level.upper()

    # only our own sink is replaced; host handlers stay in place
    if _handler_id is not None:
        logger.remove(_handler_id)
    _handler_id = logger.add(
        sink,
        level=level,
        format=LOG_FORMAT_CONSOLE,
        colorize=colorize,
        filter="weighted_distance",
    )
    logger.enable("weighted_distance")
    return _handler_id


logger.disable("weighted_distance")
