"""Logging configuration using loguru.

The deployer writes JSON payloads to stdout, so every log record goes to
stderr.  Records emitted through stdlib ``logging`` by third-party code are
forwarded into the same loguru sink.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from wskpack.deployer.settings import WskpackSettings

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, keeping the original call-site."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(settings: WskpackSettings) -> None:
    """Install the stderr sink described by ``settings``.

    ``log_level`` sets the threshold.  ``log_json`` switches the sink to
    loguru's serialized JSON lines so a deployment pipeline can ingest them.
    Safe to call more than once; each call replaces the previous sinks.
    """
    level = settings.log_level.upper()

    logger.remove()
    if settings.log_json:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    logger.debug("Logging configured (level={}, json={})", level, settings.log_json)
