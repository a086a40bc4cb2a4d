"""Logging setup for the command-line game.

Modules log through ``logging.getLogger(__name__)``; this module attaches a
single stderr handler to the root logger so log lines never mix with the
story printed on stdout.
"""

from __future__ import annotations

import logging
import sys

from fill_in_blank.config import LoggingSettings

FORMATS = {
    "simple": "%(levelname)s: %(message)s",
    "detailed": "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
}


def configure_logging(settings: LoggingSettings, *, level: str | None = None) -> logging.Logger:
    """Configure the root logger from *settings*.

    Existing handlers are replaced, so calling this twice does not duplicate
    output.

    Args:
        settings: Logging section of the game config.
        level:    Optional level name overriding ``settings.level`` (e.g. from
                  the ``--log-level`` command-line option).

    Returns:
        The configured root logger.
    """
    level_name = (level or settings.level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt=FORMATS.get(settings.format, FORMATS["simple"]), datefmt="%H:%M:%S")
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)
    return root_logger
