"""Logging setup for hosts that don't configure logging themselves."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from chainquery.config import LoggingConfig


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """
    Attach a handler to the chainquery package logger.

    Uses rich's console handler when color is enabled, otherwise a plain
    stream handler. Calling it again replaces the previous handler.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger("chainquery")
    for old in list(logger.handlers):
        logger.removeHandler(old)

    if config.color:
        handler: logging.Handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger.addHandler(handler)
    logger.setLevel(config.level)
    return logger
