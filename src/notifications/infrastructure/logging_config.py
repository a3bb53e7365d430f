"""Root logger setup for the command line."""

from __future__ import annotations

import logging

import colorlog

LOG_FORMAT = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def setup_logging(verbose: bool = False) -> None:
    logger = logging.getLogger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    stream_handler = colorlog.StreamHandler()
    stream_handler.setFormatter(
        colorlog.ColoredFormatter(f"%(log_color)s{LOG_FORMAT}", log_colors=LOG_COLORS)
    )
    logger.addHandler(stream_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
