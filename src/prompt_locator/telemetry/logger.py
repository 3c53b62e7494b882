"""Logging wrapper for Prompt Locator."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send log records to stderr with a default format.

    stdout is reserved for the MCP protocol.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a stderr handler in the default format.

    The handler is attached once; records are not passed on to the root
    logger, so ``configure_logging`` does not print them twice.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
