"""
Logging Configuration

Sends the taigamart loggers to stderr so stdout carries only rendered pages,
receipts and reports. With --verbose the HTTP connection log of requests
(urllib3) is shown as well, next to the discarded stale-fetch lines.
"""

import logging
import sys

LOGGER_NAME = "taigamart"
HTTP_LOGGER_NAME = "urllib3"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: DEBUG for taigamart and the HTTP connection log
        quiet: WARNING only (page errors and expired sessions still show)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)

    http_logger = logging.getLogger(HTTP_LOGGER_NAME)
    http_logger.handlers.clear()
    if verbose:
        http_logger.setLevel(logging.DEBUG)
        http_logger.addHandler(handler)
    else:
        http_logger.setLevel(logging.WARNING)
