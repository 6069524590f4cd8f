"""Logging configuration helpers."""

import logging
import sys


def configure_logging() -> None:
    """Attach one stderr handler to the ``macro_tracker`` logger.

    Under the stdio transport every byte on stdout must be a JSON-RPC message,
    so a log line there would corrupt the MCP stream. The HTTP transport shares
    the same handler so both modes log identically. Repeated calls are no-ops.
    """
    logger = logging.getLogger("macro_tracker")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
