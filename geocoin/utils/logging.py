"""Logging setup shared by the server and the CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Uvicorn logs one line per HTTP request; the map client polls, so keep it quiet.
_NOISY_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> logging.Handler:
    """Route all records at *level* or above to *stream* (stderr by default).

    Stdout is left to the CLI's cache listing, so the two never interleave.
    Unknown level names raise ``ValueError``. Returns the installed handler.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
    return handler
