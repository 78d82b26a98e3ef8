"""Logging configuration for the litmark CLI."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data)


def configure_logging(level: str = "info", fmt: str = "text") -> logging.Logger:
    """Attach a single handler to the ``litmark`` logger.

    ``text`` renders through rich on stderr, ``json`` emits structured lines.
    Calling it again replaces the previously installed handler.
    """
    logger = logging.getLogger("litmark")
    logger.setLevel(_LEVELS.get(level, logging.INFO))

    for existing in list(logger.handlers):
        if getattr(existing, "_litmark", False):
            logger.removeHandler(existing)

    if fmt == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    handler._litmark = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    # Our handler is the only sink; root handlers would print each record again
    logger.propagate = False
    return logger
