"""Logging setup shared by the mdtoc entry points."""

from __future__ import annotations

import logging
import sys

from mdtoc.config import MDTOC_LOG_LEVEL

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class ExtraFieldsFormatter(logging.Formatter):
    """Append ``extra={...}`` context to each line as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        if not extras:
            return message
        context = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} [{context}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a stderr handler on the ``mdtoc`` and ``server`` loggers."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFieldsFormatter(_FORMAT))
    resolved = level if level is not None else MDTOC_LOG_LEVEL
    for name in ("mdtoc", "server"):
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.setLevel(resolved)
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
