"""Centralised logging configuration.

Modules obtain their logger with::

    from charter2pdf.utils.logging_config import get_logger

    logger = get_logger(__name__)

Structured context is passed through ``extra={...}``; the formatter appends
any such fields to the message so they survive plain-text log sinks.
"""

from __future__ import annotations

import logging

from charter2pdf.config import CHARTER2PDF_LOG_LEVEL

_ROOT_LOGGER_NAME = "charter2pdf"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes present on every LogRecord; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Formatter that renders ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return message
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} [{rendered}]"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if root.handlers:
        return root
    handler = logging.StreamHandler()
    handler.setFormatter(ExtraFormatter(_LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, CHARTER2PDF_LOG_LEVEL, logging.INFO))
    root.propagate = False
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the ``charter2pdf`` hierarchy.

    Names outside the package (for example ``server.main``) are nested under
    the package root so that one handler configuration applies everywhere.
    """
    _configure_root()
    if not name:
        return logging.getLogger(_ROOT_LOGGER_NAME)
    if name == _ROOT_LOGGER_NAME or name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
