"""Logging for paylens.

Every module logs through ``get_logger(__name__)``. Loggers live under the
``paylens`` namespace, which owns a single stderr handler and does not
propagate to the root logger, so host applications keep their own setup.

OCR engine fallbacks are reported at INFO, skipped rows and rejected
documents at WARNING, and candidate dumps at DEBUG.

Environment variables:
    PAYLENS_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR. Default: INFO
"""

import logging
import os
import sys

LOGGER_NAMESPACE = "paylens"
DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_handler: logging.Handler | None = None


def parse_log_level(value: str | None, default: int = DEFAULT_LOG_LEVEL) -> int:
    """Map a level name such as ``"debug"`` to its ``logging`` constant."""
    if not value:
        return default
    return _LEVEL_NAMES.get(value.strip().upper(), default)


def _formatter_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level <= logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None) -> None:
    """Attach the namespace handler once; later calls are no-ops."""
    global _handler

    if _handler is not None:
        return
    if level is None:
        level = parse_log_level(os.environ.get("PAYLENS_LOG_LEVEL"))

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_formatter_for(level))

    namespace = logging.getLogger(LOGGER_NAMESPACE)
    namespace.setLevel(level)
    namespace.addHandler(_handler)
    namespace.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return the namespaced logger for a module.

    ``paylens.ocr.source`` is used as-is; any other name is prefixed with
    the namespace.
    """
    configure_logging()
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int | str) -> None:
    """Change the namespace level at runtime, switching to line numbers at DEBUG."""
    if isinstance(level, str):
        level = parse_log_level(level)
    configure_logging(level)
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)
    if _handler is not None:
        _handler.setFormatter(_formatter_for(level))
