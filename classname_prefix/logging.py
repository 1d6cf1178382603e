"""Logging context helpers for consistent structured fields."""

from __future__ import annotations

import logging
import contextlib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import Token, ContextVar

_UNIT: ContextVar[str] = ContextVar("unit", default="-")


def set_log_context(*, unit: str | None = None) -> list[tuple[ContextVar[str], Token[str]]]:
    """Set log context values and return tokens for reset."""
    tokens: list[tuple[ContextVar[str], Token[str]]] = []
    if unit is not None:
        tokens.append((_UNIT, _UNIT.set(unit)))
    return tokens


def reset_log_context(tokens: list[tuple[ContextVar[str], Token[str]]]) -> None:
    """Reset log context values using tokens returned by set_log_context."""
    for var, token in tokens:
        var.reset(token)


@contextmanager
def log_context(*, unit: str | None = None) -> Iterator[None]:
    """Context manager tagging every record logged in the block with *unit*."""
    tokens = set_log_context(unit=unit)
    try:
        yield
    finally:
        reset_log_context(tokens)


def install_log_context() -> None:
    """Install a LogRecord factory that injects context fields."""
    if getattr(install_log_context, "_installed", False):
        return

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.unit = _UNIT.get()
        return record

    logging.setLogRecordFactory(record_factory)
    install_log_context._installed = True  # type: ignore[attr-defined]


def configure_logging(level: str | None = None) -> None:
    """Initialize root logging configuration once per process."""
    from classname_prefix.config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT  # noqa: PLC0415

    resolved_level = (level or APP_LOG_LEVEL).upper()
    install_log_context()
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=resolved_level, format=APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)
    else:
        root_logger.setLevel(resolved_level)
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(resolved_level)
                handler.setFormatter(logging.Formatter(APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT))

    logging.getLogger("classname_prefix").setLevel(resolved_level)


__all__ = [
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
    "configure_logging",
]
