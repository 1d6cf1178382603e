"""Centralized one-shot warning tracking.

Option parsing runs once per rule instance, and a long-lived process may
build many instances from the same policy. This keeps a bad option from
spamming logs.

Usage:
    from classname_prefix.helpers.dedupe import warn_once

    warn_once("prefix_type:kebab", "unknown prefixType 'kebab'")
    warn_once("prefix_type:kebab", "same warning")  # Suppressed
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Set of warning keys that have been emitted
_emitted_warnings: set[str] = set()


def warn_once(key: str, message: str, *, prefix: str = "[config]") -> bool:
    """Emit a warning message only once per key.

    Args:
        key: Unique identifier for this warning type.
        message: The warning message to log.
        prefix: Optional prefix for the message.

    Returns:
        True if the warning was emitted, False if already emitted.
    """
    if key in _emitted_warnings:
        return False

    _emitted_warnings.add(key)
    full_message = f"{prefix} Warning: {message}" if prefix else f"Warning: {message}"
    logger.warning(full_message)
    return True


def has_warned(key: str) -> bool:
    """Check if a warning has been emitted for the given key."""
    return key in _emitted_warnings


def reset_warnings() -> None:
    """Clear all emitted warnings. Useful for testing."""
    _emitted_warnings.clear()


__all__ = ["warn_once", "has_warned", "reset_warnings"]
