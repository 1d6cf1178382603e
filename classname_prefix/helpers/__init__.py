"""Small shared helpers used across the check and its host driver."""

from .dedupe import warn_once, has_warned, reset_warnings

__all__ = ["warn_once", "has_warned", "reset_warnings"]
