"""Rule option and policy file exceptions."""

from .base import ClassNamePrefixError


class OptionsError(ClassNamePrefixError):
    """Raised when rule options fail schema validation.

    Covers unknown option keys and option values of the wrong type.
    """


class PolicyError(OptionsError):
    """Raised when a TOML policy file cannot be read or decoded."""


__all__ = ["OptionsError", "PolicyError"]
