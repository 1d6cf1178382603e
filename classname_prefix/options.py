"""Rule option parsing and schema validation."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass
from collections.abc import Mapping

from .errors import OptionsError
from .naming import ConventionKind
from .config.rule import DEFAULT_PREFIX_TYPE, PREFIX_TYPE_OPTION

ALLOWED_OPTIONS = frozenset({PREFIX_TYPE_OPTION})


@dataclass(frozen=True)
class RuleOptions:
    """Validated options for one rule instance.

    Attributes:
        prefix_type: The configured ``prefixType`` string, as given.
        convention: The matching convention, or ``None`` when the string is
            not a known convention (identity transform).
    """

    prefix_type: str = DEFAULT_PREFIX_TYPE
    convention: ConventionKind | None = ConventionKind.DASH

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> RuleOptions:
        """Validate a raw options mapping such as a policy ``[rule]`` table."""
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise OptionsError("invalid_options", f"rule options must be a table, got {type(raw).__name__}")

        unknown = sorted(str(key) for key in raw if key not in ALLOWED_OPTIONS)
        if unknown:
            raise OptionsError(
                "unknown_option",
                f"unknown rule option(s): {', '.join(unknown)} (allowed: {PREFIX_TYPE_OPTION})",
            )

        value = raw.get(PREFIX_TYPE_OPTION)
        if value is not None and not isinstance(value, str):
            raise OptionsError(
                "invalid_prefix_type",
                f"{PREFIX_TYPE_OPTION} must be a string, got {type(value).__name__}",
            )

        prefix_type = value or DEFAULT_PREFIX_TYPE
        return cls(prefix_type=prefix_type, convention=ConventionKind.parse(prefix_type))


__all__ = ["ALLOWED_OPTIONS", "RuleOptions"]
