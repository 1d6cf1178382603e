"""Naming-convention transforms for component class prefixes.

A component name such as ``MyClass`` is rewritten into the casing used by
the stylesheet before the ``__`` separator is appended:

    dash        MyClass  -> my-class
    underscore  MyClass  -> my_class
    camelCase   my-class -> Myclass

Any other convention leaves the name untouched.
"""

from __future__ import annotations

import re
from enum import Enum

from .helpers.dedupe import warn_once

_DASHED_LOWER = re.compile(r"-([a-z])")


class ConventionKind(str, Enum):
    """Enumerates the supported prefix casing conventions."""

    DASH = "dash"
    CAMEL_CASE = "camelCase"
    UNDERSCORE = "underscore"

    @classmethod
    def parse(cls, value: str | None) -> ConventionKind | None:
        """Return the matching convention, or ``None`` for the identity transform."""
        if value is None:
            return None
        for kind in cls:
            if kind.value == value:
                return kind
        warn_once(
            f"prefix_type:{value}",
            f"unknown prefixType {value!r}; class prefixes will not be transformed",
            prefix="[classname-prefix]",
        )
        return None


def _split_on_upper(name: str, separator: str) -> str:
    joined = "".join(separator + ch if ch.isupper() else ch for ch in name).lower()
    return joined.removeprefix(separator)


def to_dash(name: str) -> str:
    return _split_on_upper(name, "-")


def to_underscore(name: str) -> str:
    return _split_on_upper(name, "_")


def to_camel_case(name: str) -> str:
    """Join dashed segments and capitalize the result.

    Only the first character keeps its upper case: ``my-class`` becomes
    ``Myclass``, not ``MyClass``.
    """
    joined = _DASHED_LOWER.sub(lambda m: m.group(1).upper(), name)
    if not joined:
        return joined
    return joined[0].upper() + joined[1:].lower()


def transform(name: str, kind: ConventionKind | None) -> str:
    """Rewrite *name* into the casing selected by *kind*."""
    if kind is ConventionKind.DASH:
        return to_dash(name)
    if kind is ConventionKind.UNDERSCORE:
        return to_underscore(name)
    if kind is ConventionKind.CAMEL_CASE:
        return to_camel_case(name)
    return name


__all__ = [
    "ConventionKind",
    "to_dash",
    "to_underscore",
    "to_camel_case",
    "transform",
]
