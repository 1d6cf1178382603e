"""Element validation against a resolved class prefix.

Every literal ``className`` value on a collected JSX element is split on
single spaces; each non-empty token must start with the prefix or be the
bare component name (the prefix without its trailing separator).
"""

from __future__ import annotations

from typing import Any
from collections.abc import Iterator, Iterable

from .diagnostics import Diagnostic
from .config.rule import PREFIX_SEPARATOR

CLASS_ATTRIBUTE = "className"
_STRING_LITERAL_TYPES = {"Literal", "StringLiteral"}


def _attributes(element: dict[str, Any]) -> list[dict[str, Any]]:
    opening = element.get("openingElement")
    if not isinstance(opening, dict):
        return []
    attributes = opening.get("attributes")
    if not isinstance(attributes, list):
        return []
    return [attr for attr in attributes if isinstance(attr, dict)]


def is_class_attribute(attr: dict[str, Any]) -> bool:
    # JSXSpreadAttribute has no name; JSXNamespacedName carries a nested name node
    name = attr.get("name")
    return isinstance(name, dict) and name.get("name") == CLASS_ATTRIBUTE


def has_class_attribute(element: dict[str, Any]) -> bool:
    return any(is_class_attribute(attr) for attr in _attributes(element))


def literal_class_value(attr: dict[str, Any]) -> str | None:
    """Return the string value of a literal attribute, ``None`` for expressions."""
    value = attr.get("value")
    if not isinstance(value, dict) or value.get("type") not in _STRING_LITERAL_TYPES:
        return None
    literal = value.get("value")
    return literal if isinstance(literal, str) else None


def class_tokens(value: str) -> list[str]:
    return [token for token in value.split(" ") if token]


def bare_name(prefix: str) -> str:
    return prefix.removesuffix(PREFIX_SEPARATOR)


def token_matches(token: str, prefix: str) -> bool:
    return token.startswith(prefix) or token == bare_name(prefix)


def violation_message(token: str, prefix: str) -> str:
    return f'Class "{token}" name should starts with "{prefix}"'


def iter_violations(prefix: str, element: dict[str, Any]) -> Iterator[str]:
    """Yield the offending tokens of one element, attribute by attribute."""
    for attr in _attributes(element):
        if not is_class_attribute(attr):
            continue
        value = literal_class_value(attr)
        if value is None:
            continue
        for token in class_tokens(value):
            if not token_matches(token, prefix):
                yield token


def validate(prefix: str, elements: Iterable[dict[str, Any]]) -> list[Diagnostic]:
    """Check every literal class token of *elements* against *prefix*.

    Returns one diagnostic per offending token, anchored at its element, in
    element order then token order. Nothing is deduplicated.
    """
    diagnostics: list[Diagnostic] = []
    for element in elements:
        for token in iter_violations(prefix, element):
            diagnostics.append(Diagnostic.at(element, violation_message(token, prefix)))
    return diagnostics


__all__ = [
    "CLASS_ATTRIBUTE",
    "is_class_attribute",
    "has_class_attribute",
    "literal_class_value",
    "class_tokens",
    "bare_name",
    "token_matches",
    "violation_message",
    "iter_violations",
    "validate",
]
