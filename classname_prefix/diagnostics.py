"""Diagnostic records and the reporting context handed to the rule."""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass

from .config.rule import RULE_ID


def _node_position(node: dict[str, Any]) -> tuple[int | None, int | None]:
    loc = node.get("loc")
    if not isinstance(loc, dict):
        return None, None
    start = loc.get("start")
    if not isinstance(start, dict):
        return None, None
    line = start.get("line")
    column = start.get("column")
    return (
        line if isinstance(line, int) else None,
        column if isinstance(column, int) else None,
    )


@dataclass
class Diagnostic:
    """One reported violation.

    Attributes:
        node: The ESTree node the report is anchored at.
        message: Human-readable description of the violation.
        rule_id: Identifier of the reporting rule.
        line: 1-based line of the node start, when the AST carries ``loc``.
        column: 0-based column of the node start, when known.
    """

    node: dict[str, Any] = field(repr=False)
    message: str
    rule_id: str = RULE_ID
    line: int | None = None
    column: int | None = None

    @classmethod
    def at(cls, node: dict[str, Any], message: str, *, rule_id: str = RULE_ID) -> Diagnostic:
        line, column = _node_position(node)
        return cls(node=node, message=message, rule_id=rule_id, line=line, column=column)

    def format(self, unit: str | None = None) -> str:
        """Render ``unit:line:col: message`` with a 1-based column."""
        column = self.column + 1 if self.column is not None else None
        location = ":".join(str(part) for part in (unit, self.line, column) if part is not None)
        return f"{location}: {self.message}" if location else self.message


@dataclass
class RuleContext:
    """Collects diagnostics reported while one analysis unit is checked.

    Attributes:
        unit: Display name of the analysis unit (usually a file path).
        diagnostics: Reports in the order they were made.
    """

    unit: str = "-"
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, node: dict[str, Any], message: str) -> Diagnostic:
        return self.add(Diagnostic.at(node, message))

    def add(self, diagnostic: Diagnostic) -> Diagnostic:
        self.diagnostics.append(diagnostic)
        return diagnostic


__all__ = ["Diagnostic", "RuleContext"]
