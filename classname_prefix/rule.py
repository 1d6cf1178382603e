"""The class-name prefix rule.

All CSS class names on JSX elements must start with ``<prefix>__`` or be
exactly ``<prefix>``, where the prefix is the component name (the default
export, else the first class declaration) in the configured casing.

The rule is long-lived and holds only options. Each analysis unit gets a
fresh ``UnitVisitor`` whose callbacks accumulate state while the traversal
runs; diagnostics are produced only on ``Program:exit``, because the
declaration naming the component may follow the markup it governs.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Mapping

from .naming import transform
from .traversal import Handler
from .options import RuleOptions
from .state import AnalysisUnitState
from .validator import validate, has_class_attribute
from .diagnostics import RuleContext
from .config.rule import RULE_ID, PREFIX_SEPARATOR, MISSING_PREFIX_MESSAGE

logger = logging.getLogger(__name__)


def _identifier_name(node: Any) -> str | None:
    if isinstance(node, dict) and node.get("type") == "Identifier":
        name = node.get("name")
        return name if isinstance(name, str) else None
    return None


def default_export_name(node: dict[str, Any]) -> str | None:
    """Name bound by ``export default``: ``export default Foo`` or a named declaration."""
    declaration = node.get("declaration")
    if not isinstance(declaration, dict):
        return None
    name = _identifier_name(declaration)
    if name is not None:
        return name
    return _identifier_name(declaration.get("id"))


def class_declaration_name(node: dict[str, Any]) -> str | None:
    return _identifier_name(node.get("id"))


class UnitVisitor:
    """Traversal callbacks for one analysis unit.

    Collecting -> Resolving (on ``Program:exit``) -> Collecting. The state
    is reset after resolution, so one visitor may be driven over several
    programs in sequence.
    """

    def __init__(self, options: RuleOptions, context: RuleContext) -> None:
        self.options = options
        self.context = context
        self.state = AnalysisUnitState()

    def handlers(self) -> dict[str, Handler]:
        return {
            "ExportDefaultDeclaration": lambda node: self.on_default_export(default_export_name(node)),
            "ClassDeclaration": lambda node: self.on_class_definition(class_declaration_name(node)),
            "JSXElement": self._visit_jsx_element,
            "Program:exit": self.resolve_and_validate,
        }

    def on_default_export(self, name: str | None) -> None:
        self.state.record_export(name)

    def on_class_definition(self, name: str | None) -> None:
        self.state.record_class(name)

    def on_markup_element(self, element: dict[str, Any]) -> None:
        self.state.record_element(element)

    def _visit_jsx_element(self, node: dict[str, Any]) -> None:
        if has_class_attribute(node):
            self.on_markup_element(node)

    def resolve_prefix(self) -> str | None:
        name = self.state.component_name()
        if name is None:
            return None
        return transform(name, self.options.convention) + PREFIX_SEPARATOR

    def resolve_and_validate(self, node: dict[str, Any]) -> None:
        """Validate the collected elements against the unit's prefix, then reset."""
        if not self.state.pending_elements:
            self.state.reset()
            return

        try:
            prefix = self.resolve_prefix()
            if prefix is None:
                logger.debug(
                    "no prefix for %d element(s) in %s",
                    len(self.state.pending_elements),
                    self.context.unit,
                )
                self.context.report(node, MISSING_PREFIX_MESSAGE)
                return

            logger.debug("resolved prefix %r for %s", prefix, self.context.unit)
            for diagnostic in validate(prefix, self.state.pending_elements):
                self.context.add(diagnostic)
        finally:
            self.state.reset()


class ClassNamePrefixRule:
    """Long-lived rule object; creates one visitor per analysis unit."""

    rule_id = RULE_ID
    description = "Report wrong `className` props in jsx component"

    def __init__(self, options: RuleOptions | None = None) -> None:
        self.options = options or RuleOptions()

    @classmethod
    def from_options(cls, raw: Mapping[str, Any] | None) -> ClassNamePrefixRule:
        return cls(RuleOptions.from_mapping(raw))

    def create(self, context: RuleContext) -> UnitVisitor:
        return UnitVisitor(self.options, context)


__all__ = [
    "ClassNamePrefixRule",
    "UnitVisitor",
    "default_export_name",
    "class_declaration_name",
]
