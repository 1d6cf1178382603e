"""Unit tests for resolving the component prefix of an analysis unit."""

from __future__ import annotations

from classname_prefix.rule import (
    UnitVisitor,
    ClassNamePrefixRule,
    class_declaration_name,
    default_export_name,
)
from classname_prefix.runner import lint_tree
from classname_prefix.options import RuleOptions
from classname_prefix.diagnostics import RuleContext
from tests.helpers.estree import (
    div,
    element,
    attribute,
    render,
    program,
    literal,
    identifier,
    export_default,
    class_declaration,
    function_declaration,
)

MISSING = "Cannot find class prefix (no default export and no class definition)"


def _rule(prefix_type: str = "dash") -> ClassNamePrefixRule:
    return ClassNamePrefixRule.from_options({"prefixType": prefix_type})


def _messages(tree: dict, prefix_type: str = "dash") -> list[str]:
    return [d.message for d in lint_tree(tree, _rule(prefix_type))]


# --- name extraction ---


def test_default_export_identifier_name() -> None:
    assert default_export_name(export_default(identifier("Foo"))) == "Foo"


def test_default_export_named_class_declaration() -> None:
    assert default_export_name(export_default(class_declaration("Card"))) == "Card"


def test_default_export_named_function_declaration() -> None:
    assert default_export_name(export_default(function_declaration("Card"))) == "Card"


def test_default_export_anonymous_expression_has_no_name() -> None:
    assert default_export_name(export_default(literal(42))) is None
    assert default_export_name(export_default(class_declaration(None))) is None


def test_class_declaration_name_anonymous() -> None:
    assert class_declaration_name(class_declaration(None)) is None


# --- precedence ---


def test_export_name_wins_over_class_name() -> None:
    tree = program(
        class_declaration("Inner"),
        render(div("outer__x inner__x")),
        export_default(identifier("Outer")),
    )
    assert _messages(tree) == ['Class "inner__x" name should starts with "outer__"']


def test_class_name_used_without_default_export() -> None:
    tree = program(class_declaration("Widget", render(div("widget__a"))))
    assert _messages(tree) == []


def test_anonymous_export_falls_through_to_class_name() -> None:
    tree = program(
        export_default(literal(1)),
        class_declaration("Widget"),
        render(div("widget__a nope")),
    )
    assert _messages(tree) == ['Class "nope" name should starts with "widget__"']


def test_first_default_export_is_kept() -> None:
    tree = program(
        export_default(identifier("First")),
        export_default(identifier("Second")),
        render(div("first__a second__a")),
    )
    assert _messages(tree) == ['Class "second__a" name should starts with "first__"']


def test_first_class_declaration_is_kept() -> None:
    tree = program(
        class_declaration("Alpha"),
        class_declaration("Beta"),
        render(div("alpha beta")),
    )
    assert _messages(tree) == ['Class "beta" name should starts with "alpha__"']


def test_declaration_after_markup_still_resolves() -> None:
    tree = program(render(div("late__x")), export_default(identifier("Late")))
    assert _messages(tree) == []


# --- missing prefix ---


def test_missing_prefix_reported_once_at_program() -> None:
    tree = program(render(div("a b")), render(div("c")))
    diagnostics = lint_tree(tree, _rule())
    assert [d.message for d in diagnostics] == [MISSING]
    assert diagnostics[0].node is tree


def test_no_class_elements_means_no_diagnostics() -> None:
    assert _messages(program(render(element(attribute("id", "main"))))) == []
    assert _messages(program(export_default(identifier("Foo")))) == []
    assert _messages(program()) == []


# --- visitor callbacks ---


def test_visitor_callbacks_are_set_once() -> None:
    visitor = UnitVisitor(RuleOptions(), RuleContext())
    visitor.on_default_export(None)
    visitor.on_default_export("Foo")
    visitor.on_default_export("Bar")
    visitor.on_class_definition("Baz")
    visitor.on_class_definition("Qux")
    assert visitor.state.exported_name == "Foo"
    assert visitor.state.defined_class_name == "Baz"
    assert visitor.resolve_prefix() == "foo__"


def test_resolve_prefix_uses_convention() -> None:
    visitor = UnitVisitor(RuleOptions.from_mapping({"prefixType": "camelCase"}), RuleContext())
    visitor.on_class_definition("my-widget")
    assert visitor.resolve_prefix() == "Mywidget__"


def test_resolve_prefix_identity_for_unknown_convention() -> None:
    visitor = UnitVisitor(RuleOptions.from_mapping({"prefixType": "kebab"}), RuleContext())
    visitor.on_default_export("MyWidget")
    assert visitor.resolve_prefix() == "MyWidget__"


def test_empty_class_value_still_needs_a_prefix() -> None:
    assert _messages(program(render(div("")))) == [MISSING]
