"""JSX class-name prefix check.

Enforces that every literal CSS class on a JSX element is the component
name in the configured casing, or starts with it followed by ``__``.

Package layout
--------------
naming.py       Convention transforms (dash, camelCase, underscore).
state.py        Per-unit accumulated names and elements.
rule.py         The rule and its per-unit visitor (prefix resolution).
validator.py    Token checks against a resolved prefix.
diagnostics.py  Diagnostic records and the reporting context.
traversal.py    Document-order ESTree walk with enter/exit handlers.
options.py      Rule option schema validation.
policy.py       TOML policy file loading.
runner.py       Loading ESTree JSON units and linting them.
cli.py          Command-line entry point.
"""

from .rule import ClassNamePrefixRule, UnitVisitor
from .naming import ConventionKind, transform
from .runner import lint_tree, lint_paths, load_tree
from .options import RuleOptions
from .diagnostics import Diagnostic, RuleContext

__version__ = "0.1.0"

__all__ = [
    "ClassNamePrefixRule",
    "UnitVisitor",
    "ConventionKind",
    "transform",
    "RuleOptions",
    "Diagnostic",
    "RuleContext",
    "lint_tree",
    "lint_paths",
    "load_tree",
]
