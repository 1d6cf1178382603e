"""Host driver: load ESTree JSON units and run the rule over them."""

from __future__ import annotations

import json
import logging
from typing import Any
from pathlib import Path
from dataclasses import field, dataclass
from collections.abc import Iterable

from .rule import ClassNamePrefixRule
from .errors import AstInputError
from .logging import log_context
from .traversal import is_node, walk
from .diagnostics import Diagnostic, RuleContext
from .config.rule import DEFAULT_INCLUDE

logger = logging.getLogger(__name__)

# Babel wraps the program in a File node; every other ESTree parser returns it directly
_ROOT_TYPES = {"Program", "File"}


def load_tree(path: Path) -> dict[str, Any]:
    """Read an ESTree JSON document, raising ``AstInputError`` on bad input."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AstInputError("unreadable", f"{path}: cannot read AST ({exc})", path=str(path)) from exc

    try:
        tree = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AstInputError("invalid_json", f"{path}: invalid JSON ({exc.msg})", path=str(path)) from exc
    except RecursionError as exc:
        raise AstInputError("too_deep", f"{path}: JSON nesting too deep to decode", path=str(path)) from exc

    if not is_node(tree) or tree["type"] not in _ROOT_TYPES:
        raise AstInputError("not_program", f"{path}: root is not an ESTree Program", path=str(path))
    return tree


def lint_tree(tree: dict[str, Any], rule: ClassNamePrefixRule, *, unit: str = "-") -> list[Diagnostic]:
    """Run *rule* over one analysis unit and return its diagnostics."""
    context = RuleContext(unit=unit)
    visitor = rule.create(context)
    with log_context(unit=unit):
        logger.debug("checking unit")
        walk(tree, visitor.handlers())
        logger.debug("finished unit with %d diagnostic(s)", len(context.diagnostics))
    return context.diagnostics


def iter_unit_paths(paths: Iterable[Path], include: Iterable[str] = DEFAULT_INCLUDE) -> list[Path]:
    """Expand directory arguments with *include* globs; files are kept as given."""
    patterns = tuple(include)
    files: list[Path] = []
    seen: set[Path] = set()
    for path in paths:
        if path.is_dir():
            matches = sorted({match for pattern in patterns for match in path.glob(pattern) if match.is_file()})
        else:
            matches = [path]
        for match in matches:
            if match in seen:
                continue
            seen.add(match)
            files.append(match)
    return files


@dataclass
class LintResults:
    """Outcome of linting several units.

    Attributes:
        diagnostics: Diagnostics per unit, in the order units were linted.
        errors: Units that could not be loaded; they are skipped.
    """

    diagnostics: dict[str, list[Diagnostic]] = field(default_factory=dict)
    errors: list[AstInputError] = field(default_factory=list)


def lint_paths(
    paths: Iterable[Path],
    rule: ClassNamePrefixRule,
    *,
    include: Iterable[str] = DEFAULT_INCLUDE,
) -> LintResults:
    """Lint every unit under *paths* in order through one rule instance."""
    results = LintResults()
    for path in iter_unit_paths(paths, include):
        unit = str(path)
        try:
            tree = load_tree(path)
        except AstInputError as exc:
            logger.debug("skipping unit %s: %s", unit, exc.error_code)
            results.errors.append(exc)
            continue
        results.diagnostics[unit] = lint_tree(tree, rule, unit=unit)
    return results


__all__ = ["LintResults", "load_tree", "lint_tree", "iter_unit_paths", "lint_paths"]
