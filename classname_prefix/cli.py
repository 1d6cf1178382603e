"""Command-line entry point for the class-name prefix check.

Arguments are ESTree JSON files (as produced by acorn, espree or
``@babel/parser`` with the estree plugin) or directories to scan.
"""

from __future__ import annotations

import sys
import logging
from pathlib import Path
from argparse import Namespace, ArgumentParser

from .rule import ClassNamePrefixRule
from .errors import ClassNamePrefixError, exit_code_for
from .errors.classify import EXIT_OK, EXIT_VIOLATIONS
from .policy import find_policy, load_policy
from .runner import lint_paths
from .logging import configure_logging
from .diagnostics import Diagnostic
from .config.rule import RULE_ID, POLICY_FILENAME, PREFIX_TYPE_OPTION

logger = logging.getLogger(__name__)

LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=RULE_ID,
        description="Check that JSX className values start with the component prefix.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="ESTree JSON files or directories")
    parser.add_argument(
        "--prefix-type",
        dest="prefix_type",
        help="Prefix casing: dash, camelCase or underscore (default from policy, else dash)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=f"Policy TOML file (default ./{POLICY_FILENAME} when present)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        help="Log level override (default env CLASSNAME_PREFIX_LOG_LEVEL or WARNING)",
    )
    return parser


def report(header: str, violations: list[str]) -> int:
    """Print *violations* to stderr under *header* and return an exit code."""
    if not violations:
        return EXIT_OK
    print(f"{header}:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return EXIT_VIOLATIONS


def _format_results(results: dict[str, list[Diagnostic]]) -> list[str]:
    return [f"  {diagnostic.format(unit)}" for unit, diagnostics in results.items() for diagnostic in diagnostics]


def run(args: Namespace) -> int:
    policy = load_policy(args.config or find_policy(Path.cwd()))
    raw_options = dict(policy.rule)
    if args.prefix_type is not None:
        raw_options[PREFIX_TYPE_OPTION] = args.prefix_type

    rule = ClassNamePrefixRule.from_options(raw_options)
    logger.info("checking with prefixType=%s", rule.options.prefix_type)
    results = lint_paths(args.paths, rule, include=policy.include)
    code = report("Class name prefix violations", _format_results(results.diagnostics))
    for error in results.errors:
        print(f"[{RULE_ID}] {error.message}", file=sys.stderr)
    return exit_code_for(results.errors[0]) if results.errors else code


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        return run(args)
    except ClassNamePrefixError as exc:
        print(f"[{RULE_ID}] {exc.message}", file=sys.stderr)
        return exit_code_for(exc)


if __name__ == "__main__":
    sys.exit(main())
