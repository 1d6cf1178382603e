"""TOML policy file loading.

A policy file holds the rule options and the unit discovery globs:

    [rule]
    prefixType = "underscore"

    [paths]
    include = ["build/ast/**/*.json"]
"""

from __future__ import annotations

from typing import Any
from pathlib import Path
from dataclasses import field, dataclass

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - Python 3.10 fallback
    import tomli as tomllib  # type: ignore[no-redef]

from .errors import PolicyError
from .config.rule import DEFAULT_INCLUDE, POLICY_FILENAME


@dataclass(frozen=True)
class Policy:
    """Decoded policy file contents.

    Attributes:
        rule: Raw rule options, validated later by ``RuleOptions``.
        include: Glob patterns used to find units under directory arguments.
        source: The file the policy was read from, if any.
    """

    rule: dict[str, Any] = field(default_factory=dict)
    include: tuple[str, ...] = DEFAULT_INCLUDE
    source: Path | None = None


def _table(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    val = data.get(key, {})
    if not isinstance(val, dict):
        raise PolicyError("invalid_policy", f"{path}: [{key}] must be a table")
    return val


def _include(paths: dict[str, Any], path: Path) -> tuple[str, ...]:
    val = paths.get("include")
    if val is None:
        return DEFAULT_INCLUDE
    if not isinstance(val, list) or not all(isinstance(item, str) for item in val):
        raise PolicyError("invalid_policy", f"{path}: paths.include must be a list of glob strings")
    return tuple(val)


def find_policy(directory: Path) -> Path | None:
    """Return the default policy file in *directory*, if present."""
    candidate = directory / POLICY_FILENAME
    return candidate if candidate.is_file() else None


def load_policy(path: Path | None) -> Policy:
    """Read *path* into a ``Policy``; ``None`` yields the defaults."""
    if path is None:
        return Policy()
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PolicyError("unreadable_policy", f"{path}: {exc.strerror or exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise PolicyError("invalid_policy", f"{path}: {exc}") from exc

    return Policy(
        rule=dict(_table(data, "rule", path)),
        include=_include(_table(data, "paths", path), path),
        source=path,
    )


__all__ = ["Policy", "find_policy", "load_policy"]
