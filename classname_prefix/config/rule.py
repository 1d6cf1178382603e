"""Rule identity, option defaults and policy file locations."""

import os


RULE_ID = "classname-prefix"

# Joins the component name and the rest of a class token (block__element)
PREFIX_SEPARATOR = "__"

# Option key accepted in the rule options mapping and the [rule] policy table
PREFIX_TYPE_OPTION = "prefixType"
DEFAULT_PREFIX_TYPE = "dash"

MISSING_PREFIX_MESSAGE = "Cannot find class prefix (no default export and no class definition)"

POLICY_FILENAME = os.getenv("CLASSNAME_PREFIX_POLICY", "classname-prefix.toml")

# Glob patterns used when a directory is passed without a policy [paths] table
DEFAULT_INCLUDE: tuple[str, ...] = ("**/*.json",)


__all__ = [
    "RULE_ID",
    "PREFIX_SEPARATOR",
    "PREFIX_TYPE_OPTION",
    "DEFAULT_PREFIX_TYPE",
    "MISSING_PREFIX_MESSAGE",
    "POLICY_FILENAME",
    "DEFAULT_INCLUDE",
]
