"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- logging: log level and record format
- rule: rule identity, default convention and policy file names

Functions live outside config/ (see options.py and policy.py).
"""

from .logging import (
    APP_LOG_LEVEL,
    APP_LOG_FORMAT,
    APP_LOG_DATEFMT,
)
from .rule import (
    RULE_ID,
    PREFIX_SEPARATOR,
    DEFAULT_PREFIX_TYPE,
    PREFIX_TYPE_OPTION,
    MISSING_PREFIX_MESSAGE,
    POLICY_FILENAME,
    DEFAULT_INCLUDE,
)

__all__ = [
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
    "RULE_ID",
    "PREFIX_SEPARATOR",
    "DEFAULT_PREFIX_TYPE",
    "PREFIX_TYPE_OPTION",
    "MISSING_PREFIX_MESSAGE",
    "POLICY_FILENAME",
    "DEFAULT_INCLUDE",
]
