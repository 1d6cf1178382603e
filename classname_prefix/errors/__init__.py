"""Centralized exception classes for the class-name prefix check.

Organization:
    - base.py: Common base carrying an error code
    - options.py: Rule option and policy file errors
    - input.py: AST input loading errors
    - classify.py: Exception-to-exit-code mapping

A missing prefix is never an exception; it is reported as a diagnostic.
"""

from .input import AstInputError
from .base import ClassNamePrefixError
from .classify import exit_code_for
from .options import OptionsError, PolicyError

__all__ = [
    "ClassNamePrefixError",
    "OptionsError",
    "PolicyError",
    "AstInputError",
    "exit_code_for",
]
