"""Exception classification helpers for CLI exit codes."""

from __future__ import annotations

from .input import AstInputError
from .options import OptionsError

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_USAGE = 2
EXIT_INPUT = 3

ERROR_EXIT_CODES: tuple[tuple[type[BaseException], int], ...] = (
    (OptionsError, EXIT_USAGE),
    (AstInputError, EXIT_INPUT),
)


def exit_code_for(exc: BaseException) -> int:
    """Map a host-side exception to a process exit code."""

    for cls, code in ERROR_EXIT_CODES:
        if isinstance(exc, cls):
            return code
    return EXIT_USAGE


__all__ = ["EXIT_OK", "EXIT_VIOLATIONS", "EXIT_USAGE", "EXIT_INPUT", "ERROR_EXIT_CODES", "exit_code_for"]
