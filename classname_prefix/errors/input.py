"""AST input exceptions."""

from .base import ClassNamePrefixError


class AstInputError(ClassNamePrefixError):
    """Raised when an ESTree JSON document cannot be loaded.

    Attributes:
        path: The file that failed to load, when known.
    """

    def __init__(self, error_code: str, message: str, *, path: str | None = None) -> None:
        super().__init__(error_code, message)
        self.path = path


__all__ = ["AstInputError"]
