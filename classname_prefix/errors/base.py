"""Base exception with structured error codes."""


class ClassNamePrefixError(Exception):
    """Host-side failure with error code metadata.

    Attributes:
        error_code: Machine-parseable error identifier.
        message: Human-readable error description.
    """

    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message


__all__ = ["ClassNamePrefixError"]
