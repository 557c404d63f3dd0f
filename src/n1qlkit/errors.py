"""
Error hierarchy raised by dialects and the schema layer.
"""

from __future__ import annotations


class DialectError(RuntimeError):
    """Base error for dialect translation failures."""

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        self.operation = operation
        super().__init__(message)


class UnsupportedOperationError(DialectError):
    """
    Raised when a translation has no representation in the target dialect.
    """

    def __init__(self, operation: str, *, platform: str | None = None, detail: str | None = None) -> None:
        self.platform = platform
        self.detail = detail
        message = f"Operation '{operation}' is not supported"
        if platform:
            message += f" by platform '{platform}'"
        message += "."
        if detail:
            message += f" {detail}"
        super().__init__(message, operation=operation)


class InvalidArgumentError(DialectError, ValueError):
    """
    Raised when arguments violate a precondition of an otherwise valid operation.
    """


class UnsupportedArgumentError(UnsupportedOperationError, InvalidArgumentError):
    """
    Raised when an operation exists but the given argument cannot be expressed.
    """

    def __init__(
        self,
        operation: str,
        argument: str,
        *,
        platform: str | None = None,
    ) -> None:
        self.argument = argument
        super().__init__(
            operation,
            platform=platform,
            detail=f"Argument '{argument}' cannot be expressed.",
        )


class UnknownDialectError(DialectError, LookupError):
    """Raised when no dialect is registered under the requested name."""


class ConfigurationError(DialectError):
    """Raised when DSN or environment configuration is invalid."""
