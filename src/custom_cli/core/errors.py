"""
Structured error types for custom-cli.

Every failure the CLI can report is a :class:`CliError` carrying a
category, the process exit code it maps to, free-form details and an
optional chained cause.

Hierarchy::

    CliError            (INTERNAL, exit 1)
    ├── UsageError      (USAGE,    exit 2)
    ├── ConfigError     (CONFIG,   exit 1)
    ├── FileOpenError   (SOURCE,   exit 1)
    └── FileReadError   (SOURCE,   exit 1)

Usage:
    from custom_cli.core.errors import FileOpenError

    try:
        handle = open(path, encoding="utf-8")
    except OSError as e:
        raise FileOpenError(path, reason=e.strerror, cause=e) from e
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for classification and exit-code routing."""

    USAGE = "USAGE"               # Bad arguments, unroutable command
    SOURCE = "SOURCE"             # Input file missing, unreadable or undecodable
    CONFIG = "CONFIG"             # Invalid CUSTOM_CLI_* settings
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


class CliError(Exception):
    """
    Base exception for all custom-cli errors.

    Subclasses set ``default_category`` and ``default_exit_code``; both can
    be overridden per instance.

    Examples:
        >>> error = CliError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.exit_code
        1
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        exit_code: int | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.exit_code = exit_code if exit_code is not None else self.default_exit_code
        self.details = details or {}
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Flatten the error into log-friendly key/value pairs."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "exit_code": self.exit_code,
        }
        if self.details:
            result["details"] = dict(self.details)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class UsageError(CliError):
    """Malformed arguments or a command that cannot be routed."""

    default_category = ErrorCategory.USAGE
    default_exit_code = 2


class ConfigError(CliError):
    """Settings from the environment or ``.env`` failed validation."""

    default_category = ErrorCategory.CONFIG


class FileOpenError(CliError):
    """The target file is missing or cannot be opened for reading."""

    default_category = ErrorCategory.SOURCE

    def __init__(
        self,
        path: str,
        reason: str | None = None,
        *,
        cause: Exception | None = None,
    ):
        self.path = path
        self.reason = reason or "cannot open file"
        super().__init__(
            f"{path or '<empty path>'}: {self.reason}",
            details={"path": path, "reason": self.reason},
            cause=cause,
        )


class FileReadError(CliError):
    """The file opened but its bytes could not be decoded."""

    default_category = ErrorCategory.SOURCE

    def __init__(self, path: str, reason: str, *, cause: Exception | None = None):
        self.path = path
        self.reason = reason
        super().__init__(
            f"{path}: {reason}",
            details={"path": path, "reason": reason},
            cause=cause,
        )
