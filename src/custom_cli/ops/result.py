"""
Operation result envelope.

Every operation returns an :class:`OperationResult` instead of printing
or exiting.  The CLI layer decides how a failure is reported.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from custom_cli.core.errors import CliError, ErrorCategory

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class OperationError:
    """Why an operation failed, and the exit code the CLI should use."""

    code: str
    message: str
    category: ErrorCategory | None = None
    details: dict[str, Any] = field(default_factory=dict)
    exit_code: int = 1


@dataclass
class OperationResult(Generic[T]):
    """Success/failure envelope.

    Build it with :meth:`ok`, :meth:`fail` or :meth:`from_error`.  ``data``
    is set only on success and ``error`` only on failure.
    """

    success: bool
    data: T | None = None
    error: OperationError | None = None
    elapsed_ms: float = 0.0

    @classmethod
    def ok(cls, data: T, *, elapsed_ms: float = 0.0) -> OperationResult[T]:
        return cls(success=True, data=data, elapsed_ms=elapsed_ms)

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        *,
        category: ErrorCategory | None = None,
        details: dict[str, Any] | None = None,
        exit_code: int = 1,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        error = OperationError(
            code=code,
            message=message,
            category=category,
            details=details or {},
            exit_code=exit_code,
        )
        return cls(success=False, error=error, elapsed_ms=elapsed_ms)

    @classmethod
    def from_error(cls, code: str, error: CliError, *, elapsed_ms: float = 0.0) -> OperationResult[T]:
        """Failed result carrying the category, details and exit code of ``error``."""
        return cls.fail(
            code,
            error.message,
            category=error.category,
            details=dict(error.details),
            exit_code=error.exit_code,
            elapsed_ms=elapsed_ms,
        )


class _Timer:
    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._start) * 1000


def start_timer() -> _Timer:
    """Start a stopwatch; read ``timer.elapsed_ms`` when done."""
    return _Timer()
