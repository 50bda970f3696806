"""
Per-invocation log context held in a ContextVar.

The dispatcher binds the command name and input path once; every log
entry then carries them via :func:`add_context_processor`.
"""

from contextvars import ContextVar, Token
from dataclasses import asdict, dataclass, replace
from typing import Any

import structlog


@dataclass(frozen=True)
class LogContext:
    """Fields attached to every log entry while a command runs."""

    command: str | None = None
    path: str | None = None
    step: str | None = None
    span_id: str | None = None
    parent_span_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def merge(self, **kwargs: Any) -> "LogContext":
        """Copy with the non-None ``kwargs`` applied."""
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})


_current: ContextVar[LogContext] = ContextVar("custom_cli_log_context", default=LogContext())  # noqa: B039


def get_context() -> LogContext:
    return _current.get()


def bind_context(**kwargs: Any) -> LogContext:
    """Merge values into the current context for the rest of the command."""
    ctx = get_context().merge(**kwargs)
    _current.set(ctx)
    return ctx


def clear_context() -> None:
    _current.set(LogContext())


class _ContextToken:
    """Undo handle returned by :func:`push_context`."""

    def __init__(self, token: Token[LogContext]):
        self._token = token

    def restore(self) -> None:
        _current.reset(self._token)


def push_context(**kwargs: Any) -> _ContextToken:
    """Like :func:`bind_context`, but ``restore()`` brings back the old context."""
    return _ContextToken(_current.set(get_context().merge(**kwargs)))


def add_context_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: add context fields the event does not already set."""
    for key, value in get_context().to_dict().items():
        event_dict.setdefault(key, value)
    return event_dict


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name)
