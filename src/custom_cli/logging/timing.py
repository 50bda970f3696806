"""
Step timing for structured logs.

``log_step`` wraps one unit of work: ``{event}.start`` at DEBUG, then
``{event}.end`` with ``duration_ms`` (or ``{event}.error`` when the block
raises).  The step's span id is pushed into the log context so nested
steps log it as ``parent_span_id``.
"""

import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from custom_cli.logging.context import get_context, get_logger, push_context


@dataclass
class StepTimer:
    """Elapsed time and extra fields reported on a step's end event."""

    step: str
    parent_span_id: str | None = None
    span_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    fields: dict[str, Any] = field(default_factory=dict)
    _started: float = field(default_factory=time.perf_counter, repr=False)
    _stopped: float | None = field(default=None, repr=False)

    @property
    def duration_ms(self) -> float:
        end = time.perf_counter() if self._stopped is None else self._stopped
        return (end - self._started) * 1000

    def add_metric(self, key: str, value: Any) -> None:
        self.fields[key] = value

    def stop(self) -> None:
        if self._stopped is None:
            self._stopped = time.perf_counter()

    def log_fields(self) -> dict[str, Any]:
        out: dict[str, Any] = {"span_id": self.span_id, "duration_ms": round(self.duration_ms, 2)}
        if self.parent_span_id:
            out["parent_span_id"] = self.parent_span_id
        return {**out, **self.fields}


@contextmanager
def log_step(event: str, log_start: bool = True, level: str = "info", **fields: Any) -> Iterator[StepTimer]:
    """
    Log the start, end and duration of the enclosed block.

    Usage:
        with log_step("display_file", path=path) as step:
            step.add_metric("lines", count_lines())
    """
    log = get_logger("custom_cli.timing")
    timer = StepTimer(step=event, parent_span_id=get_context().span_id, fields=dict(fields))
    token = push_context(step=event, span_id=timer.span_id, parent_span_id=timer.parent_span_id)

    if log_start:
        log.debug(f"{event}.start", span_id=timer.span_id, **fields)
    try:
        yield timer
    except Exception as e:
        timer.stop()
        log.error(
            f"{event}.error",
            status="error",
            error_type=type(e).__name__,
            error_message=str(e),
            **timer.log_fields(),
        )
        raise
    finally:
        timer.stop()
        token.restore()

    getattr(log, level)(f"{event}.end", **timer.log_fields())
