"""
File display operation.

Streams a file (or standard input) to an output sink one line at a time,
optionally decorating each line:

- a right-aligned display number (width 6, two-space separator)
- a ``$`` end-of-line marker
- ``^I`` in place of TAB characters

Only one line is held in memory at a time.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TextIO

from custom_cli.core.errors import FileOpenError, FileReadError
from custom_cli.core.settings import get_settings
from custom_cli.logging import get_logger, log_step
from custom_cli.ops.requests import DisplayCommand
from custom_cli.ops.result import OperationResult, start_timer

log = get_logger(__name__)

STDIN_PATH = "-"
NUMBER_WIDTH = 6
NUMBER_SEPARATOR = "  "
END_MARKER = "$"
TAB_MARKER = "^I"


@dataclass(frozen=True, slots=True)
class DisplaySummary:
    """Payload of a successful :func:`display_file` call."""

    path: str
    lines_written: int
    blank_lines: int


def is_blank(line: str) -> bool:
    """A line is blank when nothing but whitespace remains after trimming."""
    return not line.strip()


class LineNumberer:
    """Computes display numbers while tracking skipped blank lines.

    The display number is ``index + origin - blank_lines`` where
    ``blank_lines`` only grows in non-blank mode, when a blank line is
    left unnumbered.
    """

    def __init__(self, *, origin: int = 1, nonblank_only: bool = False) -> None:
        self.origin = origin
        self.nonblank_only = nonblank_only
        self.blank_lines = 0

    def number_for(self, index: int, line: str) -> int | None:
        """Return the number to show for ``line``, or ``None`` to show none."""
        if self.nonblank_only and is_blank(line):
            self.blank_lines += 1
            return None
        return index + self.origin - self.blank_lines


def format_line(
    line: str,
    *,
    number: int | None = None,
    show_ends: bool = False,
    show_tabs: bool = False,
) -> str:
    """Apply the per-line decorations to a single line (without newline)."""
    parts = []
    if number is not None:
        parts.append(f"{number:>{NUMBER_WIDTH}}{NUMBER_SEPARATOR}")
    parts.append(line)
    if show_ends:
        parts.append(END_MARKER)

    text = "".join(parts)
    if show_tabs:
        text = text.replace("\t", TAB_MARKER)
    return text


def _strip_newline(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _read_lines(stream: TextIO, path: str) -> Iterator[str]:
    try:
        for line in stream:
            yield _strip_newline(line)
    except UnicodeDecodeError as e:
        raise FileReadError(path, reason=str(e), cause=e) from e


@contextmanager
def open_lines(path: str, *, encoding: str = "utf-8", errors: str = "replace") -> Iterator[Iterator[str]]:
    """Open ``path`` and yield an iterator over its lines, terminators stripped.

    Lines end at ``\\n`` only; a lone ``\\r`` stays part of the line.
    ``"-"`` decodes standard input's byte stream the same way and leaves
    it open afterwards.

    Raises:
        FileOpenError: if the file cannot be opened.
        FileReadError: while iterating, if a line cannot be decoded.
    """
    if path == STDIN_PATH:
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding, errors=errors, newline="\n")
        try:
            yield _read_lines(stream, path)
        finally:
            stream.detach()
        return

    try:
        handle = open(path, encoding=encoding, errors=errors, newline="\n")  # noqa: SIM115
    except OSError as e:
        raise FileOpenError(path, reason=e.strerror or str(e), cause=e) from e

    with handle:
        yield _read_lines(handle, path)


def iter_formatted(lines: Iterable[str], command: DisplayCommand) -> Iterator[tuple[str, bool]]:
    """Yield ``(formatted_line, was_blank)`` pairs for ``lines``."""
    numberer = LineNumberer(
        origin=command.numbering.origin,
        nonblank_only=command.number_nonblank,
    )
    for index, line in enumerate(lines):
        number = numberer.number_for(index, line) if command.numbered else None
        yield (
            format_line(
                line,
                number=number,
                show_ends=command.show_ends,
                show_tabs=command.show_tabs,
            ),
            is_blank(line),
        )


def display_file(
    command: DisplayCommand,
    out: TextIO,
    *,
    encoding: str | None = None,
    errors: str | None = None,
) -> OperationResult[DisplaySummary]:
    """Write the decorated contents of ``command.path`` to ``out``.

    An unopenable file produces no output and a failed result with code
    ``FILE_OPEN_FAILED``.  Undecodable input under a strict error handler
    stops the stream at that line with ``FILE_READ_FAILED``.
    """
    timer = start_timer()
    path = command.path or ""

    if encoding is None or errors is None:
        settings = get_settings()
        encoding = encoding or settings.encoding
        errors = errors or settings.encoding_errors

    try:
        with (
            open_lines(path, encoding=encoding, errors=errors) as lines,
            log_step("display_file", path=path) as step,
        ):
            written = 0
            blank = 0
            for text, was_blank in iter_formatted(lines, command):
                out.write(text + "\n")
                written += 1
                blank += was_blank
            step.add_metric("lines", written)
    except FileOpenError as e:
        log.debug("display_file.open_failed", **e.to_dict())
        return OperationResult.from_error("FILE_OPEN_FAILED", e, elapsed_ms=timer.elapsed_ms)
    except FileReadError as e:
        return OperationResult.from_error("FILE_READ_FAILED", e, elapsed_ms=timer.elapsed_ms)

    return OperationResult.ok(
        DisplaySummary(path=path, lines_written=written, blank_lines=blank),
        elapsed_ms=timer.elapsed_ms,
    )
