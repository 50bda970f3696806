"""
Typed command objects.

Each frozen dataclass is the input contract for one operation.  Commands
carry only validated, transport-agnostic data, never Click params.
"""

from __future__ import annotations

from dataclasses import dataclass

from custom_cli.core.settings import NumberingStyle


@dataclass(frozen=True, slots=True)
class PrintCommand:
    """Request for :func:`custom_cli.ops.text.print_text`."""

    text: str | None = None


@dataclass(frozen=True, slots=True)
class DisplayCommand:
    """Request for :func:`custom_cli.ops.display.display_file`.

    Attributes:
        path: File to read.  ``None`` is treated as the empty path, ``"-"``
            reads standard input.
        number_all: Number every output line.
        number_nonblank: Number non-blank lines only.
        show_ends: Append ``$`` to each line.
        show_tabs: Render TAB characters as ``^I``.
        numbering: Origin of the display number.
    """

    path: str | None = None
    number_all: bool = False
    number_nonblank: bool = False
    show_ends: bool = False
    show_tabs: bool = False
    numbering: NumberingStyle = NumberingStyle.ONE_BASED

    @property
    def numbered(self) -> bool:
        return self.number_all or self.number_nonblank


Command = PrintCommand | DisplayCommand
