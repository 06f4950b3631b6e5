"""Terminal output helper: cursor control and Rich color markup."""

from __future__ import annotations

import sys
from typing import Literal, TextIO

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

# Rich markup color names used by the trainer.
GOOD_COLOR = "green"
BAD_COLOR = "red"
SLOW_COLOR = "yellow"
STATS_COLOR = "cyan"
AXIS_COLOR = "magenta"

ColorSystemName = Literal["auto", "standard", "256", "truecolor", "windows"]


class Terminal:
    """Writes markup and cursor controls to one explicit output stream."""

    def __init__(
        self,
        file: TextIO | None = None,
        *,
        force_terminal: bool | None = None,
        color_system: ColorSystemName | None = "auto",
    ) -> None:
        self.console = Console(
            file=file if file is not None else sys.stdout,
            force_terminal=force_terminal,
            color_system=color_system,
            highlight=False,
            soft_wrap=True,
            emoji=False,
        )

    def line_up(self) -> None:
        """Move the cursor up one line.

        Rich skips cursor controls when the output is not a terminal.
        """
        self.console.control(Control.move(0, -1))

    def clear_line(self) -> None:
        """Erase the current line and return the cursor to column zero."""
        self.console.control(Control((ControlType.ERASE_IN_LINE, 2), ControlType.CARRIAGE_RETURN))

    def erase_previous_line(self) -> None:
        self.line_up()
        self.clear_line()

    def write(self, text: str) -> None:
        """Write plain text without a newline (prompts)."""
        self.console.print(text, markup=False, end="")

    def print(self, markup: str = "") -> None:
        """Write one line of Rich markup, e.g. ``"[green]GOOD"``."""
        self.console.print(markup)

    def print_inline(self, markup: str) -> None:
        self.console.print(markup, end="")
