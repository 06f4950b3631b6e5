"""Multiplication table printer."""

from __future__ import annotations

from .terminal import AXIS_COLOR, GOOD_COLOR, STATS_COLOR, Terminal


def print_multiplication_table(terminal: Terminal, low: int, high: int, color_from: int) -> None:
    """Print products for ``[low, high)`` on both axes.

    Cells where either factor is above ``color_from`` are highlighted.
    """
    terminal.print_inline(f"[{STATS_COLOR}]  *")
    for column in range(low, high):
        terminal.print_inline(f"[{AXIS_COLOR}]{column:5d}")
    terminal.print()

    for row in range(low, high):
        terminal.print_inline(f"[{AXIS_COLOR}] {row:2d}")
        for column in range(low, high):
            product = f"{row * column:5d}"
            if row > color_from or column > color_from:
                terminal.print_inline(f"[{GOOD_COLOR}]{product}")
            else:
                terminal.print_inline(product)
        terminal.print()
