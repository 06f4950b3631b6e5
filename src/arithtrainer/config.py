"""Trainer configuration with the built-in practice defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Operation


@dataclass(frozen=True)
class TrainerConfig:
    """Session settings. Ranges are half-open ``(low, high)`` pairs."""

    operations: tuple[Operation, ...] = (Operation.MULTIPLICATION,)
    num1_range: tuple[int, int] = (3, 12)
    num2_range: tuple[int, int] = (6, 12)
    count: int = 100
    slow_threshold_ms: int = 2 * 1000
    table_range: tuple[int, int] = (4, 15)
    table_color_from: int = 10

    def validate(self) -> TrainerConfig:
        """Raise ``ValueError`` for settings the generator cannot draw from."""
        if not self.operations:
            raise ValueError("At least one operation must be selected.")
        for label, (low, high) in (
            ("num1", self.num1_range),
            ("num2", self.num2_range),
            ("table", self.table_range),
        ):
            if high <= low:
                raise ValueError(f"{label} range is empty: {low} - {high} (upper bound is excluded).")
        if self.slow_threshold_ms < 0:
            raise ValueError("Slow threshold must not be negative.")
        return self


def parse_operations(text: str) -> tuple[Operation, ...]:
    """Parse a comma-separated operation list such as ``"add,mul"``, dropping duplicates."""
    selected: list[Operation] = []
    for item in text.split(","):
        if not item.strip():
            continue
        operation = Operation.from_name(item)
        if operation not in selected:
            selected.append(operation)
    return tuple(selected)
