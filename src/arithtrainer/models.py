"""Core value types for arithmetic practice."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operation(Enum):
    """Supported two-operand operations, valued by their display symbol."""

    ADDITION = "+"
    MULTIPLICATION = "x"

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, num1: int, num2: int) -> int:
        """Evaluate the operation on two integers."""
        if self is Operation.ADDITION:
            return num1 + num2
        return num1 * num2

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Operation:
        """Resolve a user-facing operation name such as ``add`` or ``mul``."""
        key = name.strip().lower()
        try:
            return OPERATION_NAMES[key]
        except KeyError:
            choices = ", ".join(sorted(OPERATION_NAMES))
            raise ValueError(f"Unknown operation '{name}' (expected one of: {choices}).") from None


OPERATION_NAMES: dict[str, Operation] = {
    "add": Operation.ADDITION,
    "addition": Operation.ADDITION,
    "+": Operation.ADDITION,
    "mul": Operation.MULTIPLICATION,
    "multiply": Operation.MULTIPLICATION,
    "multiplication": Operation.MULTIPLICATION,
    "x": Operation.MULTIPLICATION,
}

SUPPORTED_OPERATIONS: tuple[Operation, ...] = (Operation.ADDITION, Operation.MULTIPLICATION)


@dataclass(frozen=True)
class Expression:
    """One generated question: two operands and an operation."""

    num1: int
    num2: int
    operation: Operation

    def answer(self) -> int:
        return self.operation.apply(self.num1, self.num2)

    def __str__(self) -> str:
        return f"{self.num1} {self.operation.symbol} {self.num2}"


@dataclass(frozen=True)
class Response:
    """Recorded outcome of one answered expression."""

    expression: Expression
    is_correct: bool
    answer_time_ms: int
    user_answer: int
    feedback: str
