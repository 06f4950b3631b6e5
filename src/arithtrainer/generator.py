"""Random expression generation."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Sequence

from .models import Expression, Operation

NumberFn = Callable[[], int]
ExpressionFn = Callable[[], Expression]


def wall_clock_rng() -> random.Random:
    """Return a generator seeded from the current wall-clock time."""
    return random.Random(time.time_ns())


def rand_range(rng: random.Random, low: int, high: int) -> int:
    """Uniform integer in ``[low, high)``."""
    return rng.randrange(low, high)


def generate_expression(
    gen_num1: NumberFn,
    gen_num2: NumberFn,
    operations: Sequence[Operation],
    rng: random.Random,
) -> Expression:
    """Build one expression from the operand sources and a random operation."""
    return Expression(
        num1=gen_num1(),
        num2=gen_num2(),
        operation=operations[rand_range(rng, 0, len(operations))],
    )


def expression_generator(
    num1_range: tuple[int, int],
    num2_range: tuple[int, int],
    operations: Sequence[Operation],
    rng: random.Random | None = None,
) -> ExpressionFn:
    """Return a zero-argument closure producing fresh random expressions.

    Both ranges are half-open. Ranges and operations are used as given;
    callers validate them beforehand (see ``TrainerConfig.validate``).
    """
    source = rng if rng is not None else wall_clock_rng()
    selected = tuple(operations)
    low1, high1 = num1_range
    low2, high2 = num2_range

    def gen_num1() -> int:
        return rand_range(source, low1, high1)

    def gen_num2() -> int:
        return rand_range(source, low2, high2)

    def generate() -> Expression:
        return generate_expression(gen_num1, gen_num2, selected, source)

    return generate
