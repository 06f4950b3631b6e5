"""Training session: ask timed questions, then report correct, slow and wrong answers."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

import structlog

from .generator import ExpressionFn
from .models import Expression, Response
from .terminal import BAD_COLOR, GOOD_COLOR, SLOW_COLOR, STATS_COLOR, Terminal

InputFn = Callable[[str], str]
ClockFn = Callable[[], int]
NS_PER_MS = 1_000_000

PROMPT_INDENT = "     "
PERFECT_BANNER_LINES = 5

log = structlog.get_logger(__name__)


class AnswerReadError(RuntimeError):
    """Input ended before the user answered a question."""


class AnswerState(Enum):
    """Per-question states: PROMPT -> READ -> (RETRY -> PROMPT) -> RECORD."""

    PROMPT = "prompt"
    READ = "read"
    RETRY = "retry"
    RECORD = "record"


@dataclass(frozen=True)
class SessionStats:
    """Aggregated outcome of one finished session."""

    responses: tuple[Response, ...]
    wrong: tuple[Response, ...]
    slow: tuple[Response, ...]
    slow_threshold_ms: int
    average_ms: float

    @property
    def count(self) -> int:
        return len(self.responses)

    @property
    def correct_count(self) -> int:
        return self.count - len(self.wrong)

    @property
    def perfect(self) -> bool:
        return not self.wrong

    def percent(self, amount: int) -> float:
        """Share of all questions, 0-100."""
        if self.count == 0:
            return 0.0
        return amount / self.count * 100


def parse_answer(line: str) -> int | None:
    """Parse exactly one integer token; ``None`` means the line must be re-asked."""
    tokens = line.split()
    if len(tokens) != 1:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def ask_expression(
    expression: Expression,
    terminal: Terminal,
    input_fn: InputFn = input,
    clock: ClockFn = time.monotonic_ns,
) -> tuple[bool, int, int]:
    """Ask one question until a number is given.

    Returns ``(is_correct, answer_time_ms, user_answer)``. Timing starts when
    the question is first shown and keeps running across retries.
    Raises ``AnswerReadError`` when the input is exhausted.
    """
    started = clock()
    state = AnswerState.PROMPT
    line = ""
    answer = 0
    while True:
        if state is AnswerState.PROMPT:
            terminal.write(f"{PROMPT_INDENT}{expression} = ")
            try:
                line = input_fn("")
            except EOFError as exc:
                raise AnswerReadError("couldn't read user answer") from exc
            state = AnswerState.READ
        elif state is AnswerState.READ:
            parsed = parse_answer(line)
            if parsed is None:
                state = AnswerState.RETRY
            else:
                answer = parsed
                state = AnswerState.RECORD
        elif state is AnswerState.RETRY:
            log.debug("answer_retry", expression=str(expression), raw=line)
            terminal.erase_previous_line()
            state = AnswerState.PROMPT
        else:
            # Whole milliseconds, truncated.
            elapsed_ms = (clock() - started) // NS_PER_MS
            return answer == expression.answer(), elapsed_ms, answer


def feedback_line(expression: Expression, is_correct: bool, user_answer: int) -> str:
    """Render the colored result line shown in place of the question."""
    if is_correct:
        color, status, comment = GOOD_COLOR, "GOOD", ""
    else:
        color, status, comment = BAD_COLOR, "BAD ", f"(you said {user_answer})"
    return f"[{color}]{status} {expression} = {expression.answer()} {comment}"


def summarize(responses: Sequence[Response], slow_threshold_ms: int) -> SessionStats:
    """Split responses into wrong and slow groups."""
    wrong: list[Response] = []
    slow: list[Response] = []
    average = float(responses[0].answer_time_ms) if responses else 0.0
    for response in responses:
        if not response.is_correct:
            wrong.append(response)
        if response.answer_time_ms > slow_threshold_ms:
            slow.append(response)
        average = (average + response.answer_time_ms) / 2.0
    return SessionStats(
        responses=tuple(responses),
        wrong=tuple(wrong),
        slow=tuple(slow),
        slow_threshold_ms=slow_threshold_ms,
        average_ms=average,
    )


def render_report(stats: SessionStats, terminal: Terminal) -> None:
    """Print the statistics block followed by slow and wrong exercises."""
    count = stats.count
    terminal.print(f"[{STATS_COLOR}]Stats:")
    if stats.perfect:
        for _ in range(PERFECT_BANNER_LINES):
            terminal.print(f"[{STATS_COLOR}]PERFECT SCORE!")
    rows = (
        (GOOD_COLOR, "Correct", stats.correct_count),
        (SLOW_COLOR, "Slow", len(stats.slow)),
        (BAD_COLOR, "Wrong", len(stats.wrong)),
    )
    for color, label, amount in rows:
        terminal.print(f" [{color}]{label}: {amount}/{count} ({stats.percent(amount):.2f}%)")

    if stats.slow:
        terminal.print()
        terminal.print(f"Exercises with [{SLOW_COLOR}]slow[/] answers:")
        for response in stats.slow:
            terminal.print(response.feedback)
    if stats.wrong:
        terminal.print()
        terminal.print(f"Exercises with [{BAD_COLOR}]mistakes[/]:")
        for response in stats.wrong:
            terminal.print(response.feedback)


def train(
    generate: ExpressionFn,
    count: int,
    slow_threshold_ms: int,
    terminal: Terminal,
    input_fn: InputFn = input,
    clock: ClockFn = time.monotonic_ns,
) -> SessionStats | None:
    """Run ``count`` questions and print the report.

    Returns ``None`` without any output when ``count <= 0``.
    """
    if count <= 0:
        return None

    log.info("session_started", count=count, slow_threshold_ms=slow_threshold_ms)
    responses: list[Response] = []
    for _ in range(count):
        expression = generate()
        is_correct, answer_time_ms, user_answer = ask_expression(expression, terminal, input_fn, clock)
        # Replace the question with its result line.
        terminal.erase_previous_line()
        feedback = feedback_line(expression, is_correct, user_answer)
        terminal.print(feedback)
        log.debug(
            "answer_recorded",
            expression=str(expression),
            correct=is_correct,
            answer_time_ms=answer_time_ms,
        )
        responses.append(Response(expression, is_correct, answer_time_ms, user_answer, feedback))
    terminal.print("Done")

    stats = summarize(responses, slow_threshold_ms)
    render_report(stats, terminal)
    log.info(
        "session_finished",
        correct=stats.correct_count,
        slow=len(stats.slow),
        wrong=len(stats.wrong),
        average_ms=round(stats.average_ms, 1),
    )
    return stats
