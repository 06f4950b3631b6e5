from __future__ import annotations

import io
import sys
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import pytest
import structlog

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from arithtrainer.terminal import Terminal  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Keep one test's logging setup (and captured streams) out of the next."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def terminal(output: io.StringIO, monkeypatch: pytest.MonkeyPatch) -> Terminal:
    """Terminal-mode console without colors: cursor controls kept, markup stripped."""
    monkeypatch.setenv("TERM", "xterm")
    return Terminal(output, force_terminal=True, color_system=None)


def scripted_input(lines: Iterable[str]) -> Callable[[str], str]:
    """Input function replaying ``lines``, then behaving like a closed stdin."""
    remaining = iter(lines)

    def read(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


class FakeClock:
    """Nanosecond clock advancing by scripted millisecond steps (fractions allowed) on each call."""

    def __init__(self, steps_ms: Iterable[float]) -> None:
        self._steps = iter(steps_ms)
        self.now = 0

    def __call__(self) -> int:
        self.now += round(next(self._steps, 0) * 1_000_000)
        return self.now


def answer_clock(durations_ms: Iterable[float]) -> FakeClock:
    """Clock where question N takes ``durations_ms[N]`` between start and answer."""
    steps: list[float] = []
    for duration in durations_ms:
        steps.extend([0, duration])
    return FakeClock(steps)
