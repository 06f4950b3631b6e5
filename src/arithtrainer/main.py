"""CLI entrypoint for the arithmetic trainer."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import replace

import structlog

from .config import TrainerConfig, parse_operations
from .generator import expression_generator
from .logs import configure_logging
from .models import SUPPORTED_OPERATIONS, Operation
from .session import AnswerReadError, InputFn, train
from .table import print_multiplication_table
from .terminal import Terminal

EXIT_OK = 0
EXIT_READ_FAILED = 1
EXIT_INTERRUPTED = 130

log = structlog.get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arithtrainer", description="Timed mental arithmetic practice")
    parser.add_argument("command", nargs="?", default="train", choices=["train", "table"])
    parser.add_argument("--count", type=int, help="number of questions")
    parser.add_argument("--slow-ms", type=int, dest="slow_ms", help="answers slower than this are flagged")
    parser.add_argument("--ops", help="comma-separated operations, e.g. add,mul")
    parser.add_argument("--num1", type=int, nargs=2, metavar=("LOW", "HIGH"), help="first operand range")
    parser.add_argument("--num2", type=int, nargs=2, metavar=("LOW", "HIGH"), help="second operand range")
    parser.add_argument("--seed", type=int, help="seed the question generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return parser


def _config_from_args(args: argparse.Namespace) -> TrainerConfig:
    """Apply CLI overrides on top of the default configuration."""
    config = TrainerConfig()
    overrides: dict[str, object] = {}
    if args.count is not None:
        overrides["count"] = args.count
    if args.slow_ms is not None:
        overrides["slow_threshold_ms"] = args.slow_ms
    if args.ops is not None:
        overrides["operations"] = parse_operations(args.ops)
    if args.num1 is not None:
        overrides["num1_range"] = tuple(args.num1)
    if args.num2 is not None:
        overrides["num2_range"] = tuple(args.num2)
    return replace(config, **overrides).validate()


def _format_operations(operations: tuple[Operation, ...]) -> str:
    return "[" + " ".join(str(operation) for operation in operations) + "]"


def print_welcome(config: TrainerConfig, terminal: Terminal) -> None:
    """Print the session settings before the first question."""
    lines = [
        "Welcome",
        f"Current supported operations: {_format_operations(SUPPORTED_OPERATIONS)}",
        f"Currently selected operations: {_format_operations(config.operations)}",
        f"Slow Threshold: {config.slow_threshold_ms} ms",
        f"num1 range: {config.num1_range[0]} - {config.num1_range[1]}",
        f"num2 range: {config.num2_range[0]} - {config.num2_range[1]}",
    ]
    for line in lines:
        terminal.write(line + "\n")


def train_shell(
    config: TrainerConfig,
    terminal: Terminal,
    input_fn: InputFn = input,
    rng: random.Random | None = None,
) -> int:
    """Run one practice session and map its failures to exit codes."""
    print_welcome(config, terminal)
    generate = expression_generator(config.num1_range, config.num2_range, config.operations, rng)
    try:
        train(generate, config.count, config.slow_threshold_ms, terminal, input_fn)
    except AnswerReadError as exc:
        log.debug("answer_read_failed", error=str(exc))
        print(str(exc), file=sys.stderr)
        return EXIT_READ_FAILED
    except KeyboardInterrupt:
        terminal.print()
        terminal.print("Interrupted.")
        return EXIT_INTERRUPTED
    return EXIT_OK


def run(argv: list[str] | None = None, input_fn: InputFn = input, terminal: Terminal | None = None) -> int:
    """Run the CLI application."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        config = _config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    out = terminal if terminal is not None else Terminal()
    if args.command == "table":
        low, high = config.table_range
        print_multiplication_table(out, low, high, config.table_color_from)
        return EXIT_OK

    rng = random.Random(args.seed) if args.seed is not None else None
    return train_shell(config, out, input_fn, rng)


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
