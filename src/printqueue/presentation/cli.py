"""Command line entry point.

    printqueue --level {1,2} [--input PATH] [--submit] [--workers N]
               [--report {none,plain,rich}] [-v]

Prints the answer on stdout. Domain errors are logged and give exit code 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from printqueue.application.reporters import ConsoleReporter, PlainTextReporter
from printqueue.application.services.solver import solve
from printqueue.domain.exceptions import PrintQueueError
from printqueue.domain.model.configuration import DEFAULT_INPUT, ReportFormat, RunConfig
from printqueue.domain.model.puzzle import Level, Solution
from printqueue.infrastructure.submission import submit_answer

logger = logging.getLogger("printqueue")


def _parse_level(text: str) -> Level:
    try:
        return Level.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def configure_logging(verbose: bool = False) -> None:
    """Route printqueue logs to stderr through rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="printqueue",
        description="Print Queue: check page updates against ordering rules.",
    )
    p.add_argument("--level", required=True, type=_parse_level, help="Puzzle part: 1 or 2.")
    p.add_argument(
        "--input",
        type=Path,
        default=DEFAULT_INPUT,
        help=f"Puzzle input file, '-' for stdin (default: {DEFAULT_INPUT}).",
    )
    p.add_argument(
        "-s",
        "--submit",
        action="store_true",
        help="Submit the answer (needs SESSION env var).",
    )
    p.add_argument("--workers", type=int, default=1, help="Threads used to check updates.")
    p.add_argument(
        "--report",
        choices=[fmt.value for fmt in ReportFormat],
        default=ReportFormat.NONE.value,
        help="Per-update report printed after the answer.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p


def _read_input(config: RunConfig) -> str:
    if config.reads_stdin:
        return sys.stdin.read()
    return config.input_path.read_text(encoding="utf-8")


def _print_report(config: RunConfig, solution: Solution) -> None:
    match config.report:
        case ReportFormat.PLAIN:
            PlainTextReporter(sys.stdout).report(solution)
        case ReportFormat.RICH:
            sys.stdout.write(ConsoleReporter().report(solution))
        case ReportFormat.NONE:
            pass


def run(config: RunConfig) -> int:
    """Solve, print, optionally submit. Returns process exit code."""
    try:
        text = _read_input(config)
    except OSError as e:
        logger.error("Cannot read input %s: %s", config.input_path, e)
        return 1

    try:
        solution = solve(text, config.level, workers=config.workers)
    except PrintQueueError as e:
        logger.error("%s", e)
        return 1

    print(solution.answer)
    _print_report(config, solution)

    if config.submit:
        try:
            result = submit_answer(
                config.day,
                config.level,
                solution.answer,
                config.session,
                year=config.year,
            )
        except PrintQueueError as e:
            logger.error("%s", e)
            return 1
        print(f"Submitted: {result.verdict.name}")

    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    configure_logging(ns.verbose)

    try:
        config = RunConfig(
            level=ns.level,
            input_path=ns.input,
            submit=ns.submit,
            session=RunConfig.session_from_env() if ns.submit else None,
            workers=ns.workers,
            report=ReportFormat(ns.report),
        )
    except ValueError as e:
        parser.error(str(e))

    return run(config)
