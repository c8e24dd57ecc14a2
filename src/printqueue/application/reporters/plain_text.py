"""Plain text reporter using print()."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from printqueue.application.reporters._base import BaseReporter, format_pages, status_of

if TYPE_CHECKING:
    from printqueue.domain.model.puzzle import Solution


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, solution: Solution) -> None:
        """Report update checks and answer as plain text."""
        self._write("=" * 70)
        self._write(f"Print Queue - level {solution.level}")
        self._write("=" * 70)

        counted = {id(check) for check in solution.counted}
        for i, check in enumerate(solution.checks, start=1):
            marker = "*" if id(check) in counted else " "
            line = f"{marker} {i:>3}. [{status_of(check)}] {format_pages(check.update)}"
            if check.reordered:
                line += f" -> {format_pages(check.ordered)}"
            self._write(f"{line}  (middle {check.middle})")

        self._write("-" * 70)
        self._write(f"Updates: {len(solution.checks)}, counted: {len(solution.counted)}")
        self._write(f"Answer: {solution.answer}")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
