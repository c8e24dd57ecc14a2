"""Console reporter: Solution → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from printqueue.application.reporters._base import format_pages, status_of

if TYPE_CHECKING:
    from printqueue.domain.model.puzzle import Solution, UpdateCheck


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_uncounted: Also list updates that do not contribute to the answer.
        max_rows: Max updates to display. None = unlimited.
        width: Console width in characters.
    """

    show_uncounted: bool = True
    max_rows: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_rows is not None and self.max_rows < 0:
            raise ValueError(f"max_rows must be >= 0, got {self.max_rows}")
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        self._config = config or ConsoleConfig()

    def report(self, solution: Solution) -> str:
        """Format solution as a rich table with a summary line."""
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        console.print()
        console.rule(f"[bold]PRINT QUEUE - LEVEL {solution.level}[/bold]")
        console.print()

        counted = {id(check) for check in solution.counted}
        rows = [
            check
            for check in solution.checks
            if self._config.show_uncounted or id(check) in counted
        ]
        if self._config.max_rows is not None:
            rows = rows[: self._config.max_rows]

        if rows:
            console.print(self._table(rows, counted))
            console.print()

        console.print(
            f"[bold]Updates:[/bold] {len(solution.checks)}  "
            f"[bold]Counted:[/bold] {len(solution.counted)}  "
            f"[bold green]Answer:[/bold green] {solution.answer}"
        )
        return output.getvalue()

    def _table(self, checks: list[UpdateCheck], counted: set[int]) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Update")
        table.add_column("Status")
        table.add_column("Order")
        table.add_column("Middle", justify="right")

        for check in checks:
            style = "green" if check.valid else "yellow"
            middle = str(check.middle)
            if id(check) in counted:
                middle = f"[bold]{middle}[/bold]"
            table.add_row(
                format_pages(check.update),
                f"[{style}]{status_of(check)}[/{style}]",
                format_pages(check.ordered),
                middle,
            )
        return table
