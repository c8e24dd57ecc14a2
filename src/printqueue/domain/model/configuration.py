"""Run configuration for a single solver invocation.

Built by the CLI from arguments and environment.
None = feature disabled, value = feature enabled.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from printqueue.domain.model.puzzle import Level

SESSION_ENV_VAR = "SESSION"
DEFAULT_YEAR = 2024
DEFAULT_DAY = 5
DEFAULT_INPUT = Path("input") / "day5.txt"


class ReportFormat(Enum):
    """How per-update results are rendered."""

    NONE = "none"
    PLAIN = "plain"
    RICH = "rich"


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Solver run configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        level: Puzzle part to solve
        input_path: Puzzle input file ("-" reads stdin)
        submit: Post the answer to the scoring endpoint
        session: Session token for submission. None = not available.
        year: Event year
        day: Puzzle day (1-25)
        workers: Threads used to check updates (1 = sequential)
        report: Per-update report format
    """

    level: Level
    input_path: Path = DEFAULT_INPUT
    submit: bool = False
    session: str | None = None
    year: int = DEFAULT_YEAR
    day: int = DEFAULT_DAY
    workers: int = 1
    report: ReportFormat = ReportFormat.NONE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.level, Level):
            raise TypeError(f"level must be Level, got {type(self.level).__name__}")

        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

        if not 1 <= self.day <= 25:
            raise ValueError(f"day must be 1-25, got {self.day}")

        if self.year < 2015:
            raise ValueError(f"year must be >= 2015, got {self.year}")

        if self.session is not None and not self.session:
            raise ValueError("session must be None or non-empty")

    @property
    def reads_stdin(self) -> bool:
        """Input comes from stdin instead of a file."""
        return str(self.input_path) == "-"

    @staticmethod
    def session_from_env() -> str | None:
        """Session token from the SESSION env var. Empty counts as unset."""
        return os.getenv(SESSION_ENV_VAR) or None
