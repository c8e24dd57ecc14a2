"""Base reporter class for solution output.

Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from printqueue.domain.model.puzzle import Solution, UpdateCheck


def format_pages(pages: tuple[int, ...]) -> str:
    """Format pages as they appear in puzzle input."""
    return ",".join(str(page) for page in pages)


def status_of(check: UpdateCheck) -> str:
    """Short status label of an update check."""
    if check.valid:
        return "valid"
    return "corrected" if check.reordered else "invalid"


class BaseReporter(ABC):
    """Base class for solution reporters.

    Concrete reporters must implement the report() method.
    """

    @abstractmethod
    def report(self, solution: Solution) -> None:
        """Report a solution.

        Implementation decides output format and destination.

        Args:
            solution: Update checks and answer for one level
        """
