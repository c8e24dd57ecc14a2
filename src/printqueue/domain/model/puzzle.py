"""Print Queue puzzle data: page rules, updates, per-update outcome."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from printqueue.domain.model.graph import DirectedGraphBuilder

type Page = int
type Update = tuple[Page, ...]


class Level(Enum):
    """Puzzle part."""

    ONE = "1"
    TWO = "2"

    @classmethod
    def parse(cls, text: str) -> Level:
        """Parse "1" or "2".

        Raises:
            ValueError: anything else
        """
        try:
            return cls(text.strip())
        except ValueError:
            raise ValueError(f"Expected one of 1, 2, got {text!r}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PuzzleInput:
    """Parsed puzzle input.

    Attributes:
        rules: Builder holding every X|Y rule as an edge X → Y
        updates: Page sequences to validate, in input order
    """

    rules: DirectedGraphBuilder[Page]
    updates: tuple[Update, ...]


@dataclass(frozen=True, slots=True)
class UpdateCheck:
    """Outcome of checking one update against the rules.

    Attributes:
        update: Pages as given in the input
        valid: Update already respected every applicable rule
        ordered: Pages in rule order (same as update when valid or
            when the check was asked not to re-order)
    """

    update: Update
    valid: bool
    ordered: Update

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.update:
            raise ValueError("update must not be empty")
        if sorted(self.update) != sorted(self.ordered):
            raise ValueError(
                f"ordered {self.ordered} is not a permutation of update {self.update}"
            )
        if self.valid and self.ordered != self.update:
            raise ValueError("valid update must keep its original order")

    @property
    def reordered(self) -> bool:
        """Update was invalid and has been sorted into rule order."""
        return not self.valid and self.ordered != self.update

    @property
    def middle(self) -> Page:
        """Middle page of the ordered update."""
        return self.ordered[len(self.ordered) // 2]


@dataclass(frozen=True, slots=True)
class Solution:
    """All update checks for one level, and the resulting answer.

    Level ONE counts the updates that were already valid,
    level TWO counts the ones that had to be re-ordered.

    Attributes:
        level: Puzzle part
        checks: One check per update, in input order
    """

    level: Level
    checks: tuple[UpdateCheck, ...]

    @property
    def counted(self) -> tuple[UpdateCheck, ...]:
        """Checks contributing to the answer."""
        want_valid = self.level is Level.ONE
        return tuple(check for check in self.checks if check.valid is want_valid)

    @property
    def answer(self) -> int:
        """Sum of middle pages of the counted updates."""
        return sum(check.middle for check in self.counted)
