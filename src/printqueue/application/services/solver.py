"""Print Queue solver.

Each update is checked against the rules restricted to its own pages:
the subgraph is built per update, queried once, then discarded.
Checks share no mutable state, so they may run on a thread pool.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from printqueue.application.services.parser import parse_input
from printqueue.domain.model.puzzle import Level, Page, Solution, Update, UpdateCheck

if TYPE_CHECKING:
    from collections.abc import Iterable

    from printqueue.domain.model.graph import DirectedGraphBuilder

logger = logging.getLogger(__name__)


def check_update(
    rules: DirectedGraphBuilder[Page],
    update: Update,
    reorder: bool = True,
) -> UpdateCheck:
    """Check one update, re-ordering it when it breaks a rule.

    With reorder=False an invalid update keeps its input order and the
    rules for its pages need not be acyclic.

    Raises:
        NodeNotInGraphError: update mentions a page no rule mentions
        DuplicateNodeError: update lists a page twice
        CycleDetectedError: reorder requested and rules for these pages are cyclic
    """
    graph = rules.subgraph(update).build()
    if graph.is_sub_topological_order(update):
        return UpdateCheck(update=update, valid=True, ordered=update)
    if not reorder:
        return UpdateCheck(update=update, valid=False, ordered=update)

    ordered = graph.topological_order()
    logger.debug("Re-ordered %s -> %s", update, ordered)
    return UpdateCheck(update=update, valid=False, ordered=ordered)


def check_updates(
    rules: DirectedGraphBuilder[Page],
    updates: Iterable[Update],
    workers: int = 1,
    reorder: bool = True,
) -> tuple[UpdateCheck, ...]:
    """Check every update, preserving input order.

    Args:
        rules: Builder holding all ordering rules
        updates: Updates to check
        workers: Threads to use (1 = sequential)
        reorder: Sort invalid updates into rule order
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    if workers == 1:
        return tuple(check_update(rules, update, reorder) for update in updates)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return tuple(executor.map(lambda update: check_update(rules, update, reorder), updates))


def solve(text: str, level: Level, workers: int = 1) -> Solution:
    """Parse input and check every update for the given level.

    Only level TWO re-orders invalid updates.
    """
    puzzle = parse_input(text)
    checks = check_updates(
        puzzle.rules,
        puzzle.updates,
        workers=workers,
        reorder=level is Level.TWO,
    )
    solution = Solution(level=level, checks=checks)
    logger.info(
        "Level %s: %d of %d updates counted, answer %d",
        level,
        len(solution.counted),
        len(checks),
        solution.answer,
    )
    return solution


def level1(text: str) -> int:
    """Sum of middle pages of updates already in rule order."""
    return solve(text, Level.ONE).answer


def level2(text: str) -> int:
    """Sum of middle pages of updates after fixing their order."""
    return solve(text, Level.TWO).answer
