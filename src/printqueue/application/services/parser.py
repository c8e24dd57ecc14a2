"""Puzzle input parser.

Input layout:
    X|Y            one ordering rule per line (X must be printed before Y)
    <blank line>
    a,b,c,...      one update per line

Rules become X → Y edges of a DirectedGraphBuilder.
"""

from __future__ import annotations

import logging
import re

from printqueue.domain.exceptions import ParseError
from printqueue.domain.model.graph import DirectedGraphBuilder
from printqueue.domain.model.puzzle import Page, PuzzleInput, Update

logger = logging.getLogger(__name__)

_RULE_RE = re.compile(r"(\d+)\|(\d+)")
_UPDATE_RE = re.compile(r"\d+(?:,\d+)*")


def parse_rule(line: str, line_no: int = 1) -> tuple[Page, Page]:
    """Parse "X|Y" into (X, Y).

    Raises:
        ParseError: line is not two integers joined by "|"
    """
    match = _RULE_RE.fullmatch(line.strip())
    if match is None:
        raise ParseError(line_no, f"expected rule 'X|Y', got {line!r}")
    return int(match[1]), int(match[2])


def parse_update(line: str, line_no: int = 1) -> Update:
    """Parse "a,b,c" into (a, b, c).

    Raises:
        ParseError: line is not a comma separated list of integers
    """
    text = line.strip()
    if _UPDATE_RE.fullmatch(text) is None:
        raise ParseError(line_no, f"expected comma separated pages, got {line!r}")
    return tuple(int(page) for page in text.split(","))


def parse_input(text: str) -> PuzzleInput:
    """Parse full puzzle input.

    The first blank line ends the rules section. Blank lines among the
    updates are skipped, so trailing newlines are harmless.
    Empty text yields no rules and no updates.

    Raises:
        ParseError: any malformed line (1-based line number attached)
    """
    rules: list[tuple[Page, Page]] = []
    updates: list[Update] = []
    in_rules = True

    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            in_rules = False
            continue
        if in_rules:
            rules.append(parse_rule(line, line_no))
        else:
            updates.append(parse_update(line, line_no))

    builder: DirectedGraphBuilder[Page] = DirectedGraphBuilder.from_edges(rules)
    logger.debug(
        "Parsed %d rules over %d pages, %d updates",
        len(rules),
        builder.node_count,
        len(updates),
    )
    return PuzzleInput(rules=builder, updates=tuple(updates))
