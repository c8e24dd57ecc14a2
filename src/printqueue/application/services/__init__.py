"""Application services: input parsing and puzzle solving."""

from printqueue.application.services.parser import parse_input
from printqueue.application.services.solver import (
    check_update,
    check_updates,
    level1,
    level2,
    solve,
)

__all__ = [
    "parse_input",
    "check_update",
    "check_updates",
    "solve",
    "level1",
    "level2",
]
