"""Domain exceptions."""

from printqueue.domain.exceptions.base import PrintQueueError
from printqueue.domain.exceptions.graph import (
    CycleDetectedError,
    DuplicateNodeError,
    NodeNotInGraphError,
)
from printqueue.domain.exceptions.parsing import ParseError
from printqueue.domain.exceptions.submission import MissingSessionError, SubmissionError

__all__ = [
    "PrintQueueError",
    "NodeNotInGraphError",
    "CycleDetectedError",
    "DuplicateNodeError",
    "ParseError",
    "SubmissionError",
    "MissingSessionError",
]
