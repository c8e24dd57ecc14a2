"""Parsing exceptions."""

from printqueue.domain.exceptions.base import PrintQueueError


class ParseError(PrintQueueError):
    """Error while parsing puzzle input.

    Attributes:
        line: 1-based line number of the offending line
        reason: Why parsing failed
    """

    def __init__(self, line: int, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if line < 1:
            raise ValueError(f"line must be >= 1, got {line}")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.line = line
        self.reason = reason
        super().__init__(f"Failed to parse line {line}: {reason}")
