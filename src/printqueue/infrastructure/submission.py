"""Answer submission to the Advent of Code scoring endpoint.

One-shot form POST authenticated by the session cookie.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

import requests

from printqueue.domain.exceptions import MissingSessionError, SubmissionError
from printqueue.domain.model.configuration import DEFAULT_YEAR
from printqueue.domain.model.puzzle import Level

logger = logging.getLogger(__name__)

BASE_URL = "https://adventofcode.com"
DEFAULT_TIMEOUT = 10.0


class Verdict(Enum):
    """Scoring endpoint reaction, read from the response page."""

    CORRECT = auto()
    INCORRECT = auto()
    RATE_LIMITED = auto()
    WRONG_LEVEL = auto()
    UNKNOWN = auto()


_VERDICT_MARKERS: tuple[tuple[str, Verdict], ...] = (
    ("That's the right answer", Verdict.CORRECT),
    ("That's not the right answer", Verdict.INCORRECT),
    ("You gave an answer too recently", Verdict.RATE_LIMITED),
    ("You don't seem to be solving the right level", Verdict.WRONG_LEVEL),
)


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    """Response of the scoring endpoint.

    Attributes:
        status_code: HTTP status
        body: Response page text
    """

    status_code: int
    body: str

    @property
    def verdict(self) -> Verdict:
        """Classify the response page."""
        for marker, verdict in _VERDICT_MARKERS:
            if marker in self.body:
                return verdict
        return Verdict.UNKNOWN


def answer_url(year: int, day: int) -> str:
    """Endpoint accepting answers for one puzzle."""
    return f"{BASE_URL}/{year}/day/{day}/answer"


def submit_answer(
    day: int,
    level: Level,
    answer: object,
    session: str | None,
    year: int = DEFAULT_YEAR,
    timeout: float = DEFAULT_TIMEOUT,
) -> SubmissionResult:
    """Post an answer.

    Args:
        day: Puzzle day
        level: Puzzle part
        answer: Answer value, sent as its str()
        session: Session cookie value
        year: Event year
        timeout: Request timeout in seconds

    Raises:
        MissingSessionError: session is None or empty
        SubmissionError: network failure or HTTP status >= 400
    """
    if not session:
        raise MissingSessionError()

    url = answer_url(year, day)
    logger.info("Submitting answer %s for %d day %d level %s", answer, year, day, level)
    try:
        response = requests.post(
            url,
            data={"level": str(level), "answer": str(answer)},
            cookies={"session": session},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise SubmissionError(url, str(e) or type(e).__name__) from e

    if response.status_code >= 400:
        raise SubmissionError(url, response.reason or "request rejected", response.status_code)

    result = SubmissionResult(status_code=response.status_code, body=response.text)
    logger.info("Submission verdict: %s", result.verdict.name)
    return result
