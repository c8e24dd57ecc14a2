"""Infrastructure: external collaborators."""

from printqueue.infrastructure.submission import (
    SubmissionResult,
    Verdict,
    answer_url,
    submit_answer,
)

__all__ = [
    "SubmissionResult",
    "Verdict",
    "answer_url",
    "submit_answer",
]
