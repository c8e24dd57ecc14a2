"""Answer submission exceptions."""

from __future__ import annotations

from printqueue.domain.exceptions.base import PrintQueueError


class SubmissionError(PrintQueueError):
    """Answer could not be delivered to the scoring endpoint.

    Attributes:
        url: Endpoint the answer was posted to
        reason: Why submission failed
        status_code: HTTP status, None when no response was received
    """

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        if not url:
            raise ValueError("url must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.url = url
        self.reason = reason
        self.status_code = status_code
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Submission to {url} failed{status}: {reason}")


class MissingSessionError(PrintQueueError):
    """Submission requested without a session token."""

    def __init__(self, variable: str = "SESSION") -> None:
        self.variable = variable
        super().__init__(f"{variable} must be set to submit")
