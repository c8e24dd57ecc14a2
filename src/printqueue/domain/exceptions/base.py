"""Base exceptions for printqueue domain."""


class PrintQueueError(Exception):
    """Root exception for all printqueue errors.

    All domain exceptions inherit from this.
    Allows catching all printqueue-specific errors.
    """
