"""Reporters for solver results.

PlainTextReporter uses stdlib only; ConsoleReporter renders with rich.
"""

from printqueue.application.reporters._base import BaseReporter
from printqueue.application.reporters.console import ConsoleConfig, ConsoleReporter
from printqueue.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "ConsoleConfig",
    "ConsoleReporter",
]
