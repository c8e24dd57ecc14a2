"""Graph exceptions."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from printqueue.domain.exceptions.base import PrintQueueError


class NodeNotInGraphError(PrintQueueError, KeyError):
    """Node label is not part of the graph.

    Raised when a caller references a label that no edge ever introduced.
    Fatal to the single query being processed.

    Attributes:
        node: Missing node label
    """

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Node not in graph: {node!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


class CycleDetectedError(PrintQueueError):
    """Graph expected to be acyclic contains a cycle.

    Attributes:
        cycle: Nodes of the cycle in traversal order (must not be empty)
    """

    def __init__(self, cycle: Sequence[Hashable]) -> None:
        # FAIL-FIRST validation
        if not cycle:
            raise ValueError("cycle must not be empty")

        self.cycle = tuple(cycle)
        path = " → ".join(str(node) for node in (*self.cycle, self.cycle[0]))
        super().__init__(f"Cycle detected: {path}")


class DuplicateNodeError(PrintQueueError, ValueError):
    """Same node label given more than once where labels must be distinct.

    Attributes:
        node: Repeated node label
    """

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Node {node!r} given more than once")
