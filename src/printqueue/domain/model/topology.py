"""Results of topological sorting.

A sort either succeeds with an order or stops at the first cycle found.
Both variants are plain values; callers pattern-match on them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TopologicalOrder[N]:
    """Successful sort: for every edge u → v, u precedes v.

    Attributes:
        nodes: All graph nodes in dependency order
    """

    nodes: tuple[N, ...]

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass(frozen=True, slots=True)
class Cycle[N]:
    """Failed sort: a witness cycle in traversal order.

    Each consecutive pair is an edge and the last node has an edge back
    to the first. Not guaranteed to be the shortest cycle.

    Attributes:
        nodes: Cycle nodes (must not be empty)
    """

    nodes: tuple[N, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.nodes:
            raise ValueError("cycle must contain at least one node")

    def __len__(self) -> int:
        return len(self.nodes)

    def edges(self) -> tuple[tuple[N, N], ...]:
        """Edges of the closed walk, including the one back to the start."""
        closed = (*self.nodes, self.nodes[0])
        return tuple(zip(closed, closed[1:], strict=False))


type SortResult[N] = TopologicalOrder[N] | Cycle[N]
