"""Directed graph over arbitrary hashable labels.

Two stages:
- DirectedGraphBuilder accumulates edges, assigning dense indices to labels
  on first sight (arena + index, no node objects).
- DirectedGraph is the compacted, immutable form: one flat adjacency array
  plus per-node offsets. Supports topological sorting with cycle detection
  and a linear check of externally supplied orders.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType

from printqueue.domain.exceptions import (
    CycleDetectedError,
    DuplicateNodeError,
    NodeNotInGraphError,
)
from printqueue.domain.model.topology import Cycle, SortResult, TopologicalOrder


class DirectedGraphBuilder[N: Hashable]:
    """Mutable edge accumulator.

    Invariants:
    - labels map bijectively to 0..len(edges)
    - every index in any edges[i] is < len(edges)

    Duplicate edges and self-loops are kept verbatim.
    """

    __slots__ = ("_edges", "_positions")

    def __init__(self) -> None:
        self._positions: dict[N, int] = {}
        self._edges: list[list[int]] = []

    @classmethod
    def from_edges(cls, pairs: Iterable[tuple[N, N]]) -> DirectedGraphBuilder[N]:
        """Create builder holding all given (from, to) pairs."""
        builder: DirectedGraphBuilder[N] = cls()
        builder.extend(pairs)
        return builder

    @classmethod
    def _from_parts(
        cls,
        positions: dict[N, int],
        edges: list[list[int]],
    ) -> DirectedGraphBuilder[N]:
        builder: DirectedGraphBuilder[N] = cls()
        builder._positions = positions
        builder._edges = edges
        return builder

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, node: object) -> bool:
        return node in self._positions

    @property
    def node_count(self) -> int:
        """Number of distinct labels seen so far."""
        return len(self._edges)

    @property
    def edge_count(self) -> int:
        """Number of edges, duplicates included."""
        return sum(len(children) for children in self._edges)

    @property
    def nodes(self) -> tuple[N, ...]:
        """Labels in index (first-seen) order."""
        return tuple(self._positions)

    def children_of(self, node: N) -> tuple[N, ...]:
        """Child labels of node in insertion order.

        Raises:
            NodeNotInGraphError: node was never seen
        """
        labels = self.nodes
        return tuple(labels[ix] for ix in self._edges[self._index(node)])

    def _index(self, node: N) -> int:
        try:
            return self._positions[node]
        except KeyError:
            raise NodeNotInGraphError(node) from None

    def _position(self, node: N) -> int:
        """Look up or allocate the dense index of node."""
        ix = self._positions.get(node)
        if ix is None:
            ix = len(self._edges)
            self._positions[node] = ix
            self._edges.append([])
        return ix

    def add_edge(self, from_: N, to: N) -> None:
        """Add a single from → to edge."""
        self.extend(((from_, to),))

    def extend(self, pairs: Iterable[tuple[N, N]]) -> None:
        """Add every (from, to) pair, discovering nodes as they appear.

        Time: O(E) where E is number of pairs
        """
        for start, end in pairs:
            ix_start = self._position(start)
            ix_end = self._position(end)
            self._edges[ix_start].append(ix_end)

    def subgraph(self, nodes: Iterable[N]) -> DirectedGraphBuilder[N]:
        """Restrict to the given nodes.

        The new builder is independent of this one. Nodes are reindexed
        0..k in iteration order; edges leaving the subset are dropped.

        Raises:
            NodeNotInGraphError: a node is not in this builder
            DuplicateNodeError: a node is given more than once
        """
        positions: dict[N, int] = {}
        old_to_new: dict[int, int] = {}
        old_indices: list[int] = []

        for new_ix, node in enumerate(nodes):
            if node in positions:
                raise DuplicateNodeError(node)
            old_ix = self._index(node)
            positions[node] = new_ix
            old_to_new[old_ix] = new_ix
            old_indices.append(old_ix)

        edges = [
            [old_to_new[child] for child in self._edges[old_ix] if child in old_to_new]
            for old_ix in old_indices
        ]
        return DirectedGraphBuilder._from_parts(positions, edges)

    def build(self) -> DirectedGraph[N]:
        """Compact into an immutable DirectedGraph.

        Offsets are running totals of edge counts in index order.
        The builder is left untouched.
        """
        offsets: list[int] = []
        running_offset = 0
        for children in self._edges:
            offsets.append(running_offset)
            running_offset += len(children)

        ordered = sorted(self._positions.items(), key=lambda item: item[1])
        return DirectedGraph(
            nodes=tuple(node for node, _ in ordered),
            adjacency=tuple(ix for children in self._edges for ix in children),
            offsets=tuple(offsets),
        )

    def __repr__(self) -> str:
        return f"DirectedGraphBuilder(nodes={self.node_count}, edges={self.edge_count})"


class _VisitState(Enum):
    """DFS colour of a node."""

    UNSEEN = auto()
    IN_PROGRESS = auto()
    VISITED = auto()


@dataclass(frozen=True, slots=True)
class DirectedGraph[N: Hashable]:
    """Immutable directed graph in compact adjacency form.

    Node i's children are adjacency[offsets[i] : offsets[i + 1]]
    (the last node runs to the end of adjacency).

    Invariants (FAIL-FIRST):
    - one offset per node, first offset is 0
    - offsets never decrease and never exceed len(adjacency)
    - every adjacency entry is a valid node index
    - node labels are unique

    Attributes:
        nodes: Node labels, index = position
        adjacency: Flattened child indices of all nodes
        offsets: Start of each node's children in adjacency
    """

    nodes: tuple[N, ...]
    adjacency: tuple[int, ...]
    offsets: tuple[int, ...]
    _positions: Mapping[N, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        node_count = len(self.nodes)

        if len(self.offsets) != node_count:
            raise ValueError(
                f"expected {node_count} offsets (one per node), got {len(self.offsets)}"
            )

        if self.offsets and self.offsets[0] != 0:
            raise ValueError(f"first offset must be 0, got {self.offsets[0]}")

        previous = 0
        for offset in self.offsets:
            if offset < previous:
                raise ValueError(f"offsets must not decrease: {offset} after {previous}")
            previous = offset
        if previous > len(self.adjacency):
            raise ValueError(f"offset {previous} exceeds adjacency length {len(self.adjacency)}")

        for child in self.adjacency:
            if not 0 <= child < node_count:
                raise ValueError(f"adjacency index {child} out of range for {node_count} nodes")

        positions = {node: ix for ix, node in enumerate(self.nodes)}
        if len(positions) != node_count:
            raise ValueError("node labels must be unique")
        object.__setattr__(self, "_positions", MappingProxyType(positions))

    @classmethod
    def from_edges(cls, pairs: Iterable[tuple[N, N]]) -> DirectedGraph[N]:
        """Build graph from (from, to) pairs."""
        return DirectedGraphBuilder.from_edges(pairs).build()

    @classmethod
    def empty(cls) -> DirectedGraph[N]:
        """Create empty graph with no nodes or edges."""
        return cls(nodes=(), adjacency=(), offsets=())

    @property
    def node_count(self) -> int:
        """Get total number of nodes."""
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        """Get total number of edges (duplicates included)."""
        return len(self.adjacency)

    def has_node(self, node: object) -> bool:
        """Check if node exists. O(1)."""
        return node in self._positions

    def index_of(self, node: N) -> int:
        """Dense index of node. O(1).

        Raises:
            NodeNotInGraphError: node is not in graph
        """
        try:
            return self._positions[node]
        except KeyError:
            raise NodeNotInGraphError(node) from None

    def children(self, index: int) -> tuple[int, ...]:
        """Child indices of node at index. O(1) offset lookup."""
        start = self.offsets[index]
        end = self.offsets[index + 1] if index + 1 < len(self.offsets) else len(self.adjacency)
        return self.adjacency[start:end]

    def successors(self, node: N) -> tuple[N, ...]:
        """Child labels of node, in insertion order."""
        return tuple(self.nodes[ix] for ix in self.children(self.index_of(node)))

    def edges(self) -> Iterator[tuple[N, N]]:
        """Iterate all (from, to) label pairs in index order."""
        for ix, node in enumerate(self.nodes):
            for child in self.children(ix):
                yield node, self.nodes[child]

    def topological_sort(self) -> SortResult[N]:
        """Order nodes so that every edge points forward.

        Iterative DFS over all nodes (disconnected components included),
        colouring nodes unseen / in progress / visited. Each stack frame
        holds its node index and a cursor over the remaining children.
        The root frame has no node and walks every index.

        Returns:
            TopologicalOrder on success.
            Cycle with the stack slice from the back-edge target to the top
            when a back edge is found.
        """
        state = [_VisitState.UNSEEN] * len(self.nodes)
        stack: list[tuple[int | None, Iterator[int]]] = [(None, iter(range(len(self.nodes))))]
        post_order: list[int] = []

        while stack:
            node_ix, remaining = stack[-1]
            child_ix = next(remaining, None)

            if child_ix is None:
                stack.pop()
                if node_ix is not None:
                    state[node_ix] = _VisitState.VISITED
                    post_order.append(node_ix)
                continue

            match state[child_ix]:
                case _VisitState.UNSEEN:
                    state[child_ix] = _VisitState.IN_PROGRESS
                    stack.append((child_ix, iter(self.children(child_ix))))
                case _VisitState.IN_PROGRESS:
                    frames = [ix for ix, _ in stack if ix is not None]
                    start = frames.index(child_ix)
                    return Cycle(tuple(self.nodes[ix] for ix in frames[start:]))
                case _VisitState.VISITED:
                    pass

        return TopologicalOrder(tuple(self.nodes[ix] for ix in reversed(post_order)))

    def topological_order(self) -> tuple[N, ...]:
        """Topological order of an acyclic graph.

        Raises:
            CycleDetectedError: graph contains a cycle
        """
        match self.topological_sort():
            case TopologicalOrder(nodes=order):
                return order
            case Cycle(nodes=cycle):
                raise CycleDetectedError(cycle)

    def is_sub_topological_order(self, nodes: Iterable[N]) -> bool:
        """Check that no node in the sequence comes after one of its children.

        Single linear pass: each node is marked visited in turn, and the
        sequence is rejected as soon as a node has an already-visited child.
        Fails closed: an unknown label returns False immediately.
        """
        visited = [False] * len(self.nodes)
        for node in nodes:
            node_ix = self._positions.get(node)
            if node_ix is None:
                return False
            if any(visited[child] for child in self.children(node_ix)):
                return False
            visited[node_ix] = True
        return True

    def into_builder(self) -> DirectedGraphBuilder[N]:
        """Expand back into a builder with the same indices and edges.

        The returned builder shares no mutable state with this graph.
        """
        positions = {node: ix for ix, node in enumerate(self.nodes)}
        edges = [list(self.children(ix)) for ix in range(len(self.nodes))]
        return DirectedGraphBuilder._from_parts(positions, edges)
