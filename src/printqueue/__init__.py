"""printqueue - page ordering rules solved with a compact directed graph."""

__version__ = "0.1.0"

from printqueue.domain.model.graph import DirectedGraph, DirectedGraphBuilder
from printqueue.domain.model.topology import Cycle, TopologicalOrder

__all__ = [
    "DirectedGraph",
    "DirectedGraphBuilder",
    "TopologicalOrder",
    "Cycle",
    "__version__",
]
