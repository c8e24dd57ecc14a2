"""Domain model entities."""

from printqueue.domain.model.configuration import ReportFormat, RunConfig
from printqueue.domain.model.graph import DirectedGraph, DirectedGraphBuilder
from printqueue.domain.model.puzzle import (
    Level,
    Page,
    PuzzleInput,
    Solution,
    Update,
    UpdateCheck,
)
from printqueue.domain.model.topology import Cycle, SortResult, TopologicalOrder

__all__ = [
    # Graph
    "DirectedGraph",
    "DirectedGraphBuilder",
    "TopologicalOrder",
    "Cycle",
    "SortResult",
    # Puzzle
    "Level",
    "Page",
    "Update",
    "PuzzleInput",
    "UpdateCheck",
    "Solution",
    # Configuration
    "RunConfig",
    "ReportFormat",
]
