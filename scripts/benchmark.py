#!/usr/bin/env python3
"""Benchmark script for printqueue graph operations.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import random
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of printqueue package."""
    start = time.perf_counter()
    import printqueue  # noqa: F401

    return time.perf_counter() - start


def benchmark_deep_sort(depth: int) -> float:
    """Measure topological sort of a single chain (worst case stack depth)."""
    from printqueue.domain.model.graph import DirectedGraph

    graph = DirectedGraph.from_edges((i, i + 1) for i in range(depth))
    start = time.perf_counter()
    graph.topological_order()
    return time.perf_counter() - start


def benchmark_updates(pages: int, updates: int, seed: int) -> float:
    """Measure subgraph + check over random updates of a total page order."""
    from printqueue.application.services.solver import check_updates
    from printqueue.domain.model.graph import DirectedGraphBuilder

    rng = random.Random(seed)
    builder: DirectedGraphBuilder[int] = DirectedGraphBuilder.from_edges(
        (a, b) for a in range(pages) for b in range(a + 1, pages)
    )
    sample = [tuple(rng.sample(range(pages), 23)) for _ in range(updates)]

    start = time.perf_counter()
    check_updates(builder, sample)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run printqueue benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument("--seed", type=int, default=5, help="Random seed for generated updates")
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": "Topological Sort (100k chain)",
            "unit": "seconds",
            "value": benchmark_deep_sort(100_000),
        },
        {
            "name": "Update Checks (49 pages, 200 updates)",
            "unit": "seconds",
            "value": benchmark_updates(49, 200, args.seed),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
