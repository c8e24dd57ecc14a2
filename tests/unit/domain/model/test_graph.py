"""Tests for domain/model/graph.py."""

import pytest

from printqueue.domain.exceptions import (
    CycleDetectedError,
    DuplicateNodeError,
    NodeNotInGraphError,
)
from printqueue.domain.model.graph import DirectedGraph, DirectedGraphBuilder
from printqueue.domain.model.topology import Cycle, TopologicalOrder
from tests.factories import (
    EXAMPLE_RULES,
    example_builder,
    make_builder,
    make_graph,
    positions,
)


class TestBuilderExtend:
    """Tests for DirectedGraphBuilder.extend and accessors."""

    def test_empty_builder(self) -> None:
        builder = DirectedGraphBuilder[str]()
        assert builder.node_count == 0
        assert builder.edge_count == 0
        assert builder.nodes == ()

    def test_nodes_in_first_seen_order(self) -> None:
        builder = make_builder(("b", "a"), ("c", "b"))
        assert builder.nodes == ("b", "a", "c")

    def test_children_in_insertion_order(self) -> None:
        builder = make_builder(("a", "c"), ("a", "b"))
        assert builder.children_of("a") == ("c", "b")
        assert builder.children_of("b") == ()

    def test_duplicate_edges_preserved(self) -> None:
        builder = make_builder(("a", "b"), ("a", "b"))
        assert builder.node_count == 2
        assert builder.edge_count == 2
        assert builder.children_of("a") == ("b", "b")

    def test_self_loop_preserved(self) -> None:
        builder = make_builder(("x", "x"))
        assert builder.nodes == ("x",)
        assert builder.children_of("x") == ("x",)

    def test_add_edge(self) -> None:
        builder = DirectedGraphBuilder[int]()
        builder.add_edge(1, 2)
        builder.add_edge(2, 3)
        assert builder.nodes == (1, 2, 3)
        assert builder.edge_count == 2

    def test_extend_accepts_generator(self) -> None:
        builder = DirectedGraphBuilder[int]()
        builder.extend((i, i + 1) for i in range(3))
        assert builder.nodes == (0, 1, 2, 3)

    def test_contains_and_len(self) -> None:
        builder = make_builder(("a", "b"))
        assert "a" in builder
        assert "z" not in builder
        assert len(builder) == 2

    def test_children_of_unknown_raises(self) -> None:
        builder = make_builder(("a", "b"))
        with pytest.raises(NodeNotInGraphError, match="'z'"):
            builder.children_of("z")


class TestBuilderBuild:
    """Tests for DirectedGraphBuilder.build compaction."""

    def test_empty_build(self) -> None:
        g = DirectedGraphBuilder[int]().build()
        assert g == DirectedGraph.empty()
        assert g.nodes == ()
        assert g.adjacency == ()
        assert g.offsets == ()

    def test_offsets_are_running_totals(self) -> None:
        g = make_graph(("a", "b"), ("a", "c"), ("b", "c"))
        assert g.nodes == ("a", "b", "c")
        assert g.offsets == (0, 2, 3)
        assert g.adjacency == (1, 2, 2)

    def test_children_slices(self) -> None:
        g = make_graph(("a", "b"), ("a", "c"), ("b", "c"))
        assert g.children(0) == (1, 2)
        assert g.children(1) == (2,)
        assert g.children(2) == ()

    def test_round_trip_structure(self) -> None:
        """Every node appears once; children keep order and duplicates."""
        edges = [(1, 2), (3, 1), (1, 2), (2, 3), (1, 4)]
        g = make_graph(*edges)

        assert sorted(g.nodes) == [1, 2, 3, 4]
        assert len(set(g.nodes)) == len(g.nodes)
        for node in g.nodes:
            expected = tuple(to for from_, to in edges if from_ == node)
            assert g.successors(node) == expected

    def test_edges_iteration(self) -> None:
        g = make_graph(("a", "b"), ("b", "c"), ("a", "c"))
        assert list(g.edges()) == [("a", "b"), ("a", "c"), ("b", "c")]

    def test_build_leaves_builder_usable(self) -> None:
        builder = make_builder(("a", "b"))
        first = builder.build()
        builder.add_edge("b", "c")
        assert first.node_count == 2
        assert builder.build().node_count == 3

    def test_from_edges(self) -> None:
        g = DirectedGraph.from_edges([("a", "b")])
        assert g.node_count == 2
        assert g.edge_count == 1


class TestSubgraph:
    """Tests for DirectedGraphBuilder.subgraph."""

    def test_nodes_reindexed_in_given_order(self) -> None:
        sub = example_builder().subgraph([75, 97, 47, 61, 53])
        assert sub.nodes == (75, 97, 47, 61, 53)

    def test_keeps_only_inner_edges(self) -> None:
        subset = {75, 97, 47, 61, 53}
        g = example_builder().subgraph(subset).build()

        expected = {(u, v) for u, v in EXAMPLE_RULES if u in subset and v in subset}
        assert set(g.nodes) == subset
        assert set(g.edges()) == expected
        assert g.edge_count == len(expected)

    def test_edges_to_excluded_nodes_dropped(self) -> None:
        sub = make_builder(("a", "b"), ("a", "c")).subgraph(["a", "c"])
        assert sub.children_of("a") == ("c",)

    def test_empty_subset(self) -> None:
        sub = example_builder().subgraph([])
        assert sub.node_count == 0
        assert sub.build() == DirectedGraph.empty()

    def test_unknown_node_raises(self) -> None:
        with pytest.raises(NodeNotInGraphError) as exc_info:
            example_builder().subgraph([75, 999])
        assert exc_info.value.node == 999
        assert isinstance(exc_info.value, KeyError)

    def test_repeated_node_raises(self) -> None:
        with pytest.raises(DuplicateNodeError, match="more than once") as exc_info:
            example_builder().subgraph([75, 47, 75])
        assert exc_info.value.node == 75

    def test_subgraph_is_independent(self) -> None:
        builder = make_builder(("a", "b"))
        sub = builder.subgraph(["a", "b"])
        sub.add_edge("b", "a")
        assert builder.edge_count == 1
        assert builder.children_of("b") == ()


class TestTopologicalSort:
    """Tests for DirectedGraph.topological_sort."""

    def test_empty_graph(self) -> None:
        assert DirectedGraph.empty().topological_sort() == TopologicalOrder(())

    def test_chain(self) -> None:
        g = make_graph(("a", "b"), ("b", "c"))
        assert g.topological_sort() == TopologicalOrder(("a", "b", "c"))

    def test_chain_inserted_backwards(self) -> None:
        g = make_graph(("b", "c"), ("a", "b"))
        assert g.topological_sort() == TopologicalOrder(("a", "b", "c"))

    def test_disconnected_components_all_covered(self) -> None:
        g = make_graph(("a", "b"), ("c", "d"))
        result = g.topological_sort()

        assert isinstance(result, TopologicalOrder)
        assert sorted(result.nodes) == ["a", "b", "c", "d"]
        pos = positions(result.nodes)
        assert pos["a"] < pos["b"]
        assert pos["c"] < pos["d"]

    def test_every_edge_points_forward(self) -> None:
        g = make_graph(*EXAMPLE_RULES)
        result = g.topological_sort()

        assert isinstance(result, TopologicalOrder)
        pos = positions(result.nodes)
        for u, v in EXAMPLE_RULES:
            assert pos[u] < pos[v]

    def test_total_order_is_unique(self) -> None:
        g = make_graph(*EXAMPLE_RULES)
        assert g.topological_order() == (97, 75, 47, 61, 53, 29, 13)

    def test_parallel_edges_harmless(self) -> None:
        g = make_graph(("a", "b"), ("a", "b"), ("b", "c"), ("b", "c"))
        assert g.topological_order() == ("a", "b", "c")

    def test_deep_chain_does_not_recurse(self) -> None:
        depth = 20_000
        g = make_graph(*((i, i + 1) for i in range(depth)))
        assert g.topological_order() == tuple(range(depth + 1))

    def test_self_loop_is_single_node_cycle(self) -> None:
        g = make_graph(("x", "x"))
        assert g.topological_sort() == Cycle(("x",))

    def test_three_cycle(self) -> None:
        g = make_graph(("a", "b"), ("b", "c"), ("c", "a"))
        assert g.topological_sort() == Cycle(("a", "b", "c"))

    def test_cycle_excludes_nodes_leading_into_it(self) -> None:
        g = make_graph(("s", "a"), ("a", "b"), ("b", "a"))
        assert g.topological_sort() == Cycle(("a", "b"))

    def test_cycle_is_closed_walk(self) -> None:
        g = make_graph(("a", "b"), ("b", "c"), ("c", "d"), ("d", "b"), ("a", "e"))
        result = g.topological_sort()

        assert isinstance(result, Cycle)
        graph_edges = set(g.edges())
        for edge in result.edges():
            assert edge in graph_edges

    def test_topological_order_raises_on_cycle(self) -> None:
        g = make_graph(("a", "b"), ("b", "a"))
        with pytest.raises(CycleDetectedError) as exc_info:
            g.topological_order()
        assert exc_info.value.cycle == ("a", "b")


class TestIsSubTopologicalOrder:
    """Tests for DirectedGraph.is_sub_topological_order."""

    def test_respecting_sequence(self) -> None:
        g = make_graph(("a", "b"), ("b", "c"))
        assert g.is_sub_topological_order(["a", "b", "c"]) is True

    def test_node_after_its_child_rejected(self) -> None:
        g = make_graph(("a", "b"))
        assert g.is_sub_topological_order(["b", "a"]) is False

    def test_only_direct_edges_checked(self) -> None:
        """a → b → c with b absent from the sequence: c before a passes."""
        g = make_graph(("a", "b"), ("b", "c"))
        assert g.is_sub_topological_order(["c", "a"]) is True

    def test_unknown_label_fails_closed(self) -> None:
        g = make_graph(("a", "b"))
        assert g.is_sub_topological_order(["a", "z", "b"]) is False

    def test_empty_sequence(self) -> None:
        assert make_graph(("a", "b")).is_sub_topological_order([]) is True

    def test_self_loop_node_alone_passes(self) -> None:
        assert make_graph(("x", "x")).is_sub_topological_order(["x"]) is True

    def test_example_valid_update(self) -> None:
        update = (75, 47, 61, 53, 29)
        g = example_builder().subgraph(update).build()
        assert g.is_sub_topological_order(update) is True

    def test_example_invalid_update(self) -> None:
        update = (75, 97, 47, 61, 53)
        g = example_builder().subgraph(update).build()
        assert g.is_sub_topological_order(update) is False

    def test_matches_edge_definition(self) -> None:
        """True iff no edge u → v has v before u in the sequence."""
        g = make_graph(*EXAMPLE_RULES)
        sequences = [
            (75, 47, 61, 53, 29),
            (97, 61, 53, 29, 13),
            (61, 13, 29),
            (97, 13, 75, 29, 47),
            (13, 97),
        ]
        for seq in sequences:
            pos = positions(seq)
            expected = all(
                pos[u] < pos[v] for u, v in EXAMPLE_RULES if u in pos and v in pos
            )
            assert g.is_sub_topological_order(seq) is expected


class TestIntoBuilder:
    """Tests for DirectedGraph.into_builder."""

    def test_rebuild_is_equal(self) -> None:
        g = make_graph(("a", "b"), ("a", "c"), ("c", "a"))
        assert g.into_builder().build() == g

    def test_keeps_indices(self) -> None:
        g = make_graph(("b", "a"), ("a", "c"))
        assert g.into_builder().nodes == g.nodes

    def test_builder_shares_no_state(self) -> None:
        g = make_graph(("a", "b"))
        builder = g.into_builder()
        builder.add_edge("b", "a")
        assert g.edge_count == 1
        assert g.successors("b") == ()

    def test_subgraph_after_round_trip(self) -> None:
        g = make_graph(*EXAMPLE_RULES)
        sub = g.into_builder().subgraph([61, 13, 29]).build()
        assert sub.topological_order() == (61, 29, 13)


class TestDirectedGraphLookups:
    """Tests for label lookups."""

    def test_index_of(self) -> None:
        g = make_graph(("a", "b"))
        assert g.index_of("a") == 0
        assert g.index_of("b") == 1

    def test_index_of_unknown_raises(self) -> None:
        with pytest.raises(NodeNotInGraphError):
            make_graph(("a", "b")).index_of("z")

    def test_has_node(self) -> None:
        g = make_graph(("a", "b"))
        assert g.has_node("a")
        assert not g.has_node("z")


class TestDirectedGraphFailFirst:
    """Tests for FAIL-FIRST validation in DirectedGraph."""

    def test_offset_count_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="expected 1 offsets"):
            DirectedGraph(nodes=("a",), adjacency=(), offsets=())

    def test_first_offset_nonzero_raises(self) -> None:
        with pytest.raises(ValueError, match="first offset must be 0"):
            DirectedGraph(nodes=("a",), adjacency=(0,), offsets=(1,))

    def test_decreasing_offsets_raise(self) -> None:
        with pytest.raises(ValueError, match="must not decrease"):
            DirectedGraph(nodes=("a", "b", "c"), adjacency=(0, 0), offsets=(0, 2, 1))

    def test_offset_past_adjacency_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds adjacency length"):
            DirectedGraph(nodes=("a", "b"), adjacency=(), offsets=(0, 1))

    def test_adjacency_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            DirectedGraph(nodes=("a",), adjacency=(1,), offsets=(0,))

    def test_duplicate_labels_raise(self) -> None:
        with pytest.raises(ValueError, match="unique"):
            DirectedGraph(nodes=("a", "a"), adjacency=(), offsets=(0, 0))

    def test_is_frozen(self) -> None:
        g = DirectedGraph.empty()
        with pytest.raises(AttributeError):
            g.nodes = ("x",)  # type: ignore[misc]
