"""
Tests for Kruskal's minimum spanning tree builder.
"""

from itertools import combinations

import pytest

from algo_core.core import SolverRegistry
from classic_algos.data import Edge, Graph, GraphGenerator
from classic_algos.graph.kruskal import (
    MST_HEADER,
    KruskalSolver,
    MSTProblem,
    format_mst,
    kruskal_mst,
)


def _brute_force_mst_weight(graph: Graph) -> int:
    """Cheapest acyclic subset of V - 1 edges, by enumeration."""
    problem = MSTProblem()
    best = None
    for subset in combinations(graph.edges, graph.vertices - 1):
        if problem.is_feasible(list(subset), graph):
            weight = sum(edge.weight for edge in subset)
            best = weight if best is None else min(best, weight)
    return best


class TestKruskalSample:
    """Test suite for the embedded sample graph."""

    def test_sample_edge_count(self, mst_sample_graph):
        """A connected 5-vertex graph yields 4 tree edges."""
        edges = kruskal_mst(mst_sample_graph)
        assert len(edges) == mst_sample_graph.vertices - 1

    def test_sample_total_weight(self, mst_sample_graph):
        """Accepted edges (1,2,1), (1,3,2), (3,4,2), (0,2,3) weigh 8."""
        edges = kruskal_mst(mst_sample_graph)
        assert sum(edge.weight for edge in edges) == 8

    def test_sample_acceptance_order(self, mst_sample_graph):
        """With a stable sort the sample result is fully determined."""
        edges = kruskal_mst(mst_sample_graph)
        assert [edge.as_tuple() for edge in edges] == [
            (1, 2, 1),
            (1, 3, 2),
            (3, 4, 2),
            (0, 2, 3),
        ]

    def test_sample_matches_brute_force(self, mst_sample_graph):
        expected = _brute_force_mst_weight(mst_sample_graph)
        edges = kruskal_mst(mst_sample_graph)
        assert sum(edge.weight for edge in edges) == expected

    def test_edges_sorted_in_place(self, mst_sample_graph):
        """The graph's edge list is left sorted by weight."""
        kruskal_mst(mst_sample_graph)
        weights = [edge.weight for edge in mst_sample_graph.edges]
        assert weights == sorted(weights)
        assert mst_sample_graph.n_edges == 7

    def test_format_mst(self, mst_sample_graph):
        lines = format_mst(kruskal_mst(mst_sample_graph))
        assert lines[0] == MST_HEADER
        assert lines[1:] == ["1 -- 2 == 1", "1 -- 3 == 2", "3 -- 4 == 2", "0 -- 2 == 3"]


class TestKruskalProperties:
    """Structural properties on generated graphs."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_connected_graph_yields_spanning_tree(self, seed):
        generator = GraphGenerator(seed=seed)
        graph = generator.generate_connected_graph(30, extra_edges=60, weight_range=(0, 20))

        edges = kruskal_mst(graph)

        assert len(edges) == graph.vertices - 1
        assert MSTProblem().is_feasible(edges, graph), "MST must be acyclic"

    @pytest.mark.parametrize("seed", [10, 11, 12])
    def test_small_graph_optimal(self, seed):
        generator = GraphGenerator(seed=seed)
        graph = generator.generate_connected_graph(6, extra_edges=4, weight_range=(0, 9))
        expected = _brute_force_mst_weight(graph)

        edges = kruskal_mst(graph)

        assert sum(edge.weight for edge in edges) == expected

    def test_disconnected_graph_yields_forest(self):
        """Edges run out before V - 1; the result is a spanning forest."""
        generator = GraphGenerator(seed=7)
        graph = generator.generate_forest([4, 3, 5], extra_edges_per_component=3)

        edges = kruskal_mst(graph)

        assert len(edges) == graph.vertices - 3
        assert MSTProblem().is_feasible(edges, graph)

    def test_empty_and_single_vertex(self):
        assert kruskal_mst(Graph(0)) == []
        assert kruskal_mst(Graph(1, [(0, 0, 5)])) == []

    def test_self_loop_and_parallel_edges_discarded(self):
        graph = Graph(2, [(0, 0, 0), (0, 1, 3), (1, 0, 1)])
        assert kruskal_mst(graph) == [Edge(1, 0, 1)]


class TestMSTProblem:
    """Test suite for feasibility and objective evaluation."""

    def test_cycle_is_infeasible(self):
        graph = Graph(3, [(0, 1, 1), (1, 2, 1), (2, 0, 1)])
        assert not MSTProblem().is_feasible(list(graph.edges), graph)

    def test_out_of_range_vertex_is_infeasible(self):
        graph = Graph(2)
        assert not MSTProblem().is_feasible([Edge(0, 5, 1)], graph)

    def test_evaluate_solution(self, mst_sample_graph):
        edges = kruskal_mst(mst_sample_graph)
        evaluated = MSTProblem().evaluate_solution(edges, mst_sample_graph)

        assert evaluated.is_feasible
        assert evaluated.objective_value == 8.0


class TestKruskalSolver:
    """Test suite for the registered solver wrapper."""

    def test_registered(self):
        assert "kruskal" in SolverRegistry.list_solvers()
        assert SolverRegistry.get_class("kruskal") is KruskalSolver

    def test_solve_result(self, mst_sample_graph):
        result = SolverRegistry.create("kruskal").solve(mst_sample_graph)

        assert result.vertices == 5
        assert result.total_weight == 8
        assert len(result.edges) == 4
        assert result.solve_time >= 0.0
