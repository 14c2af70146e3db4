"""
Tests for instance structures, samples and random generators.
"""

import numpy as np
import pytest

from classic_algos.data import (
    Edge,
    Graph,
    GraphGenerator,
    KnapsackGenerator,
    KnapsackInstance,
    sample_graph,
    sample_knapsack,
)
from classic_algos.graph.union_find import DisjointSet
from classic_algos.utils.error_handler import ValidationError


class TestGraph:
    """Test suite for graph construction and validation."""

    def test_edges_from_triples_and_edges(self):
        graph = Graph(3, [(0, 1, 5), Edge(1, 2, 0)])

        assert graph.n_edges == 2
        assert graph.edges[0] == Edge(0, 1, 5)
        assert str(graph.edges[1]) == "1 -- 2 == 0"

    def test_edge_is_immutable(self):
        edge = Edge(0, 1, 2)
        with pytest.raises(AttributeError):
            edge.weight = 3

    def test_vertex_out_of_range(self):
        with pytest.raises(ValidationError, match="out of range"):
            Graph(2, [(0, 2, 1)])

    def test_negative_weight(self):
        with pytest.raises(ValidationError, match="non-negative"):
            Graph(2, [(0, 1, -1)])

    def test_negative_vertex_count(self):
        with pytest.raises(ValidationError):
            Graph(-1)

    def test_numpy_integers_accepted(self):
        graph = Graph(np.int64(3))
        edge = graph.add_edge(np.int64(0), np.int32(2), np.int64(4))

        assert type(edge.src) is int
        assert graph.vertices == 3


class TestKnapsackInstance:
    """Test suite for knapsack instance validation."""

    def test_mismatched_lengths(self):
        with pytest.raises(ValidationError, match="differ in length"):
            KnapsackInstance([1, 2], [3], 10)

    def test_negative_capacity(self):
        with pytest.raises(ValidationError):
            KnapsackInstance([1], [1], -5)

    def test_negative_weight(self):
        with pytest.raises(ValidationError):
            KnapsackInstance([1, -2], [1, 1], 5)

    def test_float_weights_rejected(self):
        with pytest.raises(ValidationError, match="integers"):
            KnapsackInstance([1.5, 2.0], [1, 1], 5)

    def test_arrays_are_int64(self):
        inst = KnapsackInstance([1, 2], [3, 4], 5)

        assert inst.weights.dtype == np.int64
        assert inst.values.dtype == np.int64
        assert inst.n_items == 2


class TestSamples:
    """Test suite for the embedded samples."""

    def test_sample_graph_shape(self):
        graph = sample_graph()
        assert graph.vertices == 5
        assert graph.n_edges == 7

    def test_sample_graph_fresh_copy(self):
        first = sample_graph()
        first.edges.sort(key=lambda edge: edge.weight)
        assert sample_graph().edges[0] == Edge(0, 1, 4)

    def test_sample_knapsack(self):
        inst = sample_knapsack()
        assert inst.capacity == 120
        assert inst.values.tolist() == [60, 100, 120, 160, 50, 110, 150, 200]
        assert inst.weights.tolist() == [10, 20, 30, 40, 10, 25, 35, 45]


class TestGraphGenerator:
    """Test suite for random graph generation."""

    def test_connected_graph_is_connected(self):
        graph = GraphGenerator(seed=42).generate_connected_graph(25, extra_edges=10)
        components = DisjointSet(graph.vertices)
        for edge in graph.edges:
            components.union(edge.src, edge.dest)

        assert graph.n_edges == 24 + 10
        assert components.n_sets == 1

    def test_weights_within_range(self):
        graph = GraphGenerator(seed=1).generate_connected_graph(
            15, extra_edges=15, weight_range=(3, 7)
        )
        assert all(3 <= edge.weight <= 7 for edge in graph.edges)

    def test_deterministic(self):
        a = GraphGenerator(seed=5).generate_connected_graph(10, extra_edges=5)
        b = GraphGenerator(seed=5).generate_connected_graph(10, extra_edges=5)
        assert a.edges == b.edges

    def test_forest_components(self):
        graph = GraphGenerator(seed=0).generate_forest([3, 4])
        components = DisjointSet(graph.vertices)
        for edge in graph.edges:
            components.union(edge.src, edge.dest)

        assert graph.vertices == 7
        assert components.n_sets == 2


class TestKnapsackGenerator:
    """Test suite for random knapsack generation."""

    def test_generate_instance_shape(self):
        inst = KnapsackGenerator(seed=42).generate_instance(10)

        assert inst.n_items == 10
        assert len(inst.values) == 10
        assert isinstance(inst.capacity, int)

    def test_capacity_ratio(self):
        inst = KnapsackGenerator(seed=42).generate_instance(50, capacity_ratio=0.5)
        assert inst.capacity == int(np.sum(inst.weights) * 0.5)

    def test_deterministic(self):
        a = KnapsackGenerator(seed=42).generate_instance(15)
        b = KnapsackGenerator(seed=42).generate_instance(15)

        assert np.array_equal(a.values, b.values)
        assert np.array_equal(a.weights, b.weights)
        assert a.capacity == b.capacity

    def test_generate_dataset_sizes(self):
        instances = KnapsackGenerator(seed=0).generate_dataset(20, (5, 9))

        assert len(instances) == 20
        assert all(5 <= inst.n_items <= 9 for inst in instances)
