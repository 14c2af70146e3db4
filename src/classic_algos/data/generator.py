"""
Random instance generators for graphs and knapsack problems.
Used to exercise the solvers on inputs beyond the embedded samples.
"""

from typing import Any

import numpy as np

from classic_algos.data.structures import Graph, KnapsackInstance
from classic_algos.utils.logger import get_logger

logger = get_logger(__name__)


class GraphGenerator:
    """Generates random undirected weighted graphs"""

    def __init__(self, seed: int = 42):
        self.rng = np.random.RandomState(seed)

    def generate_connected_graph(
        self,
        n_vertices: int,
        extra_edges: int = 0,
        weight_range: tuple[int, int] = (0, 100),
    ) -> Graph:
        """
        Generate a random connected graph

        A random spanning tree is laid down first (each vertex in a random
        order attaches to one already placed vertex), then ``extra_edges``
        random edges are added on top. Parallel edges and self loops may
        appear among the extra edges.

        Args:
            n_vertices: Number of vertices
            extra_edges: Number of edges beyond the spanning tree
            weight_range: (min_weight, max_weight), inclusive

        Returns:
            Graph with n_vertices - 1 + extra_edges edges
        """
        graph = Graph(n_vertices)
        order = self.rng.permutation(n_vertices)

        for position in range(1, n_vertices):
            anchor = order[self.rng.randint(0, position)]
            graph.add_edge(int(order[position]), int(anchor), self._weight(weight_range))

        if n_vertices > 0:
            for _ in range(extra_edges):
                src, dest = self.rng.randint(0, n_vertices, size=2)
                graph.add_edge(int(src), int(dest), self._weight(weight_range))

        logger.debug("Generated connected %r", graph)
        return graph

    def generate_forest(
        self,
        component_sizes: list[int],
        extra_edges_per_component: int = 0,
        weight_range: tuple[int, int] = (0, 100),
    ) -> Graph:
        """
        Generate a disconnected graph made of independent connected components

        Args:
            component_sizes: Vertex count of each component
            extra_edges_per_component: Extra edges added inside each component
            weight_range: (min_weight, max_weight), inclusive

        Returns:
            Graph whose vertices are numbered component by component
        """
        graph = Graph(sum(component_sizes))
        offset = 0
        for size in component_sizes:
            component = self.generate_connected_graph(
                size, extra_edges=extra_edges_per_component, weight_range=weight_range
            )
            for edge in component.edges:
                graph.add_edge(edge.src + offset, edge.dest + offset, edge.weight)
            offset += size
        return graph

    def _weight(self, weight_range: tuple[int, int]) -> int:
        return int(self.rng.randint(weight_range[0], weight_range[1] + 1))


class KnapsackGenerator:
    """Generates random Knapsack problem instances"""

    def __init__(self, seed: int = 42):
        self.rng = np.random.RandomState(seed)

    def generate_instance(
        self,
        n_items: int,
        weight_range: tuple[int, int] = (1, 100),
        value_range: tuple[int, int] = (1, 100),
        capacity_ratio: float = 0.5,
    ) -> KnapsackInstance:
        """
        Generate a random Knapsack instance

        Args:
            n_items: Number of items
            weight_range: (min_weight, max_weight) for items
            value_range: (min_value, max_value) for items
            capacity_ratio: Capacity as a fraction of total weight (default: 0.5)

        Returns:
            KnapsackInstance object
        """
        weights = self.rng.randint(weight_range[0], weight_range[1] + 1, size=n_items)
        values = self.rng.randint(value_range[0], value_range[1] + 1, size=n_items)

        total_weight = np.sum(weights)
        capacity = int(total_weight * capacity_ratio)

        return KnapsackInstance(weights, values, capacity)

    def generate_dataset(
        self, n_instances: int, n_items_range: tuple[int, int], **kwargs: Any
    ) -> list[KnapsackInstance]:
        """
        Generate multiple instances with varying sizes

        Args:
            n_instances: Number of instances to generate
            n_items_range: (min_items, max_items) range
            **kwargs: Additional arguments passed to generate_instance

        Returns:
            List of KnapsackInstance objects
        """
        instances = []
        for _ in range(n_instances):
            n_items = self.rng.randint(n_items_range[0], n_items_range[1] + 1)
            instances.append(self.generate_instance(n_items, **kwargs))
        return instances
