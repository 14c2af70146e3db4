"""
Problem instance structures: weighted graphs and knapsack instances.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from classic_algos.types import EdgeTriple, IntArray
from classic_algos.utils.error_handler import ValidationError, require_non_negative_int


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge between two vertex ids."""

    src: int
    dest: int
    weight: int

    def as_tuple(self) -> EdgeTriple:
        return (self.src, self.dest, self.weight)

    def __str__(self) -> str:
        return f"{self.src} -- {self.dest} == {self.weight}"


class Graph:
    """
    Undirected weighted graph stored as an edge list.

    The graph owns its edges. Vertex ids live in ``[0, vertices)``. Only the
    order of ``edges`` is changed by the MST builder, which sorts it in place.
    """

    def __init__(self, vertices: int, edges: Iterable[Edge | EdgeTriple] = ()) -> None:
        self.vertices: int = require_non_negative_int(vertices, "vertices")
        self.edges: list[Edge] = []
        for edge in edges:
            if isinstance(edge, Edge):
                self.add_edge(edge.src, edge.dest, edge.weight)
            else:
                self.add_edge(*edge)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def add_edge(self, src: int, dest: int, weight: int) -> Edge:
        """
        Append a validated edge.

        Raises:
            ValidationError: If an endpoint is out of range or the weight is negative
        """
        src = require_non_negative_int(src, "src")
        dest = require_non_negative_int(dest, "dest")
        for name, vertex in (("src", src), ("dest", dest)):
            if vertex >= self.vertices:
                raise ValidationError(
                    f"Edge {name} vertex {vertex} out of range for {self.vertices} vertices",
                    suggestion=f"Use vertex ids in [0, {self.vertices}).",
                )
        weight = require_non_negative_int(weight, "weight")

        edge = Edge(src, dest, weight)
        self.edges.append(edge)
        return edge

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertices}, n_edges={self.n_edges})"


class KnapsackInstance:
    """Represents a single 0/1 Knapsack problem instance"""

    def __init__(self, weights: Sequence[int], values: Sequence[int], capacity: int) -> None:
        weights = _as_int_array(weights, "weights")
        values = _as_int_array(values, "values")

        if weights.ndim != 1 or values.ndim != 1:
            raise ValidationError(
                "Weights and values must be one-dimensional",
                suggestion="Pass flat sequences of integers.",
            )
        if weights.shape != values.shape:
            raise ValidationError(
                f"Weights ({weights.size}) and values ({values.size}) differ in length",
                suggestion="Provide exactly one weight per value.",
            )
        if np.any(weights < 0):
            raise ValidationError(
                "Item weights must be non-negative",
                suggestion="Remove or fix items with negative weight.",
            )

        self.weights: IntArray = weights
        self.values: IntArray = values
        self.capacity: int = require_non_negative_int(capacity, "capacity")
        self.n_items: int = int(weights.size)

    def __repr__(self) -> str:
        return f"KnapsackInstance(n_items={self.n_items}, capacity={self.capacity})"


def _as_int_array(items: Sequence[int], name: str) -> np.ndarray:
    array = np.asarray(items)
    if array.size and not np.issubdtype(array.dtype, np.integer):
        raise ValidationError(
            f"Item {name} must be integers, got dtype {array.dtype}",
            suggestion=f"Round or scale {name} to whole numbers.",
        )
    return array.astype(np.int64)
