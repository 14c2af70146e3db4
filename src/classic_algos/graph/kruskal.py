"""
Kruskal's Minimum Spanning Tree builder.

Edges are sorted by weight and accepted greedily whenever they join two
different union-find components.
"""

import time
from dataclasses import dataclass, field
from operator import attrgetter

from algo_core.core import OptimizationProblem, SolverRegistry
from classic_algos.data.structures import Edge, Graph
from classic_algos.graph.union_find import DisjointSet, find, make_subsets, union
from classic_algos.utils.logger import get_logger

logger = get_logger(__name__)

MST_HEADER = "Following are the edges in the constructed MST:"


def kruskal_mst(graph: Graph) -> list[Edge]:
    """
    Build a minimum spanning tree (or forest) of ``graph``.

    ``graph.edges`` is sorted by weight in place. The sort is stable, so
    equal-weight edges keep their insertion order; no other tie-break is
    applied. Iteration stops after ``vertices - 1`` accepted edges or when
    the edges run out, in which case the result is a minimum spanning forest.

    Args:
        graph: Graph to span

    Returns:
        Accepted edges in acceptance order
    """
    graph.edges.sort(key=attrgetter("weight"))

    subsets = make_subsets(graph.vertices)
    result: list[Edge] = []
    target = graph.vertices - 1

    for next_edge in graph.edges:
        if len(result) >= target:
            break

        x = find(subsets, next_edge.src)
        y = find(subsets, next_edge.dest)

        if x != y:
            result.append(next_edge)
            union(subsets, x, y)
            logger.debug("Accepted edge %s", next_edge)
        else:
            logger.debug("Discarded edge %s (would close a cycle)", next_edge)

    if len(result) < target:
        logger.info(
            "Edges exhausted after %d of %d tree edges; result is a spanning forest",
            len(result),
            target,
        )

    return result


def format_mst(edges: list[Edge]) -> list[str]:
    """Render an MST as the header line followed by one line per edge."""
    return [MST_HEADER] + [str(edge) for edge in edges]


@dataclass
class MSTResult:
    """Result of a Kruskal run."""

    edges: list[Edge] = field(default_factory=list)
    vertices: int = 0
    solve_time: float = 0.0

    @property
    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)


class MSTProblem(OptimizationProblem[Graph, list[Edge]]):
    """Spanning tree/forest problem: minimise total weight with no cycles."""

    def compute_objective(self, solution: list[Edge], instance: Graph) -> float:
        return float(sum(edge.weight for edge in solution))

    def is_feasible(self, solution: list[Edge], instance: Graph) -> bool:
        """True when every endpoint is a vertex of ``instance`` and the edges form no cycle."""
        components = DisjointSet(instance.vertices)
        for edge in solution:
            if not (0 <= edge.src < instance.vertices and 0 <= edge.dest < instance.vertices):
                return False
            if not components.union(edge.src, edge.dest):
                return False
        return True


@SolverRegistry.register("kruskal")
class KruskalSolver:
    """Kruskal MST solver with timing"""

    def solve(self, graph: Graph) -> MSTResult:
        """
        Compute the MST of ``graph``

        Args:
            graph: Graph instance (its edge list is sorted in place)

        Returns:
            MSTResult with accepted edges and solve time
        """
        start_time = time.perf_counter()
        edges = kruskal_mst(graph)
        solve_time = time.perf_counter() - start_time

        result = MSTResult(edges=edges, vertices=graph.vertices, solve_time=solve_time)
        logger.info(
            "MST of %r: %d edges, total weight %d",
            graph,
            len(result.edges),
            result.total_weight,
        )
        return result
