"""Union-find and Kruskal minimum spanning tree."""

from classic_algos.graph.kruskal import (
    KruskalSolver,
    MSTProblem,
    MSTResult,
    format_mst,
    kruskal_mst,
)
from classic_algos.graph.union_find import DisjointSet, Subset, find, make_subsets, union

__all__ = [
    "Subset",
    "DisjointSet",
    "make_subsets",
    "find",
    "union",
    "KruskalSolver",
    "MSTProblem",
    "MSTResult",
    "kruskal_mst",
    "format_mst",
]
