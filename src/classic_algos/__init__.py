"""
Classic Algos
=============

Kruskal's minimum spanning tree (with union-find) and the 0/1 Knapsack
problem solved by bottom-up dynamic programming.

Main modules:
- data: Graph and knapsack instances, samples and random generators
- graph: Union-find and Kruskal's algorithm
- solvers: Knapsack dynamic programming
- config: YAML + Pydantic run configuration
- utils: Logging and error handling
"""

__version__ = "1.0.0"

# Public API exports
from classic_algos import config, data, graph, solvers
from classic_algos.data import Edge, Graph, KnapsackInstance
from classic_algos.graph import KruskalSolver, kruskal_mst
from classic_algos.solvers import KnapsackDPSolver, knapsack
from classic_algos.types import EdgeTriple, IntArray, PathLike

__all__ = [
    "config",
    "data",
    "graph",
    "solvers",
    "__version__",
    "Edge",
    "Graph",
    "KnapsackInstance",
    "KruskalSolver",
    "KnapsackDPSolver",
    "kruskal_mst",
    "knapsack",
    # Types
    "EdgeTriple",
    "IntArray",
    "PathLike",
]
