"""Problem instances, embedded samples and random generators."""

from classic_algos.data.generator import GraphGenerator, KnapsackGenerator
from classic_algos.data.samples import sample_graph, sample_knapsack
from classic_algos.data.structures import Edge, Graph, KnapsackInstance

__all__ = [
    # Classes
    "Edge",
    "Graph",
    "KnapsackInstance",
    "GraphGenerator",
    "KnapsackGenerator",
    # Functions
    "sample_graph",
    "sample_knapsack",
]
