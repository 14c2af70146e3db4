"""
Embedded sample datasets used by the command line runners.
"""

from classic_algos.data.structures import Graph, KnapsackInstance

SAMPLE_VERTICES = 5
SAMPLE_EDGES: list[tuple[int, int, int]] = [
    (0, 1, 4),
    (0, 2, 3),
    (1, 2, 1),
    (1, 3, 2),
    (2, 3, 4),
    (3, 4, 2),
    (4, 0, 4),
]

SAMPLE_VALUES: list[int] = [60, 100, 120, 160, 50, 110, 150, 200]
SAMPLE_WEIGHTS: list[int] = [10, 20, 30, 40, 10, 25, 35, 45]
SAMPLE_CAPACITY = 120


def sample_graph() -> Graph:
    """Return a fresh copy of the 5-vertex, 7-edge sample graph."""
    return Graph(SAMPLE_VERTICES, SAMPLE_EDGES)


def sample_knapsack() -> KnapsackInstance:
    """Return a fresh copy of the 8-item sample knapsack (capacity 120)."""
    return KnapsackInstance(
        weights=SAMPLE_WEIGHTS,
        values=SAMPLE_VALUES,
        capacity=SAMPLE_CAPACITY,
    )
