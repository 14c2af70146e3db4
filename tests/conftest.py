"""
Pytest configuration and shared fixtures for testing.
"""

import logging
from itertools import product

import numpy as np
import pytest

from classic_algos.data import Graph, KnapsackInstance, sample_graph, sample_knapsack
from classic_algos.solvers.knapsack_dp import KnapsackProblem


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by CLI runs so tests do not share streams."""
    yield
    logger = logging.getLogger("classic_algos")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def mst_sample_graph() -> Graph:
    """The embedded 5-vertex, 7-edge sample graph."""
    return sample_graph()


@pytest.fixture
def knapsack_sample() -> KnapsackInstance:
    """The embedded 8-item sample knapsack (capacity 120)."""
    return sample_knapsack()


@pytest.fixture
def small_knapsack_instance():
    """
    Create a small knapsack instance for fast testing.

    Returns:
        dict with keys: values, weights, capacity, optimal_value, n_items
    """
    # Known optimum: items [0, 1, 2], total weight 10, value 45
    return {
        "values": np.array([10, 20, 15, 25, 18], dtype=np.int64),
        "weights": np.array([2, 5, 3, 7, 4], dtype=np.int64),
        "capacity": 10,
        "optimal_value": 45,
        "n_items": 5,
    }


@pytest.fixture
def brute_force_optimum():
    """Exhaustive optimum over all 0/1 selections, for small instances."""

    def solve(instance: KnapsackInstance) -> int:
        problem = KnapsackProblem()
        best = 0
        for bits in product((0, 1), repeat=instance.n_items):
            evaluated = problem.evaluate_solution(np.array(bits, dtype=np.int64), instance)
            if evaluated.is_feasible:
                best = max(best, int(evaluated.objective_value))
        return best

    return solve
