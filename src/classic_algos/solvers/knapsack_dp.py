"""
Bottom-up dynamic programming solver for the 0/1 Knapsack problem.
"""

import time
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from algo_core.core import OptimizationProblem, SolverRegistry
from classic_algos.data.structures import KnapsackInstance
from classic_algos.utils.logger import get_logger

logger = get_logger(__name__)


def build_table(capacity: int, wt: Sequence[int], val: Sequence[int], n: int) -> np.ndarray:
    """
    Fill the (n + 1) x (capacity + 1) table bottom-up.

    Cell ``[i, w]`` is the best value reachable with the first ``i`` items
    within weight ``w``. Row 0 and column 0 stay zero.

    Preconditions (not checked): ``len(wt) >= n``, ``len(val) >= n``,
    non-negative integer weights and capacity.
    """
    K = np.zeros((n + 1, capacity + 1), dtype=np.int64)

    for i in range(1, n + 1):
        w_i = int(wt[i - 1])
        v_i = int(val[i - 1])
        for w in range(1, capacity + 1):
            if w_i > w:
                K[i, w] = K[i - 1, w]
            else:
                K[i, w] = max(K[i - 1, w], v_i + K[i - 1, w - w_i])

    return K


def knapsack(capacity: int, wt: Sequence[int], val: Sequence[int], n: int) -> int:
    """
    Maximum value that fits in a knapsack of ``capacity``.

    Args:
        capacity: Weight capacity W
        wt: Item weights
        val: Item values
        n: Number of items to consider (the first ``n`` of wt/val)

    Returns:
        K[n][W]

    Example:
        >>> knapsack(50, [10, 20, 30], [60, 100, 120], 3)
        220
    """
    return int(build_table(capacity, wt, val, n)[n, capacity])


def format_knapsack(capacity: int, value: int) -> str:
    return f"Maximum value that can be put in a knapsack of capacity W = {capacity} is {value}"


@dataclass
class KnapsackResult:
    """Result of a knapsack DP run."""

    value: int
    capacity: int
    n_items: int
    solve_time: float = 0.0


class KnapsackProblem(OptimizationProblem[KnapsackInstance, np.ndarray]):
    """0/1 Knapsack: maximise selected value subject to the weight capacity."""

    def compute_objective(self, solution: np.ndarray, instance: KnapsackInstance) -> float:
        return float(np.dot(np.asarray(solution, dtype=np.int64), instance.values))

    def is_feasible(self, solution: np.ndarray, instance: KnapsackInstance) -> bool:
        solution = np.asarray(solution)
        if solution.shape != (instance.n_items,):
            return False
        if not np.all((solution == 0) | (solution == 1)):
            return False
        return bool(np.dot(solution.astype(np.int64), instance.weights) <= instance.capacity)


@SolverRegistry.register("knapsack_dp")
class KnapsackDPSolver:
    """
    Exact 0/1 Knapsack solver via dynamic programming

    Only the optimal value is produced; the chosen item subset is not
    reconstructed.
    """

    def solve(self, instance: KnapsackInstance) -> KnapsackResult:
        """
        Solve knapsack instance

        Args:
            instance: KnapsackInstance object

        Returns:
            KnapsackResult with the optimal value and solve time
        """
        start_time = time.perf_counter()
        value = knapsack(instance.capacity, instance.weights, instance.values, instance.n_items)
        solve_time = time.perf_counter() - start_time

        logger.info(
            "Knapsack %r: optimal value %d (table %dx%d, %.2f ms)",
            instance,
            value,
            instance.n_items + 1,
            instance.capacity + 1,
            solve_time * 1000,
        )
        return KnapsackResult(
            value=value,
            capacity=instance.capacity,
            n_items=instance.n_items,
            solve_time=solve_time,
        )

    def solve_batch(self, instances: list[KnapsackInstance]) -> list[KnapsackResult]:
        """Solve multiple instances"""
        results = []
        for i, instance in enumerate(instances):
            results.append(self.solve(instance))
            if (i + 1) % 50 == 0:
                logger.info("Solved %d/%d instances", i + 1, len(instances))
        return results
