"""Exact solver for the 0/1 Knapsack problem."""

from classic_algos.solvers.knapsack_dp import (
    KnapsackDPSolver,
    KnapsackProblem,
    KnapsackResult,
    build_table,
    format_knapsack,
    knapsack,
)

__all__ = [
    "KnapsackDPSolver",
    "KnapsackProblem",
    "KnapsackResult",
    "build_table",
    "format_knapsack",
    "knapsack",
]
