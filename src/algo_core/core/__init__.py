"""Core abstractions for combinatorial optimization problems."""

from algo_core.core.base_problem import OptimizationProblem, Solution
from algo_core.core.protocols import Solvable
from algo_core.core.registry import SolverRegistry

__all__ = [
    "OptimizationProblem",
    "Solution",
    "Solvable",
    "SolverRegistry",
]
