"""
Problem interface shared by the spanning-tree and knapsack modules.

A problem knows how to score a candidate solution and whether that
candidate respects the instance's constraints. Solvers live elsewhere.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T_Instance = TypeVar("T_Instance")
T_Solution = TypeVar("T_Solution")


@dataclass
class Solution:
    """
    Candidate paired with its score.

    Attributes:
        variables: The candidate (edge list for MST, 0/1 vector for knapsack)
        objective_value: Total edge weight, or total selected value
        is_feasible: False for cycles, unknown vertices or capacity overruns
    """

    variables: Any
    objective_value: float
    is_feasible: bool


class OptimizationProblem(ABC, Generic[T_Instance, T_Solution]):
    """
    Scoring and constraint checks for one problem family.

    Example:
        >>> problem = MSTProblem()
        >>> evaluated = problem.evaluate_solution(kruskal_mst(graph), graph)
        >>> evaluated.objective_value, evaluated.is_feasible
        (8.0, True)
    """

    @abstractmethod
    def compute_objective(self, solution: T_Solution, instance: T_Instance) -> float:
        """Score ``solution``; the direction (min or max) is up to the problem."""

    @abstractmethod
    def is_feasible(self, solution: T_Solution, instance: T_Instance) -> bool:
        """True when ``solution`` satisfies every constraint of ``instance``."""

    def evaluate_solution(self, solution: T_Solution, instance: T_Instance) -> Solution:
        """
        Score and check ``solution`` in one call.

        Example:
            >>> KnapsackProblem().evaluate_solution(np.array([1, 1, 0]), instance)
            Solution(variables=array([1, 1, 0]), objective_value=160.0, is_feasible=True)
        """
        return Solution(
            variables=solution,
            objective_value=self.compute_objective(solution, instance),
            is_feasible=self.is_feasible(solution, instance),
        )
