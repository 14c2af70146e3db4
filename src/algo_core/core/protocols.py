"""
Protocols for structural typing.

Protocols define interfaces using duck typing, allowing flexible
composition without requiring inheritance.
"""

from typing import Any, Protocol


class Solvable(Protocol):
    """Protocol for solvers of an optimization problem."""

    def solve(self, instance: Any) -> Any:
        """
        Solve a problem instance (exact or heuristic).

        Args:
            instance: Problem instance

        Returns:
            Solver-specific result object
        """
        ...
