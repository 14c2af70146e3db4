"""
Registry system for solvers.

Provides a global registry for discovering and creating solvers by name.
"""

from collections.abc import Callable
from typing import Any


class SolverRegistry:
    """
    Global registry for problem solvers.

    Allows registration and creation of solvers by string name.
    Useful for configuration-driven solver selection.

    Example:
        >>> @SolverRegistry.register("kruskal")
        ... class KruskalSolver:
        ...     def solve(self, graph): ...
        ...
        >>> solver = SolverRegistry.create("kruskal")
    """

    _solvers: dict[str, type] = {}

    @classmethod
    def register(cls, name: str) -> Callable:
        """
        Decorator to register a solver class.

        Args:
            name: Unique name for the solver

        Returns:
            Decorator function
        """

        def wrapper(solver_class: type) -> type:
            if name in cls._solvers:
                raise ValueError(f"Solver '{name}' already registered as {cls._solvers[name]}")
            cls._solvers[name] = solver_class
            return solver_class

        return wrapper

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> Any:
        """
        Create solver instance by name.

        Args:
            name: Registered solver name
            **kwargs: Arguments to pass to solver constructor

        Returns:
            Solver instance

        Raises:
            KeyError: If solver name not registered

        Example:
            >>> solver = SolverRegistry.create("knapsack_dp")
        """
        if name not in cls._solvers:
            available = ", ".join(cls._solvers.keys())
            raise KeyError(f"Solver '{name}' not found. Available: {available}")
        return cls._solvers[name](**kwargs)

    @classmethod
    def list_solvers(cls) -> list[str]:
        """List all registered solver names."""
        return list(cls._solvers.keys())

    @classmethod
    def get_class(cls, name: str) -> type:
        """Get solver class by name without instantiating."""
        if name not in cls._solvers:
            raise KeyError(f"Solver '{name}' not registered")
        return cls._solvers[name]
