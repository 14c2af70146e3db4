"""
Algo-Core: Generic abstractions for combinatorial optimization problems.

This module provides the problem interface and solver registry shared by
the concrete algorithms in ``classic_algos``.
"""

__version__ = "0.1.0"
