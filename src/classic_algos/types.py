"""
Common type definitions for classic-algos.

Provides type aliases for type checking.
"""

from pathlib import Path
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

# Type aliases
IntArray: TypeAlias = NDArray[np.int64]
EdgeTriple: TypeAlias = tuple[int, int, int]  # (src, dest, weight)

# Path types
PathLike: TypeAlias = str | Path
