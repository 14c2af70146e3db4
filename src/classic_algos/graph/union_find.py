"""
Union-Find (disjoint set) with path compression and union by rank.

The free functions operate on a list of ``Subset`` records indexed by
element id. Indices are not bounds-checked: callers guarantee
``0 <= i < len(subsets)``.
"""

from dataclasses import dataclass


@dataclass
class Subset:
    """Union-find node: parent pointer and rank upper bound on tree height."""

    parent: int
    rank: int = 0


def make_subsets(n: int) -> list[Subset]:
    """Create ``n`` singleton sets (parent = self, rank = 0)."""
    return [Subset(parent=i) for i in range(n)]


def find(subsets: list[Subset], i: int) -> int:
    """
    Return the root of the set containing ``i``.

    Every node visited on the way up is repointed directly at the root.
    """
    root = i
    while subsets[root].parent != root:
        root = subsets[root].parent

    while subsets[i].parent != root:
        next_i = subsets[i].parent
        subsets[i].parent = root
        i = next_i

    return root


def union(subsets: list[Subset], x: int, y: int) -> int:
    """
    Merge the sets containing ``x`` and ``y`` by rank.

    The root of smaller rank goes under the root of larger rank. On a tie
    the root of ``x`` becomes the parent and its rank grows by one.

    Returns:
        Root of the merged set
    """
    xroot = find(subsets, x)
    yroot = find(subsets, y)

    if xroot == yroot:
        return xroot

    if subsets[xroot].rank < subsets[yroot].rank:
        subsets[xroot].parent = yroot
        return yroot
    if subsets[xroot].rank > subsets[yroot].rank:
        subsets[yroot].parent = xroot
        return xroot

    subsets[yroot].parent = xroot
    subsets[xroot].rank += 1
    return xroot


class DisjointSet:
    """Object wrapper around a subset list."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.subsets = make_subsets(size)
        self._n_sets = size

    def __len__(self) -> int:
        return len(self.subsets)

    @property
    def n_sets(self) -> int:
        return self._n_sets

    def find(self, i: int) -> int:
        return find(self.subsets, i)

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already joined."""
        if find(self.subsets, x) == find(self.subsets, y):
            return False
        union(self.subsets, x, y)
        self._n_sets -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return find(self.subsets, x) == find(self.subsets, y)
