"""
Weighted quick-union with per-component status flags.

Each component carries a small flag byte that is only meaningful when read
from the component's current root. Whenever two components are joined the
flag bytes of both roots are OR-merged into the surviving root, so a status
bit set anywhere in a component stays visible through `status()` for every
member of it.
"""

from typing import List

from ..errors import InvalidArgument, OutOfRange


class StatusUnionFind:
    """
    Union-find over integer indices [0..n-1] with root-indexed status flags.

    Union by size, path halving on find. Ties link the second root under the
    first.

    Example:
        uf = StatusUnionFind(4)
        uf.mark(0, 0b0100)
        uf.union(0, 1)
        uf.status(1)  # -> 0b0100
    """

    def __init__(self, n: int):
        """
        Initialize n singleton components with all flags cleared.

        Args:
            n: Number of elements

        Raises:
            InvalidArgument: if n is not positive
        """
        if n <= 0:
            raise InvalidArgument(f"Union-find size must be positive, got {n}")

        self.n = n
        self._parent: List[int] = list(range(n))
        self._size: List[int] = [1] * n
        self._flags = bytearray(n)
        self._count = n

    @property
    def count(self) -> int:
        """Number of disjoint components."""
        return self._count

    def _validate(self, p: int) -> None:
        if p < 0 or p >= self.n:
            raise OutOfRange(f"Index {p} is not between 0 and {self.n - 1}")

    def find(self, p: int) -> int:
        self._validate(p)
        parent = self._parent
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """
        Join the components of p and q.

        The surviving root receives the bitwise OR of both roots' flags.

        Returns:
            True if two components were merged, False if already joined
        """
        rp, rq = self.find(p), self.find(q)
        if rp == rq:
            return False

        if self._size[rp] < self._size[rq]:
            rp, rq = rq, rp

        self._parent[rq] = rp
        self._size[rp] += self._size[rq]
        self._flags[rp] |= self._flags[rq]
        self._count -= 1
        return True

    def mark(self, p: int, flags: int) -> None:
        """OR flags into the root of p's component."""
        self._flags[self.find(p)] |= flags

    def status(self, p: int) -> int:
        """Flags of p's component, read from its current root."""
        return self._flags[self.find(p)]
