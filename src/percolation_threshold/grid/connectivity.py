"""
Core percolation model on an N-by-N grid of sites.

Each site is either blocked or open. A full site is an open site that can be
connected to an open site in the top row via a chain of neighboring (left,
right, up, down) open sites. The system percolates if a full site exists in
the bottom row.

Rows and columns are numbered from 1 to N inclusive.

Connectivity is tracked with a StatusUnionFind whose root flags record
whether a component touches the top row and/or the bottom row. Fullness is
read only from the top flag, which keeps bottom-row sites that merely share a
component with other bottom-row sites from being reported as full
(backwash).
"""

import numbers
from enum import IntFlag

from .union_find import StatusUnionFind
from ..errors import InvalidArgument, OutOfRange


class SiteStatus(IntFlag):
    """Status bits. OPEN and FULL are per site, the CONNECTED_* bits per root."""
    OPEN = 1
    FULL = 2
    CONNECTED_TOP = 4
    CONNECTED_BOTTOM = 8


_SPANNING = SiteStatus.CONNECTED_TOP | SiteStatus.CONNECTED_BOTTOM


class ConnectivityGrid:
    """
    Percolation system of N-by-N sites, all blocked at construction.

    Construction takes time proportional to N^2. Every other method takes
    constant time plus a constant number of union-find operations.

    Example:
        grid = ConnectivityGrid(3)
        for row in (1, 2, 3):
            grid.open(row, 2)
        grid.percolates()  # -> True
    """

    def __init__(self, n: int):
        """
        Create an N-by-N grid with every site blocked.

        Args:
            n: Grid size (number of rows and columns)

        Raises:
            InvalidArgument: if n is not a positive integer
        """
        if not isinstance(n, numbers.Integral) or isinstance(n, bool) or n <= 0:
            raise InvalidArgument(f"Grid size should be a positive integer, got {n!r}")

        self._n = int(n)
        self._uf = StatusUnionFind(self._n * self._n)
        self._sites = bytearray(self._n * self._n)
        self._open_count = 0
        self._percolates = False

    @property
    def size(self) -> int:
        return self._n

    def _index(self, row: int, col: int) -> int:
        """Map a 1-based (row, col) to a 0-based linear index, checking bounds."""
        n = self._n
        for value in (row, col):
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise OutOfRange(f"Site ({row!r}, {col!r}) must use integer coordinates")
        if row < 1 or row > n or col < 1 or col > n:
            raise OutOfRange(f"Site ({row}, {col}) is outside the {n}x{n} grid")
        return (row - 1) * n + (col - 1)

    def _neighbours(self, row: int, col: int):
        n = self._n
        if row > 1:
            yield row - 1, col
        if row < n:
            yield row + 1, col
        if col > 1:
            yield row, col - 1
        if col < n:
            yield row, col + 1

    def open(self, row: int, col: int) -> None:
        """
        Open a site and join it with its open neighbours.

        Opening an already open site leaves the grid unchanged.

        Args:
            row: Row index (1..N)
            col: Column index (1..N)

        Raises:
            OutOfRange: if row or col is outside 1..N
        """
        index = self._index(row, col)
        if self._sites[index] & SiteStatus.OPEN:
            return

        self._sites[index] |= SiteStatus.OPEN
        self._open_count += 1

        if row == 1:
            self._sites[index] |= SiteStatus.FULL
            self._uf.mark(index, SiteStatus.CONNECTED_TOP)
        if row == self._n:
            self._uf.mark(index, SiteStatus.CONNECTED_BOTTOM)

        for nrow, ncol in self._neighbours(row, col):
            neighbour = (nrow - 1) * self._n + (ncol - 1)
            if self._sites[neighbour] & SiteStatus.OPEN:
                self._uf.union(index, neighbour)

        if self._uf.status(index) & _SPANNING == _SPANNING:
            self._percolates = True

    def is_open(self, row: int, col: int) -> bool:
        """
        Check if a site is open.

        Raises:
            OutOfRange: if row or col is outside 1..N
        """
        return bool(self._sites[self._index(row, col)] & SiteStatus.OPEN)

    def is_full(self, row: int, col: int) -> bool:
        """
        Check if a site is open and connected to the top row.

        Only the component's top flag is consulted, so a bottom-row site that
        reaches the bottom boundary but not the top is never full.

        Raises:
            OutOfRange: if row or col is outside 1..N
        """
        index = self._index(row, col)
        site = self._sites[index]
        if not site & SiteStatus.OPEN:
            return False
        if site & SiteStatus.FULL:
            return True
        return bool(self._uf.status(index) & SiteStatus.CONNECTED_TOP)

    def percolates(self) -> bool:
        """Whether some bottom-row site is full. Once True, stays True."""
        return self._percolates

    def number_of_open_sites(self) -> int:
        return self._open_count
