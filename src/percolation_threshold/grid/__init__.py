"""Percolation grid and its union-find connectivity engine."""

from .union_find import StatusUnionFind
from .connectivity import ConnectivityGrid, SiteStatus

__all__ = ['StatusUnionFind', 'ConnectivityGrid', 'SiteStatus']
