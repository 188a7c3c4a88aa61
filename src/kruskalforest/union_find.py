"""Disjoint-set forest over arbitrary hashable vertices.

Each registered vertex gets a dense integer index; ``parent`` and ``rank`` are
flat ``int64`` arrays addressed by that index, and the identifier lookup only
happens at the public boundary.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable

import numpy as np

from .errors import DuplicateVertex, UnknownVertex


class DisjointSet:
    """Union-find with full path compression and union by rank.

    ``find`` is iterative, so chains of any length are safe before the first
    compression. With ``path_compression=False`` only union by rank is used
    and a ``find`` costs ``O(log n)`` in the worst case instead of the
    amortised ``O(alpha(n))``.
    """

    def __init__(self, vertices: Iterable[Hashable] = (), *, path_compression: bool = True) -> None:
        items = list(vertices)
        self.path_compression = bool(path_compression)
        self._index: dict[Hashable, int] = {}
        self._labels: list[Hashable] = []
        self._parent = np.arange(len(items), dtype=np.int64)
        self._rank = np.zeros(len(items), dtype=np.int64)
        self._n_sets = 0
        for v in items:
            self.add(v)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, x: Any) -> bool:
        return x in self._index

    @property
    def n_components(self) -> int:
        return self._n_sets

    @property
    def parent(self) -> np.ndarray:
        return self._parent[: len(self._labels)]

    @property
    def ranks(self) -> np.ndarray:
        return self._rank[: len(self._labels)]

    def _grow(self) -> None:
        n = len(self._labels)
        size = max(8, 2 * self._parent.size)
        parent = np.arange(size, dtype=np.int64)
        rank = np.zeros(size, dtype=np.int64)
        parent[:n] = self._parent[:n]
        rank[:n] = self._rank[:n]
        self._parent = parent
        self._rank = rank

    def add(self, x: Hashable) -> None:
        """Register ``x`` as a new singleton set."""
        if x in self._index:
            raise DuplicateVertex(x)
        i = len(self._labels)
        if i == self._parent.size:
            self._grow()
        self._parent[i] = i
        self._rank[i] = 0
        self._index[x] = i
        self._labels.append(x)
        self._n_sets += 1

    def _lookup(self, x: Hashable) -> int:
        try:
            return self._index[x]
        except KeyError:
            raise UnknownVertex(x) from None

    def _find(self, i: int) -> int:
        parent = self._parent
        root = i
        while parent[root] != root:
            root = int(parent[root])
        if self.path_compression:
            while i != root:
                nxt = int(parent[i])
                parent[i] = root
                i = nxt
        return root

    def find(self, x: Hashable) -> Hashable:
        """Return the representative vertex of the set containing ``x``."""
        return self._labels[self._find(self._lookup(x))]

    def connected(self, x: Hashable, y: Hashable) -> bool:
        return self._find(self._lookup(x)) == self._find(self._lookup(y))

    def union(self, x: Hashable, y: Hashable) -> bool:
        """Merge the sets of ``x`` and ``y``.

        Returns ``False`` when both are already in the same set, i.e. when an
        edge ``x -- y`` would close a cycle. On equal ranks the root of ``y``
        is attached under the root of ``x``.
        """
        i = self._lookup(x)
        j = self._lookup(y)
        if i == j:
            return False
        rx = self._find(i)
        ry = self._find(j)
        if rx == ry:
            return False
        rank = self._rank
        if rank[rx] < rank[ry]:
            self._parent[rx] = ry
        elif rank[rx] > rank[ry]:
            self._parent[ry] = rx
        else:
            self._parent[ry] = rx
            rank[rx] += 1
        self._n_sets -= 1
        return True

    def rank(self, x: Hashable) -> int:
        return int(self._rank[self._lookup(x)])

    def groups(self) -> list[list[Hashable]]:
        """Members of every set, each in registration order."""
        members: dict[int, list[Hashable]] = {}
        for i, label in enumerate(self._labels):
            members.setdefault(self._find(i), []).append(label)
        return list(members.values())


__all__ = ["DisjointSet"]
