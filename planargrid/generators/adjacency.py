"""Sparse undirected adjacency keyed by canonical ``(larger, smaller)`` index pairs."""

from __future__ import annotations

from typing import Iterator

import numpy as np


class AdjacencyStructure:
    """
    Edge multiplicities for an indexed vertex set.

    Only the canonical key ``(i, j)`` with ``i >= j`` is ever stored; the
    pair ``(j, i)`` is looked up through the same key.  Iteration follows
    admission order.  Once :meth:`freeze` has been called the structure
    is read-only.
    """

    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        self._counts: dict[tuple[int, int], int] = {}
        self._frozen = False

    @staticmethod
    def canonical(i: int, j: int) -> tuple[int, int]:
        return (i, j) if i >= j else (j, i)

    # ------------------------------------------------------------------
    # Mutation (construction only)
    # ------------------------------------------------------------------

    def add(self, i: int, j: int) -> int:
        """Increment the multiplicity of pair ``{i, j}`` and return it."""
        if self._frozen:
            raise RuntimeError("AdjacencyStructure is frozen")
        key = self.canonical(i, j)
        if not 0 <= key[1] <= key[0] < self.vertex_count:
            raise IndexError(f"Pair {key} out of range for {self.vertex_count} vertices")
        self._counts[key] = self._counts.get(key, 0) + 1
        return self._counts[key]

    def freeze(self) -> "AdjacencyStructure":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def count(self, i: int, j: int) -> int:
        return self._counts.get(self.canonical(i, j), 0)

    def __contains__(self, pair: tuple[int, int]) -> bool:
        return self.canonical(*pair) in self._counts

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def items(self) -> Iterator[tuple[tuple[int, int], int]]:
        return iter(self._counts.items())

    def edge_count(self) -> int:
        """Sum of all multiplicities."""
        return sum(self._counts.values())

    def neighbours(self) -> list[list[int]]:
        """Undirected neighbour lists; a self-edge lists the vertex once."""
        adj: list[list[int]] = [[] for _ in range(self.vertex_count)]
        for i, j in self._counts:
            adj[i].append(j)
            if i != j:
                adj[j].append(i)
        return adj

    def as_matrix(self) -> np.ndarray:
        """
        Dense lower-triangular view: ``m[i, j]`` for ``i >= j`` holds the
        multiplicity of ``{i, j}``; the diagonal is the self-edge slot.
        """
        m = np.zeros((self.vertex_count, self.vertex_count), dtype=np.int64)
        for (i, j), n in self._counts.items():
            m[i, j] = n
        return m

    def __repr__(self) -> str:
        return (
            f"<AdjacencyStructure v={self.vertex_count} "
            f"pairs={len(self._counts)} e={self.edge_count()}>"
        )
