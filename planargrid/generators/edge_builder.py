"""
Rejection-sampling edge construction.

A fixed budget of candidate vertex pairs is drawn at random; each
candidate is admitted only if its segment neither passes through a
foreign vertex nor properly crosses an already-admitted edge.  Rejected
candidates are dropped, never retried, so the result usually holds far
fewer edges than the budget.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

import numpy as np

from planargrid.config import EdgeBuildStats, EdgePolicy, RejectionReason
from planargrid.generators.adjacency import AdjacencyStructure
from planargrid.geometry import (
    Point,
    segment_passes_through_vertex,
    segments_intersect,
)

logger = logging.getLogger(__name__)


def potential_edge_count(vertex_count: int, relative_potential_edge_count: float) -> int:
    """Number of sampling attempts: ``relative * v**2`` rounded half-up."""
    return int(math.floor(relative_potential_edge_count * vertex_count ** 2 + 0.5))


class EdgeBuilder:
    """
    Builds a planar straight-line edge set over a fixed vertex sequence.

    Usage
    -----
    >>> builder = EdgeBuilder(np.random.default_rng(0))
    >>> adjacency = builder.build(vertices, 0.5)
    >>> builder.stats.admitted
    """

    def __init__(
        self,
        rng: np.random.Generator,
        policy: Optional[EdgePolicy] = None,
    ) -> None:
        self.rng = rng
        self.policy = policy or EdgePolicy()
        self.stats = EdgeBuildStats()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(
        self,
        vertices: Sequence[Point],
        relative_potential_edge_count: float,
    ) -> AdjacencyStructure:
        """Spend the whole sampling budget and return the frozen adjacency."""
        v = len(vertices)
        budget = potential_edge_count(v, relative_potential_edge_count)
        adjacency = AdjacencyStructure(v)
        self.stats = EdgeBuildStats()

        for _ in range(budget):
            index1 = int(self.rng.integers(v))
            index2 = int(self.rng.integers(v))
            if index1 < index2:
                index1, index2 = index2, index1
            self.try_admit(adjacency, vertices, index1, index2)

        logger.info(
            "Admitted %d of %d candidate edges (%d crossing, %d through-vertex rejections)",
            self.stats.admitted,
            budget,
            self.stats.crossing_rejections,
            self.stats.vertex_rejections,
        )
        return adjacency.freeze()

    def try_admit(
        self,
        adjacency: AdjacencyStructure,
        vertices: Sequence[Point],
        index1: int,
        index2: int,
    ) -> Optional[RejectionReason]:
        """
        Run one candidate through the rejection checks.

        Returns None when the candidate was recorded in *adjacency*, or
        the reason it was dropped.
        """
        self.stats.attempts += 1
        reason = self._rejection_reason(adjacency, vertices, index1, index2)
        if reason is not None:
            self.stats.record(reason)
            logger.debug("Rejected (%d, %d): %s", index1, index2, reason.value)
            return reason

        adjacency.add(index1, index2)
        self.stats.admitted += 1
        return None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _rejection_reason(
        self,
        adjacency: AdjacencyStructure,
        vertices: Sequence[Point],
        index1: int,
        index2: int,
    ) -> Optional[RejectionReason]:
        if index1 == index2:
            if not self.policy.allow_self_edges:
                return RejectionReason.SELF_PAIR
            # a loop at a grid point cannot meet any straight segment
            if (index1, index2) in adjacency and not self.policy.allow_multi_edges:
                return RejectionReason.DUPLICATE
            return None

        if (index1, index2) in adjacency:
            # the existing copy already passed the geometric checks
            if self.policy.allow_multi_edges:
                return None
            return RejectionReason.DUPLICATE

        a = vertices[index1]
        b = vertices[index2]
        if self._passes_through_vertex(vertices, a, b):
            return RejectionReason.VERTEX
        if self._crosses_edges(adjacency, vertices, a, b):
            return RejectionReason.CROSSING
        return None

    @staticmethod
    def _passes_through_vertex(vertices: Sequence[Point], a: Point, b: Point) -> bool:
        for vertex in vertices:
            if segment_passes_through_vertex(a, b, vertex):
                return True
        return False

    @staticmethod
    def _crosses_edges(
        adjacency: AdjacencyStructure,
        vertices: Sequence[Point],
        a: Point,
        b: Point,
    ) -> bool:
        for i, j in adjacency:
            if segments_intersect(a, b, vertices[i], vertices[j]):
                return True
        return False
