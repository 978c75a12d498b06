"""
Graph invariants for a finished planar grid graph.

Component detection is an iterative depth-first traversal; the face
count comes from Euler's formula for a plane graph with ``c``
components, ``f = c + e - v + 1``.  The formula relies on the embedding
being planar, which :class:`~planargrid.generators.edge_builder.EdgeBuilder`
guarantees; nothing here re-checks it.  :func:`verify_planarity` exists
for callers (and tests) that want an independent post-hoc check.
"""

from __future__ import annotations

from typing import Sequence

from planargrid.generators.adjacency import AdjacencyStructure
from planargrid.geometry import (
    Point,
    segment_passes_through_vertex,
    segments_intersect,
)


def connected_components(
    vertex_count: int,
    adjacency: AdjacencyStructure,
) -> list[frozenset[int]]:
    """Return the vertex sets of all connected components."""
    neighbours = adjacency.neighbours()
    visited: set[int] = set()
    components: list[frozenset[int]] = []

    for start in range(vertex_count):
        if start in visited:
            continue

        visited.add(start)
        stack = [start]
        component = [start]
        while stack:
            current = stack.pop()
            for nxt in neighbours[current]:
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append(nxt)
                    component.append(nxt)

        components.append(frozenset(component))

    return components


def face_count(v: int, e: int, c: int) -> int:
    """
    Euler face count ``c + e - v + 1``, including the outer face.

    An empty graph has no plane subdivision to speak of, so ``v == 0``
    is defined to have zero faces rather than the formula's one.
    """
    if v == 0:
        return 0
    return c + e - v + 1


def verify_planarity(
    vertices: Sequence[Point],
    adjacency: AdjacencyStructure,
) -> list[tuple]:
    """
    List every violation of the straight-line embedding.

    Returns ``("crossing", edge1, edge2)`` for each pair of properly
    crossing edges and ``("vertex", edge, k)`` for each vertex *k*
    strictly inside an edge.  An empty list means the embedding is plane.
    """
    edges = [(i, j) for i, j in adjacency if i != j]
    violations: list[tuple] = []

    for n, (i, j) in enumerate(edges):
        a, b = vertices[i], vertices[j]
        for k, vertex in enumerate(vertices):
            if k not in (i, j) and segment_passes_through_vertex(a, b, vertex):
                violations.append(("vertex", (i, j), k))
        for p, q in edges[n + 1:]:
            if segments_intersect(a, b, vertices[p], vertices[q]):
                violations.append(("crossing", (i, j), (p, q)))

    return violations
