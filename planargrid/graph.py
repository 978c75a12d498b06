"""
The finished, immutable planar grid graph.

:class:`Graph` owns the vertex sequence and the frozen adjacency and
caches the four invariants ``v``, ``e``, ``c`` and ``f`` at construction
time.  Build one with :meth:`Graph.generate`; everything afterwards
(rendering, export, sweeps) only reads from it.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import networkx as nx
import numpy as np

from planargrid.analysis import connected_components, face_count, verify_planarity
from planargrid.config import EdgeBuildStats, EdgePolicy, GraphConfig, GraphSummary
from planargrid.generators.adjacency import AdjacencyStructure
from planargrid.generators.edge_builder import EdgeBuilder, potential_edge_count
from planargrid.generators.vertex_sampler import sample_vertices
from planargrid.geometry import Point

logger = logging.getLogger(__name__)

GENERATOR_NAME = "planar_grid"


class Graph:
    """
    A planar straight-line graph on an integer grid.

    Parameters
    ----------
    config : GraphConfig
        The parameters the graph was (or claims to have been) built with.
    vertices : sequence of (x, y)
        Vertex positions; the index in this sequence is the vertex id.
    adjacency : AdjacencyStructure
        Edge multiplicities over *vertices*.  Frozen on entry.
    build_stats : EdgeBuildStats, optional
        Counters from the edge builder, when the graph was generated.
    """

    def __init__(
        self,
        config: GraphConfig,
        vertices: Sequence[Point],
        adjacency: AdjacencyStructure,
        build_stats: Optional[EdgeBuildStats] = None,
    ) -> None:
        if adjacency.vertex_count != len(vertices):
            raise ValueError(
                f"Adjacency covers {adjacency.vertex_count} vertices, "
                f"got {len(vertices)}"
            )
        self._config = config
        self._vertices: tuple[Point, ...] = tuple(tuple(p) for p in vertices)
        self._adjacency = adjacency.freeze()
        self._build_stats = build_stats

        self._v = len(self._vertices)
        self._e = adjacency.edge_count()
        self._components = tuple(connected_components(self._v, adjacency))
        self._c = len(self._components)
        self._f = face_count(self._v, self._e, self._c)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def generate(
        cls,
        config: Optional[GraphConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Graph":
        """
        Sample vertices, build edges and analyse the result in one pass.

        *rng* defaults to ``numpy.random.default_rng(config.seed)``; the
        same generator feeds the vertex sampler and the edge builder, in
        that order.
        """
        config = config or GraphConfig()
        if rng is None:
            rng = np.random.default_rng(config.seed)

        vertices = sample_vertices(config.grid_size, config.vertex_probability, rng)
        builder = EdgeBuilder(rng, config.edge_policy)
        adjacency = builder.build(vertices, config.relative_potential_edge_count)

        graph = cls(config, vertices, adjacency, builder.stats)
        logger.info(
            "Generated graph on %dx%d grid: v=%d e=%d c=%d f=%d",
            config.grid_size, config.grid_size,
            graph.v, graph.e, graph.c, graph.f,
        )
        return graph

    @classmethod
    def from_dict(cls, data: dict, verify: bool = False) -> "Graph":
        """
        Rebuild a graph from the dict produced by :meth:`to_dict`.

        The invariants are recomputed from ``positions`` and ``edges``.
        Edges must reference valid positions and respect the edge policy
        recorded in ``metadata.params``, else :class:`ValueError`.
        With ``verify=True`` the embedding is checked and a
        :class:`ValueError` raised if any edge crosses another edge or
        runs through a vertex.
        """
        metadata = data.get("metadata", {})
        params = metadata.get("params", {})
        positions = data.get("positions")
        if positions is None:
            raise ValueError("Graph dict missing required 'positions' key")

        vertices = [(int(p[0]), int(p[1])) for p in positions]
        policy = EdgePolicy(
            allow_self_edges=params.get("allow_self_edges", False),
            allow_multi_edges=params.get("allow_multi_edges", False),
        )
        config = GraphConfig(
            grid_size=metadata.get("size", _implied_grid_size(vertices)),
            vertex_probability=params.get("vertex_probability", 0.0),
            relative_potential_edge_count=params.get("relative_potential_edge_count", 0.0),
            edge_policy=policy,
            seed=params.get("seed"),
        )

        adjacency = AdjacencyStructure(len(vertices))
        for n, edge in enumerate(data.get("edges", [])):
            for key in ("source", "target"):
                if key not in edge:
                    raise ValueError(f"Edge {n} missing required '{key}' key")
            i, j = int(edge["source"]), int(edge["target"])
            for key, idx in (("source", i), ("target", j)):
                if not 0 <= idx < len(vertices):
                    raise ValueError(
                        f"Edge {n} '{key}' {idx} out of range for {len(vertices)} positions"
                    )
            if i == j and not policy.allow_self_edges:
                raise ValueError(f"Edge {n} is a self-edge but allow_self_edges is off")
            if (i, j) in adjacency and not policy.allow_multi_edges:
                raise ValueError(
                    f"Edge {n} duplicates ({i}, {j}) but allow_multi_edges is off"
                )
            adjacency.add(i, j)

        if verify:
            violations = verify_planarity(vertices, adjacency)
            if violations:
                raise ValueError(
                    f"Graph is not a plane embedding: {len(violations)} violation(s), "
                    f"first {violations[0]}"
                )

        return cls(config, vertices, adjacency)

    # ------------------------------------------------------------------
    # Read-only surface
    # ------------------------------------------------------------------

    @property
    def config(self) -> GraphConfig:
        return self._config

    @property
    def grid_size(self) -> int:
        return self._config.grid_size

    @property
    def vertices(self) -> tuple[Point, ...]:
        return self._vertices

    @property
    def adjacency(self) -> AdjacencyStructure:
        return self._adjacency

    @property
    def build_stats(self) -> Optional[EdgeBuildStats]:
        return self._build_stats

    @property
    def components(self) -> tuple[frozenset[int], ...]:
        return self._components

    @property
    def v(self) -> int:
        return self._v

    @property
    def e(self) -> int:
        return self._e

    @property
    def c(self) -> int:
        return self._c

    @property
    def f(self) -> int:
        return self._f

    @property
    def potential_edge_count(self) -> int:
        return potential_edge_count(self._v, self._config.relative_potential_edge_count)

    def edges(self) -> list[tuple[int, int]]:
        """Admitted edges in admission order, one entry per copy."""
        out: list[tuple[int, int]] = []
        for pair, n in self._adjacency.items():
            out.extend([pair] * n)
        return out

    def summary(self, run_index: int = 0) -> GraphSummary:
        return GraphSummary(
            grid_size=self._config.grid_size,
            vertex_probability=self._config.vertex_probability,
            relative_potential_edge_count=self._config.relative_potential_edge_count,
            allow_self_edges=self._config.edge_policy.allow_self_edges,
            allow_multi_edges=self._config.edge_policy.allow_multi_edges,
            seed=self._config.seed,
            run_index=run_index,
            potential_edge_count=self.potential_edge_count,
            v=self._v,
            e=self._e,
            c=self._c,
            f=self._f,
        )

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """
        Standard graph dict (``nodes``, ``edges``, ``metadata``) plus the
        vertex ``positions`` and the computed ``invariants``.
        """
        policy = self._config.edge_policy
        return {
            "nodes": list(range(self._v)),
            "edges": [
                {"source": i, "target": j, "weight": 1.0}
                for i, j in self.edges()
            ],
            "positions": [list(p) for p in self._vertices],
            "invariants": {"v": self._v, "e": self._e, "c": self._c, "f": self._f},
            "metadata": {
                "generator": GENERATOR_NAME,
                "size": self._config.grid_size,
                "params": {
                    "vertex_probability": self._config.vertex_probability,
                    "relative_potential_edge_count": self._config.relative_potential_edge_count,
                    "allow_self_edges": policy.allow_self_edges,
                    "allow_multi_edges": policy.allow_multi_edges,
                    "seed": self._config.seed,
                },
            },
        }

    def to_networkx(self) -> nx.Graph:
        """
        Copy into networkx; a ``MultiGraph`` when multi-edges are enabled.

        Nodes carry a ``pos`` attribute with their grid coordinate.
        """
        G = nx.MultiGraph() if self._config.edge_policy.allow_multi_edges else nx.Graph()
        for idx, pos in enumerate(self._vertices):
            G.add_node(idx, pos=pos)
        G.add_edges_from(self.edges())
        return G

    def __repr__(self) -> str:
        return (
            f"<Graph grid={self.grid_size} v={self._v} e={self._e} "
            f"c={self._c} f={self._f}>"
        )


def _implied_grid_size(vertices: Sequence[Point]) -> int:
    if not vertices:
        return 0
    return max(max(x, y) for x, y in vertices) + 1
