"""Random planar grid graph generator."""

from __future__ import annotations

from typing import Any

from planargrid.generators.base import BaseGenerator


class PlanarGridGenerator(BaseGenerator):
    """
    Generates random plane graphs on an integer grid by rejection
    sampling straight-line edges.

    Parameters
    ----------
    vertex_probability : float, default 0.3
        Probability that a grid cell holds a vertex.
    relative_potential_edge_count : float, default 0.5
        Edge sampling budget as a multiple of ``v**2``.
    allow_self_edges : bool, default False
    allow_multi_edges : bool, default False
    seed : int | None
        Random seed for reproducibility.
    """

    name = "planar_grid"

    def generate(self, size: int, **params: Any) -> dict:
        from planargrid.config import EdgePolicy, GraphConfig
        from planargrid.graph import Graph

        config = GraphConfig(
            grid_size=size,
            vertex_probability=params.get("vertex_probability", 0.3),
            relative_potential_edge_count=params.get("relative_potential_edge_count", 0.5),
            edge_policy=EdgePolicy(
                allow_self_edges=params.get("allow_self_edges", False),
                allow_multi_edges=params.get("allow_multi_edges", False),
            ),
            seed=params.get("seed", None),
        )
        return Graph.generate(config).to_dict()
