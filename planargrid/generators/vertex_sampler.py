"""Random vertex placement on an integer grid."""

from __future__ import annotations

import logging

import numpy as np

from planargrid.geometry import Point

logger = logging.getLogger(__name__)


def sample_vertices(
    grid_size: int,
    vertex_probability: float,
    rng: np.random.Generator,
) -> tuple[Point, ...]:
    """
    Include each grid cell independently with probability *vertex_probability*.

    Cells are visited in row-major order (``y`` outer, ``x`` inner) with
    exactly one draw per cell, and the returned order is the vertex index
    assignment used by everything downstream.  An empty result is valid.
    """
    vertices: list[Point] = []
    for y in range(grid_size):
        for x in range(grid_size):
            if rng.random() < vertex_probability:
                vertices.append((x, y))

    logger.debug(
        "Sampled %d of %d cells (p=%s)",
        len(vertices), grid_size * grid_size, vertex_probability,
    )
    return tuple(vertices)
