"""
Raster rendering of a finished graph.

Draws into a square canvas of ``resolution`` pixels using matplotlib's
non-interactive Agg backend.  Grid coordinate ``(x, y)`` maps to pixel
``((x + 0.5) * s, (y + 0.5) * s)`` with ``s = resolution / grid_size``,
and ``y`` grows downwards as on a screen.  The graph is only read.
"""

from __future__ import annotations

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

RESOLUTION = 800
DPI = 100

# sizes in grid cells
EDGE_WIDTH = 0.025
VERTEX_RADIUS = 0.05
LOOP_RADIUS = 0.15


def edge_colour(edge_index: int) -> tuple[float, float, float]:
    """RGB for ``hsl(10 * edge_index, 100%, 50%)``."""
    from matplotlib.colors import hsv_to_rgb

    # full saturation at half lightness is the pure hue, i.e. hsv(h, 1, 1)
    hue = (edge_index * 10 % 360) / 360.0
    r, g, b = hsv_to_rgb((hue, 1.0, 1.0))
    return float(r), float(g), float(b)


def render_figure(graph, resolution: int = RESOLUTION) -> Any:
    """Draw *graph* and return the matplotlib figure (caller closes it)."""
    import matplotlib
    matplotlib.use("Agg")  # non-interactive backend
    import matplotlib.pyplot as plt
    from matplotlib.collections import LineCollection
    from matplotlib.patches import Circle

    scale = resolution / graph.grid_size if graph.grid_size else float(resolution)

    def to_pixels(point):
        return ((point[0] + 0.5) * scale, (point[1] + 0.5) * scale)

    fig = plt.figure(figsize=(resolution / DPI, resolution / DPI), dpi=DPI)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, resolution)
    ax.set_ylim(resolution, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    linewidth = EDGE_WIDTH * scale * 72.0 / DPI
    segments = []
    colours = []
    # hues follow matrix scan order: row i ascending, then j
    for edge_index, (i, j) in enumerate(sorted(graph.edges())):
        colour = edge_colour(edge_index)
        if i == j:
            cx, cy = to_pixels(graph.vertices[i])
            ax.add_patch(Circle(
                (cx, cy - LOOP_RADIUS * scale), LOOP_RADIUS * scale,
                fill=False, edgecolor=colour, linewidth=linewidth,
            ))
            continue
        segments.append([to_pixels(graph.vertices[i]), to_pixels(graph.vertices[j])])
        colours.append(colour)

    if segments:
        ax.add_collection(LineCollection(segments, colors=colours, linewidths=linewidth))

    for vertex in graph.vertices:
        ax.add_patch(Circle(to_pixels(vertex), VERTEX_RADIUS * scale, color="#000"))

    return fig


def render_graph(graph, output_path: str, resolution: int = RESOLUTION) -> str:
    """
    Render *graph* to a PNG file and return the path written.

    Parameters
    ----------
    graph : Graph
        The finished graph.
    output_path : str
        Destination file; parent directories are created.
    resolution : int
        Canvas side length in pixels.
    """
    import matplotlib.pyplot as plt

    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    fig = render_figure(graph, resolution)
    try:
        fig.savefig(output_path, dpi=DPI)
    finally:
        plt.close(fig)

    logger.info("Rendered %d vertices and %d edges to %s", graph.v, graph.e, output_path)
    return output_path
