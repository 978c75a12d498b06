"""
Save and load generated graphs as JSON.

Files hold either a single graph dict or a list of them, in the format
produced by :meth:`planargrid.graph.Graph.to_dict`.
"""

from __future__ import annotations

import json
import os
from typing import Any

REQUIRED_KEYS = ("nodes", "edges", "positions")


def save_graph(graph, path: str) -> str:
    """Write ``graph.to_dict()`` to *path* and return the path."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w") as f:
        json.dump(graph.to_dict(), f, indent=2)
    return path


def load_graphs(path: str) -> list[dict[str, Any]]:
    """
    Load graph dicts from a JSON file.

    Parameters
    ----------
    path : str
        Path to the JSON file.

    Returns
    -------
    list[dict]
        Validated graph dicts, each with a ``metadata`` entry.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist.
    ValueError
        If the JSON structure is invalid.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Graph file not found: {path}")

    with open(path) as f:
        data = json.load(f)

    # Normalize to list
    if isinstance(data, dict):
        graphs = [data]
    elif isinstance(data, list):
        graphs = data
    else:
        raise ValueError(
            f"Expected a JSON object or array, got {type(data).__name__}"
        )

    validated = []
    for i, graph in enumerate(graphs):
        if not isinstance(graph, dict):
            raise ValueError(f"Graph {i} is not a dict: {type(graph).__name__}")

        for key in REQUIRED_KEYS:
            if key not in graph:
                raise ValueError(f"Graph {i} missing required '{key}' key")

        if len(graph["positions"]) != len(graph["nodes"]):
            raise ValueError(
                f"Graph {i} has {len(graph['positions'])} positions "
                f"for {len(graph['nodes'])} nodes"
            )

        if "metadata" not in graph:
            graph["metadata"] = {"generator": "custom", "params": {}}

        validated.append(graph)

    return validated
