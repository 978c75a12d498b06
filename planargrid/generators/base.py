"""Abstract base class for planar grid graph generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseGenerator(ABC):
    """
    Base class for graph generators.

    Every generator produces a standardised graph dict::

        {
            "nodes": [0, 1, 2, ...],
            "edges": [
                {"source": 1, "target": 0, "weight": 1.0},
                ...
            ],
            "positions": [[x0, y0], [x1, y1], ...],
            "invariants": {"v": 3, "e": 1, "c": 2, "f": 1},
            "metadata": {
                "generator": "planar_grid",
                "size": 6,
                "params": {"vertex_probability": 0.3, ...},
            }
        }
    """

    name: str = "base"

    @abstractmethod
    def generate(self, size: int, **params: Any) -> dict:
        """
        Generate a graph instance.

        Parameters
        ----------
        size : int
            Side length of the grid the graph is embedded on.
        **params
            Generator-specific parameters.

        Returns
        -------
        dict
            A graph dict with keys ``nodes``, ``edges``, ``positions``,
            ``invariants``, ``metadata``.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
