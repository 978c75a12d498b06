"""Pydantic models defining configuration and result records for planargrid."""

from __future__ import annotations

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class RejectionReason(str, Enum):
    SELF_PAIR = "self_pair"
    DUPLICATE = "duplicate"
    VERTEX = "passes_through_vertex"
    CROSSING = "crosses_edge"


# ---------------------------------------------------------------------------
# Construction configuration
# ---------------------------------------------------------------------------

class EdgePolicy(BaseModel):
    """Which non-simple edges the edge builder may admit."""
    model_config = ConfigDict(frozen=True)

    allow_self_edges: bool = False
    allow_multi_edges: bool = False


class GraphConfig(BaseModel):
    """Parameters for building one random planar grid graph."""
    model_config = ConfigDict(frozen=True)

    grid_size: int = Field(default=6, ge=0, description="Grid side length")
    vertex_probability: float = Field(
        default=0.3, ge=0.0, le=1.0,
        description="Per-cell vertex inclusion probability",
    )
    relative_potential_edge_count: float = Field(
        default=0.5, ge=0.0,
        description="Multiplier on v**2 giving the edge sampling budget",
    )
    edge_policy: EdgePolicy = Field(default_factory=EdgePolicy)
    seed: Optional[int] = Field(default=None, description="Random seed")

    @classmethod
    def from_env(cls, **overrides) -> "GraphConfig":
        """
        Build a config from ``PLANARGRID_*`` environment variables.

        Explicit keyword overrides win over the environment; unset
        variables fall back to the model defaults.
        """
        env_map = {
            "grid_size": "PLANARGRID_GRID_SIZE",
            "vertex_probability": "PLANARGRID_VERTEX_PROBABILITY",
            "relative_potential_edge_count": "PLANARGRID_RELATIVE_EDGE_COUNT",
            "seed": "PLANARGRID_SEED",
        }
        values = {}
        for field_name, var in env_map.items():
            raw = os.environ.get(var)
            if raw not in (None, ""):
                values[field_name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class SweepConfig(BaseModel):
    """A grid of construction parameters to run repeatedly."""
    grid_sizes: list[int] = Field(..., min_length=1)
    vertex_probabilities: list[float] = Field(..., min_length=1)
    relative_potential_edge_counts: list[float] = Field(default_factory=lambda: [0.5])
    repeats: int = Field(default=3, ge=1, description="Graphs per combination")
    edge_policy: EdgePolicy = Field(default_factory=EdgePolicy)
    seed: Optional[int] = None

    def graph_configs(self) -> list[GraphConfig]:
        """Expand the sweep into one (seedless) ``GraphConfig`` per combination."""
        return [
            GraphConfig(
                grid_size=n,
                vertex_probability=p,
                relative_potential_edge_count=r,
                edge_policy=self.edge_policy,
            )
            for n in self.grid_sizes
            for p in self.vertex_probabilities
            for r in self.relative_potential_edge_counts
        ]


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------

class EdgeBuildStats(BaseModel):
    """Counters collected while spending the edge sampling budget."""
    attempts: int = 0
    self_pairs: int = 0
    duplicates: int = 0
    vertex_rejections: int = 0
    crossing_rejections: int = 0
    admitted: int = 0

    def record(self, reason: RejectionReason) -> None:
        if reason is RejectionReason.SELF_PAIR:
            self.self_pairs += 1
        elif reason is RejectionReason.DUPLICATE:
            self.duplicates += 1
        elif reason is RejectionReason.VERTEX:
            self.vertex_rejections += 1
        elif reason is RejectionReason.CROSSING:
            self.crossing_rejections += 1


class GraphSummary(BaseModel):
    """The scalar invariants of one generated graph."""
    grid_size: int
    vertex_probability: float
    relative_potential_edge_count: float
    allow_self_edges: bool = False
    allow_multi_edges: bool = False
    seed: Optional[int] = None
    run_index: int = 0
    potential_edge_count: int = 0
    v: int
    e: int
    c: int
    f: int
