"""Tests for the pydantic configuration models."""

import pytest
from pydantic import ValidationError

from planargrid.config import (
    EdgeBuildStats,
    EdgePolicy,
    GraphConfig,
    RejectionReason,
    SweepConfig,
)


class TestGraphConfig:
    def test_defaults(self):
        cfg = GraphConfig()
        assert cfg.grid_size == 6
        assert cfg.vertex_probability == 0.3
        assert cfg.relative_potential_edge_count == 0.5
        assert cfg.edge_policy == EdgePolicy()
        assert cfg.seed is None

    @pytest.mark.parametrize(
        "field, value",
        [
            ("grid_size", -1),
            ("vertex_probability", 1.5),
            ("vertex_probability", -0.1),
            ("relative_potential_edge_count", -0.5),
        ],
    )
    def test_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            GraphConfig(**{field: value})

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PLANARGRID_GRID_SIZE", "9")
        monkeypatch.setenv("PLANARGRID_VERTEX_PROBABILITY", "0.25")
        monkeypatch.setenv("PLANARGRID_SEED", "42")
        monkeypatch.delenv("PLANARGRID_RELATIVE_EDGE_COUNT", raising=False)
        cfg = GraphConfig.from_env()
        assert cfg.grid_size == 9
        assert cfg.vertex_probability == 0.25
        assert cfg.seed == 42
        assert cfg.relative_potential_edge_count == 0.5

    def test_from_env_overrides_win(self, monkeypatch):
        monkeypatch.setenv("PLANARGRID_GRID_SIZE", "9")
        cfg = GraphConfig.from_env(grid_size=3, seed=None)
        assert cfg.grid_size == 3
        assert cfg.seed is None


class TestSweepConfig:
    def test_expansion(self):
        sweep = SweepConfig(
            grid_sizes=[4, 8],
            vertex_probabilities=[0.2, 0.4, 0.6],
            relative_potential_edge_counts=[0.5, 1.0],
        )
        configs = sweep.graph_configs()
        assert len(configs) == 12
        assert {c.grid_size for c in configs} == {4, 8}

    def test_requires_values(self):
        with pytest.raises(ValidationError):
            SweepConfig(grid_sizes=[], vertex_probabilities=[0.3])


class TestEdgeBuildStats:
    def test_record(self):
        stats = EdgeBuildStats()
        stats.record(RejectionReason.CROSSING)
        stats.record(RejectionReason.CROSSING)
        stats.record(RejectionReason.VERTEX)
        assert stats.crossing_rejections == 2
        assert stats.vertex_rejections == 1
        assert stats.duplicates == 0
