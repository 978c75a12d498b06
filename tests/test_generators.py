"""Tests for the generator registry."""

import pytest

from planargrid.generators import (
    GENERATOR_REGISTRY,
    get_generator,
    list_generators,
    PlanarGridGenerator,
)


# ── Helpers ──────────────────────────────────────────────────────────

def _assert_valid_graph(graph: dict, grid_size: int):
    """Verify a graph dict has the right structure."""
    assert "nodes" in graph
    assert "edges" in graph
    assert "positions" in graph
    assert "metadata" in graph
    assert len(graph["positions"]) == len(graph["nodes"])

    for x, y in graph["positions"]:
        assert 0 <= x < grid_size
        assert 0 <= y < grid_size

    for edge in graph["edges"]:
        assert edge["source"] in graph["nodes"]
        assert edge["target"] in graph["nodes"]
        assert edge["source"] != edge["target"]  # no self-loops


# ── Registry ─────────────────────────────────────────────────────────

def test_registry_lists_all():
    assert list(GENERATOR_REGISTRY) == ["planar_grid"]
    assert list_generators() == ["planar_grid"]


def test_get_generator_unknown():
    with pytest.raises(ValueError, match="Unknown generator"):
        get_generator("nope")


# ── Planar grid ──────────────────────────────────────────────────────

class TestPlanarGrid:
    def test_basic(self):
        gen = get_generator("planar_grid")()
        g = gen.generate(8, vertex_probability=0.4, seed=42)
        _assert_valid_graph(g, 8)
        assert g["metadata"]["generator"] == "planar_grid"
        assert g["metadata"]["params"]["seed"] == 42

    def test_deterministic(self):
        gen = PlanarGridGenerator()
        g1 = gen.generate(6, seed=123)
        g2 = gen.generate(6, seed=123)
        assert g1["edges"] == g2["edges"]
        assert g1["positions"] == g2["positions"]

    def test_self_edges_flag(self):
        gen = PlanarGridGenerator()
        g = gen.generate(
            3, vertex_probability=1.0, relative_potential_edge_count=3.0,
            allow_self_edges=True, seed=5,
        )
        assert g["metadata"]["params"]["allow_self_edges"] is True
        assert any(e["source"] == e["target"] for e in g["edges"])
