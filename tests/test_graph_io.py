"""Tests for JSON save/load of generated graphs."""

import json

import pytest

from planargrid.config import GraphConfig
from planargrid.graph import Graph
from planargrid.utils.graph_io import load_graphs, save_graph


@pytest.fixture
def graph():
    return Graph.generate(GraphConfig(grid_size=6, vertex_probability=0.5, seed=8))


@pytest.fixture
def batch_file(tmp_path, graph):
    other = Graph.generate(GraphConfig(grid_size=4, vertex_probability=0.5, seed=9))
    path = tmp_path / "batch.json"
    path.write_text(json.dumps([graph.to_dict(), other.to_dict()]))
    return str(path)


class TestGraphIO:
    def test_save_and_load(self, tmp_path, graph):
        path = save_graph(graph, str(tmp_path / "out" / "graph.json"))
        loaded = load_graphs(path)
        assert len(loaded) == 1
        assert loaded[0] == graph.to_dict()
        rebuilt = Graph.from_dict(loaded[0], verify=True)
        assert (rebuilt.v, rebuilt.e, rebuilt.c, rebuilt.f) == (graph.v, graph.e, graph.c, graph.f)

    def test_load_batch(self, batch_file):
        loaded = load_graphs(batch_file)
        assert len(loaded) == 2
        assert loaded[1]["metadata"]["size"] == 4

    def test_metadata_injected(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"nodes": [0], "edges": [], "positions": [[2, 3]]}))
        loaded = load_graphs(str(path))
        assert loaded[0]["metadata"]["generator"] == "custom"
        assert Graph.from_dict(loaded[0]).grid_size == 4

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_graphs("/nonexistent/file.json")

    def test_missing_positions(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"nodes": [0], "edges": []}))
        with pytest.raises(ValueError, match="missing required 'positions'"):
            load_graphs(str(path))

    def test_position_count_mismatch(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"nodes": [0, 1], "edges": [], "positions": [[0, 0]]}))
        with pytest.raises(ValueError, match="positions"):
            load_graphs(str(path))

    def test_invalid_type(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('"just a string"')
        with pytest.raises(ValueError, match="Expected a JSON object or array"):
            load_graphs(str(path))
