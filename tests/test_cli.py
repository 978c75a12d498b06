"""Tests for the command line entry point."""

import json
import os

import pandas as pd

from planargrid.cli import main
from planargrid.config import GraphConfig
from planargrid.graph import Graph


class TestGenerateCommand:
    def test_prints_invariants(self, capsys):
        assert main(["generate", "-n", "6", "-p", "0.4", "-s", "3"]) == 0
        out = capsys.readouterr().out.strip().splitlines()[0]
        expected = Graph.generate(GraphConfig(grid_size=6, vertex_probability=0.4, seed=3))
        assert json.loads(out) == {
            "v": expected.v, "e": expected.e, "c": expected.c, "f": expected.f,
        }

    def test_writes_outputs(self, tmp_path, capsys):
        png = str(tmp_path / "g.png")
        js = str(tmp_path / "g.json")
        assert main([
            "generate", "-n", "5", "-s", "1",
            "--render", png, "--resolution", "120", "--json", js,
        ]) == 0
        assert os.path.exists(png)
        with open(js) as f:
            assert json.load(f)["metadata"]["size"] == 5


class TestSweepCommand:
    def test_writes_csv(self, tmp_path, capsys):
        csv = str(tmp_path / "sweep.csv")
        assert main([
            "sweep", "--grid-sizes", "3", "4", "--vertex-probabilities", "0.5",
            "--repeats", "1", "--seed", "2", "--csv", csv, "--no-progress",
        ]) == 0
        with open(csv) as f:
            lines = f.read().strip().splitlines()
        assert len(lines) == 3  # header + 2 rows

    def test_edge_policy_flags(self, tmp_path, capsys):
        csv = str(tmp_path / "sweep.csv")
        assert main([
            "sweep", "--grid-sizes", "3", "--vertex-probabilities", "1.0",
            "--relative-edge-counts", "4.0", "--repeats", "1", "--seed", "2",
            "--allow-self-edges", "--allow-multi-edges",
            "--csv", csv, "--no-progress",
        ]) == 0
        df = pd.read_csv(csv)
        assert df["allow_self_edges"].all()
        assert df["allow_multi_edges"].all()

    def test_aggregate_output(self, capsys):
        assert main([
            "sweep", "--grid-sizes", "3", "--vertex-probabilities", "0.5",
            "--repeats", "2", "--aggregate", "--no-progress",
        ]) == 0
        assert "mean" in capsys.readouterr().out
