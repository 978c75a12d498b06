"""
Quick demo / smoke test.

Run:  python scripts/demo.py
"""

import logging
import sys

sys.path.insert(0, ".")

from planargrid.config import GraphConfig, SweepConfig
from planargrid.engine.runner import SweepRunner
from planargrid.graph import Graph
from planargrid.utils.render import render_graph

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")


# ── Run ──────────────────────────────────────────────────────────────

def main():
    graph = Graph.generate(GraphConfig(grid_size=6, vertex_probability=0.3, seed=2024))

    print("=" * 72)
    print("SINGLE GRAPH")
    print("=" * 72)
    print(f"vertices:   {graph.v}")
    print(f"edges:      {graph.e}")
    print(f"components: {graph.c}")
    print(f"faces:      {graph.f}")
    render_graph(graph, "plots/demo_graph.png")

    config = SweepConfig(
        grid_sizes=[4, 8, 12],
        vertex_probabilities=[0.2, 0.5],
        relative_potential_edge_counts=[0.5, 2.0],
        repeats=3,
        seed=2024,
    )
    df = SweepRunner(config).run()

    print("\n── Summary ──")
    summary = (
        df.groupby(["grid_size", "vertex_probability", "relative_potential_edge_count"])
        .agg(
            avg_v=("v", "mean"),
            avg_e=("e", "mean"),
            avg_c=("c", "mean"),
            avg_f=("f", "mean"),
        )
        .round(2)
    )
    print(summary)


if __name__ == "__main__":
    main()
