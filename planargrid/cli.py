"""
planargrid command line.

Usage
-----
    planargrid generate --grid-size 6 --vertex-probability 0.3 --render graph.png
    planargrid sweep --grid-sizes 4 8 16 --vertex-probabilities 0.2 0.5 --csv out.csv

Defaults for ``generate`` can also come from ``PLANARGRID_*`` variables
in the environment or a ``.env`` file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planargrid",
        description="Random planar graphs on an integer grid.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate one graph and print v, e, c, f.")
    gen.add_argument("--grid-size", "-n", type=int, default=None, help="Grid side length.")
    gen.add_argument("--vertex-probability", "-p", type=float, default=None, help="Per-cell vertex probability.")
    gen.add_argument("--relative-edge-count", "-r", type=float, default=None, help="Edge attempts as a multiple of v**2.")
    gen.add_argument("--seed", "-s", type=int, default=None, help="Random seed.")
    gen.add_argument("--allow-self-edges", action="store_true", help="Admit self-loops.")
    gen.add_argument("--allow-multi-edges", action="store_true", help="Admit parallel edges.")
    gen.add_argument("--render", type=str, default=None, help="Write a PNG drawing to this path.")
    gen.add_argument("--resolution", type=int, default=800, help="PNG side length in pixels.")
    gen.add_argument("--json", type=str, default=None, help="Write the graph as JSON to this path.")

    sweep = sub.add_parser("sweep", help="Generate graphs over a parameter grid.")
    sweep.add_argument("--grid-sizes", type=int, nargs="+", required=True)
    sweep.add_argument("--vertex-probabilities", type=float, nargs="+", required=True)
    sweep.add_argument("--relative-edge-counts", type=float, nargs="+", default=[0.5])
    sweep.add_argument("--repeats", type=int, default=3)
    sweep.add_argument("--seed", "-s", type=int, default=None)
    sweep.add_argument("--allow-self-edges", action="store_true", help="Admit self-loops.")
    sweep.add_argument("--allow-multi-edges", action="store_true", help="Admit parallel edges.")
    sweep.add_argument("--csv", type=str, default=None, help="Write all rows as CSV to this path.")
    sweep.add_argument("--aggregate", action="store_true", help="Print per-combination statistics.")
    sweep.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")

    return parser


def _cmd_generate(args: argparse.Namespace) -> int:
    from planargrid.config import EdgePolicy, GraphConfig
    from planargrid.graph import Graph
    from planargrid.utils.graph_io import save_graph
    from planargrid.utils.render import render_graph

    config = GraphConfig.from_env(
        grid_size=args.grid_size,
        vertex_probability=args.vertex_probability,
        relative_potential_edge_count=args.relative_edge_count,
        seed=args.seed,
        edge_policy=EdgePolicy(
            allow_self_edges=args.allow_self_edges,
            allow_multi_edges=args.allow_multi_edges,
        ),
    )
    graph = Graph.generate(config)

    print(json.dumps({"v": graph.v, "e": graph.e, "c": graph.c, "f": graph.f}))

    if args.render:
        render_graph(graph, args.render, resolution=args.resolution)
    if args.json:
        save_graph(graph, args.json)
        logger.info("Saved graph to %s", args.json)
    return 0


def _cmd_sweep(args: argparse.Namespace) -> int:
    from planargrid.config import EdgePolicy, SweepConfig
    from planargrid.engine.runner import SweepRunner

    config = SweepConfig(
        grid_sizes=args.grid_sizes,
        vertex_probabilities=args.vertex_probabilities,
        relative_potential_edge_counts=args.relative_edge_counts,
        repeats=args.repeats,
        seed=args.seed,
        edge_policy=EdgePolicy(
            allow_self_edges=args.allow_self_edges,
            allow_multi_edges=args.allow_multi_edges,
        ),
    )
    runner = SweepRunner(config)
    df = runner.run(progress=not args.no_progress)

    if args.csv:
        df.to_csv(args.csv, index=False)
        logger.info("Wrote %d rows to %s", len(df), args.csv)

    if args.aggregate:
        print(SweepRunner.aggregate(df).to_string())
    else:
        print(df.to_string(index=False))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    return _cmd_sweep(args)


if __name__ == "__main__":
    sys.exit(main())
