"""
Command line driver for graph_paths.

Builds the five-vertex sample graph, asks for a source and a destination
(unless given as options) and prints the BFS and Dijkstra paths between them.

Usage:
  `python -m graph_paths`
  `python -m graph_paths --source A --destination E`
  `python -m graph_paths --input vertices.txt`
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from . import config
from .driver import GraphConfig, build_graph, read_vertices, run_searches
from .graph import Graph

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="graph_paths",
        description="Shortest paths (BFS and Dijkstra) on the sample graph",
    )
    parser.add_argument("--source", help="Label of the source vertex")
    parser.add_argument("--destination", help="Label of the destination vertex")
    parser.add_argument(
        "--input",
        type=argparse.FileType("r"),
        help=f"File of extra vertex labels ('label' or 'label weight' per line, "
             f"ending with '{config.SENTINEL}'); '-' reads standard input",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def prompt_label(graph: Graph, prompt: str, read: Optional[Callable[[str], str]] = None) -> str:
    """Asks for a label until one names a registered vertex."""
    read = read or input
    while True:
        label = read(prompt).strip()
        try:
            graph.find_vertex(label)
        except ValueError as e:
            print(e)
            continue
        return label


def format_path(labels: List[str]) -> str:
    return " -> ".join(str(label) for label in labels)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    graph_config = GraphConfig.sample()
    if args.input is not None:
        try:
            entries = read_vertices(args.input)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        finally:
            if args.input is not sys.stdin:
                args.input.close()
        # Weights are accepted for compatibility; the sample graph has fixed edges.
        graph_config.vertices.extend(label for label, _ in entries)
        logger.info("Read %d extra vertices", len(entries))

    graph, _ = build_graph(graph_config)
    graph_config.source = args.source
    graph_config.destination = args.destination

    for attr, prompt in (("source", "Source vertex: "), ("destination", "Destination vertex: ")):
        label = getattr(graph_config, attr)
        if label is not None:
            try:
                graph.find_vertex(label)
            except ValueError as e:
                print(e)
                label = None
        if label is None:
            try:
                label = prompt_label(graph, prompt)
            except EOFError:
                print("\nNo input.", file=sys.stderr)
                return 1
        setattr(graph_config, attr, label)

    report = run_searches(graph_config)
    print(f"BFS path: {format_path(report.bfs_path)}")
    print(f"Dijkstra path: {format_path(report.dijkstra_path)}")
    if report.dijkstra_weight is None:
        print(f"No path from {report.source} to {report.destination}.")
    else:
        print(f"Dijkstra weight: {report.dijkstra_weight:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
