"""
Builds graphs from plain configuration and runs both searches on them.

GraphConfig lists vertices and edges by label, so callers never juggle
Vertex objects directly. read_vertices() parses the line format the
interactive driver accepts: one label per line, optionally followed by a
weight, terminated by a sentinel token.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from . import config
from .algorithms import BreadthFirstSearch, DijkstraSearch, path_weight
from .graph import Graph
from .vertex import Vertex

logger = logging.getLogger(__name__)

EdgeSpec = Tuple[Hashable, Hashable, float]


@dataclass
class GraphConfig:
    vertices: List[Hashable] = field(default_factory=list)
    edges: List[EdgeSpec] = field(default_factory=list)
    source: Optional[Hashable] = None
    destination: Optional[Hashable] = None

    @classmethod
    def sample(cls, source: Optional[Hashable] = None, destination: Optional[Hashable] = None) -> "GraphConfig":
        """Returns the five-vertex sample graph."""
        return cls(
            vertices=list(config.SAMPLE_VERTICES),
            edges=list(config.SAMPLE_EDGES),
            source=source,
            destination=destination,
        )


@dataclass
class SearchReport:
    source: Hashable
    destination: Hashable
    bfs_path: List[Hashable]
    dijkstra_path: List[Hashable]
    dijkstra_weight: Optional[float]  # None when the destination is unreachable


def build_graph(graph_config: GraphConfig) -> Tuple[Graph, Dict[Hashable, Vertex]]:
    """
    Builds a Graph from a configuration.

    Args:
        graph_config: Vertex labels and (label, label, weight) edges.

    Returns:
        A tuple containing:
        - graph: The populated graph.
        - vertices: A dictionary mapping each label to its vertex.
          Repeated labels map to the vertex created for the first one.
    """
    graph = Graph()
    vertices: Dict[Hashable, Vertex] = {}
    for label in graph_config.vertices:
        if label in vertices:
            continue
        vertex = Vertex(label)
        vertices[label] = vertex
        graph.add_vertex(vertex)

    for u, v, weight in graph_config.edges:
        if u not in vertices or v not in vertices:
            logger.debug("Skipping edge (%s, %s): unknown label", u, v)
            continue
        graph.add_edge(vertices[u], vertices[v], weight)

    logger.debug("Built graph with %d vertices and %d edges", len(graph), graph.get_edges_count())
    return graph, vertices


def resolve_vertex(graph: Graph, label: Hashable) -> Vertex:
    """
    Looks up a registered vertex by label.

    Raises:
        ValueError: If no vertex carries the label.
    """
    return graph.find_vertex(label)


def run_searches(graph_config: GraphConfig) -> SearchReport:
    """
    Runs BFS and Dijkstra between the configured source and destination.

    Raises:
        ValueError: If source or destination is missing or not a vertex label.
    """
    if graph_config.source is None or graph_config.destination is None:
        raise ValueError("Both source and destination must be set.")

    graph, _ = build_graph(graph_config)
    source = resolve_vertex(graph, graph_config.source)
    destination = resolve_vertex(graph, graph_config.destination)

    bfs_path = BreadthFirstSearch(graph).get_path(source, destination)
    dijkstra = DijkstraSearch(graph)
    dijkstra_path = dijkstra.get_path(source, destination)
    weight = path_weight(dijkstra_path) if dijkstra_path[0] is source else None

    return SearchReport(
        source=graph_config.source,
        destination=graph_config.destination,
        bfs_path=[vertex.get_data() for vertex in bfs_path],
        dijkstra_path=[vertex.get_data() for vertex in dijkstra_path],
        dijkstra_weight=weight,
    )


def read_vertices(lines: Iterable[str], sentinel: str = config.SENTINEL) -> List[Tuple[str, Optional[float]]]:
    """
    Parses vertex entries until the sentinel token.

    Each non-blank line is either "label" or "label weight".

    Args:
        lines: Input lines, e.g. an open file or sys.stdin.
        sentinel: The token that ends the input.

    Returns:
        A list of (label, weight) tuples; weight is None when omitted.

    Raises:
        ValueError: If a line has more than two fields or a non-numeric weight.
    """
    entries: List[Tuple[str, Optional[float]]] = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if fields[0] == sentinel:
            break
        if len(fields) > 2:
            raise ValueError(f"Expected 'label' or 'label weight', got {line.strip()!r}.")
        weight: Optional[float] = None
        if len(fields) == 2:
            try:
                weight = float(fields[1])
            except ValueError:
                raise ValueError(f"Invalid weight {fields[1]!r} for vertex {fields[0]}.") from None
        entries.append((fields[0], weight))
    return entries
