from .vertex import Vertex
from .graph import Graph
from .algorithms import PathSearch, BreadthFirstSearch, DijkstraSearch, path_weight
from .driver import GraphConfig, SearchReport, build_graph, run_searches, resolve_vertex, read_vertices
from .networkx_export import to_networkx

__all__ = [
    "Vertex", "Graph",
    "PathSearch", "BreadthFirstSearch", "DijkstraSearch", "path_weight",
    "GraphConfig", "SearchReport", "build_graph", "run_searches",
    "resolve_vertex", "read_vertices",
    "to_networkx",
]
