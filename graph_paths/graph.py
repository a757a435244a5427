import logging
from typing import Dict, Hashable, List, Optional, Set

from .vertex import Vertex

logger = logging.getLogger(__name__)


class Graph:
    """
    An undirected weighted graph over Vertex objects.

    Each registered vertex owns an ordered adjacency list. The list keeps
    insertion order and is not deduplicated, so adding the same edge twice
    leaves two entries behind.
    """

    def __init__(self) -> None:
        self._adjacency_list: Dict[Vertex, List[Vertex]] = {}  # vertex -> neighbors in insertion order

    def add_vertex(self, vertex: Vertex) -> None:
        """
        Registers a vertex in the graph.

        Registering a vertex that is already present resets its adjacency list.

        Args:
            vertex: The vertex to register.
        """
        self._adjacency_list[vertex] = []

    def add_edge(self, source: Vertex, destination: Vertex, weight: float) -> None:
        """
        Adds an undirected weighted edge between two registered vertices.

        The weight is written on both endpoints and each endpoint is appended
        to the other's adjacency list. If either endpoint is not registered the
        call does nothing.

        Args:
            source: One endpoint of the edge.
            destination: The other endpoint of the edge.
            weight: The weight of the edge.
        """
        if source not in self._adjacency_list or destination not in self._adjacency_list:
            logger.debug("Ignoring edge %r - %r: endpoint not registered", source, destination)
            return

        source.add_adjacent_vertex(destination, weight)
        destination.add_adjacent_vertex(source, weight)
        self._adjacency_list[source].append(destination)
        self._adjacency_list[destination].append(source)

    def get_adjacent_vertices(self, vertex: Vertex) -> List[Vertex]:
        """
        Returns the adjacency list of a vertex.

        Args:
            vertex: The vertex to look up.

        Returns:
            The neighbors of the vertex in insertion order, or an empty list if
            the vertex is not registered.
        """
        return self._adjacency_list.get(vertex, [])

    def get_all_vertices(self) -> Set[Vertex]:
        """Returns the set of all registered vertices."""
        return set(self._adjacency_list)

    def get_edge_weight(self, u: Vertex, v: Vertex) -> Optional[float]:
        """
        Gets the weight of the edge between u and v.

        Returns:
            The weight of the edge if both vertices are registered and
            adjacent, otherwise None.
        """
        if u in self._adjacency_list and v in self._adjacency_list:
            return u.get_weight(v)
        return None

    def find_vertex(self, data: Hashable) -> Vertex:
        """
        Finds a registered vertex by its payload.

        Args:
            data: The payload to look for.

        Returns:
            The first registered vertex whose payload equals data.

        Raises:
            ValueError: If no registered vertex carries the payload.
        """
        for vertex in self._adjacency_list:
            if vertex.get_data() == data:
                return vertex
        raise ValueError(f"Vertex {data} not found.")

    def __contains__(self, vertex: Vertex) -> bool:
        """Checks if a vertex is registered in the graph."""
        return vertex in self._adjacency_list

    def __len__(self) -> int:
        """Returns the number of vertices in the graph."""
        return len(self._adjacency_list)

    def get_vertices_count(self) -> int:
        """Returns the number of vertices in the graph."""
        return len(self._adjacency_list)

    def get_edges_count(self) -> int:
        """Returns the number of undirected edges added to the graph, duplicates included."""
        # A self-loop appends the vertex to its own list twice, like any other edge.
        count = 0
        for neighbors in self._adjacency_list.values():
            count += len(neighbors)
        return count // 2
