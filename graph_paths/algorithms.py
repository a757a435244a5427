import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .graph import Graph
from .vertex import Vertex

logger = logging.getLogger(__name__)


class PathSearch(ABC):
    """
    A shortest-path strategy bound to a graph.

    Subclasses implement get_path(); the predecessor walk that turns a search
    result into a path is shared.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    @abstractmethod
    def get_path(self, source: Vertex, destination: Vertex) -> List[Vertex]:
        """
        Finds a path from source to destination.

        Args:
            source: The vertex the path starts from.
            destination: The vertex the path should end at.

        Returns:
            The vertices from source to destination inclusive. If destination
            cannot be reached, the returned list does not start at source: it
            is the fragment of the predecessor chain that ends at destination,
            usually just [destination].
        """
        raise NotImplementedError

    def find_path(self, source: Vertex, destination: Vertex) -> Optional[List[Vertex]]:
        """
        Like get_path(), but returns None when destination is unreachable.
        """
        path = self.get_path(source, destination)
        if not path or path[0] is not source:
            return None
        return path

    @staticmethod
    def _reconstruct_path(
        predecessors: Dict[Vertex, Vertex],
        source: Vertex,
        destination: Vertex
    ) -> List[Vertex]:
        path: List[Vertex] = [destination]
        current = destination
        # Stops at the source, or wherever the chain runs out.
        while current is not source and current in predecessors:
            current = predecessors[current]
            path.append(current)
        path.reverse()
        return path


class BreadthFirstSearch(PathSearch):
    """
    Fewest-edges path search. Edge weights are ignored; neighbors are expanded
    in adjacency-list order, which also decides between paths of equal length.
    """

    def get_path(self, source: Vertex, destination: Vertex) -> List[Vertex]:
        queue = deque([source])
        visited: Set[Vertex] = {source}
        predecessors: Dict[Vertex, Vertex] = {}

        while queue:
            current = queue.popleft()

            if current is destination:
                break  # Destination found

            for neighbor in self.graph.get_adjacent_vertices(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    predecessors[neighbor] = current
                    queue.append(neighbor)

        logger.debug("BFS %r -> %r visited %d vertices", source, destination, len(visited))
        return self._reconstruct_path(predecessors, source, destination)


class DijkstraSearch(PathSearch):
    """
    Lowest-total-weight path search over non-negative edge weights.

    The frontier is a binary heap without decrease-key: improved distances are
    pushed as new entries and stale entries are skipped when popped. Entries
    with equal distance come out in the order they were pushed.
    """

    def get_path(self, source: Vertex, destination: Vertex) -> List[Vertex]:
        distances: Dict[Vertex, float] = {vertex: float('inf') for vertex in self.graph.get_all_vertices()}
        distances[source] = 0
        predecessors: Dict[Vertex, Vertex] = {}
        finalized: Set[Vertex] = set()

        # Priority queue stores (distance, push order, vertex); the counter keeps
        # vertices themselves from ever being compared.
        counter = itertools.count()
        priority_queue: List[Tuple[float, int, Vertex]] = [(0, next(counter), source)]

        while priority_queue:
            current_distance, _, current = heapq.heappop(priority_queue)

            if current in finalized:
                continue  # Stale entry
            finalized.add(current)

            if current is destination:
                break

            for neighbor in self.graph.get_adjacent_vertices(current):
                weight = current.get_adjacent_vertices()[neighbor]
                distance = current_distance + weight
                if distance < distances.get(neighbor, float('inf')):
                    distances[neighbor] = distance
                    predecessors[neighbor] = current
                    heapq.heappush(priority_queue, (distance, next(counter), neighbor))

        logger.debug(
            "Dijkstra %r -> %r finalized %d vertices, distance %s",
            source, destination, len(finalized), distances.get(destination, float('inf'))
        )
        return self._reconstruct_path(predecessors, source, destination)


def path_weight(path: Sequence[Vertex]) -> float:
    """
    Sums the edge weights along a path.

    Args:
        path: Consecutive vertices of the path.

    Returns:
        The total weight, 0 for paths with fewer than two vertices.

    Raises:
        ValueError: If two consecutive vertices are not adjacent.
    """
    total: float = 0
    for u, v in zip(path, path[1:]):
        weight = u.get_weight(v)
        if weight is None:
            raise ValueError(f"Vertices {u.get_data()} and {v.get_data()} are not adjacent.")
        total += weight
    return total
