from typing import Dict, Hashable, Optional


class Vertex:
    """
    A labeled graph vertex holding an immutable payload and the weights of its
    edges to neighboring vertices.

    Vertices are compared and hashed by identity: two vertices carrying equal
    payloads are still distinct entities.
    """

    __slots__ = ("_data", "_adjacent")

    def __init__(self, data: Hashable) -> None:
        self._data = data
        self._adjacent: Dict["Vertex", float] = {}  # neighbor -> edge weight

    @property
    def data(self) -> Hashable:
        return self._data

    def get_data(self) -> Hashable:
        """Returns the payload stored in this vertex."""
        return self._data

    def add_adjacent_vertex(self, destination: "Vertex", weight: float) -> None:
        """
        Sets the weight of the edge from this vertex to destination.

        Only this vertex is updated; the graph takes care of the opposite
        direction. An existing weight toward destination is overwritten.

        Args:
            destination: The neighboring vertex.
            weight: The non-negative weight of the edge.
        """
        self._adjacent[destination] = weight

    def get_adjacent_vertices(self) -> Dict["Vertex", float]:
        """Returns the mapping of neighboring vertices to edge weights."""
        return self._adjacent

    def get_weight(self, destination: "Vertex") -> Optional[float]:
        """Returns the weight of the edge toward destination, or None."""
        return self._adjacent.get(destination)

    def __repr__(self) -> str:
        return f"Vertex({self._data!r})"
