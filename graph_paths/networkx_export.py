import networkx as nx

from .graph import Graph


def to_networkx(graph: Graph) -> nx.Graph:
    """
    Converts a Graph into a networkx Graph.

    Nodes are the Vertex objects themselves, each carrying its payload as the
    "data" attribute; edges carry their weight as "weight". Duplicate
    adjacency entries collapse into one networkx edge.
    """
    G = nx.Graph()
    for vertex in graph.get_all_vertices():
        G.add_node(vertex, data=vertex.get_data())
    for vertex in graph.get_all_vertices():
        for neighbor in graph.get_adjacent_vertices(vertex):
            G.add_edge(vertex, neighbor, weight=vertex.get_weight(neighbor))
    return G
