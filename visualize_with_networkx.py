import matplotlib.pyplot as plt
import networkx as nx
from graph_paths import DijkstraSearch, GraphConfig, build_graph, to_networkx

# Build the sample graph and find the lowest-weight path A -> E
graph, vertices = build_graph(GraphConfig.sample())
path = DijkstraSearch(graph).get_path(vertices["A"], vertices["E"])

G = to_networkx(graph)
labels = {vertex: vertex.get_data() for vertex in G.nodes}
path_edges = set(zip(path, path[1:]))
edge_colors = [
    "red" if (u, v) in path_edges or (v, u) in path_edges else "gray"
    for u, v in G.edges
]

# Draw the graph using circular layout
plt.figure(figsize=(6, 6))
pos = nx.circular_layout(G)
nx.draw(
    G,
    pos,
    labels=labels,
    node_color=["orange" if vertex in path else "lightblue" for vertex in G.nodes],
    edge_color=edge_colors,
    node_size=800,
    font_size=10,
    font_weight="bold",
)
nx.draw_networkx_edge_labels(G, pos, edge_labels=nx.get_edge_attributes(G, "weight"))
plt.title("Dijkstra path A -> E (graph_paths)")
plt.tight_layout()
plt.show()
