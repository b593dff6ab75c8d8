from .adjacency import build_adjacency
from .bfs_tracker import generate_bfs_trace
from .dfs_tracker import generate_dfs_trace
from .dijkstra_tracker import generate_dijkstra_trace
from .editing import add_edge, add_node, create_custom_graph, remove_edge, remove_node, reset_graph
from .layout import generate_initial_graph

__all__ = [
    "build_adjacency",
    "generate_bfs_trace", "generate_dfs_trace", "generate_dijkstra_trace",
    "add_node", "remove_node", "add_edge", "remove_edge", "reset_graph", "create_custom_graph",
    "generate_initial_graph",
]
