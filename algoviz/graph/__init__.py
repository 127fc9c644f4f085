from algoviz.graph.bfs import bfs_order, generate_bfs_trace, iter_bfs_steps
from algoviz.graph.demo_graph import build_graph, demo_graph
from algoviz.graph.dfs import dfs_order, generate_dfs_trace, iter_dfs_steps
from algoviz.graph.dijkstra import generate_dijkstra_trace, iter_dijkstra_steps, shortest_path

__all__ = [
    "bfs_order", "generate_bfs_trace", "iter_bfs_steps",
    "build_graph", "demo_graph",
    "dfs_order", "generate_dfs_trace", "iter_dfs_steps",
    "generate_dijkstra_trace", "iter_dijkstra_steps", "shortest_path",
]
