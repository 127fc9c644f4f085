# demo_graph.py
#
# The fixed 6-node demo graph shared by the traversal visualizers, plus the
# helpers that build per-run node state and snapshot it into steps.
import copy

from algoviz.errors import EmptyStructureError, InvalidInputError

DEMO_NODES = [
    {"id": 0, "label": "A", "x": 200, "y": 100},
    {"id": 1, "label": "B", "x": 100, "y": 200},
    {"id": 2, "label": "C", "x": 300, "y": 200},
    {"id": 3, "label": "D", "x": 50,  "y": 300},
    {"id": 4, "label": "E", "x": 150, "y": 300},
    {"id": 5, "label": "F", "x": 250, "y": 300},
]

# BFS / DFS graph (unweighted)
DEMO_ADJACENCY = {
    0: [1, 2],
    1: [0, 3, 4],
    2: [0, 5],
    3: [1],
    4: [1, 5],
    5: [2, 4],
}

# Dijkstra graph: A-B:4, A-C:2, B-D:3, B-E:1, C-E:7, C-F:1, E-F:2
DEMO_WEIGHTED_ADJACENCY = {
    0: [(1, 4), (2, 2)],
    1: [(0, 4), (3, 3), (4, 1)],
    2: [(0, 2), (4, 7), (5, 1)],
    3: [(1, 3)],
    4: [(1, 1), (2, 7), (5, 2)],
    5: [(2, 1), (4, 2)],
}


def build_graph(nodes: list, adjacency: dict) -> dict:
    """
    Build a graph dict from node descriptions and an adjacency mapping.
    Adjacency entries are either neighbour ids (weight 1) or (id, weight)
    pairs. Neighbour order is kept as given. Negative weights are rejected
    because Dijkstra is only correct for non-negative weights.
    """
    if not nodes:
        raise EmptyStructureError("The graph has no nodes")

    node_map = {}
    for node in nodes:
        node_map[node["id"]] = {
            "id": node["id"],
            "label": node.get("label", str(node["id"])),
            "x": node.get("x", 0),
            "y": node.get("y", 0),
        }

    weighted = False
    adj = {node_id: [] for node_id in node_map}
    for node_id, neighbors in adjacency.items():
        if node_id not in node_map:
            raise InvalidInputError(f"Adjacency refers to unknown node {node_id}")
        for entry in neighbors:
            if isinstance(entry, (tuple, list)):
                neighbor_id, weight = entry
                weighted = True
            else:
                neighbor_id, weight = entry, 1
            if neighbor_id not in node_map:
                raise InvalidInputError(f"Edge {node_id}-{neighbor_id} refers to unknown node {neighbor_id}")
            if weight < 0:
                raise InvalidInputError(
                    f"Edge {node_id}-{neighbor_id} has negative weight {weight}; "
                    "Dijkstra requires non-negative edge weights"
                )
            adj[node_id].append((neighbor_id, weight))

    return {"nodes": node_map, "adjacency": adj, "weighted": weighted}


def demo_graph(weighted=False) -> dict:
    if weighted:
        return build_graph(DEMO_NODES, DEMO_WEIGHTED_ADJACENCY)
    return build_graph(DEMO_NODES, DEMO_ADJACENCY)


def label_of(graph, node_id) -> str:
    return graph["nodes"][node_id]["label"]


def neighbors(graph, node_id) -> list:
    """(neighbour id, weight) pairs in stored order."""
    return graph["adjacency"].get(node_id, [])


def edges(graph) -> list:
    """Undirected edges, each listed once."""
    seen = set()
    result = []
    for u, nbrs in graph["adjacency"].items():
        for v, weight in nbrs:
            key = (min(u, v), max(u, v))
            if key not in seen:
                seen.add(key)
                result.append({"from": key[0], "to": key[1], "weight": weight})
    return result


def check_node(graph, node_id):
    if not graph["nodes"]:
        raise EmptyStructureError("The graph has no nodes")
    if node_id not in graph["nodes"]:
        raise InvalidInputError(f"Node {node_id} does not exist (valid ids: 0-{len(graph['nodes']) - 1})")


def initial_node_states(graph) -> dict:
    """Transient traversal flags per node, all cleared."""
    return {
        node_id: {
            "visited": False,
            "in_frontier": False,
            "current": False,
            "in_path": False,
            # None stands for infinity so snapshots stay plain JSON
            "distance": None,
            "previous": None,
        }
        for node_id in graph["nodes"]
    }


def snapshot_nodes(graph, states) -> list:
    nodes = []
    for node_id, node in graph["nodes"].items():
        entry = dict(node)
        entry.update(copy.deepcopy(states[node_id]))
        nodes.append(entry)
    return nodes


def make_graph_step(graph, states, event, message, delay, meta=None, code_highlight=1,
                    frontier=(), visit_order=(), path=()):
    return {
        "meta": dict(meta or {}),
        "code_highlight": code_highlight,
        "message": message,
        "event": event,
        "delay": delay,
        "nodes": snapshot_nodes(graph, states),
        "frontier": list(frontier),
        "visit_order": list(visit_order),
        "path": list(path),
    }
