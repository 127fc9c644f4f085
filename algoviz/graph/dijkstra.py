# dijkstra.py
import logging

from algoviz.graph.demo_graph import check_node, initial_node_states, label_of, make_graph_step, neighbors
from algoviz.trace import build_trace

logger = logging.getLogger(__name__)

ALGORITHM_INFO = {
    "id": "dijkstra",
    "name": "Dijkstra's Algorithm",
    "family": "Graph",
}

VARIABLES_SCHEMA = [
    {"name": "currentNode", "type": "value", "description": "Unvisited node with the smallest distance"},
    {"name": "distances", "type": "list", "description": "Tentative distance per node"},
]

PSEUDOCODE = [
    "function Dijkstra(graph, start, end):",                        # 1
    "  dist[v] = inf for all v; dist[start] = 0",                   # 2
    "  while unvisited is not empty:",                              # 3
    "    u = unvisited node with minimum dist",                     # 4
    "    if dist[u] == inf: break",                                 # 5
    "    for each unvisited neighbor v of u:",                      # 6
    "      if dist[u] + w(u, v) < dist[v]:",                        # 7
    "        dist[v] = dist[u] + w(u, v); prev[v] = u",             # 8
    "    mark u visited",                                           # 9
    "  walk prev[] back from end to start",                         # 10
]


def _distance_table(graph, states):
    return {label_of(graph, n): s["distance"] for n, s in states.items()}


def reconstruct_path(states, start_node, end_node):
    """
    Walk predecessor links back from `end_node`. Returns the node ids from
    start to end, or an empty list when the walk does not reach `start_node`.
    """
    path = []
    current = end_node
    while current is not None:
        path.insert(0, current)
        current = states[current]["previous"]
    if path and path[0] == start_node:
        return path
    return []


def iter_dijkstra_steps(graph: dict, start_node: int, end_node: int, delay=1.0, select_delay=1.5):
    """
    Lazily yield Dijkstra steps from `start_node` towards `end_node`.

    The next node is chosen by a linear scan over the unvisited nodes (ties
    go to the lowest id). The loop stops early when the smallest tentative
    distance is infinite. The final step carries the path (empty when no path
    exists) and the distance table; distances use None for infinity.
    """
    check_node(graph, start_node)
    check_node(graph, end_node)
    states = initial_node_states(graph)
    states[start_node]["distance"] = 0
    unvisited = list(graph["nodes"].keys())

    yield make_graph_step(graph, states, "init", f"dist[{label_of(graph, start_node)}] = 0, all others = ∞", delay,
                          meta={"currentNode": "-", "distances": _distance_table(graph, states)},
                          code_highlight=2)

    while unvisited:
        current = None
        for node_id in unvisited:
            distance = states[node_id]["distance"]
            if distance is None:
                continue
            if current is None or distance < states[current]["distance"]:
                current = node_id

        if current is None:
            yield make_graph_step(graph, states, "unreachable",
                                  "Remaining nodes are unreachable from the start node", 0,
                                  meta={"currentNode": "-", "distances": _distance_table(graph, states)},
                                  code_highlight=5)
            break

        for node_id, state in states.items():
            state["current"] = node_id == current
        current_label = label_of(graph, current)
        yield make_graph_step(graph, states, "select",
                              f"Select {current_label} (dist = {states[current]['distance']})", select_delay,
                              meta={"currentNode": current_label, "distances": _distance_table(graph, states)},
                              code_highlight=4)

        relaxed = []
        for v, weight in neighbors(graph, current):
            if v not in unvisited:
                continue
            candidate = states[current]["distance"] + weight
            if states[v]["distance"] is None or candidate < states[v]["distance"]:
                states[v]["distance"] = candidate
                states[v]["previous"] = current
                relaxed.append(f"{label_of(graph, v)}={candidate}")

        states[current]["visited"] = True
        states[current]["current"] = False
        unvisited.remove(current)

        message = f"Visit {current_label}"
        if relaxed:
            message += f", update {', '.join(relaxed)}"
        yield make_graph_step(graph, states, "relax", message, delay,
                              meta={"currentNode": current_label, "distances": _distance_table(graph, states)},
                              code_highlight=8 if relaxed else 9)

    path = reconstruct_path(states, start_node, end_node)
    for node_id in path:
        states[node_id]["in_path"] = True

    if path:
        labels = [label_of(graph, n) for n in path]
        message = f"Shortest path: {' → '.join(labels)} (distance: {states[end_node]['distance']})"
    else:
        message = "No path exists between the selected nodes"

    yield make_graph_step(graph, states, "done", message, 0,
                          meta={"currentNode": "-", "distances": _distance_table(graph, states)},
                          code_highlight=10, path=path)


def _result_from_final_step(graph, final_step, start_node, end_node):
    path_ids = final_step["path"]
    distances = final_step["meta"]["distances"]
    end_label = label_of(graph, end_node)
    return {
        "start": start_node,
        "end": end_node,
        "found": bool(path_ids),
        "path_ids": path_ids,
        "path": [label_of(graph, n) for n in path_ids],
        "distance": distances[end_label] if path_ids else None,
        "distances": distances,
        "message": final_step["message"],
    }


def shortest_path(graph: dict, start_node: int, end_node: int) -> dict:
    """Run Dijkstra without animation and return the result summary."""
    final_step = None
    for final_step in iter_dijkstra_steps(graph, start_node, end_node, delay=0, select_delay=0):
        pass
    return _result_from_final_step(graph, final_step, start_node, end_node)


def generate_dijkstra_trace(graph: dict, start_node: int, end_node: int, styles=None):
    steps = list(iter_dijkstra_steps(graph, start_node, end_node))
    result = _result_from_final_step(graph, steps[-1], start_node, end_node)
    logger.debug("dijkstra %s -> %s: %s", start_node, end_node, result["message"])
    return build_trace(ALGORITHM_INFO, PSEUDOCODE, VARIABLES_SCHEMA, steps, result=result, styles=styles)
