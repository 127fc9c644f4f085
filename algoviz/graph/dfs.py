# dfs.py
import logging

from algoviz.graph.demo_graph import check_node, initial_node_states, label_of, make_graph_step, neighbors
from algoviz.trace import build_trace

logger = logging.getLogger(__name__)

ALGORITHM_INFO = {
    "id": "dfs",
    "name": "Depth-First Search (DFS)",
    "family": "Graph",
}

VARIABLES_SCHEMA = [
    {"name": "currentNode", "type": "value", "description": "Node popped from the stack"},
    {"name": "stack", "type": "list", "description": "Stack used for DFS (top is last)"},
]

PSEUDOCODE = [
    "function DFS(graph, startNode):",                                  # 1
    "  stack = [startNode]",                                            # 2
    "  while stack is not empty:",                                      # 3
    "    u = stack.pop()",                                              # 4
    "    if u is visited: continue",                                    # 5
    "    visited.add(u)",                                               # 6
    "    for v in reversed(unvisited neighbors of u):",                 # 7
    "      if v not in stack: stack.push(v)",                           # 8
]


def iter_dfs_steps(graph: dict, start_node: int, delay=1.0):
    """
    Lazily yield iterative DFS steps from `start_node`.

    Unvisited neighbours are pushed in reverse stored order so they pop in
    ascending order. A neighbour already on the stack is not pushed again,
    and a popped node that is already visited is skipped.
    """
    check_node(graph, start_node)
    states = initial_node_states(graph)
    stack = [start_node]
    visited = set()
    visit_order = []

    def labels(ids):
        return [label_of(graph, n) for n in ids]

    states[start_node]["in_frontier"] = True
    yield make_graph_step(graph, states, "push", f"Start at {label_of(graph, start_node)}", delay,
                          meta={"currentNode": "-", "stack": labels(stack)}, code_highlight=2,
                          frontier=stack, visit_order=visit_order)

    while stack:
        u = stack.pop()
        if u in visited:
            continue

        for node_id, state in states.items():
            state["current"] = node_id == u
        states[u]["in_frontier"] = False
        yield make_graph_step(graph, states, "current", f"Pop {label_of(graph, u)}", delay,
                              meta={"currentNode": label_of(graph, u), "stack": labels(stack)},
                              code_highlight=4, frontier=stack, visit_order=visit_order)

        visited.add(u)
        states[u]["visited"] = True
        states[u]["current"] = False
        visit_order.append(label_of(graph, u))

        unvisited = [v for v, _ in neighbors(graph, u) if v not in visited]
        pushed = []
        for v in reversed(unvisited):
            if v not in stack:
                stack.append(v)
                states[v]["in_frontier"] = True
                pushed.append(label_of(graph, v))

        message = f"Visit {label_of(graph, u)}"
        if pushed:
            message += f", push {', '.join(pushed)}"
        yield make_graph_step(graph, states, "expand", message, delay,
                              meta={"currentNode": label_of(graph, u), "stack": labels(stack)},
                              code_highlight=8 if pushed else 6,
                              frontier=stack, visit_order=visit_order)

    yield make_graph_step(graph, states, "done", f"Visit order: {' → '.join(visit_order)}", 0,
                          meta={"currentNode": "-", "stack": []}, code_highlight=3,
                          visit_order=visit_order)


def dfs_order(graph: dict, start_node: int) -> list:
    """Labels in DFS visitation order."""
    last = None
    for last in iter_dfs_steps(graph, start_node, delay=0):
        pass
    return last["visit_order"]


def generate_dfs_trace(graph: dict, start_node: int, styles=None):
    steps = list(iter_dfs_steps(graph, start_node))
    visit_order = steps[-1]["visit_order"]
    logger.debug("dfs from %s: %s", start_node, visit_order)
    return build_trace(ALGORITHM_INFO, PSEUDOCODE, VARIABLES_SCHEMA, steps,
                       result={"visit_order": visit_order, "start": start_node},
                       styles=styles)
