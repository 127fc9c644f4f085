# bfs.py
import logging
from collections import deque

from algoviz.graph.demo_graph import check_node, initial_node_states, label_of, make_graph_step, neighbors
from algoviz.trace import build_trace

logger = logging.getLogger(__name__)

ALGORITHM_INFO = {
    "id": "bfs",
    "name": "Breadth-First Search (BFS)",
    "family": "Graph",
}

VARIABLES_SCHEMA = [
    {"name": "currentNode", "type": "value", "description": "Currently dequeued node"},
    {"name": "queue", "type": "list", "description": "Queue used for BFS"},
]

PSEUDOCODE = [
    "function BFS(graph, startNode):",                              # 1
    "  queue = new Queue()",                                        # 2
    "  queue.enqueue(startNode)",                                   # 3
    "  while queue is not empty:",                                  # 4
    "    currentNode = queue.dequeue()",                            # 5
    "    visited.add(currentNode)",                                 # 6
    "    for neighbor in graph.getNeighbors(currentNode):",         # 7
    "      if neighbor not visited and neighbor not in queue:",     # 8
    "        queue.enqueue(neighbor)",                              # 9
]


def iter_bfs_steps(graph: dict, start_node: int, delay=1.0):
    """
    Lazily yield BFS steps from `start_node`.

    A node enters the queue the first time it is discovered (not visited and
    not already queued); dequeuing makes it current, then visited, and its
    neighbours are scanned in stored order. The final step carries the
    complete visit order and a zero delay.
    """
    check_node(graph, start_node)
    states = initial_node_states(graph)
    queue = deque([start_node])
    visit_order = []

    def labels(ids):
        return [label_of(graph, n) for n in ids]

    states[start_node]["in_frontier"] = True
    yield make_graph_step(graph, states, "enqueue", f"Start at {label_of(graph, start_node)}", delay,
                          meta={"currentNode": "-", "queue": labels(queue)}, code_highlight=3,
                          frontier=queue, visit_order=visit_order)

    while queue:
        u = queue.popleft()
        for node_id, state in states.items():
            state["current"] = node_id == u
        states[u]["in_frontier"] = False
        yield make_graph_step(graph, states, "current", f"Dequeue {label_of(graph, u)}", delay,
                              meta={"currentNode": label_of(graph, u), "queue": labels(queue)},
                              code_highlight=5, frontier=queue, visit_order=visit_order)

        states[u]["visited"] = True
        states[u]["current"] = False
        visit_order.append(label_of(graph, u))

        discovered = []
        for v, _ in neighbors(graph, u):
            if not states[v]["visited"] and v not in queue:
                queue.append(v)
                states[v]["in_frontier"] = True
                discovered.append(label_of(graph, v))

        message = f"Visit {label_of(graph, u)}"
        if discovered:
            message += f", enqueue {', '.join(discovered)}"
        yield make_graph_step(graph, states, "expand", message, delay,
                              meta={"currentNode": label_of(graph, u), "queue": labels(queue)},
                              code_highlight=9 if discovered else 7,
                              frontier=queue, visit_order=visit_order)

    yield make_graph_step(graph, states, "done", f"Visit order: {' → '.join(visit_order)}", 0,
                          meta={"currentNode": "-", "queue": []}, code_highlight=4,
                          visit_order=visit_order)


def bfs_order(graph: dict, start_node: int) -> list:
    """Labels in BFS visitation order."""
    last = None
    for last in iter_bfs_steps(graph, start_node, delay=0):
        pass
    return last["visit_order"]


def generate_bfs_trace(graph: dict, start_node: int, styles=None):
    steps = list(iter_bfs_steps(graph, start_node))
    visit_order = steps[-1]["visit_order"]
    logger.debug("bfs from %s: %s", start_node, visit_order)
    return build_trace(ALGORITHM_INFO, PSEUDOCODE, VARIABLES_SCHEMA, steps,
                       result={"visit_order": visit_order, "start": start_node},
                       styles=styles)
