# visualizer.py
import logging

from algoviz.animation import Animator
from algoviz.config import DEFAULT_CONFIG
from algoviz.errors import AnimationBusyError, InvalidInputError
from algoviz.graph.bfs import iter_bfs_steps
from algoviz.graph.demo_graph import check_node, demo_graph, initial_node_states, make_graph_step
from algoviz.graph.dfs import iter_dfs_steps
from algoviz.graph.dijkstra import iter_dijkstra_steps

logger = logging.getLogger(__name__)

TRAVERSALS = ("bfs", "dfs", "dijkstra")


class TraversalVisualizer:
    """
    Live BFS / DFS / Dijkstra animation over one graph.

    `current_step` always holds what should be drawn. run() streams steps
    through an Animator; reset() may be called at any time and restores the
    cleared display state.
    """

    def __init__(self, algorithm: str, graph=None, config=None, delay_scale=1.0):
        if algorithm not in TRAVERSALS:
            raise InvalidInputError(f"Unknown traversal '{algorithm}'")
        self.algorithm = algorithm
        self.graph = graph or demo_graph(weighted=algorithm == "dijkstra")
        self.config = (config or DEFAULT_CONFIG)["animation"]
        self.animator = Animator(delay_scale=delay_scale)
        self.summary = None
        self.current_step = None
        self._clear()

    @property
    def running(self) -> bool:
        return self.animator.running

    def _clear(self):
        self.summary = None
        self.current_step = make_graph_step(self.graph, initial_node_states(self.graph), "reset", "", 0)

    def steps(self, start_node, end_node=None):
        check_node(self.graph, start_node)
        delay = self.config["traversal_delay"]
        if self.algorithm == "bfs":
            return iter_bfs_steps(self.graph, start_node, delay=delay)
        if self.algorithm == "dfs":
            return iter_dfs_steps(self.graph, start_node, delay=delay)
        if end_node is None:
            raise InvalidInputError("Dijkstra needs an end node")
        check_node(self.graph, end_node)
        return iter_dijkstra_steps(self.graph, start_node, end_node, delay=delay,
                                   select_delay=self.config["dijkstra_select_delay"])

    async def run(self, start_node, end_node=None, on_step=None):
        """
        Animate the traversal. Returns the final summary message, or None if
        a reset interrupted the run. A second run while one is in progress
        raises AnimationBusyError.
        """
        if self.animator.running:
            raise AnimationBusyError(f"{self.algorithm.upper()} is already running")
        steps = self.steps(start_node, end_node)
        self._clear()

        def apply_step(step):
            self.current_step = step
            if on_step is not None:
                on_step(step)

        last = await self.animator.run(steps, apply_step)
        if last is None:
            logger.info("%s run superseded by reset", self.algorithm)
            return None
        self.summary = last["message"]
        logger.info("%s finished: %s", self.algorithm, self.summary)
        return self.summary

    def reset(self):
        self.animator.reset(on_reset=self._clear)
