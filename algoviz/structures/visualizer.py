# visualizer.py
import logging

from algoviz.animation import Animator
from algoviz.config import DEFAULT_CONFIG
from algoviz.errors import AnimationBusyError

logger = logging.getLogger(__name__)


class SearchVisualizer:
    """
    Animated search over a linked list or BST. `highlight` is the id of the
    node being inspected, or None when idle.
    """

    def __init__(self, structure, config=None, delay_scale=1.0):
        self.structure = structure
        self.delay = (config or DEFAULT_CONFIG)["animation"]["search_delay"]
        self.animator = Animator(delay_scale=delay_scale)
        self.highlight = None

    @property
    def running(self) -> bool:
        return self.animator.running

    def _clear(self):
        self.highlight = None

    async def search(self, value, on_step=None):
        """
        Animate the search and return the final message (or None when reset
        interrupted it). Raises EmptyStructureError on an empty structure.
        """
        if self.animator.running:
            raise AnimationBusyError("A search is already running")
        steps = self.structure.iter_search(value, delay=self.delay)

        def apply_step(step):
            self.highlight = step["highlight"]
            if on_step is not None:
                on_step(step)

        last = await self.animator.run(steps, apply_step)
        if last is None:
            return None
        self._clear()
        message = last["message"]
        logger.info("%s search for %s: %s", self.structure.kind, value, message)
        return message

    def reset(self):
        self.animator.reset(on_reset=self._clear)
