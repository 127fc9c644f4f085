# animation.py
#
# Two animation drivers:
#   StepPlayer - indexes into a precomputed step list (sorting); supports
#                play/pause, single steps in both directions and seeking.
#   Animator   - consumes steps lazily and waits `delay` seconds between them
#                (graph traversals, list/tree searches). Runs are asyncio
#                tasks; reset() cancels the running task and bumps a
#                generation counter so a superseded run can never apply
#                another step.
import asyncio
import logging

from algoviz.errors import AnimationBusyError, EmptyStructureError, InvalidInputError

logger = logging.getLogger(__name__)


class StepPlayer:

    def __init__(self, speed_ms=500, speed_min=100, speed_max=1000):
        self.speed_min = speed_min
        self.speed_max = speed_max
        self.speed_ms = speed_ms
        self.steps = []
        self.current = 0
        self.playing = False

    # --- loading -------------------------------------------------------
    def load(self, trace):
        """Load a trace (or a bare step list) and start playing from step 0."""
        steps = trace["steps"] if isinstance(trace, dict) else list(trace)
        if not steps:
            raise EmptyStructureError("There are no steps to play")
        self.steps = steps
        self.current = 0
        self.playing = True
        logger.debug("player loaded %d steps", len(steps))

    def reset(self):
        self.steps = []
        self.current = 0
        self.playing = False

    # --- state ---------------------------------------------------------
    @property
    def total(self) -> int:
        return len(self.steps)

    @property
    def current_step(self):
        if not self.steps:
            return None
        return self.steps[self.current]

    @property
    def at_end(self) -> bool:
        return not self.steps or self.current >= len(self.steps) - 1

    @property
    def interval(self) -> float:
        """Seconds between frames; a faster speed means a shorter interval."""
        return (1100 - self.speed_ms) / 1000.0

    def progress_label(self) -> str:
        if not self.steps:
            return ""
        return f"Step {self.current + 1} of {self.total}"

    # --- controls ------------------------------------------------------
    def set_speed(self, speed_ms):
        if not self.speed_min <= speed_ms <= self.speed_max:
            raise InvalidInputError(f"Speed must be between {self.speed_min} and {self.speed_max} ms")
        self.speed_ms = speed_ms

    def toggle(self) -> bool:
        if not self.steps:
            return False
        self.playing = not self.playing
        return self.playing

    def pause(self):
        self.playing = False

    def next_step(self) -> bool:
        if self.at_end:
            return False
        self.current += 1
        return True

    def prev_step(self) -> bool:
        if not self.steps or self.current == 0:
            return False
        self.current -= 1
        return True

    def seek(self, index: int):
        if not self.steps:
            return
        self.current = max(0, min(index, len(self.steps) - 1))
        self.playing = False

    def tick(self) -> bool:
        """
        Advance one frame while playing. Returns True exactly when playback
        has just reached the end (the caller shows the completion message).
        """
        if not self.playing or not self.steps:
            return False
        if self.at_end:
            self.playing = False
            return True
        self.current += 1
        return False


class Animator:

    def __init__(self, delay_scale=1.0):
        self.delay_scale = delay_scale
        self.running = False
        self.generation = 0
        self._task = None

    def _begin(self) -> int:
        if self.running:
            raise AnimationBusyError("An animation is already running; wait for it or reset")
        self.running = True
        self.generation += 1
        return self.generation

    async def _drive(self, generation, steps, apply_step):
        last = None
        try:
            for step in steps:
                if generation != self.generation:
                    return None
                apply_step(step)
                last = step
                await asyncio.sleep(step.get("delay", 0) * self.delay_scale)
            if generation != self.generation:
                return None
            return last
        finally:
            if generation == self.generation:
                self.running = False
                self._task = None

    async def run(self, steps, apply_step):
        """
        Apply every step in order, waiting each step's `delay` (scaled) after
        it. Returns the last step, or None when a reset superseded this run.
        Raises AnimationBusyError if a run is already in progress.
        """
        generation = self._begin()
        return await self._drive(generation, steps, apply_step)

    def start(self, steps, apply_step) -> asyncio.Task:
        """Schedule a run on the current event loop and return its task."""
        generation = self._begin()
        self._task = asyncio.get_running_loop().create_task(self._drive(generation, steps, apply_step))
        return self._task

    def reset(self, on_reset=None):
        """Stop any in-flight run; its pending continuation becomes a no-op."""
        self.generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.running = False
        if on_reset is not None:
            on_reset()
