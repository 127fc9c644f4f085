import asyncio

import pytest

from algoviz.animation import Animator, StepPlayer
from algoviz.errors import AnimationBusyError, EmptyStructureError, InvalidInputError
from algoviz.graph.visualizer import TraversalVisualizer
from algoviz.sort import generate_quicksort_trace
from algoviz.structures import BinarySearchTree, SearchVisualizer, SinglyLinkedList


# --- StepPlayer ---

def test_player_plays_to_the_end():
    player = StepPlayer()
    player.load(generate_quicksort_trace([3, 1, 2]))
    assert player.playing
    assert player.progress_label() == f"Step 1 of {player.total}"

    finished = [player.tick() for _ in range(player.total)]
    assert finished[-1] is True
    assert finished.count(True) == 1
    assert not player.playing
    assert player.at_end
    assert player.current_step["message"] == "Quick Sort finished sorting the array"


def test_player_stepping_and_seeking():
    player = StepPlayer()
    player.load([{"n": 0}, {"n": 1}, {"n": 2}])
    player.pause()
    assert player.next_step()
    assert player.current_step == {"n": 1}
    assert player.prev_step()
    assert not player.prev_step()
    player.seek(99)
    assert player.current == 2
    assert not player.next_step()
    player.seek(-5)
    assert player.current == 0
    assert not player.playing


def test_player_speed_controls_interval():
    player = StepPlayer(speed_ms=500)
    assert player.interval == pytest.approx(0.6)
    player.set_speed(1000)
    assert player.interval == pytest.approx(0.1)
    with pytest.raises(InvalidInputError):
        player.set_speed(50)


def test_player_reset_and_empty_load():
    player = StepPlayer()
    with pytest.raises(EmptyStructureError):
        player.load([])
    player.load([{"n": 0}])
    player.reset()
    assert player.current_step is None
    assert not player.toggle()
    assert player.progress_label() == ""


# --- Animator ---

def test_animator_applies_steps_in_order():
    animator = Animator(delay_scale=0)
    applied = []
    last = asyncio.run(animator.run(iter([{"delay": 1, "n": 1}, {"delay": 1, "n": 2}]), applied.append))
    assert [s["n"] for s in applied] == [1, 2]
    assert last["n"] == 2
    assert not animator.running


def test_animator_reset_cancels_started_task():
    async def scenario():
        animator = Animator()
        applied = []
        task = animator.start(iter([{"delay": 10}, {"delay": 0}]), applied.append)
        await asyncio.sleep(0)
        assert animator.running
        animator.reset()
        with pytest.raises(asyncio.CancelledError):
            await task
        return animator, applied

    animator, applied = asyncio.run(scenario())
    assert applied == [{"delay": 10}]
    assert not animator.running


# --- traversal and search visualizers ---

def test_traversal_visualizer_runs_to_summary():
    vis = TraversalVisualizer("bfs", delay_scale=0)
    events = []
    summary = asyncio.run(vis.run(0, on_step=lambda step: events.append(step["event"])))
    assert summary == "Visit order: A → B → C → D → E → F"
    assert events[-1] == "done"
    assert not vis.running


def test_dijkstra_visualizer_needs_end_node():
    vis = TraversalVisualizer("dijkstra", delay_scale=0)
    with pytest.raises(InvalidInputError):
        vis.steps(0)
    assert asyncio.run(vis.run(0, 5)) == "Shortest path: A → C → F (distance: 3)"


def test_reset_supersedes_running_traversal():
    vis = TraversalVisualizer("dfs", delay_scale=0)
    seen = []

    def on_step(step):
        seen.append(step["event"])
        if len(seen) == 2:
            vis.reset()

    assert asyncio.run(vis.run(0, on_step=on_step)) is None
    assert len(seen) == 2
    assert vis.current_step["event"] == "reset"
    assert not any(node["visited"] for node in vis.current_step["nodes"])
    assert vis.summary is None
    assert not vis.running

    # a fresh run after the reset works normally
    assert asyncio.run(vis.run(0)) == "Visit order: A → B → D → E → F → C"


def test_second_run_while_running_is_rejected():
    vis = TraversalVisualizer("bfs", delay_scale=0.01)

    async def scenario():
        first = asyncio.ensure_future(vis.run(0))
        await asyncio.sleep(0)
        assert vis.running
        with pytest.raises(AnimationBusyError):
            await vis.run(0)
        vis.reset()
        return await first

    assert asyncio.run(scenario()) is None
    assert not vis.running


def test_stale_run_stays_silent_after_reset_and_restart():
    vis = TraversalVisualizer("bfs", delay_scale=0.01)
    old_steps, new_steps = [], []

    async def scenario():
        first = asyncio.ensure_future(vis.run(0, on_step=old_steps.append))
        await asyncio.sleep(0)
        vis.reset()
        # the first run is still asleep after its first step
        second = await vis.run(1, on_step=new_steps.append)
        return await first, second

    old_result, new_result = asyncio.run(scenario())
    assert old_result is None
    assert len(old_steps) == 1
    assert new_result.startswith("Visit order: B")
    assert new_steps[-1]["event"] == "done"
    assert vis.current_step is new_steps[-1]
    assert vis.summary == new_result
    assert not vis.running


def test_unknown_traversal_and_bad_start():
    with pytest.raises(InvalidInputError):
        TraversalVisualizer("astar")
    vis = TraversalVisualizer("bfs", delay_scale=0)
    with pytest.raises(InvalidInputError):
        asyncio.run(vis.run(6))
    assert not vis.running


def test_search_visualizer_clears_highlight():
    tree = BinarySearchTree([5, 3, 8, 1, 4])
    searcher = SearchVisualizer(tree, delay_scale=0)
    highlights = []
    message = asyncio.run(searcher.search(4, on_step=lambda step: highlights.append(step["highlight"])))
    assert message == "Found: value 4 is in the tree"
    assert len(highlights) == 4
    assert searcher.highlight is None


def test_search_visualizer_reset_interrupts_search():
    linked = SinglyLinkedList([10, 20, 30])
    searcher = SearchVisualizer(linked, delay_scale=0)
    seen = []

    def on_step(step):
        seen.append(step["highlight"])
        if len(seen) == 2:
            searcher.reset()

    assert asyncio.run(searcher.search(30, on_step=on_step)) is None
    assert len(seen) == 2
    assert searcher.highlight is None
    assert not searcher.running
    assert asyncio.run(searcher.search(30)) == "Found: value 30 is at position 2"


def test_search_visualizer_empty_structure():
    searcher = SearchVisualizer(SinglyLinkedList(), delay_scale=0)
    with pytest.raises(EmptyStructureError):
        asyncio.run(searcher.search(1))
    assert not searcher.running
