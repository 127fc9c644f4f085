import io

import pytest
from matplotlib.figure import Figure

from algoviz.graph import demo_graph, generate_bfs_trace, generate_dijkstra_trace, iter_dfs_steps
from algoviz.renderer import FrameRenderer, export_frames, node_style_key
from algoviz.sort import generate_quicksort_trace
from algoviz.structures import BinarySearchTree, DoublyLinkedList, Queue, SinglyLinkedList, Stack


def _png_bytes(fig):
    buffer = io.BytesIO()
    fig.savefig(buffer, format="png")
    return buffer.getvalue()


def test_array_step_renders_one_bar_per_element():
    trace = generate_quicksort_trace([5, 3, 8])
    fig = FrameRenderer().render_array_step(trace["steps"][0])
    assert isinstance(fig, Figure)
    ax = fig.axes[0]
    assert len(ax.patches) == 3
    assert _png_bytes(fig).startswith(b"\x89PNG")


def test_graph_step_renders_nodes_and_edges():
    graph = demo_graph(weighted=True)
    trace = generate_dijkstra_trace(graph, 0, 5)
    fig = FrameRenderer().render_graph_step(graph, trace["steps"][-1])
    ax = fig.axes[0]
    assert len(ax.patches) == 6
    assert len(ax.lines) == 7
    assert _png_bytes(fig)


def test_node_style_priority():
    node = {"in_path": False, "current": False, "visited": False, "in_frontier": False}
    assert node_style_key(node) == "idle_node"
    assert node_style_key(dict(node, in_frontier=True), "stacked_node") == "stacked_node"
    assert node_style_key(dict(node, in_frontier=True, visited=True)) == "visited_node"
    assert node_style_key(dict(node, visited=True, current=True)) == "current_node"
    assert node_style_key(dict(node, visited=True, in_path=True)) == "in_path_node"


def test_dfs_frontier_uses_stack_colour():
    graph = demo_graph()
    step = next(iter_dfs_steps(graph, 0, delay=0))
    fig = FrameRenderer().render_graph_step(graph, step, frontier_style="stacked_node")
    assert isinstance(fig, Figure)


@pytest.mark.parametrize("structure", [
    SinglyLinkedList([1, 2, 3]),
    SinglyLinkedList(),
    DoublyLinkedList([4, 5]),
])
def test_list_rendering(structure):
    fig = FrameRenderer().render_list(structure, doubly=isinstance(structure, DoublyLinkedList))
    assert _png_bytes(fig)


def test_tree_rendering_highlights_node():
    tree = BinarySearchTree([5, 3, 8])
    root_id = tree.root.id
    fig = FrameRenderer().render_tree(tree, highlight=root_id)
    assert len(fig.axes[0].patches) == 3
    assert _png_bytes(FrameRenderer().render_tree(BinarySearchTree()))


def test_stack_and_queue_rendering():
    renderer = FrameRenderer()
    assert len(renderer.render_stack(Stack([1, 2])).axes[0].patches) == 2
    assert len(renderer.render_queue(Queue([1, 2, 3])).axes[0].patches) == 3
    assert _png_bytes(renderer.render_stack(Stack()))
    assert _png_bytes(renderer.render_queue(Queue()))


def test_export_frames(tmp_path):
    trace = generate_quicksort_trace([2, 1])
    written = export_frames(trace, tmp_path / "frames")
    assert len(written) == len(trace["steps"])
    assert written[0].name == "frame_0000.png"
    assert all(path.exists() for path in written)


def test_export_graph_frames_needs_graph(tmp_path):
    graph = demo_graph()
    trace = generate_bfs_trace(graph, 0)
    with pytest.raises(ValueError):
        export_frames(trace, tmp_path)
    assert len(export_frames(trace, tmp_path / "bfs", graph=graph)) == len(trace["steps"])
