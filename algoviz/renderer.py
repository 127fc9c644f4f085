# renderer.py
#
# Draws trace steps and live data structures with matplotlib. Only the
# object-oriented Figure API is used (no pyplot state), so figures can be
# created from Streamlit threads and from the export CLI alike.
import logging
from pathlib import Path

from matplotlib.figure import Figure
from matplotlib.patches import Circle, FancyArrowPatch, Rectangle
from tqdm import tqdm

from algoviz.default_styles import DEFAULT_STYLES, fill_for
from algoviz.graph.demo_graph import edges

logger = logging.getLogger(__name__)


def _stroke_for(style_key, styles):
    entry = styles["elementStyles"].get(style_key) or styles["elementStyles"]["normal"]
    return entry.get("stroke", entry.get("color")), entry.get("strokeWidth", 1.5)


def node_style_key(node, frontier_style="queued_node") -> str:
    """Map a graph node snapshot to its style key."""
    if node["in_path"]:
        return "in_path_node"
    if node["current"]:
        return "current_node"
    if node["visited"]:
        return "visited_node"
    if node["in_frontier"]:
        return frontier_style
    return "idle_node"


class FrameRenderer:
    """
    Stateless drawing helpers. Every render_* method returns a new Figure;
    callers either hand it to st.pyplot or save it with savefig().
    """

    def __init__(self, styles=None, figsize=(8, 4), dpi=100):
        self.styles = styles or DEFAULT_STYLES
        self.figsize = figsize
        self.dpi = dpi

    def _new_axes(self, title=""):
        fig = Figure(figsize=self.figsize, dpi=self.dpi)
        ax = fig.add_subplot(1, 1, 1)
        ax.set_axis_off()
        if title:
            ax.set_title(title, fontsize=11)
        return fig, ax

    def _legend(self, ax, keys):
        labels = self.styles.get("labels", {})
        handles = [
            Rectangle((0, 0), 1, 1, facecolor=fill_for(key, self.styles), edgecolor="none")
            for key in keys
        ]
        ax.legend(handles, [labels.get(key, key) for key in keys], loc="upper center",
                  bbox_to_anchor=(0.5, -0.02), ncol=min(len(keys), 7), fontsize=8, frameon=False)

    # =================================================================
    # Sorting
    # =================================================================
    def render_array_step(self, step, title=""):
        """Bar chart of one sorting step; bar height is the value, colour the state."""
        fig, ax = self._new_axes(title or step.get("message", ""))
        elements = step["data"]
        values = [element["value"] for element in elements]
        top = max([abs(v) for v in values] + [1])

        for index, element in enumerate(elements):
            stroke, width = _stroke_for(element["state"], self.styles)
            ax.add_patch(Rectangle((index + 0.1, 0), 0.8, element["value"],
                                   facecolor=fill_for(element["state"], self.styles),
                                   edgecolor=stroke, linewidth=width))
            ax.text(index + 0.5, element["value"] + top * 0.02, str(element["value"]),
                    ha="center", va="bottom", fontsize=9)
            ax.text(index + 0.5, -top * 0.06, str(index), ha="center", va="top", fontsize=8, color="#6B7280")

        ax.set_xlim(0, max(len(elements), 1))
        ax.set_ylim(min([0] + values) - top * 0.12, top * 1.15)
        self._legend(ax, ["normal", "pivot", "comparing", "swapping", "dividing", "merging", "sorted"])
        return fig

    # =================================================================
    # Graphs
    # =================================================================
    def render_graph_step(self, graph, step, frontier_style="queued_node", title=""):
        fig, ax = self._new_axes(title or step.get("message", ""))
        nodes = {node["id"]: node for node in step["nodes"]}
        path = step.get("path", [])
        path_pairs = {frozenset(pair) for pair in zip(path, path[1:])}

        for edge in edges(graph):
            in_path = frozenset((edge["from"], edge["to"])) in path_pairs
            color, width = _stroke_for("in_path_edge" if in_path else "normal_edge", self.styles)
            a, b = nodes[edge["from"]], nodes[edge["to"]]
            ax.plot([a["x"], b["x"]], [a["y"], b["y"]], color=color, linewidth=width, zorder=1)
            if graph.get("weighted"):
                ax.text((a["x"] + b["x"]) / 2, (a["y"] + b["y"]) / 2, str(edge["weight"]), fontsize=9,
                        ha="center", va="center", zorder=3,
                        bbox={"boxstyle": "round,pad=0.15", "facecolor": "white", "edgecolor": "none"})

        for node in nodes.values():
            key = node_style_key(node, frontier_style)
            stroke, width = _stroke_for(key, self.styles)
            ax.add_patch(Circle((node["x"], node["y"]), 22, facecolor=fill_for(key, self.styles),
                                edgecolor=stroke, linewidth=width, zorder=2))
            ax.text(node["x"], node["y"], node["label"], ha="center", va="center",
                    fontsize=11, fontweight="bold", zorder=4)
            if graph.get("weighted"):
                distance = "∞" if node["distance"] is None else str(node["distance"])
                ax.text(node["x"], node["y"] - 32, distance, ha="center", va="center", fontsize=8,
                        color="#374151", zorder=4)

        xs = [node["x"] for node in nodes.values()]
        ys = [node["y"] for node in nodes.values()]
        ax.set_xlim(min(xs) - 50, max(xs) + 50)
        # screen coordinates: y grows downwards
        ax.set_ylim(max(ys) + 50, min(ys) - 50)
        ax.set_aspect("equal")

        legend_keys = ["idle_node", "current_node", "visited_node", frontier_style]
        if graph.get("weighted"):
            legend_keys = ["idle_node", "current_node", "visited_node", "in_path_node"]
        self._legend(ax, legend_keys)
        return fig

    # =================================================================
    # Data structures
    # =================================================================
    def render_list(self, linked_list, highlight=None, doubly=False, title=""):
        fig, ax = self._new_axes(title)
        items = linked_list.snapshot()
        if not items:
            ax.text(0.5, 0.5, "Empty list", ha="center", va="center", transform=ax.transAxes, color="#6B7280")
            return fig

        for index, item in enumerate(items):
            key = "highlight_node" if item["id"] == highlight else "list_node"
            stroke, width = _stroke_for(key, self.styles)
            x = index * 2
            ax.add_patch(Rectangle((x, 0), 1.2, 1, facecolor=fill_for(key, self.styles),
                                   edgecolor=stroke, linewidth=width))
            ax.text(x + 0.6, 0.5, str(item["value"]), ha="center", va="center", fontsize=11)
            if index < len(items) - 1:
                style = "<|-|>" if doubly else "-|>"
                ax.add_patch(FancyArrowPatch((x + 1.2, 0.5), (x + 2, 0.5), arrowstyle=style,
                                             mutation_scale=12, color="#6B7280"))
        ax.text(-0.1, 0.5, "head", ha="right", va="center", fontsize=8, color="#6B7280")
        if doubly:
            ax.text((len(items) - 1) * 2 + 1.3, 0.5, "tail", ha="left", va="center", fontsize=8, color="#6B7280")

        ax.set_xlim(-1, len(items) * 2 + 0.2)
        ax.set_ylim(-1, 2)
        ax.set_aspect("equal")
        return fig

    def render_tree(self, tree, highlight=None, title=""):
        fig, ax = self._new_axes(title)
        positions = tree.layout()
        if not positions:
            ax.text(0.5, 0.5, "Empty tree", ha="center", va="center", transform=ax.transAxes, color="#6B7280")
            return fig

        by_id = {p["id"]: p for p in positions}
        for p in positions:
            if p["parent"] is not None:
                parent = by_id[p["parent"]]
                ax.plot([parent["x"], p["x"]], [parent["y"], p["y"]], color="#6B7280", linewidth=1.5, zorder=1)

        for p in positions:
            key = "highlight_node" if p["id"] == highlight else "list_node"
            stroke, width = _stroke_for(key, self.styles)
            ax.add_patch(Circle((p["x"], p["y"]), 0.35, facecolor=fill_for(key, self.styles),
                                edgecolor=stroke, linewidth=width, zorder=2))
            ax.text(p["x"], p["y"], str(p["value"]), ha="center", va="center", fontsize=10, zorder=3)

        ax.set_xlim(-1, len(positions))
        ax.set_ylim(max(p["y"] for p in positions) + 1, -1)
        ax.set_aspect("equal")
        return fig

    def render_stack(self, stack, title=""):
        """Vertical stack, top of the stack drawn highest."""
        fig, ax = self._new_axes(title)
        items = stack.items
        for index, item in enumerate(items):
            is_top = index == len(items) - 1
            key = "last_operation" if is_top and stack.last_operation == "push" else "list_node"
            stroke, width = _stroke_for(key, self.styles)
            ax.add_patch(Rectangle((0, index), 3, 0.9, facecolor=fill_for(key, self.styles),
                                   edgecolor=stroke, linewidth=width))
            ax.text(1.5, index + 0.45, str(item["value"]), ha="center", va="center", fontsize=11)
            if is_top:
                ax.text(3.2, index + 0.45, "← top", ha="left", va="center", fontsize=9, color="#6B7280")
        if not items:
            ax.text(1.5, 0.5, "Empty stack", ha="center", va="center", color="#6B7280")

        ax.set_xlim(-1, 5)
        ax.set_ylim(-0.5, max(len(items), 1) + 0.5)
        return fig

    def render_queue(self, queue, title=""):
        """Horizontal queue, front on the left."""
        fig, ax = self._new_axes(title)
        items = list(queue.items)
        for index, item in enumerate(items):
            key = "last_operation" if index == queue.operation_index and queue.last_operation == "enqueue" else "list_node"
            stroke, width = _stroke_for(key, self.styles)
            ax.add_patch(Rectangle((index * 1.2, 0), 1, 1, facecolor=fill_for(key, self.styles),
                                   edgecolor=stroke, linewidth=width))
            ax.text(index * 1.2 + 0.5, 0.5, str(item["value"]), ha="center", va="center", fontsize=11)
        if items:
            ax.text(0.5, -0.3, "front", ha="center", va="top", fontsize=8, color="#6B7280")
            ax.text((len(items) - 1) * 1.2 + 0.5, -0.3, "back", ha="center", va="top", fontsize=8, color="#6B7280")
        else:
            ax.text(0.5, 0.5, "Empty queue", ha="center", va="center", transform=ax.transAxes, color="#6B7280")

        ax.set_xlim(-0.5, max(len(items), 1) * 1.2 + 0.5)
        ax.set_ylim(-1, 2)
        ax.set_aspect("equal")
        return fig


def export_frames(trace: dict, output_dir, graph=None, frontier_style="queued_node") -> list:
    """
    Render every step of a trace to output_dir/frame_0000.png, ... and return
    the written paths. Graph traces need the graph they were generated from.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    renderer = FrameRenderer(styles=trace.get("styles"))
    name = trace["algorithm"]["name"]

    written = []
    for i, step in enumerate(tqdm(trace["steps"], desc=f"Rendering {name}")):
        if "data" in step:
            fig = renderer.render_array_step(step)
        else:
            if graph is None:
                raise ValueError("Graph traces need the graph to render frames")
            fig = renderer.render_graph_step(graph, step, frontier_style=frontier_style)
        frame_path = output_dir / f"frame_{i:04d}.png"
        fig.savefig(frame_path, bbox_inches="tight")
        written.append(frame_path)

    logger.info("Rendering complete! %d frames saved to %s", len(written), output_dir)
    return written
