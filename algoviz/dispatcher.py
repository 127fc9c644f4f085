# dispatcher.py
import argparse
import json
import logging
from pathlib import Path

from algoviz.config import DEFAULT_CONFIG, load_config, setup_logging
from algoviz.errors import InvalidInputError, VisualizerError
from algoviz.graph.bfs import generate_bfs_trace
from algoviz.graph.demo_graph import build_graph, demo_graph
from algoviz.graph.dfs import generate_dfs_trace
from algoviz.graph.dijkstra import generate_dijkstra_trace
from algoviz.parsing import parse_int, parse_int_list
from algoviz.sort.merge_sort import generate_merge_sort_trace
from algoviz.sort.quicksort import generate_quicksort_trace

logger = logging.getLogger(__name__)

# --- 1. Algorithm mapping table ---
# Map algorithm ID strings to the trace generator functions
ALGORITHM_DISPATCH_TABLE = {
    # Sorting algorithms
    "quick_sort": generate_quicksort_trace,
    "merge_sort": generate_merge_sort_trace,

    # Graph algorithms
    "bfs": generate_bfs_trace,
    "dfs": generate_dfs_trace,
    "dijkstra": generate_dijkstra_trace,
}


def _array_input(data):
    """
    Sorting input is either a list of numbers or a comma separated string.
    List entries are read like string tokens; entries without a leading
    integer are dropped, and an empty result is rejected by the generator.
    """
    if isinstance(data, str):
        return parse_int_list(data)
    if not isinstance(data, (list, tuple)):
        raise InvalidInputError("Sorting input must be a list of numbers or a comma separated string")
    values = [parse_int(v) for v in data]
    return [v for v in values if v is not None]


def _graph_fields(data) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError("Graph input must be an object with optional 'graph', 'start_node' and 'end_node'")
    return data


def _graph_input(data, weighted):
    """
    Graph input: {"graph": {"nodes": [...], "adjacency": {...}}, "start_node": .., "end_node": ..}.
    Without a "graph" entry the demo graph is used. JSON object keys arrive
    as strings and are converted back to node ids.
    """
    graph_data = _graph_fields(data).get("graph")
    if graph_data is None:
        return demo_graph(weighted=weighted)
    if not isinstance(graph_data, dict):
        raise InvalidInputError("'graph' must be an object with 'nodes' and 'adjacency'")

    adjacency = {}
    for node_id, nbrs in graph_data.get("adjacency", {}).items():
        parsed = parse_int(node_id)
        if parsed is None:
            raise InvalidInputError(f"Adjacency key '{node_id}' is not a node id")
        adjacency[parsed] = nbrs
    return build_graph(graph_data.get("nodes", []), adjacency)


def _graph_default(data, key):
    value = _graph_fields(data).get(key)
    if value is None:
        return DEFAULT_CONFIG["graph"][f"default_{key.split('_')[0]}"]
    node_id = parse_int(value)
    if node_id is None:
        raise InvalidInputError(f"'{key}' must be a node id, got {value!r}")
    return node_id


param_extractors = {
    "quick_sort": lambda d: (_array_input(d),),
    "merge_sort": lambda d: (_array_input(d),),
    "bfs": lambda d: (_graph_input(d, False), _graph_default(d, "start_node")),
    "dfs": lambda d: (_graph_input(d, False), _graph_default(d, "start_node")),
    "dijkstra": lambda d: (_graph_input(d, True), _graph_default(d, "start_node"), _graph_default(d, "end_node")),
}


def dispatch_and_generate(intent: dict) -> dict:
    """
    Generate a trace from an intent dict:
        {"algorithm_id": ..., "data_input": ..., "style_overrides": {...}}
    Raises InvalidInputError for an unknown algorithm or missing input; any
    VisualizerError from the generator propagates unchanged.
    """
    algorithm_id = intent.get("algorithm_id")
    data_input = intent.get("data_input")
    style_overrides = intent.get("style_overrides") or {}

    logger.info("Dispatcher: received request with algorithm ID '%s'.", algorithm_id)

    # --- 2. Find the generator ---
    tracker_function = ALGORITHM_DISPATCH_TABLE.get(algorithm_id)
    if tracker_function is None:
        raise InvalidInputError(
            f"Unknown algorithm '{algorithm_id}' (available: {', '.join(ALGORITHM_DISPATCH_TABLE)})"
        )

    # Sorting needs data; graph traversals may fall back to the demo graph
    if data_input is None and algorithm_id in ("quick_sort", "merge_sort"):
        raise InvalidInputError("Missing 'data_input' in intent")

    # --- 3. Call it ---
    args = param_extractors[algorithm_id](data_input)
    logger.debug("Calling %s", tracker_function.__name__)
    trace = tracker_function(*args, styles=style_overrides)
    logger.info("Generated %d steps for %s.", len(trace["steps"]), algorithm_id)
    return trace


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate an algorithm trace from an intent JSON file.")
    parser.add_argument("intent_file", nargs="?", help="Path to intent JSON file")
    parser.add_argument("--output-dir", default="dispatch_output", help="Where <algorithm_id>_trace.json is written")
    parser.add_argument("--frames", action="store_true", help="Also render every step to PNG frames")
    parser.add_argument("--config", default=None, help="Optional JSON config file")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except VisualizerError as e:
        setup_logging()
        logger.error("%s", e)
        return 2
    setup_logging(config["logging"]["level"], config["logging"]["log_file"])

    if args.intent_file:
        with open(args.intent_file, "r", encoding="utf-8") as f:
            intent = json.load(f)
    else:
        intent = {
            "algorithm_id": "quick_sort",
            "data_input": config["sorting"]["default_input"]["quick_sort"],
        }

    try:
        trace = dispatch_and_generate(intent)
    except VisualizerError as e:
        logger.error("Dispatch failed: %s", e)
        return 1

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{intent['algorithm_id']}_trace.json"
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(trace, f, indent=2, ensure_ascii=False)
    logger.info("Dispatch successful! Trace saved to: %s", output_path)

    if args.frames:
        # imported lazily; matplotlib is slow to load
        from algoviz.renderer import export_frames

        graph = None
        if intent["algorithm_id"] in ("bfs", "dfs", "dijkstra"):
            graph = _graph_input(intent.get("data_input"), intent["algorithm_id"] == "dijkstra")
        frontier = "stacked_node" if intent["algorithm_id"] == "dfs" else "queued_node"
        export_frames(trace, output_dir / f"{intent['algorithm_id']}_frames", graph=graph, frontier_style=frontier)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
