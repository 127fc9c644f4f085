# views.py
#
# Streamlit pages. Every visualizer object lives in st.session_state so it
# survives reruns; core errors are VisualizerError subclasses and are shown
# as notifications, never raised to the page.
import asyncio
import html
import time

import streamlit as st

from algoviz.analysis import ALGORITHMS, PERFORMANCE_DATA, algorithm_by_value, complexity_data, simulate_comparison
from algoviz.animation import StepPlayer
from algoviz.dispatcher import ALGORITHM_DISPATCH_TABLE
from algoviz.errors import VisualizerError
from algoviz.graph.demo_graph import label_of
from algoviz.graph.visualizer import TraversalVisualizer
from algoviz.parsing import parse_int_list, parse_node_id, parse_value
from algoviz.renderer import FrameRenderer
from algoviz.sort.common import random_values
from algoviz.structures import BinarySearchTree, DoublyLinkedList, Queue, SearchVisualizer, SinglyLinkedList, Stack
from algoviz.web.routes import CATALOGS, FEATURES, catalog_entry

BOX_STYLE = ("text-align: center; font-size: 1.1em; font-weight: bold; color: #333; min-height: 2.5em; "
             "padding: 0.5em; border: 1px solid #ddd; border-radius: 8px; margin: 0.5em 0;")


def navigate(path):
    st.query_params["page"] = path
    st.rerun()


def show_error(error: VisualizerError):
    st.error(f"**{error.title}**: {error}")


def message_box(placeholder, text):
    placeholder.markdown(f"<div style='{BOX_STYLE}'>{html.escape(text) if text else '&nbsp;'}</div>",
                         unsafe_allow_html=True)


def pseudocode_block(lines, highlight):
    """Pseudocode with the active line (1-based) highlighted."""
    rows = []
    for number, line in enumerate(lines, start=1):
        style = "background: #FEF3C7; font-weight: bold;" if number == highlight else ""
        rows.append(f"<div style='font-family: monospace; white-space: pre; {style}'>"
                    f"{number:>2}  {html.escape(line)}</div>")
    st.markdown("".join(rows), unsafe_allow_html=True)


# =================================================================
# Home / not found
# =================================================================
def home_page(config):
    st.title("AlgoViz")
    st.caption("Interactive, step-by-step visualizations of classic data structures and algorithms")

    columns = st.columns(2)
    for i, feature in enumerate(FEATURES):
        with columns[i % 2]:
            with st.container(border=True):
                st.subheader(feature["title"])
                st.write(feature["description"])
                if st.button("Open", key=f"feature_{feature['path']}"):
                    navigate(feature["path"])


def not_found_page(config):
    st.title("404")
    st.error("Oops! Page not found")
    if st.button("Return to Home"):
        navigate("/")


# =================================================================
# Catalogs
# =================================================================
def catalog_page(section, title, render_item, config):
    selected_key = f"selected_{section}"
    entry = catalog_entry(section, st.session_state.get(selected_key))

    if entry is None:
        st.title(title)
        entries = CATALOGS[section]
        columns = st.columns(min(len(entries), 3))
        for i, item in enumerate(entries):
            with columns[i % len(columns)]:
                with st.container(border=True):
                    st.subheader(item["title"])
                    st.write(item["description"])
                    if st.button("Open", key=f"open_{section}_{item['id']}"):
                        st.session_state[selected_key] = item["id"]
                        st.rerun()
        return

    if st.button("← Back", key=f"back_{section}"):
        st.session_state.pop(selected_key, None)
        st.rerun()
    st.title(entry["title"])
    st.caption(entry["description"])
    render_item(entry, config)


def structures_page(config):
    catalog_page("structures", "Data Structures", structure_visualizer, config)


def sorting_page(config):
    catalog_page("sorting", "Sorting Algorithms", sorting_visualizer, config)


def search_page(config):
    catalog_page("search", "Search Algorithms", traversal_visualizer, config)


# =================================================================
# Sorting
# =================================================================
def sorting_visualizer(entry, config):
    algorithm_id = entry["algorithm_id"]
    sort_cfg = config["sorting"]
    anim_cfg = config["animation"]

    player_key = f"player_{algorithm_id}"
    trace_key = f"trace_{algorithm_id}"
    input_key = f"input_{algorithm_id}"
    done_key = f"done_{algorithm_id}"
    if player_key not in st.session_state:
        st.session_state[player_key] = StepPlayer(anim_cfg["speed_ms"], anim_cfg["speed_min"], anim_cfg["speed_max"])
    if input_key not in st.session_state:
        st.session_state[input_key] = sort_cfg["default_input"][algorithm_id]
    player = st.session_state[player_key]

    def randomize():
        values = random_values(sort_cfg["random_size"], sort_cfg["random_min"], sort_cfg["random_max"])
        st.session_state[input_key] = ",".join(str(v) for v in values)
        player.reset()
        st.session_state.pop(trace_key, None)

    st.text_input("Array (comma separated numbers)", key=input_key, disabled=player.playing)

    # --- UI controls ---
    col1, col2, col3, col4, col5, col6 = st.columns(6)
    with col1:
        st.button("🎲 Random", key=f"random_{algorithm_id}", on_click=randomize, disabled=player.playing)
    with col2:
        if st.button("▶️ Start", key=f"start_{algorithm_id}", type="primary", disabled=player.playing):
            try:
                values = parse_int_list(st.session_state[input_key])
                trace = ALGORITHM_DISPATCH_TABLE[algorithm_id](values)
                player.load(trace)
                st.session_state[trace_key] = trace
            except VisualizerError as e:
                show_error(e)
    with col3:
        if st.button("⏯️ Play/Pause", key=f"toggle_{algorithm_id}", disabled=not player.steps):
            player.toggle()
    with col4:
        if st.button("⏭️ Next", key=f"next_{algorithm_id}", disabled=player.playing or player.at_end):
            player.next_step()
    with col5:
        if st.button("⏮️ Back", key=f"prev_{algorithm_id}", disabled=player.playing or not player.steps):
            player.prev_step()
    with col6:
        if st.button("🔄 Reset", key=f"reset_{algorithm_id}"):
            player.reset()
            st.session_state.pop(trace_key, None)

    speed = st.slider("Speed (ms)", anim_cfg["speed_min"], anim_cfg["speed_max"], player.speed_ms,
                      anim_cfg["speed_step"], key=f"speed_{algorithm_id}")
    player.set_speed(speed)

    trace = st.session_state.get(trace_key)
    if st.session_state.pop(done_key, False):
        st.toast("Sorting complete")
        st.success(player.current_step["message"])

    if trace is None or player.current_step is None:
        values = parse_int_list_or_empty(st.session_state[input_key])
        if values:
            preview = {"data": [{"value": v, "state": "normal"} for v in values], "message": ""}
            st.pyplot(FrameRenderer().render_array_step(preview, title="Press Start to begin"))
        return

    if player.total > 1:
        # unkeyed so the slider follows the player position between reruns
        frame = st.slider(player.progress_label(), 1, player.total, player.current + 1)
        if frame != player.current + 1:
            player.seek(frame - 1)

    step = player.current_step
    renderer = FrameRenderer(styles=trace["styles"])
    left, right = st.columns([3, 2])
    with left:
        st.pyplot(renderer.render_array_step(step, title=player.progress_label()))
        message_box(st.empty(), step["message"])
    with right:
        st.markdown("**Pseudocode**")
        pseudocode_block(trace["pseudocode"], step["code_highlight"])
        st.markdown("**Variables**")
        st.table({"Variable": list(step["meta"].keys()), "Value": [str(v) for v in step["meta"].values()]})

    if player.playing:
        time.sleep(player.interval)
        if player.tick():
            st.session_state[done_key] = True
        st.rerun()


def parse_int_list_or_empty(text) -> list:
    try:
        return parse_int_list(text)
    except VisualizerError:
        return []


# =================================================================
# Graph traversals
# =================================================================
def _graph_panels(graph, algorithm, step):
    col1, col2 = st.columns(2)
    if algorithm == "dijkstra":
        distances = {label_of(graph, node["id"]): node["distance"] for node in step["nodes"]}
        with col1:
            st.markdown("**Distances**")
            st.table({"Node": list(distances), "Distance": ["∞" if d is None else str(d) for d in distances.values()]})
        with col2:
            st.markdown("**Shortest path**")
            st.write(" → ".join(label_of(graph, n) for n in step["path"]) or "-")
        return

    frontier = [label_of(graph, n) for n in step["frontier"]]
    with col1:
        if algorithm == "bfs":
            st.markdown("**Queue** (front first)")
        else:
            st.markdown("**Stack** (top last)")
        st.write(", ".join(frontier) or "empty")
    with col2:
        st.markdown("**Visit order**")
        st.write(" → ".join(step["visit_order"]) or "-")


def traversal_visualizer(entry, config):
    algorithm = entry["id"]
    state_key = f"traversal_{algorithm}"
    if state_key not in st.session_state:
        st.session_state[state_key] = TraversalVisualizer(algorithm, config=config)
    vis = st.session_state[state_key]
    graph = vis.graph
    node_count = len(graph["nodes"])
    graph_cfg = config["graph"]

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        start_text = st.text_input(f"Start node (0-{node_count - 1})", value=str(graph_cfg["default_start"]),
                                   key=f"start_node_{algorithm}")
    end_text = None
    if algorithm == "dijkstra":
        with col2:
            end_text = st.text_input(f"End node (0-{node_count - 1})", value=str(graph_cfg["default_end"]),
                                     key=f"end_node_{algorithm}")
    with col3:
        start_clicked = st.button(f"▶️ Start {algorithm.upper()}", key=f"run_{algorithm}", type="primary")
    with col4:
        reset_clicked = st.button("🔄 Reset", key=f"reset_{algorithm}")

    frontier_style = "stacked_node" if algorithm == "dfs" else "queued_node"
    renderer = FrameRenderer()
    figure_placeholder = st.empty()
    message_placeholder = st.empty()
    panel_placeholder = st.empty()

    def draw(step):
        figure_placeholder.pyplot(renderer.render_graph_step(graph, step, frontier_style=frontier_style))
        message_box(message_placeholder, step["message"])
        with panel_placeholder.container():
            _graph_panels(graph, algorithm, step)

    if reset_clicked:
        vis.reset()

    if start_clicked:
        try:
            start = parse_node_id(start_text, node_count)
            end = parse_node_id(end_text, node_count) if end_text is not None else None
            summary = asyncio.run(vis.run(start, end, on_step=draw))
            if summary:
                st.toast(summary)
        except VisualizerError as e:
            show_error(e)
    else:
        draw(vis.current_step)

    if vis.summary:
        st.success(vis.summary)


# =================================================================
# Data structures
# =================================================================
STRUCTURE_FACTORIES = {
    "linked-list": SinglyLinkedList,
    "doubly-linked-list": DoublyLinkedList,
    "binary-tree": BinarySearchTree,
    "stack": Stack,
    "queue": Queue,
}


def _structure(sid):
    key = f"structure_{sid}"
    if key not in st.session_state:
        st.session_state[key] = STRUCTURE_FACTORIES[sid]()
    return st.session_state[key]


def _clear_structure(sid):
    searcher = st.session_state.pop(f"searcher_{sid}", None)
    if searcher is not None:
        # stops a search still stepping over the old structure
        searcher.reset()
    st.session_state[f"structure_{sid}"] = STRUCTURE_FACTORIES[sid]()
    st.session_state.pop(f"notice_{sid}", None)


def structure_visualizer(entry, config):
    sid = entry["id"]
    if sid in ("stack", "queue"):
        _stack_queue_view(sid)
    else:
        _searchable_view(sid, config)


def _searchable_view(sid, config):
    structure = _structure(sid)
    searcher_key = f"searcher_{sid}"
    if searcher_key not in st.session_state:
        st.session_state[searcher_key] = SearchVisualizer(structure, config=config)
    searcher = st.session_state[searcher_key]
    is_tree = sid == "binary-tree"

    value_text = st.text_input("Value", key=f"value_{sid}")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        insert_clicked = st.button("➕ Insert", key=f"insert_{sid}")
    with col2:
        remove_clicked = False if is_tree else st.button("➖ Remove", key=f"remove_{sid}")
    with col3:
        search_clicked = st.button("🔍 Search", key=f"search_{sid}")
    with col4:
        if st.button("🗑️ Clear", key=f"clear_{sid}"):
            _clear_structure(sid)
            st.rerun()

    renderer = FrameRenderer()
    figure_placeholder = st.empty()
    message_placeholder = st.empty()

    def draw(highlight=None):
        if is_tree:
            fig = renderer.render_tree(structure, highlight=highlight)
        else:
            fig = renderer.render_list(structure, highlight=highlight, doubly=sid == "doubly-linked-list")
        figure_placeholder.pyplot(fig)

    def on_step(step):
        draw(step["highlight"])
        message_box(message_placeholder, step["message"])

    try:
        if insert_clicked:
            value = parse_value(value_text)
            if is_tree:
                structure.insert(value)
            else:
                structure.append(value)
            st.toast(f"Inserted {value}")
        if remove_clicked:
            value = parse_value(value_text)
            structure.remove(value)
            st.toast(f"Removed {value}")
        if search_clicked:
            value = parse_value(value_text)
            draw()
            result = asyncio.run(searcher.search(value, on_step=on_step))
            if result:
                st.session_state[f"notice_{sid}"] = result
    except VisualizerError as e:
        show_error(e)

    draw(searcher.highlight)
    message_box(message_placeholder, st.session_state.get(f"notice_{sid}", ""))
    st.caption(f"Size: {len(structure)}")
    if is_tree and len(structure):
        st.caption(f"In-order: {', '.join(str(v) for v in structure.inorder())} · height {structure.height()}")


def _stack_queue_view(sid):
    structure = _structure(sid)
    is_stack = sid == "stack"
    value_text = st.text_input("Value", key=f"value_{sid}")

    col1, col2, col3, col4 = st.columns(4)
    try:
        with col1:
            if st.button("➕ Push" if is_stack else "➕ Enqueue", key=f"add_{sid}"):
                value = parse_value(value_text)
                if is_stack:
                    structure.push(value)
                else:
                    structure.enqueue(value)
                st.session_state[f"notice_{sid}"] = f"{structure.last_operation.capitalize()} {value}"
        with col2:
            if st.button("➖ Pop" if is_stack else "➖ Dequeue", key=f"take_{sid}"):
                item = structure.pop() if is_stack else structure.dequeue()
                st.session_state[f"notice_{sid}"] = f"{structure.last_operation.capitalize()} {item['value']}"
        with col3:
            if st.button("👁️ Peek" if is_stack else "👁️ Front", key=f"peek_{sid}"):
                item = structure.peek() if is_stack else structure.front()
                where = "Top" if is_stack else "Front"
                st.session_state[f"notice_{sid}"] = f"{where} element: {item['value']}"
        with col4:
            if st.button("🗑️ Clear", key=f"clear_{sid}"):
                _clear_structure(sid)
                st.rerun()
    except VisualizerError as e:
        show_error(e)

    renderer = FrameRenderer()
    st.pyplot(renderer.render_stack(structure) if is_stack else renderer.render_queue(structure))
    message_box(st.empty(), st.session_state.get(f"notice_{sid}", ""))
    st.caption(f"Size: {len(structure)} · Last operation: {structure.last_operation or '-'}")


# =================================================================
# Compare & Analysis
# =================================================================
def compare_page(config):
    st.title("Compare & Analysis")

    options = [""] + [a["value"] for a in ALGORITHMS]

    def label(value):
        if not value:
            return "Select an algorithm"
        algorithm = algorithm_by_value(value)
        return f"{algorithm['label']} - {algorithm['complexity']}"

    col1, col2 = st.columns(2)
    with col1:
        first = st.selectbox("Algorithm 1", options, format_func=label, key="compare_first")
    with col2:
        second = st.selectbox("Algorithm 2", options, format_func=label, key="compare_second")

    if st.button("⚖️ Compare", type="primary"):
        try:
            with st.spinner("Comparing..."):
                st.session_state.comparison = simulate_comparison(first, second)
        except VisualizerError as e:
            show_error(e)

    result = st.session_state.get("comparison")
    if result:
        st.caption("Simulated figures for illustration; these are not measurements.")
        col1, col2 = st.columns(2)
        for column, n in ((col1, "1"), (col2, "2")):
            algorithm = result[f"algorithm{n}"]
            with column:
                with st.container(border=True):
                    st.subheader(algorithm["label"])
                    st.write(f"Time: {result[f'time{n}']:.2f} ms")
                    st.write(f"Memory: {result[f'memory{n}']:.1f} MB")
        st.success(f"Winner (simulated): {result['winner']['label']}")

    st.subheader("Reference performance (ms)")
    sizes = [row["size"] for row in PERFORMANCE_DATA]
    chart = {"size": sizes}
    for name in ("quicksort", "mergesort", "bubblesort"):
        chart[name] = [row[name] for row in PERFORMANCE_DATA]
    st.line_chart(chart, x="size")
    st.table(PERFORMANCE_DATA)

    st.subheader("Complexity growth")
    sizes_text = st.text_input("Input sizes", value="10,100,1000,10000", key="complexity_sizes")
    try:
        rows = complexity_data(parse_int_list(sizes_text))
    except VisualizerError as e:
        show_error(e)
        return
    chart = {key: [row[key] for row in rows] for key in rows[0]}
    st.line_chart(chart, x="n")
    st.table(rows)
