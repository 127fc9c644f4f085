import json

import pytest

from algoviz.dispatcher import ALGORITHM_DISPATCH_TABLE, dispatch_and_generate, main
from algoviz.errors import EmptyStructureError, InvalidInputError


def test_dispatch_table_ids():
    assert set(ALGORITHM_DISPATCH_TABLE) == {"quick_sort", "merge_sort", "bfs", "dfs", "dijkstra"}


def test_sort_input_as_string_or_list():
    from_text = dispatch_and_generate({"algorithm_id": "merge_sort", "data_input": "3, x, 1, 2"})
    from_list = dispatch_and_generate({"algorithm_id": "merge_sort", "data_input": [3, 1, 2]})
    assert from_text["result"]["sorted"] == [1, 2, 3]
    assert from_list["result"]["sorted"] == [1, 2, 3]


def test_sort_list_entries_are_parsed_leniently():
    trace = dispatch_and_generate({"algorithm_id": "quick_sort", "data_input": [3, "x", 1, "7abc", None]})
    assert trace["result"]["sorted"] == [1, 3, 7]
    with pytest.raises(InvalidInputError, match="empty"):
        dispatch_and_generate({"algorithm_id": "quick_sort", "data_input": ["a", "b"]})
    with pytest.raises(InvalidInputError):
        dispatch_and_generate({"algorithm_id": "merge_sort", "data_input": {"values": [1, 2]}})


def test_malformed_graph_input_is_rejected():
    with pytest.raises(InvalidInputError):
        dispatch_and_generate({"algorithm_id": "bfs", "data_input": [1, 2]})
    with pytest.raises(InvalidInputError, match="start_node"):
        dispatch_and_generate({"algorithm_id": "dfs", "data_input": {"start_node": "abc"}})
    with pytest.raises(InvalidInputError, match="end_node"):
        dispatch_and_generate({"algorithm_id": "dijkstra", "data_input": {"end_node": [5]}})
    with pytest.raises(InvalidInputError):
        dispatch_and_generate({"algorithm_id": "bfs", "data_input": {"graph": "A-B"}})
    with pytest.raises(InvalidInputError):
        dispatch_and_generate({
            "algorithm_id": "bfs",
            "data_input": {"graph": {"nodes": [{"id": 0, "label": "A"}], "adjacency": {"zero": []}}},
        })


def test_graph_node_ids_accept_numeric_strings():
    trace = dispatch_and_generate({"algorithm_id": "dijkstra", "data_input": {"start_node": "0", "end_node": "5"}})
    assert trace["result"]["path"] == ["A", "C", "F"]


def test_graph_defaults_to_demo_graph():
    trace = dispatch_and_generate({"algorithm_id": "dijkstra"})
    assert trace["result"]["path"] == ["A", "C", "F"]
    trace = dispatch_and_generate({"algorithm_id": "bfs", "data_input": {}})
    assert trace["result"]["start"] == 0


def test_custom_graph_with_string_keys():
    intent = json.loads(json.dumps({
        "algorithm_id": "dijkstra",
        "data_input": {
            "graph": {
                "nodes": [{"id": 0, "label": "S"}, {"id": 1, "label": "M"}, {"id": 2, "label": "T"}],
                "adjacency": {"0": [[1, 1], [2, 5]], "1": [[0, 1], [2, 1]], "2": [[0, 5], [1, 1]]},
            },
            "start_node": 0,
            "end_node": 2,
        },
    }))
    trace = dispatch_and_generate(intent)
    assert trace["result"]["path"] == ["S", "M", "T"]
    assert trace["result"]["distance"] == 2


def test_style_overrides_reach_the_trace():
    trace = dispatch_and_generate({
        "algorithm_id": "bfs",
        "style_overrides": {"elementStyles": {"visited_node": {"fill": "#123456"}}},
    })
    assert trace["styles"]["elementStyles"]["visited_node"]["fill"] == "#123456"


def test_dispatch_errors():
    with pytest.raises(InvalidInputError, match="Unknown algorithm"):
        dispatch_and_generate({"algorithm_id": "bogo_sort", "data_input": [1]})
    with pytest.raises(InvalidInputError, match="Missing"):
        dispatch_and_generate({"algorithm_id": "quick_sort"})
    with pytest.raises(InvalidInputError):
        dispatch_and_generate({"algorithm_id": "quick_sort", "data_input": "a,b"})
    with pytest.raises(InvalidInputError):
        dispatch_and_generate({"algorithm_id": "bfs", "data_input": {"start_node": 9}})
    with pytest.raises(EmptyStructureError):
        dispatch_and_generate({"algorithm_id": "dfs", "data_input": {"graph": {"nodes": [], "adjacency": {}}}})


def test_cli_writes_trace(tmp_path):
    intent_file = tmp_path / "intent.json"
    intent_file.write_text(json.dumps({"algorithm_id": "dfs", "data_input": {"start_node": 0}}), encoding="utf-8")
    assert main([str(intent_file), "--output-dir", str(tmp_path / "out")]) == 0
    trace = json.loads((tmp_path / "out" / "dfs_trace.json").read_text(encoding="utf-8"))
    assert trace["result"]["visit_order"] == ["A", "B", "D", "E", "F", "C"]


def test_cli_reports_bad_intent(tmp_path):
    intent_file = tmp_path / "intent.json"
    intent_file.write_text(json.dumps({"algorithm_id": "nope", "data_input": []}), encoding="utf-8")
    assert main([str(intent_file), "--output-dir", str(tmp_path)]) == 1
    assert not list(tmp_path.glob("*_trace.json"))


def test_cli_skips_non_numeric_list_entries(tmp_path):
    intent_file = tmp_path / "intent.json"
    intent_file.write_text(json.dumps({"algorithm_id": "quick_sort", "data_input": [2, "abc", 1]}), encoding="utf-8")
    assert main([str(intent_file), "--output-dir", str(tmp_path / "out")]) == 0
    trace = json.loads((tmp_path / "out" / "quick_sort_trace.json").read_text(encoding="utf-8"))
    assert trace["result"]["sorted"] == [1, 2]


def test_cli_reports_malformed_graph_input(tmp_path):
    intent_file = tmp_path / "intent.json"
    intent_file.write_text(json.dumps({"algorithm_id": "bfs", "data_input": [1, 2]}), encoding="utf-8")
    assert main([str(intent_file), "--output-dir", str(tmp_path)]) == 1
    assert not list(tmp_path.glob("*_trace.json"))
