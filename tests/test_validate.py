import json

import jsonschema
import pytest

from algoviz.dispatcher import dispatch_and_generate
from algoviz.validate import main, validate_trace, validate_trace_file

INTENTS = [
    {"algorithm_id": "quick_sort", "data_input": [64, 34, 25, 12, 22, 11, 90]},
    {"algorithm_id": "merge_sort", "data_input": "5,1,4,1"},
    {"algorithm_id": "bfs", "data_input": {"start_node": 0}},
    {"algorithm_id": "dfs", "data_input": {"start_node": 3}},
    {"algorithm_id": "dijkstra", "data_input": {"start_node": 0, "end_node": 5}},
]


@pytest.mark.parametrize("intent", INTENTS, ids=lambda intent: intent["algorithm_id"])
def test_generated_traces_conform_to_schema(intent):
    validate_trace(dispatch_and_generate(intent))


def test_schema_rejects_unknown_element_state():
    trace = dispatch_and_generate(INTENTS[0])
    trace["steps"][0]["data"][0]["state"] = "sparkling"
    with pytest.raises(jsonschema.ValidationError):
        validate_trace(trace)


def test_schema_rejects_trace_without_steps():
    trace = dispatch_and_generate(INTENTS[2])
    trace["steps"] = []
    with pytest.raises(jsonschema.ValidationError):
        validate_trace(trace)


def test_validate_trace_file(tmp_path):
    good = tmp_path / "bfs_trace.json"
    good.write_text(json.dumps(dispatch_and_generate(INTENTS[2])), encoding="utf-8")
    assert validate_trace_file(good)

    bad = tmp_path / "bad_trace.json"
    bad.write_text(json.dumps({"trace_version": "1.0"}), encoding="utf-8")
    assert not validate_trace_file(bad)

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    assert not validate_trace_file(broken)

    assert not validate_trace_file(tmp_path / "missing.json")


def test_validate_cli_exit_code(tmp_path):
    (tmp_path / "a.json").write_text(json.dumps(dispatch_and_generate(INTENTS[1])), encoding="utf-8")
    assert main([str(tmp_path)]) == 0
    (tmp_path / "b.json").write_text("[]", encoding="utf-8")
    assert main([str(tmp_path)]) == 1
