import random

import pytest

from algoviz.analysis import ALGORITHMS, PERFORMANCE_DATA, complexity_data, simulate_comparison
from algoviz.errors import InvalidInputError


def test_complexity_data_defaults():
    assert complexity_data() == [
        {"n": 10, "O(n)": 10, "O(n log n)": 33, "O(n²)": 100},
        {"n": 100, "O(n)": 100, "O(n log n)": 664, "O(n²)": 10000},
        {"n": 1000, "O(n)": 1000, "O(n log n)": 9966, "O(n²)": 1000000},
        {"n": 10000, "O(n)": 10000, "O(n log n)": 132877, "O(n²)": 100000000},
    ]


def test_complexity_data_rejects_bad_sizes():
    with pytest.raises(InvalidInputError):
        complexity_data([])
    with pytest.raises(InvalidInputError):
        complexity_data([0, 10])


def test_performance_table():
    assert [row["size"] for row in PERFORMANCE_DATA] == [100, 500, 1000, 5000, 10000]
    assert all(row["quicksort"] < row["bubblesort"] for row in PERFORMANCE_DATA)


def test_simulated_comparison():
    result = simulate_comparison("quicksort", "bfs", rng=random.Random(3))
    assert result["simulated"]
    assert result["winner"] in (result["algorithm1"], result["algorithm2"])
    assert 0 <= result["time1"] <= 100 and 0 <= result["time2"] <= 100
    assert 0 <= result["memory1"] <= 50 and 0 <= result["memory2"] <= 50


@pytest.mark.parametrize("first, second", [("quicksort", "quicksort"), ("", "dfs"), ("dfs", None)])
def test_comparison_needs_two_different_algorithms(first, second):
    with pytest.raises(InvalidInputError):
        simulate_comparison(first, second)


def test_comparison_rejects_unknown_algorithm():
    with pytest.raises(InvalidInputError):
        simulate_comparison("quicksort", "timsort")


def test_catalogue_has_complexity_labels():
    assert {a["value"]: a["complexity"] for a in ALGORITHMS}["dijkstra"] == "O((V + E) log V)"
