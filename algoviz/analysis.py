# analysis.py
#
# Data behind the Compare & Analysis page. The performance table is static
# reference data and the head-to-head comparison is simulated; neither is a
# measurement of this machine.
import random

import numpy as np

from algoviz.errors import InvalidInputError

ALGORITHMS = [
    {"value": "quicksort", "label": "Quick Sort", "complexity": "O(n log n)"},
    {"value": "mergesort", "label": "Merge Sort", "complexity": "O(n log n)"},
    {"value": "bubblesort", "label": "Bubble Sort", "complexity": "O(n²)"},
    {"value": "bfs", "label": "BFS", "complexity": "O(V + E)"},
    {"value": "dfs", "label": "DFS", "complexity": "O(V + E)"},
    {"value": "dijkstra", "label": "Dijkstra", "complexity": "O((V + E) log V)"},
]

# reference running times in ms
PERFORMANCE_DATA = [
    {"size": 100, "quicksort": 0.1, "mergesort": 0.15, "bubblesort": 1.2},
    {"size": 500, "quicksort": 0.8, "mergesort": 1.1, "bubblesort": 15.5},
    {"size": 1000, "quicksort": 1.8, "mergesort": 2.4, "bubblesort": 62.3},
    {"size": 5000, "quicksort": 12.1, "mergesort": 15.8, "bubblesort": 1250},
    {"size": 10000, "quicksort": 28.5, "mergesort": 35.2, "bubblesort": 5000},
]

COMPLEXITY_SIZES = (10, 100, 1000, 10000)


def algorithm_by_value(value):
    for algorithm in ALGORITHMS:
        if algorithm["value"] == value:
            return algorithm
    raise InvalidInputError(f"Unknown algorithm '{value}'")


def complexity_data(sizes=COMPLEXITY_SIZES) -> list:
    """Operation counts for O(n), O(n log n) and O(n²), rounded to integers."""
    n = np.asarray(sizes, dtype=float)
    if n.size == 0 or np.any(n < 1):
        raise InvalidInputError("Sizes must be positive integers")
    linear = n
    linearithmic = np.rint(n * np.log2(n))
    quadratic = n ** 2
    return [
        {"n": int(size), "O(n)": int(a), "O(n log n)": int(b), "O(n²)": int(c)}
        for size, a, b, c in zip(n, linear, linearithmic, quadratic)
    ]


def simulate_comparison(first, second, rng=None) -> dict:
    """
    Simulated head-to-head: random time (ms) and memory (MB) figures and a
    random winner. Both algorithms must be chosen and must differ.
    """
    if not first or not second:
        raise InvalidInputError("Select two algorithms to compare")
    if first == second:
        raise InvalidInputError("Select two different algorithms")
    alg1 = algorithm_by_value(first)
    alg2 = algorithm_by_value(second)

    rng = rng or random.Random()
    return {
        "simulated": True,
        "algorithm1": alg1,
        "algorithm2": alg2,
        "winner": alg1 if rng.random() > 0.5 else alg2,
        "time1": round(rng.random() * 100, 2),
        "time2": round(rng.random() * 100, 2),
        "memory1": round(rng.random() * 50, 1),
        "memory2": round(rng.random() * 50, 1),
    }
