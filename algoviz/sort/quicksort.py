# quicksort.py
import logging

from algoviz.sort.common import make_elements, make_step, values_of
from algoviz.trace import build_trace

logger = logging.getLogger(__name__)

ALGORITHM_INFO = {
    "id": "quick_sort",
    "name": "Quick Sort (Lomuto Partition)",
    "family": "Sorting",
}

VARIABLES_SCHEMA = [
    {"name": "low", "type": "pointer", "description": "Start index of the current partition"},
    {"name": "high", "type": "pointer", "description": "End index of the current partition"},
    {"name": "pivot", "type": "value", "description": "Pivot value of the current partition"},
    {"name": "i", "type": "pointer", "description": "Boundary of the less-than-pivot region"},
    {"name": "j", "type": "pointer", "description": "Index of the element being scanned"},
]

PSEUDOCODE = [
    "function quickSort(array, low, high):",       # 1
    "  if low < high:",                            # 2
    "    pi = partition(array, low, high)",        # 3
    "    quickSort(array, low, pi - 1)",           # 4
    "    quickSort(array, pi + 1, high)",          # 5
    "",                                            # 6
    "function partition(array, low, high):",       # 7
    "  pivot = array[high]",                       # 8
    "  i = low - 1",                               # 9
    "  for j from low to high - 1:",               # 10
    "    if array[j] < pivot:",                    # 11
    "      i = i + 1",                             # 12
    "      swap(array[i], array[j])",              # 13
    "  swap(array[i+1], array[high])",             # 14
    "  return i + 1",                              # 15
]


def generate_quicksort_trace(initial_array: list, styles=None):
    """
    Build the full snapshot list for quicksort with the Lomuto partition scheme.

    One step is recorded for the pivot selection, for every comparison, before
    and after every swap, for the placement of each pivot, and a final step
    with every element sorted. The pivot's final index stays "sorted" for the
    rest of the run. Raises InvalidInputError on an empty array.
    """
    arr = make_elements(initial_array)
    initial = make_step(arr, {}, 1, "Initial array")["data"]
    steps = []

    def meta(low, high, pivot="-", i="-", j="-"):
        return {"low": low, "high": high, "pivot": pivot, "i": i, "j": j}

    def partition(low, high):
        pivot = arr[high]["value"]
        arr[high]["state"] = "pivot"
        steps.append(make_step(arr, meta(low, high, pivot), 8,
                               f"Pivot selected: {pivot} (index {high})"))

        i = low - 1
        for j in range(low, high):
            arr[j]["state"] = "comparing"
            steps.append(make_step(arr, meta(low, high, pivot, i, j), 11,
                                   f"Compare {arr[j]['value']} with pivot {pivot}"))

            if arr[j]["value"] < pivot:
                i += 1
                arr[i]["state"] = "swapping"
                arr[j]["state"] = "swapping"
                steps.append(make_step(arr, meta(low, high, pivot, i, j), 12,
                                       f"{arr[j]['value']} < {pivot}: swap index {i} and {j}"))

                arr[i], arr[j] = arr[j], arr[i]
                steps.append(make_step(arr, meta(low, high, pivot, i, j), 13,
                                       f"Swapped index {i} and {j}"))
                arr[i]["state"] = "normal"

            arr[j]["state"] = "normal"

        pi = i + 1
        arr[pi]["state"] = "swapping"
        arr[high]["state"] = "swapping"
        steps.append(make_step(arr, meta(low, high, pivot, i), 14,
                               f"Move pivot {pivot} to index {pi}"))

        arr[pi], arr[high] = arr[high], arr[pi]
        arr[high]["state"] = "normal"
        arr[pi]["state"] = "sorted"
        steps.append(make_step(arr, meta(low, high, pivot, i), 15,
                               f"Pivot {pivot} is in its final position {pi}"))
        return pi

    # Explicit call stack instead of recursion; sorted input degrades to depth n.
    call_stack = [(0, len(arr) - 1)]
    while call_stack:
        low, high = call_stack.pop()
        if low >= high:
            continue
        pi = partition(low, high)
        # LIFO: the left sub-range is processed first
        call_stack.append((pi + 1, high))
        call_stack.append((low, pi - 1))

    for element in arr:
        element["state"] = "sorted"
    steps.append(make_step(arr, {}, 1, "Quick Sort finished sorting the array"))

    logger.debug("quicksort: %d values -> %d steps", len(arr), len(steps))
    return build_trace(
        ALGORITHM_INFO, PSEUDOCODE, VARIABLES_SCHEMA, steps,
        result={"sorted": values_of(steps[-1])},
        initial=initial,
        styles=styles,
    )
