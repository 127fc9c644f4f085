# merge_sort.py
import copy
import logging

from algoviz.sort.common import make_elements, make_step, values_of
from algoviz.trace import build_trace

logger = logging.getLogger(__name__)

ALGORITHM_INFO = {
    "id": "merge_sort",
    "name": "Merge Sort",
    "family": "Sorting",
}

VARIABLES_SCHEMA = [
    {"name": "l", "type": "pointer", "description": "Left bound"},
    {"name": "m", "type": "pointer", "description": "Midpoint"},
    {"name": "r", "type": "pointer", "description": "Right bound"},
    {"name": "k", "type": "pointer", "description": "Write position in the main array"},
]

PSEUDOCODE = [
    "function mergeSort(arr, l, r):",           # 1
    "  if l < r:",                              # 2
    "    m = (l + r) // 2",                     # 3
    "    mergeSort(arr, l, m)",                 # 4
    "    mergeSort(arr, m + 1, r)",             # 5
    "    merge(arr, l, m, r)",                  # 6
    "",                                         # 7
    "function merge(arr, l, m, r):",            # 8
    "  L = arr[l...m]; R = arr[m+1...r]",       # 9
    "  while L and R are not empty:",           # 10
    "    if L[i] <= R[j]: arr[k++] = L[i++]",   # 11
    "    else: arr[k++] = R[j++]",              # 12
    "  copy the rest of L, then the rest of R", # 13
]


def generate_merge_sort_trace(initial_array: list, styles=None):
    """
    Build the full snapshot list for top-down merge sort.

    Every split marks its range "dividing"; every merge marks its range
    "merging" and records a snapshot after each element is written back.
    Equal values are taken from the left half first, so the sort is stable.
    """
    arr = make_elements(initial_array)
    initial = make_step(arr, {}, 1, "Initial array")["data"]
    steps = []

    def merge(l, m, r):
        for idx in range(l, r + 1):
            arr[idx]["state"] = "merging"
        steps.append(make_step(arr, {"l": l, "m": m, "r": r}, 9, f"Merge [{l}..{m}] with [{m + 1}..{r}]"))

        left = copy.deepcopy(arr[l:m + 1])
        right = copy.deepcopy(arr[m + 1:r + 1])
        i = j = 0
        k = l

        while i < len(left) and j < len(right):
            if left[i]["value"] <= right[j]["value"]:
                arr[k] = copy.deepcopy(left[i])
                i += 1
                line = 11
            else:
                arr[k] = copy.deepcopy(right[j])
                j += 1
                line = 12
            arr[k]["state"] = "merging"
            steps.append(make_step(arr, {"l": l, "m": m, "r": r, "k": k}, line,
                                   f"Place {arr[k]['value']} at index {k}"))
            k += 1

        for rest in (left[i:], right[j:]):
            for element in rest:
                arr[k] = copy.deepcopy(element)
                arr[k]["state"] = "merging"
                steps.append(make_step(arr, {"l": l, "m": m, "r": r, "k": k}, 13,
                                       f"Place {arr[k]['value']} at index {k}"))
                k += 1

        for idx in range(l, r + 1):
            arr[idx]["state"] = "normal"
        steps.append(make_step(arr, {"l": l, "r": r}, 6, f"Range [{l}..{r}] merged"))

    def merge_sort(l, r):
        if l >= r:
            return
        for idx in range(l, r + 1):
            arr[idx]["state"] = "dividing"
        m = (l + r) // 2
        steps.append(make_step(arr, {"l": l, "m": m, "r": r}, 3, f"Split [{l}..{r}] at {m}"))

        merge_sort(l, m)
        merge_sort(m + 1, r)
        merge(l, m, r)

    merge_sort(0, len(arr) - 1)

    for element in arr:
        element["state"] = "sorted"
    steps.append(make_step(arr, {}, 1, "Merge Sort finished sorting the array"))

    logger.debug("merge sort: %d values -> %d steps", len(arr), len(steps))
    return build_trace(
        ALGORITHM_INFO, PSEUDOCODE, VARIABLES_SCHEMA, steps,
        result={"sorted": values_of(steps[-1])},
        initial=initial,
        styles=styles,
    )
