from algoviz.sort.quicksort import generate_quicksort_trace
from algoviz.sort.merge_sort import generate_merge_sort_trace

__all__ = ["generate_quicksort_trace", "generate_merge_sort_trace"]
