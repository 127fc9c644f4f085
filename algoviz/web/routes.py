# routes.py
#
# Page table for the web shell. Kept free of Streamlit so the routing and the
# catalog content can be tested on their own.

HOME = "home"
NOT_FOUND = "not_found"

ROUTES = {
    "/": HOME,
    "/structures": "structures",
    "/sorting": "sorting",
    "/search": "search",
    "/compare": "compare",
}

FEATURES = [
    {
        "title": "Data Structures",
        "description": "Explore linked lists, binary trees, stacks and queues visually",
        "path": "/structures",
    },
    {
        "title": "Sorting Algorithms",
        "description": "Watch Quick Sort and Merge Sort step by step",
        "path": "/sorting",
    },
    {
        "title": "Search Algorithms",
        "description": "Learn BFS, DFS and graph algorithms interactively",
        "path": "/search",
    },
    {
        "title": "Compare & Analysis",
        "description": "Compare algorithm efficiency and analyse time complexity",
        "path": "/compare",
    },
]

STRUCTURES_CATALOG = [
    {"id": "linked-list", "title": "Linked List",
     "description": "Linear structure where every element points to the next one"},
    {"id": "doubly-linked-list", "title": "Doubly Linked List",
     "description": "List where every node references both the previous and the next node"},
    {"id": "binary-tree", "title": "Binary Search Tree",
     "description": "Hierarchical structure where every node has at most two children"},
    {"id": "stack", "title": "Stack",
     "description": "LIFO structure: last in, first out"},
    {"id": "queue", "title": "Queue",
     "description": "FIFO structure: first in, first out"},
]

SORTING_CATALOG = [
    {"id": "quick-sort", "algorithm_id": "quick_sort", "title": "Quick Sort",
     "description": "Efficient divide-and-conquer sort around a pivot"},
    {"id": "merge-sort", "algorithm_id": "merge_sort", "title": "Merge Sort",
     "description": "Stable sort that splits the array and merges the halves in order"},
]

SEARCH_CATALOG = [
    {"id": "bfs", "title": "Breadth-First Search (BFS)",
     "description": "Explores level by level; finds shortest paths in unweighted graphs"},
    {"id": "dfs", "title": "Depth-First Search (DFS)",
     "description": "Goes as deep as possible before backtracking"},
    {"id": "dijkstra", "title": "Dijkstra's Algorithm",
     "description": "Finds the shortest path in graphs with non-negative weights"},
]

CATALOGS = {
    "structures": STRUCTURES_CATALOG,
    "sorting": SORTING_CATALOG,
    "search": SEARCH_CATALOG,
}


def normalize_path(path) -> str:
    if not path:
        return "/"
    path = "/" + str(path).strip().strip("/")
    return path.lower()


def resolve_route(path) -> str:
    """Page name for a path; unknown paths resolve to the not-found page."""
    return ROUTES.get(normalize_path(path), NOT_FOUND)


def catalog_entry(section, entry_id):
    """Catalog entry by id, or None when the section or id is unknown."""
    for entry in CATALOGS.get(section, []):
        if entry["id"] == entry_id:
            return entry
    return None
