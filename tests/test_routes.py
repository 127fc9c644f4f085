import pytest

from algoviz.web.routes import CATALOGS, FEATURES, NOT_FOUND, ROUTES, catalog_entry, resolve_route


@pytest.mark.parametrize("path, page", [
    ("/", "home"),
    ("", "home"),
    (None, "home"),
    ("/structures", "structures"),
    ("sorting", "sorting"),
    ("/Search/", "search"),
    ("/compare", "compare"),
    ("/missing", NOT_FOUND),
    ("/sorting/extra", NOT_FOUND),
])
def test_resolve_route(path, page):
    assert resolve_route(path) == page


def test_features_link_to_sections():
    assert [feature["path"] for feature in FEATURES] == ["/structures", "/sorting", "/search", "/compare"]
    assert all(feature["path"] in ROUTES for feature in FEATURES)


def test_catalog_entries():
    assert [entry["id"] for entry in CATALOGS["structures"]] == [
        "linked-list", "doubly-linked-list", "binary-tree", "stack", "queue",
    ]
    assert catalog_entry("sorting", "merge-sort")["algorithm_id"] == "merge_sort"
    assert catalog_entry("search", "dijkstra")["title"] == "Dijkstra's Algorithm"
    assert catalog_entry("search", "astar") is None
    assert catalog_entry("nowhere", "bfs") is None
    assert catalog_entry("sorting", None) is None
