# default_styles.py
#
# AlgoViz standard style library.
# Every trace generator embeds DEFAULT_STYLES (merged with user overrides);
# the renderer and the web views look colours up here by state name.

DEFAULT_STYLES = {

  "elementStyles": {
    "normal":           {"fill": "#3B82F6", "stroke": "#2563EB", "strokeWidth": 1.5},
    "pivot":            {"fill": "#EF4444", "stroke": "#DC2626", "strokeWidth": 2.5},
    "comparing":        {"fill": "#EAB308", "stroke": "#CA8A04", "strokeWidth": 2},
    "swapping":         {"fill": "#A855F7", "stroke": "#9333EA", "strokeWidth": 2.5},
    "dividing":         {"fill": "#F97316", "stroke": "#EA580C", "strokeWidth": 2},
    "merging":          {"fill": "#A855F7", "stroke": "#9333EA", "strokeWidth": 2},
    "sorted":           {"fill": "#22C55E", "stroke": "#16A34A", "strokeWidth": 1.5},

    "idle_node":        {"fill": "#D1D5DB", "stroke": "#6B7280", "strokeWidth": 2},
    "current_node":     {"fill": "#EAB308", "stroke": "#CA8A04", "strokeWidth": 3},
    "visited_node":     {"fill": "#22C55E", "stroke": "#16A34A", "strokeWidth": 2},
    "queued_node":      {"fill": "#3B82F6", "stroke": "#2563EB", "strokeWidth": 2},
    "stacked_node":     {"fill": "#EF4444", "stroke": "#DC2626", "strokeWidth": 2},
    "in_path_node":     {"fill": "#3B82F6", "stroke": "#1D4ED8", "strokeWidth": 2.5},

    "normal_edge":      {"color": "#6B7280", "strokeWidth": 2},
    "in_path_edge":     {"color": "#3B82F6", "strokeWidth": 4},

    "list_node":        {"fill": "#DBEAFE", "stroke": "#3B82F6", "strokeWidth": 2},
    "highlight_node":   {"fill": "#FDE047", "stroke": "#CA8A04", "strokeWidth": 3},
    "last_operation":   {"fill": "#BBF7D0", "stroke": "#16A34A", "strokeWidth": 3}
  },

  "labels": {
    "normal": "Normal",
    "pivot": "Pivot",
    "comparing": "Comparing",
    "swapping": "Swapping",
    "dividing": "Dividing",
    "merging": "Merging",
    "sorted": "Sorted",
    "idle_node": "Unvisited",
    "current_node": "Current",
    "visited_node": "Visited",
    "queued_node": "In queue",
    "stacked_node": "In stack",
    "in_path_node": "Shortest path"
  },

  "animationStyles": {
      "default_move": {"type": "ease-in-out", "duration": 300}
  }
}


def fill_for(style_key, styles=None):
    """Fill colour for a style key, falling back to the 'normal' entry."""
    element_styles = (styles or DEFAULT_STYLES)["elementStyles"]
    entry = element_styles.get(style_key) or element_styles["normal"]
    return entry.get("fill", entry.get("color"))
