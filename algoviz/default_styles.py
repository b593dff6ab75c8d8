# default_styles.py
#
# Standard style library shipped in the initial frame of every trace.
# Keys of "elementStyles" are the node/edge statuses used in frame overlays,
# so a renderer can colour any frame from the trace alone.

DEFAULT_STYLES = {

  "elementStyles": {
    # list / tree node statuses
    "idle":             {"fill": "#FAFAFA", "stroke": "#616161", "strokeWidth": 2},
    "searching":        {"fill": "#FFECB3", "stroke": "#FFB300", "strokeWidth": 2},
    "found":            {"fill": "#C8E6C9", "stroke": "#4CAF50", "strokeWidth": 2.5},
    "processing":       {"fill": "#FFCDD2", "stroke": "#D32F2F", "strokeWidth": 2.5},
    "new":              {"fill": "#D1F2EB", "stroke": "#009688", "strokeWidth": 2.5},
    "runner":           {"fill": "#E1BEE7", "stroke": "#8E24AA", "strokeWidth": 2},
    "visited":          {"fill": "#E8EAF6", "stroke": "#3F51B5", "strokeWidth": 2},
    "comparing":        {"fill": "#BBDEFB", "stroke": "#1976D2", "strokeWidth": 2},

    # graph node statuses
    "start":            {"fill": "#FFF9C4", "stroke": "#FBC02D", "strokeWidth": 3},
    "queued":           {"fill": "#FFECB3", "stroke": "#FFB300", "strokeWidth": 2},
    "current_node":     {"fill": "#FFF9C4", "stroke": "#FBC02D", "strokeWidth": 3},

    # edges
    "normal_edge":      {"color": "#9E9E9E", "strokeWidth": 1.5},
    "traversed_edge":   {"color": "#7E57C2", "strokeWidth": 3},
    "in_path_edge":     {"color": "#66BB6A", "strokeWidth": 3.5}
  },

  "pointerStyles": {
    "head":   {"color": "#D32F2F", "shape": "arrow"},
    "tail":   {"color": "#1976D2", "shape": "arrow"},
    "slow":   {"color": "#FFB300", "shape": "arrow"},
    "fast":   {"color": "#8E24AA", "shape": "arrow"}
  },

  "animationStyles": {
      "default_move": {"type": "ease-in-out", "duration": 500}
  }
}
