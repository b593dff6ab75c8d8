# common.py
import copy
import logging

from ..errors import ErrorKind
from ..trace import make_result
from .adjacency import build_adjacency

logger = logging.getLogger(__name__)

FAMILY = "Graph"


def normalize_graph(nodes, edges):
    """Deep copies of the graph with every status reset to idle."""
    return {
        "nodes": [dict(copy.deepcopy(n), status="idle") for n in (nodes or [])],
        "edges": [dict(copy.deepcopy(e), status="idle") for e in (edges or [])],
    }


def make_step(visited, frontier, current, description, code_highlight, edges=None, **extra):
    """One TraversalStep. `frontier` is the queue, stack or priority list as display strings."""
    step = {
        "visited": list(visited),
        "frontier": [str(f) for f in frontier],
        "current": current,
        "highlighted_edges": [{"source": s, "target": t} for s, t in (edges or [])],
        "description": description,
        "code_highlight": code_highlight,
    }
    for key, value in extra.items():
        step[key] = copy.deepcopy(value)
    return step


class Traversal:
    """Common setup for a graph traversal: normalised input, adjacency and the start check."""

    def __init__(self, name, operation, nodes, edges, start_id, pseudocode):
        self.name = name
        self.operation = operation
        self.graph = normalize_graph(nodes, edges)
        self.adjacency, self.ignored = build_adjacency(self.graph["nodes"], self.graph["edges"])
        self.start_id = start_id
        self.pseudocode = pseudocode
        self.steps = []

    @property
    def start_valid(self):
        return self.start_id in self.adjacency

    def add(self, *args, **kwargs):
        self.steps.append(make_step(*args, **kwargs))

    def result(self, output=None, error=None, styles=None):
        output = dict(output or {})
        output["ignored_edges"] = self.ignored
        if self.ignored:
            output["dangling"] = ErrorKind.DANGLING_REFERENCE.value
        logger.debug(f"{self.operation} from {self.start_id}: {len(self.steps)} frames")
        return make_result(self.name, FAMILY, self.operation, self.graph, self.steps, self.graph,
                           committed=False, error=error, output=output,
                           pseudocode=self.pseudocode, styles=styles)

    def missing_start(self):
        self.steps = [make_step([], [], None, f"Start node {self.start_id} does not exist in the graph", 1)]
        return self.result(error=ErrorKind.VALUE_NOT_FOUND)
