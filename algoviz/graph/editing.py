# editing.py
"""
Graph construction and editing.

Each call returns the same result envelope as the traversals, with a single
frame describing the edit; `committed` is True when the graph changed.
Edges are undirected, so a-b and b-a name the same edge.
"""
import copy
import logging

from ..errors import ErrorKind
from ..trace import failure_result, make_frame, make_result
from .common import FAMILY, normalize_graph
from .layout import circular_positions, generate_initial_graph, numbered_nodes

logger = logging.getLogger(__name__)


def _same_edge(edge, u, v):
    return {edge["source"], edge["target"]} == {u, v}


def _committed(name, operation, before, after, description, output=None):
    steps = [make_frame(after, description)]
    return make_result(name, FAMILY, operation, before, steps, after, committed=True, output=output)


def _rejected(name, operation, graph, error, description):
    logger.info(f"{operation} rejected: {description}")
    return failure_result(name, FAMILY, operation, graph, error, description)


def add_node(nodes, edges, node_id=None, value=None, x=None, y=None):
    """Append a node. Without an id the next free integer id is used; without coordinates it joins the circle."""
    graph = normalize_graph(nodes, edges)
    ids = [n["id"] for n in graph["nodes"]]
    if node_id is None:
        numeric = [int(i) for i in ids if str(i).isdigit()]
        node_id = str(max(numeric, default=0) + 1)
    if node_id in ids:
        return _rejected("Add Node", "ADD_NODE", graph, ErrorKind.DUPLICATE_VALUE,
                         f"Node {node_id} already exists")

    after = copy.deepcopy(graph)
    if x is None or y is None:
        x, y = circular_positions(len(ids) + 1)[-1]
    after["nodes"].append({"id": node_id, "value": value if value is not None else node_id,
                           "x": x, "y": y, "status": "idle"})
    return _committed("Add Node", "ADD_NODE", graph, after, f"Added node {node_id}", {"node_id": node_id})


def remove_node(nodes, edges, node_id):
    """Remove a node together with every edge touching it."""
    graph = normalize_graph(nodes, edges)
    if not any(n["id"] == node_id for n in graph["nodes"]):
        return _rejected("Remove Node", "REMOVE_NODE", graph, ErrorKind.VALUE_NOT_FOUND,
                         f"Node {node_id} does not exist")

    after = {
        "nodes": [n for n in graph["nodes"] if n["id"] != node_id],
        "edges": [e for e in graph["edges"] if node_id not in (e["source"], e["target"])],
    }
    dropped = len(graph["edges"]) - len(after["edges"])
    return _committed("Remove Node", "REMOVE_NODE", graph, after,
                      f"Removed node {node_id} and {dropped} incident edge{'s' if dropped != 1 else ''}",
                      {"node_id": node_id, "removed_edges": dropped})


def add_edge(nodes, edges, source, target, weight=None):
    name, operation = "Add Edge", "ADD_EDGE"
    graph = normalize_graph(nodes, edges)
    ids = {n["id"] for n in graph["nodes"]}
    missing = [i for i in (source, target) if i not in ids]
    if missing:
        return _rejected(name, operation, graph, ErrorKind.DANGLING_REFERENCE,
                         f"Node {missing[0]} does not exist")
    if source == target:
        return _rejected(name, operation, graph, ErrorKind.INVALID_INDEX, "Self-loops not allowed")
    if any(_same_edge(e, source, target) for e in graph["edges"]):
        return _rejected(name, operation, graph, ErrorKind.DUPLICATE_VALUE, "Edge already exists")

    after = copy.deepcopy(graph)
    edge = {"source": source, "target": target, "status": "idle"}
    if weight is not None:
        edge["weight"] = weight
    after["edges"].append(edge)
    return _committed(name, operation, graph, after, f"Added edge {source}-{target}")


def remove_edge(nodes, edges, source, target):
    graph = normalize_graph(nodes, edges)
    kept = [e for e in graph["edges"] if not _same_edge(e, source, target)]
    if len(kept) == len(graph["edges"]):
        return _rejected("Remove Edge", "REMOVE_EDGE", graph, ErrorKind.VALUE_NOT_FOUND,
                         f"Edge {source}-{target} does not exist")
    after = {"nodes": graph["nodes"], "edges": kept}
    return _committed("Remove Edge", "REMOVE_EDGE", graph, after, f"Removed edge {source}-{target}")


def reset_graph(nodes=None, edges=None, node_count=6):
    """Replace the graph with the default one."""
    graph = normalize_graph(nodes, edges)
    after = generate_initial_graph(node_count)
    return _committed("Reset Graph", "RESET", graph, after, f"Reset to the default graph with {node_count} nodes")


def create_custom_graph(node_count, edges, nodes=None, current_edges=None):
    """
    Build nodes "1".."node_count" on a circle with the given edges. Edge endpoints may be
    ints or strings; pairs outside the node range, self-loops and repeats are dropped.
    """
    graph = normalize_graph(nodes, current_edges)
    new_nodes = numbered_nodes(node_count)
    ids = {n["id"] for n in new_nodes}
    new_edges = []
    skipped = []
    for edge in edges:
        source, target = str(edge["source"]), str(edge["target"])
        if source not in ids or target not in ids or source == target \
                or any(_same_edge(e, source, target) for e in new_edges):
            skipped.append({"source": source, "target": target})
            continue
        new_edges.append({"source": source, "target": target, "status": "idle"})

    if skipped:
        logger.warning(f"create_custom_graph skipped {len(skipped)} edge(s): {skipped}")
    after = {"nodes": new_nodes, "edges": new_edges}
    return _committed("Create Graph", "CREATE", graph, after,
                      f"Created a graph with {node_count} nodes and {len(new_edges)} edges",
                      {"skipped_edges": skipped})
