# adjacency.py
import logging

logger = logging.getLogger(__name__)


def id_sort_key(node_id):
    """Numeric ids ascend by value; anything non-numeric sorts after them, lexicographically."""
    try:
        return (0, float(node_id), "")
    except (TypeError, ValueError):
        return (1, 0.0, str(node_id))


def build_adjacency(nodes, edges):
    """
    Undirected adjacency {id: [neighbour ids]} with each list sorted by id_sort_key.

    Returns (adjacency, ignored_edges). Edges naming an unknown node are dropped
    and reported; self-loops and repeated pairs are skipped silently.
    """
    adjacency = {n["id"]: [] for n in nodes}
    ignored = []
    seen = set()

    for edge in edges:
        u, v = edge.get("source"), edge.get("target")
        if u not in adjacency or v not in adjacency:
            logger.warning(f"Ignoring edge {u}-{v}: endpoint not in the graph")
            ignored.append({"source": u, "target": v})
            continue
        if u == v:
            continue
        pair = frozenset((u, v))
        if pair in seen:
            continue
        seen.add(pair)
        adjacency[u].append(v)
        adjacency[v].append(u)

    for node_id in adjacency:
        adjacency[node_id].sort(key=id_sort_key)
    return adjacency, ignored
