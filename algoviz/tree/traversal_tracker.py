# traversal_tracker.py
"""
In-order, pre-order, post-order and level-order traces.

Visited statuses accumulate across frames, and every frame's meta carries
the visiting order so far. Heaps are traversed through their index links.
"""
import logging
from collections import deque

from ..trace import make_frame
from .common import tree_result
from .nodes import copy_flat, is_heap, link_heap

logger = logging.getLogger(__name__)

ORDER_NAMES = {
    "INORDER": "In-order",
    "PREORDER": "Pre-order",
    "POSTORDER": "Post-order",
    "LEVEL_ORDER": "Level-order",
}


def _children_map(flat_nodes):
    return {n["id"]: n for n in flat_nodes}


def _visit_sequence(flat_nodes, operation):
    """Ids in the order the traversal visits them."""
    if not flat_nodes:
        return []
    by_id = _children_map(flat_nodes)
    root_id = flat_nodes[0]["id"]
    order = []

    if operation == "LEVEL_ORDER":
        queue = deque([root_id])
        while queue:
            node_id = queue.popleft()
            order.append(node_id)
            node = by_id[node_id]
            queue.extend(c for c in (node["left_id"], node["right_id"]) if c is not None)
        return order

    def walk(node_id):
        if node_id is None:
            return
        node = by_id[node_id]
        if operation == "PREORDER":
            order.append(node_id)
        walk(node["left_id"])
        if operation == "INORDER":
            order.append(node_id)
        walk(node["right_id"])
        if operation == "POSTORDER":
            order.append(node_id)

    walk(root_id)
    return order


def traverse(nodes, operation, tree_type="BST"):
    name = f"{ORDER_NAMES[operation]} Traversal"
    initial = copy_flat(nodes)
    # Heap snapshots are rebuilt so the index links are authoritative
    structure = link_heap(initial) if is_heap(tree_type) else initial
    by_id = _children_map(structure)

    if not structure:
        steps = [make_frame(structure, "Tree is empty. Nothing to traverse", meta={"path": []})]
        return tree_result(name, operation, tree_type, initial, steps, initial, committed=False,
                           output={"order": [], "order_ids": []})

    steps = []
    statuses = {}
    path = []
    for node_id in _visit_sequence(structure, operation):
        path.append(by_id[node_id]["value"])
        frame_statuses = dict(statuses)
        frame_statuses[node_id] = "current_node"
        steps.append(make_frame(structure, f"Visit {by_id[node_id]['value']}", frame_statuses,
                                meta={"path": list(path)}))
        statuses[node_id] = "visited"

    steps.append(make_frame(structure, f"{ORDER_NAMES[operation]} traversal: {', '.join(str(v) for v in path)}",
                            statuses, meta={"path": list(path)}))
    logger.debug(f"{operation} visited {len(path)} nodes")
    return tree_result(name, operation, tree_type, initial, steps, initial, committed=False,
                       output={"order": path, "order_ids": _visit_sequence(structure, operation)})
