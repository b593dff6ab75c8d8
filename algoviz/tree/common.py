# common.py
import logging

from ..errors import InvariantError
from ..trace import failure_result, make_frame, make_result
from .nodes import heap_parent, is_heap, node_height, unflatten
from .stats import tree_stats

logger = logging.getLogger(__name__)

FAMILY = "Tree"

TREE_TYPE_NAMES = {
    "BST": "binary search tree",
    "AVL": "AVL tree",
    "MAX_HEAP": "max heap",
    "MIN_HEAP": "min heap",
}


def dominates(parent_value, child_value, tree_type):
    """Heap order between a parent and a child value."""
    if tree_type == "MAX_HEAP":
        return parent_value >= child_value
    return parent_value <= child_value


def verify_tree(flat_nodes, tree_type):
    """Post-condition check of the discipline's invariant. Raises InvariantError on a breach."""
    if not flat_nodes:
        return True

    if is_heap(tree_type):
        for i in range(1, len(flat_nodes)):
            parent = flat_nodes[heap_parent(i)]
            if not dominates(parent["value"], flat_nodes[i]["value"], tree_type):
                raise InvariantError(f"Heap order broken between index {heap_parent(i)} and {i}")
        return True

    arena, root_id = unflatten(flat_nodes)

    def check(node_id, low, high):
        if node_id is None:
            return 0
        node = arena[node_id]
        value = node["value"]
        if (low is not None and value <= low) or (high is not None and value >= high):
            raise InvariantError(f"BST order broken at value {value}")
        left_height = check(node["left_id"], low, value)
        right_height = check(node["right_id"], value, high)
        if tree_type == "AVL" and abs(left_height - right_height) > 1:
            raise InvariantError(f"AVL balance broken at value {value}")
        return 1 + max(left_height, right_height)

    check(root_id, None, None)
    return True


def balance_factor(arena, node_id):
    if node_id is None:
        return 0
    node = arena[node_id]
    return node_height(arena, node["left_id"]) - node_height(arena, node["right_id"])


def tree_result(name, operation, tree_type, initial, steps, final_nodes, committed, output=None, error=None,
                pseudocode=None):
    if committed:
        verify_tree(final_nodes, tree_type)
    output = dict(output or {})
    output["stats"] = tree_stats(final_nodes, tree_type)
    logger.debug(f"{operation} on {tree_type}: {len(steps)} frames, committed={committed}")
    return make_result(name, FAMILY, operation, initial, steps, final_nodes,
                       committed=committed, error=error, output=output, pseudocode=pseudocode)


def tree_failure(name, operation, tree_type, nodes, error, description, output=None):
    result = failure_result(name, FAMILY, operation, nodes, error, description, output=output)
    result["output"]["stats"] = tree_stats(nodes, tree_type)
    return result


def clear_tree(nodes, tree_type="BST"):
    initial = [dict(n, status="idle") for n in (nodes or [])]
    steps = [make_frame([], f"Removed all {len(initial)} nodes" if initial else "Tree is already empty")]
    return tree_result("Clear Tree", "CLEAR", tree_type, initial, steps, [], committed=bool(initial),
                       output={"removed_count": len(initial)})
