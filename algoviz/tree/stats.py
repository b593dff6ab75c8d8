# stats.py
import math

from .nodes import is_heap, unflatten

EMPTY_STATS = {"node_count": 0, "height": 0, "is_balanced": True, "min_value": None, "max_value": None}


def count_nodes(arena, node_id):
    if node_id is None:
        return 0
    node = arena[node_id]
    return 1 + count_nodes(arena, node["left_id"]) + count_nodes(arena, node["right_id"])


def tree_height(arena, node_id):
    if node_id is None:
        return 0
    node = arena[node_id]
    return 1 + max(tree_height(arena, node["left_id"]), tree_height(arena, node["right_id"]))


def is_balanced(arena, node_id):
    """Naive check: recompute both subtree heights at every node."""
    if node_id is None:
        return True
    node = arena[node_id]
    diff = abs(tree_height(arena, node["left_id"]) - tree_height(arena, node["right_id"]))
    return diff <= 1 and is_balanced(arena, node["left_id"]) and is_balanced(arena, node["right_id"])


def leftmost(arena, node_id):
    while arena[node_id]["left_id"] is not None:
        node_id = arena[node_id]["left_id"]
    return node_id


def rightmost(arena, node_id):
    while arena[node_id]["right_id"] is not None:
        node_id = arena[node_id]["right_id"]
    return node_id


def tree_stats(flat_nodes, tree_type="BST"):
    if not flat_nodes:
        return dict(EMPTY_STATS)

    if is_heap(tree_type):
        values = [n["value"] for n in flat_nodes]
        return {
            "node_count": len(values),
            "height": int(math.floor(math.log2(len(values)))) + 1,
            "is_balanced": True,
            "min_value": min(values),
            "max_value": max(values),
        }

    arena, root_id = unflatten(flat_nodes)
    return {
        "node_count": count_nodes(arena, root_id),
        "height": tree_height(arena, root_id),
        "is_balanced": is_balanced(arena, root_id),
        "min_value": arena[leftmost(arena, root_id)]["value"],
        "max_value": arena[rightmost(arena, root_id)]["value"],
    }
