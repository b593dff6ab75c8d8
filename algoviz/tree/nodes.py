# nodes.py
"""
Tree representations.

FlatTreeNode (the snapshot form carried in traces):
    {"id", "value", "left_id", "right_id", "parent_id", "height", "level", "status"}
listed in breadth-first order.

BST/AVL operations work on an arena: a dict of id -> {"id", "value", "left_id",
"right_id", "height"} plus the root id. Parents are never stored in the arena;
flatten() derives them, so there are no ownership cycles to keep consistent.

Heaps are the flat list itself in array order; their links are recomputed
from index arithmetic by link_heap().
"""
import copy
import uuid
from collections import deque

from ..errors import InvariantError

HEAP_TYPES = ("MAX_HEAP", "MIN_HEAP")


def is_heap(tree_type):
    return tree_type in HEAP_TYPES


def new_node_id():
    return uuid.uuid4().hex[:9]


def create_arena_node(value, node_id=None):
    return {"id": node_id or new_node_id(), "value": value, "left_id": None, "right_id": None, "height": 1}


def node_height(arena, node_id):
    """Stored AVL height; 0 for a missing child."""
    return arena[node_id]["height"] if node_id is not None else 0


def subtree_height(arena, node_id):
    """Height recomputed from the structure itself."""
    if node_id is None:
        return 0
    node = arena[node_id]
    return 1 + max(subtree_height(arena, node["left_id"]), subtree_height(arena, node["right_id"]))


def unflatten(flat_nodes):
    """
    Build an arena from a flat node list. Returns (arena, root_id).
    Raises InvariantError if the nodes do not form exactly one tree.
    """
    if not flat_nodes:
        return {}, None

    arena = {}
    for n in flat_nodes:
        if n["id"] in arena:
            raise InvariantError(f"Duplicate tree node id {n['id']}")
        arena[n["id"]] = {
            "id": n["id"],
            "value": n["value"],
            "left_id": n.get("left_id"),
            "right_id": n.get("right_id"),
            "height": n.get("height", 1),
        }

    child_ids = set()
    for node in arena.values():
        for child in (node["left_id"], node["right_id"]):
            if child is None:
                continue
            if child not in arena:
                raise InvariantError(f"Node {node['id']} references missing child {child}")
            if child in child_ids:
                raise InvariantError(f"Node {child} has more than one parent")
            child_ids.add(child)

    roots = [node_id for node_id in arena if node_id not in child_ids]
    if len(roots) != 1:
        raise InvariantError(f"Expected exactly one root, found {len(roots)}")
    root_id = roots[0]

    # Every node must be reachable from the root exactly once
    seen = set()
    stack = [root_id]
    while stack:
        node_id = stack.pop()
        if node_id in seen:
            raise InvariantError(f"Cycle detected at node {node_id}")
        seen.add(node_id)
        node = arena[node_id]
        stack.extend(c for c in (node["left_id"], node["right_id"]) if c is not None)
    if len(seen) != len(arena):
        raise InvariantError("Tree contains nodes unreachable from the root")

    return arena, root_id


def flatten(arena, root_id):
    """Breadth-first flat list with derived parent, level and height."""
    if root_id is None:
        return []

    result = []
    queue = deque([(root_id, None, 0)])
    while queue:
        node_id, parent_id, level = queue.popleft()
        node = arena[node_id]
        result.append({
            "id": node["id"],
            "value": node["value"],
            "left_id": node["left_id"],
            "right_id": node["right_id"],
            "parent_id": parent_id,
            "height": subtree_height(arena, node_id),
            "level": level,
            "status": "idle",
        })
        if node["left_id"] is not None:
            queue.append((node["left_id"], node_id, level + 1))
        if node["right_id"] is not None:
            queue.append((node["right_id"], node_id, level + 1))
    return result


def heap_parent(i):
    return (i - 1) // 2


def heap_left(i):
    return 2 * i + 1


def heap_right(i):
    return 2 * i + 2


def _heap_height(i, size):
    # The leftmost path is the deepest one in a complete binary tree
    if i >= size:
        return 0
    return 1 + _heap_height(heap_left(i), size)


def heap_level(i):
    return (i + 1).bit_length() - 1


def link_heap(entries):
    """Rebuild heap snapshot nodes from (id, value) slots in array order."""
    size = len(entries)
    linked = []
    for i, entry in enumerate(entries):
        left, right = heap_left(i), heap_right(i)
        linked.append({
            "id": entry["id"],
            "value": entry["value"],
            "left_id": entries[left]["id"] if left < size else None,
            "right_id": entries[right]["id"] if right < size else None,
            "parent_id": entries[heap_parent(i)]["id"] if i > 0 else None,
            "height": _heap_height(i, size),
            "level": heap_level(i),
            "status": "idle",
        })
    return linked


def copy_flat(flat_nodes):
    return [dict(copy.deepcopy(n), status="idle") for n in (flat_nodes or [])]
