# bst_tracker.py
"""
Trace generators for binary search trees and AVL trees.

Operations run on an arena copy of the flat snapshot. Child links are
re-pointed the moment a subtree root changes (insertion, removal, rotation),
so every recorded frame is a consistent snapshot of the whole tree.
"""
import logging

from ..errors import ErrorKind
from ..trace import make_frame
from .common import TREE_TYPE_NAMES, balance_factor, tree_failure, tree_result
from .nodes import copy_flat, create_arena_node, flatten, node_height, subtree_height, unflatten
from .stats import leftmost, rightmost

logger = logging.getLogger(__name__)

PSEUDOCODE = {
    "INSERT": [
        "function insert(node, value):",                        # 1
        "  if node is null: return new Node(value)",            # 2
        "  if value < node.value: node.left = insert(node.left, value)",    # 3
        "  else if value > node.value: node.right = insert(node.right, value)",  # 4
        "  else: return node  // duplicate",                    # 5
        "  update height, rebalance if AVL",                    # 6
    ],
    "DELETE": [
        "function delete(node, value):",                        # 1
        "  if value < node.value: node.left = delete(node.left, value)",    # 2
        "  else if value > node.value: node.right = delete(node.right, value)",  # 3
        "  else if node has at most one child: return that child",  # 4
        "  else: node.value = min(node.right).value",           # 5
        "        node.right = delete(node.right, node.value)",  # 6
        "  update height, rebalance if AVL",                    # 7
    ],
}


class _TreeWork:
    """Mutable working copy of a BST/AVL tree plus the frames recorded so far."""

    def __init__(self, flat_nodes, tree_type):
        self.tree_type = tree_type
        self.arena, self.root_id = unflatten(copy_flat(flat_nodes))
        for node_id in self.arena:
            self.arena[node_id]["height"] = subtree_height(self.arena, node_id)
        self.steps = []

    @property
    def is_avl(self):
        return self.tree_type == "AVL"

    def snapshot(self):
        return flatten(self.arena, self.root_id)

    def record(self, description, statuses=None, meta=None):
        self.steps.append(make_frame(self.snapshot(), description, statuses, meta))

    def value_of(self, node_id):
        return self.arena[node_id]["value"]

    def set_child(self, parent_id, side, child_id):
        if parent_id is None:
            self.root_id = child_id
        else:
            self.arena[parent_id][side] = child_id

    def update_height(self, node_id):
        node = self.arena[node_id]
        node["height"] = 1 + max(node_height(self.arena, node["left_id"]),
                                 node_height(self.arena, node["right_id"]))

    # --- search path ---

    def path_to(self, value):
        """Ids compared while descending towards value, and whether the last one holds it."""
        path = []
        node_id = self.root_id
        while node_id is not None:
            path.append(node_id)
            node = self.arena[node_id]
            if value == node["value"]:
                return path, True
            node_id = node["left_id"] if value < node["value"] else node["right_id"]
        return path, False

    def record_path(self, path, value):
        for node_id in path:
            current = self.value_of(node_id)
            if value == current:
                break
            direction = "left" if value < current else "right"
            self.record(f"Comparing {value} with {current}: go {direction}", {node_id: "comparing"},
                        meta={"compare": current})

    # --- rotations ---

    def rotate_right(self, y_id, parent_id, side):
        y = self.arena[y_id]
        x_id = y["left_id"]
        x = self.arena[x_id]
        y["left_id"] = x["right_id"]
        x["right_id"] = y_id
        self.update_height(y_id)
        self.update_height(x_id)
        self.set_child(parent_id, side, x_id)
        return x_id

    def rotate_left(self, x_id, parent_id, side):
        x = self.arena[x_id]
        y_id = x["right_id"]
        y = self.arena[y_id]
        x["right_id"] = y["left_id"]
        y["left_id"] = x_id
        self.update_height(x_id)
        self.update_height(y_id)
        self.set_child(parent_id, side, y_id)
        return y_id

    def apply_case(self, case, node_id, parent_id, side):
        node = self.arena[node_id]
        value = node["value"]
        balance = balance_factor(self.arena, node_id)
        self.record(f"Node {value} is unbalanced (balance factor {balance}): {case} case",
                    {node_id: "processing"}, meta={"case": case, "balance": balance})

        if case == "LL":
            new_root = self.rotate_right(node_id, parent_id, side)
            text = f"Right rotation at {value}"
        elif case == "RR":
            new_root = self.rotate_left(node_id, parent_id, side)
            text = f"Left rotation at {value}"
        elif case == "LR":
            child = node["left_id"]
            child_value = self.value_of(child)
            self.rotate_left(child, node_id, "left_id")
            self.record(f"Left rotation at {child_value} (first half of LR case)",
                        {node_id: "processing"}, meta={"case": case})
            new_root = self.rotate_right(node_id, parent_id, side)
            text = f"Right rotation at {value} completes the LR case"
        else:
            child = node["right_id"]
            child_value = self.value_of(child)
            self.rotate_right(child, node_id, "right_id")
            self.record(f"Right rotation at {child_value} (first half of RL case)",
                        {node_id: "processing"}, meta={"case": case})
            new_root = self.rotate_left(node_id, parent_id, side)
            text = f"Left rotation at {value} completes the RL case"

        self.record(f"{text}: {self.value_of(new_root)} is the new subtree root",
                    {new_root: "new"}, meta={"case": case})
        return new_root

    # --- insertion ---

    def insert(self, node_id, value, parent_id, side, new_id):
        if node_id is None:
            node = create_arena_node(value, new_id)
            self.arena[node["id"]] = node
            self.set_child(parent_id, side, node["id"])
            where = "as the root" if parent_id is None else \
                f"as the {'left' if side == 'left_id' else 'right'} child of {self.value_of(parent_id)}"
            self.record(f"Inserted {value} {where}", {node["id"]: "new"}, meta={"code_highlight": 2})
            return node["id"]

        current = self.value_of(node_id)
        if value < current:
            self.record(f"{value} < {current}: go left", {node_id: "comparing"}, meta={"code_highlight": 3})
            self.insert(self.arena[node_id]["left_id"], value, node_id, "left_id", new_id)
        else:
            self.record(f"{value} > {current}: go right", {node_id: "comparing"}, meta={"code_highlight": 4})
            self.insert(self.arena[node_id]["right_id"], value, node_id, "right_id", new_id)

        if not self.is_avl:
            return node_id
        return self.rebalance_after_insert(node_id, value, parent_id, side)

    def rebalance_after_insert(self, node_id, value, parent_id, side):
        self.update_height(node_id)
        balance = balance_factor(self.arena, node_id)
        node = self.arena[node_id]
        if balance > 1 and value < self.value_of(node["left_id"]):
            return self.apply_case("LL", node_id, parent_id, side)
        if balance < -1 and value > self.value_of(node["right_id"]):
            return self.apply_case("RR", node_id, parent_id, side)
        if balance > 1 and value > self.value_of(node["left_id"]):
            return self.apply_case("LR", node_id, parent_id, side)
        if balance < -1 and value < self.value_of(node["right_id"]):
            return self.apply_case("RL", node_id, parent_id, side)
        return node_id

    # --- deletion ---

    def delete(self, node_id, value, parent_id, side):
        node = self.arena[node_id]
        current = node["value"]

        if value < current:
            self.record(f"{value} < {current}: go left", {node_id: "comparing"}, meta={"code_highlight": 2})
            self.delete(node["left_id"], value, node_id, "left_id")
        elif value > current:
            self.record(f"{value} > {current}: go right", {node_id: "comparing"}, meta={"code_highlight": 3})
            self.delete(node["right_id"], value, node_id, "right_id")
        elif node["left_id"] is None or node["right_id"] is None:
            child = node["left_id"] if node["left_id"] is not None else node["right_id"]
            kind = "leaf" if child is None else "node with one child"
            self.record(f"Removing {kind} {current}", {node_id: "processing"}, meta={"code_highlight": 4})
            self.set_child(parent_id, side, child)
            del self.arena[node_id]
            if child is None:
                self.record(f"Removed {current}")
            else:
                self.record(f"Removed {current}; {self.value_of(child)} takes its place", {child: "new"})
            return child
        else:
            successor = leftmost(self.arena, node["right_id"])
            successor_value = self.value_of(successor)
            self.record(f"{current} has two children: in-order successor is {successor_value}",
                        {node_id: "processing", successor: "found"}, meta={"code_highlight": 5})
            node["value"] = successor_value
            self.record(f"Copied {successor_value} into the node; now delete it from the right subtree",
                        {node_id: "new"}, meta={"code_highlight": 6})
            self.delete(node["right_id"], successor_value, node_id, "right_id")

        if not self.is_avl:
            return node_id
        return self.rebalance_after_delete(node_id, parent_id, side)

    def rebalance_after_delete(self, node_id, parent_id, side):
        self.update_height(node_id)
        balance = balance_factor(self.arena, node_id)
        node = self.arena[node_id]
        if balance > 1 and balance_factor(self.arena, node["left_id"]) >= 0:
            return self.apply_case("LL", node_id, parent_id, side)
        if balance > 1 and balance_factor(self.arena, node["left_id"]) < 0:
            return self.apply_case("LR", node_id, parent_id, side)
        if balance < -1 and balance_factor(self.arena, node["right_id"]) <= 0:
            return self.apply_case("RR", node_id, parent_id, side)
        if balance < -1 and balance_factor(self.arena, node["right_id"]) > 0:
            return self.apply_case("RL", node_id, parent_id, side)
        return node_id


def _name(tree_type, action):
    return f"{'AVL' if tree_type == 'AVL' else 'BST'} {action}"


def insert(nodes, value, tree_type="BST", node_id=None):
    """Insert value; duplicates leave the tree unchanged and report DuplicateValue."""
    name = _name(tree_type, "Insert")
    initial = copy_flat(nodes)
    work = _TreeWork(initial, tree_type)
    work.record(f"Inserting {value} into the {TREE_TYPE_NAMES[tree_type]}", meta={"code_highlight": 1})

    path, found = work.path_to(value)
    if found:
        work.record_path(path, value)
        work.record(f"{value} already exists in the tree. Duplicates are not inserted",
                    {path[-1]: "found"}, meta={"code_highlight": 5})
        return tree_result(name, "INSERT", tree_type, initial, work.steps, initial, committed=False,
                           error=ErrorKind.DUPLICATE_VALUE, output={"value": value},
                           pseudocode=PSEUDOCODE["INSERT"])

    new_id = node_id or create_arena_node(value)["id"]
    work.insert(work.root_id, value, None, None, new_id)
    final = work.snapshot()
    work.steps.append(make_frame(final, f"Inserted {value}. Tree now has {len(final)} nodes"))
    return tree_result(name, "INSERT", tree_type, initial, work.steps, final, committed=True,
                       output={"node_id": new_id, "value": value}, pseudocode=PSEUDOCODE["INSERT"])


def delete(nodes, value, tree_type="BST"):
    name = _name(tree_type, "Delete")
    initial = copy_flat(nodes)
    if not initial:
        return tree_failure(name, "DELETE", tree_type, initial, ErrorKind.EMPTY_STRUCTURE,
                            "Tree is empty. Nothing to delete")

    work = _TreeWork(initial, tree_type)
    work.record(f"Deleting {value} from the {TREE_TYPE_NAMES[tree_type]}", meta={"code_highlight": 1})
    path, found = work.path_to(value)
    if not found:
        work.record_path(path, value)
        work.record(f"{value} not found in the tree")
        return tree_result(name, "DELETE", tree_type, initial, work.steps, initial, committed=False,
                           error=ErrorKind.VALUE_NOT_FOUND, output={"value": value},
                           pseudocode=PSEUDOCODE["DELETE"])

    work.delete(work.root_id, value, None, None)
    final = work.snapshot()
    work.steps.append(make_frame(final, f"Deleted {value}. Tree now has {len(final)} nodes"))
    return tree_result(name, "DELETE", tree_type, initial, work.steps, final, committed=True,
                       output={"value": value}, pseudocode=PSEUDOCODE["DELETE"])


def search(nodes, value, tree_type="BST"):
    name = _name(tree_type, "Search")
    initial = copy_flat(nodes)
    if not initial:
        return tree_failure(name, "SEARCH", tree_type, initial, ErrorKind.EMPTY_STRUCTURE,
                            "Tree is empty. Nothing to search", output={"found": False, "node_id": None})

    work = _TreeWork(initial, tree_type)
    path, found = work.path_to(value)
    for node_id in path:
        current = work.value_of(node_id)
        work.record(f"Checking {current}", {node_id: "searching"}, meta={"compare": current})
        if current == value:
            work.record(f"Found {value}", {node_id: "found"})
            return tree_result(name, "SEARCH", tree_type, initial, work.steps, initial, committed=False,
                               output={"found": True, "node_id": node_id, "depth": len(path) - 1})
        direction = "left" if value < current else "right"
        work.record(f"{value} {'<' if direction == 'left' else '>'} {current}: go {direction}", {node_id: "idle"})

    work.record(f"{value} not found in the tree")
    return tree_result(name, "SEARCH", tree_type, initial, work.steps, initial, committed=False,
                       error=ErrorKind.VALUE_NOT_FOUND, output={"found": False, "node_id": None})


def find_extreme(nodes, tree_type="BST", maximum=False):
    """Leftmost (minimum) or rightmost (maximum) descent."""
    operation = "FIND_MAX" if maximum else "FIND_MIN"
    label = "maximum" if maximum else "minimum"
    name = _name(tree_type, f"Find {label.title()}")
    initial = copy_flat(nodes)
    if not initial:
        return tree_failure(name, operation, tree_type, initial, ErrorKind.EMPTY_STRUCTURE,
                            f"Tree is empty. No {label} value", output={"value": None})

    work = _TreeWork(initial, tree_type)
    side = "right_id" if maximum else "left_id"
    node_id = work.root_id
    while True:
        work.record(f"At {work.value_of(node_id)}", {node_id: "searching"})
        child = work.arena[node_id][side]
        if child is None:
            break
        node_id = child

    end = rightmost(work.arena, work.root_id) if maximum else leftmost(work.arena, work.root_id)
    value = work.value_of(end)
    work.record(f"The {label} value is {value}", {end: "found"})
    return tree_result(name, operation, tree_type, initial, work.steps, initial, committed=False,
                       output={"value": value, "node_id": end})


def get_height(nodes, tree_type="BST"):
    """Highlight one deepest root-to-leaf path and report the height."""
    name = _name(tree_type, "Height")
    initial = copy_flat(nodes)
    if not initial:
        return tree_result(name, "GET_HEIGHT", tree_type, initial,
                           [make_frame(initial, "Tree is empty. Height is 0")], initial,
                           committed=False, output={"height": 0})

    work = _TreeWork(initial, tree_type)
    statuses = {}
    node_id = work.root_id
    while node_id is not None:
        statuses[node_id] = "visited"
        work.record(f"{work.value_of(node_id)} has height {work.arena[node_id]['height']}", statuses)
        node = work.arena[node_id]
        left_h = node_height(work.arena, node["left_id"])
        right_h = node_height(work.arena, node["right_id"])
        if node["left_id"] is None and node["right_id"] is None:
            break
        node_id = node["left_id"] if left_h >= right_h else node["right_id"]

    height = work.arena[work.root_id]["height"]
    work.record(f"Tree height is {height}", statuses)
    return tree_result(name, "GET_HEIGHT", tree_type, initial, work.steps, initial, committed=False,
                       output={"height": height})
