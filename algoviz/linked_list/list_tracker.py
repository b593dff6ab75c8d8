# list_tracker.py
"""
Trace generators for linked list operations.

Every function takes the current node sequence (never modified), the list
kind (SLL, DLL, CSLL, CDLL) and its operands, computes the whole trace
eagerly and returns a result object (see algoviz.trace).
"""
import copy
import logging

from ..errors import ErrorKind
from ..trace import failure_result, make_frame, make_result
from .nodes import LIST_KIND_NAMES, check_links, create_list_node, is_circular, relink, value_greater, values_equal

logger = logging.getLogger(__name__)

FAMILY = "Linked List"


def _plural(count):
    return f"{count} node{'s' if count != 1 else ''}"


def _prepare(nodes, kind):
    # Inputs are copied and checked once; trackers work on the copy only
    nodes = copy.deepcopy(list(nodes or []))
    check_links(nodes, kind)
    return [dict(node, status="idle", prev_id=node.get("prev_id")) for node in nodes]


def _finish(name, operation, initial, steps, final_nodes, kind, committed, output=None, error=None):
    final_nodes = relink(final_nodes, kind) if final_nodes else []
    check_links(final_nodes, kind)
    logger.debug(f"{operation} on {kind}: {len(steps)} frames, committed={committed}")
    return make_result(name, FAMILY, operation, initial, steps, final_nodes,
                       committed=committed, error=error, output=output)


def _boundary_note(kind):
    if kind == "CDLL":
        return " Tail and head are relinked in both directions to keep the cycle."
    if kind == "CSLL":
        return " The tail's next link is updated to keep the cycle."
    return ""


# =================================================================
# Insertion
# =================================================================

def insert_head(nodes, value, kind="SLL", node_id=None):
    name = "Insert At Head"
    initial = _prepare(nodes, kind)
    steps = [make_frame(initial, f"Inserting {value} at head of {LIST_KIND_NAMES[kind]}")]

    new_node = create_list_node(value, node_id)
    updated = relink([new_node] + initial, kind)
    note = _boundary_note(kind) if len(updated) > 1 else ""
    steps.append(make_frame(updated, f"{value} is now the head node.{note}", {new_node["id"]: "new"},
                            meta={"head": new_node["id"]}))
    steps.append(make_frame(updated, f"{value} inserted at head. List now has {_plural(len(updated))}"))

    return _finish(name, "INSERT_HEAD", initial, steps, updated, kind, committed=True,
                   output={"node_id": new_node["id"], "index": 0})


def insert_tail(nodes, value, kind="SLL", node_id=None):
    name = "Insert At Tail"
    initial = _prepare(nodes, kind)
    steps = [make_frame(initial, f"Inserting {value} at tail of {LIST_KIND_NAMES[kind]}")]

    # Walk to the current tail
    for i, node in enumerate(initial):
        steps.append(make_frame(initial, f"Moving to node {i} (value {node['value']})",
                                {node["id"]: "searching"}, meta={"index": i}))

    new_node = create_list_node(value, node_id)
    updated = relink(initial + [new_node], kind)
    note = _boundary_note(kind) if len(updated) > 1 else ""
    steps.append(make_frame(updated, f"{value} linked after the old tail.{note}", {new_node["id"]: "new"},
                            meta={"tail": new_node["id"]}))
    steps.append(make_frame(updated, f"{value} added. List now has {_plural(len(updated))}"))

    return _finish(name, "INSERT_TAIL", initial, steps, updated, kind, committed=True,
                   output={"node_id": new_node["id"], "index": len(updated) - 1})


def insert_at(nodes, value, index, kind="SLL", node_id=None):
    name = "Insert At Index"
    initial = _prepare(nodes, kind)
    if index is None or index < 0 or index > len(initial):
        return failure_result(name, FAMILY, "INSERT_AT", initial, ErrorKind.INVALID_INDEX,
                              f"Invalid index {index}. Please choose between 0 and {len(initial)}",
                              output={"index": index})

    steps = [make_frame(initial, f"Navigating to position {index}")]
    for i in range(index):
        steps.append(make_frame(initial, f"Passing node {i} (value {initial[i]['value']})",
                                {initial[i]["id"]: "searching"}, meta={"index": i}))

    new_node = create_list_node(value, node_id)
    updated = relink(initial[:index] + [new_node] + initial[index:], kind)
    statuses = {new_node["id"]: "new"}
    if index > 0:
        statuses[initial[index - 1]["id"]] = "processing"
    steps.append(make_frame(updated, f"Linked {value} in at position {index}", statuses,
                            meta={"index": index}))
    steps.append(make_frame(updated, f"Inserted {value} at position {index}. List now has {_plural(len(updated))}"))

    return _finish(name, "INSERT_AT", initial, steps, updated, kind, committed=True,
                   output={"node_id": new_node["id"], "index": index})


# =================================================================
# Deletion
# =================================================================

def _remove_index(name, operation, initial, index, kind, steps):
    removed = initial[index]
    steps.append(make_frame(initial, f"Unlinking node {index} (value {removed['value']})",
                            {removed["id"]: "processing"}, meta={"index": index}))
    updated = relink(initial[:index] + initial[index + 1:], kind)

    note = ""
    if updated and is_circular(kind) and index in (0, len(initial) - 1):
        note = _boundary_note(kind)
    if not updated:
        note = " The list is now empty."
    steps.append(make_frame(updated, f"Deleted {removed['value']} at position {index}. "
                                     f"{_plural(len(updated))} remaining.{note}"))
    return _finish(name, operation, initial, steps, updated, kind, committed=True,
                   output={"removed_id": removed["id"], "removed_value": removed["value"], "index": index})


def delete_head(nodes, kind="SLL"):
    name = "Delete Head"
    initial = _prepare(nodes, kind)
    if not initial:
        return failure_result(name, FAMILY, "DELETE_HEAD", initial, ErrorKind.EMPTY_STRUCTURE,
                              "List is empty. Cannot delete head")
    steps = [make_frame(initial, f"Deleting head node with value {initial[0]['value']}")]
    return _remove_index(name, "DELETE_HEAD", initial, 0, kind, steps)


def delete_tail(nodes, kind="SLL"):
    name = "Delete Tail"
    initial = _prepare(nodes, kind)
    if not initial:
        return failure_result(name, FAMILY, "DELETE_TAIL", initial, ErrorKind.EMPTY_STRUCTURE,
                              "List is empty. Cannot delete tail")
    last = len(initial) - 1
    steps = [make_frame(initial, f"Deleting tail node with value {initial[last]['value']}")]
    # Singly lists must walk to the node before the tail
    if kind in ("SLL", "CSLL"):
        for i in range(last):
            steps.append(make_frame(initial, f"Walking to the node before the tail: node {i}",
                                    {initial[i]["id"]: "searching"}, meta={"index": i}))
    return _remove_index(name, "DELETE_TAIL", initial, last, kind, steps)


def delete_at(nodes, index, kind="SLL"):
    name = "Delete At Index"
    initial = _prepare(nodes, kind)
    if not initial:
        return failure_result(name, FAMILY, "DELETE_AT", initial, ErrorKind.EMPTY_STRUCTURE,
                              "List is empty. Cannot delete")
    if index is None or index < 0 or index >= len(initial):
        return failure_result(name, FAMILY, "DELETE_AT", initial, ErrorKind.INVALID_INDEX,
                              f"Invalid index {index}. Please choose between 0 and {len(initial) - 1}",
                              output={"index": index})

    steps = [make_frame(initial, f"Navigating to position {index}")]
    for i in range(index + 1):
        steps.append(make_frame(initial, f"Visiting node {i} (value {initial[i]['value']})",
                                {initial[i]["id"]: "searching"}, meta={"index": i}))
    return _remove_index(name, "DELETE_AT", initial, index, kind, steps)


def delete_value(nodes, value, kind="SLL"):
    name = "Delete By Value"
    initial = _prepare(nodes, kind)
    if not initial:
        return failure_result(name, FAMILY, "DELETE_VALUE", initial, ErrorKind.EMPTY_STRUCTURE,
                              "List is empty. Cannot delete")

    steps = [make_frame(initial, f"Searching for {value} to delete")]
    for i, node in enumerate(initial):
        steps.append(make_frame(initial, f"Comparing node {i} (value {node['value']}) with {value}",
                                {node["id"]: "searching"}, meta={"index": i}))
        if values_equal(node["value"], value):
            steps.append(make_frame(initial, f"Found {value} at position {i}. Deleting now",
                                    {node["id"]: "found"}, meta={"index": i}))
            return _remove_index(name, "DELETE_VALUE", initial, i, kind, steps)

    steps.append(make_frame(initial, f"Value {value} not found in the list"))
    return _finish(name, "DELETE_VALUE", initial, steps, initial, kind, committed=False,
                   error=ErrorKind.VALUE_NOT_FOUND, output={"value": value})


def clear(nodes, kind="SLL"):
    initial = _prepare(nodes, kind)
    steps = [
        make_frame(initial, f"Clearing {_plural(len(initial))}",
                   {node["id"]: "processing" for node in initial}),
        make_frame([], "List cleared"),
    ]
    return _finish("Clear List", "CLEAR", initial, steps, [], kind, committed=bool(initial),
                   output={"removed_count": len(initial)})


# =================================================================
# Read-only operations
# =================================================================

def search(nodes, value, kind="SLL"):
    name = "Search"
    initial = _prepare(nodes, kind)
    steps = [make_frame(initial, f"Searching for {value}")]

    for i, node in enumerate(initial):
        steps.append(make_frame(initial, f"Checking node {i} (value {node['value']})",
                                {node["id"]: "searching"}, meta={"index": i}))
        if values_equal(node["value"], value):
            steps.append(make_frame(initial, f"Found {value} at position {i}",
                                    {node["id"]: "found"}, meta={"index": i}))
            return _finish(name, "SEARCH", initial, steps, initial, kind, committed=False,
                           output={"found": True, "found_index": i, "node_id": node["id"]})

    steps.append(make_frame(initial, f"{value} not found in the list"))
    return _finish(name, "SEARCH", initial, steps, initial, kind, committed=False,
                   error=ErrorKind.VALUE_NOT_FOUND, output={"found": False, "found_index": None, "node_id": None})


def traverse(nodes, kind="SLL"):
    name = "Traverse"
    initial = _prepare(nodes, kind)
    if not initial:
        steps = [make_frame(initial, "List is empty. Nothing to traverse")]
        return _finish(name, "TRAVERSE", initial, steps, initial, kind, committed=False, output={"order": []})

    steps = []
    for i, node in enumerate(initial):
        steps.append(make_frame(initial, f"Visiting node {i} (value {node['value']})",
                                {node["id"]: "searching"}, meta={"index": i}))
    if is_circular(kind):
        steps.append(make_frame(initial, "Tail links back to head: stopping after one lap",
                                {initial[0]["id"]: "runner"}))
    steps.append(make_frame(initial, f"Traversed {_plural(len(initial))}",
                            {node["id"]: "found" for node in initial}))
    return _finish(name, "TRAVERSE", initial, steps, initial, kind, committed=False,
                   output={"order": [node["value"] for node in initial]})


def find_middle(nodes, kind="SLL"):
    """
    Slow/fast two-pointer search. Fast moves two nodes per round and slow one,
    until fast cannot advance; even lengths give the second of the two middles.
    """
    name = "Find Middle"
    initial = _prepare(nodes, kind)
    if not initial:
        steps = [make_frame(initial, "List is empty")]
        return _finish(name, "FIND_MIDDLE", initial, steps, initial, kind, committed=False,
                       output={"middle_id": None, "middle_index": None, "middle_value": None})

    n = len(initial)
    slow = fast = 0
    steps = [make_frame(initial, "Slow and fast pointers start at the head",
                        {initial[0]["id"]: "searching"},
                        meta={"slow": initial[0]["id"], "fast": initial[0]["id"]})]

    while fast < n - 1 and fast + 1 < n:
        statuses = {initial[fast]["id"]: "runner", initial[fast + 1]["id"]: "runner",
                    initial[slow]["id"]: "searching"}
        steps.append(make_frame(initial, f"Fast pointer at {fast}, slow pointer at {slow}", statuses,
                                meta={"slow": initial[slow]["id"], "fast": initial[fast]["id"]}))
        fast += 2
        slow += 1

    middle = initial[slow]
    steps.append(make_frame(initial, f"Middle element is {middle['value']}", {middle["id"]: "found"},
                            meta={"slow": middle["id"]}))
    return _finish(name, "FIND_MIDDLE", initial, steps, initial, kind, committed=False,
                   output={"middle_id": middle["id"], "middle_index": slow, "middle_value": middle["value"]})


# =================================================================
# Reordering
# =================================================================

def reverse(nodes, kind="SLL"):
    name = "Reverse"
    initial = _prepare(nodes, kind)
    if not initial:
        steps = [make_frame(initial, "List is empty. Nothing to reverse")]
        return _finish(name, "REVERSE", initial, steps, initial, kind, committed=False)

    steps = [make_frame(initial, f"Reversing list with {_plural(len(initial))}")]
    statuses = {}
    for i, node in enumerate(initial):
        statuses[node["id"]] = "processing"
        steps.append(make_frame(initial, f"Flipping the links of node {i} (value {node['value']})",
                                statuses, meta={"index": i}))

    updated = relink(list(reversed(initial)), kind)
    steps.append(make_frame(updated, "List reversed successfully", meta={"head": updated[0]["id"]}))
    return _finish(name, "REVERSE", initial, steps, updated, kind, committed=len(initial) > 1,
                   output={"order": [node["value"] for node in updated]})


def sort(nodes, kind="SLL"):
    """Bubble sort by value, ascending. Only strictly greater neighbours swap, so equal values keep their order."""
    name = "Bubble Sort"
    initial = _prepare(nodes, kind)
    if not initial:
        steps = [make_frame(initial, "List is empty. Nothing to sort")]
        return _finish(name, "SORT", initial, steps, initial, kind, committed=False, output={"swap_count": 0})
    if len(initial) == 1:
        steps = [make_frame(initial, "List has only one node. Already sorted")]
        return _finish(name, "SORT", initial, steps, initial, kind, committed=False, output={"swap_count": 0})

    working = list(initial)
    n = len(working)
    swap_count = 0
    sorted_ids = set()
    steps = [make_frame(initial, f"Sorting {_plural(n)} using bubble sort")]

    def overlay(extra):
        statuses = {node_id: "found" for node_id in sorted_ids}
        statuses.update(extra)
        return statuses

    for i in range(n - 1):
        for j in range(n - i - 1):
            left, right = working[j], working[j + 1]
            steps.append(make_frame(relink(working, kind), f"Comparing {left['value']} and {right['value']}",
                                    overlay({left["id"]: "searching", right["id"]: "runner"}),
                                    meta={"i": i, "j": j}))
            if value_greater(left["value"], right["value"]):
                working[j], working[j + 1] = right, left
                swap_count += 1
                steps.append(make_frame(relink(working, kind), f"Swapped {left['value']} and {right['value']}",
                                        overlay({left["id"]: "processing", right["id"]: "processing"}),
                                        meta={"i": i, "j": j}))
        sorted_ids.add(working[n - i - 1]["id"])
        steps.append(make_frame(relink(working, kind),
                                f"{working[n - i - 1]['value']} is in its final position",
                                overlay({}), meta={"i": i}))

    sorted_ids.add(working[0]["id"])
    updated = relink(working, kind)
    steps.append(make_frame(updated, f"Sort complete. Made {swap_count} swap{'s' if swap_count != 1 else ''}",
                            overlay({})))
    steps.append(make_frame(updated, "Links updated to follow the sorted order"))
    return _finish(name, "SORT", initial, steps, updated, kind, committed=swap_count > 0,
                   output={"swap_count": swap_count, "order": [node["value"] for node in updated]})
