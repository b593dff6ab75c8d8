# heap_tracker.py
"""
Trace generators for array-backed binary heaps.

Sift steps swap values between array slots; node ids stay with their slot,
so a highlighted id always refers to a fixed position in the drawing.
"""
import logging

from ..errors import ErrorKind
from ..trace import make_frame
from .common import TREE_TYPE_NAMES, dominates, tree_failure, tree_result
from .nodes import copy_flat, heap_left, heap_parent, heap_right, link_heap, new_node_id

logger = logging.getLogger(__name__)

PSEUDOCODE = {
    "INSERT": [
        "function insert(heap, value):",                         # 1
        "  heap.append(value); i = heap.size - 1",               # 2
        "  while i > 0 and heap[i] beats heap[parent(i)]:",      # 3
        "    swap(heap[i], heap[parent(i)]); i = parent(i)",      # 4
    ],
    "EXTRACT_ROOT": [
        "function extractRoot(heap):",                           # 1
        "  root = heap[0]; heap[0] = heap.pop()",                # 2
        "  i = 0",                                               # 3
        "  while a child of i beats heap[i]:",                   # 4
        "    swap with the better child; i = that child",        # 5
        "  return root",                                         # 6
    ],
}


class _HeapWork:
    """Heap slots as a list of {"id", "value"} plus the recorded frames."""

    def __init__(self, flat_nodes, tree_type):
        self.tree_type = tree_type
        self.slots = [{"id": n["id"], "value": n["value"]} for n in copy_flat(flat_nodes)]
        self.steps = []

    def snapshot(self):
        return link_heap(self.slots)

    def record(self, description, statuses=None, meta=None):
        self.steps.append(make_frame(self.snapshot(), description, statuses, meta))

    def value(self, i):
        return self.slots[i]["value"]

    def slot_id(self, i):
        return self.slots[i]["id"]

    def swap_values(self, i, j):
        a, b = self.slots[i], self.slots[j]
        a["value"], b["value"] = b["value"], a["value"]

    def sift_up(self, i):
        while i > 0:
            parent = heap_parent(i)
            self.record(f"Compare {self.value(i)} with parent {self.value(parent)}",
                        {self.slot_id(i): "comparing", self.slot_id(parent): "comparing"},
                        meta={"code_highlight": 3})
            if dominates(self.value(parent), self.value(i), self.tree_type):
                self.record(f"{self.value(parent)} and {self.value(i)} are in heap order. Stop",
                            {self.slot_id(i): "found"}, meta={"code_highlight": 3})
                return i
            self.swap_values(i, parent)
            self.record(f"Swapped {self.value(parent)} up past {self.value(i)}",
                        {self.slot_id(parent): "processing"}, meta={"code_highlight": 4})
            i = parent
        return i

    def better_child(self, i):
        """Index of the child that should sit above the other, or None for a leaf."""
        size = len(self.slots)
        left, right = heap_left(i), heap_right(i)
        if left >= size:
            return None
        if right < size and not dominates(self.value(left), self.value(right), self.tree_type):
            return right
        return left

    def sift_down(self, i):
        while True:
            child = self.better_child(i)
            if child is None:
                self.record(f"{self.value(i)} reached a leaf", {self.slot_id(i): "found"},
                            meta={"code_highlight": 4})
                return i
            self.record(f"Compare {self.value(i)} with child {self.value(child)}",
                        {self.slot_id(i): "comparing", self.slot_id(child): "comparing"},
                        meta={"code_highlight": 4})
            if dominates(self.value(i), self.value(child), self.tree_type):
                self.record(f"{self.value(i)} is in heap order. Stop", {self.slot_id(i): "found"},
                            meta={"code_highlight": 4})
                return i
            self.swap_values(i, child)
            self.record(f"Swapped {self.value(child)} down below {self.value(i)}",
                        {self.slot_id(child): "processing"}, meta={"code_highlight": 5})
            i = child


def _name(tree_type, action):
    return f"{'Max' if tree_type == 'MAX_HEAP' else 'Min'} Heap {action}"


def heap_insert(nodes, value, tree_type="MAX_HEAP", node_id=None):
    name = _name(tree_type, "Insert")
    initial = copy_flat(nodes)
    work = _HeapWork(initial, tree_type)

    new_id = node_id or new_node_id()
    work.slots.append({"id": new_id, "value": value})
    work.record(f"Appended {value} at index {len(work.slots) - 1}", {new_id: "new"}, meta={"code_highlight": 2})
    work.sift_up(len(work.slots) - 1)

    final = work.snapshot()
    work.steps.append(make_frame(final, f"Inserted {value}. Heap now has {len(final)} nodes"))
    return tree_result(name, "INSERT", tree_type, initial, work.steps, final, committed=True,
                       output={"node_id": new_id, "value": value}, pseudocode=PSEUDOCODE["INSERT"])


def extract_root(nodes, tree_type="MAX_HEAP"):
    """Remove and report the root; the last slot's value moves to the top and sifts down."""
    name = _name(tree_type, "Extract Root")
    initial = copy_flat(nodes)
    if not initial:
        return tree_failure(name, "EXTRACT_ROOT", tree_type, initial, ErrorKind.EMPTY_STRUCTURE,
                            "Heap is empty. Nothing to extract", output={"value": None})

    work = _HeapWork(initial, tree_type)
    root_value = work.value(0)
    work.record(f"Extracting root {root_value}", {work.slot_id(0): "found"}, meta={"code_highlight": 1})

    last = work.slots.pop()
    if work.slots:
        work.slots[0]["value"] = last["value"]
        work.record(f"Moved last value {last['value']} to the root", {work.slot_id(0): "new"},
                    meta={"code_highlight": 2})
        work.sift_down(0)

    final = work.snapshot()
    work.steps.append(make_frame(final, f"Extracted {root_value}. Heap now has {len(final)} nodes",
                                 meta={"code_highlight": 6}))
    return tree_result(name, "EXTRACT_ROOT", tree_type, initial, work.steps, final, committed=True,
                       output={"value": root_value}, pseudocode=PSEUDOCODE["EXTRACT_ROOT"])


def heapify(values, tree_type="MAX_HEAP", nodes=None):
    """Build a heap bottom-up from a list of values, replacing any current contents."""
    name = _name(tree_type, "Heapify")
    initial = copy_flat(nodes)
    work = _HeapWork([], tree_type)
    work.slots = [{"id": new_node_id(), "value": v} for v in values]
    work.record(f"Loaded {len(values)} values in array order")

    for i in range(len(work.slots) // 2 - 1, -1, -1):
        work.record(f"Sift down from index {i} ({work.value(i)})", {work.slot_id(i): "processing"})
        work.sift_down(i)

    final = work.snapshot()
    work.steps.append(make_frame(final, f"Built a {TREE_TYPE_NAMES[tree_type]} of {len(final)} nodes"))
    return tree_result(name, "HEAPIFY", tree_type, initial, work.steps, final, committed=initial != final,
                       output={"order": [n["value"] for n in final]})


def heap_find_extreme(nodes, tree_type="MAX_HEAP", maximum=False):
    """The root answers directly when it matches the heap's order; otherwise scan the leaves."""
    operation = "FIND_MAX" if maximum else "FIND_MIN"
    label = "maximum" if maximum else "minimum"
    name = _name(tree_type, f"Find {label.title()}")
    initial = copy_flat(nodes)
    if not initial:
        return tree_failure(name, operation, tree_type, initial, ErrorKind.EMPTY_STRUCTURE,
                            f"Heap is empty. No {label} value", output={"value": None})

    work = _HeapWork(initial, tree_type)
    root_matches = (tree_type == "MAX_HEAP") == maximum
    if root_matches:
        work.record(f"The root holds the {label}: {work.value(0)}", {work.slot_id(0): "found"})
        return tree_result(name, operation, tree_type, initial, work.steps, initial, committed=False,
                           output={"value": work.value(0), "node_id": work.slot_id(0)})

    # The opposite extreme is always a leaf
    first_leaf = len(work.slots) // 2
    best = first_leaf
    for i in range(first_leaf, len(work.slots)):
        work.record(f"Checking leaf {work.value(i)}", {work.slot_id(i): "searching", work.slot_id(best): "found"})
        if (work.value(i) > work.value(best)) if maximum else (work.value(i) < work.value(best)):
            best = i
    work.record(f"The {label} value is {work.value(best)}", {work.slot_id(best): "found"})
    return tree_result(name, operation, tree_type, initial, work.steps, initial, committed=False,
                       output={"value": work.value(best), "node_id": work.slot_id(best)})


def heap_get_height(nodes, tree_type="MAX_HEAP"):
    name = _name(tree_type, "Height")
    initial = copy_flat(nodes)
    work = _HeapWork(initial, tree_type)
    statuses = {}
    i = 0
    while i < len(work.slots):
        statuses[work.slot_id(i)] = "visited"
        work.record(f"Level {len(statuses)}: {work.value(i)}", statuses)
        i = heap_left(i)
    height = len(statuses)
    work.record(f"Heap height is {height}", statuses)
    return tree_result(name, "GET_HEIGHT", tree_type, initial, work.steps, initial, committed=False,
                       output={"height": height})
