from .bst_tracker import delete, find_extreme, get_height, insert, search
from .common import clear_tree, verify_tree
from .heap_tracker import extract_root, heap_find_extreme, heap_get_height, heap_insert, heapify
from .layout import calculate_heap_positions, calculate_node_positions
from .nodes import flatten, is_heap, link_heap, unflatten
from .stats import tree_stats
from .traversal_tracker import traverse

__all__ = [
    "insert", "delete", "search", "find_extreme", "get_height",
    "heap_insert", "extract_root", "heapify", "heap_find_extreme", "heap_get_height",
    "traverse", "clear_tree", "tree_stats", "verify_tree",
    "flatten", "unflatten", "link_heap", "is_heap",
    "calculate_node_positions", "calculate_heap_positions",
]
