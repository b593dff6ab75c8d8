from .list_tracker import (
    clear,
    delete_at,
    delete_head,
    delete_tail,
    delete_value,
    find_middle,
    insert_at,
    insert_head,
    insert_tail,
    reverse,
    search,
    sort,
    traverse,
)
from .nodes import build_list, check_links, coerce_value, relink, values_equal

__all__ = [
    "build_list", "check_links", "coerce_value", "relink", "values_equal",
    "insert_head", "insert_tail", "insert_at",
    "delete_head", "delete_tail", "delete_at", "delete_value",
    "search", "traverse", "reverse", "sort", "find_middle", "clear",
]
