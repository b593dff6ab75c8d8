# dispatcher.py
"""
Route an intent to the tracker that handles it.

An intent is a plain dict, typically produced by the command parser or read from JSON:

    {"structure": "list" | "tree" | "graph",
     "operation": "insert_head",       # canonical tag or alias, any case
     "value": 5, "position": 2,        # operands, as the operation needs them
     "algorithm": "BFS",               # with operation "start_traversal"
     "source": 1, "target": 2,         # edge operands
     "values": [...],                  # heapify input
     "style_overrides": {...}}

Aliases are resolved into the closed operation enums here and nowhere else.
"""
import logging
import re
from enum import Enum

from . import graph as graph_engine
from . import linked_list as list_engine
from . import tree as tree_engine
from .default_styles import DEFAULT_STYLES
from .errors import ErrorKind
from .linked_list.nodes import coerce_value
from .style_merger import merge_styles
from .trace import failure_result
from .tree.nodes import is_heap

logger = logging.getLogger(__name__)


class ListOperation(str, Enum):
    INSERT_HEAD = "INSERT_HEAD"
    INSERT_TAIL = "INSERT_TAIL"
    INSERT_AT = "INSERT_AT"
    DELETE_HEAD = "DELETE_HEAD"
    DELETE_TAIL = "DELETE_TAIL"
    DELETE_VALUE = "DELETE_VALUE"
    DELETE_AT = "DELETE_AT"
    SEARCH = "SEARCH"
    TRAVERSE = "TRAVERSE"
    REVERSE = "REVERSE"
    SORT = "SORT"
    FIND_MIDDLE = "FIND_MIDDLE"
    CLEAR = "CLEAR"


class TreeOperation(str, Enum):
    INSERT = "INSERT"
    DELETE = "DELETE"
    SEARCH = "SEARCH"
    INORDER = "INORDER"
    PREORDER = "PREORDER"
    POSTORDER = "POSTORDER"
    LEVEL_ORDER = "LEVEL_ORDER"
    FIND_MIN = "FIND_MIN"
    FIND_MAX = "FIND_MAX"
    GET_HEIGHT = "GET_HEIGHT"
    EXTRACT_ROOT = "EXTRACT_ROOT"
    HEAPIFY = "HEAPIFY"
    CLEAR = "CLEAR"


class GraphOperation(str, Enum):
    BFS = "BFS"
    DFS = "DFS"
    DIJKSTRA = "DIJKSTRA"
    ADD_NODE = "ADD_NODE"
    REMOVE_NODE = "REMOVE_NODE"
    ADD_EDGE = "ADD_EDGE"
    REMOVE_EDGE = "REMOVE_EDGE"
    RESET = "RESET"
    CREATE = "CREATE"


STRUCTURE_ALIASES = {
    "list": "list",
    "linked_list": "list",
    "linkedlist": "list",
    "tree": "tree",
    "graph": "graph",
}

LIST_ALIASES = {
    "INSERT": ListOperation.INSERT_TAIL,
    "APPEND": ListOperation.INSERT_TAIL,
    "PREPEND": ListOperation.INSERT_HEAD,
    "DELETE": ListOperation.DELETE_VALUE,
    "REMOVE": ListOperation.DELETE_VALUE,
    "FIND": ListOperation.SEARCH,
    "MIDDLE": ListOperation.FIND_MIDDLE,
    "RESET": ListOperation.CLEAR,
}

TREE_ALIASES = {
    "REMOVE": TreeOperation.DELETE,
    "FIND": TreeOperation.SEARCH,
    "IN_ORDER": TreeOperation.INORDER,
    "PRE_ORDER": TreeOperation.PREORDER,
    "POST_ORDER": TreeOperation.POSTORDER,
    "LEVELORDER": TreeOperation.LEVEL_ORDER,
    "BFS": TreeOperation.LEVEL_ORDER,
    "MIN": TreeOperation.FIND_MIN,
    "MAX": TreeOperation.FIND_MAX,
    "HEIGHT": TreeOperation.GET_HEIGHT,
    "EXTRACT_MAX": TreeOperation.EXTRACT_ROOT,
    "EXTRACT_MIN": TreeOperation.EXTRACT_ROOT,
    "BUILD_HEAP": TreeOperation.HEAPIFY,
    "RESET": TreeOperation.CLEAR,
}

GRAPH_ALIASES = {
    "BREADTH_FIRST": GraphOperation.BFS,
    "DEPTH_FIRST": GraphOperation.DFS,
    "SHORTEST_PATH": GraphOperation.DIJKSTRA,
    "CLEAR": GraphOperation.RESET,
    "CREATE_GRAPH": GraphOperation.CREATE,
}

OPERATION_ENUMS = {"list": ListOperation, "tree": TreeOperation, "graph": GraphOperation}
ALIASES = {"list": LIST_ALIASES, "tree": TREE_ALIASES, "graph": GRAPH_ALIASES}
FAMILIES = {"list": "Linked List", "tree": "Tree", "graph": "Graph"}


def normalize_structure(structure):
    if structure is None:
        return None
    return STRUCTURE_ALIASES.get(str(structure).strip().lower())


def resolve_operation(structure, tag, algorithm=None):
    """
    Map a canonical tag or an alias to its enum member, or None when nothing matches.
    "start_traversal" picks the graph algorithm from `algorithm`.
    """
    structure = normalize_structure(structure)
    if structure is None or tag is None:
        return None
    key = str(tag).strip().upper().replace(" ", "_").replace("-", "_")
    if key == "START_TRAVERSAL":
        key = str(algorithm or "").strip().upper()

    enum_cls = OPERATION_ENUMS[structure]
    try:
        return enum_cls(key)
    except ValueError:
        return ALIASES[structure].get(key)


def _unknown(structure, tag, state, description):
    logger.warning(description)
    family = FAMILIES.get(structure, "Unknown")
    return failure_result("Unknown Operation", family, str(tag), state, ErrorKind.UNKNOWN_OPERATION, description)


def _position(intent):
    """The intent's index as an int, or None when it is missing or not a whole number."""
    position = intent.get("position", intent.get("index"))
    if isinstance(position, bool):
        return None
    if isinstance(position, int):
        return position
    if isinstance(position, float):
        return int(position) if position.is_integer() else None
    if isinstance(position, str) and re.fullmatch(r"-?\d+", position.strip()):
        return int(position)
    return None


# Operations that cannot run without a value operand
VALUE_OPERATIONS = {
    "list": {ListOperation.INSERT_HEAD, ListOperation.INSERT_TAIL, ListOperation.INSERT_AT,
             ListOperation.DELETE_VALUE, ListOperation.SEARCH},
    "tree": {TreeOperation.INSERT, TreeOperation.DELETE, TreeOperation.SEARCH},
}
POSITION_OPERATIONS = {ListOperation.INSERT_AT, ListOperation.DELETE_AT}


def _check_operands(structure, operation, intent, value, dataset_type):
    """Return (error kind, description) when the intent's operands cannot be used, else None."""
    if operation in VALUE_OPERATIONS.get(structure, ()):
        if value is None:
            return ErrorKind.VALUE_NOT_FOUND, f"Specify a value for {operation.value}"
        # Text cannot be ordered against numbers
        if structure == "tree" and dataset_type == "numbers" and isinstance(value, str):
            return ErrorKind.VALUE_NOT_FOUND, f"'{value}' is not a number"
    if structure == "list" and operation in POSITION_OPERATIONS and _position(intent) is None:
        raw = intent.get("position", intent.get("index"))
        return ErrorKind.INVALID_INDEX, f"Invalid index {raw}: expected a whole number"
    return None


# =================================================================
# Per-structure dispatch tables
# =================================================================

LIST_DISPATCH_TABLE = {
    ListOperation.INSERT_HEAD: lambda s, i, k, v: list_engine.insert_head(s, v, k, i.get("node_id")),
    ListOperation.INSERT_TAIL: lambda s, i, k, v: list_engine.insert_tail(s, v, k, i.get("node_id")),
    ListOperation.INSERT_AT: lambda s, i, k, v: list_engine.insert_at(s, v, _position(i), k, i.get("node_id")),
    ListOperation.DELETE_HEAD: lambda s, i, k, v: list_engine.delete_head(s, k),
    ListOperation.DELETE_TAIL: lambda s, i, k, v: list_engine.delete_tail(s, k),
    ListOperation.DELETE_VALUE: lambda s, i, k, v: list_engine.delete_value(s, v, k),
    ListOperation.DELETE_AT: lambda s, i, k, v: list_engine.delete_at(s, _position(i), k),
    ListOperation.SEARCH: lambda s, i, k, v: list_engine.search(s, v, k),
    ListOperation.TRAVERSE: lambda s, i, k, v: list_engine.traverse(s, k),
    ListOperation.REVERSE: lambda s, i, k, v: list_engine.reverse(s, k),
    ListOperation.SORT: lambda s, i, k, v: list_engine.sort(s, k),
    ListOperation.FIND_MIDDLE: lambda s, i, k, v: list_engine.find_middle(s, k),
    ListOperation.CLEAR: lambda s, i, k, v: list_engine.clear(s, k),
}

# Operations that exist for only some tree disciplines
BST_ONLY = {TreeOperation.DELETE, TreeOperation.SEARCH}
HEAP_ONLY = {TreeOperation.EXTRACT_ROOT, TreeOperation.HEAPIFY}
TRAVERSALS = {TreeOperation.INORDER, TreeOperation.PREORDER, TreeOperation.POSTORDER, TreeOperation.LEVEL_ORDER}


def _tree_supports(operation, tree_type):
    heap = is_heap(tree_type)
    return not ((heap and operation in BST_ONLY) or (not heap and operation in HEAP_ONLY))


def _dispatch_tree(operation, state, intent, tree_type, value):
    heap = is_heap(tree_type)

    if operation in TRAVERSALS:
        return tree_engine.traverse(state, operation.value, tree_type)
    if operation == TreeOperation.INSERT:
        if heap:
            return tree_engine.heap_insert(state, value, tree_type, intent.get("node_id"))
        return tree_engine.insert(state, value, tree_type, intent.get("node_id"))
    if operation == TreeOperation.DELETE:
        return tree_engine.delete(state, value, tree_type)
    if operation == TreeOperation.SEARCH:
        return tree_engine.search(state, value, tree_type)
    if operation in (TreeOperation.FIND_MIN, TreeOperation.FIND_MAX):
        maximum = operation == TreeOperation.FIND_MAX
        if heap:
            return tree_engine.heap_find_extreme(state, tree_type, maximum)
        return tree_engine.find_extreme(state, tree_type, maximum)
    if operation == TreeOperation.GET_HEIGHT:
        return tree_engine.heap_get_height(state, tree_type) if heap else tree_engine.get_height(state, tree_type)
    if operation == TreeOperation.EXTRACT_ROOT:
        return tree_engine.extract_root(state, tree_type)
    if operation == TreeOperation.HEAPIFY:
        values = intent.get("values")
        if values is None:
            values = [n["value"] for n in state]
        return tree_engine.heapify(values, tree_type, state)
    return tree_engine.clear_tree(state, tree_type)


def _graph_id(value, graph):
    """Match an operand to a node id, accepting 3 for "3"."""
    if value is None:
        return None
    ids = {n["id"] for n in graph.get("nodes", [])}
    if value in ids:
        return value
    if str(value) in ids:
        return str(value)
    return value


def _dispatch_graph(operation, state, intent):
    graph = state or {"nodes": [], "edges": []}
    nodes, edges = graph.get("nodes", []), graph.get("edges", [])

    if operation in (GraphOperation.BFS, GraphOperation.DFS, GraphOperation.DIJKSTRA):
        start = _graph_id(intent.get("start", intent.get("value")), graph)
        tracker = {
            GraphOperation.BFS: graph_engine.generate_bfs_trace,
            GraphOperation.DFS: graph_engine.generate_dfs_trace,
            GraphOperation.DIJKSTRA: graph_engine.generate_dijkstra_trace,
        }[operation]
        return tracker(nodes, edges, start)
    if operation == GraphOperation.ADD_NODE:
        value = intent.get("value")
        node_id = str(value) if value is not None else None
        return graph_engine.add_node(nodes, edges, node_id, value, intent.get("x"), intent.get("y"))
    if operation == GraphOperation.REMOVE_NODE:
        return graph_engine.remove_node(nodes, edges, _graph_id(intent.get("value"), graph))
    if operation == GraphOperation.ADD_EDGE:
        return graph_engine.add_edge(nodes, edges, _graph_id(intent.get("source"), graph),
                                     _graph_id(intent.get("target"), graph), intent.get("weight"))
    if operation == GraphOperation.REMOVE_EDGE:
        return graph_engine.remove_edge(nodes, edges, _graph_id(intent.get("source"), graph),
                                        _graph_id(intent.get("target"), graph))
    if operation == GraphOperation.RESET:
        return graph_engine.reset_graph(nodes, edges, intent.get("node_count", 6))
    return graph_engine.create_custom_graph(intent.get("node_count", len(nodes)), intent.get("edges", []),
                                            nodes, edges)


def dispatch(intent, state, list_kind="SLL", tree_type="BST", dataset_type="numbers", styles=None):
    """
    Run the tracker an intent names against `state` and return its result object.
    Unknown structures, unknown tags and operations outside a tree discipline come back
    as an UnknownOperation result; missing or unusable operands come back as ValueNotFound
    or InvalidIndex on the untouched state. This function does not raise for any of them.
    """
    structure = normalize_structure(intent.get("structure"))
    tag = intent.get("operation")
    if structure is None:
        return _unknown(None, tag, state, f"Unknown structure '{intent.get('structure')}'")

    operation = resolve_operation(structure, tag, intent.get("algorithm"))
    if operation is None:
        return _unknown(structure, tag, state, f"Unknown {structure} operation '{tag}'")

    if structure == "tree" and not _tree_supports(operation, tree_type):
        return _unknown(structure, tag, state,
                        f"{operation.value} is not available for {'heaps' if is_heap(tree_type) else tree_type}")

    logger.info(f"Dispatcher: {structure} {operation.value}")
    value = coerce_value(intent.get("value"), dataset_type)
    problem = _check_operands(structure, operation, intent, value, dataset_type)

    if problem is not None:
        error, description = problem
        logger.warning(description)
        result = failure_result(operation.value.replace("_", " ").title(), FAMILIES[structure], operation.value,
                                state, error, description)
    elif structure == "list":
        result = LIST_DISPATCH_TABLE[operation](state or [], intent, list_kind, value)
    elif structure == "tree":
        result = _dispatch_tree(operation, state or [], intent, tree_type, value)
    else:
        result = _dispatch_graph(operation, state, intent)

    base_styles = styles if styles is not None else DEFAULT_STYLES
    result["initial_frame"]["styles"] = merge_styles(base_styles, intent.get("style_overrides") or {})
    return result
