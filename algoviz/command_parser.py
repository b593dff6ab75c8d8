# command_parser.py
"""
Rule-based text command parser.

Turns short commands such as "insert 5 at head", "run bfs from 2" or
"connect 1 and 3" into intent dicts for the dispatcher. Patterns are tried in
a fixed priority order; the first match wins. Returns None when nothing matches.
"""
import logging
import re

logger = logging.getLogger(__name__)

# Compiled once; order of use is fixed in parse_command
PATTERNS = {
    # Graph commands
    "BFS": re.compile(r"bfs|breadth", re.I),
    "DFS": re.compile(r"dfs|depth", re.I),
    "DIJKSTRA": re.compile(r"dijkstra|shortest\s*path", re.I),
    "START_ALGO": re.compile(r"start|begin|run", re.I),
    "ADD_EDGE": re.compile(r"add.*edge|connect", re.I),
    "REMOVE_EDGE": re.compile(r"remove.*edge|disconnect", re.I),
    "ADD_NODE": re.compile(r"add.*node", re.I),
    "REMOVE_NODE": re.compile(r"remove.*node|delete.*node", re.I),
    "RESET_GRAPH": re.compile(r"reset.*graph|clear.*graph", re.I),

    # Tree commands
    "TREE_CONTEXT": re.compile(r"tree|heap|bst|avl", re.I),
    "INORDER": re.compile(r"in\s*order", re.I),
    "PREORDER": re.compile(r"pre\s*order", re.I),
    "POSTORDER": re.compile(r"post\s*order", re.I),
    "LEVEL_ORDER": re.compile(r"level\s*order", re.I),
    "EXTRACT": re.compile(r"extract|pop.*root", re.I),
    "HEAPIFY": re.compile(r"heapify|build.*heap", re.I),
    "HEIGHT": re.compile(r"height", re.I),
    "FIND_MIN": re.compile(r"min(imum)?\b", re.I),
    "FIND_MAX": re.compile(r"max(imum)?\b", re.I),

    # List commands
    "TRAVERSE": re.compile(r"traverse|walk.*through|iterate|go.*through.*list|visit.*all", re.I),
    "REVERSE_LIST": re.compile(r"reverse.*list|reverse$", re.I),
    "SORT": re.compile(r"sort", re.I),
    "CLEAR_LIST": re.compile(r"clear|reset|empty", re.I),
    "FIND_MIDDLE": re.compile(r"middle", re.I),
    "UNDO": re.compile(r"undo", re.I),
    "DELETE_HEAD": re.compile(r"delete.*head|remove.*head|delete.*first|remove.*first|pop.*head", re.I),
    "DELETE_TAIL": re.compile(r"delete.*tail|remove.*tail|delete.*last|remove.*last|delete.*end|remove.*end"
                              r"|pop.*tail", re.I),
    "DELETE_AT": re.compile(r"delete.*position|remove.*position|delete.*index|remove.*index", re.I),
    "DELETE_VALUE": re.compile(r"delete|remove", re.I),
    "INSERT_HEAD": re.compile(r"insert.*head|add.*head|insert.*beginning|add.*beginning|insert.*start"
                              r"|add.*start|insert.*front|add.*front|insert.*first|add.*first", re.I),
    "INSERT_TAIL": re.compile(r"insert.*tail|add.*tail|insert.*end|add.*end|insert.*last|add.*last"
                              r"|insert.*back|add.*back", re.I),
    "INSERT_AT": re.compile(r"insert.*position|add.*position|insert.*index|add.*index", re.I),
    "INSERT": re.compile(r"insert|add|put", re.I),
    "SEARCH": re.compile(r"search|find|look|locate", re.I),

    # List kind changes
    "CIRCULAR_DOUBLY": re.compile(r"circular.*doubly", re.I),
    "CIRCULAR_SINGLY": re.compile(r"circular.*singly|circular", re.I),
    "DOUBLY": re.compile(r"doubly", re.I),
    "SINGLY": re.compile(r"singly", re.I),

    # Dataset types
    "NUMBERS": re.compile(r"number", re.I),
    "CHARACTERS": re.compile(r"character", re.I),
    "COLORS": re.compile(r"colou?r", re.I),
    "EMOJIS": re.compile(r"emoji", re.I),

    # Exclusions
    "GRAPH_CONTEXT": re.compile(r"graph", re.I),
}

NUMBER_WORDS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4,
    "five": 5, "six": 6, "seven": 7, "eight": 8, "nine": 9,
    "ten": 10, "eleven": 11, "twelve": 12, "thirteen": 13,
    "fourteen": 14, "fifteen": 15, "sixteen": 16, "seventeen": 17,
    "eighteen": 18, "nineteen": 19, "twenty": 20, "thirty": 30,
    "forty": 40, "fifty": 50, "sixty": 60, "seventy": 70,
    "eighty": 80, "ninety": 90, "hundred": 100,
}


def normalize_text(text):
    """Lowercase and strip punctuation."""
    return re.sub(r"[^\w\s]", "", text.lower()).strip()


def extract_numbers(text):
    """All digit sequences in order; number words are used only when there are no digits."""
    numbers = [int(d) for d in re.findall(r"\d+", text)]
    if not numbers:
        numbers = [NUMBER_WORDS[w] for w in text.split() if w in NUMBER_WORDS]
    return numbers


def _intent(operation, structure, confidence, value=None, **extra):
    intent = {"operation": operation, "value": value, "structure": structure, "confidence": confidence}
    intent.update(extra)
    return intent


def _parse_graph(text, first, second):
    if PATTERNS["START_ALGO"].search(text):
        for algorithm in ("BFS", "DFS", "DIJKSTRA"):
            if PATTERNS[algorithm].search(text):
                return _intent("start_traversal", "graph", 0.7, first, algorithm=algorithm)
    if PATTERNS["ADD_EDGE"].search(text) and first is not None and second is not None:
        return _intent("add_edge", "graph", 0.7, source=first, target=second)
    if PATTERNS["REMOVE_EDGE"].search(text) and first is not None and second is not None:
        return _intent("remove_edge", "graph", 0.7, source=first, target=second)
    if PATTERNS["ADD_NODE"].search(text) and first is not None:
        return _intent("add_node", "graph", 0.7, first)
    if PATTERNS["REMOVE_NODE"].search(text) and first is not None:
        return _intent("remove_node", "graph", 0.7, first)
    if PATTERNS["RESET_GRAPH"].search(text):
        return _intent("reset", "graph", 0.7)
    return None


def _parse_tree(text, first):
    for operation in ("INORDER", "PREORDER", "POSTORDER", "LEVEL_ORDER"):
        if PATTERNS[operation].search(text):
            return _intent(operation.lower(), "tree", 0.7)
    if PATTERNS["HEAPIFY"].search(text):
        return _intent("heapify", "tree", 0.7)
    if PATTERNS["EXTRACT"].search(text):
        return _intent("extract_root", "tree", 0.7)
    if PATTERNS["HEIGHT"].search(text):
        return _intent("get_height", "tree", 0.7)
    if PATTERNS["DELETE_VALUE"].search(text) and first is not None:
        return _intent("delete", "tree", 0.7, first)
    if PATTERNS["INSERT"].search(text) and first is not None:
        return _intent("insert", "tree", 0.7, first)
    if PATTERNS["SEARCH"].search(text) and first is not None:
        return _intent("search", "tree", 0.7, first)
    if PATTERNS["FIND_MIN"].search(text):
        return _intent("find_min", "tree", 0.7)
    if PATTERNS["FIND_MAX"].search(text):
        return _intent("find_max", "tree", 0.7)
    if PATTERNS["CLEAR_LIST"].search(text):
        return _intent("clear", "tree", 0.7)
    return None


def _parse_list(text, first, second):
    # 1. Whole-list operations
    if PATTERNS["TRAVERSE"].search(text):
        return _intent("traverse", "list", 0.7)
    if PATTERNS["REVERSE_LIST"].search(text):
        return _intent("reverse", "list", 0.7)
    if PATTERNS["SORT"].search(text):
        return _intent("sort", "list", 0.7)
    if PATTERNS["CLEAR_LIST"].search(text):
        return _intent("clear", "list", 0.7)
    if PATTERNS["FIND_MIDDLE"].search(text):
        return _intent("find_middle", "list", 0.7)
    if PATTERNS["UNDO"].search(text):
        return _intent("undo", "list", 0.8)

    # 2. Deletion, most specific first
    if PATTERNS["DELETE_HEAD"].search(text):
        return _intent("delete_head", "list", 0.7)
    if PATTERNS["DELETE_TAIL"].search(text):
        return _intent("delete_tail", "list", 0.7)
    if PATTERNS["DELETE_AT"].search(text) and first is not None:
        return _intent("delete_at", "list", 0.7, position=first)
    if PATTERNS["DELETE_VALUE"].search(text) and first is not None:
        return _intent("delete_value", "list", 0.6, first)

    # 3. Insertion
    if PATTERNS["INSERT_HEAD"].search(text) and first is not None:
        return _intent("insert_head", "list", 0.8, first)
    if PATTERNS["INSERT_TAIL"].search(text) and first is not None:
        return _intent("insert_tail", "list", 0.8, first)
    if PATTERNS["INSERT_AT"].search(text) and first is not None and second is not None:
        return _intent("insert_at", "list", 0.7, first, position=second)
    if PATTERNS["INSERT"].search(text) and first is not None:
        return _intent("insert_tail", "list", 0.6, first)

    if PATTERNS["SEARCH"].search(text) and first is not None:
        return _intent("search", "list", 0.7, first)

    # 4. Settings
    for key, kind in (("CIRCULAR_DOUBLY", "CDLL"), ("CIRCULAR_SINGLY", "CSLL"), ("DOUBLY", "DLL"), ("SINGLY", "SLL")):
        if PATTERNS[key].search(text):
            return _intent("change_list_type", "list", 0.8 if "CIRCULAR" in key else 0.7, list_kind=kind)
    for key, dataset in (("NUMBERS", "numbers"), ("CHARACTERS", "characters"),
                         ("COLORS", "colors"), ("EMOJIS", "emojis")):
        if PATTERNS[key].search(text):
            return _intent("change_data_type", "list", 0.6, dataset_type=dataset)
    return None


def parse_command(text, structure=None):
    """
    Parse a free-text command into an intent, or None.

    `structure` is the host's current view ("list", "tree" or "graph"); when it is
    "tree", value operations such as "insert 5" or "delete 3" become tree intents.
    """
    normalized = normalize_text(text)
    numbers = extract_numbers(normalized)
    first = numbers[0] if numbers else None
    second = numbers[1] if len(numbers) > 1 else None
    logger.debug(f"Parsing command: '{normalized}' numbers={numbers}")

    intent = None
    # Graph patterns go first unless the host is showing a list or a tree
    names_graph = any(PATTERNS[key].search(normalized) for key in ("GRAPH_CONTEXT", "BFS", "DFS", "DIJKSTRA"))
    if structure in (None, "graph") or names_graph:
        intent = _parse_graph(normalized, first, second)
    if intent is None and (structure == "tree" or PATTERNS["TREE_CONTEXT"].search(normalized)):
        intent = _parse_tree(normalized, first)
    if intent is None and not PATTERNS["GRAPH_CONTEXT"].search(normalized):
        intent = _parse_list(normalized, first, second)

    if intent is None:
        logger.info(f"No command matched: '{text}'")
    return intent
