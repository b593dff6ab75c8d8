# session.py
"""
A visualizer session: the current structure of one kind plus its undo history.

The session is the only place that stores state between engine calls. It pushes
a history snapshot before every committed mutation and replaces its state with
the result's structure; read-only and failed operations leave both untouched.
"""
import copy
import logging

from .config import DATASET_TYPES, LIST_KINDS, TREE_TYPES, EngineConfig
from .default_styles import DEFAULT_STYLES
from .dispatcher import FAMILIES, dispatch, normalize_structure
from .errors import ErrorKind
from .graph.layout import generate_initial_graph
from .history import SnapshotHistory
from .linked_list.nodes import build_list
from .style_merger import merge_styles
from .tree.layout import calculate_heap_positions, calculate_node_positions
from .tree.nodes import is_heap
from .tree.stats import tree_stats
from .trace import failure_result, final_description

logger = logging.getLogger(__name__)

# Intents the session handles itself instead of forwarding to the engines
SESSION_OPERATIONS = ("undo", "change_list_type", "change_data_type", "change_tree_type")

# Names the command parser and older intents use for list kinds
LIST_KIND_ALIASES = {
    "singly": "SLL",
    "doubly": "DLL",
    "circular_singly": "CSLL",
    "circular_doubly": "CDLL",
}


class VisualizerSession:
    def __init__(self, structure="list", config=None, state=None):
        self.config = config or EngineConfig()
        self.structure = normalize_structure(structure)
        if self.structure is None:
            raise ValueError(f"Unknown structure '{structure}'")
        self.list_kind = self.config.list_kind
        self.tree_type = self.config.tree_type
        self.dataset_type = self.config.dataset_type
        self.styles = merge_styles(DEFAULT_STYLES, self.config.style_overrides)
        self.history = SnapshotHistory(self.config.max_history)
        self.state = copy.deepcopy(state) if state is not None else self._empty_state()
        self.last_result = None

    def _empty_state(self):
        if self.structure == "graph":
            return generate_initial_graph(6)
        return []

    # =================================================================
    # Operations
    # =================================================================

    def execute(self, intent):
        """
        Run one intent and return the engine's result object.
        Session intents (undo, kind and dataset changes) return a small status dict instead.
        """
        operation = str(intent.get("operation", "")).strip().lower()
        if operation in SESSION_OPERATIONS:
            return self._execute_session_operation(operation, intent)

        intent = dict(intent)
        intent.setdefault("structure", self.structure)
        if normalize_structure(intent["structure"]) != self.structure:
            description = (f"A {self.structure} session cannot run {intent['structure']} "
                           f"operation '{intent.get('operation')}'")
            logger.warning(description)
            result = failure_result("Unknown Operation", FAMILIES[self.structure], str(intent.get("operation")),
                                    self.state, ErrorKind.UNKNOWN_OPERATION, description)
            self.last_result = result
            return result

        result = dispatch(intent, self.state, self.list_kind, self.tree_type, self.dataset_type, self.styles)
        if result["committed"]:
            self.history.push(self.state, result["algorithm"]["operation"], final_description(result))
            self.state = copy.deepcopy(result["structure"])
        self.last_result = result
        logger.info(f"{result['algorithm']['operation']}: {final_description(result)}")
        return result

    # Setting intents and the session structure they apply to
    SETTING_STRUCTURES = {
        "change_list_type": ("list",),
        "change_tree_type": ("tree",),
        "change_data_type": ("list", "tree"),
    }

    def _execute_session_operation(self, operation, intent):
        if operation == "undo":
            restored = self.undo()
            return {"operation": "undo", "ok": restored, "description": "Undone" if restored else "Nothing to undo"}
        if self.structure not in self.SETTING_STRUCTURES[operation]:
            description = f"{operation} does not apply to a {self.structure} session"
            logger.warning(description)
            return {"operation": operation, "ok": False, "description": description}
        try:
            if operation == "change_list_type":
                kind = intent.get("list_kind") or intent.get("listType")
                self.change_list_kind(LIST_KIND_ALIASES.get(kind, kind))
                description = f"List kind is now {self.list_kind}"
            elif operation == "change_tree_type":
                self.change_tree_type(str(intent.get("tree_type") or intent.get("treeType") or "").upper())
                description = f"Tree type is now {self.tree_type}"
            else:
                self.change_dataset_type(intent.get("dataset_type") or intent.get("dataType"))
                description = f"Dataset type is now {self.dataset_type}"
        except ValueError as e:
            logger.warning(str(e))
            return {"operation": operation, "ok": False, "description": str(e)}
        return {"operation": operation, "ok": True, "description": description}

    def undo(self):
        """Restore the snapshot taken before the last committed mutation. Returns False when history is empty."""
        entry = self.history.undo()
        if entry is None:
            return False
        self.state = entry["structure"]
        logger.info(f"Undid {entry['operation']}")
        return True

    # =================================================================
    # Settings; each discards the current structure and its history
    # =================================================================

    def _reset(self):
        self.state = self._empty_state()
        self.history.clear()
        self.last_result = None

    def change_list_kind(self, kind):
        if kind not in LIST_KINDS:
            raise ValueError(f"Unknown list kind '{kind}', expected one of {LIST_KINDS}")
        self.list_kind = kind
        self._reset()

    def change_tree_type(self, tree_type):
        if tree_type not in TREE_TYPES:
            raise ValueError(f"Unknown tree type '{tree_type}', expected one of {TREE_TYPES}")
        self.tree_type = tree_type
        self._reset()

    def change_dataset_type(self, dataset_type):
        if dataset_type not in DATASET_TYPES:
            raise ValueError(f"Unknown dataset type '{dataset_type}', expected one of {DATASET_TYPES}")
        self.dataset_type = dataset_type
        self._reset()

    # =================================================================
    # Inspection
    # =================================================================

    def stats(self):
        if self.structure == "list":
            return {
                "length": len(self.state),
                "head": self.state[0]["value"] if self.state else None,
                "tail": self.state[-1]["value"] if self.state else None,
                "list_kind": self.list_kind,
                "history_depth": len(self.history),
            }
        if self.structure == "tree":
            stats = tree_stats(self.state, self.tree_type)
            stats.update({"tree_type": self.tree_type, "history_depth": len(self.history)})
            return stats
        return {
            "node_count": len(self.state["nodes"]),
            "edge_count": len(self.state["edges"]),
            "history_depth": len(self.history),
        }

    def layout(self):
        """Drawing positions {id: (x, y)} for the current tree, using the configured geometry."""
        if self.structure != "tree":
            raise ValueError("layout is only available for tree sessions")
        place = calculate_heap_positions if is_heap(self.tree_type) else calculate_node_positions
        return place(self.state, self.config.layout_width, self.config.layout_start_y, self.config.level_height)

    def load_values(self, values):
        """Replace a list session's contents with fresh nodes for `values`; not recorded in history."""
        if self.structure != "list":
            raise ValueError("load_values is only available for list sessions")
        self.state = build_list(values, self.list_kind)
        self.history.clear()
