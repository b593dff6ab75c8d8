"""Tests for intent routing."""

import pytest

from algoviz.dispatcher import GraphOperation, ListOperation, TreeOperation, dispatch, resolve_operation
from algoviz.errors import ErrorKind
from algoviz.linked_list import build_list
from algoviz.style_merger import merge_styles

from conftest import build_tree


class TestResolveOperation:
    """Aliases map into the closed operation sets."""

    @pytest.mark.parametrize("structure, tag, expected", [
        ("list", "insert_head", ListOperation.INSERT_HEAD),
        ("list", "INSERT", ListOperation.INSERT_TAIL),
        ("linked_list", "delete", ListOperation.DELETE_VALUE),
        ("tree", "extract_max", TreeOperation.EXTRACT_ROOT),
        ("tree", "in-order", TreeOperation.INORDER),
        ("tree", "bfs", TreeOperation.LEVEL_ORDER),
        ("graph", "shortest path", GraphOperation.DIJKSTRA),
    ])
    def test_aliases(self, structure, tag, expected):
        assert resolve_operation(structure, tag) == expected

    def test_start_traversal_uses_algorithm(self):
        assert resolve_operation("graph", "start_traversal", "dfs") == GraphOperation.DFS

    @pytest.mark.parametrize("structure, tag", [("list", "fly"), ("stack", "push"), ("tree", None)])
    def test_unknown(self, structure, tag):
        assert resolve_operation(structure, tag) is None


class TestDispatch:
    """Tests for dispatch()."""

    def test_list_insert(self):
        result = dispatch({"structure": "list", "operation": "insert_head", "value": "5"}, [])

        assert result["structure"][0]["value"] == 5
        assert result["algorithm"]["operation"] == "INSERT_HEAD"

    def test_characters_keep_text(self):
        result = dispatch({"structure": "list", "operation": "insert_tail", "value": 5}, [],
                          dataset_type="characters")

        assert result["structure"][0]["value"] == "5"

    def test_position_is_converted(self):
        state = build_list([1, 2, 3])
        result = dispatch({"structure": "list", "operation": "insert_at", "value": 9, "position": "1"}, state)

        assert [n["value"] for n in result["structure"]] == [1, 9, 2, 3]

    def test_list_kind_is_forwarded(self):
        result = dispatch({"structure": "list", "operation": "insert_tail", "value": 1}, [], list_kind="CSLL")
        node = result["structure"][0]

        assert node["next_id"] == node["id"]

    def test_unknown_structure(self):
        result = dispatch({"structure": "stack", "operation": "push"}, [])

        assert result["error"] == ErrorKind.UNKNOWN_OPERATION.value
        assert result["committed"] is False

    def test_unknown_operation_keeps_state(self):
        state = build_list([1, 2])
        result = dispatch({"structure": "list", "operation": "teleport"}, state)

        assert result["error"] == ErrorKind.UNKNOWN_OPERATION.value
        assert result["structure"] == state
        assert result["algorithm"]["family"] == "Linked List"

    @pytest.mark.parametrize("values", [[], [10, 5]])
    def test_tree_insert_without_value_is_rejected(self, values):
        state = build_tree(values)
        result = dispatch({"structure": "tree", "operation": "insert"}, state)

        assert result["error"] == ErrorKind.VALUE_NOT_FOUND.value
        assert result["committed"] is False
        assert result["structure"] == state

    def test_heap_insert_without_value_is_rejected(self):
        state = build_tree([8, 5], "MAX_HEAP")
        result = dispatch({"structure": "tree", "operation": "insert"}, state, tree_type="MAX_HEAP")

        assert result["error"] == ErrorKind.VALUE_NOT_FOUND.value
        assert result["structure"] == state

    @pytest.mark.parametrize("operation", ["insert", "delete", "search"])
    def test_text_value_on_numbers_tree_is_rejected(self, sample_bst, operation):
        result = dispatch({"structure": "tree", "operation": operation, "value": "abc"}, sample_bst)

        assert result["error"] == ErrorKind.VALUE_NOT_FOUND.value
        assert result["structure"] == sample_bst

    def test_text_value_on_characters_tree(self):
        result = dispatch({"structure": "tree", "operation": "insert", "value": "m"}, [],
                          dataset_type="characters")

        assert result["committed"] is True

    def test_heap_only_operation_on_bst_is_unknown(self, sample_bst):
        result = dispatch({"structure": "tree", "operation": "extract_root"}, sample_bst)

        assert result["error"] == ErrorKind.UNKNOWN_OPERATION.value

    def test_list_insert_without_value_is_rejected(self):
        state = build_list([1, 2])
        result = dispatch({"structure": "list", "operation": "insert_tail"}, state)

        assert result["error"] == ErrorKind.VALUE_NOT_FOUND.value
        assert result["structure"] == state

    @pytest.mark.parametrize("position", ["two", 1.5, None, True])
    def test_unusable_position_is_invalid_index(self, position):
        state = build_list([1, 2, 3])
        for operation in ("insert_at", "delete_at"):
            intent = {"structure": "list", "operation": operation, "value": 9, "position": position}
            result = dispatch(intent, state)

            assert result["error"] == ErrorKind.INVALID_INDEX.value
            assert result["structure"] == state

    def test_whole_float_position_is_accepted(self):
        result = dispatch({"structure": "list", "operation": "delete_at", "position": 1.0}, build_list([1, 2, 3]))

        assert [n["value"] for n in result["structure"]] == [1, 3]

    def test_graph_traversal_without_start_is_rejected(self, default_graph):
        result = dispatch({"structure": "graph", "operation": "start_traversal", "algorithm": "DFS"}, default_graph)

        assert result["error"] == ErrorKind.VALUE_NOT_FOUND.value
        assert result["structure"] == default_graph


    def test_graph_start_matches_numeric_operand(self, default_graph):
        intent = {"structure": "graph", "operation": "start_traversal", "algorithm": "BFS", "value": 1}
        result = dispatch(intent, default_graph)

        assert result["error"] is None
        assert result["output"]["order"][0] == "1"

    def test_graph_add_edge(self, default_graph):
        intent = {"structure": "graph", "operation": "add_edge", "source": 3, "target": 6}
        result = dispatch(intent, default_graph)

        assert result["committed"] is True
        assert {"source": "3", "target": "6", "status": "idle"} in result["structure"]["edges"]

    def test_style_overrides_are_merged(self):
        overrides = {"elementStyles": {"found": {"fill": "#000000"}}}
        result = dispatch({"structure": "list", "operation": "traverse", "style_overrides": overrides}, [])
        styles = result["initial_frame"]["styles"]

        assert styles["elementStyles"]["found"]["fill"] == "#000000"
        assert styles["elementStyles"]["found"]["stroke"] == "#4CAF50"


class TestMergeStyles:
    """Tests for the style merger."""

    def test_nested_merge_does_not_modify_inputs(self):
        base = {"a": {"x": 1, "y": 2}, "b": 3}
        overrides = {"a": {"y": 5}, "c": 4}

        merged = merge_styles(base, overrides)

        assert merged == {"a": {"x": 1, "y": 5}, "b": 3, "c": 4}
        assert base == {"a": {"x": 1, "y": 2}, "b": 3}

    def test_scalar_replaces_dict(self):
        assert merge_styles({"a": {"x": 1}}, {"a": None}) == {"a": None}
