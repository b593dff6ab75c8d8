"""Tests for VisualizerSession and SnapshotHistory."""

import pytest

from algoviz.config import EngineConfig
from algoviz.history import SnapshotHistory
from algoviz.session import VisualizerSession


def values(session):
    return [n["value"] for n in session.state]


class TestSnapshotHistory:
    """Tests for the undo stack."""

    def test_undo_returns_latest_first(self):
        history = SnapshotHistory()
        history.push([1], "INSERT_TAIL")
        history.push([1, 2], "INSERT_TAIL")

        assert history.undo()["structure"] == [1, 2]
        assert history.undo()["structure"] == [1]
        assert history.undo() is None

    def test_snapshots_do_not_alias(self):
        history = SnapshotHistory()
        structure = [{"value": 1}]
        history.push(structure, "INSERT_HEAD")
        structure[0]["value"] = 99

        restored = history.undo()["structure"]

        assert restored == [{"value": 1}]

    def test_max_depth_drops_oldest(self):
        history = SnapshotHistory(max_depth=2)
        for i in range(3):
            history.push([i], "INSERT_TAIL")

        assert len(history) == 2
        assert history.peek()["structure"] == [2]
        history.undo()
        assert history.undo()["structure"] == [1]
        assert not history.can_undo

    def test_clear(self):
        history = SnapshotHistory()
        history.push([], "CLEAR")
        history.clear()

        assert len(history) == 0


class TestListSession:
    """List sessions push history only for committed changes."""

    def test_committed_operation_pushes_history(self):
        session = VisualizerSession("list")
        session.execute({"operation": "insert_head", "value": 5})
        session.execute({"operation": "insert_tail", "value": 3})

        assert values(session) == [5, 3]
        assert len(session.history) == 2

    def test_undo_restores_previous_state(self):
        session = VisualizerSession("list")
        session.execute({"operation": "insert_head", "value": 5})
        session.execute({"operation": "insert_tail", "value": 3})

        assert session.undo() is True
        assert values(session) == [5]
        assert session.undo() is True
        assert session.state == []
        assert session.undo() is False

    def test_read_only_and_failed_operations_leave_history(self):
        session = VisualizerSession("list")
        session.load_values([1, 2, 3, 4, 5])

        session.execute({"operation": "search", "value": 3})
        failed = session.execute({"operation": "delete_at", "position": 10})

        assert failed["error"] == "InvalidIndex"
        assert values(session) == [1, 2, 3, 4, 5]
        assert len(session.history) == 0

    def test_undo_intent(self):
        session = VisualizerSession("list")
        session.execute({"operation": "insert_head", "value": 1})

        status = session.execute({"operation": "undo"})

        assert status == {"operation": "undo", "ok": True, "description": "Undone"}
        assert session.state == []

    def test_change_list_kind_resets(self):
        session = VisualizerSession("list")
        session.execute({"operation": "insert_head", "value": 1})

        status = session.execute({"operation": "change_list_type", "list_kind": "doubly"})

        assert status["ok"] is True
        assert session.list_kind == "DLL"
        assert session.state == []
        assert len(session.history) == 0

    def test_change_list_kind_rejects_unknown(self):
        session = VisualizerSession("list")

        with pytest.raises(ValueError):
            session.change_list_kind("XOR")

    def test_dataset_type_applies_to_values(self):
        session = VisualizerSession("list")
        session.change_dataset_type("characters")
        session.execute({"operation": "insert_head", "value": 7})

        assert values(session) == ["7"]

    def test_stats(self):
        session = VisualizerSession("list")
        session.load_values([4, 5, 6])

        assert session.stats() == {"length": 3, "head": 4, "tail": 6, "list_kind": "SLL", "history_depth": 0}

    def test_history_limit_from_config(self):
        session = VisualizerSession("list", config=EngineConfig(max_history=2))
        for value in range(4):
            session.execute({"operation": "insert_tail", "value": value})

        assert len(session.history) == 2


class TestTreeAndGraphSessions:
    """Tree and graph sessions share the same history rules."""

    def test_heap_session(self):
        session = VisualizerSession("tree")
        session.change_tree_type("MAX_HEAP")
        for value in (5, 3, 8, 1):
            session.execute({"operation": "insert", "value": value})

        result = session.execute({"operation": "extract_root"})

        assert result["output"]["value"] == 8
        assert session.stats()["node_count"] == 3
        assert session.stats()["tree_type"] == "MAX_HEAP"

    def test_duplicate_tree_insert_not_recorded(self):
        session = VisualizerSession("tree")
        session.execute({"operation": "insert", "value": 4})
        session.execute({"operation": "insert", "value": 4})

        assert len(session.history) == 1

    def test_graph_session_starts_with_default_graph(self):
        session = VisualizerSession("graph")

        assert session.stats() == {"node_count": 6, "edge_count": 8, "history_depth": 0}

    def test_graph_edit_and_undo(self):
        session = VisualizerSession("graph")
        session.execute({"operation": "remove_node", "value": 1})
        assert session.stats()["node_count"] == 5

        session.undo()

        assert session.stats()["node_count"] == 6

    def test_traversal_does_not_change_graph(self):
        session = VisualizerSession("graph")
        result = session.execute({"operation": "start_traversal", "algorithm": "DFS", "value": 2})

        assert result["output"]["order"][0] == "2"
        assert len(session.history) == 0

    def test_layout_uses_configured_geometry(self):
        session = VisualizerSession("tree", config=EngineConfig(layout_width=1000, layout_start_y=50))
        session.execute({"operation": "insert", "value": 10})

        assert list(session.layout().values()) == [(500, 50)]

    def test_layout_needs_tree(self):
        with pytest.raises(ValueError):
            VisualizerSession("list").layout()

    def test_unknown_structure(self):
        with pytest.raises(ValueError):
            VisualizerSession("queue")


class TestMismatchedIntents:
    """Intents for another structure or setting are refused without touching the session."""

    def test_tree_intent_leaves_list_untouched(self):
        session = VisualizerSession("list")
        session.execute({"operation": "insert_head", "value": 3})

        result = session.execute({"structure": "tree", "operation": "insert", "value": 4})

        assert result["error"] == "UnknownOperation"
        assert result["committed"] is False
        assert values(session) == [3]
        assert len(session.history) == 1

    def test_graph_intent_on_list_session(self):
        session = VisualizerSession("list")
        session.load_values([1, 2])

        result = session.execute({"structure": "graph", "operation": "start_traversal", "algorithm": "BFS",
                                  "value": 1})

        assert result["error"] == "UnknownOperation"
        assert values(session) == [1, 2]

    def test_list_kind_change_ignored_by_tree_session(self):
        session = VisualizerSession("tree")
        for value in (5, 3, 8):
            session.execute({"operation": "insert", "value": value})

        status = session.execute({"operation": "change_list_type", "list_kind": "doubly"})

        assert status["ok"] is False
        assert len(session.state) == 3
        assert len(session.history) == 3

    def test_tree_type_change_ignored_by_list_session(self):
        session = VisualizerSession("list")
        session.execute({"operation": "insert_head", "value": 1})

        status = session.execute({"operation": "change_tree_type", "tree_type": "AVL"})

        assert status["ok"] is False
        assert session.tree_type == "BST"
        assert values(session) == [1]

    def test_dataset_change_ignored_by_graph_session(self):
        session = VisualizerSession("graph")

        status = session.execute({"operation": "change_data_type", "dataset_type": "characters"})

        assert status["ok"] is False
        assert session.dataset_type == "numbers"

    @pytest.mark.parametrize("intent", [
        {"operation": "change_list_type", "list_kind": "XOR"},
        {"operation": "change_data_type", "dataset_type": "planets"},
    ])
    def test_unknown_setting_value_is_reported(self, intent):
        session = VisualizerSession("list")
        session.execute({"operation": "insert_head", "value": 1})

        status = session.execute(intent)

        assert status["ok"] is False
        assert session.list_kind == "SLL"
        assert values(session) == [1]

    def test_unknown_tree_type_is_reported(self):
        session = VisualizerSession("tree")

        status = session.execute({"operation": "change_tree_type", "tree_type": "splay"})

        assert status["ok"] is False
        assert "SPLAY" in status["description"]
