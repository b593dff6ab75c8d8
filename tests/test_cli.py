"""Tests for the command line entry point, the trace player and the text renderer."""

import json

import pytest

from algoviz import cli, graph, linked_list, tree
from algoviz.linked_list import build_list
from algoviz.player import TracePlayer
from algoviz.renderer import TextRenderer


class TestCLI:
    """Tests for algoviz run, say and validate."""

    def test_run_writes_trace(self, tmp_path):
        intent_path = tmp_path / "intent.json"
        intent_path.write_text(json.dumps({"structure": "list", "operation": "insert_head", "value": 5}),
                               encoding="utf-8")
        out_path = tmp_path / "trace.json"

        code = cli.main(["run", str(intent_path), "--validate", "-o", str(out_path)])

        assert code == 0
        trace = json.loads(out_path.read_text(encoding="utf-8"))
        assert trace["structure"][0]["value"] == 5

    def test_run_with_state_file(self, tmp_path, capsys):
        intent_path = tmp_path / "intent.json"
        intent_path.write_text(json.dumps({"structure": "list", "operation": "find_middle"}), encoding="utf-8")
        state_path = tmp_path / "state.json"
        state_path.write_text(json.dumps(build_list([1, 2, 3, 4, 5])), encoding="utf-8")

        code = cli.main(["run", str(intent_path), "--state", str(state_path)])

        assert code == 0
        trace = json.loads(capsys.readouterr().out)
        assert trace["output"]["middle_value"] == 3

    def test_say_prints_feedback_and_stats(self, capsys):
        code = cli.main(["say", "insert 5 at head", "insert 3 at tail", "fly away"])
        out = capsys.readouterr().out

        assert code == 0
        assert "(not understood)" in out
        stats = json.loads(out.strip().splitlines()[-1])
        assert stats["length"] == 2

    def test_say_render_graph(self, capsys):
        code = cli.main(["say", "--structure", "graph", "--render", "run bfs from 1"])

        assert code == 0
        assert "BFS Traversal Complete" in capsys.readouterr().out

    def test_say_refuses_other_structure(self, capsys):
        code = cli.main(["say", "--structure", "list", "insert 5", "run bfs from 1"])
        out = capsys.readouterr().out

        assert code == 0
        assert "cannot run graph operation" in out
        assert json.loads(out.strip().splitlines()[-1])["length"] == 1

    def test_validate_reports_failure(self, tmp_path):
        good = tmp_path / "good.json"
        good.write_text(json.dumps(linked_list.traverse(build_list([1]))), encoding="utf-8")
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"steps": []}), encoding="utf-8")

        assert cli.main(["validate", str(good)]) == 0
        assert cli.main(["validate", str(good), str(bad)]) == 1

    def test_missing_config_returns_error(self, tmp_path):
        assert cli.main(["--config", str(tmp_path / "none.json"), "say", "undo"]) == 1

    def test_unknown_command_exits(self):
        with pytest.raises(SystemExit):
            cli.main(["dance"])


class TestTracePlayer:
    """Tests for stepping through a finished trace."""

    @pytest.fixture
    def player(self):
        return TracePlayer(linked_list.traverse(build_list([1, 2])))

    def test_starts_at_initial_frame(self, player):
        assert player.position == -1
        assert "styles" in player.current()

    def test_next_until_end(self, player):
        frames = list(player)

        assert len(frames) == len(player)
        assert player.finished
        assert player.next() is None

    def test_previous_and_seek(self, player):
        player.seek(1)
        assert player.previous() is player.steps[0]
        assert player.previous() is player.result["initial_frame"]
        assert player.previous() is None

    def test_seek_out_of_range(self, player):
        with pytest.raises(IndexError):
            player.seek(len(player))

    def test_reset(self, player):
        player.next()
        player.reset()

        assert player.position == -1


class TestTextRenderer:
    """Tests for plain text frames."""

    def test_singly_list(self):
        result = linked_list.insert_tail(build_list([1, 2]), 3)

        assert TextRenderer(result).render_frame(result["steps"][-1]).splitlines()[0] == "1 -> 2 -> 3 -> null"

    def test_circular_doubly_list(self):
        result = linked_list.traverse(build_list([1, 2, 3], "CDLL"), "CDLL")
        text = TextRenderer(result).render_frame(result["steps"][0])

        assert text.splitlines()[0] == "1[searching] <-> 2 <-> 3 -> (head)"

    def test_tree_levels(self, sample_bst):
        result = tree.search(sample_bst, 7)
        text = TextRenderer(result).render_frame(result["steps"][-1])

        assert text.splitlines()[:3] == ["L0: 10", "L1: 5  15", "L2: 3  7[found]"]

    def test_graph_traversal_frame(self, default_graph):
        result = graph.generate_bfs_trace(default_graph["nodes"], default_graph["edges"], "1")
        text = TextRenderer(result).render_frame(result["steps"][2])

        assert "frontier: 2" in text
        assert "line 9: queue.enqueue(neighbor)" in text

    def test_render_includes_error(self):
        result = linked_list.delete_head([])

        assert TextRenderer(result).render().endswith("Error: EmptyStructure")
