"""Tests for the linked list trackers."""

import copy

import pytest

from algoviz import linked_list
from algoviz.errors import ErrorKind, InvariantError
from algoviz.linked_list import build_list, check_links, coerce_value, values_equal

from conftest import list_values, walk_backward, walk_forward


class TestInsertion:
    """Tests for insert at head, tail and index."""

    @pytest.mark.parametrize("kind", ["SLL", "DLL", "CSLL", "CDLL"])
    def test_insert_head_on_every_kind(self, kind):
        """Inserted node becomes the head and links stay consistent."""
        nodes = build_list([2, 3], kind)
        result = linked_list.insert_head(nodes, 1, kind)

        assert result["committed"] is True
        assert result["error"] is None
        assert list_values(result["structure"]) == [1, 2, 3]
        assert check_links(result["structure"], kind)

    def test_insert_tail_on_empty(self):
        """Tail insert into an empty list creates a single node."""
        result = linked_list.insert_tail([], 7)

        assert list_values(result["structure"]) == [7]
        assert result["structure"][0]["next_id"] is None

    def test_insert_at_middle(self, five_list):
        """Insert at index 2 shifts later nodes right."""
        result = linked_list.insert_at(five_list, 9, 2)

        assert list_values(result["structure"]) == [1, 2, 9, 3, 4, 5]
        assert walk_forward(result["structure"]) == [1, 2, 9, 3, 4, 5]
        assert result["output"]["index"] == 2

    def test_insert_at_length_appends(self, five_list):
        """Index equal to the length is a valid tail position."""
        result = linked_list.insert_at(five_list, 6, 5)

        assert list_values(result["structure"])[-1] == 6

    @pytest.mark.parametrize("index", [-1, 6, None])
    def test_insert_at_invalid_index(self, five_list, index):
        """Out of range index is rejected without mutation."""
        result = linked_list.insert_at(five_list, 9, index)

        assert result["error"] == ErrorKind.INVALID_INDEX.value
        assert result["committed"] is False
        assert result["structure"] == five_list

    def test_caller_supplied_id(self):
        """A provided node id is used for the new node."""
        result = linked_list.insert_tail([], 4, node_id="n-1")

        assert result["structure"][0]["id"] == "n-1"


class TestDeletion:
    """Tests for the delete operations."""

    def test_delete_head(self, five_list):
        result = linked_list.delete_head(five_list)

        assert list_values(result["structure"]) == [2, 3, 4, 5]
        assert result["output"]["removed_value"] == 1

    def test_delete_tail_walks_singly_list(self, five_list):
        """Singly lists show a walk to the node before the tail."""
        result = linked_list.delete_tail(five_list, "SLL")
        walking = [s for s in result["steps"] if "Walking" in s["description"]]

        assert list_values(result["structure"]) == [1, 2, 3, 4]
        assert len(walking) == 4

    def test_delete_tail_doubly_has_no_walk(self):
        nodes = build_list([1, 2, 3], "DLL")
        result = linked_list.delete_tail(nodes, "DLL")

        assert not [s for s in result["steps"] if "Walking" in s["description"]]
        assert result["structure"][-1]["next_id"] is None

    @pytest.mark.parametrize("operation", ["delete_head", "delete_tail"])
    def test_delete_on_empty(self, operation):
        result = getattr(linked_list, operation)([])

        assert result["error"] == ErrorKind.EMPTY_STRUCTURE.value
        assert result["structure"] == []

    def test_delete_at_out_of_range(self, five_list):
        """Delete at index 10 on a five node list is rejected and reported."""
        before = copy.deepcopy(five_list)
        result = linked_list.delete_at(five_list, 10)

        assert result["error"] == ErrorKind.INVALID_INDEX.value
        assert result["committed"] is False
        assert result["structure"] == before
        assert five_list == before
        assert "Invalid index" in result["steps"][-1]["description"]

    def test_delete_at_on_empty_reports_empty(self):
        result = linked_list.delete_at([], 0)

        assert result["error"] == ErrorKind.EMPTY_STRUCTURE.value

    def test_delete_value_first_loose_match(self):
        """Loose equality removes the first node whose value matches."""
        nodes = build_list([1, "2", 2, 3])
        result = linked_list.delete_value(nodes, 2)

        assert list_values(result["structure"]) == [1, 2, 3]
        assert result["output"]["index"] == 1

    def test_delete_value_miss_keeps_scan(self, five_list):
        result = linked_list.delete_value(five_list, 42)

        assert result["error"] == ErrorKind.VALUE_NOT_FOUND.value
        assert result["structure"] == five_list
        # one frame per compared node, plus start and miss frames
        assert len(result["steps"]) == len(five_list) + 2

    def test_clear(self, five_list):
        result = linked_list.clear(five_list)

        assert result["structure"] == []
        assert result["committed"] is True
        assert result["output"]["removed_count"] == 5

    @pytest.mark.parametrize("kind", ["CSLL", "CDLL"])
    def test_delete_head_keeps_cycle(self, kind):
        nodes = build_list([1, 2, 3], kind)
        result = linked_list.delete_head(nodes, kind)
        final = result["structure"]

        assert final[-1]["next_id"] == final[0]["id"]
        assert check_links(final, kind)


KINDS = ["SLL", "DLL", "CSLL", "CDLL"]


class TestBoundariesOnEveryKind:
    """Deletes and inserts at the ends keep every list kind's links intact."""

    def assert_links(self, nodes, kind, expected):
        assert check_links(nodes, kind)
        assert walk_forward(nodes) == expected
        if kind in ("DLL", "CDLL"):
            assert walk_backward(nodes) == expected[::-1]
        if kind in ("CSLL", "CDLL") and nodes:
            assert nodes[-1]["next_id"] == nodes[0]["id"]
        if kind == "CDLL" and nodes:
            assert nodes[0]["prev_id"] == nodes[-1]["id"]

    @pytest.mark.parametrize("kind", KINDS)
    def test_delete_tail_relinks_new_tail(self, kind):
        result = linked_list.delete_tail(build_list([1, 2, 3], kind), kind)

        assert result["committed"] is True
        self.assert_links(result["structure"], kind, [1, 2])

    @pytest.mark.parametrize("kind", KINDS)
    @pytest.mark.parametrize("operation", ["delete_head", "delete_tail"])
    def test_deleting_only_node_empties_list(self, kind, operation):
        result = getattr(linked_list, operation)(build_list([7], kind), kind)

        assert result["committed"] is True
        assert result["structure"] == []

    @pytest.mark.parametrize("kind", KINDS)
    def test_delete_at_first_and_last(self, kind):
        first = linked_list.delete_at(build_list([1, 2, 3], kind), 0, kind)
        last = linked_list.delete_at(build_list([1, 2, 3], kind), 2, kind)

        self.assert_links(first["structure"], kind, [2, 3])
        self.assert_links(last["structure"], kind, [1, 2])

    @pytest.mark.parametrize("kind", KINDS)
    def test_insert_at_front_and_end(self, kind):
        front = linked_list.insert_at(build_list([1, 2], kind), 0, 0, kind)
        end = linked_list.insert_at(build_list([1, 2], kind), 3, 2, kind)

        self.assert_links(front["structure"], kind, [0, 1, 2])
        self.assert_links(end["structure"], kind, [1, 2, 3])

    @pytest.mark.parametrize("kind", ["DLL", "CDLL"])
    def test_delete_value_in_middle_keeps_back_links(self, kind):
        result = linked_list.delete_value(build_list([1, 2, 3, 4], kind), 3, kind)

        self.assert_links(result["structure"], kind, [1, 2, 4])


class TestReadOnlyOperations:
    """Tests for search, traverse and find-middle."""

    def test_search_found(self, five_list):
        result = linked_list.search(five_list, 4)

        assert result["output"]["found"] is True
        assert result["output"]["found_index"] == 3
        assert result["committed"] is False
        assert result["steps"][-1]["statuses"] == {five_list[3]["id"]: "found"}

    def test_search_matches_numeric_text(self, five_list):
        result = linked_list.search(five_list, "3")

        assert result["output"]["found_index"] == 2

    def test_search_miss(self, five_list):
        result = linked_list.search(five_list, 99)

        assert result["error"] == ErrorKind.VALUE_NOT_FOUND.value
        assert result["output"]["found"] is False

    def test_traverse_order(self, five_list):
        result = linked_list.traverse(five_list)

        assert result["output"]["order"] == [1, 2, 3, 4, 5]

    def test_traverse_empty_is_safe(self):
        result = linked_list.traverse([])

        assert result["error"] is None
        assert result["output"]["order"] == []

    def test_find_middle_odd(self, five_list):
        """Five nodes: middle is index 2, value 3."""
        result = linked_list.find_middle(five_list)

        assert result["output"]["middle_index"] == 2
        assert result["output"]["middle_value"] == 3
        assert result["output"]["middle_id"] == five_list[2]["id"]

    def test_find_middle_even_gives_second_middle(self):
        nodes = build_list([1, 2, 3, 4])
        result = linked_list.find_middle(nodes)

        assert result["output"]["middle_value"] == 3

    def test_find_middle_is_idempotent(self, five_list):
        """Repeated calls on an unchanged list return the same node."""
        first = linked_list.find_middle(five_list)
        second = linked_list.find_middle(first["structure"])

        assert first["output"]["middle_id"] == second["output"]["middle_id"]

    def test_find_middle_empty(self):
        result = linked_list.find_middle([])

        assert result["error"] is None
        assert result["output"]["middle_id"] is None


class TestReordering:
    """Tests for reverse and sort."""

    def test_reverse_updates_forward_links(self, five_list):
        result = linked_list.reverse(five_list)

        assert list_values(result["structure"]) == [5, 4, 3, 2, 1]
        assert walk_forward(result["structure"]) == [5, 4, 3, 2, 1]
        assert result["structure"][-1]["next_id"] is None

    def test_reverse_doubly(self):
        nodes = build_list([1, 2, 3], "DLL")
        final = linked_list.reverse(nodes, "DLL")["structure"]

        assert final[0]["prev_id"] is None
        assert final[1]["prev_id"] == final[0]["id"]

    def test_reverse_single_node_not_committed(self):
        result = linked_list.reverse(build_list([1]))

        assert result["committed"] is False

    def test_sort_counts_swaps(self):
        nodes = build_list([3, 1, 2])
        result = linked_list.sort(nodes)

        assert result["output"]["swap_count"] == 2
        assert list_values(result["structure"]) == [1, 2, 3]
        assert result["committed"] is True

    def test_sort_is_stable(self):
        """Equal values keep their relative order."""
        nodes = build_list([2, 1, 2])
        first_two_id = nodes[0]["id"]
        final = linked_list.sort(nodes)["structure"]

        assert list_values(final) == [1, 2, 2]
        assert final[1]["id"] == first_two_id

    def test_sort_sorted_list_not_committed(self, five_list):
        result = linked_list.sort(five_list)

        assert result["output"]["swap_count"] == 0
        assert result["committed"] is False


class TestNodes:
    """Tests for node helpers and link checks."""

    def test_frames_are_independent_copies(self, five_list):
        result = linked_list.traverse(five_list)
        result["steps"][0]["structure"][0]["value"] = "changed"

        assert result["steps"][1]["structure"][0]["value"] == 1
        assert five_list[0]["value"] == 1

    def test_check_links_rejects_bad_link(self, five_list):
        broken = copy.deepcopy(five_list)
        broken[1]["next_id"] = broken[3]["id"]

        with pytest.raises(InvariantError):
            check_links(broken, "SLL")

    def test_tracker_rejects_malformed_input(self, five_list):
        broken = copy.deepcopy(five_list)
        broken[0]["next_id"] = None

        with pytest.raises(InvariantError):
            linked_list.traverse(broken)

    def test_values_equal_is_loose(self):
        assert values_equal(5, "5")
        assert values_equal("5.0", 5)
        assert not values_equal("a", "b")

    @pytest.mark.parametrize("raw, dataset, expected", [
        ("5", "numbers", 5),
        ("2.5", "numbers", 2.5),
        ("x", "numbers", "x"),
        (7, "characters", "7"),
    ])
    def test_coerce_value(self, raw, dataset, expected):
        assert coerce_value(raw, dataset) == expected
