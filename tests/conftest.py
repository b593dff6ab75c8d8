"""Pytest configuration and fixtures for algoviz tests."""

import pytest

from algoviz import tree
from algoviz.graph.layout import generate_initial_graph
from algoviz.linked_list import build_list


def build_tree(values, tree_type="BST"):
    """Insert values one by one and return the final flat snapshot."""
    nodes = []
    for value in values:
        if tree_type in ("MAX_HEAP", "MIN_HEAP"):
            result = tree.heap_insert(nodes, value, tree_type)
        else:
            result = tree.insert(nodes, value, tree_type)
        nodes = result["structure"]
    return nodes


def list_values(nodes):
    return [node["value"] for node in nodes]


def walk_forward(nodes):
    """Follow next_id links from the head, stopping after one lap for circular lists."""
    if not nodes:
        return []
    by_id = {node["id"]: node for node in nodes}
    values = []
    current = nodes[0]["id"]
    while current is not None and len(values) < len(nodes):
        values.append(by_id[current]["value"])
        current = by_id[current]["next_id"]
    return values


def walk_backward(nodes):
    """Follow prev_id links from the tail, stopping after one lap for circular lists."""
    if not nodes:
        return []
    by_id = {node["id"]: node for node in nodes}
    values = []
    current = nodes[-1]["id"]
    while current is not None and len(values) < len(nodes):
        values.append(by_id[current]["value"])
        current = by_id[current]["prev_id"]
    return values


def edge(source, target):
    return {"source": str(source), "target": str(target), "status": "idle"}


def graph_nodes(*ids):
    return [{"id": str(i), "value": i, "x": 0, "y": 0, "status": "idle"} for i in ids]


@pytest.fixture
def five_list():
    """Singly linked list [1, 2, 3, 4, 5]."""
    return build_list([1, 2, 3, 4, 5], "SLL")


@pytest.fixture
def sample_bst():
    return build_tree([10, 5, 15, 3, 7], "BST")


@pytest.fixture
def default_graph():
    """Six-node cycle 1..6 with the chords 1-4 and 2-5."""
    return generate_initial_graph(6)
