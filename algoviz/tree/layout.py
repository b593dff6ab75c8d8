# layout.py
"""Pure geometry for drawing trees. Nothing here mutates the engine's structures."""
import math

from .nodes import unflatten

MARGIN = 100


def calculate_node_positions(flat_nodes, width=800, start_y=80, level_height=100):
    """
    Split the horizontal band in half at every level.
    Returns {id: (x, y)} for a BST/AVL snapshot.
    """
    positions = {}
    if not flat_nodes:
        return positions
    arena, root_id = unflatten(flat_nodes)

    def assign(node_id, level, left, right):
        if node_id is None:
            return
        x = (left + right) / 2
        positions[node_id] = (x, start_y + level * level_height)
        assign(arena[node_id]["left_id"], level + 1, left, x)
        assign(arena[node_id]["right_id"], level + 1, x, right)

    assign(root_id, 0, MARGIN, width - MARGIN)
    return positions


def calculate_heap_positions(flat_nodes, width=800, start_y=80, level_height=100):
    """Evenly space each level of a complete binary tree given in array order."""
    positions = {}
    level_width = width - 2 * MARGIN
    for index, node in enumerate(flat_nodes):
        level = int(math.floor(math.log2(index + 1)))
        position_in_level = index - (2 ** level - 1)
        spacing = level_width / (2 ** level + 1)
        positions[node["id"]] = (MARGIN + spacing * (position_in_level + 1), start_y + level * level_height)
    return positions
