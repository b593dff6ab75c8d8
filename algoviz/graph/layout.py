# layout.py
"""Default graphs and their circular layout."""
import math

CENTER_X = 400
CENTER_Y = 300
RADIUS = 200


def circular_positions(count, center_x=CENTER_X, center_y=CENTER_Y, radius=RADIUS):
    """Points on a circle, the first one at twelve o'clock, going clockwise."""
    positions = []
    for i in range(count):
        angle = (i / count) * 2 * math.pi - math.pi / 2
        positions.append((center_x + radius * math.cos(angle), center_y + radius * math.sin(angle)))
    return positions


def numbered_nodes(count):
    """Nodes "1".."count" with integer values, laid out on a circle."""
    return [
        {"id": str(i + 1), "value": i + 1, "x": x, "y": y, "status": "idle"}
        for i, (x, y) in enumerate(circular_positions(count))
    ]


def cycle_edges(count):
    """Edges i -> i+1, closed back on 1 once there are three or more nodes."""
    edges = [{"source": str(i), "target": str(i + 1), "status": "idle"} for i in range(1, count)]
    if count >= 3:
        edges.append({"source": str(count), "target": "1", "status": "idle"})
    return edges


def generate_initial_graph(node_count=6):
    """A cycle through every node plus the chords 1-4 and 2-5 once there are more than four nodes."""
    nodes = numbered_nodes(node_count)
    edges = cycle_edges(node_count)
    if node_count > 4:
        edges.append({"source": "1", "target": "4", "status": "idle"})
        edges.append({"source": "2", "target": "5", "status": "idle"})
    return {"nodes": nodes, "edges": edges}
