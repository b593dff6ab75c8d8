# dijkstra_tracker.py
import math

from .adjacency import id_sort_key
from .common import Traversal

PSEUDOCODE = [
    "function Dijkstra(graph, startNode):",                      # 1
    "  dist[v] = Infinity for all v; dist[startNode] = 0",       # 2
    "  pq = [(startNode, 0)]",                                   # 3
    "  while pq is not empty:",                                  # 4
    "    (current, d) = pq.popMin()",                            # 5
    "    if current is finalized: continue",                     # 6
    "    finalize(current)",                                     # 7
    "    for neighbor in graph.getNeighbors(current):",          # 8
    "      if d + weight(current, neighbor) < dist[neighbor]:",  # 9
    "        dist[neighbor] = d + weight(current, neighbor)",    # 10
    "        pq.push((neighbor, dist[neighbor]))",               # 11
]

EDGE_WEIGHT = 1


def _show(pq):
    return [f"{node_id}({dist})" for node_id, dist in pq]


def generate_dijkstra_trace(nodes, edges, start_id):
    """
    Unit-weight Dijkstra over a plain list used as the priority queue. The list is
    sorted by distance before every pop; entries for already finalized nodes are
    dropped without a frame.
    """
    # 1. Static setup
    run = Traversal("Dijkstra's Shortest Path", "DIJKSTRA", nodes, edges, start_id, PSEUDOCODE)
    if not run.start_valid:
        return run.missing_start()

    distances = {node_id: math.inf for node_id in run.adjacency}
    previous = {node_id: None for node_id in run.adjacency}
    distances[start_id] = 0
    finalized = []
    pq = [(start_id, 0)]

    run.add(finalized, _show(pq), None,
            f"Initialize Dijkstra. Start node {start_id} distance = 0, others = Infinity.", 3)

    # 2. Track execution
    while pq:
        # Stable sort keeps insertion order among equal distances
        pq.sort(key=lambda item: item[1])
        current, current_dist = pq.pop(0)
        if current in finalized:
            continue
        finalized.append(current)
        run.add(finalized, _show(pq), current,
                f"Processing node {current} with current shortest distance {current_dist}", 7)

        for neighbor in run.adjacency[current]:
            new_dist = current_dist + EDGE_WEIGHT
            if new_dist < distances[neighbor]:
                distances[neighbor] = new_dist
                previous[neighbor] = current
                pq.append((neighbor, new_dist))
                run.add(finalized, _show(pq), current,
                        f"Relaxing edge {current}->{neighbor}. New distance: {new_dist}", 11,
                        edges=[(current, neighbor)])

    # 3. Final frame
    ordered = {node_id: distances[node_id] for node_id in sorted(distances, key=id_sort_key)}
    run.add(finalized, [], None, "Dijkstra's Algorithm Complete", 4, distances=ordered, final_order=finalized)
    return run.result(output={"order": list(finalized), "distances": ordered, "previous": previous})
