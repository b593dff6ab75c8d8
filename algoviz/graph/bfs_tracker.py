# bfs_tracker.py
from collections import deque

from .common import Traversal

PSEUDOCODE = [
    "function BFS(graph, startNode):",                # 1
    "  queue = new Queue([startNode])",               # 2
    "  visited = new Set([startNode])",               # 3
    "  while queue is not empty:",                    # 4
    "    current = queue.dequeue()",                  # 5
    "    for neighbor in graph.getNeighbors(current):",  # 6
    "      if neighbor is not visited:",              # 7
    "        visited.add(neighbor)",                  # 8
    "        queue.enqueue(neighbor)",                # 9
]


def generate_bfs_trace(nodes, edges, start_id):
    """
    Breadth-first traversal. Nodes are marked visited when they are enqueued,
    so each node enters the queue at most once.
    """
    # 1. Static setup
    run = Traversal("Breadth-First Search (BFS)", "BFS", nodes, edges, start_id, PSEUDOCODE)
    if not run.start_valid:
        return run.missing_start()

    # 2. Seed
    queue = deque([start_id])
    visited = [start_id]
    run.add(visited, queue, None, f"Initialize BFS queue with start node {start_id}", 3)

    # 3. Track execution
    while queue:
        current = queue.popleft()
        run.add(visited, queue, current, f"Dequeued {current}. Processing neighbors...", 5)

        for neighbor in run.adjacency[current]:
            if neighbor in visited:
                continue
            visited.append(neighbor)
            queue.append(neighbor)
            run.add(visited, queue, current, f"Visited neighbor {neighbor} and added to queue", 9,
                    edges=[(current, neighbor)])

    # 4. Final frame
    run.add(visited, [], None, "BFS Traversal Complete", 4, final_order=visited)
    return run.result(output={"order": list(visited)})
