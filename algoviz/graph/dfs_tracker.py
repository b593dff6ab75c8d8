# dfs_tracker.py
from .common import Traversal

PSEUDOCODE = [
    "function DFS(graph, startNode):",                # 1
    "  stack = new Stack([startNode])",               # 2
    "  visited = new Set()",                          # 3
    "  while stack is not empty:",                    # 4
    "    current = stack.pop()",                      # 5
    "    if current is not visited:",                 # 6
    "      visited.add(current)",                     # 7
    "      for neighbor in reversed(graph.getNeighbors(current)):",  # 8
    "        if neighbor is not visited:",            # 9
    "          stack.push(neighbor)",                 # 10
]


def generate_dfs_trace(nodes, edges, start_id):
    """
    Iterative depth-first traversal. A node counts as visited when it is popped;
    a node can sit on the stack more than once, later copies are discarded on pop.
    """
    # 1. Static setup
    run = Traversal("Depth-First Search (DFS)", "DFS", nodes, edges, start_id, PSEUDOCODE)
    if not run.start_valid:
        return run.missing_start()

    # 2. Seed
    stack = [start_id]
    visited = []
    run.add(visited, stack, None, f"Initialize DFS stack with start node {start_id}", 2)

    # 3. Track execution
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.append(current)
        run.add(visited, stack, current, f"Popped {current} from stack and marked as visited", 7)

        # Reversed so the smallest neighbour is popped first
        for neighbor in reversed(run.adjacency[current]):
            if neighbor in visited:
                continue
            stack.append(neighbor)
            run.add(visited, stack, current, f"Pushed neighbor {neighbor} to stack", 10,
                    edges=[(current, neighbor)])

    # 4. Final frame
    run.add(visited, [], None, "DFS Traversal Complete", 4, final_order=visited)
    return run.result(output={"order": list(visited)})
