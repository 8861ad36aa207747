"""Quickstart example for cyclecheck.

Runs both detectors over the demo graph, then over variants that are
acyclic or contain a different cycle.

Python 3.13+.
"""

from cyclecheck import (
    build_graph,
    default_graph,
    detect_cycle_bfs,
    detect_cycle_dfs,
    format_adjacency_matrix,
    format_result,
)
from cyclecheck.constants import DEFAULT_EDGES, DEFAULT_NODE_LABELS

# Example 1: Demo graph
print("=" * 50)
print("Example 1: Demo Graph")
print("=" * 50)

graph = default_graph()
print(format_adjacency_matrix(graph))
print(format_result(detect_cycle_dfs(graph)))
# Output: Cycle detected: A C E A
print(format_result(detect_cycle_bfs(graph)))
# Output: Cycle detected: A C E A

# Example 2: Acyclic variant
print("\n" + "=" * 50)
print("Example 2: Demo Edges Without C -> E")
print("=" * 50)

dag = build_graph(DEFAULT_NODE_LABELS, [e for e in DEFAULT_EDGES if e != ("C", "E")])
print(format_result(detect_cycle_dfs(dag)))
# Output: No cycle found in the graph.
print(format_result(detect_cycle_bfs(dag)))
# Output: No cycle found in the graph. Valid topological sort: D -> E -> A -> C -> F -> G -> B

# Example 3: Algorithms may report different cycles
print("\n" + "=" * 50)
print("Example 3: Different Cycles, Same Verdict")
print("=" * 50)

graph = build_graph("ABC", [("A", "B"), ("B", "C"), ("C", "A"), ("B", "A")])
print("DFS:", format_result(detect_cycle_dfs(graph)))
# Output: DFS: Cycle detected: A B A
print("BFS:", format_result(detect_cycle_bfs(graph)))
# Output: BFS: Cycle detected: B A B
