"""Custom node order example for cyclecheck.

The demo edge structure is reused over a caller-supplied node order.
Declaration order seeds the DFS roots and the initial BFS queue, so it
can change which cycle or topological order is reported, while
neighbor visits always follow lexicographic label order.

Python 3.13+.
"""

import sys

from cyclecheck import GraphError, default_graph, detect_cycle, format_result, parse_labels
from cyclecheck.enums import Algorithm

text = sys.argv[1] if len(sys.argv) > 1 else "G F E D C B A"

try:
    graph = default_graph(parse_labels(text), extra_edges=[("C", "D")])
except GraphError as e:
    print(e, file=sys.stderr)
    sys.exit(2)

print(f"Node order: {', '.join(graph.labels)}")
for algorithm in Algorithm:
    print(f"{algorithm.upper()}: {format_result(detect_cycle(graph, algorithm))}")
