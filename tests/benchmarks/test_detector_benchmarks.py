"""Performance benchmarks for the cycle detectors.

Measures detection speed on chains and layered DAGs to detect regressions.

Python 3.13+.
"""

from __future__ import annotations

from cyclecheck import CycleFound, NoCycle, build_graph, detect_cycle_bfs, detect_cycle_dfs


def _chain(n: int, *, closed: bool = False):
    labels = [f"n{i:05d}" for i in range(n)]
    edges = list(zip(labels, labels[1:], strict=False))
    if closed:
        edges.append((labels[-1], labels[0]))
    return build_graph(labels, edges)


def _layered(layers: int, width: int):
    labels = [f"L{layer:03d}N{node:03d}" for layer in range(layers) for node in range(width)]
    edges = [
        (f"L{layer:03d}N{a:03d}", f"L{layer + 1:03d}N{b:03d}")
        for layer in range(layers - 1)
        for a in range(width)
        for b in range(width)
    ]
    return build_graph(labels, edges)


class TestDetectorBenchmarks:
    """Benchmark both detectors."""

    def test_dfs_long_chain(self, benchmark) -> None:
        """Benchmark DFS on a 2000-node acyclic chain."""
        graph = _chain(2000)
        result = benchmark(detect_cycle_dfs, graph)
        assert result == NoCycle()

    def test_bfs_long_chain(self, benchmark) -> None:
        """Benchmark BFS on a 2000-node acyclic chain."""
        graph = _chain(2000)
        result = benchmark(detect_cycle_bfs, graph)
        assert isinstance(result, NoCycle)

    def test_bfs_closed_ring(self, benchmark) -> None:
        """Benchmark BFS residual tracing on a 500-node ring."""
        graph = _chain(500, closed=True)
        result = benchmark(detect_cycle_bfs, graph)
        assert isinstance(result, CycleFound)

    def test_dfs_layered_dag(self, benchmark) -> None:
        """Benchmark DFS on a dense 20x20 layered DAG."""
        graph = _layered(20, 20)
        result = benchmark(detect_cycle_dfs, graph)
        assert result == NoCycle()
