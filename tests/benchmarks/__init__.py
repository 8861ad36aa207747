"""Performance benchmarks for cyclecheck.

Benchmarks use pytest-benchmark to measure detection speed and catch
performance regressions in the DFS and BFS detectors.
"""
