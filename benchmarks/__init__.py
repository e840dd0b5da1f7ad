"""Performance benchmarks for densepath.

This package contains microbenchmarks for the shortest-path algorithms:
single-pair Dijkstra and the two all-pairs solvers.
"""
