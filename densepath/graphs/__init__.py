"""
Shortest-path algorithms on dense adjacency matrices.

This package provides:
- Graph storage (AdjacencyMatrix, DistancePlanes)
- Single-source shortest paths (Dijkstra, O(V^2) vertex scan)
- All-pairs shortest paths (Floyd-Warshall, Johnson)
- Path reconstruction from predecessor arrays
- ShortestPathSolver, the query surface used by presentation code

All algorithms are deterministic: ties go to the lowest vertex index.
"""

from .allpairs import APSPStatus, all_pairs_distances, floyd_warshall
from .johnson import JohnsonResult, johnson, johnson_potentials
from .matrix import (
    CURRENT,
    INITIAL,
    PREVIOUS,
    AdjacencyMatrix,
    DistancePlanes,
)
from .shortest import DijkstraResult, SingleSourceResult, dijkstra, single_source
from .solver import ShortestPathSolver
from .utils import build_path, shortest_shortest

__all__ = [
    "AdjacencyMatrix",
    "DistancePlanes",
    "INITIAL",
    "PREVIOUS",
    "CURRENT",
    "dijkstra",
    "single_source",
    "DijkstraResult",
    "SingleSourceResult",
    "APSPStatus",
    "floyd_warshall",
    "all_pairs_distances",
    "johnson",
    "johnson_potentials",
    "JohnsonResult",
    "build_path",
    "shortest_shortest",
    "ShortestPathSolver",
]

# Example usage:
# from densepath.graphs import AdjacencyMatrix, dijkstra
#
# G = AdjacencyMatrix(4)
# G.set_weight(0, 1, 1.0)
# G.set_weight(1, 2, 2.0)
# G.set_weight(0, 2, 5.0)
# result = dijkstra(G, 0, 2)  # distance 3.0, path [0, 1, 2]
