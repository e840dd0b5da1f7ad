"""
Query and command surface over one graph.

``ShortestPathSolver`` owns an ``AdjacencyMatrix`` and remembers the last
all-pairs result so presentation code only needs read accessors. Any edge
mutation through the solver drops that result.
"""

from typing import List, Optional

import numpy as np

from .allpairs import APSPStatus, all_pairs_distances
from .johnson import johnson
from .matrix import AdjacencyMatrix, Number
from .shortest import DijkstraResult, dijkstra
from .utils import shortest_shortest


class ShortestPathSolver:
    """
    Shortest-path queries on a dense weighted digraph.

    Example:
        >>> solver = ShortestPathSolver.from_string("3 2  1 2 4  2 3 1")
        >>> solver.dijkstra(0, 2).distance
        5.0
        >>> solver.floyd_warshall()
        <APSPStatus.OK: 'ok'>
        >>> solver.shortest_shortest_path()
        1.0
    """

    def __init__(self, matrix: AdjacencyMatrix):
        self._matrix = matrix
        self._status: Optional[APSPStatus] = None
        self._distances: Optional[np.ndarray] = None
        self._potentials: Optional[np.ndarray] = None
        self._algorithm: Optional[str] = None

    @classmethod
    def from_string(cls, text: str, dtype=np.float64) -> "ShortestPathSolver":
        from ..io import parse_graph_string

        return cls(parse_graph_string(text, dtype=dtype))

    @classmethod
    def from_file(cls, path: str, dtype=np.float64) -> "ShortestPathSolver":
        from ..io import parse_graph_file

        return cls(parse_graph_file(path, dtype=dtype))

    @property
    def matrix(self) -> AdjacencyMatrix:
        return self._matrix

    @property
    def last_status(self) -> Optional[APSPStatus]:
        """Status of the last all-pairs run, None if none ran since the last edit."""
        return self._status

    @property
    def algorithm(self) -> Optional[str]:
        """Name of the algorithm that produced the current all-pairs result."""
        return self._algorithm

    @property
    def potentials(self) -> Optional[np.ndarray]:
        """Potential vector of the last successful Johnson run."""
        return self._potentials

    # Graph queries

    def num_vertices(self) -> int:
        return self._matrix.num_vertices

    def num_edges(self) -> int:
        return self._matrix.num_edges

    def density(self) -> float:
        return self._matrix.density()

    def is_connected(self) -> bool:
        return self._matrix.is_connected()

    def adjacent(self, x: int, y: int) -> bool:
        return self._matrix.adjacent(x, y)

    def get_weight(self, x: int, y: int) -> Number:
        return self._matrix.get_weight(x, y)

    def neighbors(self, x: int) -> List[int]:
        return self._matrix.neighbors(x)

    def neighbor_weights(self, x: int) -> List[Number]:
        return self._matrix.neighbor_weights(x)

    # Graph commands

    def _invalidate(self) -> None:
        self._status = None
        self._distances = None
        self._potentials = None
        self._algorithm = None

    def set_weight(self, x: int, y: int, weight: Number) -> None:
        self._matrix.set_weight(x, y, weight)
        self._invalidate()

    def add_edge(self, x: int, y: int) -> None:
        self._matrix.add_edge(x, y)
        self._invalidate()

    def remove_edge(self, x: int, y: int) -> None:
        self._matrix.remove_edge(x, y)
        self._invalidate()

    # Algorithms

    def dijkstra(
        self, source: int, target: int, strict_unreachable: bool = False
    ) -> DijkstraResult:
        """Shortest path between two vertices; see :func:`densepath.graphs.dijkstra`."""
        return dijkstra(
            self._matrix, source, target, strict_unreachable=strict_unreachable
        )

    def floyd_warshall(self) -> APSPStatus:
        """Compute all pairs with Floyd-Warshall and keep the result."""
        self._invalidate()
        status, distances = all_pairs_distances(self._matrix)
        self._status = status
        self._distances = distances
        self._algorithm = "Floyd-Warshall"
        return status

    def johnson(self, early_exit: bool = True) -> APSPStatus:
        """Compute all pairs with Johnson's algorithm and keep the result."""
        self._invalidate()
        result = johnson(self._matrix, early_exit=early_exit)
        self._status = result.status
        self._distances = result.distances
        self._potentials = result.potentials
        self._algorithm = "Johnson"
        return result.status

    # All-pairs results

    def _require_result(self) -> np.ndarray:
        if self._status is None:
            raise RuntimeError("No all-pairs result; run floyd_warshall() or johnson() first")
        if self._status is APSPStatus.NEGATIVE_CYCLE:
            raise RuntimeError(
                f"{self._algorithm} found a negative cycle; no distances are available"
            )
        return self._distances

    def distance_matrix(self) -> np.ndarray:
        """Copy of the (V, V) all-pairs matrix, ``inf`` where no path exists."""
        return self._require_result().copy()

    def distance(self, i: int, j: int) -> float:
        distances = self._require_result()
        n = distances.shape[0]
        if not 0 <= i < n or not 0 <= j < n:
            raise IndexError(f"Entry ({i}, {j}) out of range [0, {n})")
        return float(distances[i, j])

    def shortest_shortest_path(self) -> float:
        """Smallest distance between two distinct connected vertices."""
        return shortest_shortest(self._require_result())

    def __repr__(self):
        return f"ShortestPathSolver({self._matrix!r}, status={self._status})"
