"""
Johnson's all-pairs shortest paths for graphs with negative edges.

A virtual source joined to every vertex by a zero-weight edge gives each
vertex a potential ``P[v]`` (its distance from that source). Reweighting
every edge to ``w(u, v) + P[u] - P[v]`` makes all weights non-negative
without changing which paths are shortest, so Dijkstra can then run from
every vertex.

The potentials come from the Floyd-Warshall engine restricted to the
virtual source row; a negative cycle stops the computation there.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.3 (Johnson).
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..diagnostics import assert_nonnegative_reweighting, is_debug_enabled
from ..logging import get_logger
from .allpairs import APSPStatus, floyd_warshall
from .matrix import PREVIOUS, AdjacencyMatrix, DistancePlanes
from .shortest import single_source
from .utils import shortest_shortest

logger = get_logger(__name__)


@dataclass(frozen=True)
class JohnsonResult:
    """
    Outcome of a Johnson run.

    Attributes:
        status: OK or NEGATIVE_CYCLE.
        potentials: Read-only length-V potential vector (None on a cycle).
        distances: (V, V) distance matrix, ``inf`` where no path exists
            (None on a cycle).
        shortest_shortest: Smallest distance between two distinct
            connected vertices (None on a cycle).
    """

    status: APSPStatus
    potentials: Optional[np.ndarray] = None
    distances: Optional[np.ndarray] = None
    shortest_shortest: Optional[float] = None


def johnson_potentials(
    matrix: AdjacencyMatrix, early_exit: bool = True
) -> Optional[np.ndarray]:
    """
    Compute the vertex potentials, or None if the graph has a negative cycle.

    Args:
        matrix: Graph, may contain negative weights.
        early_exit: Passed to the restricted Floyd-Warshall pre-pass.

    Returns:
        Read-only float array ``P`` of length V with ``P[v] <= 0``.
    """
    planes = DistancePlanes.from_matrix(matrix, virtual_source=True)
    status = floyd_warshall(planes, restrict_to_first_row=True, early_exit=early_exit)
    if status is APSPStatus.NEGATIVE_CYCLE:
        return None

    potentials = planes.row(0, PREVIOUS)[planes.offset:]
    potentials.flags.writeable = False
    return potentials


def johnson(matrix: AdjacencyMatrix, early_exit: bool = True) -> JohnsonResult:
    """
    Johnson's algorithm for all-pairs shortest paths.

    Args:
        matrix: Graph, may contain negative weights.
        early_exit: Stop the potential pre-pass as soon as it converges.

    Returns:
        JohnsonResult; on a negative cycle only ``status`` is set.

    Complexity: O(V^3): the pre-pass plus one O(V^2) scan per source.

    Example:
        >>> g = AdjacencyMatrix.from_edges(3, [(0, 1, 2.0), (1, 2, -1.0)])
        >>> result = johnson(g)
        >>> result.distances[0, 2]
        1.0
    """
    potentials = johnson_potentials(matrix, early_exit=early_exit)
    if potentials is None:
        logger.warning("Johnson aborted: negative cycle in graph")
        return JohnsonResult(status=APSPStatus.NEGATIVE_CYCLE)

    if is_debug_enabled():
        assert_nonnegative_reweighting(matrix.to_numpy(), potentials)

    n = matrix.num_vertices
    distances = np.empty((n, n), dtype=np.float64)
    # One scan per source yields every target of that source
    for i in range(n):
        distances[i] = single_source(matrix, i, potentials=potentials).distances
    distances[np.arange(n), np.arange(n)] = 0.0

    ssp = shortest_shortest(distances)
    logger.info(f"Johnson finished on {n} vertices; shortest-shortest path {ssp}")
    return JohnsonResult(
        status=APSPStatus.OK,
        potentials=potentials,
        distances=distances,
        shortest_shortest=ssp,
    )
