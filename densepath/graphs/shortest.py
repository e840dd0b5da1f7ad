"""
Single-source shortest paths: Dijkstra's algorithm on a dense matrix.

The scan is the O(V^2) array form of Dijkstra: every step picks the closest
unvisited vertex by scanning the distance array instead of popping a heap,
which is the better fit when the graph is a full V x V matrix.

Passing a potential vector ``P`` runs the reduced-cost variant used by
Johnson's algorithm: each edge is relaxed with ``w(u, v) + P[u] - P[v]``
and reported distances are mapped back with ``- P[source] + P[target]``.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 25.3 (Johnson).
"""

import operator
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..diagnostics import is_debug_enabled
from ..logging import get_logger
from .matrix import AdjacencyMatrix, Number
from .utils import UNREACHED, build_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class SingleSourceResult:
    """
    Distances and predecessors from one source to every vertex.

    Attributes:
        source: Start vertex.
        distances: Length-V float array, ``inf`` for unreached vertices.
        predecessors: Length-V int array, ``-1`` for the source and for
            unreached vertices.
    """

    source: int
    distances: np.ndarray
    predecessors: np.ndarray


@dataclass(frozen=True)
class DijkstraResult:
    """
    Answer to one source/target query.

    Attributes:
        source: Start vertex.
        target: End vertex.
        distance: Shortest distance. For an unreached target this is 0
            unless the query asked for ``strict_unreachable``, then ``inf``.
        path: Vertices from source to target inclusive. Empty when
            ``source == target`` or the target was not reached; ``None``
            when potentials were supplied (no path is built).
        reachable: Whether the target was reached.
        predecessors: Predecessor array of the run (None for
            ``source == target``).
    """

    source: int
    target: int
    distance: Number
    path: Optional[List[int]]
    reachable: bool
    predecessors: Optional[np.ndarray] = None


def _check_potentials(matrix: AdjacencyMatrix, potentials) -> np.ndarray:
    p = np.asarray(potentials, dtype=np.float64)
    if p.shape != (matrix.num_vertices,):
        raise ValueError(
            f"potentials must have shape ({matrix.num_vertices},), got {p.shape}"
        )
    if not np.all(np.isfinite(p)):
        raise ValueError("potentials must be finite")
    return p


def _scan(
    matrix: AdjacencyMatrix, source: int, potentials: Optional[np.ndarray]
) -> SingleSourceResult:
    """Run the vertex scan; distances stay in reduced space if potentials are given."""
    weights = matrix.to_numpy()
    n = matrix.num_vertices
    debug = is_debug_enabled()

    dist = np.full(n, np.inf)
    pred = np.full(n, UNREACHED, dtype=np.int64)
    visited = np.zeros(n, dtype=bool)
    dist[source] = 0.0

    for step in range(n):
        # argmin returns the lowest index among ties
        candidates = np.where(visited, np.inf, dist)
        cur = int(np.argmin(candidates))
        if not np.isfinite(candidates[cur]):
            if debug:
                logger.debug(f"step {step}: remaining {n - step} vertices unreachable")
            break

        visited[cur] = True
        row = weights[cur]
        relaxed = dist[cur] + row
        if potentials is not None:
            relaxed = relaxed + potentials[cur] - potentials

        improve = ~visited & (row != 0) & (relaxed < dist)
        dist[improve] = relaxed[improve]
        pred[improve] = cur

        if debug:
            logger.debug(
                f"step {step}: visit {cur} at {dist[cur]}, "
                f"relaxed {np.flatnonzero(improve).tolist()}"
            )

    return SingleSourceResult(source=source, distances=dist, predecessors=pred)


def _validate(matrix: AdjacencyMatrix, source: int, potentials) -> Optional[np.ndarray]:
    n = matrix.num_vertices
    source = operator.index(source)
    if not 0 <= source < n:
        raise IndexError(f"Vertex {source} out of range [0, {n})")
    if potentials is None:
        if matrix.has_negative_weights():
            raise ValueError(
                "Dijkstra requires non-negative weights; "
                "use johnson() or supply potentials for graphs with negative edges"
            )
        return None
    return _check_potentials(matrix, potentials)


def single_source(
    matrix: AdjacencyMatrix, source: int, potentials=None
) -> SingleSourceResult:
    """
    Shortest distances from source to every vertex.

    Args:
        matrix: Graph to search.
        source: Start vertex.
        potentials: Optional length-V potential vector. When given, edges are
            relaxed with reduced costs and the returned distances are mapped
            back to the unreduced weights.

    Returns:
        SingleSourceResult with ``inf`` for unreached vertices.

    Raises:
        IndexError: If source is out of range.
        ValueError: If potentials is None and the graph has a negative
            weight, or potentials has the wrong shape.

    Complexity: O(V^2).
    """
    p = _validate(matrix, source, potentials)
    result = _scan(matrix, source, p)
    if p is None:
        return result

    distances = result.distances - p[source] + p
    return SingleSourceResult(
        source=source, distances=distances, predecessors=result.predecessors
    )


def dijkstra(
    matrix: AdjacencyMatrix,
    source: int,
    target: int,
    potentials=None,
    strict_unreachable: bool = False,
) -> DijkstraResult:
    """
    Dijkstra's algorithm for a single source/target pair.

    Args:
        matrix: Graph with non-negative weights, or any graph together with
            a valid potential vector.
        source: Start vertex.
        target: End vertex.
        potentials: Optional potential vector (see module docstring).
        strict_unreachable: Report ``inf`` instead of 0 when target cannot
            be reached.

    Returns:
        DijkstraResult. The path is only built when no potentials are given.

    Raises:
        IndexError: If source or target is out of range.
        ValueError: Same conditions as :func:`single_source`.

    Complexity: O(V^2).

    Example:
        >>> g = AdjacencyMatrix.from_edges(3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0)])
        >>> r = dijkstra(g, 0, 2)
        >>> r.distance, r.path
        (3.0, [0, 1, 2])
    """
    n = matrix.num_vertices
    source, target = operator.index(source), operator.index(target)
    if not 0 <= target < n:
        raise IndexError(f"Vertex {target} out of range [0, {n})")
    p = _validate(matrix, source, potentials)

    if source == target:
        return DijkstraResult(
            source=source,
            target=target,
            distance=0,
            path=[] if p is None else None,
            reachable=True,
        )

    result = _scan(matrix, source, p)
    reduced = result.distances[target]
    reachable = bool(np.isfinite(reduced))

    if not reachable:
        distance = float("inf") if strict_unreachable else 0
    elif p is not None:
        distance = float(reduced - p[source] + p[target])
    else:
        distance = float(reduced)

    path = None
    if p is None:
        path = build_path(result.predecessors, target, source) if reachable else []

    return DijkstraResult(
        source=source,
        target=target,
        distance=distance,
        path=path,
        reachable=reachable,
        predecessors=result.predecessors,
    )
