"""
Utility functions for the shortest-path algorithms.

Provides path reconstruction from predecessor arrays and the summary
statistics read off a finished all-pairs distance matrix.
"""

from collections import deque
from typing import List, Sequence

import numpy as np

UNREACHED = -1


def build_path(predecessors: Sequence[int], target: int, source: int) -> List[int]:
    """
    Reconstruct the path from source to target using a predecessor array.

    The array should come from a single-source run where
    ``predecessors[v]`` is the vertex before ``v`` on its shortest path and
    ``-1`` marks both the source and every unreached vertex.

    Args:
        predecessors: Predecessor index per vertex.
        target: Vertex the path ends at.
        source: Vertex the run started from.

    Returns:
        Vertices from source to target inclusive; ``[source]`` when
        ``target == source``; ``[]`` when target was not reached.

    Raises:
        ValueError: If the predecessor links loop without reaching source.

    Example:
        >>> build_path([-1, 0, 1, -1], 2, 0)
        [0, 1, 2]
        >>> build_path([-1, 0, 1, -1], 3, 0)
        []
    """
    path: deque = deque()
    current = int(target)

    # A shortest-path tree has depth < V
    for _ in range(len(predecessors) + 1):
        path.appendleft(current)
        if current == source:
            return list(path)
        current = int(predecessors[current])
        if current == UNREACHED:
            return []

    raise ValueError(f"Predecessor links from {target} form a cycle")


def shortest_shortest(distances: np.ndarray) -> float:
    """
    Return the smallest distance between two distinct, connected vertices.

    Args:
        distances: (V, V) all-pairs distance matrix, ``inf`` for no path.

    Unlike a plain minimum over the matrix, which the zero diagonal caps at
    0, this only looks at pairs of distinct vertices joined by a path.

    Returns:
        Minimum off-diagonal finite entry, or ``inf`` if there is none.

    Example:
        >>> shortest_shortest(np.array([[0.0, 3.0], [np.inf, 0.0]]))
        3.0
    """
    d = np.asarray(distances, dtype=np.float64)
    off_diagonal = ~np.eye(d.shape[0], dtype=bool)
    candidates = d[off_diagonal & np.isfinite(d)]
    if candidates.size == 0:
        return float("inf")
    return float(candidates.min())
