"""
All-pairs shortest path algorithms: Floyd-Warshall over three planes.

Step k of Floyd-Warshall reads the PREVIOUS plane and writes
``min(previous[i, j], previous[i, k] + previous[k, j])`` into CURRENT, then
promotes CURRENT to PREVIOUS and reseeds CURRENT from INITIAL. ``inf``
absorbs in the sum, so an unreachable leg keeps the inherited value.

The same engine can be restricted to row 0. Johnson's algorithm uses this
with a virtual source at index 0: only the source row is relaxed, which
turns one sweep over k into one Bellman-Ford style round, so sweeps repeat
until the row stops changing.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from enum import Enum
from typing import Optional, Tuple

import numpy as np

from ..logging import get_logger
from .matrix import CURRENT, INITIAL, PREVIOUS, AdjacencyMatrix, DistancePlanes

logger = get_logger(__name__)


class APSPStatus(Enum):
    """Outcome of an all-pairs computation."""

    OK = "ok"
    NEGATIVE_CYCLE = "negative_cycle"


def _relax_through(planes: DistancePlanes, k: int, rows: slice) -> bool:
    """
    Compute CURRENT for the given rows using k as intermediate.

    Returns True if any entry improved. Does not advance the planes.
    """
    data = planes.data
    prev = data[PREVIOUS]
    via = prev[rows, k][:, None] + prev[k, :][None, :]
    np.minimum(prev[rows], via, out=data[CURRENT, rows])
    return bool(np.any(data[CURRENT, rows] < prev[rows]))


def _has_negative_diagonal(planes: DistancePlanes, rows: slice) -> bool:
    current = planes.data[CURRENT]
    idx = np.arange(planes.size)[rows]
    return bool(np.any(current[idx, idx] < 0))


def _is_pass_through(planes: DistancePlanes, k: int) -> bool:
    """True if k has a finite incoming and outgoing edge in PREVIOUS."""
    prev = planes.data[PREVIOUS]
    incoming = np.isfinite(prev[:, k])
    outgoing = np.isfinite(prev[k, :])
    incoming[k] = outgoing[k] = False
    return bool(incoming.any() and outgoing.any())


def _full_sweep(planes: DistancePlanes) -> APSPStatus:
    rows = slice(None)
    skipped = 0
    for k in range(planes.size):
        if not _is_pass_through(planes, k) and planes.data[PREVIOUS, k, k] >= 0:
            skipped += 1
            continue

        _relax_through(planes, k, rows)
        if _has_negative_diagonal(planes, rows):
            logger.warning(f"Negative cycle detected through vertex {k}")
            planes.invalidate()
            return APSPStatus.NEGATIVE_CYCLE
        planes.advance()

    if skipped:
        logger.debug(f"Skipped {skipped} intermediate vertices without through edges")
    return APSPStatus.OK


def _first_row_sweeps(planes: DistancePlanes, early_exit: bool) -> APSPStatus:
    rows = slice(0, 1)
    n = planes.size

    # Simple paths from row 0 have at most n - 1 edges; sweep n only
    # changes something if a negative cycle is reachable.
    for sweep in range(1, n + 1):
        changed = False
        for k in range(1, n):
            if _relax_through(planes, k, rows):
                changed = True
            if _has_negative_diagonal(planes, rows):
                logger.warning(f"Negative cycle detected through vertex {k}")
                planes.invalidate()
                return APSPStatus.NEGATIVE_CYCLE
            planes.advance()

        if not changed:
            logger.debug(f"Row 0 converged after {sweep} sweep(s)")
            if early_exit or sweep == n:
                return APSPStatus.OK
            continue

        if sweep == n:
            logger.warning(f"Row 0 still relaxing after {n} sweeps: negative cycle")
            planes.invalidate()
            return APSPStatus.NEGATIVE_CYCLE

    return APSPStatus.OK


def floyd_warshall(
    planes: DistancePlanes,
    restrict_to_first_row: bool = False,
    early_exit: bool = True,
) -> APSPStatus:
    """
    Floyd-Warshall relaxation over a DistancePlanes set, in place.

    Args:
        planes: Plane set built with :meth:`DistancePlanes.from_matrix`.
            On OK the PREVIOUS plane holds the final distances.
        restrict_to_first_row: Only relax row 0 (single-source mode used by
            Johnson's pre-pass). Intermediates then start at 1, since row 0
            is a source with no incoming edges.
        early_exit: In row-restricted mode stop as soon as a full sweep
            changes nothing. With False every sweep runs before the
            negative-cycle check. A full (unrestricted) run is a single exact
            sweep, so the flag has no effect there.

    Returns:
        APSPStatus.OK, or APSPStatus.NEGATIVE_CYCLE, in which case the planes
        are invalidated and expose no distances.

    Raises:
        RuntimeError: If the planes were already invalidated.

    Complexity: O(n^3) full; O(n^2) per sweep and at most n + 1 sweeps when
    restricted.

    Example:
        >>> g = AdjacencyMatrix.from_edges(3, [(0, 1, 1.0), (1, 2, 2.0)])
        >>> planes = DistancePlanes.from_matrix(g)
        >>> floyd_warshall(planes)
        <APSPStatus.OK: 'ok'>
        >>> planes.get(0, 2)
        3.0
    """
    if not planes.valid:
        raise RuntimeError("Distance planes already invalidated by a negative cycle")

    planes.data[CURRENT] = planes.data[INITIAL]

    if restrict_to_first_row:
        status = _first_row_sweeps(planes, early_exit)
    else:
        status = _full_sweep(planes)

    if status is APSPStatus.OK:
        logger.info(
            f"All-pairs relaxation finished on {planes.size} vertices "
            f"({'row 0' if restrict_to_first_row else 'all rows'})"
        )
    return status


def all_pairs_distances(
    matrix: AdjacencyMatrix,
) -> Tuple[APSPStatus, Optional[np.ndarray]]:
    """
    Run Floyd-Warshall on a graph and return ``(status, distances)``.

    ``distances`` is a (V, V) float array with ``inf`` for unreachable pairs,
    or None when a negative cycle was found.

    Example:
        >>> g = AdjacencyMatrix.from_edges(2, [(0, 1, 4.0)])
        >>> status, d = all_pairs_distances(g)
        >>> d[0, 1]
        4.0
    """
    planes = DistancePlanes.from_matrix(matrix)
    status = floyd_warshall(planes)
    if status is APSPStatus.NEGATIVE_CYCLE:
        return status, None
    return status, planes.distances()
