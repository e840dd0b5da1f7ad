"""Debug mode for the shortest-path algorithms.

While debug mode is on:

- ``dijkstra`` and ``single_source`` log every scan step at DEBUG level
  (vertex visited, its distance and the heads it relaxed), plus the step
  at which the remaining vertices turned out unreachable.
- ``johnson`` checks ``w(u, v) + P[u] - P[v] >= 0`` on every edge with
  :func:`~densepath.diagnostics.core.assert_nonnegative_reweighting` before
  running the per-source scans.

The flag starts from the ``DENSEPATH_DEBUG`` environment variable
(``1``, ``true``, ``yes`` or ``on``) and is process-wide.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "DENSEPATH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env(os.getenv(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return whether the algorithms currently trace and self-check."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> bool:
    """
    Globally enable or disable densepath debug mode.

    Parameters
    ----------
    enabled:
        Whether Dijkstra step tracing and the Johnson reweighting check
        should run.

    Returns
    -------
    bool
        The previous setting, so callers can restore it.
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch debug mode, restoring the previous setting on exit.

    Example
    -------
    >>> from densepath.graphs import AdjacencyMatrix, dijkstra
    >>> g = AdjacencyMatrix.from_edges(2, [(0, 1, 1.0)])
    >>> with debug_context(True):
    ...     result = dijkstra(g, 0, 1)  # each scan step is logged
    """
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
