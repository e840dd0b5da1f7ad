"""Invariant checks for graph weights, potentials and distance matrices."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np


def reweighted_edges(weights: np.ndarray, potentials: np.ndarray) -> np.ndarray:
    """
    Apply Johnson reweighting ``w(u, v) + P[u] - P[v]`` to every edge.

    Parameters
    ----------
    weights:
        (V, V) adjacency matrix where 0 marks a missing edge.
    potentials:
        Length-V potential vector.

    Returns
    -------
    np.ndarray
        (V, V) float array holding the reweighted value at every edge
        position and ``nan`` where there is no edge.

    Raises
    ------
    ValueError
        If the shapes of weights and potentials disagree.
    """
    weights = np.asarray(weights)
    potentials = np.asarray(potentials, dtype=np.float64)
    if weights.ndim != 2 or weights.shape[0] != weights.shape[1]:
        raise ValueError(f"weights must be a square matrix, got shape {weights.shape}")
    if potentials.shape != (weights.shape[0],):
        raise ValueError(
            f"potentials must have shape ({weights.shape[0]},), got {potentials.shape}"
        )

    reduced = weights.astype(np.float64) + potentials[:, None] - potentials[None, :]
    return np.where(weights != 0, reduced, np.nan)


def assert_nonnegative_reweighting(
    weights: np.ndarray,
    potentials: np.ndarray,
    atol: float = 1e-9,
) -> None:
    """
    Assert that every reweighted edge is non-negative.

    Parameters
    ----------
    weights:
        (V, V) adjacency matrix where 0 marks a missing edge.
    potentials:
        Length-V potential vector.
    atol:
        Tolerance below zero accepted for floating-point weights.

    Raises
    ------
    ValueError
        If any edge has ``w(u, v) + P[u] - P[v] < -atol``.
    """
    reduced = reweighted_edges(weights, potentials)
    bad = np.argwhere(reduced < -atol)
    if bad.size:
        u, v = (int(x) for x in bad[0])
        raise ValueError(
            f"Reweighted edge ({u}, {v}) is negative: {reduced[u, v]}. "
            f"{len(bad)} edge(s) violate the potential invariant."
        )


def check_triangle_inequality(
    distances: np.ndarray,
    atol: float = 1e-9,
) -> List[Tuple[int, int, int]]:
    """
    Return every triple ``(u, v, w)`` with ``d(u, w) > d(u, v) + d(v, w)``.

    Only triples whose two sub-paths are finite are considered.

    Parameters
    ----------
    distances:
        (V, V) all-pairs distance matrix with ``inf`` for unreachable pairs.
    atol:
        Absolute tolerance.

    Returns
    -------
    List[Tuple[int, int, int]]
        Violating triples; empty when the matrix is consistent.
    """
    d = np.asarray(distances, dtype=np.float64)
    n = d.shape[0]
    violations: List[Tuple[int, int, int]] = []
    for v in range(n):
        # via[u, w] = d(u, v) + d(v, w)
        via = d[:, v][:, None] + d[v, :][None, :]
        mask = np.isfinite(via) & (d > via + atol)
        for u, w in np.argwhere(mask):
            violations.append((int(u), v, int(w)))
    return violations
