"""Tests for core diagnostic functions."""

import numpy as np
import pytest

from densepath.diagnostics import (
    assert_nonnegative_reweighting,
    check_triangle_inequality,
    reweighted_edges,
)
from densepath.graphs import johnson_potentials


def test_reweighted_edges_marks_missing_edges() -> None:
    """Edges get w + P[u] - P[v]; non-edges are nan."""
    W = np.array([[0.0, 2.0, 0.0], [0.0, 0.0, -1.0], [0.0, 0.0, 0.0]])
    R = reweighted_edges(W, [0.0, 0.0, -1.0])

    assert R[0, 1] == 2.0
    assert R[1, 2] == 0.0
    assert np.isnan(R[0, 0])
    assert np.isnan(R[2, 1])


def test_reweighted_edges_shape_mismatch() -> None:
    with pytest.raises(ValueError, match="potentials must have shape"):
        reweighted_edges(np.zeros((3, 3)), [0.0, 0.0])
    with pytest.raises(ValueError, match="square"):
        reweighted_edges(np.zeros((2, 3)), [0.0, 0.0])


def test_assert_nonnegative_reweighting_passes(negative_edge_graph) -> None:
    """Potentials from the pre-pass satisfy the invariant."""
    P = johnson_potentials(negative_edge_graph)
    # Should not raise
    assert_nonnegative_reweighting(negative_edge_graph.to_numpy(), P)


def test_assert_nonnegative_reweighting_raises(negative_edge_graph) -> None:
    """Zero potentials leave the negative edge negative."""
    with pytest.raises(ValueError, match=r"Reweighted edge \(1, 2\) is negative"):
        assert_nonnegative_reweighting(negative_edge_graph.to_numpy(), np.zeros(4))


def test_assert_nonnegative_reweighting_tolerance() -> None:
    W = np.array([[0.0, -1e-12], [0.0, 0.0]])
    assert_nonnegative_reweighting(W, [0.0, 0.0])
    with pytest.raises(ValueError):
        assert_nonnegative_reweighting(W, [0.0, 0.0], atol=0.0)


def test_check_triangle_inequality_consistent() -> None:
    d = np.array([[0.0, 1.0, 3.0], [np.inf, 0.0, 2.0], [np.inf, np.inf, 0.0]])
    assert check_triangle_inequality(d) == []


def test_check_triangle_inequality_violation() -> None:
    """d(0, 2) = 5 is longer than the route through 1."""
    d = np.array([[0.0, 1.0, 5.0], [np.inf, 0.0, 2.0], [np.inf, np.inf, 0.0]])
    assert check_triangle_inequality(d) == [(0, 1, 2)]
