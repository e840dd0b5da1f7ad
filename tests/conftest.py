"""Pytest configuration and shared fixtures for densepath tests.

This module provides:
- A deterministic numpy RNG fixture
- Small named graphs used across test modules
- A random digraph factory for property-style tests
- A fixture capturing densepath log output
"""

import logging
import os
from io import StringIO
from typing import Callable, Iterator

import numpy as np
import pytest

from densepath.graphs import AdjacencyMatrix
from densepath.logging import configure_logging


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def path_graph() -> AdjacencyMatrix:
    """4 vertices: 0->1 (1), 1->2 (2), 0->2 (5); vertex 3 isolated."""
    return AdjacencyMatrix.from_edges(4, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])


@pytest.fixture
def negative_edge_graph() -> AdjacencyMatrix:
    """Negative edges, no negative cycle (cycle 1->2->3->1 weighs 1)."""
    return AdjacencyMatrix.from_edges(
        4, [(0, 1, 3), (1, 2, -2), (0, 2, 4), (2, 3, 2), (3, 1, 1)]
    )


@pytest.fixture
def negative_cycle_graph() -> AdjacencyMatrix:
    """A->B (1), B->C (-3), C->A (1): the cycle weighs -1."""
    return AdjacencyMatrix.from_edges(3, [(0, 1, 1), (1, 2, -3), (2, 0, 1)])


@pytest.fixture
def random_digraph(rng: np.random.Generator) -> Callable[..., AdjacencyMatrix]:
    """Factory for random integer-weighted digraphs.

    With ``negative=True`` weights are shifted by random vertex potentials,
    which creates negative edges but never a negative cycle.
    """

    def make(n: int, p: float = 0.4, negative: bool = False) -> AdjacencyMatrix:
        graph = AdjacencyMatrix(n)
        h = rng.integers(-6, 7, size=n) if negative else np.zeros(n, dtype=int)
        for u in range(n):
            for v in range(n):
                if u == v or rng.random() >= p:
                    continue
                w = int(rng.integers(1, 10)) + int(h[u]) - int(h[v])
                if w != 0:
                    graph.set_weight(u, v, w)
        return graph

    return make


@pytest.fixture
def log_stream() -> Iterator[StringIO]:
    """Route all densepath loggers to a StringIO at DEBUG level."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        yield stream
    finally:
        configure_logging(level=logging.WARNING)
