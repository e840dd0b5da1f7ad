"""
Dense graph storage: the adjacency matrix and the three-plane distance set.

``AdjacencyMatrix`` stores a weighted directed graph as a V x V numpy array
where ``0`` means "no edge". A zero-weight edge therefore cannot be stored;
writing 0 removes the edge.

``DistancePlanes`` holds three parallel N x N float planes used by the
iterative all-pairs algorithms. There ``inf`` means "no edge / unreachable"
because 0 is a legitimate distance. Plane ``INITIAL`` keeps the edge
weights, ``PREVIOUS`` the result of the last completed step (and the final
answer), ``CURRENT`` the step being computed.

Complexity:
    - weight access/mutation: O(1)
    - neighbors, neighbor_weights: O(V)
    - edges, is_connected: O(V^2)
"""

from __future__ import annotations

import operator
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

Number = Union[int, float]
Edge = Tuple[int, int, Number]  # (tail, head, weight)

INITIAL = 0
PREVIOUS = 1
CURRENT = 2
NUM_PLANES = 3

MIN_VERTICES = 2


def _check_size(size: int) -> int:
    size = int(size)
    if size < MIN_VERTICES:
        raise ValueError(f"Graph needs at least {MIN_VERTICES} vertices, got {size}")
    return size


class AdjacencyMatrix:
    """
    Weighted directed graph stored as a dense adjacency matrix.

    Vertices are the integers ``0..V-1``. Every index-taking method raises
    ``IndexError`` for an index outside that range.

    Attributes:
        num_vertices: Number of vertices V.
        num_edges: Number of stored (non-zero) entries.
        dtype: numpy dtype of the weights.
    """

    def __init__(self, size: int, dtype: np.dtype = np.float64):
        """
        Create an edgeless graph.

        Args:
            size: Number of vertices, at least 2.
            dtype: Numeric numpy dtype for the weights (default float64).

        Raises:
            ValueError: If size < 2 or dtype is not numeric.
        """
        size = _check_size(size)
        dtype = np.dtype(dtype)
        if not np.issubdtype(dtype, np.number) or np.issubdtype(dtype, np.complexfloating):
            raise ValueError(f"Weights need a real numeric dtype, got {dtype}")

        self._size = size
        self._edges = 0
        self._weights = np.zeros((size, size), dtype=dtype)

    @classmethod
    def from_edges(
        cls, size: int, edges: Iterable[Edge], dtype: np.dtype = np.float64
    ) -> "AdjacencyMatrix":
        """
        Build a graph from ``(tail, head, weight)`` triples (0-based).

        Later duplicates overwrite earlier ones.

        Example:
            >>> g = AdjacencyMatrix.from_edges(3, [(0, 1, 2.0), (1, 2, 1.0)])
            >>> g.num_edges
            2
        """
        graph = cls(size, dtype=dtype)
        for tail, head, weight in edges:
            graph.set_weight(tail, head, weight)
        return graph

    @property
    def num_vertices(self) -> int:
        return self._size

    @property
    def num_edges(self) -> int:
        return self._edges

    @property
    def dtype(self) -> np.dtype:
        return self._weights.dtype

    def _check_index(self, x: int) -> int:
        x = operator.index(x)
        if not 0 <= x < self._size:
            raise IndexError(f"Vertex {x} out of range [0, {self._size})")
        return x

    def _coerce_weight(self, weight: Number):
        """Cast weight to the store dtype, refusing casts that change its value."""
        dtype = self._weights.dtype
        if not np.issubdtype(dtype, np.integer):
            return weight
        try:
            cast = dtype.type(weight)
        except (OverflowError, ValueError, TypeError):
            raise ValueError(f"Weight {weight!r} cannot be stored as {dtype}") from None
        if cast != weight:
            raise ValueError(f"Weight {weight!r} cannot be stored as {dtype} without loss")
        return cast

    def adjacent(self, x: int, y: int) -> bool:
        """Return True if the edge x -> y exists."""
        x, y = self._check_index(x), self._check_index(y)
        return bool(self._weights[x, y] != 0)

    def get_weight(self, x: int, y: int) -> Number:
        """Return the weight of x -> y, or 0 when there is no edge."""
        x, y = self._check_index(x), self._check_index(y)
        return self._weights[x, y].item()

    def set_weight(self, x: int, y: int, weight: Number) -> None:
        """
        Set the weight of x -> y.

        The edge count goes up when an absent edge gets a non-zero weight and
        down when an existing edge is set to 0.

        Args:
            x: Tail vertex.
            y: Head vertex.
            weight: New weight; 0 removes the edge.

        Raises:
            IndexError: If x or y is out of range.
            ValueError: If an integer store cannot hold weight exactly
                (for example 0.5 in an int64 matrix). Nothing is changed.
        """
        x, y = self._check_index(x), self._check_index(y)
        weight = self._coerce_weight(weight)
        had_edge = self._weights[x, y] != 0
        self._weights[x, y] = weight
        has_edge = self._weights[x, y] != 0

        if has_edge and not had_edge:
            self._edges += 1
        elif had_edge and not has_edge:
            self._edges -= 1

    def add_edge(self, x: int, y: int) -> None:
        """Add x -> y with unit weight."""
        self.set_weight(x, y, 1)

    def remove_edge(self, x: int, y: int) -> None:
        """Remove x -> y; no-op when the edge does not exist."""
        self.set_weight(x, y, 0)

    def neighbors(self, x: int) -> List[int]:
        """Return the heads of all edges leaving x, in increasing order."""
        x = self._check_index(x)
        return [int(j) for j in np.flatnonzero(self._weights[x])]

    def neighbor_weights(self, x: int) -> List[Number]:
        """Return the weights of all edges leaving x, ordered by head index."""
        x = self._check_index(x)
        row = self._weights[x]
        return [w.item() for w in row[row != 0]]

    def edges(self) -> List[Edge]:
        """Return all edges as ``(tail, head, weight)`` in row-major order."""
        return [
            (int(i), int(j), self._weights[i, j].item())
            for i, j in np.argwhere(self._weights != 0)
        ]

    def has_negative_weights(self) -> bool:
        return bool(np.any(self._weights < 0))

    def density(self) -> float:
        """Return ``edges / V^2``."""
        return self._edges / (self._size * self._size)

    def is_connected(self) -> bool:
        """
        Return True if every vertex is reachable from vertex 0.

        Depth-first search along directed edges starting at vertex 0. This is
        reachability from vertex 0, not strong or weak connectivity: a graph
        whose only edges point into vertex 0 is not connected.
        """
        reached = np.zeros(self._size, dtype=bool)
        reached[0] = True
        count = 1
        stack = [0]

        while stack:
            u = stack.pop()
            # Push in reverse so lower indices are explored first
            for v in reversed(self.neighbors(u)):
                if not reached[v]:
                    reached[v] = True
                    count += 1
                    stack.append(v)

        return count == self._size

    def to_numpy(self) -> np.ndarray:
        """Return a read-only copy of the weight matrix."""
        weights = self._weights.copy()
        weights.flags.writeable = False
        return weights

    def copy(self) -> "AdjacencyMatrix":
        clone = AdjacencyMatrix(self._size, dtype=self.dtype)
        clone._weights[...] = self._weights
        clone._edges = self._edges
        return clone

    def __repr__(self):
        return f"AdjacencyMatrix(v={self._size}, e={self._edges})"


class DistancePlanes:
    """
    Three parallel N x N distance planes for iterative all-pairs algorithms.

    Every entry starts at ``inf`` except the diagonal, which is 0 on all
    planes. When built with a virtual source, index 0 is the extra vertex
    and real vertex ``v`` lives at index ``v + 1``.

    Attributes:
        size: Plane dimension N (real vertices plus the virtual source).
        offset: 1 when index 0 is a virtual source, else 0.
        valid: False once an algorithm found a negative cycle.
    """

    def __init__(self, size: int):
        """
        Args:
            size: Plane dimension, at least 2.

        Raises:
            ValueError: If size < 2.
        """
        size = _check_size(size)
        self._size = size
        self._offset = 0
        self._valid = True
        self._data = np.full((NUM_PLANES, size, size), np.inf, dtype=np.float64)
        idx = np.arange(size)
        self._data[:, idx, idx] = 0.0

    @classmethod
    def from_matrix(
        cls, matrix: AdjacencyMatrix, virtual_source: bool = False
    ) -> "DistancePlanes":
        """
        Copy the edges of ``matrix`` onto all three planes.

        Args:
            matrix: Source graph.
            virtual_source: If True, prepend vertex 0 with a zero-weight edge
                to every real vertex.

        Returns:
            Plane set of size V (or V + 1 with a virtual source).
        """
        offset = 1 if virtual_source else 0
        planes = cls(matrix.num_vertices + offset)
        planes._offset = offset

        weights = matrix.to_numpy()
        has_edge = weights != 0
        real = planes._data[:, offset:, offset:]
        real[:, has_edge] = weights[has_edge].astype(np.float64)

        # A positive self-loop never beats staying put
        idx = np.arange(matrix.num_vertices)
        real[:, idx, idx] = np.minimum(real[:, idx, idx], 0.0)

        if virtual_source:
            planes._data[:, 0, :] = 0.0
        return planes

    @property
    def size(self) -> int:
        return self._size

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def num_vertices(self) -> int:
        """Number of real vertices (excluding a virtual source)."""
        return self._size - self._offset

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def data(self) -> np.ndarray:
        """The raw ``(3, N, N)`` array, shared, not copied."""
        return self._data

    @property
    def num_edges(self) -> int:
        """Finite off-diagonal entries of the INITIAL plane."""
        initial = self._data[INITIAL]
        finite = np.isfinite(initial)
        np.fill_diagonal(finite, False)
        return int(finite.sum())

    def _check(self, i: int, j: int, plane: int) -> None:
        i, j, plane = operator.index(i), operator.index(j), operator.index(plane)
        if not 0 <= i < self._size or not 0 <= j < self._size:
            raise IndexError(f"Entry ({i}, {j}) out of range [0, {self._size})")
        if not 0 <= plane < NUM_PLANES:
            raise IndexError(f"Plane {plane} out of range [0, {NUM_PLANES})")

    def get(self, i: int, j: int, plane: int = PREVIOUS) -> float:
        self._check(i, j, plane)
        return float(self._data[plane, i, j])

    def set(self, i: int, j: int, plane: int, value: Number) -> None:
        self._check(i, j, plane)
        self._data[plane, i, j] = value

    def advance(self) -> None:
        """Finish a step: ``previous <- current``, then ``current <- initial``."""
        self._data[PREVIOUS] = self._data[CURRENT]
        self._data[CURRENT] = self._data[INITIAL]

    def invalidate(self) -> None:
        self._valid = False

    def distances(self, include_virtual: bool = False) -> np.ndarray:
        """
        Return a copy of the PREVIOUS plane.

        Args:
            include_virtual: Keep the virtual source row/column if present.

        Raises:
            RuntimeError: If the planes were invalidated by a negative cycle.
        """
        if not self._valid:
            raise RuntimeError("Distance planes invalidated by a negative cycle")
        result = self._data[PREVIOUS]
        if not include_virtual and self._offset:
            result = result[self._offset:, self._offset:]
        return result.copy()

    def row(self, i: int, plane: int = PREVIOUS) -> np.ndarray:
        self._check(i, 0, plane)
        return self._data[plane, i].copy()

    def __repr__(self):
        return (
            f"DistancePlanes(n={self._size}, virtual_source={bool(self._offset)}, "
            f"valid={self._valid})"
        )


def as_plane_index(value: Optional[str]) -> int:
    """Map a plane name (``initial``, ``previous``, ``current``) to its index."""
    names = {"initial": INITIAL, "previous": PREVIOUS, "current": CURRENT}
    if value is None:
        return PREVIOUS
    try:
        return names[value.lower()]
    except KeyError:
        raise ValueError(f"Unknown plane {value!r}; expected one of {sorted(names)}") from None
