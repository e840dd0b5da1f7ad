"""Plain-text rendering of graphs, paths and distance matrices.

Every ``format_*`` function returns a string; the ``print_*`` helpers write
that string to stdout or a file-like object. Rendering only goes through
the public read accessors of the graph types.
"""

from __future__ import annotations

import math
import sys
from enum import Enum
from typing import IO, List, Optional, Union

import numpy as np

from densepath.graphs.matrix import AdjacencyMatrix, DistancePlanes, as_plane_index
from densepath.graphs.shortest import DijkstraResult

_CELL_WIDTH = 7


class LabelStyle(Enum):
    """How vertex indices are shown."""

    NUMERIC = "numeric"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"


def vertex_label(index: int, style: LabelStyle = LabelStyle.NUMERIC) -> str:
    """
    Label for a vertex: ``3``, ``d`` or ``D``.

    Letter styles only cover the first 26 vertices; later ones fall back to
    numbers.
    """
    if style is LabelStyle.NUMERIC or index >= 26:
        return str(index)
    base = ord("a") if style is LabelStyle.LOWERCASE else ord("A")
    return chr(base + index)


def _format_value(value: Union[int, float]) -> str:
    if isinstance(value, (float, np.floating)):
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if float(value).is_integer():
            return str(int(value))
        return f"{float(value):g}"
    return str(value)


def _grid(
    title: str,
    values: np.ndarray,
    style: LabelStyle,
    blank_inf: bool,
    width: int,
) -> str:
    n = values.shape[0]
    lines: List[str] = [f"{title}:", ""]
    header = " " * width + "".join(
        vertex_label(j, style).rjust(width) for j in range(n)
    )
    lines.append(header)
    for i in range(n):
        cells = []
        for value in values[i]:
            if blank_inf and np.isinf(value):
                cells.append(" " * width)
            else:
                cells.append(_format_value(value.item()).rjust(width))
        lines.append(vertex_label(i, style).rjust(width) + "".join(cells))
    return "\n".join(lines) + "\n"


def format_stats(matrix: AdjacencyMatrix) -> str:
    """Vertex count, edge count and density, one per line."""
    return (
        f"vertices = {matrix.num_vertices}\n"
        f"edges = {matrix.num_edges}\n"
        f"density = {matrix.density():g}\n"
    )


def format_matrix(
    matrix: AdjacencyMatrix,
    style: LabelStyle = LabelStyle.NUMERIC,
    width: int = _CELL_WIDTH,
) -> str:
    """
    Render the adjacency matrix as a labelled grid.

    Missing edges show as 0, the matrix's own no-edge marker.
    """
    return _grid("Adjacency Matrix", matrix.to_numpy(), style, blank_inf=False, width=width)


def format_edge_list(
    matrix: AdjacencyMatrix,
    style: LabelStyle = LabelStyle.NUMERIC,
) -> str:
    """
    Render one line per vertex listing its outgoing edges.

    Example line: `` a -> b:1 -> c:5``.
    """
    lines = ["Edge List:", ""]
    for x in range(matrix.num_vertices):
        parts = [f" {vertex_label(x, style)}"]
        for y in matrix.neighbors(x):
            weight = _format_value(matrix.get_weight(x, y))
            parts.append(f" -> {vertex_label(y, style)}:{weight}")
        lines.append("".join(parts))
    return "\n".join(lines) + "\n"


def format_graph(
    matrix: AdjacencyMatrix,
    style: LabelStyle = LabelStyle.NUMERIC,
) -> str:
    """Statistics, adjacency matrix and edge list, separated by blank lines."""
    return "\n".join(
        [format_stats(matrix), format_matrix(matrix, style), format_edge_list(matrix, style)]
    )


def format_path(
    result: DijkstraResult,
    style: LabelStyle = LabelStyle.NUMERIC,
) -> str:
    """
    Render a Dijkstra answer as ``0 -> 1 -> 2 = 3``.

    Queries without a path (same vertex, unreachable target, or
    potential-driven runs) render the distance alone.
    """
    distance = _format_value(result.distance)
    source = vertex_label(result.source, style)
    target = vertex_label(result.target, style)
    if not result.path:
        if not result.reachable:
            return f"No path from {source} to {target}"
        if result.source == result.target:
            return f"{source} = {distance}"
        return f"{source} -> {target} = {distance}"
    nodes = " -> ".join(vertex_label(v, style) for v in result.path)
    return f"{nodes} = {distance}"


def format_distance_matrix(
    distances: np.ndarray,
    style: LabelStyle = LabelStyle.NUMERIC,
    width: int = _CELL_WIDTH,
    title: str = "All-Pairs Shortest Paths",
) -> str:
    """Render an all-pairs result; unreachable pairs are left blank."""
    return _grid(title, np.asarray(distances, dtype=np.float64), style, blank_inf=True, width=width)


def format_plane(
    planes: DistancePlanes,
    plane: Optional[str] = None,
    style: LabelStyle = LabelStyle.NUMERIC,
    width: int = _CELL_WIDTH,
) -> str:
    """
    Render one raw plane (``initial``, ``previous`` or ``current``).

    The virtual source, if any, is shown as vertex 0.
    """
    index = as_plane_index(plane)
    values = planes.data[index]
    name = plane.lower() if plane else "previous"
    return _grid(f"Plane {name}", values, style, blank_inf=True, width=width)


def print_graph(
    matrix: AdjacencyMatrix,
    style: LabelStyle = LabelStyle.NUMERIC,
    file: Optional[IO[str]] = None,
) -> None:
    """
    Print statistics, matrix and edge list to stdout or a file.

    This is a utility for human-readable output, so it uses print()
    intentionally. For programmatic access use the format_* functions.
    """
    if file is None:
        file = sys.stdout
    print(format_graph(matrix, style), file=file)


def print_path(
    result: DijkstraResult,
    style: LabelStyle = LabelStyle.NUMERIC,
    file: Optional[IO[str]] = None,
) -> None:
    """Print a Dijkstra answer under a ``Shortest Path:`` header."""
    if file is None:
        file = sys.stdout
    print("Shortest Path:", file=file)
    print(format_path(result, style), file=file)
