"""Edge-list reader for weighted directed graphs.

The format is a whitespace-separated token stream::

    <vertex count> <edge count>
    <tail> <head> <weight>
    ...

Vertex indices are 1-based in the file and 0-based in the returned
:class:`~densepath.graphs.AdjacencyMatrix`. Line breaks carry no meaning.
"""

from __future__ import annotations

from typing import List, Tuple, Union

import numpy as np

from densepath.graphs.matrix import AdjacencyMatrix
from densepath.logging import get_logger

logger = get_logger(__name__)

Number = Union[int, float]


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Invalid {what}: {token!r} is not an integer") from None


def _parse_weight(token: str) -> Number:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"Invalid edge weight: {token!r}") from None


def _parse_triples(tokens: List[str], size: int) -> List[Tuple[int, int, Number]]:
    if len(tokens) % 3:
        raise ValueError(
            f"Truncated edge list: {len(tokens)} tokens after the header "
            "is not a multiple of 3"
        )

    triples = []
    for pos in range(0, len(tokens), 3):
        tail = _parse_int(tokens[pos], "tail vertex")
        head = _parse_int(tokens[pos + 1], "head vertex")
        weight = _parse_weight(tokens[pos + 2])

        if not 1 <= tail <= size or not 1 <= head <= size:
            raise ValueError(
                f"Invalid graph edge {tail} -> {head} (edge {pos // 3 + 1}): "
                f"vertices must be in [1, {size}]"
            )
        triples.append((tail - 1, head - 1, weight))
    return triples


def parse_graph_string(text: str, dtype: np.dtype = np.float64) -> AdjacencyMatrix:
    """
    Parse an edge-list string into an AdjacencyMatrix.

    Parameters
    ----------
    text : str
        Token stream ``V E`` followed by ``tail head weight`` triples.
    dtype : numpy dtype
        Weight dtype of the returned matrix.

    Returns
    -------
    AdjacencyMatrix
        Graph with V vertices. A repeated edge keeps its last weight.

    Raises
    ------
    ValueError
        If the header is missing, V < 2, a token is malformed, a triple is
        incomplete, a vertex index is out of range or a weight does not
        fit an integer dtype exactly.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("Edge list needs a '<vertices> <edges>' header")

    size = _parse_int(tokens[0], "vertex count")
    declared = _parse_int(tokens[1], "edge count")
    triples = _parse_triples(tokens[2:], size)

    if declared != len(triples):
        logger.warning(
            f"Header declares {declared} edges but {len(triples)} were listed"
        )

    graph = AdjacencyMatrix(size, dtype=dtype)
    for tail, head, weight in triples:
        if weight == 0:
            logger.warning(
                f"Zero-weight edge {tail + 1} -> {head + 1} cannot be stored; "
                "treated as no edge"
            )
        try:
            graph.set_weight(tail, head, weight)
        except ValueError as e:
            raise ValueError(f"Invalid graph edge {tail + 1} -> {head + 1}: {e}") from None

    logger.debug(f"Loaded {graph!r}")
    return graph


def parse_graph_file(path: str, dtype: np.dtype = np.float64) -> AdjacencyMatrix:
    """
    Parse an edge-list file into an AdjacencyMatrix.

    Parameters
    ----------
    path : str
        Path to the edge-list file.
    dtype : numpy dtype
        Weight dtype of the returned matrix.

    Returns
    -------
    AdjacencyMatrix
        Parsed graph.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file cannot be read or its content is malformed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Graph file not found: {path}")
    except OSError as e:
        raise ValueError(f"Error reading graph file {path}: {e}")

    return parse_graph_string(content, dtype=dtype)
