"""I/O for the edge-list graph format."""

from .edgelist import parse_graph_file, parse_graph_string

__all__ = [
    "parse_graph_string",
    "parse_graph_file",
]
