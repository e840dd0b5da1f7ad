"""Text rendering for graphs, shortest paths and distance matrices."""

from .text import (
    LabelStyle,
    format_distance_matrix,
    format_edge_list,
    format_graph,
    format_matrix,
    format_path,
    format_plane,
    format_stats,
    print_graph,
    print_path,
    vertex_label,
)

__all__ = [
    "LabelStyle",
    "vertex_label",
    "format_stats",
    "format_matrix",
    "format_edge_list",
    "format_graph",
    "format_path",
    "format_distance_matrix",
    "format_plane",
    "print_graph",
    "print_path",
]
