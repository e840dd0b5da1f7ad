"""densepath - shortest paths on dense weighted digraphs."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_nonnegative_reweighting,
    check_triangle_inequality,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Graph storage and algorithms
from .graphs import (
    APSPStatus,
    AdjacencyMatrix,
    DijkstraResult,
    DistancePlanes,
    JohnsonResult,
    ShortestPathSolver,
    SingleSourceResult,
    all_pairs_distances,
    build_path,
    dijkstra,
    floyd_warshall,
    johnson,
    johnson_potentials,
    shortest_shortest,
    single_source,
)

# I/O
from .io import parse_graph_file, parse_graph_string

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Text rendering
from .viz import (
    LabelStyle,
    format_distance_matrix,
    format_edge_list,
    format_graph,
    format_matrix,
    format_path,
    format_stats,
    print_graph,
    print_path,
)

__all__ = [
    "__version__",
    # Graphs
    "AdjacencyMatrix",
    "DistancePlanes",
    "dijkstra",
    "single_source",
    "DijkstraResult",
    "SingleSourceResult",
    "APSPStatus",
    "floyd_warshall",
    "all_pairs_distances",
    "johnson",
    "johnson_potentials",
    "JohnsonResult",
    "build_path",
    "shortest_shortest",
    "ShortestPathSolver",
    # I/O
    "parse_graph_string",
    "parse_graph_file",
    # Rendering
    "LabelStyle",
    "format_stats",
    "format_matrix",
    "format_edge_list",
    "format_graph",
    "format_path",
    "format_distance_matrix",
    "print_graph",
    "print_path",
    # Diagnostics
    "assert_nonnegative_reweighting",
    "check_triangle_inequality",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
