"""Shortest paths example: Dijkstra, Floyd-Warshall and Johnson on small graphs.

This example loads a graph from the edge-list format, prints it, answers a
single-pair query with Dijkstra, then compares the two all-pairs algorithms
on a graph with negative edges and shows how a negative cycle is reported.
"""

from __future__ import annotations

import densepath as dp

ROAD_GRAPH = """
5 7
1 2 4
1 3 1
3 2 2
2 4 1
3 4 5
4 5 3
5 1 7
"""

NEGATIVE_GRAPH = """
4 5
1 2 3
2 3 -2
1 3 4
3 4 2
4 2 1
"""

CYCLE_GRAPH = """
3 3
1 2 1
2 3 -3
3 1 1
"""


def main() -> None:
    """Run the three walkthroughs."""
    style = dp.LabelStyle.UPPERCASE

    # Non-negative weights: Dijkstra
    roads = dp.ShortestPathSolver.from_string(ROAD_GRAPH)
    dp.print_graph(roads.matrix, style)
    print(f"connected from A: {roads.is_connected()}")
    dp.print_path(roads.dijkstra(0, 4), style)
    print()

    # Negative edges: both all-pairs algorithms agree
    solver = dp.ShortestPathSolver.from_string(NEGATIVE_GRAPH)
    for run in (solver.floyd_warshall, solver.johnson):
        status = run()
        print(f"{solver.algorithm}: {status.value}")
        print(dp.format_distance_matrix(solver.distance_matrix(), style, title=solver.algorithm))
    print(f"Johnson potentials: {solver.potentials.tolist()}")
    print(f"Shortest-shortest path: {solver.shortest_shortest_path():g}")
    print()

    # Negative cycle: no distances
    cyclic = dp.ShortestPathSolver.from_string(CYCLE_GRAPH)
    print(f"Floyd-Warshall on cyclic graph: {cyclic.floyd_warshall().value}")
    print(f"Johnson on cyclic graph: {cyclic.johnson().value}")
    print("\nNo distances are reported for graphs with a negative cycle.")


if __name__ == "__main__":
    main()
