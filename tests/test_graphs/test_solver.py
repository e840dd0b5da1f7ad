"""Tests for the ShortestPathSolver query surface."""

import math

import numpy as np
import pytest

from densepath.graphs import AdjacencyMatrix, APSPStatus, ShortestPathSolver


@pytest.fixture
def solver(negative_edge_graph):
    return ShortestPathSolver(negative_edge_graph)


class TestSolverQueries:
    """Read accessors delegate to the matrix."""

    def test_graph_queries(self, path_graph):
        s = ShortestPathSolver(path_graph)

        assert s.num_vertices() == 4
        assert s.num_edges() == 3
        assert s.density() == pytest.approx(3 / 16)
        assert not s.is_connected()
        assert s.adjacent(0, 1)
        assert s.get_weight(0, 2) == 5.0
        assert s.neighbors(0) == [1, 2]
        assert s.neighbor_weights(0) == [1.0, 5.0]
        assert s.matrix is path_graph

    def test_dijkstra(self, path_graph):
        result = ShortestPathSolver(path_graph).dijkstra(0, 2)
        assert result.distance == 3.0
        assert result.path == [0, 1, 2]

    def test_dijkstra_strict(self, path_graph):
        result = ShortestPathSolver(path_graph).dijkstra(0, 3, strict_unreachable=True)
        assert math.isinf(result.distance)

    def test_from_string(self):
        s = ShortestPathSolver.from_string("3 2  1 2 4  2 3 1")
        assert s.dijkstra(0, 2).distance == 5.0

    def test_from_file(self, tmp_path):
        path = tmp_path / "graph.txt"
        path.write_text("2 1\n1 2 7\n")
        s = ShortestPathSolver.from_file(str(path))
        assert s.get_weight(0, 1) == 7.0


class TestSolverAllPairs:
    """Cached all-pairs results."""

    def test_no_result_before_run(self, solver):
        assert solver.last_status is None
        with pytest.raises(RuntimeError, match="run floyd_warshall"):
            solver.distance_matrix()

    def test_floyd_warshall(self, solver):
        assert solver.floyd_warshall() is APSPStatus.OK
        assert solver.algorithm == "Floyd-Warshall"
        assert solver.distance(0, 2) == 1.0
        assert solver.shortest_shortest_path() == -2.0
        assert solver.potentials is None

    def test_johnson(self, solver):
        assert solver.johnson() is APSPStatus.OK
        assert solver.algorithm == "Johnson"
        assert solver.potentials.tolist() == [0.0, 0.0, -2.0, 0.0]
        assert solver.shortest_shortest_path() == -2.0

    def test_both_algorithms_agree(self, solver):
        solver.floyd_warshall()
        fw = solver.distance_matrix()
        solver.johnson()
        np.testing.assert_array_equal(solver.distance_matrix(), fw)

    def test_distance_matrix_is_a_copy(self, solver):
        solver.floyd_warshall()
        d = solver.distance_matrix()
        d[0, 1] = 100.0
        assert solver.distance(0, 1) == 3.0

    def test_distance_out_of_range(self, solver):
        solver.floyd_warshall()
        with pytest.raises(IndexError):
            solver.distance(0, 4)

    @pytest.mark.parametrize("method", ["floyd_warshall", "johnson"])
    def test_negative_cycle_blocks_results(self, negative_cycle_graph, method):
        s = ShortestPathSolver(negative_cycle_graph)
        assert getattr(s, method)() is APSPStatus.NEGATIVE_CYCLE
        assert s.last_status is APSPStatus.NEGATIVE_CYCLE
        with pytest.raises(RuntimeError, match="negative cycle"):
            s.shortest_shortest_path()
        with pytest.raises(RuntimeError, match="negative cycle"):
            s.distance(0, 1)

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda s: s.set_weight(3, 0, 1),
            lambda s: s.add_edge(3, 0),
            lambda s: s.remove_edge(0, 1),
        ],
    )
    def test_mutation_invalidates_result(self, solver, mutate):
        solver.johnson()
        mutate(solver)

        assert solver.last_status is None
        assert solver.algorithm is None
        assert solver.potentials is None
        with pytest.raises(RuntimeError):
            solver.distance_matrix()

    def test_rerun_after_mutation(self):
        s = ShortestPathSolver(AdjacencyMatrix.from_edges(3, [(0, 1, 1), (1, 2, 1)]))
        s.floyd_warshall()
        assert s.distance(0, 2) == 2.0

        s.set_weight(0, 2, 1)
        s.floyd_warshall()
        assert s.distance(0, 2) == 1.0

    def test_repr(self, path_graph):
        s = ShortestPathSolver(path_graph)
        assert repr(s) == "ShortestPathSolver(AdjacencyMatrix(v=4, e=3), status=None)"
