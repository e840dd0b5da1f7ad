"""Benchmark the shortest-path algorithms on random dense graphs."""

import time
from typing import Dict

import numpy as np

from densepath.graphs import AdjacencyMatrix, all_pairs_distances, dijkstra, johnson


def random_graph(
    n_vertices: int,
    density: float = 0.3,
    negative: bool = False,
    seed: int = 0,
) -> AdjacencyMatrix:
    """Random integer-weighted digraph; ``negative`` shifts weights by potentials."""
    rng = np.random.default_rng(seed)
    weights = rng.integers(1, 10, size=(n_vertices, n_vertices)).astype(np.float64)
    if negative:
        h = rng.integers(-5, 6, size=n_vertices)
        weights += h[:, None] - h[None, :]
    mask = rng.random((n_vertices, n_vertices)) < density
    np.fill_diagonal(mask, False)

    graph = AdjacencyMatrix(n_vertices)
    for u, v in np.argwhere(mask & (weights != 0)):
        graph.set_weight(int(u), int(v), weights[u, v])
    return graph


def benchmark_algorithms(
    n_vertices: int,
    density: float = 0.3,
    repeats: int = 3,
) -> Dict[str, float]:
    """Benchmark Dijkstra, Floyd-Warshall and Johnson.

    Args:
        n_vertices: Number of vertices.
        density: Probability of each off-diagonal edge.
        repeats: Timed runs per algorithm.

    Returns:
        Dictionary with timing results.
    """
    positive = random_graph(n_vertices, density)
    negative = random_graph(n_vertices, density, negative=True)

    def timed(fn) -> float:
        fn()  # warmup
        start = time.perf_counter()
        for _ in range(repeats):
            fn()
        return (time.perf_counter() - start) / repeats

    return {
        "n_vertices": n_vertices,
        "density": density,
        "dijkstra_sec": timed(lambda: dijkstra(positive, 0, n_vertices - 1)),
        "floyd_warshall_sec": timed(lambda: all_pairs_distances(negative)),
        "johnson_sec": timed(lambda: johnson(negative)),
    }


if __name__ == "__main__":
    print("Benchmarking shortest-path algorithms...")
    for n in (50, 100, 200):
        results = benchmark_algorithms(n_vertices=n)
        print(f"{n} vertices (density {results['density']}):")
        print(f"  Dijkstra (one pair): {results['dijkstra_sec']*1e3:.2f} ms")
        print(f"  Floyd-Warshall:      {results['floyd_warshall_sec']*1e3:.2f} ms")
        print(f"  Johnson:             {results['johnson_sec']*1e3:.2f} ms")
