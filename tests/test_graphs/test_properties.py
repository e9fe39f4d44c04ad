"""Cross-checks between algorithms on seeded random graphs."""

import math

import numpy as np

from pathconduit import (
    all_pairs_bellman_ford_path_length,
    all_pairs_dijkstra_path_length,
    distance_matrix,
    johnson,
    johnson_path_length,
    negative_edge_cycle,
    path_weight,
    single_source_bellman_ford,
    single_source_dijkstra,
)

TRIALS = 5


class TestDijkstraProperties:
    """Properties of Dijkstra results on non-negative random graphs."""

    def test_matches_bellman_ford(self, random_digraph):
        """Test that Dijkstra and Bellman-Ford agree on distances."""
        for _ in range(TRIALS):
            G = random_digraph()
            for source in G:
                dist, _ = single_source_dijkstra(G, source)
                bf_dist, _ = single_source_bellman_ford(G, source)
                assert dist == bf_dist

    def test_paths_realise_distances(self, random_digraph):
        """Test that each reported path weighs exactly its distance."""
        for _ in range(TRIALS):
            G = random_digraph()
            for source in G:
                dist, paths = single_source_dijkstra(G, source)
                assert set(dist) == set(paths)
                for node, path in paths.items():
                    assert path[0] == source
                    assert path[-1] == node
                    assert path_weight(G, path) == dist[node]

    def test_triangle_inequality(self, random_digraph):
        """Test d(s, v) <= d(s, u) + w(u, v) for every reached edge."""
        for _ in range(TRIALS):
            G = random_digraph()
            for source in G:
                dist, _ = single_source_dijkstra(G, source)
                for u, v, record in G.edges(data=True):
                    if u in dist:
                        assert v in dist
                        assert dist[v] <= dist[u] + record.weight

    def test_repeatable(self, random_digraph):
        """Test that running twice gives identical results."""
        G = random_digraph()
        assert all_pairs_dijkstra_path_length(G) == all_pairs_dijkstra_path_length(G)
        assert johnson(G) == johnson(G)


class TestJohnsonProperties:
    """Properties of Johnson's algorithm on graphs with negative weights."""

    def test_matches_bellman_ford_fan_out(self, random_digraph):
        """Test that Johnson agrees with Bellman-Ford from every node."""
        for _ in range(TRIALS):
            G = random_digraph(low=-5, high=10, acyclic=True)
            assert not negative_edge_cycle(G)
            assert johnson_path_length(G) == all_pairs_bellman_ford_path_length(G)

    def test_matches_bellman_ford_with_cycles(self, random_digraph, rng):
        """Test agreement on cyclic graphs whose negative edges close no negative cycle."""
        for _ in range(TRIALS):
            G = random_digraph(low=-5, high=10, acyclic=True)
            # Every cycle uses a back edge, which outweighs all negative edges together.
            back_weight = sum(-record.weight for _, _, record in G.edges(data=True) if record.weight < 0)
            n = G.number_of_nodes()
            for u in range(n):
                for v in range(u):
                    if rng.random() < 0.2:
                        G.add_edge(u, v, weight=back_weight + int(rng.integers(0, 5)))

            assert not negative_edge_cycle(G)
            assert johnson_path_length(G) == all_pairs_bellman_ford_path_length(G)
            lengths = dict(johnson_path_length(G))
            for source, paths in johnson(G):
                for node, path in paths.items():
                    assert path_weight(G, path) == lengths[source][node]

    def test_paths_realise_distances(self, random_digraph):
        """Test that Johnson paths weigh exactly their distances."""
        for _ in range(TRIALS):
            G = random_digraph(low=-5, high=10, acyclic=True)
            lengths = dict(johnson_path_length(G))
            for source, paths in johnson(G):
                for node, path in paths.items():
                    assert path_weight(G, path) == lengths[source][node]

    def test_matches_dijkstra_without_negative_weights(self, random_digraph):
        """Test that Johnson reduces to Dijkstra when weights are non-negative."""
        G = random_digraph()
        assert johnson_path_length(G) == all_pairs_dijkstra_path_length(G)

    def test_distance_matrix_matches(self, random_digraph):
        """Test that the dense matrix mirrors the distance maps."""
        G = random_digraph(low=-3, high=8, acyclic=True)
        D = distance_matrix(G)
        lengths = dict(johnson_path_length(G))
        for i, u in enumerate(G.nodes()):
            for j, v in enumerate(G.nodes()):
                assert D[i, j] == lengths[u].get(v, math.inf)
        assert np.all(np.diag(D) == 0)
