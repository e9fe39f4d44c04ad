"""Tests for graph utility functions."""

import pytest

from pathconduit.exceptions import InvalidArgumentError, UnknownEdgeError, UnknownNodeError
from pathconduit.graphs import DiGraph, Graph, MultiGraph, node_index_map, path_weight, reconstruct_path
from pathconduit.graphs.utils import paths_from_predecessors


class TestNodeIndexMap:
    """Tests for node_index_map function."""

    def test_node_index_map_simple(self):
        """Test that indices follow first-seen order."""
        node_to_idx, idx_to_node = node_index_map(["C", "A", "B"])

        assert node_to_idx == {"C": 0, "A": 1, "B": 2}
        assert idx_to_node == ["C", "A", "B"]

    def test_node_index_map_duplicates(self):
        """Test that duplicates keep their first position."""
        node_to_idx, idx_to_node = node_index_map(["A", "B", "A", "C"])

        assert idx_to_node == ["A", "B", "C"]
        assert node_to_idx["C"] == 2

    def test_node_index_map_mixed_types(self):
        """Test nodes that cannot be ordered against each other."""
        _, idx_to_node = node_index_map([3, "x", (1, 2)])
        assert idx_to_node == [3, "x", (1, 2)]

    def test_node_index_map_empty(self):
        """Test the empty mapping."""
        assert node_index_map([]) == ({}, [])


class TestReconstructPath:
    """Tests for reconstruct_path function."""

    def test_reconstruct_path_simple(self):
        """Test path reconstruction on a chain."""
        pred = {"A": [], "B": ["A"], "C": ["B"]}
        assert reconstruct_path(pred, "C") == ["A", "B", "C"]

    def test_reconstruct_path_source(self):
        """Test the path to the source itself."""
        assert reconstruct_path({"A": []}, "A") == ["A"]

    def test_reconstruct_path_follows_last_predecessor(self):
        """Test that the last of several predecessors is followed."""
        pred = {"s": [], "a": ["s"], "b": ["s"], "t": ["a", "b"]}
        assert reconstruct_path(pred, "t") == ["s", "b", "t"]

    def test_reconstruct_path_unreached(self):
        """Test that an unreached target raises."""
        with pytest.raises(UnknownNodeError):
            reconstruct_path({"A": []}, "Z")


class TestPathsFromPredecessors:
    """Tests for paths_from_predecessors function."""

    def test_shared_prefixes(self):
        """Test that every node gets its full path."""
        pred = {0: [], 1: [0], 2: [1], 3: [2], 4: [1]}
        paths = paths_from_predecessors(pred, [3, 0, 4, 2, 1])

        assert paths == {
            3: [0, 1, 2, 3],
            0: [0],
            4: [0, 1, 4],
            2: [0, 1, 2],
            1: [0, 1],
        }
        assert list(paths) == [3, 0, 4, 2, 1]

    def test_paths_are_independent_lists(self):
        """Test that extending one path leaves the others alone."""
        paths = paths_from_predecessors({0: [], 1: [0], 2: [1]}, [0, 1, 2])
        paths[1].append("x")
        assert paths[2] == [0, 1, 2]
        assert paths[0] == [0]

    def test_multiple_sources(self):
        """Test a forest rooted at several sources."""
        pred = {"a": [], "b": [], "c": ["a"], "d": ["b"]}
        paths = paths_from_predecessors(pred, pred)
        assert paths["c"] == ["a", "c"]
        assert paths["d"] == ["b", "d"]


class TestPathWeight:
    """Tests for path_weight function."""

    def test_path_weight(self, letters_graph):
        """Test summing weights along a path."""
        assert path_weight(letters_graph, ["B", "A", "C", "D"]) == 10

    def test_single_node(self, letters_graph):
        """Test that a single-node path weighs 0."""
        assert path_weight(letters_graph, ["E"]) == 0

    def test_empty_path(self, letters_graph):
        """Test that an empty path is rejected."""
        with pytest.raises(InvalidArgumentError):
            path_weight(letters_graph, [])

    def test_missing_edge(self, letters_graph):
        """Test that non-adjacent consecutive nodes raise."""
        with pytest.raises(UnknownEdgeError):
            path_weight(letters_graph, ["A", "D"])

    def test_direction_matters(self):
        """Test that a directed path must follow edge direction."""
        G = DiGraph()
        G.add_edge("a", "b", weight=2)
        assert path_weight(G, ["a", "b"]) == 2
        with pytest.raises(UnknownEdgeError):
            path_weight(G, ["b", "a"])

    def test_multigraph_uses_policy(self):
        """Test that parallel edges resolve through the weight policy."""
        G = MultiGraph()
        G.add_edge("a", "b", weight=4)
        G.add_edge("a", "b", weight=1)
        assert path_weight(G, ["a", "b"]) == 1

    def test_custom_weight(self):
        """Test path weight with a callable."""
        G = Graph()
        G.add_weighted_edges_from([(1, 2, 3), (2, 3, 4)])
        assert path_weight(G, [1, 2, 3], weight=lambda u, v, record: 1) == 2
