"""Pytest configuration and shared fixtures for pathconduit tests.

This module provides:
- A deterministic numpy RNG for randomized graph tests
- The small reference graphs used across the shortest-path tests
- Isolation of global configuration between tests
"""

import os

import numpy as np
import pytest

from pathconduit import DiGraph, Graph, set_multiedge_policy


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_multiedge_policy(monkeypatch):
    """Auto-use fixture so no test leaks a multi-edge policy into another."""
    monkeypatch.delenv("PATHCONDUIT_MULTIEDGE_POLICY", raising=False)
    set_multiedge_policy(None)
    yield
    set_multiedge_policy(None)


@pytest.fixture
def letters_graph() -> Graph:
    """Undirected graph A-B(5), A-C(2), C-D(3) plus an isolated node E."""
    G = Graph()
    G.add_nodes_from(["A", "B"])
    G.add_edge("A", "B", weight=5)
    G.add_weighted_edges_from([("A", "C", 2), ("C", "D", 3)])
    G.add_node("E")
    return G


@pytest.fixture
def numbered_digraph() -> DiGraph:
    """Directed graph on 0..3 with a unique shortest path 0-1-2-3."""
    G = DiGraph()
    G.add_nodes_from(range(4))
    G.add_weighted_edges_from([(0, 1, 1), (0, 2, 4), (1, 2, 2), (2, 3, 1), (1, 3, 5)])
    return G


@pytest.fixture
def random_digraph(rng: np.random.Generator):
    """Factory fixture building random weighted digraphs from the seeded RNG."""
    return lambda **kwargs: random_weighted_digraph(rng, **kwargs)


def random_weighted_digraph(
    rng: np.random.Generator,
    n_nodes: int = 8,
    edge_prob: float = 0.35,
    low: int = 0,
    high: int = 10,
    acyclic: bool = False,
) -> DiGraph:
    """Build a random directed graph with integer weights in [low, high).

    With ``acyclic=True`` edges only go from lower to higher node numbers,
    which keeps negative weights free of negative cycles.
    """
    G = DiGraph()
    G.add_nodes_from(range(n_nodes))
    for u in range(n_nodes):
        for v in range(n_nodes):
            if u == v or (acyclic and v < u):
                continue
            if rng.random() < edge_prob:
                G.add_edge(u, v, weight=int(rng.integers(low, high)))
    return G
