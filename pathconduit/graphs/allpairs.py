"""
All-pairs shortest path algorithms: Johnson, plus per-source fan-out of
Dijkstra and Bellman-Ford.

Results are lists of ``(source, result)`` pairs in node insertion order.
Each source is computed independently from the read-only graph.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.3 (Johnson's algorithm).
"""

from typing import Dict, Hashable, Iterator, List, Optional, Tuple

import numpy as np

from ..exceptions import UnknownNodeError
from ..logging import get_logger
from .core import Graph
from .shortest import (
    PredecessorMap,
    Weight,
    _bellman_ford,
    _dijkstra_multisource,
    single_source_bellman_ford,
    single_source_dijkstra,
    single_source_dijkstra_path_length,
)
from .utils import node_index_map, paths_from_predecessors
from .views import VirtualSourceView
from .weights import WeightFunction, weight_function

logger = get_logger(__name__)

# Reweighted edges are mathematically >= 0; float round-off can dip slightly below.
_REWEIGHT_TOLERANCE = 1e-9

DistanceMap = Dict[Hashable, float]
PathMap = Dict[Hashable, List[Hashable]]


def all_pairs_dijkstra(
    graph: Graph, cutoff: Optional[float] = None, weight: Weight = "weight"
) -> List[Tuple[Hashable, Tuple[DistanceMap, PathMap]]]:
    """
    Dijkstra distances and paths between all pairs of nodes.

    Args:
        graph: Graph with non-negative edge weights.
        cutoff: Optional maximum distance.
        weight: Edge attribute name or weight callable.

    Returns:
        ``[(source, (dist, paths)), ...]`` in node insertion order.

    Raises:
        NegativeWeightError: If a negative edge weight is encountered.

    Complexity: O(V (V + E) log V).
    """
    return [
        (node, single_source_dijkstra(graph, node, cutoff=cutoff, weight=weight))
        for node in graph.nodes()
    ]


def all_pairs_dijkstra_path_length(
    graph: Graph, cutoff: Optional[float] = None, weight: Weight = "weight"
) -> List[Tuple[Hashable, DistanceMap]]:
    """Return ``[(source, {node: distance}), ...]`` using Dijkstra."""
    return [
        (node, single_source_dijkstra_path_length(graph, node, cutoff=cutoff, weight=weight))
        for node in graph.nodes()
    ]


def all_pairs_dijkstra_path(
    graph: Graph, cutoff: Optional[float] = None, weight: Weight = "weight"
) -> List[Tuple[Hashable, PathMap]]:
    """Return ``[(source, {node: path}), ...]`` using Dijkstra."""
    return [(node, paths) for node, (_, paths) in all_pairs_dijkstra(graph, cutoff=cutoff, weight=weight)]


def all_pairs_bellman_ford_path_length(
    graph: Graph, weight: Weight = "weight"
) -> List[Tuple[Hashable, DistanceMap]]:
    """
    Return ``[(source, {node: distance}), ...]`` using Bellman-Ford.

    Raises:
        NegativeCycleError: If a negative cycle is reachable from any node.
    """
    return [(node, single_source_bellman_ford(graph, node, weight=weight)[0]) for node in graph.nodes()]


def all_pairs_bellman_ford_path(
    graph: Graph, weight: Weight = "weight"
) -> List[Tuple[Hashable, PathMap]]:
    """Return ``[(source, {node: path}), ...]`` using Bellman-Ford."""
    return [(node, single_source_bellman_ford(graph, node, weight=weight)[1]) for node in graph.nodes()]


def _potentials(graph: Graph, weight: WeightFunction) -> DistanceMap:
    """Bellman-Ford distances from a virtual node joined to every node by 0-weight edges."""
    view = VirtualSourceView(graph)
    h = _bellman_ford(view, view.source, view.weight(weight), {})
    del h[view.source]
    return h


def _johnson(graph: Graph, weight: Weight) -> Iterator[Tuple[Hashable, DistanceMap, PathMap]]:
    resolve = weight_function(graph, weight)
    h = _potentials(graph, resolve)
    logger.debug("johnson potentials computed for %d node(s)", len(h))

    def reweighted(u: Hashable, v: Hashable, record) -> float:
        cost = resolve(u, v, record) + h[u] - h[v]
        if -_REWEIGHT_TOLERANCE < cost < 0:
            return 0
        return cost

    for source in graph.nodes():
        pred: PredecessorMap = {}
        reduced = _dijkstra_multisource(graph, [source], reweighted, pred)
        dist = {node: d - h[source] + h[node] for node, d in reduced.items()}
        yield source, dist, paths_from_predecessors(pred, reduced)


def johnson(graph: Graph, weight: Weight = "weight") -> List[Tuple[Hashable, PathMap]]:
    """
    Johnson's algorithm for all-pairs shortest paths.

    Handles negative edge weights as long as there is no negative cycle:
    Bellman-Ford from a virtual source yields potentials ``h`` that make
    every reweighted edge ``w(u, v) + h(u) - h(v)`` non-negative, then
    Dijkstra runs from every node. Paths are the same under both weightings.

    Args:
        graph: Graph, possibly with negative weights.
        weight: Edge attribute name or weight callable.

    Returns:
        ``[(source, {node: path}), ...]`` in node insertion order.

    Raises:
        NegativeCycleError: If the graph contains a negative cycle. No
            Dijkstra run is started in that case.

    Complexity: O(VE + V (V + E) log V).

    Example:
        >>> G = DiGraph()
        >>> G.add_weighted_edges_from([('a', 'b', -1), ('b', 'c', 2)])
        >>> johnson(G)[0]
        ('a', {'a': ['a'], 'b': ['a', 'b'], 'c': ['a', 'b', 'c']})
    """
    return [(source, paths) for source, _, paths in _johnson(graph, weight)]


def johnson_path_length(graph: Graph, weight: Weight = "weight") -> List[Tuple[Hashable, DistanceMap]]:
    """
    Johnson's algorithm, returning true (un-reweighted) distances.

    Returns:
        ``[(source, {node: distance}), ...]`` in node insertion order.

    Raises:
        NegativeCycleError: If the graph contains a negative cycle.
    """
    return [(source, dist) for source, dist, _ in _johnson(graph, weight)]


def distance_matrix(
    graph: Graph,
    nodelist: Optional[List[Hashable]] = None,
    weight: Weight = "weight",
) -> np.ndarray:
    """
    Dense matrix of all-pairs shortest distances.

    Args:
        graph: Graph, possibly with negative weights.
        nodelist: Row/column order (defaults to node insertion order).
        weight: Edge attribute name or weight callable.

    Returns:
        (n, n) float array; ``D[i, j]`` is the distance from ``nodelist[i]``
        to ``nodelist[j]``, or ``inf`` when unreachable.

    Raises:
        UnknownNodeError: If nodelist names a node not in graph.
        NegativeCycleError: If the graph contains a negative cycle.
    """
    if nodelist is None:
        nodelist = graph.nodes()
    else:
        missing = [node for node in nodelist if node not in graph]
        if missing:
            raise UnknownNodeError(f"Node {missing[0]!r} is not in the graph")
    node_to_idx, idx_to_node = node_index_map(nodelist)

    D = np.full((len(idx_to_node), len(idx_to_node)), np.inf)
    for source, dist in johnson_path_length(graph, weight=weight):
        if source not in node_to_idx:
            continue
        i = node_to_idx[source]
        for node, d in dist.items():
            if node in node_to_idx:
                D[i, node_to_idx[node]] = d
    return D
