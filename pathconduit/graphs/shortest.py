"""
Shortest path algorithms: Dijkstra and Bellman-Ford.

Dijkstra's algorithm for non-negative edge weights, from one or several
sources at once. Bellman-Ford for graphs with negative weights, with
negative cycle detection.

Both engines report only the nodes they reach. Predecessors are returned as
lists: Dijkstra records every predecessor on an equal-cost shortest path,
Bellman-Ford records exactly one. Paths are rebuilt by following the last
recorded predecessor, so results are deterministic for a given graph.

The graph is only read. Callers must not mutate it while an algorithm is
running over it.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

from heapq import heappop, heappush
from itertools import count
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple, Union

from ..exceptions import (
    InvalidArgumentError,
    NegativeCycleError,
    NegativeWeightError,
    NoPathError,
    UnknownNodeError,
)
from ..logging import get_logger
from .core import Graph
from .utils import paths_from_predecessors, reconstruct_path
from .views import VirtualSourceView
from .weights import WeightFunction, weight_function

logger = get_logger(__name__)

Weight = Union[str, WeightFunction]
PredecessorMap = Dict[Hashable, List[Hashable]]


def _require_nodes(graph: Any, nodes: Iterable[Hashable]) -> None:
    for node in nodes:
        if not graph.has_node(node):
            raise UnknownNodeError(f"Node {node!r} is not in the graph")


def _check_sources(graph: Graph, sources: Iterable[Hashable]) -> List[Hashable]:
    if sources is None:
        raise InvalidArgumentError("sources must be a non-empty collection of nodes")
    ordered = list(dict.fromkeys(sources))
    if not ordered:
        raise InvalidArgumentError("sources must be a non-empty collection of nodes")
    _require_nodes(graph, ordered)
    return ordered


def _dijkstra_multisource(
    graph: Any,
    sources: List[Hashable],
    weight: WeightFunction,
    pred: PredecessorMap,
    cutoff: Optional[float] = None,
    target: Optional[Hashable] = None,
) -> Dict[Hashable, float]:
    """
    Priority-driven relaxation from every node in ``sources``.

    Fills ``pred`` with the predecessor lists of settled nodes and returns
    the settled distances in settle order. Stops as soon as ``target`` is
    settled.

    Raises:
        NegativeWeightError: If any examined edge has a negative weight.
    """
    dist: Dict[Hashable, float] = {}
    seen: Dict[Hashable, float] = {}
    # (distance, discovery counter, node): equal distances settle first-discovered-first
    fringe: List[Tuple[float, int, Hashable]] = []
    counter = count()

    for source in sources:
        seen[source] = 0
        pred[source] = []
        heappush(fringe, (0, next(counter), source))

    while fringe:
        d, _, u = heappop(fringe)
        if u in dist:
            continue
        dist[u] = d
        if u == target:
            break

        for v, record in graph.neighbor_items(u):
            cost = weight(u, v, record)
            if cost < 0:
                raise NegativeWeightError(
                    f"Dijkstra requires non-negative weights. "
                    f"Found negative weight {cost} on edge ({u!r}, {v!r})"
                )
            if v in dist:
                continue
            candidate = d + cost
            if cutoff is not None and candidate > cutoff:
                continue
            if v not in seen or candidate < seen[v]:
                seen[v] = candidate
                pred[v] = [u]
                heappush(fringe, (candidate, next(counter), v))
            elif candidate == seen[v] and pred[v]:
                # sources keep an empty predecessor list
                pred[v].append(u)

    for node in [n for n in pred if n not in dist]:
        del pred[node]

    logger.debug(
        "dijkstra from %d source(s) settled %d node(s)%s",
        len(sources),
        len(dist),
        " (stopped at target)" if target is not None and target in dist else "",
    )
    return dist


def multi_source_dijkstra(
    graph: Graph,
    sources: Iterable[Hashable],
    target: Optional[Hashable] = None,
    cutoff: Optional[float] = None,
    weight: Weight = "weight",
) -> Tuple[Any, Any]:
    """
    Shortest paths from the nearest of several source nodes.

    Every source starts at distance 0, so each node is reached from
    whichever source is closest.

    Args:
        graph: Graph with non-negative edge weights.
        sources: Non-empty collection of source nodes.
        target: Optional node at which to stop.
        cutoff: Optional maximum distance; farther nodes are not reported.
        weight: Edge attribute name or weight callable.

    Returns:
        Without target: ``(dist, paths)`` mapping each reached node to its
        distance and to its path. With target: ``(distance, path)``.

    Raises:
        InvalidArgumentError: If sources is empty.
        UnknownNodeError: If a source or the target is not in graph.
        NegativeWeightError: If a negative edge weight is encountered.
        NoPathError: If target cannot be reached.

    Complexity: O((V + E) log V) using a binary heap.

    Example:
        >>> G = Graph()
        >>> G.add_weighted_edges_from([('A', 'B', 5), ('A', 'C', 2), ('C', 'D', 3)])
        >>> multi_source_dijkstra(G, {'B', 'A'}, 'D')
        (5, ['A', 'C', 'D'])
    """
    sources = _check_sources(graph, sources)
    if target is not None:
        _require_nodes(graph, [target])
        if target in sources:
            return 0, [target]

    pred: PredecessorMap = {}
    dist = _dijkstra_multisource(
        graph, sources, weight_function(graph, weight), pred, cutoff=cutoff, target=target
    )

    if target is None:
        return dist, paths_from_predecessors(pred, dist)
    if target not in dist:
        raise NoPathError(f"Node {target!r} is not reachable from {sources!r}")
    return dist[target], reconstruct_path(pred, target)


def multi_source_dijkstra_path(
    graph: Graph,
    sources: Iterable[Hashable],
    cutoff: Optional[float] = None,
    weight: Weight = "weight",
) -> Dict[Hashable, List[Hashable]]:
    """Return ``{node: path}`` from the nearest source to every reached node."""
    _, paths = multi_source_dijkstra(graph, sources, cutoff=cutoff, weight=weight)
    return paths


def multi_source_dijkstra_path_length(
    graph: Graph,
    sources: Iterable[Hashable],
    cutoff: Optional[float] = None,
    weight: Weight = "weight",
) -> Dict[Hashable, float]:
    """Return ``{node: distance}`` from the nearest source to every reached node."""
    sources = _check_sources(graph, sources)
    return _dijkstra_multisource(graph, sources, weight_function(graph, weight), {}, cutoff=cutoff)


def single_source_dijkstra(
    graph: Graph,
    source: Hashable,
    target: Optional[Hashable] = None,
    cutoff: Optional[float] = None,
    weight: Weight = "weight",
) -> Tuple[Any, Any]:
    """
    Dijkstra's algorithm from one source.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source node.
        target: Optional node at which to stop.
        cutoff: Optional maximum distance.
        weight: Edge attribute name or weight callable.

    Returns:
        ``(dist, paths)`` without target, ``(distance, path)`` with target.

    Raises:
        UnknownNodeError: If source or target is not in graph.
        NegativeWeightError: If a negative edge weight is encountered.
        NoPathError: If target cannot be reached.
    """
    return multi_source_dijkstra(graph, [source], target=target, cutoff=cutoff, weight=weight)


def single_source_dijkstra_path(
    graph: Graph,
    source: Hashable,
    cutoff: Optional[float] = None,
    weight: Weight = "weight",
) -> Dict[Hashable, List[Hashable]]:
    """
    Return ``{node: path}`` for every node reachable from source.

    Example:
        >>> G = DiGraph()
        >>> G.add_weighted_edges_from([(0, 1, 1), (0, 2, 4), (1, 2, 2), (2, 3, 1), (1, 3, 5)])
        >>> single_source_dijkstra_path(G, 0)
        {0: [0], 1: [0, 1], 2: [0, 1, 2], 3: [0, 1, 2, 3]}
    """
    return multi_source_dijkstra_path(graph, [source], cutoff=cutoff, weight=weight)


def single_source_dijkstra_path_length(
    graph: Graph,
    source: Hashable,
    cutoff: Optional[float] = None,
    weight: Weight = "weight",
) -> Dict[Hashable, float]:
    """Return ``{node: distance}`` for every node reachable from source."""
    return multi_source_dijkstra_path_length(graph, [source], cutoff=cutoff, weight=weight)


def dijkstra_path(
    graph: Graph, source: Hashable, target: Hashable, weight: Weight = "weight"
) -> List[Hashable]:
    """Return the shortest path from source to target (both inclusive)."""
    _, path = single_source_dijkstra(graph, source, target=target, weight=weight)
    return path


def dijkstra_path_length(
    graph: Graph, source: Hashable, target: Hashable, weight: Weight = "weight"
) -> float:
    """Return the shortest distance from source to target."""
    length, _ = single_source_dijkstra(graph, source, target=target, weight=weight)
    return length


def dijkstra_predecessor_and_distance(
    graph: Graph,
    source: Hashable,
    cutoff: Optional[float] = None,
    weight: Weight = "weight",
) -> Tuple[PredecessorMap, Dict[Hashable, float]]:
    """
    Return predecessor lists and distances from source.

    Unlike the path helpers, the predecessor lists keep every predecessor
    on an equal-cost shortest path, so callers can enumerate all shortest
    paths.

    Returns:
        ``(pred, dist)``: ``pred[source] == []``; every other reached node
        maps to its predecessors in discovery order.
    """
    _require_nodes(graph, [source])
    pred: PredecessorMap = {}
    dist = _dijkstra_multisource(graph, [source], weight_function(graph, weight), pred, cutoff=cutoff)
    return pred, dist


def _bellman_ford(
    graph: Any,
    source: Hashable,
    weight: WeightFunction,
    pred: PredecessorMap,
) -> Dict[Hashable, float]:
    """
    Bounded relaxation passes from ``source``.

    Fills ``pred`` with single-element predecessor lists and returns the
    distances of reached nodes.

    Raises:
        NegativeCycleError: If a negative cycle is reachable from source.
    """
    nodes = graph.nodes()
    dist: Dict[Hashable, float] = {source: 0}
    pred[source] = []

    passes = 0
    for _ in range(len(nodes) - 1):
        passes += 1
        updated = False
        for u in nodes:
            if u not in dist:
                continue
            for v, record in graph.neighbor_items(u):
                candidate = dist[u] + weight(u, v, record)
                if v not in dist or candidate < dist[v]:
                    dist[v] = candidate
                    pred[v] = [u]
                    updated = True
        if not updated:
            break
    else:
        # Every pass improved something: one more improvement means a negative cycle.
        for u in nodes:
            if u not in dist:
                continue
            for v, record in graph.neighbor_items(u):
                if v not in dist or dist[u] + weight(u, v, record) < dist[v]:
                    logger.debug("negative cycle through edge (%r, %r)", u, v)
                    raise NegativeCycleError(
                        f"Negative weight cycle reachable from {source!r} (via edge ({u!r}, {v!r}))"
                    )

    logger.debug("bellman-ford from %r reached %d node(s) in %d pass(es)", source, len(dist), passes)
    return dist


def bellman_ford_predecessor_and_distance(
    graph: Graph, source: Hashable, weight: Weight = "weight"
) -> Tuple[PredecessorMap, Dict[Hashable, float]]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Allows negative edge weights.

    Args:
        graph: Graph (may have negative weights).
        source: Source node.
        weight: Edge attribute name or weight callable.

    Returns:
        ``(pred, dist)``: ``pred[source] == []`` and every other reached
        node maps to a one-element predecessor list.

    Raises:
        UnknownNodeError: If source is not in graph.
        NegativeCycleError: If a negative cycle is reachable from source.

    Complexity: O(VE).

    Example:
        >>> G = DiGraph()
        >>> G.add_weighted_edges_from([('A', 'B', 1), ('B', 'C', -2)])
        >>> bellman_ford_predecessor_and_distance(G, 'A')
        ({'A': [], 'B': ['A'], 'C': ['B']}, {'A': 0, 'B': 1, 'C': -1})
    """
    _require_nodes(graph, [source])
    pred: PredecessorMap = {}
    dist = _bellman_ford(graph, source, weight_function(graph, weight), pred)
    return pred, dist


def single_source_bellman_ford(
    graph: Graph,
    source: Hashable,
    target: Optional[Hashable] = None,
    weight: Weight = "weight",
) -> Tuple[Any, Any]:
    """
    Bellman-Ford distances and paths from source.

    Returns:
        ``(dist, paths)`` without target, ``(distance, path)`` with target.

    Raises:
        UnknownNodeError: If source or target is not in graph.
        NegativeCycleError: If a negative cycle is reachable from source.
        NoPathError: If target cannot be reached.
    """
    _require_nodes(graph, [source] if target is None else [source, target])

    pred: PredecessorMap = {}
    # Checked even for target == source: a negative cycle through source leaves no distance.
    dist = _bellman_ford(graph, source, weight_function(graph, weight), pred)

    if target == source:
        return 0, [source]
    if target is None:
        return dist, paths_from_predecessors(pred, dist)
    if target not in dist:
        raise NoPathError(f"Node {target!r} is not reachable from {source!r}")
    return dist[target], reconstruct_path(pred, target)


def single_source_bellman_ford_path(
    graph: Graph, source: Hashable, weight: Weight = "weight"
) -> Dict[Hashable, List[Hashable]]:
    """Return ``{node: path}`` for every node reachable from source."""
    _, paths = single_source_bellman_ford(graph, source, weight=weight)
    return paths


def single_source_bellman_ford_path_length(
    graph: Graph, source: Hashable, weight: Weight = "weight"
) -> Dict[Hashable, float]:
    """Return ``{node: distance}`` for every node reachable from source."""
    _, dist = bellman_ford_predecessor_and_distance(graph, source, weight=weight)
    return dist


def bellman_ford_path(
    graph: Graph, source: Hashable, target: Hashable, weight: Weight = "weight"
) -> List[Hashable]:
    """Return the shortest path from source to target, negative weights allowed."""
    _, path = single_source_bellman_ford(graph, source, target=target, weight=weight)
    return path


def bellman_ford_path_length(
    graph: Graph, source: Hashable, target: Hashable, weight: Weight = "weight"
) -> float:
    """Return the shortest distance from source to target, negative weights allowed."""
    length, _ = single_source_bellman_ford(graph, source, target=target, weight=weight)
    return length


def negative_edge_cycle(graph: Graph, weight: Weight = "weight") -> bool:
    """
    Return True if the graph contains any negative weight cycle.

    Runs Bellman-Ford from a virtual node joined to every node, so cycles
    are found regardless of where they sit in the graph. An undirected edge
    with a negative weight counts as a negative cycle.
    """
    if len(graph) == 0:
        return False
    view = VirtualSourceView(graph)
    try:
        _bellman_ford(view, view.source, view.weight(weight_function(graph, weight)), {})
    except NegativeCycleError:
        return True
    return False
