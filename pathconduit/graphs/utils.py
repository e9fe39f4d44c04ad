"""
Utility functions for graph algorithms.

Provides helpers for node indexing, path reconstruction from predecessor
maps, and path weights.
"""

from typing import Dict, Hashable, Iterable, List, Tuple, Union

from ..exceptions import InvalidArgumentError, UnknownEdgeError, UnknownNodeError
from .core import Graph
from .weights import WeightFunction, weight_function


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create a stable mapping from nodes to indices 0..n-1.

    Nodes keep the order in which they are first seen; duplicates are dropped.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'c', 'b'])
        >>> node_to_idx
        {'c': 0, 'a': 1, 'b': 2}
        >>> idx_to_node
        ['c', 'a', 'b']
    """
    ordered = list(dict.fromkeys(nodes))
    return {node: idx for idx, node in enumerate(ordered)}, ordered


def reconstruct_path(pred: Dict[Hashable, List[Hashable]], target: Hashable) -> List[Hashable]:
    """
    Reconstruct a shortest path ending at ``target`` from a predecessor map.

    ``pred`` maps each reached node to the list of its shortest-path
    predecessors, with an empty list for source nodes. When a node has
    several predecessors, the last recorded one is followed.

    Args:
        pred: Predecessor map from a shortest-path engine.
        target: Node to reconstruct the path to.

    Returns:
        List of nodes from a source to target (inclusive).

    Raises:
        UnknownNodeError: If target was not reached.

    Example:
        >>> pred = {'A': [], 'B': ['A'], 'C': ['A', 'B']}
        >>> reconstruct_path(pred, 'C')
        ['A', 'B', 'C']
    """
    if target not in pred:
        raise UnknownNodeError(f"Node {target!r} was not reached")

    path = [target]
    current = target
    while pred[current]:
        current = pred[current][-1]
        path.append(current)
    path.reverse()
    return path


def paths_from_predecessors(
    pred: Dict[Hashable, List[Hashable]], nodes: Iterable[Hashable]
) -> Dict[Hashable, List[Hashable]]:
    """
    Build a ``{node: path}`` map for every node in ``nodes``.

    Paths share prefixes, so each one is derived from the already-built path
    of its predecessor instead of walking back to the source again.
    """
    paths: Dict[Hashable, List[Hashable]] = {}

    def build(node: Hashable) -> List[Hashable]:
        chain = []
        current = node
        while current not in paths and pred[current]:
            chain.append(current)
            current = pred[current][-1]
        if current not in paths:
            paths[current] = [current]
        prefix = paths[current]
        for step in reversed(chain):
            prefix = prefix + [step]
            paths[step] = prefix
        return paths[node]

    return {node: build(node) for node in nodes}


def path_weight(
    graph: Graph,
    path: List[Hashable],
    weight: Union[str, WeightFunction] = "weight",
) -> float:
    """
    Return the total weight of consecutive edges along ``path``.

    Args:
        graph: Graph the path lives in.
        path: Sequence of nodes.
        weight: Attribute name or weight callable.

    Returns:
        Sum of resolved edge weights (0 for a single-node path).

    Raises:
        InvalidArgumentError: If path is empty.
        UnknownEdgeError: If two consecutive nodes are not adjacent.
    """
    if not path:
        raise InvalidArgumentError("path must contain at least one node")
    resolve = weight_function(graph, weight)
    total = 0
    for u, v in zip(path, path[1:]):
        if not graph.has_edge(u, v):
            raise UnknownEdgeError(f"Edge ({u!r}, {v!r}) is not in the graph")
        total += resolve(u, v, graph.get_edge_data(u, v))
    return total
