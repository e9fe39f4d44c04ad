"""
Read-only graph overlays.

:class:`VirtualSourceView` presents a graph plus one extra node with a
zero-weight edge to every original node. Johnson's algorithm runs
Bellman-Ford from that node to compute vertex potentials; the wrapped graph
is never modified, so nothing has to be cleaned up afterwards.
"""

from typing import Any, Hashable, List, Tuple

from .core import Graph
from .weights import WeightFunction


class _VirtualNode:
    """Sentinel node that cannot collide with user nodes."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<virtual source>"


class VirtualSourceView:
    """
    Overlay adding a virtual source node in front of ``graph``.

    Implements the adjacency interface the engines read: ``nodes``,
    ``has_node``, ``neighbor_items``, ``is_directed`` and ``is_multigraph``.

    Attributes:
        graph: The wrapped graph.
        source: The virtual node, listed after every original node.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self.source = _VirtualNode()

    def __contains__(self, node: object) -> bool:
        return node is self.source or node in self.graph

    def __len__(self) -> int:
        return len(self.graph) + 1

    def is_directed(self) -> bool:
        return True

    def is_multigraph(self) -> bool:
        return self.graph.is_multigraph()

    def has_node(self, node: Hashable) -> bool:
        return node in self

    def nodes(self) -> List[Hashable]:
        return self.graph.nodes() + [self.source]

    def neighbor_items(self, node: Hashable) -> List[Tuple[Hashable, Any]]:
        if node is self.source:
            return [(v, None) for v in self.graph]
        return self.graph.neighbor_items(node)

    def weight(self, weight: WeightFunction) -> WeightFunction:
        """Wrap ``weight`` so edges leaving the virtual node cost 0."""
        source = self.source

        def resolve(u: Hashable, v: Hashable, record: Any) -> float:
            if u is source:
                return 0
            return weight(u, v, record)

        return resolve
