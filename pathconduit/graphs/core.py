"""
Core graph data structures.

Provides Graph, DiGraph, MultiGraph and MultiDiGraph classes backed by
dict-of-dict adjacency. Nodes and neighbors are kept in insertion order so
that every algorithm built on top of them is deterministic.

Undirected graphs store one edge record per edge and reference it from both
endpoints: ``G.adj[u][v] is G.adj[v][u]``. Directed graphs keep separate
successor and predecessor maps that share the record the same way:
``G.succ[u][v] is G.pred[v][u]``. Multigraphs replace the record with a
``{key: EdgeData}`` dict, which is shared between both views in the same
manner.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from ..exceptions import InvalidArgumentError, UnknownEdgeError, UnknownNodeError


@dataclass
class EdgeData:
    """
    Attribute record attached to a single edge.

    Attributes:
        weight: Optional numeric weight. Algorithms treat a missing weight as 1.
        attrs: Any auxiliary attributes (labels, capacities, ...).
    """

    weight: Optional[float] = None
    attrs: Dict[str, Any] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        """Return attribute ``name`` (``"weight"`` reads the weight field)."""
        if name == "weight":
            return default if self.weight is None else self.weight
        return self.attrs.get(name, default)

    def update(self, weight: Optional[float] = None, **attrs: Any) -> None:
        """Merge new values into the record in place."""
        if weight is not None:
            self.weight = weight
        if "weight" in attrs:
            self.weight = attrs.pop("weight")
        self.attrs.update(attrs)

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dict view, with ``weight`` included when set."""
        data = dict(self.attrs)
        if self.weight is not None:
            data["weight"] = self.weight
        return data


def _split_edge_item(item: Tuple) -> Tuple[Hashable, Hashable, Dict[str, Any]]:
    if len(item) == 2:
        u, v = item
        return u, v, {}
    if len(item) == 3:
        u, v, data = item
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Edge attributes must be a dict, got {data!r}")
        return u, v, dict(data)
    raise InvalidArgumentError(f"Edge tuple {item!r} must be a 2-tuple or 3-tuple")


class Graph:
    """
    Undirected graph with at most one edge per node pair.

    Attributes:
        graph: Graph-level attributes.
        node_attrs: Mapping node -> attribute dict.
        adj: Mapping node -> {neighbor: EdgeData}.

    Complexity:
        - add_node / add_edge / remove_edge: O(1) amortized
        - neighbors: O(deg(v))
        - edges: O(V + E)

    Note:
        Graphs are not thread-safe. Do not mutate a graph while a
        shortest-path computation is running over it.
    """

    def __init__(self, **graph_attrs: Any):
        """
        Initialize an empty graph.

        Args:
            **graph_attrs: Graph-level attributes, stored in ``self.graph``.
        """
        self.graph: Dict[str, Any] = dict(graph_attrs)
        self.node_attrs: Dict[Hashable, Dict[str, Any]] = {}
        self.adj: Dict[Hashable, Dict[Hashable, Any]] = {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.number_of_nodes()}, "
            f"edges={self.number_of_edges()})"
        )

    def __len__(self) -> int:
        return len(self.node_attrs)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.node_attrs)

    def __contains__(self, node: object) -> bool:
        try:
            return node in self.node_attrs
        except TypeError:
            return False

    def is_directed(self) -> bool:
        return False

    def is_multigraph(self) -> bool:
        return False

    # -- nodes -------------------------------------------------------------

    def _init_node(self, node: Hashable) -> None:
        self.adj[node] = {}

    def add_node(self, node: Hashable, **attrs: Any) -> None:
        """
        Add a node, merging attributes if it already exists.

        Args:
            node: Hashable node identifier.
            **attrs: Node attributes.
        """
        if node is None:
            raise InvalidArgumentError("None cannot be a node")
        if node not in self.node_attrs:
            self.node_attrs[node] = {}
            self._init_node(node)
        self.node_attrs[node].update(attrs)

    def add_nodes_from(self, nodes: Iterable[Any], **attrs: Any) -> None:
        """
        Add several nodes.

        Args:
            nodes: Iterable of nodes or ``(node, attr_dict)`` pairs.
            **attrs: Attributes applied to every node.
        """
        for item in nodes:
            if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], dict):
                node, node_data = item
                self.add_node(node, **{**attrs, **node_data})
            else:
                self.add_node(item, **attrs)

    def has_node(self, node: Hashable) -> bool:
        return node in self

    def nodes(self) -> List[Hashable]:
        """Return all nodes in insertion order."""
        return list(self.node_attrs)

    def node_data(self, node: Hashable) -> Dict[str, Any]:
        """
        Return the attribute dict of a node.

        Raises:
            UnknownNodeError: If node is not in graph.
        """
        self._require_node(node)
        return self.node_attrs[node]

    def number_of_nodes(self) -> int:
        return len(self.node_attrs)

    def _require_node(self, node: Hashable) -> None:
        if node not in self:
            raise UnknownNodeError(f"Node {node!r} is not in the graph")

    # -- edges -------------------------------------------------------------

    @property
    def _forward(self) -> Dict[Hashable, Dict[Hashable, Any]]:
        """Adjacency followed by traversals (successors for directed graphs)."""
        return self.adj

    def _link(self, u: Hashable, v: Hashable, record: Any) -> None:
        self.adj[u][v] = record
        self.adj[v][u] = record

    def _unlink(self, u: Hashable, v: Hashable) -> None:
        del self.adj[u][v]
        if u != v:
            del self.adj[v][u]

    def add_edge(self, u: Hashable, v: Hashable, weight: Optional[float] = None, **attrs: Any) -> None:
        """
        Add an edge between u and v, creating missing endpoints.

        Adding an existing edge updates its record in place, so every view
        of the edge sees the new values.

        Args:
            u: First endpoint.
            v: Second endpoint.
            weight: Optional numeric weight.
            **attrs: Auxiliary edge attributes.
        """
        self.add_node(u)
        self.add_node(v)
        record = self._forward[u].get(v)
        if record is None:
            record = EdgeData()
            self._link(u, v, record)
        record.update(weight, **attrs)

    def add_edges_from(self, ebunch: Iterable[Tuple], **attrs: Any) -> None:
        """
        Add edges from ``(u, v)`` or ``(u, v, attr_dict)`` tuples.

        Args:
            ebunch: Iterable of edge tuples.
            **attrs: Attributes applied to every edge.
        """
        for item in ebunch:
            u, v, data = _split_edge_item(tuple(item))
            self.add_edge(u, v, **{**attrs, **data})

    def add_weighted_edges_from(self, ebunch: Iterable[Tuple[Hashable, Hashable, float]], **attrs: Any) -> None:
        """
        Add edges from ``(u, v, weight)`` triples.

        Example:
            >>> G = Graph()
            >>> G.add_weighted_edges_from([('A', 'B', 2), ('B', 'C', 3)])
            >>> G.adj['A']['B'].weight
            2
        """
        for u, v, weight in ebunch:
            self.add_edge(u, v, weight=weight, **attrs)

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        """
        Remove the edge between u and v.

        Raises:
            UnknownNodeError: If either endpoint is not in graph.
            UnknownEdgeError: If the edge does not exist.
        """
        self._require_node(u)
        self._require_node(v)
        if v not in self._forward[u]:
            raise UnknownEdgeError(f"Edge ({u!r}, {v!r}) is not in the graph")
        self._unlink(u, v)

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        return u in self and v in self._forward[u]

    def get_edge_data(self, u: Hashable, v: Hashable, default: Any = None) -> Any:
        """Return the EdgeData of edge (u, v), or ``default`` if absent."""
        if u not in self:
            return default
        return self._forward[u].get(v, default)

    def neighbors(self, node: Hashable) -> List[Hashable]:
        """
        Return neighbors of a node (successors for directed graphs).

        Raises:
            UnknownNodeError: If node is not in graph.
        """
        self._require_node(node)
        return list(self._forward[node])

    def neighbor_items(self, node: Hashable) -> List[Tuple[Hashable, Any]]:
        """
        Return ``(neighbor, edge_record)`` pairs for a node.

        The record is an :class:`EdgeData` for simple graphs and a
        ``{key: EdgeData}`` dict for multigraphs. This is the adjacency
        interface the shortest-path engines consume.

        Raises:
            UnknownNodeError: If node is not in graph.
        """
        self._require_node(node)
        return list(self._forward[node].items())

    def edges(self, data: bool = False) -> List[Tuple]:
        """
        Return list of all edges.

        Each undirected edge is reported once, from the endpoint that was
        added first.

        Args:
            data: If True, return ``(u, v, EdgeData)`` triples.

        Returns:
            List of ``(u, v)`` or ``(u, v, EdgeData)`` tuples.
        """
        edges_list: List[Tuple] = []
        done = set()
        for u, nbrs in self._forward.items():
            for v, record in nbrs.items():
                if v in done:
                    continue
                edges_list.append((u, v, record) if data else (u, v))
            if not self.is_directed():
                done.add(u)
        return edges_list

    def _stored_edge_count(self) -> int:
        # A self-loop is stored once but counts as both halves of an edge.
        return sum(
            (2 if u == v else 1) if not self.is_directed() else 1
            for u, nbrs in self._forward.items()
            for v in nbrs
        )

    def number_of_edges(self) -> int:
        """Return the number of edges (undirected edges counted once)."""
        count = self._stored_edge_count()
        return count if self.is_directed() else count // 2

    def size(self, weighted: bool = False) -> float:
        """
        Return the number of edges, or the total edge weight.

        Args:
            weighted: If True, sum the ``weight`` of every edge that has one.
        """
        if not weighted:
            return self.number_of_edges()
        return sum(record.weight for _, _, record in self.edges(data=True) if record.weight is not None)


class _DirectedAdjacency:
    """
    Successor/predecessor storage shared by DiGraph and MultiDiGraph.

    ``succ`` is the same object as ``adj``; ``pred[v][u]`` holds the same
    record (or keyed dict) as ``succ[u][v]``.
    """

    def __init__(self, **graph_attrs: Any):
        super().__init__(**graph_attrs)
        self.succ = self.adj
        self.pred: Dict[Hashable, Dict[Hashable, Any]] = {}

    def is_directed(self) -> bool:
        return True

    def _init_node(self, node: Hashable) -> None:
        self.succ[node] = {}
        self.pred[node] = {}

    def _link(self, u: Hashable, v: Hashable, record: Any) -> None:
        self.succ[u][v] = record
        self.pred[v][u] = record

    def _unlink(self, u: Hashable, v: Hashable) -> None:
        del self.succ[u][v]
        del self.pred[v][u]

    def successors(self, node: Hashable) -> List[Hashable]:
        return self.neighbors(node)

    def predecessors(self, node: Hashable) -> List[Hashable]:
        """
        Return nodes with an edge into ``node``.

        Raises:
            UnknownNodeError: If node is not in graph.
        """
        self._require_node(node)
        return list(self.pred[node])


class DiGraph(_DirectedAdjacency, Graph):
    """
    Directed graph with at most one edge per ordered node pair.

    Attributes:
        succ: Mapping node -> {successor: EdgeData} (same object as ``adj``).
        pred: Mapping node -> {predecessor: EdgeData}.
    """


class MultiGraph(Graph):
    """
    Undirected graph allowing parallel edges distinguished by integer keys.

    ``adj[u][v]`` is a ``{key: EdgeData}`` dict shared with ``adj[v][u]``.
    """

    def is_multigraph(self) -> bool:
        return True

    def new_edge_key(self, u: Hashable, v: Hashable) -> int:
        """
        Return an unused edge key for the pair (u, v).

        Starts at the number of edges currently stored for the pair and
        counts up until a free key is found. Keys freed by removal are not
        handed out again unless requested explicitly.
        """
        keydict = self._forward.get(u, {}).get(v)
        if keydict is None:
            return 0
        key = len(keydict)
        while key in keydict:
            key += 1
        return key

    def add_edge(
        self,
        u: Hashable,
        v: Hashable,
        key: Optional[int] = None,
        weight: Optional[float] = None,
        **attrs: Any,
    ) -> int:
        """
        Add a parallel edge between u and v.

        Args:
            u: First endpoint.
            v: Second endpoint.
            key: Explicit edge key. An existing key updates that edge.
            weight: Optional numeric weight.
            **attrs: Auxiliary edge attributes.

        Returns:
            The key of the added (or updated) edge.
        """
        self.add_node(u)
        self.add_node(v)
        if key is None:
            key = self.new_edge_key(u, v)
        elif not isinstance(key, int) or isinstance(key, bool) or key < 0:
            raise InvalidArgumentError(f"Edge key must be a non-negative integer, got {key!r}")
        keydict = self._forward[u].get(v)
        if keydict is None:
            keydict = {}
            self._link(u, v, keydict)
        record = keydict.get(key)
        if record is None:
            record = EdgeData()
            keydict[key] = record
        record.update(weight, **attrs)
        return key

    def remove_edge(self, u: Hashable, v: Hashable, key: Optional[int] = None) -> None:
        """
        Remove parallel edges between u and v.

        Args:
            u: First endpoint.
            v: Second endpoint.
            key: Key of the edge to remove. If None, every edge of the pair
                is removed.

        Raises:
            UnknownNodeError: If either endpoint is not in graph.
            UnknownEdgeError: If the pair or the key does not exist.
        """
        self._require_node(u)
        self._require_node(v)
        keydict = self._forward[u].get(v)
        if keydict is None:
            raise UnknownEdgeError(f"Edge ({u!r}, {v!r}) is not in the graph")
        if key is None:
            self._unlink(u, v)
            return
        if key not in keydict:
            raise UnknownEdgeError(f"Edge ({u!r}, {v!r}, key={key!r}) is not in the graph")
        del keydict[key]
        if not keydict:
            self._unlink(u, v)

    def has_edge(self, u: Hashable, v: Hashable, key: Optional[int] = None) -> bool:
        if not super().has_edge(u, v):
            return False
        return key is None or key in self._forward[u][v]

    def get_edge_data(self, u: Hashable, v: Hashable, key: Optional[int] = None, default: Any = None) -> Any:
        """Return the keyed dict of edge (u, v), or one EdgeData when ``key`` is given."""
        keydict = super().get_edge_data(u, v)
        if keydict is None:
            return default
        if key is None:
            return keydict
        return keydict.get(key, default)

    def edges(self, keys: bool = False, data: bool = False) -> List[Tuple]:
        """
        Return list of all parallel edges.

        Args:
            keys: If True, include the edge key in each tuple.
            data: If True, include the EdgeData in each tuple.

        Returns:
            Tuples ``(u, v[, key][, EdgeData])``.
        """
        edges_list: List[Tuple] = []
        for u, v, keydict in super().edges(data=True):
            for key, record in keydict.items():
                edges_list.append((u, v) + ((key,) if keys else ()) + ((record,) if data else ()))
        return edges_list

    def _stored_edge_count(self) -> int:
        return sum(
            len(keydict) * ((2 if u == v else 1) if not self.is_directed() else 1)
            for u, nbrs in self._forward.items()
            for v, keydict in nbrs.items()
        )


class MultiDiGraph(_DirectedAdjacency, MultiGraph):
    """
    Directed graph allowing parallel edges distinguished by integer keys.

    ``succ[u][v]`` and ``pred[v][u]`` are the same ``{key: EdgeData}`` dict.
    """
