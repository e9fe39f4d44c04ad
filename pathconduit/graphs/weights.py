"""
Edge weight resolution.

Every shortest-path engine reads weights through the callable returned by
:func:`weight_function`, so the engines never need to know whether a graph
stores one :class:`~pathconduit.graphs.core.EdgeData` per neighbor or a
``{key: EdgeData}`` dict of parallel edges.

Missing weights default to 1; NaN and infinite weights are rejected.
Parallel edges of a multigraph are collapsed with the active multi-edge
policy, ``min`` unless configured otherwise (see :mod:`pathconduit.config`).
"""

import math
import numbers
from typing import Any, Callable, Hashable, Optional, Union

from ..config import get_multiedge_policy
from ..exceptions import InvalidArgumentError
from .core import EdgeData, Graph

WeightFunction = Callable[[Hashable, Hashable, Any], float]

DEFAULT_WEIGHT = 1

_COMBINERS = {"min": min, "max": max, "sum": sum}


def _check_number(value: Any, u: Hashable, v: Hashable) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(
            f"Edge ({u!r}, {v!r}) has non-numeric weight {value!r}"
        )
    if math.isnan(value):
        raise InvalidArgumentError(f"Edge ({u!r}, {v!r}) has NaN weight")
    if math.isinf(value):
        raise InvalidArgumentError(f"Edge ({u!r}, {v!r}) has infinite weight {value!r}")
    return value


def edge_weight(record: EdgeData, attr: str = "weight") -> float:
    """
    Return the weight stored on a single edge record.

    Args:
        record: EdgeData of one edge.
        attr: Attribute holding the weight.

    Returns:
        The attribute value, or 1 if the edge does not carry it.
    """
    return record.get(attr, DEFAULT_WEIGHT)


def weight_of(
    graph: Graph,
    u: Hashable,
    v: Hashable,
    record: Any,
    attr: str = "weight",
    policy: Optional[str] = None,
) -> float:
    """
    Resolve the weight of the connection u -> v.

    Args:
        graph: Graph the record belongs to.
        u: Tail node.
        v: Head node.
        record: ``graph.adj[u][v]`` (an EdgeData, or a keyed dict for multigraphs).
        attr: Attribute holding the weight.
        policy: ``"min"``, ``"max"`` or ``"sum"`` for multigraphs. Defaults
            to the configured policy.

    Returns:
        Numeric weight.

    Raises:
        InvalidArgumentError: On a non-numeric, NaN or infinite weight, or an unknown policy.

    Example:
        >>> from pathconduit.graphs import MultiGraph
        >>> G = MultiGraph()
        >>> for w in (5, 2, 8):
        ...     _ = G.add_edge('u', 'v', weight=w)
        >>> weight_of(G, 'u', 'v', G.adj['u']['v'])
        2
    """
    if not graph.is_multigraph():
        return _check_number(edge_weight(record, attr), u, v)

    if policy is None:
        policy = get_multiedge_policy()
    combine = _COMBINERS.get(policy)
    if combine is None:
        raise InvalidArgumentError(f"Unknown multi-edge policy {policy!r}")
    weights = [_check_number(edge_weight(r, attr), u, v) for r in record.values()]
    return combine(weights)


def weight_function(
    graph: Graph,
    weight: Union[str, WeightFunction] = "weight",
    policy: Optional[str] = None,
) -> WeightFunction:
    """
    Build the ``(u, v, record) -> number`` callable used by the engines.

    Args:
        graph: Graph the callable will be used on.
        weight: Attribute name, or a callable that is returned unchanged.
        policy: Multi-edge policy; resolved once, when the callable is built.

    Returns:
        Weight callable.
    """
    if callable(weight):
        return weight
    if graph.is_multigraph():
        policy = policy if policy is not None else get_multiedge_policy()
        if policy not in _COMBINERS:
            raise InvalidArgumentError(f"Unknown multi-edge policy {policy!r}")

    def resolve(u: Hashable, v: Hashable, record: Any) -> float:
        return weight_of(graph, u, v, record, attr=weight, policy=policy)

    return resolve
