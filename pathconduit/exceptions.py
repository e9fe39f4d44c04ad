"""Exception types raised across :mod:`pathconduit`."""

from __future__ import annotations


class PathConduitError(Exception):
    """Base class for all package-specific errors."""


class UnknownNodeError(PathConduitError, LookupError):
    """Raised when a node argument is not present in the graph."""


class UnknownEdgeError(PathConduitError, LookupError):
    """Raised when an edge (or edge key) is not present in the graph."""


class NegativeWeightError(PathConduitError, ValueError):
    """Raised when Dijkstra's algorithm meets a negative edge weight."""


class NegativeCycleError(PathConduitError, ValueError):
    """Raised when a negative-weight cycle makes distances unbounded."""


class InvalidArgumentError(PathConduitError, ValueError):
    """Raised for malformed caller input such as an empty source set."""


class NoPathError(PathConduitError):
    """Raised when a target node exists but cannot be reached."""


__all__ = [
    "PathConduitError",
    "UnknownNodeError",
    "UnknownEdgeError",
    "NegativeWeightError",
    "NegativeCycleError",
    "InvalidArgumentError",
    "NoPathError",
]
