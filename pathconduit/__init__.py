"""pathconduit - weighted shortest paths over insertion-ordered graphs."""

__version__ = "0.1.0"

# Configuration
from .config import get_multiedge_policy, multiedge_policy, set_multiedge_policy

# Errors
from .exceptions import (
    InvalidArgumentError,
    NegativeCycleError,
    NegativeWeightError,
    NoPathError,
    PathConduitError,
    UnknownEdgeError,
    UnknownNodeError,
)

# Graphs and shortest paths
from .graphs import (
    all_pairs_bellman_ford_path,
    all_pairs_bellman_ford_path_length,
    all_pairs_dijkstra,
    all_pairs_dijkstra_path,
    all_pairs_dijkstra_path_length,
    distance_matrix,
    johnson,
    johnson_path_length,
)
from .graphs import DiGraph, EdgeData, Graph, MultiDiGraph, MultiGraph
from .graphs import (
    bellman_ford_path,
    bellman_ford_path_length,
    bellman_ford_predecessor_and_distance,
    dijkstra_path,
    dijkstra_path_length,
    dijkstra_predecessor_and_distance,
    multi_source_dijkstra,
    multi_source_dijkstra_path,
    multi_source_dijkstra_path_length,
    negative_edge_cycle,
    single_source_bellman_ford,
    single_source_bellman_ford_path,
    single_source_bellman_ford_path_length,
    single_source_dijkstra,
    single_source_dijkstra_path,
    single_source_dijkstra_path_length,
)
from .graphs import node_index_map, path_weight, paths_from_predecessors, reconstruct_path
from .graphs import VirtualSourceView
from .graphs import edge_weight, weight_function, weight_of

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    # Version
    "__version__",
    # Configuration
    "get_multiedge_policy",
    "set_multiedge_policy",
    "multiedge_policy",
    # Errors
    "PathConduitError",
    "UnknownNodeError",
    "UnknownEdgeError",
    "NegativeWeightError",
    "NegativeCycleError",
    "InvalidArgumentError",
    "NoPathError",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Graphs and shortest paths
    "EdgeData",
    "Graph",
    "DiGraph",
    "MultiGraph",
    "MultiDiGraph",
    "edge_weight",
    "weight_of",
    "weight_function",
    "dijkstra_path",
    "dijkstra_path_length",
    "single_source_dijkstra",
    "single_source_dijkstra_path",
    "single_source_dijkstra_path_length",
    "multi_source_dijkstra",
    "multi_source_dijkstra_path",
    "multi_source_dijkstra_path_length",
    "dijkstra_predecessor_and_distance",
    "bellman_ford_predecessor_and_distance",
    "single_source_bellman_ford",
    "single_source_bellman_ford_path",
    "single_source_bellman_ford_path_length",
    "bellman_ford_path",
    "bellman_ford_path_length",
    "negative_edge_cycle",
    "all_pairs_dijkstra",
    "all_pairs_dijkstra_path",
    "all_pairs_dijkstra_path_length",
    "all_pairs_bellman_ford_path",
    "all_pairs_bellman_ford_path_length",
    "johnson",
    "johnson_path_length",
    "distance_matrix",
    "VirtualSourceView",
    "node_index_map",
    "paths_from_predecessors",
    "reconstruct_path",
    "path_weight",
]
