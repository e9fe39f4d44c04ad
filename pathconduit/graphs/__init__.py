"""
Graph package for pathconduit.

This package provides:
- Graph data structures (Graph, DiGraph, MultiGraph, MultiDiGraph)
- Edge weight resolution, including multigraph policies
- Single- and multi-source Dijkstra
- Bellman-Ford with negative cycle detection
- All-pairs shortest paths (Dijkstra fan-out, Bellman-Ford fan-out, Johnson)

Nodes are kept in insertion order, which fixes the order of every
all-pairs result and the tie-breaking of every search.
"""

from .allpairs import (
    all_pairs_bellman_ford_path,
    all_pairs_bellman_ford_path_length,
    all_pairs_dijkstra,
    all_pairs_dijkstra_path,
    all_pairs_dijkstra_path_length,
    distance_matrix,
    johnson,
    johnson_path_length,
)
from .core import DiGraph, EdgeData, Graph, MultiDiGraph, MultiGraph
from .shortest import (
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
from .utils import node_index_map, path_weight, paths_from_predecessors, reconstruct_path
from .views import VirtualSourceView
from .weights import edge_weight, weight_function, weight_of

__all__ = [
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

# Example usage:
# from pathconduit.graphs import DiGraph, dijkstra_path, johnson
#
# G = DiGraph()
# G.add_weighted_edges_from([('A', 'B', 1), ('B', 'C', -2), ('A', 'C', 4)])
# johnson(G)                 # [('A', {'A': ['A'], 'B': ['A', 'B'], 'C': ['A', 'B', 'C']}), ...]
# G.add_edge('C', 'D', weight=1)
# dijkstra_path(G, 'C', 'D')  # ['C', 'D']
