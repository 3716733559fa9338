"""tinygraph — in-memory graph container with path and component algorithms."""

from __future__ import annotations

from tinygraph.algo.centrality import degree_centrality, pagerank, pagerank_centrality
from tinygraph.algo.components import connected_components
from tinygraph.algo.paths import shortest_path
from tinygraph.domain.records import Link, Node
from tinygraph.graph.container import Graph
from tinygraph.graph.interop import to_networkx
from tinygraph.services.result import DUPLICATE_LINK, DUPLICATE_NODE, ServiceError, ServiceResult

__version__ = "0.1.0"

__all__ = [
    "DUPLICATE_LINK",
    "DUPLICATE_NODE",
    "Graph",
    "Link",
    "Node",
    "ServiceError",
    "ServiceResult",
    "__version__",
    "connected_components",
    "degree_centrality",
    "pagerank",
    "pagerank_centrality",
    "shortest_path",
    "to_networkx",
]
