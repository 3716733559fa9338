"""Node centrality: degree counts and PageRank.

PageRank runs on the NetworkX export of the graph. Weighted graphs pass
link weights through; unweighted graphs rank every link equally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

from tinygraph.config.models import PageRankConfig
from tinygraph.graph.interop import to_networkx
from tinygraph.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from tinygraph.graph.container import Graph

_DEFAULTS = PageRankConfig()


def degree_centrality(graph: Graph, node_id: str) -> int:
    """``indegree + outdegree``; 0 for unknown ids."""
    return graph.indegree(node_id) + graph.outdegree(node_id)


@traced
def pagerank(
    graph: Graph,
    *,
    alpha: float = _DEFAULTS.alpha,
    max_iter: int = _DEFAULTS.max_iter,
    tol: float = _DEFAULTS.tol,
) -> dict[str, float]:
    """PageRank score for every node, keyed by id.

    Uses the graph's current directed view. Returns an empty dict for an
    empty graph. Raises ``networkx.PowerIterationFailedConvergence`` if
    the iteration does not converge within *max_iter*.
    """
    if len(graph) == 0:
        return {}
    with trace_span("to_networkx") as span:
        g = to_networkx(graph)
        if span:
            span.annotate("edges", g.number_of_edges())
    weight = "weight" if graph.weighted else None
    scores: dict[str, float] = nx.pagerank(g, alpha=alpha, max_iter=max_iter, tol=tol, weight=weight)
    return scores


def pagerank_centrality(
    graph: Graph,
    node_id: str,
    config: PageRankConfig | None = None,
) -> float:
    """PageRank score of a single node; 0.0 for unknown ids."""
    if node_id not in graph:
        return 0.0
    cfg = config or _DEFAULTS
    return pagerank(graph, alpha=cfg.alpha, max_iter=cfg.max_iter, tol=cfg.tol)[node_id]
