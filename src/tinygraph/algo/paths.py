"""Single-source, single-target shortest path (Dijkstra).

The open set is scanned linearly for the minimum-distance node rather than
kept in a heap; ties resolve to the node stored first, so results are
reproducible. Unweighted graphs charge 1.0 per link regardless of the
stored weight.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from tinygraph.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from tinygraph.domain.records import Node
    from tinygraph.graph.container import Graph

logger = logging.getLogger(__name__)


def _min_distance_node(open_set: dict[str, None], dist: dict[str, float]) -> str:
    """Open node with the smallest distance; earliest in storage order on ties."""
    best: str | None = None
    best_dist = math.inf
    for node_id in open_set:
        if best is None or dist[node_id] < best_dist:
            best = node_id
            best_dist = dist[node_id]
    assert best is not None
    return best


def _edge_cost(graph: Graph, source: str, target: str) -> float:
    if not graph.weighted:
        return 1.0
    link = graph.link_between(source, target)
    # direct_connected only yields targets reachable by a stored link
    assert link is not None
    return link.weight


@traced
def shortest_path(graph: Graph, start: str, end: str) -> list[Node]:
    """Return the nodes on a shortest path from *start* to *end*, inclusive.

    Returns an empty list when either id is unknown or *end* is unreachable.
    ``shortest_path(g, a, a)`` is ``[a]``.
    """
    if start not in graph or end not in graph:
        return []

    if graph.weighted and any(link.weight < 0 for link in graph.links):
        logger.warning("Negative link weight present; Dijkstra result may not be shortest")

    # Insertion-ordered dict doubles as an ordered set.
    open_set: dict[str, None] = {}
    dist: dict[str, float] = {}
    for node in graph.nodes:
        open_set[node.id] = None
        dist[node.id] = math.inf
    dist[start] = 0.0
    prev: dict[str, str] = {}

    with trace_span("relax") as span:
        visited = 0
        while open_set:
            current = _min_distance_node(open_set, dist)
            if current == end or math.isinf(dist[current]):
                break
            if graph.get_node(current) is None:
                logger.warning("Selected node %r missing from graph index", current)
                break
            del open_set[current]
            visited += 1

            for neighbor in graph.direct_connected(current):
                if neighbor.id not in open_set:
                    continue
                alt = dist[current] + _edge_cost(graph, current, neighbor.id)
                if alt < dist[neighbor.id]:
                    dist[neighbor.id] = alt
                    prev[neighbor.id] = current
        if span:
            span.annotate("visited", visited)

    if end != start and end not in prev:
        return []

    path: list[Node] = []
    cursor = end
    while True:
        node = graph.get_node(cursor)
        assert node is not None
        path.append(node)
        if cursor == start:
            break
        cursor = prev[cursor]
    path.reverse()
    return path
