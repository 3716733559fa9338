"""Connected components over the undirected view of a Graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tinygraph.services.telemetry import get_current_span, traced

if TYPE_CHECKING:
    from tinygraph.domain.records import Node
    from tinygraph.graph.container import Graph


@traced
def connected_components(graph: Graph) -> list[list[Node]]:
    """Partition the graph's nodes into connected components.

    Links are followed in both directions regardless of ``graph.directed``.
    Each component starts with its seed (the first unvisited node in storage
    order) followed by the remaining members in discovery order. Components
    are ordered by their seed's storage position.
    """
    nodes = graph.nodes
    if not nodes:
        return []

    matrix = graph.to_adjacency_matrix(directed=False)
    visited = [False] * len(nodes)
    components: list[list[Node]] = []

    for seed in range(len(nodes)):
        if visited[seed]:
            continue
        visited[seed] = True
        members = [seed]
        frontier = [seed]
        while frontier:
            discovered: list[int] = []
            for i in frontier:
                for j, connected in enumerate(matrix[i]):
                    if connected and not visited[j]:
                        visited[j] = True
                        discovered.append(j)
            members.extend(discovered)
            frontier = discovered
        components.append([nodes[i] for i in members])

    span = get_current_span()
    if span:
        span.annotate("components", len(components))
    return components
