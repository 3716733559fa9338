"""Export a Graph to NetworkX.

Nodes are added first, in storage order, so isolated nodes survive the
conversion. Edge attributes mirror the Link fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from tinygraph.graph.container import Graph


def to_networkx(graph: Graph, directed: bool | None = None) -> nx.Graph[str]:
    """Build a ``DiGraph`` (directed view) or ``Graph`` (undirected view).

    In the undirected view a pair stored in both directions collapses into
    a single edge carrying the attributes of the link inserted last.
    """
    g: nx.Graph[str] = nx.DiGraph() if graph.is_directed(directed) else nx.Graph()
    for node in graph.nodes:
        g.add_node(node.id, name=node.name)
    for link in graph.links:
        g.add_edge(link.source, link.target, label=link.label, weight=link.weight)
    return g
