"""Graph — ordered node storage, directed link storage, adjacency queries.

Links are always stored once, directed, keyed by ``(source, target)``.
Undirected semantics are a view: every adjacency query takes an optional
``directed`` argument and falls back to the graph's ``directed`` flag when
it is None. No query ever writes to the flag.

Adjacency is materialized as a fresh boolean matrix on every call, indexed
by node storage position. At the graph sizes this library targets that is
cheap enough that no cache or invalidation is kept.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tinygraph.config.models import PageRankConfig
from tinygraph.domain.records import Link, LinkKey, Node, make_link_key
from tinygraph.services.result import (
    DUPLICATE_LINK,
    DUPLICATE_NODE,
    ServiceError,
    ServiceResult,
)

if TYPE_CHECKING:
    from tinygraph.config.settings import TinyGraphSettings

logger = logging.getLogger(__name__)

type AdjacencyMatrix = list[list[bool]]


class Graph:
    """In-memory graph of :class:`Node` and :class:`Link` records.

    Attributes:
        directed: Default view for adjacency queries. True treats links as
            one-way; False mirrors every link.
        weighted: Whether path search uses link weights (True) or a uniform
            cost of 1.0 per link (False).
        pagerank_config: Parameters used by :meth:`pagerank_centrality`.
    """

    def __init__(
        self,
        *,
        directed: bool = True,
        weighted: bool = False,
        pagerank_config: PageRankConfig | None = None,
    ) -> None:
        self.directed = directed
        self.weighted = weighted
        self.pagerank_config = pagerank_config or PageRankConfig()
        self._nodes: list[Node] = []
        self._index: dict[str, int] = {}
        self._links: dict[LinkKey, Link] = {}

    @classmethod
    def from_settings(cls, settings: TinyGraphSettings) -> Graph:
        """Create an empty graph from the ``[graph]`` and ``[pagerank]`` sections."""
        return cls(
            directed=settings.graph.directed,
            weighted=settings.graph.weighted,
            pagerank_config=settings.pagerank,
        )

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={len(self._nodes)}, links={len(self._links)}, "
            f"directed={self.directed}, weighted={self.weighted})"
        )

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    @property
    def nodes(self) -> tuple[Node, ...]:
        """All nodes in storage (insertion) order."""
        return tuple(self._nodes)

    @property
    def links(self) -> tuple[Link, ...]:
        """All links in insertion order."""
        return tuple(self._links.values())

    def is_directed(self, directed: bool | None = None) -> bool:
        """Resolve an optional per-call override against the graph flag."""
        return self.directed if directed is None else directed

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert_node(self, node: Node) -> ServiceResult:
        """Append *node*; rejected if its id is already present."""
        if node.id in self._index:
            msg = f"Node '{node.id}' already exists, skipping"
            logger.warning(msg)
            return ServiceResult(
                ok=False,
                op="insert_node",
                error=ServiceError(code=DUPLICATE_NODE, message=msg, detail={"id": node.id}),
            )
        self._append(node)
        return ServiceResult(ok=True, op="insert_node", data={"id": node.id})

    def insert_link(self, link: Link) -> ServiceResult:
        """Store *link*, creating placeholder nodes for unknown endpoints.

        The duplicate check runs before anything is written, so a rejected
        link leaves the graph untouched. The reverse pair is a distinct link.
        """
        if link.key in self._links:
            msg = f"Link '{link.source}' -> '{link.target}' already exists, skipping"
            logger.warning(msg)
            return ServiceResult(
                ok=False,
                op="insert_link",
                error=ServiceError(
                    code=DUPLICATE_LINK,
                    message=msg,
                    detail={"source": link.source, "target": link.target},
                ),
            )

        created: list[str] = []
        for endpoint in (link.source, link.target):
            if endpoint not in self._index:
                self._append(Node(id=endpoint))
                created.append(endpoint)
        warnings: list[str] = []
        if created:
            logger.debug("Auto-created placeholder nodes %s", created)
            warnings.append(f"Created placeholder nodes: {', '.join(created)}")

        self._links[link.key] = link
        return ServiceResult(
            ok=True,
            op="insert_link",
            data={"source": link.source, "target": link.target, "created_nodes": created},
            warnings=warnings,
        )

    def add_node(self, node_id: str, name: str = "") -> ServiceResult:
        """Shorthand for ``insert_node(Node(id=node_id, name=name))``."""
        return self.insert_node(Node(id=node_id, name=name))

    def add_link(
        self, source: str, target: str, label: str = "", weight: float = 1.0
    ) -> ServiceResult:
        """Shorthand for ``insert_link(Link(...))``."""
        return self.insert_link(Link(source=source, target=target, label=label, weight=weight))

    def _append(self, node: Node) -> None:
        self._index[node.id] = len(self._nodes)
        self._nodes.append(node)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_node(self, node_id: str) -> Node | None:
        idx = self._index.get(node_id)
        if idx is None:
            return None
        return self._nodes[idx]

    def get_link(self, source: str, target: str) -> Link | None:
        return self._links.get(make_link_key(source, target))

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def to_adjacency_matrix(self, directed: bool | None = None) -> AdjacencyMatrix:
        """Return an N×N matrix where ``[i][j]`` is True iff a link i -> j exists.

        In the undirected view the matrix is symmetrized: a stored link in
        either direction sets both cells.
        """
        mirror = not self.is_directed(directed)
        size = len(self._nodes)
        matrix = [[False] * size for _ in range(size)]
        for source, target in self._links:
            i = self._index[source]
            j = self._index[target]
            matrix[i][j] = True
            if mirror:
                matrix[j][i] = True
        return matrix

    def direct_connected(self, node_id: str, directed: bool | None = None) -> list[Node]:
        """Neighbours of *node_id* in storage order; empty if unknown."""
        idx = self._index.get(node_id)
        if idx is None:
            return []
        row = self.to_adjacency_matrix(directed)[idx]
        return [self._nodes[j] for j, connected in enumerate(row) if connected]

    def link_between(self, source: str, target: str, directed: bool | None = None) -> Link | None:
        """The link traversed when stepping *source* -> *target*.

        In the undirected view a stored ``target -> source`` link also counts.
        """
        link = self.get_link(source, target)
        if link is None and not self.is_directed(directed):
            link = self.get_link(target, source)
        return link

    # ------------------------------------------------------------------
    # Degree queries (always on the directed view)
    # ------------------------------------------------------------------

    def indegree(self, node_id: str) -> int:
        idx = self._index.get(node_id)
        if idx is None:
            return 0
        matrix = self.to_adjacency_matrix(directed=True)
        return sum(1 for row in matrix if row[idx])

    def outdegree(self, node_id: str) -> int:
        idx = self._index.get(node_id)
        if idx is None:
            return 0
        matrix = self.to_adjacency_matrix(directed=True)
        return sum(matrix[idx])

    def degree_centrality(self, node_id: str) -> int:
        """In-degree plus out-degree, measured on the directed view."""
        from tinygraph.algo.centrality import degree_centrality

        return degree_centrality(self, node_id)

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def connected_components(self) -> list[list[Node]]:
        """Partition nodes into connected components of the undirected view."""
        from tinygraph.algo.components import connected_components

        return connected_components(self)

    def pagerank_centrality(self, node_id: str) -> float:
        """PageRank score of *node_id* under ``pagerank_config``; 0.0 if unknown."""
        from tinygraph.algo.centrality import pagerank_centrality

        return pagerank_centrality(self, node_id, self.pagerank_config)
