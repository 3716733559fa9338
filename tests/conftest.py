"""Shared pytest fixtures and graph builders for tinygraph tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from tinygraph.graph.container import Graph
from tinygraph.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def graph() -> Graph:
    """Empty graph with default flags (directed, unweighted)."""
    return Graph()


@pytest.fixture
def abcd_graph() -> Graph:
    """Nodes a..d with links a->b, b->c, c->d, a->c."""
    g = Graph()
    for nid in "abcd":
        g.add_node(nid, nid)
    for source, target in [("a", "b"), ("b", "c"), ("c", "d"), ("a", "c")]:
        g.add_link(source, target)
    return g


@pytest.fixture
def split_graph() -> Graph:
    """Nodes a..d with links a->b and c->d only."""
    g = Graph()
    for nid in "abcd":
        g.add_node(nid, nid)
    g.add_link("a", "b")
    g.add_link("c", "d")
    return g


@pytest.fixture
def _reset_telemetry() -> Generator[None]:
    """Ensure clean telemetry state around a test."""
    yield
    disable_telemetry()
    _current_span.set(None)
