"""Shared test helpers (used across test modules)."""

from __future__ import annotations

from collections.abc import Iterable

from tinygraph.domain.records import Node


def ids(nodes: Iterable[Node]) -> list[str]:
    """Node ids of *nodes*, order preserved."""
    return [n.id for n in nodes]
