"""Node and Link value records.

Both are frozen pydantic models. A Node is identified by its ``id`` alone;
``name`` is a display attribute and takes no part in equality or hashing.
A Link is identified by its ordered ``(source, target)`` pair.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

type LinkKey = tuple[str, str]


def make_link_key(source: str, target: str) -> LinkKey:
    """Return the storage key for a directed ``source -> target`` link."""
    return (source, target)


class Node(BaseModel):
    """A graph vertex."""

    model_config = {"frozen": True}

    id: str
    name: str = ""

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class Link(BaseModel):
    """A directed edge record.

    Attributes:
        source: Id of the node the link leaves.
        target: Id of the node the link enters.
        label: Free-form edge label.
        weight: Traversal cost, only consulted when the graph is weighted.
    """

    model_config = {"frozen": True}

    source: str
    target: str
    label: str = ""
    weight: float = 1.0

    @property
    def key(self) -> LinkKey:
        return make_link_key(self.source, self.target)
