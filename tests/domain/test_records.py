"""Tests for Node and Link records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tinygraph.domain.records import Link, Node, make_link_key


class TestNode:
    def test_defaults(self) -> None:
        node = Node(id="a")
        assert node.name == ""

    def test_equal_by_id(self) -> None:
        assert Node(id="1", name="1") == Node(id="1", name="1")

    def test_name_not_part_of_identity(self) -> None:
        a = Node(id="1", name="first")
        b = Node(id="1", name="second")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_ids_unequal(self) -> None:
        assert Node(id="1") != Node(id="2")

    def test_not_equal_to_other_types(self) -> None:
        assert Node(id="1") != "1"

    def test_frozen(self) -> None:
        node = Node(id="1")
        with pytest.raises(ValidationError):
            node.id = "2"  # type: ignore[misc]

    def test_rejects_non_string_id(self) -> None:
        with pytest.raises(ValidationError):
            Node(id=None)  # type: ignore[arg-type]


class TestLink:
    def test_defaults(self) -> None:
        link = Link(source="a", target="b")
        assert link.label == ""
        assert link.weight == 1.0

    def test_key_is_ordered_pair(self) -> None:
        assert Link(source="a", target="b").key == ("a", "b")
        assert Link(source="b", target="a").key == ("b", "a")

    def test_key_unambiguous_with_delimiters_in_ids(self) -> None:
        assert make_link_key("a_b", "c") != make_link_key("a", "b_c")

    def test_int_weight_coerced(self) -> None:
        assert Link(source="a", target="b", weight=3).weight == 3.0

    def test_rejects_non_numeric_weight(self) -> None:
        with pytest.raises(ValidationError):
            Link(source="a", target="b", weight="heavy")  # type: ignore[arg-type]
