"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Generator

import pytest
import structlog

from tinygraph.algo.components import connected_components
from tinygraph.algo.paths import shortest_path
from tinygraph.config.logging import configure_logging
from tinygraph.graph.container import Graph
from tinygraph.services.result import ServiceError, ServiceResult
from tinygraph.services.telemetry import (
    Span,
    _current_span,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)

pytestmark = pytest.mark.usefixtures("_reset_telemetry")


@pytest.fixture
def json_logs() -> Generator[None]:
    """Route debug logs as JSON lines to stderr for the test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    lib = logging.getLogger("tinygraph")
    lib_level = lib.level
    configure_logging(verbose=True, log_json=True)
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    lib.setLevel(lib_level)
    structlog.reset_defaults()


# ── Span unit tests ──────────────────────────────────────────────────


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_with_children_and_annotations(self) -> None:
        root = Span(name="root")
        child = Span(name="child", parent=root)
        root.children.append(child)
        root.annotate("nodes", 4)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["annotations"] == {"nodes": 4}
        assert [c["name"] for c in d["children"]] == ["child"]


# ── trace_span tests ─────────────────────────────────────────────────


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("test") as span:
            assert span is None

    def test_no_root_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("test") as span:
            assert span is None

    def test_nested_spans(self) -> None:
        enable_telemetry()
        root = Span(name="root")
        token = _current_span.set(root)
        try:
            with trace_span("a"):
                with trace_span("b"):
                    pass
            assert root.children[0].name == "a"
            assert root.children[0].children[0].name == "b"
            assert root.children[0].finished is not None
        finally:
            _current_span.reset(token)


# ── @traced decorator tests ──────────────────────────────────────────


class TestTracedDecorator:
    def test_noop_when_disabled(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            return ServiceResult(ok=True, op="test")

        assert my_func().meta is None

    def test_injects_meta_when_enabled(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            with trace_span("stage"):
                pass
            return ServiceResult(ok=True, op="test", meta={"existing": "data"})

        enable_telemetry()
        result = my_func()
        assert result.meta is not None
        assert result.meta["existing"] == "data"
        telemetry = result.meta["telemetry"]
        assert telemetry["name"].endswith("my_func")
        assert telemetry["children"][0]["name"] == "stage"

    def test_error_result_gets_telemetry(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            return ServiceResult(ok=False, op="test", error=ServiceError(code="X", message="y"))

        enable_telemetry()
        assert "telemetry" in (my_func().meta or {})

    def test_non_service_result_passthrough(self) -> None:
        @traced
        def my_func() -> str:
            return "hello"

        enable_telemetry()
        assert my_func() == "hello"
        assert _current_span.get() is None

    def test_exception_propagates_and_resets(self) -> None:
        @traced
        def my_func() -> None:
            msg = "boom"
            raise ValueError(msg)

        enable_telemetry()
        with pytest.raises(ValueError, match="boom"):
            my_func()
        assert _current_span.get() is None

    def test_nested_traced_becomes_child(self) -> None:
        @traced
        def inner() -> ServiceResult:
            return ServiceResult(ok=True, op="inner")

        @traced
        def outer() -> ServiceResult:
            inner()
            return ServiceResult(ok=True, op="outer")

        enable_telemetry()
        children = outer().meta["telemetry"]["children"]  # type: ignore[index]
        assert children[0]["name"].endswith("inner")


class TestGetCurrentSpan:
    def test_returns_none_when_disabled(self) -> None:
        assert get_current_span() is None

    def test_returns_span_when_enabled(self) -> None:
        enable_telemetry()
        root = Span(name="root")
        token = _current_span.set(root)
        try:
            assert get_current_span() is root
        finally:
            _current_span.reset(token)


# ── traced algorithms ────────────────────────────────────────────────


@pytest.mark.usefixtures("json_logs")
class TestTracedAlgorithms:
    def _span_records(self, err: str) -> list[dict]:
        records = [json.loads(line) for line in err.splitlines() if line.strip()]
        return [r for r in records if r["event"] == "span.complete"]

    def test_shortest_path_logs_span(
        self, abcd_graph: Graph, capfd: pytest.CaptureFixture[str]
    ) -> None:
        enable_telemetry()
        assert [n.id for n in shortest_path(abcd_graph, "a", "d")] == ["a", "c", "d"]
        spans = self._span_records(capfd.readouterr().err)
        assert len(spans) == 1
        assert spans[0]["span_name"] == "shortest_path"
        assert spans[0]["ok"] is True
        assert spans[0]["children"] == 1

    def test_components_annotates_count(
        self, split_graph: Graph, capfd: pytest.CaptureFixture[str]
    ) -> None:
        enable_telemetry()
        connected_components(split_graph)
        spans = self._span_records(capfd.readouterr().err)
        assert spans[0]["span_name"] == "connected_components"
        assert spans[0]["components"] == 2

    def test_silent_when_disabled(
        self, abcd_graph: Graph, capfd: pytest.CaptureFixture[str]
    ) -> None:
        shortest_path(abcd_graph, "a", "d")
        assert self._span_records(capfd.readouterr().err) == []

    def test_failed_call_logs_not_ok(self, capfd: pytest.CaptureFixture[str]) -> None:
        @traced
        def explode() -> None:
            msg = "boom"
            raise RuntimeError(msg)

        enable_telemetry()
        with pytest.raises(RuntimeError):
            explode()
        spans = self._span_records(capfd.readouterr().err)
        assert spans[0]["span_name"].endswith("explode")
        assert spans[0]["ok"] is False
