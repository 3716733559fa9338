"""Timing spans for graph algorithms.

Off by default; while off, every entry point costs one ContextVar lookup.
Once enabled, ``@traced`` functions open a span, ``trace_span`` blocks nest
under it, and the outermost span is logged through structlog when it
closes. A traced function returning a ServiceResult also gets the span tree
in ``meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from tinygraph.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)

log = structlog.get_logger("tinygraph.telemetry")


@dataclass
class Span:
    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@contextmanager
def _open(name: str, parent: Span | None) -> Iterator[Span]:
    """Attach a new span under *parent* and make it current until exit."""
    span = Span(name=name, parent=parent)
    if parent is not None:
        parent.children.append(span)
    token = _current_span.set(span)
    ok = False
    try:
        yield span
        ok = True
    finally:
        span.end()
        _current_span.reset(token)
        if parent is None:
            log.debug(
                "span.complete",
                span_name=span.name,
                duration_ms=round(span.duration_ms, 2),
                ok=ok,
                children=len(span.children),
                **span.annotations,
            )


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a block as a child of the active span; yields None without one."""
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    with _open(name, parent) as span:
        yield span


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time every call to *func* as a span named after its qualname."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)
        with _open(func.__qualname__, _current_span.get()) as span:
            result = func(*args, **kwargs)
        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": span.to_dict()}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
        return result

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The active span, for annotating from inside a traced call."""
    return _current_span.get() if _enabled.get() else None
