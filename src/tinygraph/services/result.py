"""ServiceResult and ServiceError — the result contract for fallible operations.

INVARIANT: Graph mutations report failure through ServiceResult, never by
raising. A failed result always carries an error code and message, and the
graph is left exactly as it was before the call.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

DUPLICATE_NODE = "DUPLICATE_NODE"
DUPLICATE_LINK = "DUPLICATE_LINK"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for graph mutations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"insert_link"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    def __bool__(self) -> bool:
        return self.ok
