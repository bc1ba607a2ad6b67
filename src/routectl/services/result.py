"""ServiceResult and ServiceError — the envelope every service call returns.

INVARIANT: Service methods never raise for bad input. Route errors are
converted into ``ServiceResult(ok=False)`` with a stable error code, so
the CLI and any embedding tool handle failures the same way.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload.

    Attributes:
        code: Stable machine-readable code (e.g. ``"INVALID_ZONE_ID"``).
        message: Human-readable message naming the offending input.
        detail: Extra context such as the collected syntax errors.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (e.g. ``"map_routes"``, ``"build_routes"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, e.g. environments skipped for lack of a domain.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
