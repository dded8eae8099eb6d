"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any future transport consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from linecmd.domain.types import ParseError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def parse_failure(op: str, error: ParseError, **detail: Any) -> ServiceResult:
    """Build a failed ServiceResult from a parser error value.

    The error code is the ParseError member name so JSON consumers can
    branch on it without matching message text.
    """
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=error.name, message=error.description, detail=detail),
    )
