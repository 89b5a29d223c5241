"""ServiceResult and ServiceError — the service-layer contract.

INVARIANT: All service-layer methods return ServiceResult.
A failed validation is ``ok=False`` with ``error.code`` set to the
:class:`~kennitala.domain.errors.ErrorKind` value.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from kennitala.domain.errors import KennitalaError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: KennitalaError) -> ServiceError:
        return cls(
            code=exc.kind.value,
            message=exc.message,
            detail={"identifier": _printable(exc.identifier)},
        )


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"validate"``).
        data: Operation-specific payload.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None


def _printable(value: object) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return repr(value)
