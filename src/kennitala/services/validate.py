"""ValidationService — kennitala validation for forms and import pipelines.

Wraps the pure domain checks, applies configured defaults, and turns
domain exceptions into :class:`ServiceResult` values.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from kennitala.config.settings import KennitalaSettings
from kennitala.domain.birthdate import decode_birthdate
from kennitala.domain.errors import KennitalaError
from kennitala.domain.types import Category, category_for_digit, check_category
from kennitala.domain.validation import normalize, validate
from kennitala.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class ValidationService:
    """Validate single identifiers or batches of them.

    Usage::

        service = ValidationService()
        result = service.validate("0101901269")
        if not result.ok:
            print(result.error.code)
    """

    def __init__(self, settings: KennitalaSettings | None = None) -> None:
        self._settings = settings or KennitalaSettings()

    @property
    def settings(self) -> KennitalaSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, identifier: str, category: Category | None = None) -> ServiceResult:
        """Validate one identifier against *category* (or the configured default)."""
        return self._run("validate", identifier, category)

    def is_person(self, identifier: str) -> ServiceResult:
        """Validate one identifier as belonging to an individual."""
        return self._run("is_person", identifier, Category.INDIVIDUAL)

    def validate_many(
        self,
        identifiers: Iterable[str],
        category: Category | None = None,
    ) -> ServiceResult:
        """Validate every identifier; one bad row never stops the batch."""
        try:
            category = self._resolve_category(category)
        except KennitalaError as exc:
            return ServiceResult(
                ok=False, op="validate_many", error=ServiceError.from_exception(exc)
            )

        valid: list[str] = []
        invalid: list[dict[str, Any]] = []
        for raw in identifiers:
            identifier = self._prepare(raw)
            try:
                validate(identifier, category)
            except KennitalaError as exc:
                logger.debug("Rejected kennitala in validate_many: %s", exc.kind.value)
                invalid.append(
                    {"identifier": raw, "code": exc.kind.value, "message": exc.message}
                )
            else:
                valid.append(identifier)

        total = len(valid) + len(invalid)
        warnings: list[str] = []
        if invalid:
            warnings.append(f"{len(invalid)} of {total} identifiers are invalid")
        logger.debug(
            "Validated %d identifiers (%d invalid) against %s",
            total,
            len(invalid),
            category.name,
        )
        return ServiceResult(
            ok=not invalid,
            op="validate_many",
            data={"valid": valid, "invalid": invalid, "total": total},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve_category(self, category: Category | None) -> Category:
        if category is None:
            return self._settings.validation.category
        return check_category(category)

    def _prepare(self, identifier: str) -> str:
        if self._settings.validation.accept_separator and isinstance(identifier, str):
            return normalize(identifier)
        return identifier

    def _run(self, op: str, raw: str, category: Category | None) -> ServiceResult:
        identifier = self._prepare(raw)
        try:
            resolved = self._resolve_category(category)
            validate(identifier, resolved)
        except KennitalaError as exc:
            logger.debug("Rejected kennitala in %s: %s", op, exc.kind.value)
            return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))

        born = decode_birthdate(identifier)
        holder = category_for_digit(identifier[0])
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "identifier": identifier,
                "category": holder.name.lower() if holder else None,
                "birthdate": born.isoformat() if born else None,
            },
        )
