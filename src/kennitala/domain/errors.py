"""Error taxonomy for kennitala validation.

Every failed check maps to exactly one :class:`ErrorKind`. Each kind has its
own exception class so callers can branch with ``except`` or on ``exc.kind``.

Hierarchy
---------
KennitalaError
├── InvalidCategoryError
├── InvalidLengthError
├── InvalidCenturyError
├── InvalidDateError
├── InvalidFirstDigitError
└── InvalidCheckDigitError
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Reasons a kennitala (or the requested category) is rejected."""

    INVALID_CATEGORY = "INVALID_CATEGORY"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_CENTURY = "INVALID_CENTURY"
    INVALID_FIRST_DIGIT = "INVALID_FIRST_DIGIT"
    INVALID_CHECK_DIGIT = "INVALID_CHECK_DIGIT"
    INVALID_DATE = "INVALID_DATE"


DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_CATEGORY: "invalid kennitala category",
    ErrorKind.INVALID_LENGTH: "kennitala must be exactly 10 characters",
    ErrorKind.INVALID_CENTURY: "invalid century marker in kennitala",
    ErrorKind.INVALID_FIRST_DIGIT: "first digit does not match the requested category",
    ErrorKind.INVALID_CHECK_DIGIT: "invalid check digit in kennitala",
    ErrorKind.INVALID_DATE: "invalid birthdate in kennitala",
}


class KennitalaError(ValueError):
    """Base exception for all kennitala validation failures."""

    kind: ErrorKind

    def __init__(self, identifier: object = None, message: str | None = None) -> None:
        super().__init__(message or DEFAULT_MESSAGES[self.kind])
        self.identifier = identifier
        """The value that failed validation (the category for InvalidCategory)."""

    @property
    def message(self) -> str:
        return str(self)


class InvalidCategoryError(KennitalaError):
    """Raised when the requested category is not an accepted value."""

    kind = ErrorKind.INVALID_CATEGORY


class InvalidLengthError(KennitalaError):
    """Raised when the identifier is not exactly 10 characters."""

    kind = ErrorKind.INVALID_LENGTH


class InvalidCenturyError(KennitalaError):
    """Raised when position 9 is not one of ``0``, ``8``, ``9``."""

    kind = ErrorKind.INVALID_CENTURY


class InvalidDateError(KennitalaError):
    """Raised when the encoded birthdate is not a real calendar date."""

    kind = ErrorKind.INVALID_DATE


class InvalidFirstDigitError(KennitalaError):
    """Raised when the leading digit is outside the requested category."""

    kind = ErrorKind.INVALID_FIRST_DIGIT


class InvalidCheckDigitError(KennitalaError):
    """Raised when the check digit does not match the weighted sum."""

    kind = ErrorKind.INVALID_CHECK_DIGIT


_ERRORS: dict[ErrorKind, type[KennitalaError]] = {
    cls.kind: cls
    for cls in (
        InvalidCategoryError,
        InvalidLengthError,
        InvalidCenturyError,
        InvalidDateError,
        InvalidFirstDigitError,
        InvalidCheckDigitError,
    )
}


def error_for(kind: ErrorKind) -> type[KennitalaError]:
    """Return the exception class raised for *kind*."""
    return _ERRORS[kind]
