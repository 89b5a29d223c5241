"""Century and birthdate decoding.

The century marker at position 9 picks the century for the two-digit year;
the day, month and year fields must then form a real calendar date.
Company identifiers store the day of founding plus 40. System identifiers
(first digit 8 or 9) do not encode a date.
"""

from __future__ import annotations

from datetime import date

from kennitala.domain import digits
from kennitala.domain.errors import InvalidCenturyError, InvalidDateError
from kennitala.domain.types import FIRST_DIGITS, Category

CENTURIES: dict[str, int] = {
    "8": 1800,
    "9": 1900,
    "0": 2000,
}

COMPANY_DAY_OFFSET = 40


def century_of(identifier: str) -> int:
    """Return the first year of the century named by the marker."""
    try:
        return CENTURIES[identifier[digits.CENTURY]]
    except KeyError:
        raise InvalidCenturyError(identifier) from None


def decode_birthdate(identifier: str) -> date | None:
    """Decode the embedded date of a length-checked identifier.

    Returns None for system identifiers, which carry no date. Raises
    :class:`InvalidCenturyError` before any date field is looked at.
    """
    century = century_of(identifier)

    day = digits.parse_digits(identifier[digits.DAY], InvalidDateError, identifier)
    month = digits.parse_digits(identifier[digits.MONTH], InvalidDateError, identifier)
    year = digits.parse_digits(identifier[digits.YEAR], InvalidDateError, identifier)

    first = identifier[0]
    if first in FIRST_DIGITS[Category.SYSTEM]:
        return None
    if first in FIRST_DIGITS[Category.COMPANY]:
        day -= COMPANY_DAY_OFFSET

    try:
        return date(century + year, month, day)
    except ValueError:
        raise InvalidDateError(identifier) from None


def birthdate(identifier: str) -> date | None:
    """Birthdate (or founding date) encoded in *identifier*.

    Only the length, century and date checks run; use
    :func:`kennitala.validate` for a full check.
    """
    return decode_birthdate(digits.check_length(identifier))
