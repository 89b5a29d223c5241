"""Validation pipeline for a kennitala.

Checks run in a fixed order and the first failure wins:

1. category argument
2. length
3. century marker and birthdate
4. first digit against the requested category
5. check digit

Every function here is pure and safe to call from any thread.
"""

from __future__ import annotations

from kennitala.domain import digits
from kennitala.domain.birthdate import decode_birthdate
from kennitala.domain.checksum import check_check_digit
from kennitala.domain.errors import InvalidFirstDigitError, KennitalaError
from kennitala.domain.types import (
    Category,
    allowed_first_digits,
    category_for_digit,
    check_category,
)

SEPARATORS = ("-", " ")


def check_first_digit(identifier: str, category: Category) -> None:
    if identifier[0] not in allowed_first_digits(category):
        raise InvalidFirstDigitError(identifier)


def validate(identifier: str, category: Category = Category.ALL) -> None:
    """Validate *identifier* against *category*.

    Returns None on success; raises the :class:`KennitalaError` subclass of
    the first failing check otherwise.
    """
    check_category(category)
    digits.check_length(identifier)
    decode_birthdate(identifier)
    check_first_digit(identifier, category)
    check_check_digit(identifier)


def is_person(identifier: str) -> None:
    """Validate *identifier* as belonging to an individual."""
    validate(identifier, Category.INDIVIDUAL)


def is_valid(identifier: str, category: Category = Category.ALL) -> bool:
    """Boolean form of :func:`validate`.

    An invalid *category* still raises, since that is a caller error.
    """
    check_category(category)
    try:
        validate(identifier, category)
    except KennitalaError:
        return False
    return True


def category_of(identifier: str) -> Category:
    """Category of a valid *identifier*."""
    validate(identifier, Category.ALL)
    category = category_for_digit(identifier[0])
    assert category is not None  # first-digit check passed
    return category


def normalize(value: str) -> str:
    """Strip whitespace and the ``DDMMYY-NNNN`` separator.

    Input of any other shape is returned stripped but otherwise untouched so
    :func:`validate` reports the real problem.
    """
    text = value.strip()
    if len(text) == digits.LENGTH + 1 and text[6] in SEPARATORS:
        return text[:6] + text[7:]
    return text


def format_kennitala(identifier: str) -> str:
    """Render *identifier* in the conventional ``DDMMYY-NNNN`` form."""
    digits.check_length(identifier)
    return f"{identifier[:6]}-{identifier[6:]}"
