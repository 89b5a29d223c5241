"""Fixed-offset layout of a kennitala and strict digit parsing.

    DD MM YY SS C M
    0  2  4  6  8 9

``SS`` is the serial field, ``C`` the check digit and ``M`` the century
marker. Offsets are only safe to use after :func:`check_length`.
"""

from __future__ import annotations

from kennitala.domain.errors import InvalidLengthError, KennitalaError

LENGTH = 10

DAY = slice(0, 2)
MONTH = slice(2, 4)
YEAR = slice(4, 6)
SERIAL = slice(6, 8)
WEIGHTED = slice(0, 8)
CHECK_DIGIT = 8
CENTURY = 9

ASCII_DIGITS = frozenset("0123456789")


def check_length(identifier: str) -> str:
    """Reject anything that is not exactly :data:`LENGTH` characters."""
    if not isinstance(identifier, str) or len(identifier) != LENGTH:
        raise InvalidLengthError(identifier)
    return identifier


def parse_digits(chars: str, error: type[KennitalaError], identifier: str | None = None) -> int:
    """Parse an ASCII decimal field, raising *error* on anything else.

    ``int()`` alone would accept signs, whitespace and non-ASCII digits.
    """
    if not chars or not ASCII_DIGITS.issuperset(chars):
        raise error(identifier if identifier is not None else chars)
    return int(chars)
