"""Weighted modulo-11 check digit.

Positions 0-7 are multiplied by :data:`WEIGHTS` and summed. The check digit
is ``11 - sum % 11``, or 0 when the sum is divisible by 11. A remainder of 1
would need the digit 10, so no identifier with that sum is valid.
"""

from __future__ import annotations

from kennitala.domain import digits
from kennitala.domain.errors import InvalidCheckDigitError, InvalidLengthError

WEIGHTS: tuple[int, ...] = (3, 2, 7, 6, 5, 4, 3, 2)
MODULUS = 11


def weighted_sum(identifier: str) -> int:
    total = 0
    for char, weight in zip(identifier[digits.WEIGHTED], WEIGHTS, strict=True):
        total += digits.parse_digits(char, InvalidCheckDigitError, identifier) * weight
    return total


def calculate_check_digit(identifier: str) -> int:
    """Compute the check digit for the first eight digits of *identifier*.

    Raises :class:`InvalidCheckDigitError` when the digits admit no check
    digit or contain a non-digit.
    """
    if len(identifier) < len(WEIGHTS):
        raise InvalidCheckDigitError(identifier)
    remainder = weighted_sum(identifier) % MODULUS
    if remainder == 0:
        return 0
    check = MODULUS - remainder
    if check == 10:
        raise InvalidCheckDigitError(identifier)
    return check


def check_check_digit(identifier: str) -> None:
    """Compare the computed check digit with position 8."""
    expected = calculate_check_digit(identifier)
    supplied = digits.parse_digits(
        identifier[digits.CHECK_DIGIT], InvalidCheckDigitError, identifier
    )
    if supplied != expected:
        raise InvalidCheckDigitError(identifier)


def complete(prefix: str) -> str:
    """Insert the check digit into a 9-character ``DDMMYYSS`` + marker prefix.

    >>> complete("010190129")
    '0101901269'
    """
    if len(prefix) != digits.LENGTH - 1:
        raise InvalidLengthError(prefix, "prefix must be 8 digits plus a century marker")
    check = calculate_check_digit(prefix)
    return f"{prefix[digits.WEIGHTED]}{check}{prefix[-1]}"
