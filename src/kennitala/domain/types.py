"""Entity categories encoded by the first digit of a kennitala.

Categories are independent flag bits so a caller can validate against
several at once, but only the three singletons and :attr:`Category.ALL`
are accepted by validation.
"""

from __future__ import annotations

from enum import Flag

from kennitala.domain.errors import InvalidCategoryError


class Category(Flag):
    """Holder of the identifier: individual, company, or system entity."""

    INDIVIDUAL = 1
    COMPANY = 2
    SYSTEM = 4
    ALL = INDIVIDUAL | COMPANY | SYSTEM

    @classmethod
    def parse(cls, value: str | Category) -> Category:
        """Look up a category by case-insensitive name (``"company"``, ``"all"``)."""
        if isinstance(value, Category):
            return check_category(value)
        try:
            return check_category(cls[value.strip().upper()])
        except (KeyError, AttributeError):
            raise InvalidCategoryError(value) from None


ACCEPTED_CATEGORIES: frozenset[Category] = frozenset(
    {Category.INDIVIDUAL, Category.COMPANY, Category.SYSTEM, Category.ALL}
)

FIRST_DIGITS: dict[Category, frozenset[str]] = {
    Category.INDIVIDUAL: frozenset("0123"),
    Category.COMPANY: frozenset("4567"),
    Category.SYSTEM: frozenset("89"),
}


def check_category(category: object) -> Category:
    """Return *category* unchanged if it is an accepted value.

    Raises :class:`InvalidCategoryError` for anything else, including
    two-flag combinations such as ``INDIVIDUAL | COMPANY``.
    """
    if not isinstance(category, Category) or category not in ACCEPTED_CATEGORIES:
        raise InvalidCategoryError(category)
    return category


def allowed_first_digits(category: Category) -> frozenset[str]:
    """Union of permitted leading digits for every flag set in *category*."""
    allowed: set[str] = set()
    for flag, digits in FIRST_DIGITS.items():
        if flag in category:
            allowed |= digits
    return frozenset(allowed)


def category_for_digit(digit: str) -> Category | None:
    """Singleton category owning leading *digit*, or None."""
    for flag, digits in FIRST_DIGITS.items():
        if digit in digits:
            return flag
    return None
