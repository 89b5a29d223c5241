"""kennitala — validation of Icelandic national identification numbers.

The public API lives in :mod:`kennitala.domain`; configuration, logging and
the batch-friendly :class:`~kennitala.services.validate.ValidationService`
sit on top of it.
"""

from kennitala.domain.birthdate import birthdate
from kennitala.domain.checksum import calculate_check_digit, complete
from kennitala.domain.errors import (
    ErrorKind,
    InvalidCategoryError,
    InvalidCenturyError,
    InvalidCheckDigitError,
    InvalidDateError,
    InvalidFirstDigitError,
    InvalidLengthError,
    KennitalaError,
)
from kennitala.domain.types import Category
from kennitala.domain.validation import (
    category_of,
    format_kennitala,
    is_person,
    is_valid,
    normalize,
    validate,
)

__version__ = "0.1.0"

__all__: list[str] = [
    "Category",
    "ErrorKind",
    "InvalidCategoryError",
    "InvalidCenturyError",
    "InvalidCheckDigitError",
    "InvalidDateError",
    "InvalidFirstDigitError",
    "InvalidLengthError",
    "KennitalaError",
    "__version__",
    "birthdate",
    "calculate_check_digit",
    "category_of",
    "complete",
    "format_kennitala",
    "is_person",
    "is_valid",
    "normalize",
    "validate",
]
