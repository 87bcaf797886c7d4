# SPDX-License-Identifier: Apache-2.0

"""
South African national identifier decoding.

An ID number has the layout ``YYMMDD SSSS C A Z``:

- ``YYMMDD``: date of birth
- ``SSSS``: gender sequence (females 0000-4999, males 5000-9999)
- ``C``: citizenship status (0 = citizen)
- ``A``: historically 8 or 9, not decoded
- ``Z``: Luhn check digit

All functions in this module are pure. The only ambient input is the
reference date used for century resolution and age, which callers may
inject through ``today``.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from models.enums import IdentityErrorReason, Sex


IDENTIFIER_LENGTH = 13
MALE_THRESHOLD = 5000

_SEPARATORS = re.compile(r"[\s-]")
_THIRTEEN_DIGITS = re.compile(r"^[0-9]{13}$")
_THIRTY_DAY_MONTHS = (4, 6, 9, 11)

ERROR_MESSAGES = {
    IdentityErrorReason.MALFORMED: "ID number must be 13 digits long",
    IdentityErrorReason.BAD_MONTH: "Invalid month",
    IdentityErrorReason.BAD_DAY: "Invalid day for month",
    IdentityErrorReason.CHECKSUM_FAILED: "Invalid ID number (checksum failed)",
}


@dataclass(frozen=True)
class DecodedIdentity:
    """Outcome of decoding one identifier."""
    valid: bool
    date_of_birth: Optional[date] = None
    age: Optional[int] = None
    sex: Optional[Sex] = None
    citizen: Optional[bool] = None
    error_reason: Optional[IdentityErrorReason] = None

    @classmethod
    def invalid(cls, reason: IdentityErrorReason) -> "DecodedIdentity":
        return cls(valid=False, error_reason=reason)

    @property
    def error_message(self) -> Optional[str]:
        """Human-readable message for the failure reason, if any."""
        if self.error_reason is None:
            return None
        return ERROR_MESSAGES[self.error_reason]


def normalize_identifier(identifier: str) -> str:
    """Strip whitespace and hyphen separators."""
    return _SEPARATORS.sub("", identifier)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def max_day_for_month(month: int, year: int) -> int:
    """Number of days in ``month`` of ``year`` (proleptic Gregorian)."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def resolve_century(two_digit_year: int, current_year: int) -> int:
    """
    Expand a two-digit year to a full year.

    The current century is assumed unless that would put the year after
    ``current_year``, in which case the previous century is used.
    """
    current_century = (current_year // 100) * 100
    full_year = current_century + two_digit_year
    if full_year > current_year:
        full_year -= 100
    return full_year


def luhn_is_valid(digits: str) -> bool:
    """Validate a digit string with the Luhn mod-10 algorithm."""
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def calculate_age(date_of_birth: date, today: date) -> int:
    """Completed years between ``date_of_birth`` and ``today``, never negative."""
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    # birth dates later in the current year would otherwise give -1
    return max(age, 0)


def decode(identifier: str, today: Optional[date] = None) -> DecodedIdentity:
    """
    Validate an ID number and decode the facts it carries.

    Faults are reported in a fixed order: malformed, bad month, bad day,
    checksum. Invalid input never raises; it yields an invalid result.

    Args:
        identifier: Candidate ID number, separators allowed
        today: Reference date for century resolution and age

    Returns:
        DecodedIdentity with demographics on success, reason on failure
    """
    if not isinstance(identifier, str):
        return DecodedIdentity.invalid(IdentityErrorReason.MALFORMED)

    digits = normalize_identifier(identifier)
    if not _THIRTEEN_DIGITS.match(digits):
        return DecodedIdentity.invalid(IdentityErrorReason.MALFORMED)

    year_digits = int(digits[0:2])
    month = int(digits[2:4])
    day = int(digits[4:6])
    gender_code = int(digits[6:10])
    citizenship_code = int(digits[10])

    if month < 1 or month > 12:
        return DecodedIdentity.invalid(IdentityErrorReason.BAD_MONTH)

    today = today or date.today()
    full_year = resolve_century(year_digits, today.year)

    if day < 1 or day > max_day_for_month(month, full_year):
        return DecodedIdentity.invalid(IdentityErrorReason.BAD_DAY)

    if not luhn_is_valid(digits):
        return DecodedIdentity.invalid(IdentityErrorReason.CHECKSUM_FAILED)

    date_of_birth = date(full_year, month, day)
    return DecodedIdentity(
        valid=True,
        date_of_birth=date_of_birth,
        age=calculate_age(date_of_birth, today),
        sex=Sex.MALE if gender_code >= MALE_THRESHOLD else Sex.FEMALE,
        citizen=citizenship_code == 0,
    )


def check_identifier_as_typed(
    value: str,
    today: Optional[date] = None
) -> Optional[DecodedIdentity]:
    """
    Validate a value while it is still being typed into a form.

    Returns None until the raw value reaches 13 characters so that
    partially entered numbers do not surface an error.
    """
    if not isinstance(value, str) or len(value) != IDENTIFIER_LENGTH:
        return None
    return decode(value, today)
