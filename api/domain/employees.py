# SPDX-License-Identifier: Apache-2.0

"""
Employee intake domain logic.

This module contains pure functions for preparing new employee records:
employee ID generation, deriving age and gender from the national
identifier, and roster search.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from domain.identity import decode
from models.entities import Employee
from models.enums import IdentityErrorReason
from models.requests import CreateEmployeeRequest


DEFAULT_COMPANY_NAME = "ROC"
INVALID_ID_NUMBER_MESSAGE = "Please enter a valid South African ID number"

_SEQUENCE_PATTERN = re.compile(r"[A-Z]{3}-(\d{3,})")


@dataclass
class IntakeResult:
    """Result of preparing an employee record."""
    success: bool
    employee: Optional[Employee] = None
    error_message: Optional[str] = None
    error_reason: Optional[IdentityErrorReason] = None
    validation_errors: List[str] = None

    def __post_init__(self):
        if self.validation_errors is None:
            self.validation_errors = []


def generate_employee_id(company_name: Optional[str], existing_ids: Iterable[str]) -> str:
    """
    Generate the next employee ID for a merchant.

    The prefix is the first three letters of the company name, or of
    the default company when the name has fewer than three letters; the
    sequence continues from the highest sequence already issued,
    whatever its prefix.

    Args:
        company_name: Merchant company name
        existing_ids: Employee IDs already in use

    Returns:
        Employee ID formatted as PRE-NNN
    """
    letters = [char for char in (company_name or "") if char.isascii() and char.isalpha()]
    if len(letters) < 3:
        letters = list(DEFAULT_COMPANY_NAME)
    prefix = "".join(letters[:3]).upper()

    max_sequence = 0
    for employee_id in existing_ids:
        match = _SEQUENCE_PATTERN.search(employee_id or "")
        if match:
            max_sequence = max(max_sequence, int(match.group(1)))

    return f"{prefix}-{max_sequence + 1:03d}"


def prepare_employee(
    request: CreateEmployeeRequest,
    merchant_code: str,
    company_name: Optional[str],
    existing_ids: Iterable[str],
    today: Optional[date] = None
) -> IntakeResult:
    """
    Build a new employee record from intake form details.

    Age and gender always come from the decoded ID number; the hire
    date defaults to ``today``.

    Args:
        request: Validated intake form details
        merchant_code: Owning merchant
        company_name: Company name used for the ID prefix
        existing_ids: Employee IDs already issued by the merchant
        today: Reference date for decoding and the default hire date

    Returns:
        IntakeResult with the prepared employee or the reason it was rejected
    """
    today = today or date.today()
    identity = decode(request.id_number, today)

    if not identity.valid:
        return IntakeResult(
            success=False,
            error_message=INVALID_ID_NUMBER_MESSAGE,
            error_reason=identity.error_reason,
            validation_errors=[identity.error_message]
        )

    employee = Employee(
        id=generate_employee_id(company_name, existing_ids),
        merchant_code=merchant_code,
        first_name=request.first_name,
        last_name=request.last_name,
        id_number=request.id_number,
        role=request.role,
        age=identity.age,
        gender=identity.sex,
        date_of_hire=request.date_of_hire or today,
        phone_number=request.phone_number,
        email=request.email,
        address=request.address
    )

    return IntakeResult(success=True, employee=employee)


def filter_employees(employees: List[Employee], search_term: Optional[str]) -> List[Employee]:
    """Filter employees whose full name contains the search term, ignoring case."""
    if not search_term:
        return list(employees)

    needle = search_term.lower()
    return [emp for emp in employees if needle in emp.full_name.lower()]
