# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import pytest
from datetime import date

# Set test environment
os.environ['ENVIRONMENT'] = 'test'
os.environ['OTEL_ENABLED'] = 'false'
os.environ['BASE_URL'] = 'https://api.example.com'


def luhn_check_digit(first_twelve: str) -> str:
    """Check digit that makes ``first_twelve`` + digit pass Luhn."""
    total = 0
    for position, char in enumerate(reversed(first_twelve)):
        digit = int(char)
        # Positions shift by one once the check digit is appended
        if position % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return str((10 - total % 10) % 10)


@pytest.fixture
def reference_date():
    """Fixed 'today' for date-sensitive decoding."""
    return date(2025, 6, 15)


@pytest.fixture
def make_id_number():
    """Build a Luhn-valid ID number from its fields."""
    def _make(birth: str = "800101", sequence: str = "5009", citizenship: str = "0", marker: str = "8") -> str:
        first_twelve = f"{birth}{sequence}{citizenship}{marker}"
        assert len(first_twelve) == 12
        return first_twelve + luhn_check_digit(first_twelve)
    return _make


@pytest.fixture
def valid_id_number():
    """Known Luhn-valid ID number: 1980-01-01, male, citizen."""
    return "8001015009087"


@pytest.fixture
def client():
    """Create test client."""
    from app import app

    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def sample_intake_payload(valid_id_number):
    """Sample employee intake request body."""
    return {
        "merchant_code": "M-1001",
        "company_name": "Roc Auto Body",
        "existing_employee_ids": ["ROC-001", "ROC-002"],
        "first_name": "Thabo",
        "last_name": "Mokoena",
        "id_number": valid_id_number,
        "role": "Panel beater",
        "phone_number": "082 555 0101",
        "email": "Thabo@Example.com",
        "address": "12 Main Road, Germiston"
    }
