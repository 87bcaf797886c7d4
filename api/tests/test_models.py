# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for Pydantic models.
"""

import pytest
from datetime import date, datetime
from pydantic import ValidationError

from models import (
    DecodeIdentityRequest, DecodedIdentityResponse, Employee, EmployeeIntakeRequest,
    HalResponse, IdentityCheckResponse, IdentityCheckStatus, IdentityErrorReason, Sex
)


class TestEmployee:
    """Test Employee entity model."""

    def employee_data(self, **overrides):
        data = {
            "id": "ROC-001",
            "merchant_code": "M-1001",
            "first_name": "Thabo",
            "last_name": "Mokoena",
            "id_number": "8001015009087",
            "age": 45,
            "gender": Sex.MALE,
            "date_of_hire": date(2024, 1, 1)
        }
        data.update(overrides)
        return data

    def test_valid_employee(self):
        """Test creating a valid employee."""
        employee = Employee(**self.employee_data())

        assert employee.id == "ROC-001"
        assert employee.gender == "Male"
        assert employee.role == ""
        assert employee.email is None
        assert employee.schema_version == 1
        assert isinstance(employee.created_at, datetime)

    @pytest.mark.parametrize("employee_id", ["roc-001", "ROC-01", "ROC001", "RO-001", ""])
    def test_invalid_employee_id(self, employee_id):
        """Test employee ID format validation."""
        with pytest.raises(ValidationError) as exc_info:
            Employee(**self.employee_data(id=employee_id))

        assert "id" in str(exc_info.value)

    def test_negative_age_rejected(self):
        with pytest.raises(ValidationError):
            Employee(**self.employee_data(age=-1))

    def test_blank_merchant_code_rejected(self):
        with pytest.raises(ValidationError):
            Employee(**self.employee_data(merchant_code="   "))

    def test_email_normalized(self):
        """Test email is lower-cased and blank email cleared."""
        assert Employee(**self.employee_data(email=" A@B.co ")).email == "a@b.co"
        assert Employee(**self.employee_data(email="  ")).email is None

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            Employee(**self.employee_data(email="not-an-email"))

    def test_assignment_validated(self):
        """Test assignments run field validation."""
        employee = Employee(**self.employee_data())

        with pytest.raises(ValidationError):
            employee.id = "bad"


class TestRequests:
    """Test request models."""

    def test_decode_request(self):
        assert DecodeIdentityRequest(id_number="800101 5009 087").id_number == "800101 5009 087"

    def test_decode_request_requires_id_number(self):
        with pytest.raises(ValidationError):
            DecodeIdentityRequest()

    def test_decode_request_rejects_oversized_input(self):
        with pytest.raises(ValidationError):
            DecodeIdentityRequest(id_number="1" * 65)

    def test_intake_request_defaults(self):
        """Test optional intake fields."""
        intake = EmployeeIntakeRequest(
            merchant_code=" M-1001 ",
            first_name="Thabo",
            last_name="Mokoena",
            id_number="8001015009087"
        )

        assert intake.merchant_code == "M-1001"
        assert intake.company_name is None
        assert intake.existing_employee_ids == []
        assert intake.date_of_hire is None

    @pytest.mark.parametrize("field", ["first_name", "last_name", "merchant_code"])
    def test_intake_request_blank_fields_rejected(self, field):
        data = {
            "merchant_code": "M-1001",
            "first_name": "Thabo",
            "last_name": "Mokoena",
            "id_number": "8001015009087",
            field: "   "
        }

        with pytest.raises(ValidationError):
            EmployeeIntakeRequest(**data)


class TestResponses:
    """Test response models."""

    def test_hal_links_alias(self):
        """Test links serialize under the HAL key."""
        response = HalResponse(_links={"self": {"href": "https://api.example.com/"}})

        dumped = response.model_dump(by_alias=True)
        assert dumped["_links"]["self"]["href"] == "https://api.example.com/"

    def test_decoded_identity_serialization(self):
        """Test enums and dates serialize as plain JSON values."""
        response = DecodedIdentityResponse(
            valid=False,
            error_reason=IdentityErrorReason.BAD_DAY,
            error_message="Invalid day for month"
        )

        dumped = response.model_dump(mode="json", exclude={"links"})
        assert dumped["error_reason"] == "BAD_DAY"
        assert dumped["date_of_birth"] is None

    def test_check_response_pending(self):
        """Test a pending check carries no decoding result."""
        response = IdentityCheckResponse(status=IdentityCheckStatus.PENDING)

        dumped = response.model_dump(mode="json", exclude={"links"})
        assert dumped["status"] == "pending"
        assert dumped["valid"] is None
