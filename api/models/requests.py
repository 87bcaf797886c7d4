# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Request models for API endpoints.
"""

import re
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class DecodeIdentityRequest(BaseModel):
    """Request model for decoding a national identifier."""

    id_number: str = Field(..., max_length=64, description="ID number, spaces and hyphens allowed")


class CreateEmployeeRequest(BaseModel):
    """Employee details as captured by the intake form."""

    first_name: str = Field(..., min_length=1, max_length=100, description="First name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Last name")
    id_number: str = Field(..., max_length=64, description="National identifier")
    role: str = Field(default="", max_length=100, description="Job role")
    date_of_hire: Optional[date] = Field(None, description="Hire date, defaults to today")
    phone_number: str = Field(default="", max_length=30, description="Contact number")
    email: Optional[str] = Field(None, description="Email address")
    address: str = Field(default="", max_length=500, description="Residential address")

    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_name(cls, v):
        """Validate name fields."""
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        """Validate email format."""
        if v is None or not v.strip():
            return None
        email_pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
        if not re.match(email_pattern, v.strip().lower()):
            raise ValueError('Invalid email format')
        return v.strip().lower()


class EmployeeIntakeRequest(CreateEmployeeRequest):
    """Request model for preparing a new employee record."""

    merchant_code: str = Field(..., min_length=1, description="Owning merchant identifier")
    company_name: Optional[str] = Field(None, max_length=200, description="Company name used for the ID prefix")
    existing_employee_ids: List[str] = Field(
        default_factory=list,
        description="Employee IDs already issued by the merchant"
    )

    @field_validator('merchant_code')
    @classmethod
    def validate_merchant_code(cls, v):
        """Validate merchant code."""
        if not v.strip():
            raise ValueError('Merchant code cannot be empty')
        return v.strip()
