# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Core entity models for the Merchant Hub platform.
"""

import re
from datetime import date
from typing import Optional
from pydantic import Field, field_validator
from .base import MerchantScopedEntity
from .enums import Sex


EMPLOYEE_ID_PATTERN = r'^[A-Z]{3}-\d{3,}$'


class Employee(MerchantScopedEntity):
    """Employee record prepared for the merchant's document store."""

    id: str = Field(..., description="Employee identifier, e.g. ROC-001")
    first_name: str = Field(..., min_length=1, max_length=100, description="First name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Last name")
    id_number: str = Field(..., description="National identifier as entered")
    role: str = Field(default="", max_length=100, description="Job role")
    age: int = Field(..., ge=0, description="Age derived from the ID number")
    gender: Sex = Field(..., description="Gender derived from the ID number")
    date_of_hire: date = Field(..., description="Date the employee was hired")
    phone_number: str = Field(default="", max_length=30, description="Contact number")
    email: Optional[str] = Field(None, description="Email address")
    address: str = Field(default="", max_length=500, description="Residential address")

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        """Validate employee identifier format."""
        if not re.match(EMPLOYEE_ID_PATTERN, v):
            raise ValueError('Employee ID must look like ABC-001')
        return v

    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_name(cls, v):
        """Validate employee names."""
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

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
