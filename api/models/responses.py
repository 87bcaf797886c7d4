# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Response models for API endpoints with HAL support.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, ConfigDict
from datetime import date, datetime

from .enums import IdentityCheckStatus, IdentityErrorReason, Sex


class HalLink(BaseModel):
    """HAL link representation."""

    href: str = Field(..., description="Link URL")
    method: Optional[str] = Field(None, description="HTTP method")
    type: Optional[str] = Field(None, description="Content type")
    title: Optional[str] = Field(None, description="Link title")
    templated: Optional[bool] = Field(None, description="Whether URL is templated")


class HalResponse(BaseModel):
    """Base HAL response with links."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    links: Dict[str, HalLink] = Field(default_factory=dict, alias="_links", description="HAL links")


class DecodedIdentityResponse(HalResponse):
    """Decoded national identifier."""

    valid: bool = Field(..., description="Whether the identifier passed every check")
    date_of_birth: Optional[date] = Field(None, description="Decoded date of birth")
    age: Optional[int] = Field(None, description="Age on the day of decoding")
    sex: Optional[Sex] = Field(None, description="Decoded sex")
    citizen: Optional[bool] = Field(None, description="Whether the holder is a citizen")
    error_reason: Optional[IdentityErrorReason] = Field(None, description="Failure reason code")
    error_message: Optional[str] = Field(None, description="Human-readable failure reason")


class IdentityCheckResponse(DecodedIdentityResponse):
    """Identifier checked while it is still being typed."""

    status: IdentityCheckStatus = Field(..., description="pending, valid or invalid")
    valid: Optional[bool] = Field(None, description="Absent while pending")


class EmployeeResponse(HalResponse):
    """Prepared employee record."""

    id: str = Field(..., description="Employee ID")
    merchant_code: str = Field(..., description="Owning merchant")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    id_number: str = Field(..., description="National identifier")
    role: str = Field(..., description="Job role")
    age: int = Field(..., description="Age derived from the ID number")
    gender: Sex = Field(..., description="Gender derived from the ID number")
    date_of_hire: date = Field(..., description="Hire date")
    phone_number: str = Field(..., description="Contact number")
    email: Optional[str] = Field(None, description="Email address")
    address: str = Field(..., description="Residential address")
    created_at: datetime = Field(..., description="Creation timestamp")


class HealthCheckResponse(HalResponse):
    """Health check response model."""

    status: str = Field(..., description="Overall health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    timestamp: str = Field(..., description="Check timestamp")
    system_metrics: Dict[str, Any] = Field(default_factory=dict, description="Host metrics")


class ErrorResponse(BaseModel):
    """Error response model following RFC 7807."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Error detail")
    instance: str = Field(..., description="Request instance")
    errors: Optional[List[Dict[str, Any]]] = Field(None, description="Validation errors")
    links: Optional[Dict[str, HalLink]] = Field(None, alias="_links", description="HAL links")


class ValidationErrorResponse(ErrorResponse):
    """Validation error response with field details."""

    errors: List[Dict[str, Any]] = Field(..., description="Field validation errors")
