# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Models package - Pydantic schemas and data models for the Merchant Hub platform.
"""

# Base models
from .base import MerchantScopedEntity

# Enumerations
from .enums import (
    Sex,
    IdentityErrorReason,
    IdentityCheckStatus
)

# Core entities
from .entities import Employee

# Request models
from .requests import (
    DecodeIdentityRequest,
    CreateEmployeeRequest,
    EmployeeIntakeRequest
)

# Response models
from .responses import (
    HalLink,
    HalResponse,
    DecodedIdentityResponse,
    IdentityCheckResponse,
    EmployeeResponse,
    HealthCheckResponse,
    ErrorResponse,
    ValidationErrorResponse
)

__all__ = [
    # Base models
    "MerchantScopedEntity",

    # Enumerations
    "Sex",
    "IdentityErrorReason",
    "IdentityCheckStatus",

    # Core entities
    "Employee",

    # Request models
    "DecodeIdentityRequest",
    "CreateEmployeeRequest",
    "EmployeeIntakeRequest",

    # Response models
    "HalLink",
    "HalResponse",
    "DecodedIdentityResponse",
    "IdentityCheckResponse",
    "EmployeeResponse",
    "HealthCheckResponse",
    "ErrorResponse",
    "ValidationErrorResponse"
]
