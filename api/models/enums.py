# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Enumeration types for the Merchant Hub platform.
"""

from enum import Enum


class Sex(str, Enum):
    """Sex encoded in a national identifier."""
    MALE = "Male"
    FEMALE = "Female"


class IdentityErrorReason(str, Enum):
    """Machine-stable reasons an identifier fails validation."""
    MALFORMED = "MALFORMED"
    BAD_MONTH = "BAD_MONTH"
    BAD_DAY = "BAD_DAY"
    CHECKSUM_FAILED = "CHECKSUM_FAILED"


class IdentityCheckStatus(str, Enum):
    """State of an identifier that is still being typed."""
    PENDING = "pending"
    VALID = "valid"
    INVALID = "invalid"
