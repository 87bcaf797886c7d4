# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Base entity models with common fields and validation.
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator


class MerchantScopedEntity(BaseModel):
    """Base entity with common fields for records owned by a merchant."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Use enum values instead of enum objects
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True
    )

    merchant_code: str = Field(..., min_length=1, description="Owning merchant identifier")
    created_at: datetime = Field(default_factory=datetime.utcnow, description="Creation timestamp")
    schema_version: int = Field(default=1, description="Schema version for migrations")

    @field_validator('merchant_code')
    @classmethod
    def validate_merchant_code(cls, v):
        """Validate merchant code."""
        if not v.strip():
            raise ValueError('Merchant code cannot be empty')
        return v.strip()
