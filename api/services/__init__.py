# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Services package - response formatting and operational services.
"""

from .hal import HalFormatter, create_hal_formatter
from .health import HealthCheckService

__all__ = [
    "HalFormatter",
    "create_hal_formatter",
    "HealthCheckService"
]
