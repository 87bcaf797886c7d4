# SPDX-License-Identifier: Apache-2.0

"""
Middleware package for request processing.

This package contains middleware components for request validation,
error formatting and CORS in the Merchant Hub platform.
"""
