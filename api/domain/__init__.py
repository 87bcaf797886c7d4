# SPDX-License-Identifier: Apache-2.0

"""
Domain logic package for the Merchant Hub platform.

This package contains pure business logic functions with no side effects:
national identifier decoding and employee intake.
"""
