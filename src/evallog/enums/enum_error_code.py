# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Error codes carried by evallog exceptions.
"""

from enum import Enum


class EnumErrorCode(str, Enum):
    """Error codes for evaluation service client errors."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    LOG_DELIVERY_FAILED = "LOG_DELIVERY_FAILED"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


__all__ = [
    "EnumErrorCode",
]
