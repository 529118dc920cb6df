# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Enums Package.

Closed enumerations shared by the client, the logger factory and the demo:

    from evallog.enums import EnumLogLevel, EnumLogPackage

Exports:
    - EnumLogLevel: Severity levels (debug, info, warn, error, fatal)
    - EnumLogPackage: Frontend package tags (api, component, hook, ...)
    - EnumLogStack: Origin tag (frontend)
    - EnumErrorCode: Error codes carried by EvalLogError subclasses
"""

from evallog.enums.enum_error_code import EnumErrorCode
from evallog.enums.enum_log_level import EnumLogLevel
from evallog.enums.enum_log_package import EnumLogPackage, EnumLogStack

__all__ = [
    "EnumErrorCode",
    "EnumLogLevel",
    "EnumLogPackage",
    "EnumLogStack",
]
