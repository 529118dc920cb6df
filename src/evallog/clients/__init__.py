# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""HTTP clients for the evaluation service.

Transport libraries (httpx) are imported only here. The logger factory,
session and demo receive a client via dependency injection.
"""

from __future__ import annotations

from evallog.clients.evaluation_client import (
    EvaluationServiceClient,
    authenticate,
    build_log_record,
    log_to_server,
)

__all__ = [
    "EvaluationServiceClient",
    "authenticate",
    "build_log_record",
    "log_to_server",
]
