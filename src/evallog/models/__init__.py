# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Pydantic models for the evaluation service wire format and the demo."""

from evallog.models.model_auth_credentials import ModelAuthCredentials
from evallog.models.model_auth_token import ModelAuthToken
from evallog.models.model_client_config import (
    DEFAULT_BASE_URL,
    ModelEvaluationClientConfig,
)
from evallog.models.model_log_entry import ModelDemoNotice, ModelLogEntry
from evallog.models.model_log_record import ModelLogAcknowledgment, ModelLogRecord

__all__ = [
    "DEFAULT_BASE_URL",
    "ModelAuthCredentials",
    "ModelAuthToken",
    "ModelDemoNotice",
    "ModelEvaluationClientConfig",
    "ModelLogAcknowledgment",
    "ModelLogEntry",
    "ModelLogRecord",
]
