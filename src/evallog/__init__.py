# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""evallog - logging client for the evaluation service.

Authenticates against the evaluation service for a bearer token, then posts
structured log records (stack, level, package, message) to its logs
endpoint.

Quick Start:
    >>> from evallog import EvaluationServiceClient, create_logger
    >>> async with EvaluationServiceClient() as client:  # doctest: +SKIP
    ...     token = await client.authenticate(credentials)
    ...     log = create_logger(token.access_token, client=client)
    ...     ack = await log.warn("api", "API response time exceeded 2 seconds")
    ...     ack.log_id
    'a4aad02e-19d0-4153-86c8-6a1cf3ab2d7c'
"""

from evallog.clients import (
    EvaluationServiceClient,
    authenticate,
    build_log_record,
    log_to_server,
)
from evallog.enums import EnumErrorCode, EnumLogLevel, EnumLogPackage, EnumLogStack
from evallog.errors import (
    AuthenticationError,
    ConfigurationError,
    EvalLogError,
    LogDeliveryError,
    LogValidationError,
    TransportError,
)
from evallog.logger_factory import EvaluationLogger, create_logger
from evallog.models import (
    ModelAuthCredentials,
    ModelAuthToken,
    ModelEvaluationClientConfig,
    ModelLogAcknowledgment,
    ModelLogRecord,
)
from evallog.protocols import ProtocolDiagnosticSink
from evallog.session import AuthenticatedSession
from evallog.settings import EvaluationServiceSettings

__version__ = "0.1.0"

__all__ = [
    # Client
    "AuthenticatedSession",
    "EvaluationLogger",
    "EvaluationServiceClient",
    "authenticate",
    "build_log_record",
    "create_logger",
    "log_to_server",
    # Configuration
    "EvaluationServiceSettings",
    "ModelEvaluationClientConfig",
    # Types
    "EnumErrorCode",
    "EnumLogLevel",
    "EnumLogPackage",
    "EnumLogStack",
    "ModelAuthCredentials",
    "ModelAuthToken",
    "ModelLogAcknowledgment",
    "ModelLogRecord",
    "ProtocolDiagnosticSink",
    # Exceptions
    "AuthenticationError",
    "ConfigurationError",
    "EvalLogError",
    "LogDeliveryError",
    "LogValidationError",
    "TransportError",
]
