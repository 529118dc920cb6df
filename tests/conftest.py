"""
Pytest configuration and fixtures for evallog tests.

Shared fixtures: credentials, client configuration, canned server payloads
and a factory for mock httpx responses. No test reaches the network.
"""

import json
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio

from evallog.clients import EvaluationServiceClient
from evallog.models import ModelAuthCredentials, ModelEvaluationClientConfig

# =========================================================================
# Configuration Fixtures
# =========================================================================


@pytest.fixture
def base_url() -> str:
    """Base URL that every mocked request is expected to target."""
    return "http://eval.test/evaluation-service"


@pytest.fixture
def client_config(base_url: str) -> ModelEvaluationClientConfig:
    """Client configuration pointing at the test base URL."""
    return ModelEvaluationClientConfig(base_url=base_url, timeout_seconds=5.0)


@pytest.fixture
def credentials() -> ModelAuthCredentials:
    """A complete credential set."""
    return ModelAuthCredentials(
        email="student@abc.edu",
        name="Test Student",
        roll_no="22cs1001",
        access_code="xYzAbC",
        client_id="d9cbb699-6a27-44a5-8d59-8b1befa816da",
        client_secret="tVJaaaRBSeXcRXeM",
    )


@pytest.fixture
def access_token() -> str:
    """Opaque bearer token returned by the mocked auth endpoint."""
    return "eyJhbGciOiJIUzI1NiJ9.test-payload.test-signature"


# =========================================================================
# Server Payload Fixtures
# =========================================================================


@pytest.fixture
def auth_response_data(access_token: str) -> dict[str, Any]:
    """Successful /auth response body."""
    return {
        "token_type": "Bearer",
        "access_token": access_token,
        "expires_in": 1743574344,
    }


@pytest.fixture
def log_response_data() -> dict[str, Any]:
    """Successful /logs response body."""
    return {
        "logID": "a4aad02e-19d0-4153-86c8-6a1cf3ab2d7c",
        "message": "log created successfully",
    }


# =========================================================================
# Mock Fixtures
# =========================================================================


@pytest.fixture
def make_response():
    """Factory for mock httpx responses with a status, JSON body and text."""

    def _make(
        status_code: int = 200,
        json_data: Any = None,
        text: str = "",
    ) -> MagicMock:
        response = MagicMock(spec=httpx.Response)
        response.status_code = status_code
        if json_data is None:
            response.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
        else:
            response.json.return_value = json_data
        response.text = text
        return response

    return _make


@pytest.fixture
def sink() -> MagicMock:
    """Diagnostic sink that records calls instead of logging."""
    mock_sink = MagicMock()
    mock_sink.info = MagicMock()
    mock_sink.warning = MagicMock()
    mock_sink.error = MagicMock()
    return mock_sink


@pytest_asyncio.fixture
async def client(client_config, sink):
    """Connected client with a recording sink; closed after the test."""
    instance = EvaluationServiceClient(client_config, sink=sink)
    await instance.connect()
    yield instance
    await instance.close()
