"""
Integration tests: full authenticate -> log flows over httpx.MockTransport.

The mock service validates the bearer header the way the real endpoint
does, so these tests exercise the client, the logger factory and the
session together without network access.
"""

import json

import httpx
import pytest

from evallog import (
    AuthenticatedSession,
    EvaluationServiceClient,
    LogDeliveryError,
    authenticate,
    create_logger,
    log_to_server,
)

pytestmark = pytest.mark.integration


class FakeEvaluationService:
    """In-memory stand-in for the evaluation service endpoints."""

    def __init__(self, expire_first_token: bool = False) -> None:
        self.issued = 0
        self.expired: set[str] = set()
        self.received: list[dict] = []
        self.auth_bodies: list[dict] = []
        self._expire_first = expire_first_token

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/auth"):
            self.auth_bodies.append(json.loads(request.content))
            self.issued += 1
            token = f"token-{self.issued}"
            if self._expire_first and self.issued == 1:
                self.expired.add(token)
            return httpx.Response(
                200,
                json={"token_type": "Bearer", "access_token": token, "expires_in": 300},
            )

        header = request.headers.get("Authorization", "")
        token = header.removeprefix("Bearer ")
        if not token.startswith("token-") or token in self.expired:
            return httpx.Response(401, text="invalid or expired token")

        body = json.loads(request.content)
        self.received.append(body)
        return httpx.Response(
            200,
            json={"logID": f"log-{len(self.received)}", "message": "log created"},
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.mark.asyncio
async def test_module_functions_round_trip(client_config, credentials):
    service = FakeEvaluationService()
    async with EvaluationServiceClient(
        client_config, transport=service.transport()
    ) as client:
        token = await authenticate(credentials, client=client)
        ack = await log_to_server(
            token.access_token, "INFO", "Component", " rendered ", client=client
        )

    assert service.auth_bodies[0]["rollNo"] == "22cs1001"
    assert ack.log_id == "log-1"
    assert service.received == [
        {
            "stack": "frontend",
            "level": "info",
            "package": "component",
            "message": "rendered",
        }
    ]


@pytest.mark.asyncio
async def test_logger_factory_over_transport(client_config, credentials):
    service = FakeEvaluationService()
    async with EvaluationServiceClient(
        client_config, transport=service.transport()
    ) as client:
        token = await client.authenticate(credentials)
        log = create_logger(token.access_token, client=client)
        await log.debug("utils", "a")
        await log.info("component", "b")
        await log.warn("api", "c")
        await log.error("auth", "d")
        await log.fatal("page", "e")

    assert [r["level"] for r in service.received] == [
        "debug",
        "info",
        "warn",
        "error",
        "fatal",
    ]


@pytest.mark.asyncio
async def test_expired_token_surfaces_without_reauth(client_config, credentials):
    service = FakeEvaluationService(expire_first_token=True)
    async with EvaluationServiceClient(
        client_config, transport=service.transport()
    ) as client:
        session = AuthenticatedSession(client, credentials)
        with pytest.raises(LogDeliveryError) as exc_info:
            await session.send_log("warn", "api", "slow")

    assert exc_info.value.status_code == 401
    assert exc_info.value.response_text == "invalid or expired token"
    assert service.issued == 1


@pytest.mark.asyncio
async def test_expired_token_recovered_with_reauth(client_config, credentials):
    service = FakeEvaluationService(expire_first_token=True)
    async with EvaluationServiceClient(
        client_config, transport=service.transport()
    ) as client:
        session = AuthenticatedSession(
            client, credentials, reauthenticate_on_unauthorized=True
        )
        ack = await session.send_log("warn", "api", "slow")

    assert ack.log_id == "log-1"
    assert service.issued == 2
    assert session.token.access_token == "token-2"
