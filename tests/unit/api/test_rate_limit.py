"""Unit tests for rate limiting."""

import json

import pytest
from starlette.requests import Request

from core.rate_limit import limiter, rate_limit_exceeded_handler


def _request(client_host: str, actor: str | None = None) -> Request:
    headers = [(b"x-actor", actor.encode())] if actor else []
    return Request(
        {
            "type": "http",
            "method": "PUT",
            "path": "/api/v1/events/e1/groups/g1/members/m1",
            "headers": headers,
            "client": (client_host, 50000),
        }
    )


class TestLimiterKey:
    def test_actor_header_does_not_change_bucket(self) -> None:
        key = limiter._key_func

        keys = {key(_request("10.0.0.1", actor)) for actor in ("a@x.io", "b@x.io", None)}

        assert keys == {"10.0.0.1"}

    def test_different_clients_get_different_buckets(self) -> None:
        key = limiter._key_func

        assert key(_request("10.0.0.1", "a@x.io")) != key(_request("10.0.0.2", "a@x.io"))


class TestRateLimitExceededHandler:
    @pytest.mark.asyncio
    async def test_returns_429_error_body(self) -> None:
        response = await rate_limit_exceeded_handler(
            _request("10.0.0.1"), Exception("120 per 1 minute")
        )

        assert response.status_code == 429
        body = json.loads(response.body)
        assert body["error_code"] == "RATE_LIMIT_EXCEEDED"
        assert body["details"]["retry_after"] == "120 per 1 minute"
