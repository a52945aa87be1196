"""
Resource API - Notification Service Unit Tests (Mocked Transport)
===================================================================

What:  ResourceNotifier against httpx.MockTransport; no network access.

What we test:
    ✅ Message payload shape (content, avatar, embed)
    ✅ Disabled notifier sends nothing
    ✅ 5xx / transport errors are retried, then dropped without raising
    ✅ Non-retryable 4xx fails after one attempt
    ❌ Real Discord delivery
"""

import json

import httpx
import pytest

from resource_api.config import Settings
from resource_api.services.notification_service import EMBED_COLOR, ResourceNotifier

WEBHOOK_URL = "https://discord.test/api/webhooks/123/abc"


def make_notifier(handler, **kwargs):
    """Notifier whose client routes every request to `handler`, with no backoff."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    options = dict(
        webhook_url=WEBHOOK_URL,
        avatar_url="https://img.test/avatar.png",
        frontend_url="https://frontend.test",
        max_attempts=3,
        min_wait=0,
        max_wait=0,
        jitter=0,
        client=client,
    )
    options.update(kwargs)
    return ResourceNotifier(**options), client


class TestPayload:

    def test_build_payload(self):
        notifier = ResourceNotifier(
            webhook_url=WEBHOOK_URL,
            avatar_url="https://img.test/avatar.png",
            frontend_url="https://frontend.test",
        )
        payload = notifier.build_payload("Async IO", "Event loops, explained")

        assert payload["content"] == "A new resource has been added to the server: Async IO!"
        assert payload["avatar_url"] == "https://img.test/avatar.png"
        assert payload["embeds"] == [
            {
                "title": "Async IO!",
                "description": "Event loops, explained",
                "color": EMBED_COLOR,
                "url": "https://frontend.test",
            }
        ]

    def test_empty_description_omitted(self):
        notifier = ResourceNotifier(webhook_url=WEBHOOK_URL)
        embed = notifier.build_payload("Name", None)["embeds"][0]
        assert "description" not in embed
        assert "url" not in embed

    def test_from_settings(self):
        settings = Settings(port=4000, discord_id="123", discord_token="abc", _env_file=None)
        notifier = ResourceNotifier.from_settings(settings)
        assert notifier.enabled is True
        assert notifier.webhook_url == "https://discord.com/api/webhooks/123/abc"
        assert notifier.max_attempts == settings.notify_max_attempts


class TestDelivery:

    @pytest.mark.asyncio
    async def test_successful_delivery(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(204)

        notifier, client = make_notifier(handler)
        async with client:
            delivered = await notifier.notify_resource_created("R", "D")

        assert delivered is True
        assert len(requests) == 1
        assert requests[0].method == "POST"
        assert str(requests[0].url) == WEBHOOK_URL
        body = json.loads(requests[0].content)
        assert body["content"] == "A new resource has been added to the server: R!"
        assert body["embeds"][0]["description"] == "D"

    @pytest.mark.asyncio
    async def test_disabled_notifier_sends_nothing(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(204)

        notifier, client = make_notifier(handler, webhook_url=None)
        async with client:
            delivered = await notifier.notify_resource_created("R", "D")

        assert notifier.enabled is False
        assert delivered is False
        assert requests == []

    @pytest.mark.asyncio
    async def test_server_error_is_retried(self):
        statuses = iter([500, 204])
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(next(statuses))

        notifier, client = make_notifier(handler)
        async with client:
            delivered = await notifier.notify_resource_created("R", "D")

        assert delivered is True
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_rate_limit_is_retried(self):
        statuses = iter([429, 429, 204])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(next(statuses))

        notifier, client = make_notifier(handler)
        async with client:
            assert await notifier.notify_resource_created("R", "D") is True

    @pytest.mark.asyncio
    async def test_client_error_not_retried(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(401, json={"message": "Invalid Webhook Token"})

        notifier, client = make_notifier(handler)
        async with client:
            delivered = await notifier.notify_resource_created("R", "D")

        assert delivered is False
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_transport_errors_exhaust_attempts_without_raising(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        notifier, client = make_notifier(handler, max_attempts=4)
        async with client:
            delivered = await notifier.notify_resource_created("R", "D")

        assert delivered is False
        assert len(calls) == 4


class TestLifecycle:

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self):
        notifier, client = make_notifier(lambda request: httpx.Response(204))
        await notifier.aclose()
        assert client.is_closed is False
        await client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self):
        notifier = ResourceNotifier(webhook_url=WEBHOOK_URL)
        await notifier.aclose()
        assert notifier._client.is_closed is True
