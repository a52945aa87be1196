"""
Resource API - Discord Notification Service
=============================================

What:  Posts a "new resource" message to a Discord webhook.
How:   httpx.AsyncClient POST to the execute-webhook endpoint, wrapped in a
       tenacity retry loop (exponential backoff + jitter).
Who:   Constructed by the application lifespan (app.state.notifier); the
       resources router schedules `notify_resource_created` as a background
       task after the insert commits.
When:  After the HTTP response for POST /resources has been sent.

Failure policy:
    - Transport errors, HTTP 429 and HTTP 5xx are retried up to
      notify_max_attempts times.
    - Other 4xx responses (bad token, malformed embed) fail immediately.
    - Final failures are logged at ERROR and dropped. Nothing is raised to
      the caller, so a webhook outage never changes what the client sees.
    - With no DISCORD_ID / DISCORD_TOKEN configured the notifier is disabled
      and every call is a logged no-op.

Message format:
    {
        "content": "A new resource has been added to the server: <name>!",
        "avatar_url": "<NOTIFICATION_AVATAR_URL>",
        "embeds": [{"title": "<name>!", "description": "<description>",
                    "color": 65535, "url": "<FRONTEND_URL>"}]
    }
"""

import logging
import time
from typing import Any, Dict, Optional

import httpx
from fastapi import Request
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from resource_api.config import Settings
from resource_api.exceptions import NotificationError

logger = logging.getLogger(__name__)

EMBED_COLOR = 0x00FFFF


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, NotificationError) and exc.status_code is not None:
        return exc.status_code == 429 or exc.status_code >= 500
    return False


class ResourceNotifier:
    """
    Sends resource-creation messages to a Discord webhook.

    Holds one httpx.AsyncClient for its lifetime; call `aclose()` on shutdown.
    A client can be injected (tests pass one built on httpx.MockTransport),
    in which case the caller keeps ownership of it.
    """

    def __init__(
        self,
        webhook_url: Optional[str],
        avatar_url: Optional[str] = None,
        frontend_url: Optional[str] = None,
        max_attempts: int = 3,
        min_wait: float = 1.0,
        max_wait: float = 10.0,
        jitter: float = 1.0,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.webhook_url = webhook_url
        self.avatar_url = avatar_url
        self.frontend_url = frontend_url
        self.max_attempts = max_attempts
        self.min_wait = min_wait
        self.max_wait = max_wait
        self.jitter = jitter

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResourceNotifier":
        return cls(
            webhook_url=settings.webhook_url,
            avatar_url=settings.notification_avatar_url,
            frontend_url=settings.frontend_url,
            max_attempts=settings.notify_max_attempts,
            min_wait=settings.notify_min_wait,
            max_wait=settings.notify_max_wait,
            timeout=settings.notify_timeout,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    def build_payload(self, name: Optional[str], description: Optional[str]) -> Dict[str, Any]:
        embed: Dict[str, Any] = {"title": f"{name}!", "color": EMBED_COLOR}
        if description:
            embed["description"] = description
        if self.frontend_url:
            embed["url"] = self.frontend_url

        payload: Dict[str, Any] = {
            "content": f"A new resource has been added to the server: {name}!",
            "embeds": [embed],
        }
        if self.avatar_url:
            payload["avatar_url"] = self.avatar_url
        return payload

    async def notify_resource_created(
        self, name: Optional[str], description: Optional[str]
    ) -> bool:
        """
        Deliver the message, retrying transient failures.

        Returns:
            True if Discord accepted the message, False if the notifier is
            disabled or every attempt failed. Never raises.
        """
        if not self.enabled:
            logger.debug("Webhook not configured; skipping notification for %r", name)
            return False

        payload = self.build_payload(name, description)
        start_time = time.perf_counter()
        attempts = 0

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception(_is_retryable),
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential_jitter(
                    initial=self.min_wait,
                    max=self.max_wait,
                    jitter=self.jitter,
                ),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    await self._post(payload)
        except Exception as e:
            logger.error(
                "Resource notification for %r dropped after %d attempt(s): %s",
                name,
                attempts,
                str(e) or type(e).__name__,
                exc_info=not isinstance(e, (httpx.HTTPError, NotificationError)),
            )
            return False

        logger.info(
            "Resource notification for %r delivered in %.0fms (%d attempt(s))",
            name,
            (time.perf_counter() - start_time) * 1000,
            attempts,
        )
        return True

    async def _post(self, payload: Dict[str, Any]) -> None:
        response = await self._client.post(self.webhook_url, json=payload)
        if response.status_code >= 400:
            raise NotificationError(
                message=f"Webhook returned HTTP {response.status_code}",
                status_code=response.status_code,
                context={"body": response.text[:200]},
            )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


# ── Dependency ────────────────────────────────────────────────────────────
def get_notifier(request: Request) -> ResourceNotifier:
    """FastAPI dependency returning the notifier installed on app.state."""
    return request.app.state.notifier
