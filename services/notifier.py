"""Webhook notifications for stock transitions."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from config import settings

logger = logging.getLogger(__name__)

WEBHOOK_USERNAME = "🖥  - Monitor"
EMBED_TITLE = "Monitor triggered"
EMBED_COLOR = 1841963


class NotifyError(Exception):
    """The webhook could not be delivered."""


def build_payload(site_name: str, site_url: str, footer: Optional[str] = None) -> Dict[str, Any]:
    """Build the single-embed webhook body announcing ``site_name`` is in stock."""
    return {
        "username": WEBHOOK_USERNAME,
        "embeds": [
            {
                "title": EMBED_TITLE,
                "color": EMBED_COLOR,
                "description": f"The product is available on {site_name}",
                "url": site_url,
                "footer": {"text": footer if footer is not None else settings.WEBHOOK_FOOTER},
            }
        ],
    }


async def send_webhook(
    session: aiohttp.ClientSession,
    webhook_url: str,
    site_name: str,
    site_url: str,
) -> None:
    """POST the availability embed to ``webhook_url``.

    Raises:
        NotifyError: the request failed or the endpoint answered with an
            error status.
    """
    logger.info("Sending webhook for %s", site_name)
    payload = build_payload(site_name, site_url)
    logger.debug("Webhook payload: %s", payload)

    try:
        async with session.post(webhook_url, json=payload) as response:
            body = await response.text(errors="replace")
            if response.status >= 400:
                raise NotifyError(
                    f"Webhook answered with status {response.status}: {body[:200]}"
                )
    except asyncio.TimeoutError as exc:
        raise NotifyError("Webhook request timed out") from exc
    except aiohttp.ClientError as exc:
        raise NotifyError(f"Webhook request failed: {exc}") from exc

    logger.info("Response: %s", body)


class WebhookNotifier:
    """Deliver notifications for every site to one shared webhook."""

    def __init__(self, session: aiohttp.ClientSession, webhook_url: str) -> None:
        self.session = session
        self.webhook_url = webhook_url

    async def notify(self, site_name: str, site_url: str) -> None:
        await send_webhook(self.session, self.webhook_url, site_name, site_url)
