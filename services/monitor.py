"""Per-site polling loops."""
from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from models import MonitorConfig, MonitorState, SiteConfig
from services.checker import is_in_stock, should_notify
from services.fetcher import PageFetcher
from services.notifier import NotifyError

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    async def notify(self, site_name: str, site_url: str) -> None:
        ...


class SiteMonitor:
    """Poll one website and notify when its stock indicator disappears."""

    def __init__(
        self,
        site: SiteConfig,
        fetcher: PageFetcher,
        notifier: Notifier,
        cold_start_notify: bool = True,
    ) -> None:
        self.site = site
        self.fetcher = fetcher
        self.notifier = notifier
        self.cold_start_notify = cold_start_notify
        self.state = MonitorState()
        self._first_check = True

    async def check_once(self) -> bool:
        """Run a single fetch/check/notify cycle.

        Returns True if a notification was attempted.
        """
        page_text = await self.fetcher.get_page_content(self.site.url)
        current = is_in_stock(page_text, self.site.no_stock_indicator)
        previous = self.state.currently_in_stock

        notify = should_notify(previous, current)
        if notify and self._first_check and not self.cold_start_notify:
            logger.info("%s is in stock on first check; notification suppressed", self.site.name)
            notify = False
        self._first_check = False

        if current:
            if not previous:
                logger.info("🚀 Is in stock on %s!", self.site.url)
            else:
                logger.debug("%s still in stock", self.site.name)
        elif previous:
            logger.info("%s is out of stock again", self.site.name)
        else:
            logger.debug("%s out of stock", self.site.name)

        try:
            if notify:
                try:
                    await self.notifier.notify(self.site.name, self.site.url)
                except NotifyError as exc:
                    logger.error("Failed to send webhook for %s: %s", self.site.name, exc)
        finally:
            self.state.currently_in_stock = current
        return notify

    async def run(self) -> None:
        """Check forever, sleeping the configured interval after every cycle."""
        logger.info("✨ Starting monitor for %s", self.site.name)
        while True:
            try:
                await self.check_once()
            except asyncio.CancelledError:
                logger.info("Monitor for %s cancelled", self.site.name)
                raise
            except Exception:
                logger.exception("Unexpected error while checking %s", self.site.url)
            await asyncio.sleep(self.site.interval_seconds)


async def run_monitors(
    config: MonitorConfig,
    fetcher: PageFetcher,
    notifier: Notifier,
    cold_start_notify: bool = True,
) -> None:
    """Start one task per configured site and wait on all of them."""
    monitors = [
        SiteMonitor(site, fetcher, notifier, cold_start_notify=cold_start_notify)
        for site in config.websites
    ]
    tasks = [
        asyncio.create_task(monitor.run(), name=f"monitor:{monitor.site.name}")
        for monitor in monitors
    ]
    try:
        await asyncio.gather(*tasks)
    finally:
        for task in tasks:
            task.cancel()
