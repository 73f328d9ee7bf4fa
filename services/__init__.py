"""Services package initialization"""
from .fetcher import FetchError, PageFetcher
from .monitor import SiteMonitor, run_monitors
from .notifier import NotifyError, WebhookNotifier

__all__ = [
    "FetchError",
    "NotifyError",
    "PageFetcher",
    "SiteMonitor",
    "WebhookNotifier",
    "run_monitors",
]
