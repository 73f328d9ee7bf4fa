"""Shared aiohttp session used for page fetches and webhook posts."""
from __future__ import annotations

from typing import Mapping, Optional

import aiohttp

from config import settings


def create_session(
    timeout: Optional[float] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> aiohttp.ClientSession:
    """Create the session every monitor task shares.

    Must be called from within a running event loop.
    """
    client_timeout = aiohttp.ClientTimeout(total=timeout or settings.REQUEST_TIMEOUT)
    return aiohttp.ClientSession(
        headers=dict(headers if headers is not None else settings.HEADERS),
        timeout=client_timeout,
    )
