"""Pytest configuration and fixtures."""
from __future__ import annotations

from pathlib import Path

import pytest

from config import settings
from models import SiteConfig


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch) -> None:
    """Set up test environment variables"""
    monkeypatch.setenv('MONITOR_CONFIG', 'config.yaml')
    monkeypatch.setenv('REQUEST_TIMEOUT', '5')
    monkeypatch.setenv('COLD_START_NOTIFY', 'true')
    monkeypatch.delenv('WEBHOOK_FOOTER', raising=False)
    settings.reload()


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(
        url="https://shop.example.com/product/1",
        name="Example Shop",
        interval=1000,
        no_stock_indicator="Out of stock",
    )


@pytest.fixture
def valid_config_yaml() -> str:
    """Config file with two sites on different intervals"""
    return """
webhook: https://discord.com/api/webhooks/123/abc
websites:
  - URL: https://shop.example.com/product/1
    name: Example Shop
    interval: 1000
    no_stock_indicator: Out of stock
  - URL: https://other.example.com/item
    name: Other Store
    interval: 5000
    no_stock_indicator: "<span class=\\"sold-out\\">"
"""


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(content: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
