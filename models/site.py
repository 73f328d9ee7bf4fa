"""Data models for monitored sites."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """A single website to poll, loaded once at startup."""

    url: str
    name: str
    interval: int
    no_stock_indicator: str

    @property
    def interval_seconds(self) -> float:
        return self.interval / 1000

    def __str__(self) -> str:
        return (
            f"URL: {self.url},\n"
            f"Name: {self.name},\n"
            f"Update interval (ms): {self.interval},\n"
            f"Out of stock text: {self.no_stock_indicator}"
        )


@dataclass(frozen=True, slots=True)
class MonitorConfig:
    """Parsed configuration file: the shared webhook and the sites to watch."""

    webhook: str
    websites: tuple[SiteConfig, ...]


@dataclass(slots=True)
class MonitorState:
    """Last observed stock state of one site, owned by its monitor."""

    currently_in_stock: bool = False
