"""Loading of the YAML file that lists the websites to monitor."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from models import MonitorConfig, SiteConfig

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the monitor configuration cannot be used."""


def _require_str(entry: Mapping[str, Any], key: str, where: str, allow_blank: bool = False) -> str:
    if key not in entry:
        raise ConfigError(f"{where}: missing required field '{key}'")
    value = entry[key]
    if not isinstance(value, str) or not (value if allow_blank else value.strip()):
        raise ConfigError(f"{where}: '{key}' must be a non-empty string")
    return value


def _parse_site(entry: Any, index: int) -> SiteConfig:
    where = f"websites[{index}]"
    if not isinstance(entry, Mapping):
        raise ConfigError(f"{where}: expected a mapping, got {type(entry).__name__}")

    if "interval" not in entry:
        raise ConfigError(f"{where}: missing required field 'interval'")
    interval = entry["interval"]
    # bool is an int subclass; "interval: yes" is not a duration
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise ConfigError(f"{where}: 'interval' must be an integer number of milliseconds")
    if interval <= 0:
        raise ConfigError(f"{where}: 'interval' must be positive")

    return SiteConfig(
        url=_require_str(entry, "URL", where),
        name=_require_str(entry, "name", where),
        interval=interval,
        no_stock_indicator=_require_str(entry, "no_stock_indicator", where, allow_blank=True),
    )


def parse_config(raw: Any) -> MonitorConfig:
    """Validate an already-decoded document and build a MonitorConfig."""
    if not isinstance(raw, Mapping):
        raise ConfigError("Configuration must be a mapping with 'webhook' and 'websites'")

    webhook = _require_str(raw, "webhook", "config")

    if "websites" not in raw:
        raise ConfigError("config: missing required field 'websites'")
    websites = raw["websites"]
    if not isinstance(websites, list) or not websites:
        raise ConfigError("config: 'websites' must be a non-empty list")

    sites = tuple(_parse_site(entry, index) for index, entry in enumerate(websites))
    return MonitorConfig(webhook=webhook, websites=sites)


def load_config(path: Path) -> MonitorConfig:
    """Read and validate the YAML configuration file at ``path``."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Unable to open {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    config = parse_config(raw)
    logger.info("Loaded %s website(s) from %s", len(config.websites), path)
    return config
