"""Configuration helpers for environment-driven settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

if os.getenv("PYTEST_CURRENT_TEST") is None:
    load_dotenv()

DEFAULT_FOOTER = "built by peet with ❤️"


def _parse_bool(name: str, default: str) -> bool:
    value = os.getenv(name, default).strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean (true/false)")


@dataclass(slots=True)
class Settings:
    """Runtime application settings sourced from environment variables."""

    CONFIG_PATH: Path = field(init=False)
    REQUEST_TIMEOUT: float = field(init=False)
    COLD_START_NOTIFY: bool = field(init=False)
    WEBHOOK_FOOTER: str = field(init=False)
    HEADERS: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        config_path = Path(os.getenv("MONITOR_CONFIG", "config.yaml").strip())
        if not config_path.is_absolute():
            config_path = Path.cwd() / config_path
        self.CONFIG_PATH = config_path

        try:
            timeout = float(os.getenv("REQUEST_TIMEOUT", "5"))
        except ValueError as exc:
            raise ValueError("REQUEST_TIMEOUT must be a number") from exc
        if timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")
        self.REQUEST_TIMEOUT = timeout

        self.COLD_START_NOTIFY = _parse_bool("COLD_START_NOTIFY", "true")
        self.WEBHOOK_FOOTER = os.getenv("WEBHOOK_FOOTER", DEFAULT_FOOTER)

        self.HEADERS = {
            "User-Agent": (
                "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
                "AppleWebKit/537.36 (KHTML, like Gecko) "
                "Chrome/91.0.4472.124 Safari/537.36"
            )
        }


settings = Settings()
