"""Config package initialization"""
from .monitors import ConfigError, load_config, parse_config
from .settings import Settings, settings

__all__ = ["ConfigError", "Settings", "load_config", "parse_config", "settings"]
