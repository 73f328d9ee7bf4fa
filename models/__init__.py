"""Models package initialization"""
from .site import MonitorConfig, MonitorState, SiteConfig

__all__ = ['MonitorConfig', 'MonitorState', 'SiteConfig']
