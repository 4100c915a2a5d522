"""
Configuration management for the NAVS13 toolkit.
"""

from navs13.config.logs import configure_logging
from navs13.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
