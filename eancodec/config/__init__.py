"""
Configuration management for the EAN-13 codec.
"""

from eancodec.config.logging import configure_logging
from eancodec.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
