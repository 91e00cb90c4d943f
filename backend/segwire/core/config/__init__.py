"""Configuration module for Segwire.

Usage:
    from segwire.core.config import settings

    configuration = settings.segment_configuration()
    if configuration is None:
        ...  # no API key, the no-op service is used
"""

from segwire.core.config.segment import SegmentConfiguration
from segwire.core.config.settings import Settings

__all__ = [
    "SegmentConfiguration",
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
