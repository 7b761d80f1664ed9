"""Configuration module for track_event.

Usage:
    from track_event.core.config import settings, SinkErrorPolicy

    if settings.SINK_ERROR_POLICY == SinkErrorPolicy.LOG:
        ...
"""

from track_event.core.config.enums import SinkErrorPolicy
from track_event.core.config.settings import Settings

__all__ = [
    "Settings",
    "SinkErrorPolicy",
    "settings",
]

# Singleton settings instance
settings = Settings()
