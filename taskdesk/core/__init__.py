"""Core: config, rate limiter, and application bootstrap.

Single place for settings and app wiring helpers.
"""

from taskdesk.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
