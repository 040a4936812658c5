"""Core: configuration, exception handlers, lifespan, rate limiter."""

from podium.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
