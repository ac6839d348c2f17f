"""Core application modules."""
from .config import settings, PlatformConfig, FetchConfig

__all__ = ["settings", "PlatformConfig", "FetchConfig"]
