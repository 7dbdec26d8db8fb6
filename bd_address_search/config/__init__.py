"""Configuration management for bd_address_search."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
