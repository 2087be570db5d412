"""Configuration management for the feed digest fetcher."""

from .defaults import DEFAULT_SOURCES
from .loader import Config, load_config, load_sources, save_sources
from .models import ConfigModel, FetchSettings, SourceConfig

__all__ = [
    "Config",
    "ConfigModel",
    "DEFAULT_SOURCES",
    "FetchSettings",
    "SourceConfig",
    "load_config",
    "load_sources",
    "save_sources",
]
