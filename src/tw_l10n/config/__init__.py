"""Configuration for the localization sync tool."""

from .locales import LOCALE_MAP, SOURCE_LOCALE, SUPPORTED_LOCALES
from .manager import ConfigManager
from .schema import PathsConfig, SyncConfig, TransifexConfig

__all__ = [
    "LOCALE_MAP",
    "SOURCE_LOCALE",
    "SUPPORTED_LOCALES",
    "ConfigManager",
    "PathsConfig",
    "SyncConfig",
    "TransifexConfig",
]
