"""Light/dark theme resolution."""

from .bootstrap import bootstrap_script
from .models import InvalidThemeError, Theme, parse_theme
from .resolver import ThemeResolver
from .signal import StaticSystemSignal, SystemSignal, signal_from_setting
from .storage import JsonFileStorage, MemoryStorage, PreferenceStorage, StorageError
from .store import ThemeStore

__all__ = [
    "InvalidThemeError",
    "JsonFileStorage",
    "MemoryStorage",
    "PreferenceStorage",
    "StaticSystemSignal",
    "StorageError",
    "SystemSignal",
    "Theme",
    "ThemeResolver",
    "ThemeStore",
    "bootstrap_script",
    "parse_theme",
    "signal_from_setting",
]
