"""Setting descriptors, catalogs and stores.

This package provides:
- Setting: an immutable, typed setting key with a default value
- SettingCatalog: a named, read-only collection of settings
- SettingsStore: per-operation override values looked up through settings
"""

from .catalog import SettingCatalog
from .descriptor import Setting
from .store import ParserConfig, SettingsStore, WriterConfig

__all__ = [
    "ParserConfig",
    "Setting",
    "SettingCatalog",
    "SettingsStore",
    "WriterConfig",
]
