"""Typed, defaulted settings for RDF writers and parsers."""

__version__ = "0.1.0"

from .errors import (
    DuplicateKeyError,
    SettingsError,
    SettingsFileError,
    TypeMismatchError,
    UnknownSettingError,
)
from .settings import ParserConfig, Setting, SettingCatalog, SettingsStore, WriterConfig
from .writer import BASIC_WRITER_SETTINGS

__all__ = [
    "BASIC_WRITER_SETTINGS",
    "DuplicateKeyError",
    "ParserConfig",
    "Setting",
    "SettingCatalog",
    "SettingsError",
    "SettingsFileError",
    "SettingsStore",
    "TypeMismatchError",
    "UnknownSettingError",
    "WriterConfig",
]
